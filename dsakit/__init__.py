"""Classic data structures and algorithms: lists, hash table, graph, tree and sorts."""

__version__ = "0.1.0"

__all__ = [
    "basics",
    "sorting",
    "linked_list",
    "doubly_linked_list",
    "hash_table",
    "graph",
    "bst",
]