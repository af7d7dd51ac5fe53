# dsakit

Small, readable implementations of classic data structures and algorithms,
written in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.basics` | Growth-rate examples (`linear_items`, `two_linear_passes`, `quadratic_then_linear`), a call-stack demo (`func_one`, `func_two`, `func_three`), `factorial`, `item_in_common_nested`, `item_in_common` |
| `dsakit.sorting` | In-place `bubble_sort`, `selection_sort`, `insertion_sort`, `merge`, `merge_sort`, `pivot`, `quick_sort` |
| `dsakit.linked_list` | `Node`, `LinkedList` |
| `dsakit.doubly_linked_list` | `DoublyNode`, `DoublyLinkedList` |
| `dsakit.hash_table` | `HashTable`, a fixed-size table with separate chaining |
| `dsakit.graph` | `Graph`, an undirected adjacency-list graph |
| `dsakit.bst` | `TreeNode`, `BinarySearchTree` with BFS and DFS traversals |

## Examples

### Basics

```python
from dsakit.basics import factorial, func_one, item_in_common, linear_items

print(list(linear_items(3)))        # ['0', '1', '2']
print(func_one())                   # ['Three', 'Two', 'One']
print(factorial(4))                 # 24
print(item_in_common([1, 3, 5], [2, 4, 6]))  # False
```

`factorial` raises `ValueError` for arguments below 1.

### Linked lists

A list is created with one initial value. `get` and `set` raise `IndexError`
for an index out of range, `insert` accepts an index up to the length, and
`delete_first`, `delete_last` and `delete_node` return the removed node, or
`None` when there is nothing to remove.

```python
from dsakit.linked_list import LinkedList

ll = LinkedList(1)
ll.append(3)
ll.insert(1, 2)
ll.reverse()
print(list(ll))      # [3, 2, 1]
print(len(ll))       # 3
print(ll.describe()) # Head: 3 / Tail: 1 / Length: 3, one per line
```

Doubly linked lists walk from whichever end is nearer and can be iterated in
both directions:

```python
from dsakit.doubly_linked_list import DoublyLinkedList

dll = DoublyLinkedList(0)
for value in (1, 2, 3):
    dll.append(value)
dll.set(2, 99)
print(list(dll))            # [0, 1, 99, 3]
print(list(reversed(dll)))  # [3, 99, 1, 0]
```

### Hash table

Keys are strings; the default size is 7 buckets. `set` always adds a new
entry to the end of the key's bucket, and `get` returns the first matching
entry's value, or the given default.

```python
from dsakit.hash_table import HashTable

table = HashTable(7)
table.set("nails", 100)
table.set("lumber", 80)
print(table.get("lumber"))     # 80
print(table.get("bolts", -1))  # -1
print(table.keys())
print(table.format_table())
```

### Graph

```python
from dsakit.graph import Graph

g = Graph()
for v in "ABC":
    g.add_vertex(v)
g.add_edge("A", "B")
g.add_edge("A", "C")
g.remove_vertex("C")
print(g.neighbours("A"))  # frozenset({'B'})
print("C" in g)           # False
print(g.format_graph())
```

The mutating methods return `False` when a vertex they need is missing.

### Binary search tree

Duplicate values are rejected (`insert` returns `False`).

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree()
for v in (47, 21, 76, 18, 27, 52, 82):
    tree.insert(v)
print(tree.contains(27))       # True
print(tree.bfs())              # [47, 21, 76, 18, 27, 52, 82]
print(tree.dfs_pre_order())    # [47, 21, 18, 27, 76, 52, 82]
print(tree.dfs_post_order())   # [18, 27, 21, 52, 82, 76, 47]
print(tree.dfs_in_order())     # [18, 21, 27, 47, 52, 76, 82]
```

### Sorting

All sorts work in place on a list. `merge_sort` and `quick_sort` sort the
whole list when no bounds are given.

```python
from dsakit.sorting import pivot, quick_sort

data = [4, 6, 1, 7, 3, 2, 5]
quick_sort(data)
print(data)  # [1, 2, 3, 4, 5, 6, 7]
```

## What it does not do

dsakit is a library only: it installs no command-line tool, and its
structures live in memory with no way to save or load them.