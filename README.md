# algokit

A small collection of classic in-memory data structures, plus two command-line tools:
a T9 contact search and a single-linkage clustering tool.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Data structures

### `algokit.linked_list.SinglyLinkedList`

This is a singly linked list of integers. It has at most one *active* element.

- Building the list: `insert_first(data)`. With an active element, `insert_after(data)` and `delete_after()`.
- Moving the active element: `first()` and `next()`. When `next()` moves past the last element, the list becomes inactive.
- Reading and writing values: `get_first()`, `get_value()` and `set_value(data)`.
- Housekeeping: `delete_first()`, `dispose()` and `is_active()`.
- The list supports `len()` and iteration.

`get_first()` on an empty list raises `ListError`, and so does `get_value()` on an inactive list.
Operations that need an active element do nothing when the list is inactive.

### `algokit.doubly_linked_list.DoublyLinkedList`

This is the doubly linked counterpart of `SinglyLinkedList`. It adds `insert_last`, `last`, `get_last`,
`delete_last`, `previous`, `insert_before` and `delete_before`. It supports `reversed()`.
Errors raise `DLListError`.

### `algokit.char_queue.CharQueue`

`CharQueue(size)` is a circular queue of single characters. It is built on an array of `size` slots and
always keeps one slot unused, so it holds at most `size - 1` characters.

- Operations: `enqueue(ch)`, `dequeue()`, `front()`, `remove()`, `is_empty()`, `is_full()` and `next_index(i)`.
- Read-only views: `size`, `array`, `first_index` and `free_index`.

The queue raises `QueueError` with a `kind` from `QueueErrorKind` in these cases:

- enqueueing into a full queue (`ENQUEUE`);
- reading from an empty queue (`FRONT`, `REMOVE`, `DEQUEUE`);
- creating a queue with a size below 1 (`INIT`).

`enqueue` raises `ValueError` for anything other than a single character.

### `algokit.hashtable.HashTable`

`HashTable(size)` maps string keys to floats. Keys that collide are chained in their bucket, and a new key
goes at the front of its chain. The bucket index comes from `get_hash(key, size)`, which adds one to the sum
of the character codes and takes the result modulo `size`.

- `insert(key, value)` replaces the value of a key that already exists.
- `get(key)` returns the value, or `None` if the key is absent.
- `search(key)` returns the stored item, or `None`.
- `delete(key)` and `delete_all()` remove items.
- The table supports `in`, `len()` and iteration over `(key, value)` pairs.

```python
from algokit.hashtable import HashTable

table = HashTable(101)
table.insert("apple", 1.5)
print(table.get("apple"))   # 1.5
table.delete("apple")
print(table.get("apple"))   # None
```

### `algokit.bst_recursive.RecursiveBST` and `algokit.bst_iterative.IterativeBST`

These are two binary search trees with the same interface. One is written with recursion, the other with
loops and explicit stacks. Keys can be any comparable values.

- `search(key)` returns the stored value, or `None`.
- `insert(key, value)` replaces the value of an existing key.
- `delete(key)` removes a key. A node with two subtrees is replaced by the rightmost node of its left subtree.
- `dispose()` empties the tree.
- `preorder()`, `inorder()` and `postorder()` return lists of `(key, value)` pairs.
- Both trees support `in`, `len()` and a `root` property. The nodes are `algokit.bst_recursive.Node`.

### `algokit.letter_count.letter_count(text)`

This function returns a `RecursiveBST` of occurrence counts:

- the letters `a`–`z`, counted without regard to case under their lower-case form;
- spaces, under `' '`;
- every other character, under `'_'`.

## Command-line tools

### t9search

This tool reads contacts from standard input. Each contact is a name line followed by a number line.
Blank lines are skipped, and lines are cut to 100 characters.

Every contact is turned into keypad digits:

- letters become the digit of their key;
- `+` becomes `0`;
- digits stay as they are;
- anything else becomes a space.

The tool prints, as `name, number`, each contact whose digits contain the query:

    t9search 686 < contacts.txt

With no argument, it prints every contact. If nothing matches, it prints `Not found`. The query may hold
only digits and spaces. A bad query, or more than one argument, exits with status 1.

The same steps are available in Python: `to_digits`, `read_contacts`, `search` and the `Contact` dataclass.

### cluster

This tool reads objects from a file and prints them grouped into clusters. It repeatedly merges the two
nearest clusters, using single linkage, until the requested number remains. The default is 1.

    cluster objects.txt 3

The file begins with `count=N`, followed by `N` objects written as `ID X Y`. Object ids must be unique.

Exit statuses:

| Status | Meaning |
| --- | --- |
| 1 | missing arguments |
| 2 | too many arguments |
| 3 | the second argument is not a positive integer |
| 4 | the file cannot be opened or parsed |
| 5 | more clusters are requested than there are objects |

In Python, the same steps are `load_clusters`, `cluster_objects` and `format_clusters`, together with
`Obj`, `Cluster`, `obj_distance`, `cluster_distance` and `find_neighbours`. Loading errors raise `ClusterError`.

## What it does not do

All the data structures live in memory only. None of them can be saved to or loaded from disk.