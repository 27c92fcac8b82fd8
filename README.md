# estruturas

A small collection of classic data structures and algorithms written in
plain Python, with no dependencies beyond the standard library. Each module
covers one topic, and most come with a small command that shows them at work.

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

| Module                     | Contents                                                                                   |
|----------------------------|--------------------------------------------------------------------------------------------|
| `estruturas.search`        | `linear_search`, `binary_search`, `binary_search_recursive`                                |
| `estruturas.matrix`        | `copy_matrix`, `flatten`, `transpose`, `transpose_flat`, `format_matrix`, `format_flat`    |
| `estruturas.linked_list`   | `LinkedList`, `CircularList`, `DoublyLinkedList`                                           |
| `estruturas.figures`       | `Circle`, `Rectangle`, `Triangle`, `FigureList`, `figure_kind`, `format_figures`           |
| `estruturas.stack`         | `Stack` (last in, first out)                                                               |
| `estruturas.expressions`   | `is_balanced`, `opening_for`, `symbol_kind`: bracket checking with a stack                 |
| `estruturas.fifo`          | `Queue` (first in, first out)                                                              |
| `estruturas.rectangles`    | `Rectangle` with `area()`, `format_rectangles`                                             |
| `estruturas.bank`          | `BankQueue`, `RoundResult`: a ticket queue driven by operation strings                     |
| `estruturas.trees`         | `Node`, `height`, `contains`, `format_preorder`, `format_inorder`, `SearchTree`            |
| `estruturas.nary_tree`     | `TreeNode`: a tree with any number of children                                             |
| `estruturas.heap`          | `MinHeap`: a priority queue built on `heapq`                                               |
| `estruturas.hashing`       | hash functions, probing strategies, `HashTable`, `TableFullError`, `Student`, `format_students` |

Searches return the index found or `None`. `Stack.pop`, `Queue.dequeue` and
`MinHeap.pop` raise `IndexError` when empty. `HashTable.insert` raises
`TableFullError` when no free slot is reached.

## A few examples

```python
from estruturas.search import binary_search
from estruturas.stack import Stack
from estruturas.fifo import Queue
from estruturas.expressions import is_balanced
from estruturas.trees import SearchTree
from estruturas.heap import MinHeap

binary_search([1, 2, 3, 4, 5], 4)    # 3

stack = Stack()
stack.push(2)
stack.push(3)
stack.pop()           # 3

queue = Queue()
queue.enqueue(2)
queue.enqueue(3)
queue.dequeue()       # 2

is_balanced("{[(1 + 2) * 3] - 4}")   # True
is_balanced("(1 + 2]")               # False

tree = SearchTree([5, 3, 8])
4 in tree             # False
list(tree)            # [3, 5, 8]

heap = MinHeap([5, 1, 4])
heap.pop()            # 1
```

## Commands

```
estruturas-search        # search a number in a fixed list (--method linear|binary|recursive)
estruturas-matrix        # print a sample matrix and its transpose (--flat)
estruturas-list          # build a sorted linked list from numbers
estruturas-figures       # build a list of geometric figures
estruturas-expression    # check the brackets of an expression
estruturas-rectangles    # queue rectangles and show their areas
estruturas-bank          # simulate a bank queue (I = insert, A = attend, S = quit)
estruturas-tree          # build and print a binary tree
estruturas-nary-tree     # build and print a tree with many children
estruturas-heap          # insert into and remove from a heap
estruturas-students      # store students in a hash table by registration number (--size)
```

## What is not included

The package has no sorting algorithms and no command for sorting; use
Python's built-in `sorted` or `list.sort` for that.