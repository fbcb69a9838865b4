# dsakit

Small, dependency-free implementations of classic data structures and the
algorithms usually taught alongside them.

## Installation

```
pip install dsakit
```

For running the test suite:

```
pip install "dsakit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.linked_list` | `Node` and functions on singly linked chains: `from_iterable`, `iter_values`, `to_list`, `length`, `contains`, `format_list`, `insert_head`, `insert_tail`, `insert_at`, `insert_before`, `remove_head`, `remove_tail`, `remove_at`, `remove_value` |
| `dsakit.doubly_linked_list` | `DNode`, the chain helpers `from_iterable`, `iter_values`, `delete_head`, and the `DoublyLinkedList` container |
| `dsakit.circular` | `CircularSinglyLinkedList`, `CircularDoublyLinkedList` |
| `dsakit.deque` | `BoundedDeque`, a deque with a fixed capacity |
| `dsakit.heap` | `MinHeap` |
| `dsakit.queues` | `ArrayQueue` (bounded, default capacity 100), `LinkedQueue`, `TwoStackQueue` |
| `dsakit.expressions` | `is_balanced`, `is_operator`, `precedence`, `infix_to_postfix`, `postfix_to_infix`, `postfix_to_prefix`, `prefix_to_infix`, `prefix_to_postfix` |
| `dsakit.monotonic` | `next_greater_elements`, `previous_smaller_elements` |
| `dsakit.binary_tree` | `TreeNode`, recursive and iterative traversals, `level_order`, `height`, `max_depth`, `max_depth_iterative`, `is_balanced` |
| `dsakit.avl` | `AVLNode`, `AVLTree`, a self-balancing search tree with insert and delete |

## Examples

Singly linked chains are plain `Node` objects; every operation returns the
(possibly new) head. Positions are 1-based:

```python
from dsakit.linked_list import from_iterable, insert_head, remove_tail, to_list

head = from_iterable([2, 4, 6, 8])
head = insert_head(head, 100)
head = remove_tail(head)
to_list(head)            # [100, 2, 4, 6]
```

Lists with an object interface iterate in order and support `len`:

```python
from dsakit.circular import CircularDoublyLinkedList

cdll = CircularDoublyLinkedList([5, 10, 20])
cdll.delete(10)
str(cdll)                # '5 20'
list(reversed(cdll))     # [20, 5]
```

Queues, deques and heaps:

```python
from dsakit.queues import TwoStackQueue
from dsakit.deque import BoundedDeque
from dsakit.heap import MinHeap

q = TwoStackQueue()
q.enqueue(10)
q.enqueue(20)
q.dequeue()              # 10

dq = BoundedDeque(5)
dq.push_rear(10)
dq.push_front(30)
dq.front(), dq.rear()    # (30, 10)

h = MinHeap([10, 5, 15, 2])
h.extract_min()          # 2
```

Taking from an empty container raises `IndexError`; pushing onto a full
`BoundedDeque` or `ArrayQueue` raises `OverflowError`.

Expression conversion works on single-character operands; any other
character is treated as a binary operator:

```python
from dsakit.expressions import infix_to_postfix, postfix_to_infix, is_balanced

infix_to_postfix("a+b*(c+d)-e")   # 'abcd+*+e-'
postfix_to_infix("ab+cd-*")       # '((a+b)*(c-d))'
is_balanced("{([])()}")           # True
```

Monotonic-stack searches:

```python
from dsakit.monotonic import next_greater_elements, previous_smaller_elements

next_greater_elements([2, 1, 5, 6, 2, 3])    # [5, 5, 6, -1, 3, -1]
previous_smaller_elements([4, 5, 2, 10, 8])  # [-1, 4, -1, 2, 2]
```

Trees:

```python
from dsakit.avl import AVLTree

tree = AVLTree([10, 20, 30, 40, 5, 15])
tree.preorder()          # [20, 10, 5, 15, 30, 40]
tree.delete(20)
tree.preorder()          # [30, 10, 5, 15, 40]
15 in tree               # True
```

## What it does not include

There are no stack container classes (array-backed, linked, queue-backed or
minimum-tracking stacks). Stacks appear only inside other structures and
algorithms, such as `TwoStackQueue`, the expression converters and the
monotonic-stack searches; a plain Python `list` serves as a stack otherwise.