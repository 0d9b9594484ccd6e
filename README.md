# dslab

Classic data structures and algorithms written in plain Python. The
package needs nothing outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dslab.linkedlist` | `LinkedList`, a singly linked list with `append`, `copy`, `reverse`, `remove_duplicates`, `partition`, `rotate`, `swap_pairs`, `is_palindrome` and `merge`. `add_numbers` adds two numbers given digit by digit, most significant digit first. |
| `dslab.doubly` | `DoublyLinkedList` with `append`, `insert_after`, `sort`, `concatenate`, `remove`, forward and reverse iteration |
| `dslab.polynomial` | `Term` and `Polynomial`. A polynomial supports `+` and `*`, and its terms are kept in decreasing order of exponent. |
| `dslab.expressions` | `infix_to_postfix`, `infix_to_prefix`, `evaluate_postfix`, `evaluate_prefix`, `precedence` |
| `dslab.stacks` | `LinkedStack`, and `TwinStack`, which holds stacks 1 and 2 in one array |
| `dslab.queues` | `LinkedQueue`, `CircularQueue` (default capacity 5), and `KQueues`, which holds k queues in one array (defaults: 5 queues, 100 slots) |
| `dslab.hashing` | `LinearProbingTable`, `QuadraticProbingTable` (default size 10), `TableFullError` |
| `dslab.heaps` | `MinHeap` and `MaxHeap` with `insert`, `extract_min` / `extract_max` and `heapsort` |
| `dslab.trees` | `TreeNode`, plus these functions: `bst_insert`, `build_bst`, `inorder`, `preorder`, `postorder`, `descending`, `level_order`, `height`, `mirror`, `count_total`, `count_leaves`, `count_internal`, `inorder_iterative`, `preorder_iterative`, `postorder_iterative` and `build_from_traversals` |
| `dslab.graphs` | `bfs_matrix`, `dfs_matrix`, and `AdjacencyListGraph` with `add_edge`, `neighbours`, `bfs` and `dfs` |

## Examples

```python
from dslab.linkedlist import LinkedList, add_numbers
from dslab.polynomial import Polynomial
from dslab.expressions import infix_to_postfix, evaluate_postfix
from dslab.trees import build_bst, inorder, height

numbers = LinkedList([1, 2, 3, 4, 5])
numbers.rotate(2)
print(numbers)                        # 4 -> 5 -> 1 -> 2 -> 3 -> NULL

print(add_numbers([7, 2, 3, 3], [5, 7, 4]))   # 7 -> 8 -> 0 -> 7 -> NULL

p = Polynomial([(3, 2), (2, 1)])
q = Polynomial([(1, 1), (4, 0)])
print(p * q)                          # 3x^3 + 14x^2 + 8x^1

print(infix_to_postfix("a+b*c"))      # abc*+
print(evaluate_postfix("2 3 4 * +"))  # 14

root = build_bst([50, 30, 70, 20, 40, 60, 80])
print(inorder(root), height(root))    # [20, 30, 40, 50, 60, 70, 80] 3
```

## Behaviour worth knowing

- An operation that cannot proceed raises an exception. It does not return a
  marker value. Popping, dequeuing or extracting from an empty structure raises
  `IndexError`. Pushing into a full `TwinStack`, or enqueuing into a full
  `CircularQueue` or `KQueues`, raises `OverflowError`. Inserting into a full
  hash table raises `TableFullError`.
- In the hash tables, `insert` returns the slot that the key went to. `search`
  returns the slot, or `None` when the key is absent.
- `DoublyLinkedList.remove` deletes the first node that holds the value and
  tells whether such a node was found. `concatenate` moves the other list's
  nodes across, which leaves the other list empty.
- Infix conversion takes single-character operands and skips whitespace.
  Operators of equal precedence associate to the left.
- The evaluators take non-negative integers separated by whitespace. Division
  truncates toward zero. A missing operand counts as 0.
- `AdjacencyListGraph` is directed. Each new edge goes to the front of its
  source vertex's list, and the traversals visit neighbours in that order.

## What it does not do

This is a library only. It has no command-line program and reads no
expressions, matrices or edge lists from standard input. You build the
structures and call the functions from your own code.