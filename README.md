# algokit

A small library of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.linked_list` | `SinglyLinkedList`: `insert_front`, `append`, `insert_after(position, value)`; `delete_front`, `delete_last`, `delete_after(position)` (each returns the removed value); `search` returns the one-based positions of a value; `drop_dominated` removes every node that has a greater value somewhere after it. Iterable and sized. |
| `algokit.two_stacks` | `TwoStacks`: two stacks sharing one fixed-size array, with `push1`, `push2`, `pop1`, `pop2` |
| `algokit.circular_deque` | `CircularDeque`: a deque of at most 100 slots backed by a circular array, with `insert_front`, `insert_rear`, `delete_front`, `delete_rear`, `front`, `rear`, `is_full`, `is_empty`; iterating yields front to rear |
| `algokit.trees` | `TreeNode`, `height`, `inorder`, `merge_sorted`, `sorted_to_bst`, `merge_trees` (merges two binary search trees into one balanced one) |
| `algokit.sorting` | `insertion_sort`, `merge_sort`, `selection_sort`, `negatives_first`, `reverse_array`; each returns a new list |
| `algokit.searching` | `binary_search`, `exponential_search` (index or `-1`), `search_sorted_matrix` (`(row, column)` or `None`), `min_max`, `count_triplets_below`, `sliding_window_max`, `longest_increasing_subsequence` |
| `algokit.strings` | `is_balanced`, `count_anagrams`, `prefix_function`, `kmp_search`, `evaluate_postfix` (single digits and `+ - * /`, division truncating toward zero), `count_decodings` (modulo 10**9+7) |
| `algokit.crc` | `crc_remainder`, `encode`, `check`: cyclic redundancy check over lists of 0/1 bits |
| `algokit.numbers` | `binomial`, `catalan`, `primes_up_to`, `equal_by_xor`, `tower_of_hanoi` (returns a list of `Move(disk, source, target)`) |
| `algokit.graphs` | `connected_components`, `DisjointSet` (`find`, `union`), `Graph` with `add_edge` and `kruskal_mst` (total weight), `prim_mst` (list of `(parent, vertex, weight)` edges) |
| `algokit.backtracking` | `is_safe`, `solve_sudoku`, `solve_n_queens`, `solve_rat_maze`; each solver returns a grid, or `None` when there is no solution |
| `algokit.rover` | `Heading` and `Rover`: a grid rover; `L` and `R` turn it, any other command moves it one step forward |
| `algokit.expedition` | `min_refuel_stops`: the fewest fuel stops needed to reach a town, or `None` |
| `algokit.concurrency` | `run_demo`: a main loop and two background threads printing at their own pace; the threads are stopped before the last line |

## Examples

```python
from algokit.sorting import merge_sort
from algokit.strings import is_balanced, kmp_search
from algokit.numbers import catalan
from algokit.rover import Rover, Heading

merge_sort([6, 5, 12, 10, 9, 1])          # [1, 5, 6, 9, 10, 12]
is_balanced("{([])}")                     # True
kmp_search("ABABCABAB", "ABABDABACDABABCABAB")  # [10]
[catalan(n) for n in range(6)]            # [1, 1, 2, 5, 14, 42]

rover = Rover(3, 3, Heading.E)
rover.process("MMRMMRMRRM")
print(rover)                              # 5 1 E
```

```python
from algokit.linked_list import SinglyLinkedList

items = SinglyLinkedList([12, 15, 10, 11, 5, 6, 2, 3])
items.drop_dominated()
list(items)                               # [15, 11, 6, 3]
```

```python
from algokit.graphs import Graph

g = Graph(4)
for x, y, w in [(0, 1, 1), (1, 3, 3), (3, 2, 4), (2, 0, 2), (0, 3, 2), (1, 2, 2)]:
    g.add_edge(x, y, w)
g.kruskal_mst()                           # 5
```

Operations on the data structures that cannot be carried out, such as
popping an empty stack, pushing onto a full one or deleting from an empty
list, raise an exception (`IndexError` or `OverflowError`). Invalid
arguments raise `ValueError`.

## Command-line tools

Two commands are installed with the package.

`algokit-linked-list` starts an interactive menu on standard input for
building and editing a singly linked list of integers. Choice 9, or the end
of input, leaves the menu:

```
algokit-linked-list
```

`algokit-expedition` reads expedition cases from standard input: the number
of cases, then for each case the number of fuel stations, each station's
distance from the town and the fuel it offers, and finally the truck's
distance to the town and its starting fuel. It prints the fewest stops for
each case, or `-1` when the town cannot be reached:

```
printf '1\n4\n4 4\n5 2\n11 5\n15 10\n25 10\n' | algokit-expedition
```