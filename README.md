# algokit

A collection of classic algorithms and data structures written in plain Python,
with no third-party dependencies.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.arrays` | maximum subarray sum (`max_subarray_sum_brute`, `max_subarray_sum_prefix`, `max_subarray_sum_kadane`), `PrefixSums` range queries, `sort_012` |
| `algokit.heaps` | `MaxHeap` (`push`, `pop_root`), `heapify`, `k_largest` |
| `algokit.searching` | `binary_search`, `lower_bound`, `upper_bound`, `count_occurrences`, `linear_search` |
| `algokit.number_theory` | Euclid's `gcd`, `prime_sum` (a number as a sum of two primes) |
| `algokit.bits` | `get_bit`, `set_bit`, `clear_bit`, `update_bit`, `clear_last_bits`, `clear_bits_range`, `count_set_bits`, `count_set_bits_fast` |
| `algokit.strings` | `reverse_string`, `sort_by_length`, `is_palindrome` |
| `algokit.recursion` | `inversion_count`, `quick_sort_lomuto`, `hanoi_moves` |
| `algokit.greedy` | `max_activities`, `fractional_knapsack`, `job_sequencing`, `optimal_merge_cost` |
| `algokit.generic_tree` | n-ary `TreeNode`: `build_tree`, `describe`, `diameter`, `node_path`, `node_distance` |
| `algokit.binary_tree` | `BinaryNode`, `build_from_level_order`, `build_from_preorder`, `level_order`, `morris_inorder`, `diameter`, `largest_bst` |
| `algokit.bst` | `BSTNode`, `insert`, `inorder`, `preorder`, `postorder`, `height` |
| `algokit.avl` | self-balancing `AVLTree` (`insert`, `delete`, `in`, `preorder`) |
| `algokit.dsu` | `UnionFind` with path compression and union by rank |
| `algokit.graph` | `Graph` (`add_edge`, `neighbors`, `bfs`, `dfs`), `articulation_points`, `greedy_coloring`, `is_bipartite` |
| `algokit.backtracking` | `hamiltonian_cycles`, `solve_n_queens`, `rat_in_maze_paths` |
| `algokit.mst` | `kruskal_mst`, `prim_mst` (total tree weight) |
| `algokit.dynamic` | `knapsack_01`, `can_partition`, `longest_common_subsequence`, `min_insertions_palindrome`, `subset_sum`, `trapped_water`, `tsp_min_cost` |
| `algokit.stacks` | `precedence`, `infix_to_postfix`, `has_redundant_parentheses` |
| `algokit.linked_list` | singly linked `LinkedList` with 1-based `insert`/`delete`, `reverse`, `middle`, `is_palindrome`; `segregate_even_odd` |
| `algokit.shortest_paths` | `bellman_ford` (raises `NegativeCycleError`), `dijkstra`, `floyd_warshall` |
| `algokit.flow` | `ford_fulkerson` returning a `FlowResult` with the flow and augmenting paths |

## Examples

```python
from algokit.arrays import max_subarray_sum_kadane
from algokit.recursion import quick_sort_lomuto
from algokit.dynamic import trapped_water
from algokit.dsu import UnionFind

max_subarray_sum_kadane([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
quick_sort_lomuto([5, 4, 3, 6, 1, 2, 7])                   # [1, 2, 3, 4, 5, 6, 7]
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])        # 6

sets = UnionFind(5)
sets.union(0, 1)
sets.same_set(0, 1)                                        # True
sets.num_sets()                                            # 4
```

```python
from algokit.shortest_paths import bellman_ford, NegativeCycleError

try:
    distances = bellman_ford(3, [(0, 1, 4), (1, 2, -2)], 0)   # [0, 4, 2]
except NegativeCycleError:
    ...
```

`hamiltonian_cycles`, `rat_in_maze_paths` and `hanoi_moves` are generators;
wrap them in `list()` to collect every result.

## What it does not do

- There is no module of general comparison sorts (bubble, insertion, merge,
  selection, counting, heap sort). The only sorting functions are `sort_012`
  and `quick_sort_lomuto`; use the built-in `sorted` otherwise.
- It is a library only: it installs no command-line programs and reads no
  input of its own.