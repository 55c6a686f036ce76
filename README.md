# dpkit

A small collection of classic algorithms, written as plain functions:

- `dpkit.knapsack`: 0/1 knapsack (`knapsack`, `knapsack_recursive`), `unbounded_knapsack`, `rod_cutting`, `coin_change_ways` and `min_coins` (which returns `None` when the amount cannot be made).
- `dpkit.subsets`: `subset_sum_exists`, `can_partition_equally`, `count_subsets_with_sum`, `count_subset_pairs_with_difference`, `target_sum_ways` and `min_subset_sum_difference`.
- `dpkit.sequences`: longest common subsequence (`lcs_length`, `lcs_length_recursive`, `longest_common_subsequence`), `longest_common_substring_length`, shortest common supersequence (`shortest_supersequence_length`, `shortest_supersequence`), `edit_operations` (deletions and insertions as an `EditOperations` tuple), palindromic subsequences, `is_subsequence` and `longest_repeating_subsequence_length`.
- `dpkit.partition`: `matrix_chain_cost`, `is_palindrome`, `min_palindrome_cuts` and `count_parenthesizations` for `T`/`F` expressions over `&`, `|` and `^`.
- `dpkit.graph`: an undirected `Graph` on vertices `1..n` with `add_edge`, `neighbours`, `adjacency_matrix`, `bfs` and `dfs`, plus `parse_graph` to read one from text.
- `dpkit.generators`: generators for prefix-dominant binary strings, balanced parentheses, case permutations and subsequences.
- `dpkit.stacks`: `delete_middle`, `reverse_stack` and `sort_stack` on lists used as stacks (last element on top), and `sorted_recursive`.
- `dpkit.recursion`: `factorial`, `hanoi_moves`, `tree_height` over `Node`, `josephus_survivor`, `kth_symbol`, `count_up` and `first_player_can_win`.

Invalid input, such as negative capacities, weights that are not positive or vertices outside the graph, raises `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from dpkit.knapsack import knapsack, coin_change_ways, min_coins
from dpkit.sequences import longest_common_subsequence, edit_operations
from dpkit.partition import matrix_chain_cost, min_palindrome_cuts
from dpkit.generators import balanced_parentheses
from dpkit.recursion import hanoi_moves

knapsack([1, 3, 4, 5], [1, 4, 5, 7], 7)          # 9
coin_change_ways([1, 2, 5], 5)                   # 4
min_coins([1, 2], 2)                             # 1
longest_common_subsequence("acbcf", "abcdaf")    # "abcf"
edit_operations("heap", "pea")                   # EditOperations(deletions=2, insertions=1)
matrix_chain_cost([40, 20, 30, 10, 30])          # 26000
min_palindrome_cuts("nitin")                     # 0
list(balanced_parentheses(2))                    # ["(())", "()()"]
len(list(hanoi_moves(3)))                        # 7
```

Graph traversal:

```python
from dpkit.graph import Graph

g = Graph(4)
g.add_edge(1, 2)
g.add_edge(2, 3)
g.bfs()   # [1, 2, 3, 4]
g.dfs()   # [1, 2, 3, 4]
```

Both traversals cover every component, starting each one at the lowest unvisited vertex.

## Command line

`dpkit-graph` reads a graph from a file, or from standard input when no file is given. The input is a vertex count and an edge count followed by one `u v` pair per edge. It prints one traversal order, breadth-first by default:

```
printf '4 2\n1 2\n2 3\n' | dpkit-graph
printf '4 2\n1 2\n2 3\n' | dpkit-graph --order dfs
```

Only unweighted graphs are supported; there is no weighted edge type.