# cpalgos

Classic competitive-programming algorithms and data structures as a plain
Python library. Functions take ordinary Python lists, strings and tuples and
return plain values.

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
| `cpalgos.searching` | `binary_search`, `separate_squares`, `partition`, `quick_select`, `construct_transformed_array` |
| `cpalgos.sequences` | `Interval`, `max_sub_array` (Kadane), `min_meeting_rooms` (line sweep), `length_of_lis` |
| `cpalgos.monotonic` | `next_greater_right`, `prev_greater_left`, `next_smaller_right`, `prev_smaller_left`, `days_to_warmer`, `largest_rectangle_area`, `largest_rectangle_area_bounds`, `next_greater_values`, `span_greater_equal_left` |
| `cpalgos.grid` | `grid_index`, `grid_neighbours`, `flattened_adjacency` |
| `cpalgos.dp` | `find_paths`, `max_coins`, `find_integers`, `min_distance`, `min_path_sum`, `word_break`, `unique_paths_with_obstacles` |
| `cpalgos.expressions` | `parse_expression`, `diff_ways_to_compute` |
| `cpalgos.lcs` | `lcs_brute`, `lcs_memo` |
| `cpalgos.shortest_paths` | `bellman_ford`, `zero_one_bfs`, `build_undirected_adjacency`, `dijkstra_path`, `floyd_warshall` |
| `cpalgos.topo` | `fox_and_names` (Kahn's topological sort) |
| `cpalgos.disjoint_set` | `DisjointSet`, `count_components` |
| `cpalgos.spanning_tree` | `kruskal_mst_weight`, `manhattan_distance`, `prim_mst_weight` |
| `cpalgos.linked_list` | `ListNode`, `from_values`, `to_values`, `has_cycle`, `reverse_list` |
| `cpalgos.trees` | `TreeNode`, `bfs_order`, `Trie` |
| `cpalgos.segment_tree` | `MinSegmentTree` |
| `cpalgos.windows` | `SmallestKSumWindow`, `count_good_subarrays`, `at_most_k_distinct`, `subarrays_with_k_distinct`, `minimum_card_pickup` |
| `cpalgos.number_theory` | `odd_power_signature` |

A few conventions:

- In `cpalgos.shortest_paths`, `bellman_ford`, `zero_one_bfs` and
  `floyd_warshall` report unreachable vertices with `math.inf`.
  `dijkstra_path` returns the list of vertices on the path, or `[]` when
  there is none; its vertices are numbered `1 .. n`.
- `fox_and_names` returns the string `"IMPOSSIBLE"` when the names cannot be
  sorted under any alphabet.
- Invalid input (an empty grid, an index outside a segment tree, a
  non-positive number for `odd_power_signature`) raises `ValueError` or
  `IndexError`.

## Examples

```python
from cpalgos.searching import binary_search
from cpalgos.dp import min_distance
from cpalgos.segment_tree import MinSegmentTree
from cpalgos.disjoint_set import DisjointSet

binary_search([1, 3, 5, 7], 5)        # 2
binary_search([1, 3, 5, 7], 4)        # -1

min_distance("horse", "ros")          # 3

tree = MinSegmentTree([-1, 2, 4, 0])
tree.query(1, 3)                      # 0
tree.update(3, 5)
tree.query(1, 3)                      # 2

ds = DisjointSet(4)
ds.unite(0, 1)                        # True
ds.connected(0, 1)                    # True
ds.connected(0, 2)                    # False
```

```python
from cpalgos.trees import Trie

trie = Trie()
trie.insert("cat")
trie.search("cat")                    # True
trie.shortest_prefix("cattle")        # "cat"
```

```python
from cpalgos.windows import SmallestKSumWindow

window = SmallestKSumWindow(2)
for x in (5, 1, 3):
    window.add(x)
window.query()                        # 4 (1 + 3)
window.remove(1)
window.query()                        # 8 (3 + 5)
```

## What it does not do

This is a library only: there is no command-line tool. It has no
maximum-flow routine, and no general depth-first search helper beyond the
traversals listed above.