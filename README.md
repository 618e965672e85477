# pojkit

A library of solvers for classic algorithmic puzzles. Each solver is a plain
function, or a small class, that takes Python data and returns the answer.
The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `pojkit.math_puzzles` | `nth_term`, `first_player_wins` (Wythoff's game), `self_numbers`, `nth_ugly_number`, `perfect_cubes`, `gnawed_diameter`, `cow_multiplication`, `hexagon_walks`, `moo_volume` |
| `pojkit.greedy` | `count_parcels`, `lost_cows`, `guaranteed_wins`, `cover_interval`, `count_turns`, `max_alternating_sum` |
| `pojkit.text` | `caesar_decode`, `decode_messages`, `wertyu`, `count_decodings`, `ordered_permutations`, `barn_passwords`, `is_prefix_free` |
| `pojkit.sequences` | `wooden_sticks`, `buy_low`, `longest_increasing`, `nested_dolls`, `palindrome_insertions` |
| `pojkit.dp` | `communication_system`, `max_submatrix`, `gene_similarity`, `complete_brackets`, `shopping_offers`, `artillery_placement`, `domino_flips`, `investment`, `cowties_length`, `smart_cows`, `gone_fishing` |
| `pojkit.search` | Backtracking: `birthday_cake`, `min_stick_length`, `vase_collection`, `chessboard_placements`, `is_interleaving` |
| `pojkit.grids` | Grid searches: `segments_between`, `count_ships`, `mountain_route`, `knight_moves`, `count_lakes`, `curling_moves`, `maze_path` |
| `pojkit.geometry` | `count_rectangles`, `max_walls_hit`, `mark_targets` |
| `pojkit.shortest_paths` | Dijkstra-based: the `Good` dataclass, `min_dowry`, `shortest_distance`, `christmas_tree_cost` |
| `pojkit.flows` | `FlowNetwork` (Dinic maximum flow), `unplugged_devices`, `dual_core_cost` |
| `pojkit.graphs` | `road_cost` (Kruskal), `longest_highway` (Prim), `is_semi_connected`, `label_balls` |
| `pojkit.trees` | `nearest_common_ancestor`, `balancing_node`, `cutting_points`, `min_towers`, `color_tree_cost` |
| `pojkit.structures` | `count_false_statements` (weighted union–find), `FenwickGrid`, `star_levels`, `ColorBoard`, `argus_schedule` |
| `pojkit.matching` | `predictive_text`, `prefix_function`, `string_power`, `count_occurrences`, `longest_common_substring`, `pattern_positions` |

## Examples

```python
from pojkit.math_puzzles import nth_ugly_number, first_player_wins
from pojkit.sequences import longest_increasing
from pojkit.matching import count_occurrences, string_power
from pojkit.flows import FlowNetwork

nth_ugly_number(10)          # 12
first_player_wins(2, 1)      # False: (1, 2) is a losing position
longest_increasing([1, 7, 3, 5, 9, 4, 8])   # 4
count_occurrences("AZA", "AZAZAZA")         # 3
string_power("abababab")                     # 4

network = FlowNetwork()
network.add_edge(0, 1, 3)
network.add_edge(1, 2, 2)
network.max_flow(0, 2)       # 2
```

Stateful structures keep their data between calls:

```python
from pojkit.structures import ColorBoard, FenwickGrid

board = ColorBoard(10)       # segments 1..10, all colour 1
board.paint(3, 5, 2)
board.count_colors(1, 10)    # 2

grid = FenwickGrid(4)        # 4 x 4 counters, 0-based
grid.add(1, 1, 5)
grid.range_sum(0, 0, 3, 3)   # 5
```

## Results and errors

Input the solvers cannot accept (out-of-range values, malformed grids,
inconsistent lengths) raises `ValueError`; `FenwickGrid` raises `IndexError`
for a cell outside the grid. Where a well-formed puzzle simply has no
solution, such as an unreachable target in `knight_moves`, `maze_path` or
`shortest_distance`, or an interval `cover_interval` cannot cover, the
function returns `None`.

## What it does not do

The package is a library only. It has no command-line program and does not
read puzzle input from standard input or files; callers pass the data in and
format the results themselves.