# algoshelf

A shelf of classic algorithms and data structures in plain Python, with no
third-party dependencies.

## Installing

```
pip install .
pip install ".[test]"   # adds pytest, to run the test suite
```

## Modules

### `algoshelf.graph`

Vertices are the integers `0..n-1`; an adjacency list is a list of
neighbour lists.

- `adjacency_list(n, edges, directed=False)` builds an adjacency list;
  undirected edges are stored in both directions.
- `adjacency_matrix(n, edges)` builds a symmetric 0/1 matrix.
- `bfs_of_graph(adj)` and `dfs_of_graph(adj)` give the breadth-first and
  depth-first order of the vertices reachable from vertex 0.
- `is_cyclic_directed(adj)`, `has_cycle_undirected_bfs(adj)` and
  `has_cycle_undirected_dfs(adj)` detect cycles.
- `flood_fill(image, sr, sc, color)` returns a recoloured copy of the
  4-connected region at `(sr, sc)`.
- `num_islands(grid)` counts groups of `"1"` cells connected horizontally,
  vertically or diagonally.
- `shortest_path_dag(n, edges)` takes `(u, v, weight)` edges of a directed
  acyclic graph and returns distances from vertex 0, with `None` for
  unreachable vertices.

Vertex numbers outside the range raise `IndexError`; a negative `n` raises
`ValueError`.

### `algoshelf.linkedlist`

- `SinglyLinkedList(values=())` with `append`, `prepend`, `delete_first`,
  `delete_last` (both return the removed value and raise `IndexError` on an
  empty list), `reverse`, `reverse_recursive`, `middle`, `middle_by_count`
  (the second of two middles), `reversed_values`, iteration and `len`.
- `DoublyLinkedList(values=())` with `prepend`, forward iteration and
  `reversed()`.
- `CircularLinkedList(values=())` with `insert`, which adds a value at the
  beginning of the ring, and iteration once around the ring.
- `Node`, the cell type the lists are built from.

### `algoshelf.sorting`

Each function returns a new sorted list: `bubble_sort`, `insertion_sort`,
`selection_sort`, `merge_sort`, `quick_sort` and
`randomized_quick_sort(values, rng=None)`, which accepts a `random.Random`
for reproducible pivots. `bubble_sort_by(values, compare)` swaps neighbours
when `compare(a, b) > 0`; `descending` is such a comparator.

### `algoshelf.recursion`

`repeat`, `count_up`, `count_down`, `sum_to`, `factorial`, `fibonacci`,
`fibonacci_memo`, `is_palindrome`, `reverse_in_place`, and subsequence
search: `subsequences` (a generator, each element taken before it is left
out), `subsequences_with_sum`, `first_subsequence_with_sum`,
`count_subsequences_with_sum`, `subset_sums` (sorted), `combination_sums`
and `sorted_combination_sums`.

### `algoshelf.bst`

`BinarySearchTree(values=())` places equal values in the left subtree and
offers `insert`, `search` and `in`, `delete` (returns whether a value was
removed), `find_min` (raises `ValueError` on an empty tree), `height` (-1 for
an empty tree), `inorder`, `preorder`, `postorder`, `level_order` and
`is_valid`. The functions `is_bst(root)` and `is_bst_naive(root)` check any
tree of `BstNode` objects, in linear and quadratic time respectively.

### `algoshelf.sequences`

`pair_order` and `sort_pairs` order pairs ascending by the second item and
descending by the first; `popcount(n)` counts set bits;
`next_permutation(seq)` returns the next lexicographic arrangement (or
`None` after the last), and `permutations_from(s)` yields `s` and every
arrangement after it.

### `algoshelf.casino`

`Casino(cash=100, rng=None)` holds a purse; `shuffle()` returns the cards
`J`, `Q`, `K` in random order and `play(bet, guess)` returns a `Round` with
`won`, `cards` and `cash`. A right guess pays three times the bet, a wrong
one costs the bet.

## Examples

```python
from algoshelf.graph import adjacency_list, bfs_of_graph
from algoshelf.sorting import merge_sort
from algoshelf.bst import BinarySearchTree

adj = adjacency_list(5, [(0, 1), (0, 2), (0, 3), (2, 4)], directed=True)
print(bfs_of_graph(adj))              # [0, 1, 2, 3, 4]

print(merge_sort([3, 7, 1, 0, 4, 2, 9, 8]))   # [0, 1, 2, 3, 4, 7, 8, 9]

tree = BinarySearchTree([15, 10, 20, 30, 45])
print(tree.inorder())                 # [10, 15, 20, 30, 45]
print(20 in tree, tree.height())      # True 3
```

## The casino game

```
algoshelf-casino [--cash N] [--seed S]
```

You start with `--cash` dollars (100 by default). Each round, enter a bet
and guess the queen's position, 1, 2 or 3. A bet of 0, one larger than your
cash, or the end of input ends the game; `--seed` makes the shuffles
repeatable.

## What it does not do

The package is a library of in-memory routines. Apart from the casino game
it has no command-line tools: graphs, lists and trees are built in Python
code, not read from files or standard input.