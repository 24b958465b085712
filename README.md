# algobox

A small library of classic algorithms and data structures, written in plain Python with no runtime dependencies. Functions take ordinary Python sequences and return new values; the inputs are never modified.

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

- `algobox.sorting`: `count_sort` (non-negative integers only), `heap_sort`, `merge_sort`, `quick_sort`, `selection_sort`, `shell_sort`. Each returns a new sorted list.
- `algobox.searching`: `binary_search`, `lower_bound` and `upper_bound` on sorted sequences return an index, or `None` when there is none; `nth_root(n, m)` approximates the n-th root of `m` by bisection to about 1e-6.
- `algobox.strings`: `first_non_repeating` (or `None`), `prefix_function` (the KMP prefix function), `is_palindrome`, `palindrome_verdict`, `reverse_string`, `reverse_words`, `keep_letters` (ASCII letters only), `permutations` (a generator), `anagram_deletions` (lowercase `a`–`z` only).
- `algobox.conversions`: `decimal_to_binary`, `decimal_to_octal` and `decimal_to_hexadecimal` return digit strings; `binary_to_decimal` and `octal_to_decimal` read the decimal digits of an integer in the other base; `hexadecimal_to_decimal` reads upper-case hexadecimal text.
- `algobox.arrays`: `trapped_water`, `equilibrium_index` (1-based, or `None`), `max_subarray` (returns a `SubarraySum` of `total`, `start`, `end`), `merge_k_sorted`, `merge_sorted`, `rotate` (to the right), `sorted_union`.
- `algobox.graphs`: `is_bipartite(vertices, edges)` and `prim_mst(vertices, edges, source)`, which returns `(parent, vertex)` pairs for every vertex but the source.
- `algobox.mathematics`: `josephus`, `pascal_triangle`, `primes_up_to`, `hanoi_moves` (yields `Move` tuples of `disk`, `source`, `target`).
- `algobox.structures`: `BoundedStack` (capacity 10 by default), `StackQueue`, `LinkedStack`, and the errors `StackOverflowError` and `StackUnderflowError`.

## Examples

```python
from algobox.sorting import merge_sort
from algobox.strings import prefix_function
from algobox.mathematics import josephus
from algobox.structures import StackQueue

merge_sort([5, 2, 9, 1])      # [1, 2, 5, 9]
prefix_function("abcabcd")    # [0, 0, 0, 1, 2, 3, 0]
josephus(5, 2)                # 3

queue = StackQueue()
queue.enqueue(10)
queue.enqueue(100)
queue.dequeue()               # 10
```

## What it does not do

algobox is a library only: it has no command-line program and reads no input from the terminal; call the functions from your own code. It includes no dynamic-programming routines such as knapsack or matrix-chain ordering.