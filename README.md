# algodrills

A collection of well-known algorithms and small data-structure designs, written as
plain Python functions and classes. It has no runtime dependencies and needs
Python 3.10 or later.

## Installation

```
pip install .
```

## What is inside

| Module | Contents |
| --- | --- |
| `algodrills.arrays` | `max_profit`, `max_profit_unlimited`, `first_missing_positive`, `kth_largest`, `longest_consecutive`, `majority_element`, `majority_element_dnc`, `merge_sorted`, `next_permutation`, `product_except_self`, `single_number`, `trap`, `two_sum` |
| `algodrills.sums` | `three_sum`, `four_sum`, `four_sum_count` |
| `algodrills.intervals` | `min_meeting_rooms`, `merge_intervals` |
| `algodrills.text` | `decode_string`, `find_replace_string`, `str_str`, `parse_int`, `is_valid_parentheses`, `full_justify` |
| `algodrills.words` | `group_anagrams`, `is_anagram`, `largest_number`, `longest_common_prefix`, `longest_str_chain`, `is_isomorphic`, `group_shifted`, `differ_by_one` |
| `algodrills.windows` | `longest_unique_substring`, `longest_substring_k_repeating`, `min_window`, `num_matching_subseq` |
| `algodrills.containers` | `RandomizedSet`, `HashMap`, `Logger`, `LRUCache`, `DetectSquares` |
| `algodrills.geometry` | `max_points`, `min_area_rect` |
| `algodrills.trees` | `TreeNode`, `find_duplicate_subtrees` |
| `algodrills.filesystem` | `FileSystem` |
| `algodrills.tries` | `Trie`, `count_matching_subsequences`, `suggested_products`, `find_words` |

## Examples

```python
from algodrills.arrays import max_profit, trap
from algodrills.sums import three_sum
from algodrills.text import decode_string, parse_int
from algodrills.containers import LRUCache
from algodrills.tries import Trie, suggested_products

max_profit([7, 1, 5, 3, 6, 4])              # 5
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
three_sum([-1, 0, 1, 2, -1, -4])            # [[-1, -1, 2], [-1, 0, 1]]
decode_string("3[a2[c]]")                   # "accaccacc"
parse_int("   -42")                         # -42

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                                # 1
cache.put(3, 3)                             # evicts key 2
cache.get(2)                                # -1

trie = Trie()
trie.insert("apple")
trie.search("app")                          # False
trie.starts_with("app")                     # True

suggested_products(["mobile", "mouse", "moneypot", "monitor", "mousepad"], "mouse")
# [["mobile", "moneypot", "monitor"], ["mobile", "moneypot", "monitor"],
#  ["mouse", "mousepad"], ["mouse", "mousepad"], ["mouse", "mousepad"]]
```

## Behaviour worth knowing

- Some functions work in place, as their names suggest: `merge_sorted` fills its
  first list and `next_permutation` rearranges the list it is given. Both return
  `None`.
- Bad input raises `ValueError`: an empty list for `max_profit`,
  `majority_element`, `majority_element_dnc` or `longest_common_prefix`; a `k` out
  of range for `kth_largest`; sizes that do not fit in `merge_sorted`; unbalanced
  brackets in `decode_string`; a word longer than the line in `full_justify`; a
  capacity below 1 for `LRUCache`.
- `two_sum` returns a tuple of two indices, or `None` when no pair adds up.
- `parse_int` reads an optional sign and leading digits after spaces and clamps
  the result to the signed 32-bit range.
- `HashMap.get` and `LRUCache.get` return `-1` for a missing key.
- `RandomizedSet` takes an optional `random.Random` for reproducible choices;
  `get_random` on an empty set raises `IndexError`.
- `Logger.should_print_message` lets a message through at most once every 10
  time units.
- `FileSystem` creates missing directories along any path it looks up, and
  `ls` returns a file's own name or a directory's entries in sorted order.
- `find_words` reports each word at most once, in the order it is found on the
  board.

## What it does not do

This is a library only: it has no command-line program, and nothing it holds is
saved anywhere. `FileSystem` keeps its files in memory for the life of the
object.

## Running the tests

```
pip install ".[test]"
pytest
```