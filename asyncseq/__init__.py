"""asyncseq - Lazy, single-pass operators over asynchronous sequences.

This library normalizes async iterators, sync iterators of values or
awaitables, and awaitables of either into one pull-based `Producer`
interface, and provides composable operators (mapping, filtering, slicing,
folding, searching, comparison, concatenation, grouping) over it. Every
producer is consumable exactly once; the `_once` suffix on each operator is
a reminder of that contract.
"""

from asyncseq.adapter import async_iterator
from asyncseq.errors import AsyncSeqError
from asyncseq.errors import EmptyInputError
from asyncseq.errors import InvalidArgumentError
from asyncseq.operators import all_once
from asyncseq.operators import all_once_fn
from asyncseq.operators import and_once
from asyncseq.operators import any_once
from asyncseq.operators import any_once_fn
from asyncseq.operators import append_once
from asyncseq.operators import append_once_fn
from asyncseq.operators import average_once
from asyncseq.operators import concat_map_once
from asyncseq.operators import concat_map_once_fn
from asyncseq.operators import concat_once
from asyncseq.operators import contains_once
from asyncseq.operators import contains_once_fn
from asyncseq.operators import drop_once
from asyncseq.operators import drop_once_fn
from asyncseq.operators import drop_until_once
from asyncseq.operators import drop_until_once_fn
from asyncseq.operators import drop_while_once
from asyncseq.operators import drop_while_once_fn
from asyncseq.operators import empty_once
from asyncseq.operators import equal_once
from asyncseq.operators import equal_once_fn
from asyncseq.operators import exclude_first_once
from asyncseq.operators import exclude_first_once_fn
from asyncseq.operators import exclude_null_once
from asyncseq.operators import exclude_once
from asyncseq.operators import exclude_once_fn
from asyncseq.operators import filter_once
from asyncseq.operators import filter_once_fn
from asyncseq.operators import find_index_once
from asyncseq.operators import find_index_once_fn
from asyncseq.operators import find_once
from asyncseq.operators import find_once_fn
from asyncseq.operators import first_once
from asyncseq.operators import fold1_once
from asyncseq.operators import fold1_once_fn
from asyncseq.operators import fold_once
from asyncseq.operators import fold_once_fn
from asyncseq.operators import for_each_once
from asyncseq.operators import for_each_once_fn
from asyncseq.operators import index_of_once
from asyncseq.operators import index_of_once_fn
from asyncseq.operators import index_once
from asyncseq.operators import index_once_fn
from asyncseq.operators import initial_once
from asyncseq.operators import key_by_once
from asyncseq.operators import key_by_once_fn
from asyncseq.operators import key_first_by_once
from asyncseq.operators import key_first_by_once_fn
from asyncseq.operators import key_last_by_once
from asyncseq.operators import key_last_by_once_fn
from asyncseq.operators import last_once
from asyncseq.operators import map_once
from asyncseq.operators import map_once_fn
from asyncseq.operators import maximum_by_once
from asyncseq.operators import maximum_by_once_fn
from asyncseq.operators import maximum_once
from asyncseq.operators import maximum_once_fn
from asyncseq.operators import minimum_by_once
from asyncseq.operators import minimum_by_once_fn
from asyncseq.operators import minimum_once
from asyncseq.operators import minimum_once_fn
from asyncseq.operators import none_null_once
from asyncseq.operators import not_empty_once
from asyncseq.operators import not_equal_once
from asyncseq.operators import not_equal_once_fn
from asyncseq.operators import only_once
from asyncseq.operators import or_once
from asyncseq.operators import pairwise_once
from asyncseq.operators import prefix_match_once
from asyncseq.operators import prefix_match_once_fn
from asyncseq.operators import prepend_once
from asyncseq.operators import prepend_once_fn
from asyncseq.operators import product_once
from asyncseq.operators import push_once
from asyncseq.operators import push_once_fn
from asyncseq.operators import remove_first_once
from asyncseq.operators import remove_first_once_fn
from asyncseq.operators import remove_once
from asyncseq.operators import remove_once_fn
from asyncseq.operators import scan1_once
from asyncseq.operators import scan1_once_fn
from asyncseq.operators import scan_once
from asyncseq.operators import scan_once_fn
from asyncseq.operators import slice_once
from asyncseq.operators import slice_once_fn
from asyncseq.operators import sum_once
from asyncseq.operators import tail_once
from asyncseq.operators import take_once
from asyncseq.operators import take_once_fn
from asyncseq.operators import take_until_once
from asyncseq.operators import take_until_once_fn
from asyncseq.operators import take_while_once
from asyncseq.operators import take_while_once_fn
from asyncseq.operators import to_list_once
from asyncseq.operators import to_set_once
from asyncseq.operators import unshift_once
from asyncseq.operators import unshift_once_fn
from asyncseq.operators import zip_once
from asyncseq.operators import zip_once_fn
from asyncseq.ordering import compare
from asyncseq.ordering import equal
from asyncseq.ordering import not_null
from asyncseq.ordering import reverse
from asyncseq.pipeline import Pipeline
from asyncseq.types import DONE
from asyncseq.types import Phase
from asyncseq.types import Producer
from asyncseq.types import Step
from asyncseq.types import pull

__all__ = [
  "Pipeline",
  "Producer",
  "Step",
  "DONE",
  "Phase",
  "pull",
  "async_iterator",
  "AsyncSeqError",
  "EmptyInputError",
  "InvalidArgumentError",
  "compare",
  "equal",
  "not_null",
  "reverse",
  "all_once",
  "all_once_fn",
  "and_once",
  "any_once",
  "any_once_fn",
  "append_once",
  "append_once_fn",
  "average_once",
  "concat_map_once",
  "concat_map_once_fn",
  "concat_once",
  "contains_once",
  "contains_once_fn",
  "drop_once",
  "drop_once_fn",
  "drop_until_once",
  "drop_until_once_fn",
  "drop_while_once",
  "drop_while_once_fn",
  "empty_once",
  "equal_once",
  "equal_once_fn",
  "exclude_first_once",
  "exclude_first_once_fn",
  "exclude_null_once",
  "exclude_once",
  "exclude_once_fn",
  "filter_once",
  "filter_once_fn",
  "find_index_once",
  "find_index_once_fn",
  "find_once",
  "find_once_fn",
  "first_once",
  "fold1_once",
  "fold1_once_fn",
  "fold_once",
  "fold_once_fn",
  "for_each_once",
  "for_each_once_fn",
  "index_of_once",
  "index_of_once_fn",
  "index_once",
  "index_once_fn",
  "initial_once",
  "key_by_once",
  "key_by_once_fn",
  "key_first_by_once",
  "key_first_by_once_fn",
  "key_last_by_once",
  "key_last_by_once_fn",
  "last_once",
  "map_once",
  "map_once_fn",
  "maximum_by_once",
  "maximum_by_once_fn",
  "maximum_once",
  "maximum_once_fn",
  "minimum_by_once",
  "minimum_by_once_fn",
  "minimum_once",
  "minimum_once_fn",
  "none_null_once",
  "not_empty_once",
  "not_equal_once",
  "not_equal_once_fn",
  "only_once",
  "or_once",
  "pairwise_once",
  "prefix_match_once",
  "prefix_match_once_fn",
  "prepend_once",
  "prepend_once_fn",
  "product_once",
  "push_once",
  "push_once_fn",
  "remove_first_once",
  "remove_first_once_fn",
  "remove_once",
  "remove_once_fn",
  "scan1_once",
  "scan1_once_fn",
  "scan_once",
  "scan_once_fn",
  "slice_once",
  "slice_once_fn",
  "sum_once",
  "tail_once",
  "take_once",
  "take_once_fn",
  "take_until_once",
  "take_until_once_fn",
  "take_while_once",
  "take_while_once_fn",
  "to_list_once",
  "to_set_once",
  "unshift_once",
  "unshift_once_fn",
  "zip_once",
  "zip_once_fn",
]
