"""The operator catalog, grouped by the shape of state machine each operator uses."""

from asyncseq.operators.fan_in import append_once
from asyncseq.operators.fan_in import append_once_fn
from asyncseq.operators.fan_in import concat_map_once
from asyncseq.operators.fan_in import concat_map_once_fn
from asyncseq.operators.fan_in import concat_once
from asyncseq.operators.fan_in import equal_once
from asyncseq.operators.fan_in import equal_once_fn
from asyncseq.operators.fan_in import not_equal_once
from asyncseq.operators.fan_in import not_equal_once_fn
from asyncseq.operators.fan_in import prefix_match_once
from asyncseq.operators.fan_in import prefix_match_once_fn
from asyncseq.operators.fan_in import prepend_once
from asyncseq.operators.fan_in import prepend_once_fn
from asyncseq.operators.fan_in import zip_once
from asyncseq.operators.fan_in import zip_once_fn
from asyncseq.operators.grouping import key_by_once
from asyncseq.operators.grouping import key_by_once_fn
from asyncseq.operators.grouping import key_first_by_once
from asyncseq.operators.grouping import key_first_by_once_fn
from asyncseq.operators.grouping import key_last_by_once
from asyncseq.operators.grouping import key_last_by_once_fn
from asyncseq.operators.lookahead import initial_once
from asyncseq.operators.lookahead import pairwise_once
from asyncseq.operators.lookahead import push_once
from asyncseq.operators.lookahead import push_once_fn
from asyncseq.operators.lookahead import tail_once
from asyncseq.operators.lookahead import unshift_once
from asyncseq.operators.lookahead import unshift_once_fn
from asyncseq.operators.mapping import exclude_null_once
from asyncseq.operators.mapping import exclude_once
from asyncseq.operators.mapping import exclude_once_fn
from asyncseq.operators.mapping import filter_once
from asyncseq.operators.mapping import filter_once_fn
from asyncseq.operators.mapping import map_once
from asyncseq.operators.mapping import map_once_fn
from asyncseq.operators.mapping import remove_once
from asyncseq.operators.mapping import remove_once_fn
from asyncseq.operators.mapping import scan1_once
from asyncseq.operators.mapping import scan1_once_fn
from asyncseq.operators.mapping import scan_once
from asyncseq.operators.mapping import scan_once_fn
from asyncseq.operators.mapping import take_until_once
from asyncseq.operators.mapping import take_until_once_fn
from asyncseq.operators.mapping import take_while_once
from asyncseq.operators.mapping import take_while_once_fn
from asyncseq.operators.slicing import drop_once
from asyncseq.operators.slicing import drop_once_fn
from asyncseq.operators.slicing import drop_until_once
from asyncseq.operators.slicing import drop_until_once_fn
from asyncseq.operators.slicing import drop_while_once
from asyncseq.operators.slicing import drop_while_once_fn
from asyncseq.operators.slicing import exclude_first_once
from asyncseq.operators.slicing import exclude_first_once_fn
from asyncseq.operators.slicing import remove_first_once
from asyncseq.operators.slicing import remove_first_once_fn
from asyncseq.operators.slicing import slice_once
from asyncseq.operators.slicing import slice_once_fn
from asyncseq.operators.slicing import take_once
from asyncseq.operators.slicing import take_once_fn
from asyncseq.operators.terminal import all_once
from asyncseq.operators.terminal import all_once_fn
from asyncseq.operators.terminal import and_once
from asyncseq.operators.terminal import any_once
from asyncseq.operators.terminal import any_once_fn
from asyncseq.operators.terminal import average_once
from asyncseq.operators.terminal import contains_once
from asyncseq.operators.terminal import contains_once_fn
from asyncseq.operators.terminal import empty_once
from asyncseq.operators.terminal import find_index_once
from asyncseq.operators.terminal import find_index_once_fn
from asyncseq.operators.terminal import find_once
from asyncseq.operators.terminal import find_once_fn
from asyncseq.operators.terminal import first_once
from asyncseq.operators.terminal import fold1_once
from asyncseq.operators.terminal import fold1_once_fn
from asyncseq.operators.terminal import fold_once
from asyncseq.operators.terminal import fold_once_fn
from asyncseq.operators.terminal import for_each_once
from asyncseq.operators.terminal import for_each_once_fn
from asyncseq.operators.terminal import index_of_once
from asyncseq.operators.terminal import index_of_once_fn
from asyncseq.operators.terminal import index_once
from asyncseq.operators.terminal import index_once_fn
from asyncseq.operators.terminal import last_once
from asyncseq.operators.terminal import maximum_by_once
from asyncseq.operators.terminal import maximum_by_once_fn
from asyncseq.operators.terminal import maximum_once
from asyncseq.operators.terminal import maximum_once_fn
from asyncseq.operators.terminal import minimum_by_once
from asyncseq.operators.terminal import minimum_by_once_fn
from asyncseq.operators.terminal import minimum_once
from asyncseq.operators.terminal import minimum_once_fn
from asyncseq.operators.terminal import none_null_once
from asyncseq.operators.terminal import not_empty_once
from asyncseq.operators.terminal import only_once
from asyncseq.operators.terminal import or_once
from asyncseq.operators.terminal import product_once
from asyncseq.operators.terminal import sum_once
from asyncseq.operators.terminal import to_list_once
from asyncseq.operators.terminal import to_set_once

__all__ = [
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
