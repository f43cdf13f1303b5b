"""Tests for the terminal operators and grouping."""

import math

from fakes import CountingSource
from fakes import later
import pytest

from asyncseq import EmptyInputError
from asyncseq import InvalidArgumentError
from asyncseq import all_once
from asyncseq import and_once
from asyncseq import any_once
from asyncseq import average_once
from asyncseq import compare
from asyncseq import concat_once
from asyncseq import contains_once
from asyncseq import empty_once
from asyncseq import find_index_once
from asyncseq import find_once
from asyncseq import first_once
from asyncseq import fold1_once
from asyncseq import fold_once
from asyncseq import fold_once_fn
from asyncseq import for_each_once
from asyncseq import index_of_once
from asyncseq import index_once
from asyncseq import key_by_once
from asyncseq import key_first_by_once
from asyncseq import key_last_by_once
from asyncseq import last_once
from asyncseq import maximum_by_once
from asyncseq import maximum_once
from asyncseq import minimum_by_once
from asyncseq import minimum_once
from asyncseq import none_null_once
from asyncseq import not_empty_once
from asyncseq import only_once
from asyncseq import or_once
from asyncseq import product_once
from asyncseq import reverse
from asyncseq import sum_once
from asyncseq import to_set_once


class TestCollect:
  """Test first_once, last_once, only_once and to_set_once."""

  @pytest.mark.asyncio
  async def test_first(self):
    assert await first_once([5, 6]) == 5
    assert await first_once([]) is None

  @pytest.mark.asyncio
  async def test_last(self):
    assert await last_once([]) is None
    assert await last_once([1, 2, 3]) == 3

  @pytest.mark.asyncio
  async def test_only(self):
    assert await only_once([]) is None
    assert await only_once([4]) == 4
    assert await only_once([3, 4, 5]) is None

  @pytest.mark.asyncio
  async def test_only_pulls_at_most_two(self):
    source = CountingSource()
    assert await only_once(source) is None
    assert source.pulls == 2

  @pytest.mark.asyncio
  async def test_to_set(self):
    assert await to_set_once([1, 2, 2, 3]) == {1, 2, 3}


class TestEmpty:
  """Test empty_once and not_empty_once."""

  @pytest.mark.asyncio
  async def test_empty(self):
    assert await empty_once([])
    assert not await empty_once([1])
    assert not await empty_once([1, 2, 3])

  @pytest.mark.asyncio
  async def test_not_empty(self):
    assert not await not_empty_once([])
    assert await not_empty_once([1])
    assert await not_empty_once([1, 2, 3])

  @pytest.mark.asyncio
  async def test_empty_pulls_at_most_one(self):
    source = CountingSource()
    assert not await empty_once(source)
    assert source.pulls == 1


class TestFold:
  """Test fold_once and fold1_once."""

  @pytest.mark.asyncio
  async def test_fold(self):
    assert await fold_once([1, 2, 3], lambda a, e, i: a + e * i, 0) == 8

  @pytest.mark.asyncio
  async def test_fold_empty_returns_initial(self):
    assert await fold_once([], lambda a, e: a + e, "seed") == "seed"

  @pytest.mark.asyncio
  async def test_fold_fn(self):
    assert await fold_once_fn(lambda a, e: a + e, 0)([1, 2, 3]) == 6

  @pytest.mark.asyncio
  async def test_fold1(self):
    """Test fold1 seeds with the first element and indexes the rest from 1."""
    assert await fold1_once([1, 2, 3], lambda a, e, i: a + e * i) == 9

  @pytest.mark.asyncio
  async def test_fold1_single_element(self):
    assert await fold1_once([7], lambda a, e: a + e) == 7

  @pytest.mark.asyncio
  async def test_fold1_empty(self):
    with pytest.raises(EmptyInputError):
      await fold1_once([], lambda a, e: a + e)


class TestIndex:
  """Test index_once."""

  @pytest.mark.asyncio
  async def test_index(self):
    assert await index_once([1, 2, 3, 4, 3, 2, 1], 2) == 3
    assert await index_once([1, 2, 3, 4, 3, 2, 1], 7) is None

  @pytest.mark.asyncio
  async def test_awaitable_index(self):
    """Test the index may itself be deferred."""
    assert await index_once([1, 2, 3], later(1)) == 2

  @pytest.mark.asyncio
  async def test_integral_float_index(self):
    assert await index_once([1, 2, 3], 2.0) == 3

  @pytest.mark.asyncio
  async def test_index_pulls_through_position(self):
    source = CountingSource()
    assert await index_once(source, 4) == 4
    assert source.pulls == 5

  @pytest.mark.asyncio
  @pytest.mark.parametrize("index", [-1, 1.5, math.inf, math.nan, True, "1", None])
  async def test_invalid_index(self, index):
    """Test invalid indices are rejected before the source is touched."""
    source = CountingSource()
    with pytest.raises(InvalidArgumentError):
      await index_once(source, index)
    assert source.pulls == 0

  def test_invalid_index_is_value_error(self):
    """Test callers can catch invalid indices as ValueError."""
    assert issubclass(InvalidArgumentError, ValueError)


class TestSearch:
  """Test contains_once, index_of_once, find_index_once and find_once."""

  @pytest.mark.asyncio
  async def test_contains(self):
    assert await contains_once([1, 2, 3], 1)
    assert not await contains_once([1, 2, 3], 0)

  @pytest.mark.asyncio
  async def test_contains_stops_at_match(self):
    source = CountingSource()
    assert await contains_once(source, 3)
    assert source.pulls == 4

  @pytest.mark.asyncio
  async def test_index_of(self):
    assert await index_of_once([1, 2, 3, 4, 3, 2, 1], 3) == 2
    assert await index_of_once([1, 2, 3, 4, 3, 2, 1], 5) is None

  @pytest.mark.asyncio
  async def test_find_index(self):
    assert await find_index_once([1, 2, 3, 4, 3, 2, 1], lambda n: n >= 3) == 2
    assert await find_index_once([1, 2], lambda n: n >= 3) is None

  @pytest.mark.asyncio
  async def test_find(self):
    assert await find_once([1, 2, 3, 4, 3, 2, 1], lambda n: n >= 3) == 3
    assert await find_once([1, 2], lambda n: n >= 3) is None

  @pytest.mark.asyncio
  async def test_find_with_index(self):
    assert await find_once(["a", "b", "c"], lambda _, i: i == 2) == "c"


class TestExtremes:
  """Test maximum_once, minimum_once and their keyed variants."""

  @pytest.mark.asyncio
  async def test_maximum(self):
    assert await maximum_once([1, 2, 3]) == 3
    assert await maximum_once([1, 2, 3, 4, 3, 2, 1]) == 4
    assert await maximum_once([]) is None

  @pytest.mark.asyncio
  async def test_minimum(self):
    assert await minimum_once([1, 2, 3]) == 1
    assert await minimum_once([2, 3, 4, 1, 2, 3]) == 1
    assert await minimum_once([]) is None

  @pytest.mark.asyncio
  async def test_custom_comparator(self):
    assert await maximum_once([1, 2, 3], reverse(compare)) == 1

  @pytest.mark.asyncio
  async def test_maximum_by(self):
    assert await maximum_by_once(["1", "2", "3"], int) == "3"
    assert await maximum_by_once(["1", "2", "3", "4", "3", "2", "1"], int) == "4"
    assert await maximum_by_once([], int) is None

  @pytest.mark.asyncio
  async def test_minimum_by(self):
    assert await minimum_by_once(["1", "2", "3"], int) == "1"
    assert await minimum_by_once(["2", "3", "4", "1", "2", "3"], int) == "1"
    assert await minimum_by_once([], int) is None

  @pytest.mark.asyncio
  async def test_ties_keep_earliest(self):
    """Test the earliest of several equal extremes is returned."""
    words = ["bb", "aa", "c", "dd"]
    assert await maximum_by_once(words, len) == "bb"
    assert await minimum_by_once(["x", "bb", "y"], len) == "x"


class TestArithmetic:
  """Test sum_once, product_once and average_once."""

  @pytest.mark.asyncio
  async def test_sum(self):
    assert await sum_once([1, 2, 3]) == 6
    assert await sum_once([]) == 0

  @pytest.mark.asyncio
  async def test_sum_of_concat(self):
    """Test summing a concatenation equals adding the sums of its parts."""
    for a, b in [([1, 2], [3]), ([], [4, 5]), ([6], []), ([], [])]:
      assert await sum_once(concat_once([a, b])) == await sum_once(a) + await sum_once(b)

  @pytest.mark.asyncio
  async def test_product(self):
    assert await product_once([1, 2, 3, 4]) == 24
    assert await product_once([]) == 1

  @pytest.mark.asyncio
  async def test_average(self):
    assert await average_once([1, 2, 3]) == 2
    assert await average_once([1, 2, 3, 2]) == 2
    assert await average_once([]) is None


class TestBoolean:
  """Test and_once, or_once, any_once and all_once."""

  @pytest.mark.asyncio
  async def test_and(self):
    assert await and_once([True, True, True])
    assert not await and_once([True, False, True])
    assert await and_once([])

  @pytest.mark.asyncio
  async def test_or(self):
    assert await or_once([True, False, True])
    assert not await or_once([False, False, False])
    assert not await or_once([])

  @pytest.mark.asyncio
  async def test_any(self):
    assert await any_once([1, 2, 3], lambda e: e > 2)
    assert not await any_once([1, 2, 3], lambda e: e > 4)

  @pytest.mark.asyncio
  async def test_all(self):
    assert await all_once([1, 2, 3], lambda e: e < 4)
    assert not await all_once([1, 2, 3], lambda e: e > 2)

  @pytest.mark.asyncio
  async def test_all_stops_at_first_failure(self):
    source = CountingSource()
    assert not await all_once(source, lambda e: e < 2)
    assert source.pulls == 3


class TestNoneNull:
  """Test none_null_once."""

  @pytest.mark.asyncio
  async def test_none_null(self):
    assert await none_null_once([1, 2, 3]) == [1, 2, 3]
    assert await none_null_once([1, None, 3]) is None
    assert await none_null_once([None, 2, 3]) is None
    assert await none_null_once([]) == []

  @pytest.mark.asyncio
  async def test_none_null_keeps_falsy_values(self):
    assert await none_null_once([0, "", False]) == [0, "", False]


class TestForEach:
  """Test for_each_once."""

  @pytest.mark.asyncio
  async def test_for_each(self):
    seen = []
    await for_each_once([1, 2, 3], lambda e, i: seen.append((i, e)))
    assert seen == [(0, 1), (1, 2), (2, 3)]

  @pytest.mark.asyncio
  async def test_for_each_awaits_action(self):
    """Test a coroutine action finishes before the next element is pulled."""
    seen = []

    async def record(e):
      await later(None)
      seen.append(e)

    await for_each_once([1, 2], record)
    assert seen == [1, 2]


class TestGrouping:
  """Test key_by_once, key_first_by_once and key_last_by_once."""

  @pytest.mark.asyncio
  async def test_key_by(self):
    groups = await key_by_once(["apple", "avocado", "banana"], lambda s: s[0])
    assert groups == {"a": ["apple", "avocado"], "b": ["banana"]}

  @pytest.mark.asyncio
  async def test_key_first_by(self):
    assert await key_first_by_once([1, 2, 3, 4], lambda n: n % 2) == {1: 1, 0: 2}

  @pytest.mark.asyncio
  async def test_key_last_by(self):
    assert await key_last_by_once([1, 2, 3, 4], lambda n: n % 2) == {1: 3, 0: 4}

  @pytest.mark.asyncio
  async def test_key_by_with_index(self):
    assert await key_by_once("abcd", lambda _, i: i // 2) == {0: ["a", "b"], 1: ["c", "d"]}

  @pytest.mark.asyncio
  async def test_key_by_empty(self):
    assert await key_by_once([], lambda e: e) == {}
