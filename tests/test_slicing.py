"""Tests for the positional and predicate-bounded operators."""

from fakes import CountingSource
import pytest

from asyncseq import drop_once
from asyncseq import drop_once_fn
from asyncseq import drop_until_once
from asyncseq import drop_while_once
from asyncseq import exclude_first_once
from asyncseq import pull
from asyncseq import remove_first_once
from asyncseq import slice_once
from asyncseq import slice_once_fn
from asyncseq import take_once
from asyncseq import take_once_fn
from asyncseq import to_list_once


class TestSlice:
  """Test slice_once, take_once and drop_once."""

  @pytest.mark.asyncio
  async def test_slice(self):
    """Test slicing with and without an end position."""
    assert await to_list_once(slice_once([1, 2, 3, 4], 1)) == [2, 3, 4]
    assert await to_list_once(slice_once([1, 2, 3, 4, 5], 1, 4)) == [2, 3, 4]
    assert await to_list_once(slice_once([1, 2, 3], 2)) == [3]
    assert await to_list_once(slice_once([1, 2, 3], 0, 2)) == [1, 2]
    assert await to_list_once(slice_once([], 3, 5)) == []

  @pytest.mark.asyncio
  async def test_empty_ranges(self):
    """Test an end at or before the start gives nothing."""
    assert await to_list_once(slice_once([1, 2, 3], 2, 0)) == []
    assert await to_list_once(slice_once([1, 2, 3], 1, 1)) == []

  @pytest.mark.asyncio
  async def test_negative_start_counts_as_zero(self):
    assert await to_list_once(slice_once([1, 2, 3], -2, 2)) == [1, 2]

  @pytest.mark.asyncio
  async def test_slice_matches_list_slicing(self):
    """Test slicing agrees with Python list slicing for non-negative bounds."""
    data = list(range(6))
    for start in range(8):
      for end in range(8):
        assert await to_list_once(slice_once(data, start, end)) == data[start:end]

  @pytest.mark.asyncio
  async def test_take(self):
    assert await to_list_once(take_once([], 3)) == []
    assert await to_list_once(take_once([1, 2], 3)) == [1, 2]
    assert await to_list_once(take_once([1, 2, 3, 4, 5], 3)) == [1, 2, 3]
    assert await to_list_once(take_once([1, 2, 3, 4, 5], 0)) == []

  @pytest.mark.asyncio
  async def test_drop(self):
    assert await to_list_once(drop_once([], 3)) == []
    assert await to_list_once(drop_once([1, 2], 3)) == []
    assert await to_list_once(drop_once([1, 2, 3, 4, 5], 3)) == [4, 5]
    assert await to_list_once(drop_once([1, 2, 3, 4, 5], 0)) == [1, 2, 3, 4, 5]

  @pytest.mark.asyncio
  async def test_curried_variants(self):
    """Test the curried forms match the direct forms."""
    assert await to_list_once(take_once_fn(2)([1, 2, 3])) == [1, 2]
    assert await to_list_once(drop_once_fn(2)([1, 2, 3])) == [3]
    assert await to_list_once(slice_once_fn(1, 2)([1, 2, 3])) == [2]


class TestSliceLaziness:
  """Test that slicing never pulls more than it needs."""

  @pytest.mark.asyncio
  async def test_take_from_endless_source(self):
    """Test take stops advancing the source once the count is reached."""
    source = CountingSource()
    producer = take_once(source, 3)
    assert await to_list_once(producer) == [0, 1, 2]
    assert source.pulls == 3
    assert not (await pull(producer)).has_value
    assert source.pulls == 3

  @pytest.mark.asyncio
  async def test_take_zero_pulls_nothing(self):
    source = CountingSource()
    assert await to_list_once(take_once(source, 0)) == []
    assert source.pulls == 0

  @pytest.mark.asyncio
  async def test_slice_pulls_exactly_to_end(self):
    """Test skipped elements are pulled but nothing past the end is."""
    source = CountingSource()
    assert await to_list_once(slice_once(source, 2, 5)) == [2, 3, 4]
    assert source.pulls == 5

  @pytest.mark.asyncio
  async def test_empty_range_pulls_nothing(self):
    source = CountingSource()
    assert await to_list_once(slice_once(source, 4, 1)) == []
    assert source.pulls == 0


class TestDropWhile:
  """Test drop_while_once and drop_until_once."""

  @pytest.mark.asyncio
  async def test_drop_while(self):
    assert await to_list_once(drop_while_once([], lambda _, i: i < 3)) == []
    assert await to_list_once(drop_while_once([1, 2], lambda _, i: i < 3)) == []
    assert await to_list_once(drop_while_once([1, 2, 3, 4, 5], lambda _, i: i < 3)) == [4, 5]
    assert await to_list_once(drop_while_once([1, 2, 3, 4, 5], lambda _: False)) == [1, 2, 3, 4, 5]
    assert await to_list_once(drop_while_once([1, 2, 3, 4, 3, 2, 1], lambda e: e < 4)) == [4, 3, 2, 1]

  @pytest.mark.asyncio
  async def test_drop_until(self):
    assert await to_list_once(drop_until_once([], lambda _, i: i >= 3)) == []
    assert await to_list_once(drop_until_once([1, 2], lambda _, i: i >= 3)) == []
    assert await to_list_once(drop_until_once([1, 2, 3, 4, 5], lambda _, i: i >= 3)) == [4, 5]
    assert await to_list_once(drop_until_once([1, 2, 3, 4, 5], lambda _: True)) == [1, 2, 3, 4, 5]
    assert await to_list_once(drop_until_once([1, 2, 3, 4, 3, 2, 1], lambda e: e >= 4)) == [4, 3, 2, 1]

  @pytest.mark.asyncio
  async def test_predicate_not_called_after_cutoff(self):
    """Test the predicate stops being consulted once the leading run ends."""
    seen = []

    def below_three(e):
      seen.append(e)
      return e < 3

    assert await to_list_once(drop_while_once([1, 2, 3, 1, 2], below_three)) == [3, 1, 2]
    assert seen == [1, 2, 3]


class TestExcludeFirst:
  """Test exclude_first_once and remove_first_once."""

  @pytest.mark.asyncio
  async def test_exclude_first(self):
    assert await to_list_once(exclude_first_once([1, 2, 3, 4, 3, 2, 1], lambda n: n > 2)) == [1, 2, 4, 3, 2, 1]

  @pytest.mark.asyncio
  async def test_exclude_first_without_match(self):
    assert await to_list_once(exclude_first_once([1, 2], lambda n: n > 2)) == [1, 2]

  @pytest.mark.asyncio
  async def test_remove_first(self):
    assert await to_list_once(remove_first_once([1, 2, 3, 4, 3, 2, 1], 3)) == [1, 2, 4, 3, 2, 1]

  @pytest.mark.asyncio
  async def test_remove_first_last_element(self):
    """Test removing the final element leaves an exhausted producer."""
    assert await to_list_once(remove_first_once([1, 2, 3], 3)) == [1, 2]
