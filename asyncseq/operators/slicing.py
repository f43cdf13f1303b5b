"""Operators that cross a boundary once: before it elements are treated one way, after it another."""

from collections.abc import AsyncIterator

from asyncseq.adapter import async_iterator
from asyncseq.helpers import resolve
from asyncseq.helpers import with_index
from asyncseq.ordering import equal as default_equal
from asyncseq.types import AsyncIteratorLike
from asyncseq.types import Equality
from asyncseq.types import Phase
from asyncseq.types import Predicate
from asyncseq.types import Producer
from asyncseq.types import ProducerFunction


class SliceProducer[T](Producer[T]):
  """
  Emits the elements at positions `start` (inclusive) to `end` (exclusive).

  The state machine starts `BEFORE`, where leading elements are skipped,
  moves to `DURING` and finishes as soon as `end` elements have been counted,
  without pulling an element it would have to discard.
  """

  def __init__(self, upstream: AsyncIterator[T], start: int = 0, end: int | None = None) -> None:
    self._upstream = upstream
    self._start = max(0, start)
    self._end = None if end is None else max(self._start, end)
    self._index = 0
    self.phase = Phase.BEFORE

  async def _advance(self) -> T:
    match self.phase:
      case Phase.BEFORE:
        if self._end == self._start:
          self._finish()
        while self._index < self._start:
          await anext(self._upstream)
          self._index += 1
        self.phase = Phase.DURING
        return await self._advance()
      case _:
        if self._end is not None and self._index >= self._end:
          self._finish()
        element = await anext(self._upstream)
        self._index += 1
        return element


class DropWhileProducer[T](Producer[T]):
  """Skips the leading run of elements for which the predicate holds.

  With `until=True` the leading run is the elements for which it does not hold.
  """

  def __init__(self, upstream: AsyncIterator[T], predicate: Predicate[T], *, until: bool = False) -> None:
    self._upstream = upstream
    self._predicate = with_index(predicate)
    self._until = until
    self._index = 0
    self.phase = Phase.BEFORE

  async def _advance(self) -> T:
    match self.phase:
      case Phase.BEFORE:
        while True:
          element = await anext(self._upstream)
          index = self._index
          self._index += 1
          if bool(await resolve(self._predicate(element, index))) is self._until:
            self.phase = Phase.DURING
            return element
      case _:
        return await anext(self._upstream)


class ExcludeFirstProducer[T](Producer[T]):
  """Drops the first element matching the predicate and passes the rest through."""

  def __init__(self, upstream: AsyncIterator[T], predicate: Predicate[T]) -> None:
    self._upstream = upstream
    self._predicate = with_index(predicate)
    self._index = 0
    self.phase = Phase.BEFORE

  async def _advance(self) -> T:
    match self.phase:
      case Phase.BEFORE:
        element = await anext(self._upstream)
        index = self._index
        self._index += 1
        if not await resolve(self._predicate(element, index)):
          return element
        self.phase = Phase.DURING
        return await anext(self._upstream)
      case _:
        return await anext(self._upstream)


def slice_once[T](source: AsyncIteratorLike[T], start: int = 0, end: int | None = None) -> Producer[T]:
  """Emit the elements from position `start` up to, but excluding, `end`.

  Args:
      source: The producer to read from.
      start: The first position to emit. Negative values count as 0.
      end: The position to stop at, or None to run to the end of the source.
           If `end <= start` the result is empty.

  Returns:
      A producer of the selected elements. Once `end` is reached the
      source is never advanced again.

  Example:
      >>> await to_list_once(slice_once([1, 2, 3, 4, 5], 1, 4))  # [2, 3, 4]
  """
  return SliceProducer(async_iterator(source), start, end)


def slice_once_fn[T](start: int = 0, end: int | None = None) -> ProducerFunction[T, T]:
  return lambda source: slice_once(source, start, end)


def take_once[T](source: AsyncIteratorLike[T], count: int) -> Producer[T]:
  """Emit at most the first `count` elements."""
  return slice_once(source, 0, count)


def take_once_fn[T](count: int) -> ProducerFunction[T, T]:
  return lambda source: take_once(source, count)


def drop_once[T](source: AsyncIteratorLike[T], count: int) -> Producer[T]:
  """Skip the first `count` elements and emit the rest."""
  return slice_once(source, count)


def drop_once_fn[T](count: int) -> ProducerFunction[T, T]:
  return lambda source: drop_once(source, count)


def drop_while_once[T](source: AsyncIteratorLike[T], predicate: Predicate[T]) -> Producer[T]:
  """Skip elements while `predicate(element[, index])` holds, then emit everything."""
  return DropWhileProducer(async_iterator(source), predicate)


def drop_while_once_fn[T](predicate: Predicate[T]) -> ProducerFunction[T, T]:
  return lambda source: drop_while_once(source, predicate)


def drop_until_once[T](source: AsyncIteratorLike[T], predicate: Predicate[T]) -> Producer[T]:
  """Skip elements until `predicate(element[, index])` first holds, then emit everything."""
  return DropWhileProducer(async_iterator(source), predicate, until=True)


def drop_until_once_fn[T](predicate: Predicate[T]) -> ProducerFunction[T, T]:
  return lambda source: drop_until_once(source, predicate)


def exclude_first_once[T](source: AsyncIteratorLike[T], predicate: Predicate[T]) -> Producer[T]:
  """Drop only the first element for which `predicate(element[, index])` is truthy."""
  return ExcludeFirstProducer(async_iterator(source), predicate)


def exclude_first_once_fn[T](predicate: Predicate[T]) -> ProducerFunction[T, T]:
  return lambda source: exclude_first_once(source, predicate)


def remove_first_once[T](source: AsyncIteratorLike[T], value: T, equal: Equality[T] = default_equal) -> Producer[T]:
  """Drop only the first element equal to `value`."""
  return ExcludeFirstProducer(async_iterator(source), lambda element: equal(element, value))


def remove_first_once_fn[T](value: T, equal: Equality[T] = default_equal) -> ProducerFunction[T, T]:
  return lambda source: remove_first_once(source, value, equal)
