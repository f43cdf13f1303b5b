"""Operators that work at the ends of a producer, holding at most one element back."""

from collections.abc import AsyncIterator

from asyncseq.adapter import async_iterator
from asyncseq.operators.slicing import drop_once
from asyncseq.types import AsyncIteratorLike
from asyncseq.types import Phase
from asyncseq.types import Producer
from asyncseq.types import ProducerFunction


class InitialProducer[T](Producer[T]):
  """
  Emits every element except the last.

  One element is always held as pending: it is only emitted once upstream
  has produced the element after it, which proves it was not the last.
  """

  def __init__(self, upstream: AsyncIterator[T]) -> None:
    self._upstream = upstream
    self._pending: T | None = None
    self.phase = Phase.BEFORE

  async def _advance(self) -> T:
    if self.phase is Phase.BEFORE:
      self._pending = await anext(self._upstream)
      self.phase = Phase.DURING
    following = await anext(self._upstream)
    element, self._pending = self._pending, following
    return element  # type: ignore


class PairwiseProducer[T](Producer[tuple[T, T]]):
  """Emits `(previous, current)` for every pair of adjacent elements."""

  def __init__(self, upstream: AsyncIterator[T]) -> None:
    self._upstream = upstream
    self._previous: T | None = None
    self.phase = Phase.BEFORE

  async def _advance(self) -> tuple[T, T]:
    if self.phase is Phase.BEFORE:
      self._previous = await anext(self._upstream)
      self.phase = Phase.DURING
    current = await anext(self._upstream)
    pair = (self._previous, current)
    self._previous = current
    return pair  # type: ignore


class PushProducer[T](Producer[T]):
  """Passes upstream through, then emits one extra element."""

  def __init__(self, upstream: AsyncIterator[T], value: T) -> None:
    self._upstream = upstream
    self._value = value

  async def _advance(self) -> T:
    try:
      return await anext(self._upstream)
    except StopAsyncIteration:
      self.phase = Phase.AFTER
      return self._value


class UnshiftProducer[T](Producer[T]):
  """Emits one extra element, then passes upstream through."""

  def __init__(self, upstream: AsyncIterator[T], value: T) -> None:
    self._upstream = upstream
    self._value = value
    self.phase = Phase.BEFORE

  async def _advance(self) -> T:
    match self.phase:
      case Phase.BEFORE:
        self.phase = Phase.DURING
        return self._value
      case _:
        return await anext(self._upstream)


def tail_once[T](source: AsyncIteratorLike[T]) -> Producer[T]:
  """Emit every element except the first."""
  return drop_once(source, 1)


def initial_once[T](source: AsyncIteratorLike[T]) -> Producer[T]:
  """Emit every element except the last."""
  return InitialProducer(async_iterator(source))


def pairwise_once[T](source: AsyncIteratorLike[T]) -> Producer[tuple[T, T]]:
  """Emit each pair of adjacent elements as a tuple.

  Example:
      >>> await to_list_once(pairwise_once([1, 2, 3]))  # [(1, 2), (2, 3)]
  """
  return PairwiseProducer(async_iterator(source))


def push_once[T](source: AsyncIteratorLike[T], value: T) -> Producer[T]:
  """Emit the source's elements followed by `value`."""
  return PushProducer(async_iterator(source), value)


def push_once_fn[T](value: T) -> ProducerFunction[T, T]:
  return lambda source: push_once(source, value)


def unshift_once[T](source: AsyncIteratorLike[T], value: T) -> Producer[T]:
  """Emit `value` followed by the source's elements."""
  return UnshiftProducer(async_iterator(source), value)


def unshift_once_fn[T](value: T) -> ProducerFunction[T, T]:
  return lambda source: unshift_once(source, value)
