"""Operators driven by more than one producer."""

import asyncio
from collections.abc import AsyncIterator

from asyncseq.adapter import async_iterator
from asyncseq.helpers import resolve
from asyncseq.operators.mapping import map_once
from asyncseq.ordering import equal as default_equal
from asyncseq.types import AsyncIteratorLike
from asyncseq.types import Equality
from asyncseq.types import Phase
from asyncseq.types import Producer
from asyncseq.types import ProducerFunction
from asyncseq.types import Selector
from asyncseq.types import Step
from asyncseq.types import TerminalFunction
from asyncseq.types import pull


async def pull_both[A, B](a: AsyncIterator[A], b: AsyncIterator[B]) -> tuple[Step[A], Step[B]]:
  """Request the next step from two producers together and wait for both.

  Both advances are in flight at the same time, but the caller only sees
  their outcomes once both have settled, so two combined steps never overlap.
  """
  return await asyncio.gather(pull(a), pull(b))


class ZipProducer[A, B](Producer[tuple[A, B]]):
  """Pairs elements from two producers until either is exhausted."""

  def __init__(self, a: AsyncIterator[A], b: AsyncIterator[B]) -> None:
    self._a = a
    self._b = b

  async def _advance(self) -> tuple[A, B]:
    a, b = await pull_both(self._a, self._b)
    if not (a.has_value and b.has_value):
      self._finish()
    return a.value, b.value  # type: ignore


class ConcatProducer[T](Producer[T]):
  """
  Flattens a producer of producers.

  `BEFORE` means the next inner producer must be fetched from the outer one;
  `DURING` means an inner producer is being drained. An exhausted inner
  producer sends the machine back to `BEFORE`, so empty inners are skipped.
  """

  def __init__(self, outer: AsyncIterator[AsyncIteratorLike[T]]) -> None:
    self._outer = outer
    self._inner: Producer[T] | None = None
    self.phase = Phase.BEFORE

  async def _advance(self) -> T:
    while True:
      match self.phase:
        case Phase.BEFORE:
          self._inner = async_iterator(await anext(self._outer))
          self.phase = Phase.DURING
        case _:
          step = await pull(self._inner)  # type: ignore
          if step.has_value:
            return step.value  # type: ignore
          self._inner = None
          self.phase = Phase.BEFORE


def zip_once[A, B](a: AsyncIteratorLike[A], b: AsyncIteratorLike[B]) -> Producer[tuple[A, B]]:
  """Emit `(a_element, b_element)` tuples, stopping when either side runs out."""
  return ZipProducer(async_iterator(a), async_iterator(b))


def zip_once_fn[A, B](b: AsyncIteratorLike[B]) -> ProducerFunction[A, tuple[A, B]]:
  return lambda a: zip_once(a, b)


async def equal_once[T](
  a: AsyncIteratorLike[T], b: AsyncIteratorLike[T], equal: Equality[T] = default_equal
) -> bool:
  """Check if two producers yield equal elements in the same order.

  Args:
      a: The first producer.
      b: The second producer.
      equal: Element equality, `==` by default. To compare producers of
             producers by content, pass `equal_once` itself.

  Returns:
      True if both producers have the same length and pairwise equal
      elements. Comparison stops at the first mismatch.
  """
  a, b = async_iterator(a), async_iterator(b)
  while True:
    x, y = await pull_both(a, b)
    if not (x.has_value and y.has_value):
      return x.has_value == y.has_value
    if not await resolve(equal(x.value, y.value)):  # type: ignore
      return False


def equal_once_fn[T](b: AsyncIteratorLike[T], equal: Equality[T] = default_equal) -> TerminalFunction[T, bool]:
  return lambda a: equal_once(a, b, equal)


async def not_equal_once[T](
  a: AsyncIteratorLike[T], b: AsyncIteratorLike[T], equal: Equality[T] = default_equal
) -> bool:
  """The negation of `equal_once`."""
  return not await equal_once(a, b, equal)


def not_equal_once_fn[T](b: AsyncIteratorLike[T], equal: Equality[T] = default_equal) -> TerminalFunction[T, bool]:
  return lambda a: not_equal_once(a, b, equal)


async def prefix_match_once[T](
  source: AsyncIteratorLike[T], prefix: AsyncIteratorLike[T], equal: Equality[T] = default_equal
) -> bool:
  """Check if `source` starts with the elements of `prefix`.

  An empty prefix matches any source. Both producers are advanced together,
  so `source` may be read one element past the end of `prefix`.
  """
  source, prefix = async_iterator(source), async_iterator(prefix)
  while True:
    x, y = await pull_both(source, prefix)
    if not y.has_value:
      return True
    if not x.has_value or not await resolve(equal(x.value, y.value)):  # type: ignore
      return False


def prefix_match_once_fn[T](
  prefix: AsyncIteratorLike[T], equal: Equality[T] = default_equal
) -> TerminalFunction[T, bool]:
  return lambda source: prefix_match_once(source, prefix, equal)


def concat_once[T](producers: AsyncIteratorLike[AsyncIteratorLike[T]]) -> Producer[T]:
  """Emit every element of every inner producer, one inner producer at a time.

  Example:
      >>> await to_list_once(concat_once([[1, 2], [], [3]]))  # [1, 2, 3]
  """
  return ConcatProducer(async_iterator(producers))


def prepend_once[T](source: AsyncIteratorLike[T], prefix: AsyncIteratorLike[T]) -> Producer[T]:
  """Emit the elements of `prefix`, then those of `source`."""
  return concat_once([prefix, source])


def prepend_once_fn[T](prefix: AsyncIteratorLike[T]) -> ProducerFunction[T, T]:
  return lambda source: prepend_once(source, prefix)


def append_once[T](source: AsyncIteratorLike[T], suffix: AsyncIteratorLike[T]) -> Producer[T]:
  """Emit the elements of `source`, then those of `suffix`."""
  return concat_once([source, suffix])


def append_once_fn[T](suffix: AsyncIteratorLike[T]) -> ProducerFunction[T, T]:
  return lambda source: append_once(source, suffix)


def concat_map_once[T, U](source: AsyncIteratorLike[T], selector: Selector[T, AsyncIteratorLike[U]]) -> Producer[U]:
  """Map each element to a producer and emit all of their elements in order.

  Example:
      >>> await to_list_once(concat_map_once(["1,2", "3"], lambda s: s.split(",")))  # ["1", "2", "3"]
  """
  return concat_once(map_once(source, selector))


def concat_map_once_fn[T, U](selector: Selector[T, AsyncIteratorLike[U]]) -> ProducerFunction[T, U]:
  return lambda source: concat_map_once(source, selector)
