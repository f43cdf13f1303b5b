"""Element-wise operators: each element is transformed or rejected on its own."""

from collections.abc import AsyncIterator
from collections.abc import Callable

from asyncseq.adapter import async_iterator
from asyncseq.errors import EmptyInputError
from asyncseq.helpers import resolve
from asyncseq.helpers import with_index
from asyncseq.ordering import equal as default_equal
from asyncseq.ordering import not_null
from asyncseq.types import AsyncIteratorLike
from asyncseq.types import Equality
from asyncseq.types import Phase
from asyncseq.types import Predicate
from asyncseq.types import Producer
from asyncseq.types import ProducerFunction
from asyncseq.types import Selector


class MapProducer[T, U](Producer[U]):
  """Applies a selector to every element. The index counts emitted elements."""

  def __init__(self, upstream: AsyncIterator[T], selector: Selector[T, U]) -> None:
    self._upstream = upstream
    self._selector = with_index(selector)
    self._index = 0

  async def _advance(self) -> U:
    element = await anext(self._upstream)
    value = self._selector(element, self._index)
    self._index += 1
    return value


class FilterProducer[T](Producer[T]):
  """Keeps elements whose predicate result equals `keep`.

  The index passed to the predicate counts every examined element, including
  the rejected ones.
  """

  def __init__(self, upstream: AsyncIterator[T], predicate: Predicate[T], keep: bool = True) -> None:
    self._upstream = upstream
    self._predicate = with_index(predicate)
    self._keep = keep
    self._index = 0

  async def _advance(self) -> T:
    while True:
      element = await anext(self._upstream)
      index = self._index
      self._index += 1
      if bool(await resolve(self._predicate(element, index))) is self._keep:
        return element


class ScanProducer[T, U](Producer[U]):
  """Yields the running accumulator after each element.

  With `seeded=False` the first element becomes the accumulator and is
  yielded as is; the remaining elements are indexed from 1.
  """

  def __init__(
    self,
    upstream: AsyncIterator[T],
    reducer: Callable[..., U],
    initial: U | None = None,
    *,
    seeded: bool = True,
  ) -> None:
    self._upstream = upstream
    self._reducer = with_index(reducer, arity=2)
    self._accumulator = initial
    self._index = 0
    self.phase = Phase.DURING if seeded else Phase.BEFORE

  async def _advance(self) -> U:
    match self.phase:
      case Phase.BEFORE:
        try:
          first = await anext(self._upstream)
        except StopAsyncIteration:
          raise EmptyInputError("scan1_once") from None
        self._accumulator = first  # type: ignore
        self._index = 1
        self.phase = Phase.DURING
        return first  # type: ignore
      case _:
        element = await anext(self._upstream)
        self._accumulator = self._reducer(self._accumulator, element, self._index)
        self._index += 1
        return self._accumulator  # type: ignore


class TakeWhileProducer[T](Producer[T]):
  """Passes elements through until the predicate first fails.

  The failing element is consumed from upstream but never emitted, and the
  producer finishes without advancing upstream again.
  """

  def __init__(self, upstream: AsyncIterator[T], predicate: Predicate[T], *, until: bool = False) -> None:
    self._upstream = upstream
    self._predicate = with_index(predicate)
    self._until = until
    self._index = 0

  async def _advance(self) -> T:
    element = await anext(self._upstream)
    if bool(await resolve(self._predicate(element, self._index))) is self._until:
      self._finish()
    self._index += 1
    return element


def map_once[T, U](source: AsyncIteratorLike[T], selector: Selector[T, U]) -> Producer[U]:
  """Transform each element of a producer.

  Args:
      source: The producer to read from. It must not be used elsewhere.
      selector: Called as `selector(element)` or `selector(element, index)`.

  Returns:
      A producer of the selector's results.
  """
  return MapProducer(async_iterator(source), selector)


def map_once_fn[T, U](selector: Selector[T, U]) -> ProducerFunction[T, U]:
  return lambda source: map_once(source, selector)


def filter_once[T](source: AsyncIteratorLike[T], predicate: Predicate[T]) -> Producer[T]:
  """Keep only the elements for which `predicate(element[, index])` is truthy."""
  return FilterProducer(async_iterator(source), predicate)


def filter_once_fn[T](predicate: Predicate[T]) -> ProducerFunction[T, T]:
  return lambda source: filter_once(source, predicate)


def exclude_once[T](source: AsyncIteratorLike[T], predicate: Predicate[T]) -> Producer[T]:
  """Drop the elements for which `predicate(element[, index])` is truthy."""
  return FilterProducer(async_iterator(source), predicate, keep=False)


def exclude_once_fn[T](predicate: Predicate[T]) -> ProducerFunction[T, T]:
  return lambda source: exclude_once(source, predicate)


def exclude_null_once[T](source: AsyncIteratorLike[T | None]) -> Producer[T]:
  """Drop every `None` element."""
  return FilterProducer(async_iterator(source), not_null)  # type: ignore


def remove_once[T](source: AsyncIteratorLike[T], value: T, equal: Equality[T] = default_equal) -> Producer[T]:
  """Drop every element equal to `value`.

  Args:
      source: The producer to read from.
      value: The value to remove.
      equal: Element equality, `==` by default.

  Returns:
      A producer of the remaining elements.
  """
  return FilterProducer(async_iterator(source), lambda element: equal(element, value), keep=False)


def remove_once_fn[T](value: T, equal: Equality[T] = default_equal) -> ProducerFunction[T, T]:
  return lambda source: remove_once(source, value, equal)


def scan_once[T, U](source: AsyncIteratorLike[T], reducer: Callable[..., U], initial: U) -> Producer[U]:
  """Yield each intermediate result of a left fold.

  Args:
      source: The producer to read from.
      reducer: Called as `reducer(accumulator, element)` or
               `reducer(accumulator, element, index)`.
      initial: The starting accumulator. It is not itself yielded.

  Returns:
      A producer of accumulators, one per upstream element.

  Example:
      >>> await to_list_once(scan_once([1, 2, 3], lambda a, e: a + e, 0))  # [1, 3, 6]
  """
  return ScanProducer(async_iterator(source), reducer, initial)


def scan_once_fn[T, U](reducer: Callable[..., U], initial: U) -> ProducerFunction[T, U]:
  return lambda source: scan_once(source, reducer, initial)


def scan1_once[T](source: AsyncIteratorLike[T], reducer: Callable[..., T]) -> Producer[T]:
  """Like `scan_once`, seeded with the first element, which is also yielded.

  Raises:
      EmptyInputError: On the first advance, if the source has no elements.
  """
  return ScanProducer(async_iterator(source), reducer, seeded=False)


def scan1_once_fn[T](reducer: Callable[..., T]) -> ProducerFunction[T, T]:
  return lambda source: scan1_once(source, reducer)


def take_while_once[T](source: AsyncIteratorLike[T], predicate: Predicate[T]) -> Producer[T]:
  """Emit elements while `predicate(element[, index])` holds."""
  return TakeWhileProducer(async_iterator(source), predicate)


def take_while_once_fn[T](predicate: Predicate[T]) -> ProducerFunction[T, T]:
  return lambda source: take_while_once(source, predicate)


def take_until_once[T](source: AsyncIteratorLike[T], predicate: Predicate[T]) -> Producer[T]:
  """Emit elements until `predicate(element[, index])` first holds."""
  return TakeWhileProducer(async_iterator(source), predicate, until=True)


def take_until_once_fn[T](predicate: Predicate[T]) -> ProducerFunction[T, T]:
  return lambda source: take_until_once(source, predicate)
