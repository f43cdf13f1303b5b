"""
Terminal operators: each drains (part of) a producer and returns one value.

These are coroutine functions rather than producers. Searches and boolean
tests stop pulling as soon as the answer is known; aggregates read the
source to the end.
"""

from collections.abc import Awaitable
from collections.abc import Callable
import math
from typing import Any

from asyncseq.adapter import async_iterator
from asyncseq.errors import EmptyInputError
from asyncseq.errors import InvalidArgumentError
from asyncseq.helpers import resolve
from asyncseq.helpers import with_index
from asyncseq.operators.slicing import drop_once
from asyncseq.ordering import compare as default_compare
from asyncseq.ordering import equal as default_equal
from asyncseq.ordering import reverse
from asyncseq.types import AsyncIteratorLike
from asyncseq.types import Comparator
from asyncseq.types import Equality
from asyncseq.types import Predicate
from asyncseq.types import Selector
from asyncseq.types import TerminalFunction
from asyncseq.types import pull


async def to_list_once[T](source: AsyncIteratorLike[T]) -> list[T]:
  """Collect every element into a list, in order."""
  return [element async for element in async_iterator(source)]


async def to_set_once[T](source: AsyncIteratorLike[T]) -> set[T]:
  """Collect every element into a set."""
  return {element async for element in async_iterator(source)}


async def first_once[T](source: AsyncIteratorLike[T]) -> T | None:
  """Return the first element, or None if the source is empty."""
  step = await pull(async_iterator(source))
  return step.value


async def last_once[T](source: AsyncIteratorLike[T]) -> T | None:
  """Return the last element, or None if the source is empty."""
  last = None
  async for element in async_iterator(source):
    last = element
  return last


async def only_once[T](source: AsyncIteratorLike[T]) -> T | None:
  """Return the single element of the source.

  Returns:
      The element if the source has exactly one, otherwise None. At most
      two elements are pulled.
  """
  producer = async_iterator(source)
  first = await pull(producer)
  if not first.has_value:
    return None
  second = await pull(producer)
  return None if second.has_value else first.value


async def empty_once(source: AsyncIteratorLike[Any]) -> bool:
  """Check if the source has no elements. At most one element is pulled."""
  step = await pull(async_iterator(source))
  return not step.has_value


async def not_empty_once(source: AsyncIteratorLike[Any]) -> bool:
  """Check if the source has at least one element. At most one element is pulled."""
  return not await empty_once(source)


async def fold_once[T, U](source: AsyncIteratorLike[T], reducer: Callable[..., U], initial: U) -> U:
  """Reduce the source to a single value, from left to right.

  Args:
      source: The producer to drain.
      reducer: Called as `reducer(accumulator, element)` or
               `reducer(accumulator, element, index)`, index counting from 0.
      initial: The starting accumulator, returned as is for an empty source.

  Returns:
      The final accumulator.
  """
  reduce = with_index(reducer, arity=2)
  accumulator = initial
  index = 0
  async for element in async_iterator(source):
    accumulator = reduce(accumulator, element, index)
    index += 1
  return accumulator


def fold_once_fn[T, U](reducer: Callable[..., U], initial: U) -> TerminalFunction[T, U]:
  return lambda source: fold_once(source, reducer, initial)


async def fold1_once[T](source: AsyncIteratorLike[T], reducer: Callable[..., T]) -> T:
  """Reduce the source using its first element as the starting accumulator.

  The remaining elements are passed to `reducer` with their position in the
  source, so the first call receives index 1.

  Raises:
      EmptyInputError: If the source has no elements.
  """
  producer = async_iterator(source)
  first = await pull(producer)
  if not first.has_value:
    raise EmptyInputError("fold1_once")

  reduce = with_index(reducer, arity=2)
  accumulator = first.value
  index = 1
  async for element in producer:
    accumulator = reduce(accumulator, element, index)
    index += 1
  return accumulator  # type: ignore


def fold1_once_fn[T](reducer: Callable[..., T]) -> TerminalFunction[T, T]:
  return lambda source: fold1_once(source, reducer)


def _check_index(index: object) -> int:
  match index:
    case bool():
      raise InvalidArgumentError("index", index)
    case int() if index >= 0:
      return index
    case float() if math.isfinite(index) and index.is_integer() and index >= 0:
      return int(index)
    case _:
      raise InvalidArgumentError("index", index)


async def index_once[T](source: AsyncIteratorLike[T], index: int | Awaitable[int]) -> T | None:
  """Return the element at position `index`.

  Args:
      source: The producer to read from.
      index: A non-negative integer, or an awaitable resolving to one.

  Returns:
      The element at `index`, or None if the source is shorter.

  Raises:
      InvalidArgumentError: If `index` is negative, not finite or not an
                            integer. The source is not touched in that case.
  """
  position = _check_index(await resolve(index))
  return await first_once(drop_once(source, position))


def index_once_fn[T](index: int | Awaitable[int]) -> TerminalFunction[T, T | None]:
  return lambda source: index_once(source, index)


async def find_index_once[T](source: AsyncIteratorLike[T], predicate: Predicate[T]) -> int | None:
  """Return the position of the first element matching the predicate, or None."""
  test = with_index(predicate)
  index = 0
  async for element in async_iterator(source):
    if await resolve(test(element, index)):
      return index
    index += 1
  return None


def find_index_once_fn[T](predicate: Predicate[T]) -> TerminalFunction[T, int | None]:
  return lambda source: find_index_once(source, predicate)


async def find_once[T](source: AsyncIteratorLike[T], predicate: Predicate[T]) -> T | None:
  """Return the first element matching the predicate, or None."""
  test = with_index(predicate)
  index = 0
  async for element in async_iterator(source):
    if await resolve(test(element, index)):
      return element
    index += 1
  return None


def find_once_fn[T](predicate: Predicate[T]) -> TerminalFunction[T, T | None]:
  return lambda source: find_once(source, predicate)


async def index_of_once[T](source: AsyncIteratorLike[T], value: T, equal: Equality[T] = default_equal) -> int | None:
  """Return the position of the first element equal to `value`, or None."""
  return await find_index_once(source, lambda element: equal(element, value))


def index_of_once_fn[T](value: T, equal: Equality[T] = default_equal) -> TerminalFunction[T, int | None]:
  return lambda source: index_of_once(source, value, equal)


async def contains_once[T](source: AsyncIteratorLike[T], value: T, equal: Equality[T] = default_equal) -> bool:
  """Check if any element equals `value`. Stops at the first match."""
  return await index_of_once(source, value, equal) is not None


def contains_once_fn[T](value: T, equal: Equality[T] = default_equal) -> TerminalFunction[T, bool]:
  return lambda source: contains_once(source, value, equal)


async def maximum_once[T](source: AsyncIteratorLike[T], compare: Comparator[T] = default_compare) -> T | None:
  """Return the greatest element, or None if the source is empty.

  Ties are resolved in favour of the earliest element: a later element only
  replaces the current candidate if it compares strictly greater.
  """
  producer = async_iterator(source)
  first = await pull(producer)
  if not first.has_value:
    return None

  result = first.value
  async for element in producer:
    if compare(element, result) > 0:  # type: ignore
      result = element
  return result


def maximum_once_fn[T](compare: Comparator[T] = default_compare) -> TerminalFunction[T, T | None]:
  return lambda source: maximum_once(source, compare)


async def minimum_once[T](source: AsyncIteratorLike[T], compare: Comparator[T] = default_compare) -> T | None:
  """Return the least element, or None if the source is empty. The earliest wins ties."""
  return await maximum_once(source, reverse(compare))


def minimum_once_fn[T](compare: Comparator[T] = default_compare) -> TerminalFunction[T, T | None]:
  return lambda source: minimum_once(source, compare)


async def maximum_by_once[T, K](
  source: AsyncIteratorLike[T], select: Selector[T, K], compare: Comparator[K] = default_compare
) -> T | None:
  """Return the element whose selected key is greatest.

  Args:
      source: The producer to drain.
      select: Called as `select(element)` or `select(element, index)` to
              compute each element's key.
      compare: Comparator applied to keys.

  Returns:
      The first element with the greatest key, or None if the source is empty.

  Example:
      >>> await maximum_by_once(["1", "2", "3", "4"], int)  # "4"
  """
  key_of = with_index(select)
  producer = async_iterator(source)
  first = await pull(producer)
  if not first.has_value:
    return None

  result = first.value
  result_key = key_of(result, 0)
  index = 1
  async for element in producer:
    key = key_of(element, index)
    if compare(key, result_key) > 0:
      result, result_key = element, key
    index += 1
  return result


def maximum_by_once_fn[T, K](
  select: Selector[T, K], compare: Comparator[K] = default_compare
) -> TerminalFunction[T, T | None]:
  return lambda source: maximum_by_once(source, select, compare)


async def minimum_by_once[T, K](
  source: AsyncIteratorLike[T], select: Selector[T, K], compare: Comparator[K] = default_compare
) -> T | None:
  """Return the first element whose selected key is least, or None if the source is empty."""
  return await maximum_by_once(source, select, reverse(compare))


def minimum_by_once_fn[T, K](
  select: Selector[T, K], compare: Comparator[K] = default_compare
) -> TerminalFunction[T, T | None]:
  return lambda source: minimum_by_once(source, select, compare)


async def sum_once(source: AsyncIteratorLike[Any]) -> Any:
  """Add up every element. An empty source sums to 0."""
  total = 0
  async for element in async_iterator(source):
    total += element
  return total


async def product_once(source: AsyncIteratorLike[Any]) -> Any:
  """Multiply every element together. An empty source gives 1."""
  total = 1
  async for element in async_iterator(source):
    total *= element
  return total


async def average_once(source: AsyncIteratorLike[Any]) -> Any | None:
  """Return the arithmetic mean of the elements, or None if the source is empty."""
  total = 0
  count = 0
  async for element in async_iterator(source):
    total += element
    count += 1
  return None if count == 0 else total / count


async def and_once(source: AsyncIteratorLike[Any]) -> bool:
  """Check that every element is truthy. True for an empty source."""
  async for element in async_iterator(source):
    if not element:
      return False
  return True


async def or_once(source: AsyncIteratorLike[Any]) -> bool:
  """Check that some element is truthy. False for an empty source."""
  async for element in async_iterator(source):
    if element:
      return True
  return False


async def any_once[T](source: AsyncIteratorLike[T], predicate: Predicate[T]) -> bool:
  """Check if `predicate(element[, index])` holds for some element."""
  return await find_index_once(source, predicate) is not None


def any_once_fn[T](predicate: Predicate[T]) -> TerminalFunction[T, bool]:
  return lambda source: any_once(source, predicate)


async def all_once[T](source: AsyncIteratorLike[T], predicate: Predicate[T]) -> bool:
  """Check if `predicate(element[, index])` holds for every element."""
  test = with_index(predicate)
  index = 0
  async for element in async_iterator(source):
    if not await resolve(test(element, index)):
      return False
    index += 1
  return True


def all_once_fn[T](predicate: Predicate[T]) -> TerminalFunction[T, bool]:
  return lambda source: all_once(source, predicate)


async def none_null_once[T](source: AsyncIteratorLike[T | None]) -> list[T] | None:
  """Collect the elements into a list, unless one of them is None.

  Returns:
      The list of elements, or None as soon as a None element is seen.
  """
  elements: list[T] = []
  async for element in async_iterator(source):
    if element is None:
      return None
    elements.append(element)
  return elements


async def for_each_once[T](source: AsyncIteratorLike[T], action: Callable[..., Any]) -> None:
  """Call `action(element[, index])` for every element, awaiting its result if needed."""
  run = with_index(action)
  index = 0
  async for element in async_iterator(source):
    await resolve(run(element, index))
    index += 1


def for_each_once_fn[T](action: Callable[..., Any]) -> TerminalFunction[T, None]:
  return lambda source: for_each_once(source, action)
