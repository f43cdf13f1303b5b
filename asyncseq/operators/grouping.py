"""Terminal operators that group elements into a dict by a computed key."""

from asyncseq.adapter import async_iterator
from asyncseq.helpers import with_index
from asyncseq.types import AsyncIteratorLike
from asyncseq.types import Selector
from asyncseq.types import TerminalFunction


async def key_by_once[T, K](source: AsyncIteratorLike[T], select: Selector[T, K]) -> dict[K, list[T]]:
  """Group elements by key.

  Args:
      source: The producer to drain.
      select: Called as `select(element)` or `select(element, index)`.

  Returns:
      A dict mapping each key to the list of elements with that key, in
      source order. Keys appear in the order they were first seen.

  Example:
      >>> await key_by_once(["apple", "avocado", "banana"], lambda s: s[0])
      {'a': ['apple', 'avocado'], 'b': ['banana']}
  """
  key_of = with_index(select)
  groups: dict[K, list[T]] = {}
  index = 0
  async for element in async_iterator(source):
    groups.setdefault(key_of(element, index), []).append(element)
    index += 1
  return groups


def key_by_once_fn[T, K](select: Selector[T, K]) -> TerminalFunction[T, dict[K, list[T]]]:
  return lambda source: key_by_once(source, select)


async def key_first_by_once[T, K](source: AsyncIteratorLike[T], select: Selector[T, K]) -> dict[K, T]:
  """Map each key to the first element that has it."""
  key_of = with_index(select)
  firsts: dict[K, T] = {}
  index = 0
  async for element in async_iterator(source):
    firsts.setdefault(key_of(element, index), element)
    index += 1
  return firsts


def key_first_by_once_fn[T, K](select: Selector[T, K]) -> TerminalFunction[T, dict[K, T]]:
  return lambda source: key_first_by_once(source, select)


async def key_last_by_once[T, K](source: AsyncIteratorLike[T], select: Selector[T, K]) -> dict[K, T]:
  """Map each key to the last element that has it.

  Overwriting an existing key keeps its original position, so keys still
  appear in the order they were first seen.
  """
  key_of = with_index(select)
  lasts: dict[K, T] = {}
  index = 0
  async for element in async_iterator(source):
    lasts[key_of(element, index)] = element
    index += 1
  return lasts


def key_last_by_once_fn[T, K](select: Selector[T, K]) -> TerminalFunction[T, dict[K, T]]:
  return lambda source: key_last_by_once(source, select)
