"""Normalization of every accepted source shape into a `Producer`."""

import asyncio
from collections.abc import AsyncIterator
from collections.abc import Awaitable
from collections.abc import Iterator
from enum import Enum
import logging
from typing import Any

from asyncseq.helpers import is_awaitable
from asyncseq.helpers import resolve
from asyncseq.types import AsyncIteratorLike
from asyncseq.types import Producer

logger = logging.getLogger(__name__)


class SourceKind(Enum):
  """The shape of an input, decided once when it is adapted."""

  PRODUCER = "producer"
  ASYNC_ITERABLE = "async_iterable"
  SYNC_ITERABLE = "sync_iterable"
  DEFERRED = "deferred"
  ASYNC_PRODUCER = "async_producer"
  SYNC_PRODUCER = "sync_producer"


def classify(source: object) -> SourceKind:
  """Decide which shape a source has by probing its capabilities.

  The order matters: some objects are both async and sync iterable, and the
  async capability wins. Awaitables other than futures are only considered
  after both iteration protocols, and the bare `__anext__`/`__next__`
  primitives last.

  Args:
      source: Any value passed to an operator as a producer.

  Returns:
      The `SourceKind` tag for the source.

  Raises:
      TypeError: If the source supports none of the accepted protocols.
  """
  match source:
    case Producer():
      return SourceKind.PRODUCER
    case _ if hasattr(source, "__aiter__"):
      return SourceKind.ASYNC_ITERABLE
    # Futures define __iter__ as an alias of __await__; they are not containers.
    case _ if asyncio.isfuture(source):
      return SourceKind.DEFERRED
    case _ if hasattr(source, "__iter__"):
      return SourceKind.SYNC_ITERABLE
    case _ if is_awaitable(source):
      return SourceKind.DEFERRED
    case _ if hasattr(source, "__anext__"):
      return SourceKind.ASYNC_PRODUCER
    case _ if hasattr(source, "__next__"):
      return SourceKind.SYNC_PRODUCER
    case _:
      raise TypeError(f"Cannot iterate asynchronously over {type(source).__name__} object")


class AsyncSource[T](Producer[T]):
  """Drives an async iterator, awaiting any element that is itself deferred."""

  def __init__(self, iterator: AsyncIterator[T | Awaitable[T]]) -> None:
    self._iterator = iterator

  async def _advance(self) -> T:
    return await resolve(await self._iterator.__anext__())


class SyncSource[T](Producer[T]):
  """Drives a sync iterator one step per advance, awaiting deferred elements."""

  def __init__(self, iterator: Iterator[T | Awaitable[T]]) -> None:
    self._iterator = iterator

  async def _advance(self) -> T:
    try:
      element = next(self._iterator)
    except StopIteration:
      self._finish()
    return await resolve(element)


class DeferredSource[T](Producer[T]):
  """
  Wraps an awaitable that resolves to an iterator or iterable.

  The awaitable is turned into a future on the first advance, and that one
  future is shared by every advance issued before it settles. The producer
  built from the resolved value is cached and driven by all later advances.
  """

  def __init__(self, deferred: Awaitable[Any]) -> None:
    self._deferred = deferred
    self._pending: asyncio.Future[Any] | None = None
    self._inner: Producer[T] | None = None

  async def _inner_producer(self) -> Producer[T]:
    if self._inner is None:
      if self._pending is None:
        self._pending = asyncio.ensure_future(self._deferred)
      resolved = await self._pending
      if self._inner is None:
        if is_awaitable(resolved):
          raise TypeError("A deferred source must resolve to an iterator or iterable, not another awaitable")
        logger.debug("Deferred source resolved to %s", type(resolved).__name__)
        self._inner = async_iterator(resolved)
    return self._inner

  async def _advance(self) -> T:
    inner = await self._inner_producer()
    return await inner.__anext__()


def async_iterator[T](source: AsyncIteratorLike[T]) -> Producer[T]:
  """Normalize any accepted source into a `Producer`.

  Accepted shapes are async iterators and iterables, sync iterators and
  iterables whose elements may be awaitables, awaitables resolving to any of
  those, and objects exposing only `__anext__` or `__next__`.

  Args:
      source: The value to adapt.

  Returns:
      A single-consumer producer yielding the source's elements, each one
      already awaited if it was deferred.

  Raises:
      TypeError: If the source supports none of the accepted protocols.

  Example:
      >>> producer = async_iterator([1, asyncio.sleep(0, 2), 3])
      >>> await to_list_once(producer)  # [1, 2, 3]
  """
  kind = classify(source)
  logger.debug("Adapting %s source of type %s", kind.value, type(source).__name__)

  match kind:
    case SourceKind.PRODUCER:
      return source  # type: ignore
    case SourceKind.ASYNC_ITERABLE:
      return AsyncSource(aiter(source))  # type: ignore
    case SourceKind.SYNC_ITERABLE:
      return SyncSource(iter(source))  # type: ignore
    case SourceKind.DEFERRED:
      return DeferredSource(source)  # type: ignore
    case SourceKind.ASYNC_PRODUCER:
      return AsyncSource(source)  # type: ignore
    case SourceKind.SYNC_PRODUCER:
      return SyncSource(source)  # type: ignore
