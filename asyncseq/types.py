"""
Defines the producer abstraction shared by every operator in asyncseq.

A producer is a single-consumer, forward-only async iterator. Each operator
is a small state machine that subclasses `Producer` and implements one
`_advance` method dispatching on its current `Phase`.
"""

from abc import ABC
from abc import abstractmethod
from collections.abc import AsyncIterable
from collections.abc import AsyncIterator
from collections.abc import Awaitable
from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any
from typing import NoReturn
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")

type AsyncIteratorLike[T] = (
  AsyncIterator[T]
  | Iterator[T | Awaitable[T]]
  | AsyncIterable[T]
  | Iterable[T | Awaitable[T]]
  | Awaitable[AsyncIterator[T]]
  | Awaitable[Iterator[T | Awaitable[T]]]
  | Awaitable[AsyncIterable[T]]
  | Awaitable[Iterable[T | Awaitable[T]]]
)

# Callbacks may take the element alone or the element and its index.
# Predicate and equality results may be awaitables; they are awaited before use.
type Predicate[T] = Callable[[T], Any] | Callable[[T, int], Any]
type Selector[T, U] = Callable[[T], U] | Callable[[T, int], U]
type Comparator[T] = Callable[[T, T], int]
type Equality[T] = Callable[[T, T], bool | Awaitable[bool]]
type ProducerFunction[T, U] = Callable[[AsyncIteratorLike[T]], Producer[U]]
type TerminalFunction[T, R] = Callable[[AsyncIteratorLike[T]], Awaitable[R]]


class Phase(Enum):
  """The position of a producer's state machine relative to its cutoff."""

  BEFORE = "before"
  DURING = "during"
  AFTER = "after"


@dataclass(frozen=True, slots=True)
class Step[T]:
  """The outcome of one advance: either a value or the terminal marker."""

  has_value: bool
  value: T | None = None


DONE: Step[Any] = Step(False)


class Producer[T](AsyncIterator[T], ABC):
  """
  Abstract base class for all producers.

  A producer may be advanced by exactly one consumer, one step at a time.
  Once it reports exhaustion it keeps reporting exhaustion: the `AFTER` phase
  is checked here, before any subclass logic runs, so no operator can touch
  its upstream again after it has finished.

  Note:
      Producers are "Once" objects. Passing a producer to an operator hands
      ownership to that operator; the caller must not advance it again.
  """

  phase: Phase = Phase.DURING

  def __aiter__(self) -> "Producer[T]":
    return self

  async def __anext__(self) -> T:
    match self.phase:
      case Phase.AFTER:
        raise StopAsyncIteration
      case _:
        try:
          return await self._advance()
        except StopAsyncIteration:
          self.phase = Phase.AFTER
          raise

  def _finish(self) -> NoReturn:
    """Move to the terminal phase and signal exhaustion."""
    self.phase = Phase.AFTER
    raise StopAsyncIteration

  @abstractmethod
  async def _advance(self) -> T:
    """
    Produces the next element or raises StopAsyncIteration.

    This method must be implemented by all concrete producers. It is never
    called once the producer has reached `Phase.AFTER`.
    """
    raise NotImplementedError


async def pull[T](producer: AsyncIterator[T]) -> Step[T]:
  """Advance a producer once and report the outcome as a `Step`.

  Args:
      producer: The producer to advance.

  Returns:
      A `Step` carrying the next element, or `DONE` if the producer is exhausted.
  """
  try:
    return Step(True, await anext(producer))
  except StopAsyncIteration:
    return DONE
