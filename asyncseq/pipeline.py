# pipeline.py
from collections.abc import Callable
from typing import Any

from asyncseq.adapter import async_iterator
from asyncseq.operators import concat_map_once
from asyncseq.operators import concat_once
from asyncseq.operators import drop_once
from asyncseq.operators import drop_while_once
from asyncseq.operators import exclude_once
from asyncseq.operators import filter_once
from asyncseq.operators import fold_once
from asyncseq.operators import for_each_once
from asyncseq.operators import map_once
from asyncseq.operators import pairwise_once
from asyncseq.operators import scan_once
from asyncseq.operators import slice_once
from asyncseq.operators import take_once
from asyncseq.operators import take_while_once
from asyncseq.operators import to_list_once
from asyncseq.operators import to_set_once
from asyncseq.types import AsyncIteratorLike
from asyncseq.types import Predicate
from asyncseq.types import Producer
from asyncseq.types import Selector


class Pipeline[T]:
  """Holds a producer and applies operators to it, left to right.

  A Pipeline is a fluent wrapper over the `_once` operator functions. Any
  curried `_fn` operator, or any callable taking a producer and returning
  something producer-like, can be applied with `apply`. Terminal methods are
  coroutines.

  Example:
      >>> result = await (
      ...   Pipeline([1, 2, 3, 4, 5])
      ...   .filter(lambda x: x % 2 == 0)
      ...   .apply(map_once_fn(lambda x: x * 2))
      ...   .to_list()
      ... )
      >>> result  # [4, 8]

  Note:
      Like every producer, a pipeline can be consumed only once. Operations
      that drain it leave it exhausted.
  """

  def __init__(self, *sources: AsyncIteratorLike[T]) -> None:
    """Initialize a pipeline with one or more sources.

    Args:
        *sources: One or more sources in any shape `async_iterator` accepts.
                  If several are provided, they are concatenated.

    Raises:
        ValueError: If no sources are provided.
    """
    if len(sources) == 0:
      raise ValueError("At least one data source must be provided to Pipeline.")
    self.processed_data: Producer[T] = concat_once(sources) if len(sources) > 1 else async_iterator(sources[0])

  def apply[U](self, operator: Callable[[Producer[T]], AsyncIteratorLike[U]]) -> "Pipeline[U]":
    """Apply an operator to the current producer.

    Args:
        operator: A curried operator such as `take_once_fn(3)`, or any
                  callable that takes a producer and returns a source.

    Returns:
        The same Pipeline instance, now wrapping the operator's result.

    Raises:
        TypeError: If the operator is not callable.
    """
    if not callable(operator):
      raise TypeError(f"Operator must be a callable taking a producer, not {type(operator).__name__}")

    self.processed_data = async_iterator(operator(self.processed_data))  # type: ignore
    return self  # type: ignore

  def map[U](self, selector: Selector[T, U]) -> "Pipeline[U]":
    return self.apply(lambda producer: map_once(producer, selector))

  def filter(self, predicate: Predicate[T]) -> "Pipeline[T]":
    return self.apply(lambda producer: filter_once(producer, predicate))

  def exclude(self, predicate: Predicate[T]) -> "Pipeline[T]":
    return self.apply(lambda producer: exclude_once(producer, predicate))

  def take(self, count: int) -> "Pipeline[T]":
    return self.apply(lambda producer: take_once(producer, count))

  def drop(self, count: int) -> "Pipeline[T]":
    return self.apply(lambda producer: drop_once(producer, count))

  def slice(self, start: int = 0, end: int | None = None) -> "Pipeline[T]":
    return self.apply(lambda producer: slice_once(producer, start, end))

  def take_while(self, predicate: Predicate[T]) -> "Pipeline[T]":
    return self.apply(lambda producer: take_while_once(producer, predicate))

  def drop_while(self, predicate: Predicate[T]) -> "Pipeline[T]":
    return self.apply(lambda producer: drop_while_once(producer, predicate))

  def scan[U](self, reducer: Callable[..., U], initial: U) -> "Pipeline[U]":
    return self.apply(lambda producer: scan_once(producer, reducer, initial))

  def concat_map[U](self, selector: Selector[T, AsyncIteratorLike[U]]) -> "Pipeline[U]":
    return self.apply(lambda producer: concat_map_once(producer, selector))

  def pairwise(self) -> "Pipeline[tuple[T, T]]":
    return self.apply(pairwise_once)

  def __aiter__(self) -> Producer[T]:
    """Allow the pipeline to be consumed with `async for`.

    Note:
        This operation consumes the pipeline's producer, making subsequent
        operations on the same pipeline return empty results.
    """
    return self.processed_data

  async def to_list(self) -> list[T]:
    """Execute the pipeline and return the results as a list (terminal operation)."""
    return await to_list_once(self.processed_data)

  async def to_set(self) -> set[T]:
    """Execute the pipeline and return the results as a set (terminal operation)."""
    return await to_set_once(self.processed_data)

  async def fold[U](self, reducer: Callable[..., U], initial: U) -> U:
    """Reduce the pipeline to a single value (terminal operation)."""
    return await fold_once(self.processed_data, reducer, initial)

  async def each(self, function: Callable[..., Any]) -> None:
    """Apply a function to each element for its side effects (terminal operation).

    Args:
        function: Called as `function(element)` or `function(element, index)`.
                  If it returns an awaitable, the awaitable is awaited before
                  the next element is pulled.
    """
    await for_each_once(self.processed_data, function)

  async def first(self, n: int = 1) -> list[T]:
    """Get the first n elements of the pipeline (terminal operation).

    Args:
        n: The number of elements to retrieve. Must be at least 1.

    Returns:
        A list containing the first n elements, or fewer if the pipeline
        contains fewer than n elements.

    Raises:
        AssertionError: If n is less than 1.

    Note:
        This operation partially consumes the pipeline's producer. No
        element after the n-th is pulled, so subsequent operations continue
        from where this operation left off.
    """
    assert n >= 1, "n must be at least 1"
    return await to_list_once(take_once(self.processed_data, n))

  async def consume(self) -> None:
    """Drain the pipeline without collecting results (terminal operation)."""
    async for _ in self.processed_data:
      pass
