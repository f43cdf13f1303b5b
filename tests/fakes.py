"""Sources with observable behaviour, shared by the test modules."""

import asyncio


class CountingSource:
  """An endless async source yielding 0, 1, 2, ... that counts its advances."""

  def __init__(self) -> None:
    self.pulls = 0

  def __aiter__(self) -> "CountingSource":
    return self

  async def __anext__(self) -> int:
    value = self.pulls
    self.pulls += 1
    return value


class RawAsyncProducer:
  """Exposes only `__anext__`, with every element wrapped in a coroutine."""

  def __init__(self, values: list[int]) -> None:
    self._values = list(values)

  async def __anext__(self):
    if not self._values:
      raise StopAsyncIteration
    return asyncio.sleep(0, result=self._values.pop(0))


class RestartingIterator:
  """A badly behaved iterator that starts over after signalling exhaustion."""

  def __init__(self, values: list[int]) -> None:
    self._initial = list(values)
    self._values = list(values)

  def __next__(self) -> int:
    if self._values:
      return self._values.pop(0)
    self._values = list(self._initial)
    raise StopIteration


class FailingSource:
  """Yields the given values, then raises the given error on the next advance."""

  def __init__(self, values: list[int], error: Exception) -> None:
    self._values = list(values)
    self._error = error

  def __aiter__(self) -> "FailingSource":
    return self

  async def __anext__(self) -> int:
    if self._values:
      return self._values.pop(0)
    raise self._error


async def async_generator123():
  yield asyncio.sleep(0, result=1)
  yield asyncio.sleep(0, result=2)
  yield asyncio.sleep(0, result=3)


def generator123():
  yield 1
  yield 2
  yield 3


def awaitable_generator123():
  yield asyncio.sleep(0, result=1)
  yield asyncio.sleep(0, result=2)
  yield asyncio.sleep(0, result=3)


async def later(value):
  await asyncio.sleep(0)
  return value
