from collections.abc import Awaitable
from collections.abc import Callable
import inspect
from typing import Any
from typing import TypeGuard

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def is_index_aware(func: Callable[..., Any], arity: int = 1) -> bool:
  """Check if a callback accepts an index after its regular arguments.

  Callbacks handed to operators may be written as `lambda e: ...` or as
  `lambda e, i: ...`. A callback is index-aware if it has a required
  positional parameter after its first `arity` ones.

  Args:
      func: The callback to inspect.
      arity: The number of arguments the callback always receives
             (1 for predicates and selectors, 2 for reducers).

  Returns:
      True if the callback declares a required positional parameter for the
      index, False otherwise. An optional one, such as the `chars` of
      `str.strip`, is left to its default. `*args` does not count, so
      `print` is called with the element only. Classes such as `int` and
      callables without an inspectable signature are treated as not
      index-aware.
  """
  if isinstance(func, type):
    return False
  try:
    parameters = inspect.signature(func).parameters.values()
  except (TypeError, ValueError):
    return False

  positional = [p for p in parameters if p.kind in _POSITIONAL]
  return len(positional) > arity and positional[arity].default is inspect.Parameter.empty


def with_index(func: Callable[..., Any], arity: int = 1) -> Callable[..., Any]:
  """Return a callback that always accepts a trailing index argument.

  The signature check is done once, here, rather than on every element.

  Args:
      func: A callback that may or may not accept an index.
      arity: The number of arguments the callback always receives.

  Returns:
      `func` itself if it is index-aware, otherwise a wrapper that drops
      the index before calling `func`.
  """
  if is_index_aware(func, arity):
    return func

  def without_index(*args: Any) -> Any:
    return func(*args[:-1])

  return without_index


def is_awaitable(value: object) -> TypeGuard[Awaitable[Any]]:
  """Check if a value is a deferred computation that must be awaited."""
  return inspect.isawaitable(value)


async def resolve[T](value: T | Awaitable[T]) -> T:
  """Await a value if it is deferred, otherwise return it unchanged.

  This is the single unwrapping rule applied to every element an adapted
  source produces.
  """
  if is_awaitable(value):
    return await value
  return value
