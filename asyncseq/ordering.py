"""
Default ordering and equality capabilities injected into operators.

Operators never hard-code how elements are compared; they take a comparator
or an equality function and fall back to the ones defined here.
"""

from typing import Any

from asyncseq.types import Comparator


def compare(a: Any, b: Any) -> int:
  """Compare two values by their natural order.

  Returns:
      A negative number if `a` sorts before `b`, zero if neither sorts
      before the other, and a positive number otherwise.
  """
  return (a > b) - (a < b)


def reverse[T](comparator: Comparator[T]) -> Comparator[T]:
  """Return a comparator that orders values the opposite way."""

  def reversed_comparator(a: T, b: T) -> int:
    return comparator(b, a)

  return reversed_comparator


def equal(a: Any, b: Any) -> bool:
  """Default element equality.

  Two producers are only equal under this function if they are the same
  object; comparing nested producers by content requires passing
  `equal_once` as the element equality explicitly.
  """
  return a is b or a == b


def not_null(value: Any) -> bool:
  return value is not None
