"""Exceptions raised by asyncseq operators."""


class AsyncSeqError(Exception):
  """Base class for errors raised by asyncseq itself.

  Errors raised by an upstream source or by a user callback are never wrapped
  in this type; they propagate to the consumer unchanged.
  """

  pass


class EmptyInputError(AsyncSeqError, ValueError):
  """Raised when an operator that needs a seed element gets an empty producer."""

  def __init__(self, operation: str) -> None:
    super().__init__(f"{operation}() requires at least one element, but the producer was empty.")
    self.operation = operation


class InvalidArgumentError(AsyncSeqError, ValueError):
  """Raised when a positional argument is negative, non-finite or not an integer."""

  def __init__(self, name: str, value: object) -> None:
    super().__init__(f"{name} must be a non-negative integer, not {value!r}")
    self.name = name
    self.value = value
