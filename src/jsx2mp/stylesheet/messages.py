"""
Advisory Message Sink.

Selector and declaration problems found while transforming a stylesheet are not
fatal. They are collected here so the caller can report them once the whole
stylesheet has been processed.
"""

from typing import List


class MessageSink:
  """Ordered collection of advisory error messages."""

  def __init__(self) -> None:
    self._messages: List[str] = []

  def push(self, message: str) -> None:
    self._messages.append(message)

  @property
  def messages(self) -> List[str]:
    return list(self._messages)

  @property
  def has_errors(self) -> bool:
    return len(self._messages) > 0

  def clear(self) -> None:
    self._messages.clear()


# Process-wide default used when no explicit sink is passed.
_DEFAULT_SINK = MessageSink()


def default_sink() -> MessageSink:
  return _DEFAULT_SINK


def push_error_message(message: str) -> None:
  _DEFAULT_SINK.push(message)


def get_error_messages() -> List[str]:
  return _DEFAULT_SINK.messages


def clear_error_messages() -> None:
  """Resets the default sink. Primarily for testing."""
  _DEFAULT_SINK.clear()
