"""Server-sent event decoding for streamed completions.

Only the parts of the event-stream format used by the inference API are
handled: ``data`` fields, the ``[DONE]`` sentinel, comments and blank lines.
See https://html.spec.whatwg.org/multipage/server-sent-events.html
"""

import logging
from typing import Generic, Iterator, Optional, Protocol, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from ghmodels.exceptions import (
    EventDecodeError,
    IncompleteStreamError,
    UnexpectedEventError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

DONE_MARKER = "[DONE]"


class LineStream(Protocol):
    """A closable source of text lines, e.g. an open ``httpx.Response``."""

    def iter_lines(self) -> Iterator[str]: ...

    def close(self) -> None: ...


class Reader(Protocol[T_co]):
    """Reads events from an event stream."""

    def read(self) -> T_co:
        """Read the next event. Raises EOFError when there are no further events."""
        ...

    def close(self) -> None:
        """Close the reader and the stream underneath it."""
        ...


class EventReader(Generic[T]):
    """Decodes ``data`` events from a stream into values of ``payload_type``.

    The reader owns the stream from construction until ``close()``. Use it as
    a context manager to release the stream on every exit path::

        with EventReader(response, ChatCompletion) as reader:
            for completion in reader:
                ...
    """

    def __init__(self, stream: LineStream, payload_type: Type[T]):
        self._stream = stream
        self._lines: Optional[Iterator[str]] = None
        self._adapter: TypeAdapter[T] = TypeAdapter(payload_type)
        self._closed = False

    def __enter__(self) -> "EventReader[T]":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.read()
            except EOFError:
                return

    def read(self) -> T:
        """
        Read the next event from the stream.

        Returns:
            The next ``data`` payload, decoded into ``payload_type``

        Raises:
            EOFError: The ``[DONE]`` marker was reached
            EventDecodeError: The payload is not valid for ``payload_type``
            UnexpectedEventError: The stream carried a field other than ``data``
            IncompleteStreamError: The stream ended without a ``[DONE]`` marker
        """
        if self._lines is None:
            self._lines = self._stream.iter_lines()

        # Errors raised by the stream itself propagate unchanged.
        for line in self._lines:
            if not line or line.startswith(":"):
                continue

            if ":" not in line:
                # Not a field line; nothing this API sends.
                continue

            field, value = line.split(":", 1)
            field, value = field.strip(), value.strip()

            if field != "data":
                raise UnexpectedEventError(field)

            if value == DONE_MARKER:
                logger.debug("Event stream reached [DONE]")
                raise EOFError("end of event stream")

            try:
                return self._adapter.validate_json(value)
            except ValidationError as e:
                raise EventDecodeError(f"invalid event payload: {e}") from e

        logger.debug("Event stream closed without [DONE]")
        raise IncompleteStreamError()

    def close(self) -> None:
        """Close the reader and release the underlying stream."""
        if self._closed:
            return
        self._closed = True
        self._stream.close()
