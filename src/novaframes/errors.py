"""Error types and error propagation between transformation stages.

Every failure in novaframes is deterministic and reported immediately:

- :class:`InvalidArgumentError` for invalid selectors (accuracy, direction,
  Earth-rotation measure, pole-offset type, ...) and missing or malformed
  vectors. It is also a :class:`ValueError`.
- :class:`TransformError` for failures inside a stage or an external
  collaborator (CIO location, CIO basis, ...). It is also a
  :class:`RuntimeError`.

Both carry an integer ``code`` mirroring the numeric status contract of the
classic NOVAS API. When a composite transform forwards a failure from one of
its stages it uses :func:`propagate`, which shifts positive codes by a
per-stage offset so that the failing stage stays identifiable, and records
the chain of stages in ``trace``.

Functions that return a float and cannot raise without breaking their
contract return ``nan`` instead and leave an :class:`ErrorRecord` that can be
read back with :func:`last_error`.
"""

from __future__ import annotations

import errno
import logging
import threading
from contextlib import contextmanager
from typing import Iterator, NamedTuple

logger = logging.getLogger(__name__)


class NovaFramesError(Exception):
    """Base class of all novaframes errors.

    Attributes:
        code: Status code. Negative codes mean the call itself was malformed,
            positive codes identify the failing step, offset by the stage that
            forwarded it.
        stage: Name of the outermost function that raised or forwarded.
        trace: Stage names from outermost to innermost.
    """

    def __init__(
        self,
        message: str,
        *,
        code: int = -1,
        stage: str | None = None,
        trace: tuple[str, ...] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.stage = stage
        if trace is None:
            trace = (stage,) if stage else ()
        self.trace = trace


class InvalidArgumentError(NovaFramesError, ValueError):
    """An argument is outside its allowed set, or a required value is missing."""


class TransformError(NovaFramesError, RuntimeError):
    """A transformation stage, or a service it depends on, failed."""


@contextmanager
def propagate(stage: str, offset: int = 0) -> Iterator[None]:
    """Forward errors raised by a nested stage, tagged with *stage*.

    The re-raised error has the same class as the original, so invalid
    arguments stay ``ValueError`` all the way up. Positive codes are shifted
    by *offset*; negative codes pass through unchanged.

    Args:
        stage: Name of the calling function.
        offset: Value added to positive error codes.

    Raises:
        NovaFramesError: The forwarded error.
    """
    try:
        yield
    except NovaFramesError as err:
        code = err.code + offset if err.code > 0 else err.code
        logger.debug("%s: forwarding %s (code %d -> %d)", stage, type(err).__name__, err.code, code)
        raise type(err)(
            f"{stage}: {err}",
            code=code,
            stage=stage,
            trace=(stage,) + err.trace,
        ) from err


class ErrorRecord(NamedTuple):
    """Last sentinel-type failure of the current thread.

    Attributes:
        where: Function that recorded the error.
        errno: Standard ``errno`` value, e.g. ``errno.EINVAL``.
        message: Human-readable description.
    """

    where: str
    errno: int
    message: str


_records = threading.local()


def record_error(where: str, message: str, err: int = errno.EINVAL) -> float:
    """Record a failure for the current thread and return ``nan``.

    Args:
        where: Function name.
        message: Description of the failure.
        err: ``errno`` value.

    Returns:
        ``float('nan')``, so callers can ``return record_error(...)``.
    """
    _records.last = ErrorRecord(where, err, message)
    logger.debug("%s: %s", where, message)
    return float("nan")


def last_error() -> ErrorRecord | None:
    """Return the last error recorded on this thread, if any."""
    return getattr(_records, "last", None)


def clear_error() -> None:
    """Forget the last recorded error of this thread."""
    _records.last = None
