"""Two-variant result type returned by every client call.

Expected failures (HTTP errors, transport errors, schema mismatches) come back
as ``Left`` instead of being raised, so callers branch before touching a
success value::

    result = await client.get("/lol/status/v4/platform-data")
    if result.is_left():
        log.warning("status lookup failed", error=result.value.message)
    else:
        payload = result.value.data
"""

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar, Union

E = TypeVar("E")
T = TypeVar("T")
V = TypeVar("V")


@dataclass(frozen=True, slots=True)
class Left(Generic[E]):
    """Failure variant."""

    value: E

    def is_left(self) -> Literal[True]:
        return True

    def is_right(self) -> Literal[False]:
        return False


@dataclass(frozen=True, slots=True)
class Right(Generic[T]):
    """Success variant."""

    value: T

    def is_left(self) -> Literal[False]:
        return False

    def is_right(self) -> Literal[True]:
        return True


Either = Union[Left[E], Right[T]]


def left(value: V) -> Left[V]:
    """Build a failure result."""
    return Left(value)


def right(value: V) -> Right[V]:
    """Build a success result."""
    return Right(value)
