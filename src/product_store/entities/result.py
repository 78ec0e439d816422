"""Result values returned by parsing and store access."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A completed operation and its value."""

    value: T


@dataclass(frozen=True)
class Failure:
    """A failed operation.

    Attributes:
        message: Description of the underlying failure
    """

    message: str


Result = Union[Success[T], Failure]
