from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Iterator, NoReturn, TypeVar, Union


T = TypeVar("T")


class Credential(Enum):
    """Which configured token a request is sent with."""

    BOT = "bot"
    USER = "user"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    @property
    def error(self) -> None:
        return None

    def unwrap(self) -> T:
        return self.value

    def __iter__(self) -> Iterator[Any]:
        return iter((None, self.value))


@dataclass(frozen=True)
class Err:
    error: Exception

    def __post_init__(self) -> None:
        if not isinstance(self.error, Exception):
            raise TypeError(f"Err requires an exception, got {type(self.error).__name__}")

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    @property
    def value(self) -> None:
        return None

    def unwrap(self) -> NoReturn:
        raise self.error

    def __iter__(self) -> Iterator[Any]:
        return iter((self.error, None))


Result = Union[Ok[T], Err]
