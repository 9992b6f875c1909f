from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Maybe(Generic[T]):
    """Either some value (`Some`) or no value (`Nothing`).

    Every operation returns a new container or a plain value; neither variant
    is ever mutated. Exceptions raised by the callables passed in are not
    caught.
    """

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def fill_when_none(self, default_value: T) -> "Maybe[T]":
        """Fill the value with `default_value` when there is none."""
        if self.is_some():
            return self
        return Some(default_value)

    def filter(self, predicate: Callable[[T], bool]) -> "Maybe[T]":
        """Keep the value only if it satisfies `predicate` (a.k.a `Where`)."""
        if self.is_some() and predicate(self.value):  # type: ignore[attr-defined]
            return self
        return Nothing()

    def flat_map(self, mapper: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        """Apply a mapping that may itself return no value (a.k.a `bind`)."""
        if self.is_some():
            return mapper(self.value)  # type: ignore[attr-defined]
        return Nothing()

    def map(self, mapper: Callable[[T], U]) -> "Maybe[U]":
        if self.is_some():
            return Some(mapper(self.value))  # type: ignore[attr-defined]
        return Nothing()

    def match(self, some: Callable[[T], U], none: Callable[[], U]) -> U:
        """Handle both cases at once: exactly one of the handlers is called."""
        if self.is_some():
            return some(self.value)  # type: ignore[attr-defined]
        return none()

    def value_or_default(self, default_value: T) -> T:
        return self.value if self.is_some() else default_value  # type: ignore[attr-defined]

    def value_or_get(self, get_default_value: Callable[[], T]) -> T:
        """Like `value_or_default`, but only calls the supplier when there is no value."""
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        return get_default_value()


@dataclass(frozen=True)
class Some(Maybe[T]):
    value: T
    def is_some(self) -> bool: return True


@dataclass(frozen=True)
class Nothing(Maybe[T]):
    def __repr__(self) -> str: return "Nothing"
    def is_some(self) -> bool: return False


NONE: Maybe = Nothing()


def some(value: T) -> Maybe[T]:
    return Some(value)


def none() -> Maybe[T]:
    return NONE


def of_nullable(value: Optional[T]) -> Maybe[T]:
    return some(value).filter(lambda x: x is not None)  # type: ignore[return-value]
