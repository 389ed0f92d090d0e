from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Literal, Never, TYPE_CHECKING, Any

import attrs
from typing_extensions import TypeIs

from .._exceptions import EmptyUnwrapError, ExpectationError

if TYPE_CHECKING:
    from ..outcome import Success, Failure


@attrs.frozen(repr=False, str=False)
class Present[T]:
    """The branch of an :data:`Optional` that holds a value."""

    value: T

    @staticmethod
    def is_present() -> Literal[True]:
        return True

    @staticmethod
    def is_absent() -> Literal[False]:
        return False

    def match[R](self, *, present: Callable[[T], R], absent: Callable[[], R]) -> R:
        return present(self.value)

    def contains(self, x: object) -> bool:
        return self.value == x

    def expect(self, message: str) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, supplier: Callable[[], T]) -> T:
        return self.value

    def to_nullable(self) -> T:
        return self.value

    def map[R](self, func: Callable[[T], R]) -> Present[R]:
        return Present(func(self.value))

    def map_or[R](self, default: R, func: Callable[[T], R]) -> R:
        return func(self.value)

    def map_or_else[R](
        self, default_supplier: Callable[[], R], func: Callable[[T], R]
    ) -> R:
        return func(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        if predicate(self.value):
            return self
        return Absent()

    def inspect(self, func: Callable[[T], Any]) -> Present[T]:
        func(self.value)
        return self

    def ok_or[E: Exception](self, error: E) -> Success[T]:
        from ..outcome import Success

        return Success(self.value)

    def ok_or_else[E: Exception](self, error_supplier: Callable[[], E]) -> Success[T]:
        from ..outcome import Success

        return Success(self.value)

    def and_[U](self, other: Optional[U]) -> Optional[U]:
        return other

    def and_then[U](self, func: Callable[[T], Optional[U]]) -> Optional[U]:
        return func(self.value)

    def or_(self, other: Optional[T]) -> Present[T]:
        return self

    def or_else(self, func: Callable[[], Optional[T]]) -> Present[T]:
        return self

    def xor(self, other: Optional[T]) -> Optional[T]:
        if other.is_absent():
            return self
        return Absent()

    def zip[U](self, other: Optional[U]) -> Optional[tuple[T, U]]:
        match other:
            case Present(other_value):
                return Present((self.value, other_value))
            case Absent():
                return other

    def flatten(self) -> Optional[Any]:
        """Remove one level of nesting.

        If the value held is itself an optional, it is returned.
        Otherwise, this optional is returned unchanged.
        """

        if isinstance(self.value, (Present, Absent)):
            return self.value
        return self

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Present({self.value!r})"


@attrs.frozen(repr=False, str=False)
class Absent:
    """The branch of an :data:`Optional` that holds nothing."""

    @staticmethod
    def is_present() -> Literal[False]:
        return False

    @staticmethod
    def is_absent() -> Literal[True]:
        return True

    def match[R](self, *, present: Callable[[Any], R], absent: Callable[[], R]) -> R:
        return absent()

    def contains(self, x: object) -> Literal[False]:
        return False

    def expect(self, message: str) -> Never:
        raise ExpectationError(message)

    def unwrap(self) -> Never:
        raise EmptyUnwrapError("called `Optional.unwrap()` on an absent value")

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_or_else[T](self, supplier: Callable[[], T]) -> T:
        return supplier()

    def to_nullable(self) -> None:
        return None

    def map(self, func: Callable) -> Absent:
        return self

    def map_or[R](self, default: R, func: Callable) -> R:
        return default

    def map_or_else[R](self, default_supplier: Callable[[], R], func: Callable) -> R:
        return default_supplier()

    def filter(self, predicate: Callable) -> Absent:
        return self

    def inspect(self, func: Callable) -> Absent:
        return self

    def ok_or[E: Exception](self, error: E) -> Failure[E]:
        from ..outcome import Failure

        return Failure(error)

    def ok_or_else[E: Exception](self, error_supplier: Callable[[], E]) -> Failure[E]:
        from ..outcome import Failure

        return Failure(error_supplier())

    def and_(self, other: Optional[Any]) -> Absent:
        return self

    def and_then(self, func: Callable) -> Absent:
        return self

    def or_[T](self, other: Optional[T]) -> Optional[T]:
        return other

    def or_else[T](self, func: Callable[[], Optional[T]]) -> Optional[T]:
        return func()

    def xor[T](self, other: Optional[T]) -> Optional[T]:
        if other.is_present():
            return other
        return self

    def zip(self, other: Optional[Any]) -> Absent:
        return self

    def flatten(self) -> Absent:
        return self

    def __iter__(self) -> Iterator[Never]:
        return iter(())

    def __str__(self) -> str:
        return "absent"

    def __repr__(self) -> str:
        return "Absent()"


type Optional[T] = Present[T] | Absent


def present[T](value: T) -> Present[T]:
    """Wrap a value into an optional that holds it.

    ``None`` is a legitimate value: ``present(None)`` is not absent.
    """

    return Present(value)


def absent() -> Absent:
    """Return an optional that holds nothing."""

    return Absent()


def from_nullable[T](value: T | None) -> Optional[T]:
    """Convert a value that uses ``None`` to signal absence into an optional."""

    if value is None:
        return Absent()
    return Present(value)


def is_present[T](optional: Optional[T]) -> TypeIs[Present[T]]:
    return optional.is_present()


def is_absent(optional: Optional[Any]) -> TypeIs[Absent]:
    return optional.is_absent()
