from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Never, Literal, overload, Any

import attrs
from typing_extensions import TypeIs

from .._exceptions import ExpectationError, SuccessUnwrapError, with_note
from .._pattern import failure_message
from ..optional import Present, Absent


@attrs.frozen(repr=False, str=False)
class Success[T]:
    value: T

    @staticmethod
    def is_success() -> Literal[True]:
        return True

    @staticmethod
    def is_failure() -> Literal[False]:
        return False

    def match[R](
        self, *, success: Callable[[T], R], failure: Callable[[Any], R]
    ) -> R:
        return success(self.value)

    def contains(self, x: object) -> bool:
        return self.value == x

    def contains_failure(self, message: str) -> Literal[False]:
        return False

    def ok(self) -> Present[T]:
        return Present(self.value)

    def err(self) -> Absent:
        return Absent()

    to_optional_value = ok
    to_optional_error = err

    def expect(self, message: str) -> T:
        return self.value

    def expect_failure(self, message: str) -> Never:
        raise with_note(ExpectationError(message), f"Success value: {self.value!r}")

    def unwrap(self) -> T:
        return self.value

    def unwrap_failure(self) -> Never:
        raise SuccessUnwrapError(
            "called `Outcome.unwrap_failure()` on a success value"
        )

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, supplier: Callable[[Any], T]) -> T:
        return self.value

    def map[R](self, func: Callable[[T], R]) -> Success[R]:
        return Success(func(self.value))

    def map_failure(self, func: Callable) -> Success[T]:
        return self

    def map_or[R](self, default: R, func: Callable[[T], R]) -> R:
        return func(self.value)

    def map_or_else[R](
        self, default_from_error: Callable[[Any], R], func: Callable[[T], R]
    ) -> R:
        return func(self.value)

    def inspect(self, func: Callable[[T], Any]) -> Success[T]:
        func(self.value)
        return self

    def inspect_failure(self, func: Callable) -> Success[T]:
        return self

    def and_[U, E: Exception](self, other: Outcome[U, E]) -> Outcome[U, E]:
        return other

    def and_then[U, E: Exception](
        self, func: Callable[[T], Outcome[U, E]]
    ) -> Outcome[U, E]:
        return func(self.value)

    def or_(self, other: Outcome[T, Any]) -> Success[T]:
        return self

    def or_else(self, func: Callable) -> Success[T]:
        return self

    def flatten(self) -> Outcome[Any, Any]:
        """Remove one level of nesting.

        If the success value is itself an outcome, it is returned.
        Otherwise, this outcome is returned unchanged.
        """

        if isinstance(self.value, (Success, Failure)):
            return self.value
        return self

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@attrs.frozen(repr=False, str=False)
class Failure[E: Exception]:
    _error: E

    @staticmethod
    def is_success() -> Literal[False]:
        return False

    @staticmethod
    def is_failure() -> Literal[True]:
        return True

    def match[R](self, *, success: Callable[[Any], R], failure: Callable[[E], R]) -> R:
        return failure(self._error)

    def contains(self, x: object) -> Literal[False]:
        return False

    def contains_failure(self, message: str) -> bool:
        """Check if the error carried has the given message.

        The comparison is done on the message text only, so two different errors with
        the same message are considered equal here.
        To check the type of the error, use :func:`is_failure_type` instead.
        """

        return failure_message(self._error) == message

    def ok(self) -> Absent:
        return Absent()

    def err(self) -> Present[E]:
        return Present(self._error)

    to_optional_value = ok
    to_optional_error = err

    def expect(self, message: str) -> Never:
        raise ExpectationError(message) from self._error

    def expect_failure(self, message: str) -> E:
        return self._error

    def unwrap(self) -> Never:
        raise self._error

    def unwrap_failure(self) -> E:
        return self._error

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_or_else[T](self, supplier: Callable[[E], T]) -> T:
        return supplier(self._error)

    def map(self, func: Callable) -> Failure[E]:
        return self

    def map_failure[F: Exception](self, func: Callable[[E], F]) -> Failure[F]:
        return Failure(func(self._error))

    def map_or[R](self, default: R, func: Callable) -> R:
        return default

    def map_or_else[R](self, default_from_error: Callable[[E], R], func: Callable) -> R:
        return default_from_error(self._error)

    def inspect(self, func: Callable) -> Failure[E]:
        return self

    def inspect_failure(self, func: Callable[[E], Any]) -> Failure[E]:
        func(self._error)
        return self

    def and_(self, other: Outcome[Any, E]) -> Failure[E]:
        return self

    def and_then(self, func: Callable) -> Failure[E]:
        return self

    def or_[T, F: Exception](self, other: Outcome[T, F]) -> Outcome[T, F]:
        return other

    def or_else[T, F: Exception](
        self, func: Callable[[E], Outcome[T, F]]
    ) -> Outcome[T, F]:
        return func(self._error)

    def flatten(self) -> Failure[E]:
        return self

    def __str__(self) -> str:
        return str(self._error)

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"


type Outcome[T, E: Exception] = Success[T] | Failure[E]


def success[T](value: T) -> Success[T]:
    return Success(value)


def failure[E: Exception](error: E) -> Failure[E]:
    return Failure(error)


def is_success[T](outcome: Outcome[T, Any]) -> TypeIs[Success[T]]:
    return outcome.is_success()


def is_failure[E: Exception](outcome: Outcome[Any, E]) -> TypeIs[Failure[E]]:
    return outcome.is_failure()


def is_failure_type[E: Exception](
    outcome: Outcome, error_type: type[E]
) -> TypeIs[Failure[E]]:
    return is_failure(outcome) and isinstance(outcome._error, error_type)


@overload
def unwrap[T](outcome: Success[T]) -> T: ...


@overload
def unwrap(outcome: Failure[Exception]) -> Never: ...


def unwrap(outcome):
    if isinstance(outcome, Success):
        return outcome.value
    else:
        raise outcome._error


def collect[T, E: Exception](outcomes: Iterable[Outcome[T, E]]) -> Outcome[list[T], E]:
    """Gather the values of several outcomes into a single outcome.

    Returns a success holding the list of all values if every outcome is a success.
    Otherwise, returns the first failure encountered and stops consuming the
    iterable.
    """

    values = []
    for outcome in outcomes:
        match outcome:
            case Success(value):
                values.append(value)
            case Failure():
                return outcome
    return Success(values)
