"""Defines the outcome type and its variants: success and failure.

The Outcome type is a union type of Success and Failure, where Success contains a
successful value and Failure contains an error.

It is mostly meant to be used as a return type for functions that can fail, but where
we want to be sure to handle all cases in the calling code and not raise unhandled
exceptions.

With a type checker, we can ensure that all possible success and failure cases are
dealt with.

Example:
    .. code-block:: python

        from typing import assert_never

        from twofold.outcome import Success, Failure, is_failure_type, is_success

        def read_file(file_path: str) -> Success[str] | Failure[FileNotFoundError]:
            try:
                with open(file_path) as file:
                    return Success(file.read())
            except FileNotFoundError as error:
                return Failure(error)

        outcome = read_file("file.txt")
        if is_failure_type(outcome, FileNotFoundError):
            print("File not found")
        elif is_success(outcome):
            print(outcome.value)
        else:
            assert_never(outcome)
"""

from ._capture import attempt
from ._outcome import (
    Failure,
    Outcome,
    Success,
    collect,
    failure,
    is_failure,
    is_failure_type,
    is_success,
    success,
    unwrap,
)

__all__ = [
    "Failure",
    "Outcome",
    "Success",
    "attempt",
    "collect",
    "failure",
    "is_failure",
    "is_failure_type",
    "is_success",
    "success",
    "unwrap",
]
