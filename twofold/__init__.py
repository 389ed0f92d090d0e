"""Optional values and success-or-failure outcomes as plain immutable values."""

from ._exceptions import (
    EmptyUnwrapError,
    ExpectationError,
    SuccessUnwrapError,
    UnwrapError,
)
from .optional import (
    Absent,
    Optional,
    Present,
    absent,
    from_nullable,
    is_absent,
    is_present,
    present,
)
from .outcome import (
    Failure,
    Outcome,
    Success,
    attempt,
    collect,
    failure,
    is_failure,
    is_failure_type,
    is_success,
    success,
)

__all__ = [
    "Absent",
    "EmptyUnwrapError",
    "ExpectationError",
    "Failure",
    "Optional",
    "Outcome",
    "Present",
    "Success",
    "SuccessUnwrapError",
    "UnwrapError",
    "absent",
    "attempt",
    "collect",
    "failure",
    "from_nullable",
    "is_absent",
    "is_failure",
    "is_failure_type",
    "is_present",
    "is_success",
    "present",
    "success",
]
