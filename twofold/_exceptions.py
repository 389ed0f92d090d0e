from __future__ import annotations

import tblib.pickling_support


def with_note[E: BaseException](exc: E, note: str) -> E:
    """Add a note to an exception."""
    exc.add_note(note)
    return exc


@tblib.pickling_support.install
class UnwrapError(ValueError):
    """Raised when a value is extracted from the wrong branch of a container.

    This is a base class for the errors raised by the unwrap and expect family.
    It should not be raised directly, instead raise a subclass.
    """

    pass


@tblib.pickling_support.install
class EmptyUnwrapError(UnwrapError):
    """Raised when unwrapping an absent optional."""

    pass


@tblib.pickling_support.install
class SuccessUnwrapError(UnwrapError):
    """Raised when the error of a successful outcome is unwrapped."""

    pass


@tblib.pickling_support.install
class ExpectationError(UnwrapError):
    """Raised by ``expect`` methods when the container is on the unexpected branch.

    The message is the one passed by the caller, unchanged.
    """

    pass
