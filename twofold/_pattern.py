from __future__ import annotations


def failure_message(error: BaseException) -> str:
    """Return the human-readable message carried by an error.

    This is the text compared by :meth:`twofold.outcome.Failure.contains_failure`.
    """

    return str(error)
