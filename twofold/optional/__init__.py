"""Defines the optional type and its variants: present and absent.

The Optional type is a union type of Present and Absent, where Present contains a
value and Absent contains nothing.

It is meant to be used instead of ``None`` to signal that a value might be missing,
so that ``None`` can still be a legitimate value and so that the missing case can't
be forgotten by the calling code.

Example:
    .. code-block:: python

        from typing import assert_never

        from twofold.optional import Present, Absent, Optional, absent, present

        def find_user(name: str) -> Optional[User]:
            if name in users:
                return present(users[name])
            return absent()

        match find_user("alice"):
            case Present(user):
                print(user.email)
            case Absent():
                print("No such user")
            case other:
                assert_never(other)
"""

from ._optional import (
    Absent,
    Optional,
    Present,
    absent,
    from_nullable,
    is_absent,
    is_present,
    present,
)

__all__ = [
    "Absent",
    "Optional",
    "Present",
    "absent",
    "from_nullable",
    "is_absent",
    "is_present",
    "present",
]
