"""Resource ID generation.

IDs are ULIDs: globally unique and lexicographically sortable by creation
time. The rest of the service treats them as opaque strings.
"""

from typing import Callable

from ulid import ULID

IdFactory = Callable[[], str]


def new_id() -> str:
    """Return a fresh ULID as its 26-character canonical string."""
    return str(ULID())


def is_valid_id(value: str) -> bool:
    """Check whether a string parses as a ULID.

    Public helper for callers holding IDs issued by this service; the stores
    themselves accept any string so seeded snapshots may use their own IDs.
    """
    try:
        ULID.from_str(value)
    except (ValueError, TypeError):
        return False
    return True
