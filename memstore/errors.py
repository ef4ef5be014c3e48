"""Exception hierarchy for caller misuse of the in-memory stores.

Lookups that find nothing return ``None``; only precondition violations raise.
"""


class MemstoreError(Exception):
    """Base class for all memstore errors."""


class PreconditionError(MemstoreError, ValueError):
    """The caller broke an operation's precondition. Nothing was mutated."""


class InvalidCapacityError(PreconditionError):
    """Cache capacity is negative or not an integer."""


class EmptyStructureError(PreconditionError):
    """Peek or extract on an empty structure."""


class InvalidSlotError(PreconditionError):
    """Slot does not address a live node."""
