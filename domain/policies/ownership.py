"""Ownership access policy.

A note's ``owner`` is the only authorization boundary in the diary. This
module keeps the check as a pure predicate so it can be evaluated apart
from fetching the record or acting on it.
"""

from typing import Optional

from domain.entities.note import Note


def caller_owns_note(caller: Optional[str], note: Optional[Note]) -> bool:
    """Decide whether ``caller`` may read or act on ``note``.

    Args:
        caller: Authenticated identity of the caller (username/subject).
        note: The note record, or None when the lookup found nothing.

    Returns:
        bool: True only when the note exists and the caller is its owner.

    Example:
        >>> caller_owns_note("alice", None)
        False
    """
    if note is None or not caller:
        return False
    return note.is_owned_by(caller)
