"""Document identifier sets supplied by the mail store."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

MAX_DOCUMENT_ID = 2**32 - 1


@runtime_checkable
class DocumentIdSet(Protocol):
    """A possibly sparse set of document ids that can be enumerated."""

    def iterate(self) -> Iterable[int]: ...


def check_account_id(account_id: int) -> int:
    """Return ``account_id`` if it is an unsigned 32-bit integer.

    Raises:
        ValueError: If the value is not an int in ``0..MAX_DOCUMENT_ID``.
    """

    if isinstance(account_id, bool) or not isinstance(account_id, int):
        raise ValueError(f"Account ids must be integers, got {account_id!r}")
    if not 0 <= account_id <= MAX_DOCUMENT_ID:
        raise ValueError(f"Account id out of range: {account_id}")
    return account_id


class IdSet:
    """Immutable, sorted set of document ids implementing ``DocumentIdSet``."""

    __slots__ = ("_ids",)

    def __init__(self, ids: Iterable[int] = ()) -> None:
        values = set()
        for document_id in ids:
            if isinstance(document_id, bool) or not isinstance(document_id, int):
                raise TypeError(f"Document ids must be integers, got {document_id!r}")
            if not 0 <= document_id <= MAX_DOCUMENT_ID:
                raise ValueError(f"Document id out of range: {document_id}")
            values.add(document_id)
        self._ids = tuple(sorted(values))

    @classmethod
    def from_range(cls, start: int, stop: int) -> IdSet:
        """Build a set holding ``start <= id < stop``."""
        return cls(range(start, stop))

    def iterate(self) -> Iterator[int]:
        return iter(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._ids

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdSet):
            return NotImplemented
        return self._ids == other._ids

    def __hash__(self) -> int:
        return hash(self._ids)

    def __repr__(self) -> str:
        return f"IdSet({list(self._ids)!r})"


def enumerate_ids(document_ids: DocumentIdSet | Iterable[int]) -> list[int]:
    """Eagerly enumerate a document id set into a list.

    Objects exposing ``iterate()`` are enumerated through it; any other
    iterable of ints is consumed directly.
    """

    if isinstance(document_ids, DocumentIdSet):
        return list(document_ids.iterate())
    return list(document_ids)
