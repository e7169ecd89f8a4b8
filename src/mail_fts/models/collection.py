"""Mail object collections and their backend index names."""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType

from mail_fts.exceptions import InvalidCollectionError


class Collection(IntEnum):
    """Category of mail object; selects the backend index a document lives in."""

    EMAIL = 0
    CONTACT = 1
    CALENDAR_EVENT = 2

    @classmethod
    def parse(cls, value: Collection | int | str) -> Collection:
        """Resolve a collection from a member, its integer value or its name.

        Raises:
            InvalidCollectionError: If the value does not name a known collection.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidCollectionError(f"Unknown collection: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as exc:
                raise InvalidCollectionError(f"Unknown collection: {value!r}") from exc
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "_")
            if key.isdigit():
                return cls.parse(int(key))
            try:
                return cls[key]
            except KeyError as exc:
                raise InvalidCollectionError(f"Unknown collection: {value!r}") from exc
        raise InvalidCollectionError(f"Unknown collection: {value!r}")


def build_index_names(prefix: str) -> Mapping[Collection, str]:
    """Build the read-only collection -> index name table.

    Args:
        prefix: Index name prefix, e.g. ``mail_fts``.

    Returns:
        Immutable mapping with one index name per collection.
    """

    return MappingProxyType(
        {collection: f"{prefix}_{collection.name.lower()}" for collection in Collection}
    )
