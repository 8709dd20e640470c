"""Identity-keyed view over one flat JSON array in the key-value store.

On disk a collection is a plain list of records. In memory it is a dict
keyed by entity identity, so upserts and lookups never scan the list.
Conversion happens only here, at the storage boundary.

A collection that cannot be decoded (not an array, a record that is not
an object, a missing field, a record failing domain validation) is
treated as empty.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

import structlog

from pantry.domain.exceptions import DomainException
from pantry.infrastructure.storage.json_file_store import JsonFileStore

logger = structlog.get_logger(__name__)

K = TypeVar("K")
T = TypeVar("T")


class JsonCollection(Generic[K, T]):

    def __init__(
        self,
        store: JsonFileStore,
        key: str,
        identity: Callable[[T], K],
        to_raw: Callable[[T], dict],
        to_domain: Callable[[dict], T],
    ) -> None:
        self._store = store
        self._key = key
        self._identity = identity
        self._to_raw = to_raw
        self._to_domain = to_domain

    def load(self) -> dict[K, T]:
        raw = self._store.get(self._key)
        if raw is None:
            return {}
        if not isinstance(raw, list):
            logger.warning(
                "collection_corrupted", key=self._key, reason="expected a JSON array"
            )
            return {}
        if not all(isinstance(record, dict) for record in raw):
            logger.warning(
                "collection_corrupted", key=self._key, reason="expected JSON objects"
            )
            return {}
        try:
            entities = [self._to_domain(record) for record in raw]
        except (KeyError, TypeError, ValueError, DomainException) as exc:
            logger.warning("collection_corrupted", key=self._key, reason=str(exc))
            return {}
        return {self._identity(entity): entity for entity in entities}

    def persist(self, entities: dict[K, T]) -> None:
        self._store.set(self._key, [self._to_raw(e) for e in entities.values()])

    def clear(self) -> None:
        self._store.set(self._key, [])
