from abc import ABC, abstractmethod
import asyncio
import typing as t

__all__ = ['IRecordStore']

class IRecordStore(ABC):
    """Whole-collection persistence. Every mutation is read all -> change in memory -> write all."""

    @abstractmethod
    async def load(self, collection: str) -> list[dict]:
        """Returns records in insertion order. Empty list if the collection was never written."""

    @abstractmethod
    async def save(self, collection: str, records: t.Sequence[dict]) -> bool:
        """Replaces the collection. False if the write did not complete."""

    @abstractmethod
    async def next_id(self, collection: str, records: t.Sequence[dict]) -> int:
        """Next identifier for `collection`. Never hands out an id that was issued before."""

    @abstractmethod
    def lock(self, collection: str) -> asyncio.Lock:
        """Single-writer arbitration point for `collection`. Hold it for the whole read-modify-write cycle."""

    @abstractmethod
    def exists(self, collection: str) -> bool: ...
