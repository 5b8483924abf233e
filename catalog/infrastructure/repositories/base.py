import catalog.infrastructure.interfaces as iabc
import catalog.infrastructure.exceptions as infexc
import catalog.domain.exceptions as domexc

import pydantic as p
import typing as t
import logging

logger = logging.getLogger('catalog.storage')

__all__ = ['JsonCollectionRepository']

M = t.TypeVar('M', bound=p.BaseModel)


class JsonCollectionRepository(t.Generic[M]):
    """Typed access to one record store collection.

    Subclasses set `collection`, `model`, `entity` and `not_found`. Every mutation holds the collection
    lock for the whole load -> change -> save cycle.
    """
    collection: t.ClassVar[str]
    model: t.ClassVar[type[p.BaseModel]]
    entity: t.ClassVar[str] = "Record"
    not_found: t.ClassVar[type[domexc.NotFound]] = domexc.NotFound

    def __init__(self, store: iabc.IRecordStore):
        self.store = store

    def _to_record(self, item: M) -> dict:
        return item.model_dump(mode='json')

    def _check_unique(self, item: M, existing: list[M]) -> None:
        '''Override to reject duplicates. Called under the collection lock'''

    async def _load(self) -> list[M]:
        return [self.model.model_validate(r) for r in await self.store.load(self.collection)]

    async def _save(self, items: list[M]) -> None:
        if not await self.store.save(self.collection, [self._to_record(i) for i in items]):
            raise infexc.StorageFailure(f"Failed to write '{self.collection}'")

    async def _get(self, item_id: int) -> M | None:
        return next((i for i in await self._load() if i.id == item_id), None)

    async def _insert(self, item: M) -> M:
        async with self.store.lock(self.collection):
            records = await self.store.load(self.collection)
            items = [self.model.model_validate(r) for r in records]
            self._check_unique(item, items)
            item = item.model_copy(update={'id': await self.store.next_id(self.collection, records)})
            items.append(item)
            await self._save(items)
        logger.info(f"[STORAGE] '{self.collection}' #{item.id} created")
        return item

    async def _update(self, item_id: int, mutate: t.Callable[[M], t.Awaitable[None] | None]) -> M:
        async with self.store.lock(self.collection):
            items = await self._load()
            target = next((i for i in items if i.id == item_id), None)
            if target is None:
                raise self.not_found(f"{self.entity} with id {item_id} does not exist")
            outcome = mutate(target)
            if outcome is not None:
                await outcome
            await self._save(items)
        logger.info(f"[STORAGE] '{self.collection}' #{item_id} updated")
        return target

    async def _remove(self, item_id: int) -> None:
        async with self.store.lock(self.collection):
            items = await self._load()
            remaining = [i for i in items if i.id != item_id]
            if len(remaining) == len(items):
                raise self.not_found(f"{self.entity} with id {item_id} does not exist")
            await self._save(remaining)
        logger.info(f"[STORAGE] '{self.collection}' #{item_id} deleted")
