import catalog.infrastructure.interfaces as iabc
import catalog.infrastructure.exceptions as infexc
from catalog.common.exceptions import format_exception_string
from catalog.common.common import json_serializer

import asyncio
import json, os, pathlib
import typing as t
import logging

logger = logging.getLogger('catalog.storage')

__all__ = ['next_id', 'JsonRecordStore']


def next_id(records: t.Iterable[dict], floor: int = 0) -> int:
    """max(existing id, floor) + 1. Gives 1 for an empty collection with no history."""
    top = max((int(r['id']) for r in records if r.get('id') is not None), default=0)
    return max(top, floor) + 1


class JsonRecordStore(iabc.IRecordStore):
    """Keeps every collection as a pretty-printed JSON array in `data_dir/<collection>.json`.

    Ids already handed out are remembered in `data_dir/_sequences.json`, so deleting the
    record with the highest id does not make that id available again.
    """

    SEQUENCES = '_sequences'

    def __init__(self, data_dir: str | pathlib.Path):
        self.data_dir = pathlib.Path(data_dir)
        self._locks: dict[str, asyncio.Lock] = {}

    def path(self, collection: str) -> pathlib.Path:
        return self.data_dir / f'{collection}.json'

    def lock(self, collection: str) -> asyncio.Lock:
        return self._locks.setdefault(collection, asyncio.Lock())

    def exists(self, collection: str) -> bool:
        return self.path(collection).exists()

    def _read(self, path: pathlib.Path) -> t.Any:
        if not path.exists():
            return None
        text = path.read_text(encoding='utf-8')
        if not text.strip():
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise infexc.CorruptedCollection(f"'{path.name}' is not valid JSON") from e

    def _write(self, path: pathlib.Path, data: t.Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(path.name + '.tmp')
        with tmp.open('w', encoding='utf-8') as f:
            json.dump(data, f, indent=4, ensure_ascii=False, default=json_serializer)
        os.replace(tmp, path)

    def _high_water_marks(self) -> dict[str, int]:
        return self._read(self.path(self.SEQUENCES)) or {}

    def _write_collection(self, collection: str, records: list[dict]) -> None:
        marks = self._high_water_marks()
        top = next_id(records) - 1
        if top > marks.get(collection, 0):
            marks[collection] = top
            self._write(self.path(self.SEQUENCES), marks)
        self._write(self.path(collection), records)

    async def load(self, collection: str) -> list[dict]:
        data = await asyncio.to_thread(self._read, self.path(collection))
        if data is None:
            return []
        if not isinstance(data, list):
            raise infexc.CorruptedCollection(f"'{collection}' document must hold a JSON array")
        return data

    async def save(self, collection: str, records: t.Sequence[dict]) -> bool:
        try:
            await asyncio.to_thread(self._write_collection, collection, list(records))
        except (OSError, TypeError) as e:
            logger.error(format_exception_string(e, source='STORAGE', comment=f"Failed to write '{collection}'"))
            return False
        logger.debug(f"[STORAGE] '{collection}' saved, {len(records)} records")
        return True

    async def next_id(self, collection: str, records: t.Sequence[dict]) -> int:
        marks = await asyncio.to_thread(self._high_water_marks)
        return next_id(records, floor=marks.get(collection, 0))
