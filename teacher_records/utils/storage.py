"""JSON file storage for the teacher collection.

The whole collection lives in a single JSON array. Every operation reads
the file in full and every mutation rewrites it in full; nothing is cached
between requests.
"""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Union

from teacher_records.exceptions import StorageWriteError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class TeacherStore:
    """Storage accessor bridging the JSON file and an in-memory list.

    Read failures degrade to an empty collection. Write failures are
    logged and swallowed unless ``strict`` is set, in which case they
    raise ``StorageWriteError``. Writes go to a temporary file in the same
    directory which then replaces the collection file, so readers never
    see a partially written collection.

    ``write_lock`` must be held by callers for the whole load-modify-save
    cycle of a mutation. It serializes writers within one process only.

    Usage:
        store = TeacherStore("teachers.json")

        async with store.write_lock:
            records = await store.load()
            records.append(record)
            await store.save(records)

    Attributes:
        path: Location of the JSON file
        strict: Whether write failures propagate
        write_lock: Lock serializing read-modify-write cycles
    """

    def __init__(self, path: Union[str, Path], strict: bool = False) -> None:
        """Initialize store.

        Args:
            path: Location of the JSON file
            strict: Raise StorageWriteError on write failures
        """
        self.path = Path(path)
        self.strict = strict
        self.write_lock = asyncio.Lock()

    def ensure(self) -> None:
        """Create the storage file with an empty collection if missing."""
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("[]", encoding="utf-8")
        logger.info("Teacher store created", extra={"path": str(self.path)})

    def read(self) -> List[Record]:
        """Read the collection synchronously.

        Returns:
            List of stored records, or an empty list when the file is
            missing, unreadable, or does not hold a JSON array.
        """
        try:
            content = (
                self.path.read_text(encoding="utf-8") if self.path.exists() else "[]"
            )
            data = json.loads(content)
            if not isinstance(data, list):
                raise ValueError(
                    f"expected a JSON array, got {type(data).__name__}"
                )
            logger.debug(
                "Teacher data read",
                extra={"path": str(self.path), "count": len(data)},
            )
            return data
        except (OSError, ValueError) as e:
            logger.error(
                "Failed to read teacher data",
                extra={"path": str(self.path), "error": str(e)},
                exc_info=True,
            )
            return []

    def write(self, records: List[Record]) -> None:
        """Write the collection synchronously.

        Args:
            records: Full collection to persist

        Raises:
            StorageWriteError: If the write fails and the store is strict
        """
        tmp_path = None
        try:
            content = json.dumps(
                records, indent=2, ensure_ascii=False, allow_nan=False
            )
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_path, self.path)
            logger.debug(
                "Teacher data written",
                extra={"path": str(self.path), "count": len(records)},
            )
        except (OSError, TypeError, ValueError) as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            logger.error(
                "Failed to write teacher data",
                extra={"path": str(self.path), "error": str(e)},
                exc_info=True,
            )
            if self.strict:
                raise StorageWriteError(str(self.path), str(e)) from e

    async def load(self) -> List[Record]:
        """Load the collection without blocking the event loop."""
        return await asyncio.to_thread(self.read)

    async def save(self, records: List[Record]) -> None:
        """Persist the collection without blocking the event loop."""
        await asyncio.to_thread(self.write, records)
