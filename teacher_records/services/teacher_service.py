"""Teacher service providing business logic over the teacher collection.

Every operation loads the full collection from the store. Mutations hold
the store's write lock for the whole load-modify-save cycle and write the
full collection back.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from teacher_records.exceptions import InvalidTeacherError, RecordNotFoundError
from teacher_records.services.validation import is_number, is_valid_teacher
from teacher_records.utils.ids import TimestampIdGenerator
from teacher_records.utils.storage import Record, TeacherStore

logger = logging.getLogger(__name__)


def _equals_number(value: Any, target: Optional[int]) -> bool:
    """Strict numeric equality: booleans and non-numbers never match."""
    return target is not None and is_number(value) and value == target


class TeacherService:
    """Service for managing teacher records.

    Provides:
    - get_all(): All stored records in collection order
    - create(payload): Validate and append a new record
    - update(record_id, payload): Shallow-merge and validate
    - delete(record_id): Remove records with the given id
    - filter_by_age(age) / filter_by_classes(classes): Exact-match filters
    - search_by_name(name): First case-insensitive substring match
    - average_classes(): Mean of numberOfClasses

    Usage:
        service = TeacherService(store, id_generator)
        teacher = await service.create({"fullName": "Ann Lee", ...})

    Attributes:
        store: Storage accessor for the collection
        id_generator: Source of new record ids
    """

    model_name = "Teacher"

    def __init__(
        self, store: TeacherStore, id_generator: TimestampIdGenerator
    ) -> None:
        """Initialize service.

        Args:
            store: Storage accessor for the collection
            id_generator: Source of new record ids
        """
        self.store = store
        self.id_generator = id_generator

    async def get_all(self) -> List[Record]:
        """Return every stored record in collection order."""
        return await self.store.load()

    async def create(self, payload: Any) -> Record:
        """Validate a candidate record, assign an id and append it.

        Args:
            payload: Decoded JSON body supplied by the client

        Returns:
            Created record in the caller's key order with ``id`` appended

        Raises:
            InvalidTeacherError: If the candidate fails validation
        """
        if not is_valid_teacher(payload):
            raise InvalidTeacherError()

        async with self.store.write_lock:
            records = await self.store.load()
            document: Dict[str, Any] = dict(payload)
            document["id"] = self.id_generator.next_id()
            records.append(document)
            await self.store.save(records)

        logger.info(
            f"Created {self.model_name}",
            extra={"model": self.model_name, "id": document["id"]},
        )
        return document

    async def update(self, record_id: str, payload: Any) -> Record:
        """Shallow-merge supplied fields into an existing record.

        Supplied fields win over stored ones; ``id`` is never changed.
        The merged record must pass validation.

        Args:
            record_id: Id of the record to update
            payload: Decoded JSON body with the fields to change

        Returns:
            Updated record

        Raises:
            RecordNotFoundError: If no record has the given id
            InvalidTeacherError: If the merged record fails validation
        """
        async with self.store.write_lock:
            records = await self.store.load()
            index = self._find_index(records, record_id)
            if index is None:
                raise RecordNotFoundError(self.model_name, record_id)

            if not isinstance(payload, dict):
                raise InvalidTeacherError()
            merged = {**records[index], **payload}
            merged["id"] = records[index]["id"]
            if not is_valid_teacher(merged):
                raise InvalidTeacherError()

            records[index] = merged
            await self.store.save(records)

        logger.info(
            f"Updated {self.model_name}",
            extra={
                "model": self.model_name,
                "id": record_id,
                "fields": sorted(payload),
            },
        )
        return merged

    async def delete(self, record_id: str) -> None:
        """Remove the record with the given id.

        Survivors keep their relative order.

        Args:
            record_id: Id of the record to delete

        Raises:
            RecordNotFoundError: If no record has the given id
        """
        async with self.store.write_lock:
            records = await self.store.load()
            if self._find_index(records, record_id) is None:
                raise RecordNotFoundError(self.model_name, record_id)

            remaining = [r for r in records if r.get("id") != record_id]
            await self.store.save(remaining)

        logger.info(
            f"Deleted {self.model_name}",
            extra={"model": self.model_name, "id": record_id},
        )

    async def filter_by_age(self, age: Optional[int]) -> List[Record]:
        """Return records whose age equals ``age`` exactly."""
        records = await self.store.load()
        return [r for r in records if _equals_number(r.get("age"), age)]

    async def filter_by_classes(self, classes: Optional[int]) -> List[Record]:
        """Return records whose numberOfClasses equals ``classes`` exactly."""
        records = await self.store.load()
        return [
            r for r in records if _equals_number(r.get("numberOfClasses"), classes)
        ]

    async def search_by_name(self, name: str) -> Optional[Record]:
        """Find the first record whose fullName contains ``name``.

        Matching is a case-insensitive substring test, in collection order.

        Args:
            name: Text to look for

        Returns:
            First matching record, or None
        """
        needle = name.lower()
        records = await self.store.load()
        return next(
            (r for r in records if needle in r["fullName"].lower()),
            None,
        )

    async def average_classes(self) -> Union[int, float]:
        """Average numberOfClasses over all records; 0 for an empty collection.

        Whole averages are returned as int.
        """
        records = await self.store.load()
        if not records:
            return 0
        total = sum(r["numberOfClasses"] for r in records)
        average = total / len(records)
        return int(average) if average.is_integer() else average

    @staticmethod
    def _find_index(records: List[Record], record_id: str) -> Optional[int]:
        for index, record in enumerate(records):
            if record.get("id") == record_id:
                return index
        return None
