"""Integration tests for the teacher API over an ASGI transport."""

import asyncio
import json
from pathlib import Path

import pytest
from fastapi import status
from httpx import AsyncClient


def _teacher(name: str, **overrides) -> dict:
    return {
        "fullName": name,
        "age": 38,
        "dateOfBirth": "1986-09-30",
        "numberOfClasses": 4,
        **overrides,
    }


class TestTeacherLifecycle:
    """End-to-end create, update, search and delete against the storage file."""

    @pytest.mark.asyncio
    async def test_full_lifecycle(self, async_client: AsyncClient, data_file: Path):
        response = await async_client.post("/teachers", json=_teacher("Maria Curie"))
        assert response.status_code == status.HTTP_201_CREATED
        teacher_id = response.json()["id"]

        response = await async_client.put(
            f"/teachers/{teacher_id}", json={"numberOfClasses": 6, "room": "B12"}
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["room"] == "B12"

        stored = json.loads(data_file.read_text(encoding="utf-8"))
        assert stored == [
            {**_teacher("Maria Curie", numberOfClasses=6), "id": teacher_id, "room": "B12"}
        ]

        response = await async_client.get("/teachers/search", params={"name": "curie"})
        assert response.json()["id"] == teacher_id

        response = await async_client.get("/teachers/average-classes")
        assert response.json() == {"averageClasses": 6}

        response = await async_client.delete(f"/teachers/{teacher_id}")
        assert response.status_code == status.HTTP_204_NO_CONTENT

        response = await async_client.get("/teachers")
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_storage_file_is_pretty_printed(
        self, async_client: AsyncClient, data_file: Path
    ):
        await async_client.post("/teachers", json=_teacher("Ann Lee"))

        content = data_file.read_text(encoding="utf-8")
        assert content.startswith("[\n  {\n")


class TestConcurrentWrites:
    """Concurrent mutations within one process are serialized."""

    @pytest.mark.asyncio
    async def test_concurrent_creates_against_empty_collection(
        self, async_client: AsyncClient
    ):
        responses = await asyncio.gather(
            *(
                async_client.post("/teachers", json=_teacher(f"Teacher {i}"))
                for i in range(20)
            )
        )

        assert all(r.status_code == status.HTTP_201_CREATED for r in responses)
        listed = (await async_client.get("/teachers")).json()
        assert len(listed) == 20
        assert len({t["id"] for t in listed}) == 20

    @pytest.mark.asyncio
    async def test_concurrent_updates_do_not_lose_fields(
        self, async_client: AsyncClient
    ):
        created = (await async_client.post("/teachers", json=_teacher("Ann Lee"))).json()

        await asyncio.gather(
            *(
                async_client.put(f"/teachers/{created['id']}", json={f"field{i}": i})
                for i in range(10)
            )
        )

        stored = (await async_client.get("/teachers")).json()[0]
        assert all(stored[f"field{i}"] == i for i in range(10))
