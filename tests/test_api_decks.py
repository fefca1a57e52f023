"""Tests for deck API endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from deckcode.main import app
from deckcode.models.catalog import CardCatalog
from deckcode.services.catalog import get_catalog


@pytest.fixture
async def client(catalog: CardCatalog):
    """Provide an async test client with the test catalog."""
    app.dependency_overrides[get_catalog] = lambda: catalog

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


class TestEncodeEndpoint:
    async def test_encode_alpha_beta(self, client: AsyncClient) -> None:
        response = await client.post(
            "/decks/encode",
            json={"entries": [{"id": 1, "count": 3}, {"id": 0, "count": 1}]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["code"] == "Z01ZZZ02"
        assert data["total_cards"] == 4
        assert data["unique_cards"] == 2

    async def test_entries_in_display_order(self, client: AsyncClient) -> None:
        response = await client.post(
            "/decks/encode",
            json={"entries": [{"id": 3, "count": 1}, {"id": 1, "count": 2}, {"id": 4, "count": 1}]},
        )

        data = response.json()
        assert [e["card"]["id"] for e in data["entries"]] == [4, 1, 3]
        assert data["entries"][0]["card"]["type"] == "unit"
        assert data["entries"][1]["count"] == 2

    async def test_encode_empty(self, client: AsyncClient) -> None:
        response = await client.post("/decks/encode", json={"entries": []})

        assert response.status_code == 200
        assert response.json()["code"] == ""

    async def test_count_above_cap_rejected(self, client: AsyncClient) -> None:
        response = await client.post("/decks/encode", json={"entries": [{"id": 0, "count": 4}]})

        assert response.status_code == 422

    async def test_zero_count_rejected(self, client: AsyncClient) -> None:
        response = await client.post("/decks/encode", json={"entries": [{"id": 0, "count": 0}]})

        assert response.status_code == 422

    async def test_duplicate_id_rejected(self, client: AsyncClient) -> None:
        response = await client.post(
            "/decks/encode",
            json={"entries": [{"id": 0, "count": 1}, {"id": 0, "count": 2}]},
        )

        assert response.status_code == 400
        assert "more than once" in response.json()["detail"]

    async def test_unknown_card(self, client: AsyncClient) -> None:
        response = await client.post("/decks/encode", json={"entries": [{"id": 7, "count": 1}]})

        assert response.status_code == 404
        assert response.json()["detail"] == "Card 7 not found"


class TestDecodeEndpoint:
    async def test_decode(self, client: AsyncClient) -> None:
        response = await client.post("/decks/decode", json={"code": "Z01ZZZ02"})

        assert response.status_code == 200
        data = response.json()
        assert data["code"] == "Z01ZZZ02"
        assert data["total_cards"] == 4
        assert [(e["card"]["name"], e["count"]) for e in data["entries"]] == [
            ("Alpha", 1),
            ("Beta", 3),
        ]

    async def test_decode_empty(self, client: AsyncClient) -> None:
        response = await client.post("/decks/decode", json={"code": ""})

        assert response.status_code == 200
        assert response.json()["entries"] == []

    async def test_decode_normalizes_code(self, client: AsyncClient) -> None:
        response = await client.post("/decks/decode", json={"code": " Z0201 "})

        assert response.json()["code"] == "Z0102"

    async def test_truncated_code(self, client: AsyncClient) -> None:
        response = await client.post("/decks/decode", json={"code": "Z0"})

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["reason"] == "truncated_token"
        assert detail["fragment"] == "0"
        assert detail["position"] == 1

    async def test_unknown_card_in_code(self, client: AsyncClient) -> None:
        response = await client.post("/decks/decode", json={"code": "Z09"})

        assert response.status_code == 400
        assert response.json()["detail"]["reason"] == "unknown_card"


class TestEditEndpoint:
    async def test_build_from_empty(self, client: AsyncClient) -> None:
        response = await client.post(
            "/decks/edit",
            json={
                "commands": [
                    {"action": "add", "id": 0},
                    {"action": "add", "id": 1},
                    {"action": "add", "id": 1},
                    {"action": "add", "id": 1},
                ]
            },
        )

        assert response.status_code == 200
        assert response.json()["code"] == "Z01ZZZ02"

    async def test_add_past_cap_is_noop(self, client: AsyncClient) -> None:
        commands = [{"action": "add", "id": 0}] * 4

        response = await client.post("/decks/edit", json={"code": "", "commands": commands})

        assert response.json()["code"] == "ZZZ01"
        assert response.json()["total_cards"] == 3

    async def test_remove_from_code(self, client: AsyncClient) -> None:
        response = await client.post(
            "/decks/edit",
            json={
                "code": "Z01ZZZ02",
                "commands": [
                    {"action": "remove", "id": 0},
                    {"action": "remove", "id": 1},
                    {"action": "remove", "id": 4},
                ],
            },
        )

        assert response.json()["code"] == "ZZ02"

    async def test_add_unknown_card(self, client: AsyncClient) -> None:
        response = await client.post(
            "/decks/edit", json={"commands": [{"action": "add", "id": 7}]}
        )

        assert response.status_code == 404

    async def test_invalid_action(self, client: AsyncClient) -> None:
        response = await client.post(
            "/decks/edit", json={"commands": [{"action": "swap", "id": 0}]}
        )

        assert response.status_code == 422

    async def test_invalid_starting_code(self, client: AsyncClient) -> None:
        response = await client.post("/decks/edit", json={"code": "ZZZZ01", "commands": []})

        assert response.status_code == 400
        assert response.json()["detail"]["reason"] == "invalid_marker"
