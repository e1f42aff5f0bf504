"""
Tests for request logging middleware helpers
"""

from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from gamereviews.api.app import create_app
from gamereviews.database import get_database
from gamereviews.logging import get_graphql_operation, get_request_id
from gamereviews.middleware import operation_name_from_payload


@pytest.mark.unit
class TestOperationName:
    def test_explicit_operation_name_wins(self):
        assert (
            operation_name_from_payload({"operationName": "Explicit", "query": "query Other { games { id } }"})
            == "Explicit"
        )

    def test_named_query(self):
        assert operation_name_from_payload({"query": "query AllGames { games { id } }"}) == "AllGames"

    def test_named_mutation_is_prefixed(self):
        payload = {"query": 'mutation RemoveGame { deleteGame(id: "1") { id } }'}
        assert operation_name_from_payload(payload) == "mutation:RemoveGame"

    def test_anonymous_operation(self):
        assert operation_name_from_payload({"query": "{ games { id } }"}) == "unnamed_operation"

    def test_introspection(self):
        assert operation_name_from_payload({"query": "{ __schema { types { name } } }"}) == "__introspection"

    def test_missing_query(self):
        assert operation_name_from_payload({}) is None
        assert operation_name_from_payload({"query": 42}) is None


@pytest.mark.integration
@pytest.mark.asyncio
async def test_request_context_is_cleared_after_request():
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/graphql", json={"query": "query AllGames { games { id } }"})

    assert response.status_code == 200
    assert response.json()["data"]["games"][0]["id"] == "1"
    assert get_request_id() is None


@pytest.mark.integration
@pytest.mark.asyncio
async def test_operation_name_is_bound_while_resolvers_run():
    seen = []

    def recording_get_database():
        seen.append(get_graphql_operation())
        return get_database()

    transport = ASGITransport(app=create_app())
    with patch(
        "gamereviews.graphql.resolvers.game.get_database", side_effect=recording_get_database
    ):
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            await client.post(
                "/graphql", json={"query": 'mutation RemoveGame { deleteGame(id: "2") { id } }'}
            )

    assert seen == ["mutation:RemoveGame"]
    assert get_graphql_operation() is None
