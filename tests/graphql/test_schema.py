"""
Tests for the GraphQL schema contract and in-process execution
"""

import pytest

from gamereviews.graphql.schema import print_schema_sdl, schema, validate_schema


def field_types(type_name: str) -> dict[str, str]:
    gql_type = schema._schema.type_map[type_name]
    return {name: str(field.type) for name, field in gql_type.fields.items()}


@pytest.mark.unit
class TestSchemaContract:
    def test_validate_schema(self):
        validate_schema()

    def test_game_fields(self):
        assert field_types("Game") == {
            "id": "ID!",
            "title": "String!",
            "platform": "[String!]!",
            "reviews": "[Review!]",
        }

    def test_review_fields(self):
        # Foreign keys are not exposed
        assert field_types("Review") == {
            "id": "ID!",
            "rating": "Int!",
            "content": "String!",
            "game": "Game!",
            "author": "Author!",
        }

    def test_author_fields(self):
        assert field_types("Author") == {
            "id": "ID!",
            "name": "String!",
            "verified": "Boolean!",
            "reviews": "[Review!]",
        }

    def test_query_fields(self):
        assert field_types("Query") == {
            "games": "[Game]",
            "game": "Game",
            "reviews": "[Review]",
            "review": "Review",
            "authors": "[Author]",
            "author": "Author",
        }
        query = schema._schema.type_map["Query"]
        for name in ("game", "review", "author"):
            assert {arg: str(a.type) for arg, a in query.fields[name].args.items()} == {
                "id": "ID!"
            }

    def test_mutation_fields(self):
        assert field_types("Mutation") == {"deleteGame": "[Game]"}
        mutation = schema._schema.type_map["Mutation"]
        assert str(mutation.fields["deleteGame"].args["id"].type) == "ID!"

    def test_sdl_output(self):
        sdl = print_schema_sdl()
        assert "type Game {" in sdl
        assert "deleteGame(id: ID!): [Game]" in sdl


@pytest.mark.unit
class TestSchemaExecution:
    @pytest.mark.asyncio
    async def test_nested_query(self):
        result = await schema.execute(
            """
            query {
              author(id: "1") {
                name
                reviews { rating game { title } }
              }
            }
            """
        )

        assert result.errors is None
        assert result.data == {
            "author": {
                "name": "mario",
                "reviews": [
                    {"rating": 9, "game": {"title": "Final Fantasy 7 Remake"}},
                    {"rating": 7, "game": {"title": "Final Fantasy 7 Remake"}},
                ],
            }
        }

    @pytest.mark.asyncio
    async def test_query_with_variables(self):
        result = await schema.execute(
            "query GetGame($id: ID!) { game(id: $id) { title platform } }",
            variable_values={"id": "5"},
        )

        assert result.errors is None
        assert result.data == {
            "game": {"title": "Pokemon Scarlet", "platform": ["PS5", "Xbox", "PC"]}
        }

    @pytest.mark.asyncio
    async def test_unknown_id_is_null_without_errors(self):
        result = await schema.execute('{ review(id: "404") { id } }')

        assert result.errors is None
        assert result.data == {"review": None}

    @pytest.mark.asyncio
    async def test_missing_required_argument_is_rejected(self):
        result = await schema.execute("{ game { id } }")

        assert result.errors
        assert "id" in result.errors[0].message
