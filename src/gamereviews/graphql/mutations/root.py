"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.game import Game


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="deleteGame")
    async def delete_game(self, info: strawberry.Info, id: strawberry.ID) -> list[Game | None] | None:
        """Delete a game and return the remaining games."""
        from ..resolvers.game import delete_game

        return await delete_game(info, str(id))
