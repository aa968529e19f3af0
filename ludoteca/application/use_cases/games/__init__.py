"""Use cases for managing the game catalog."""

from .add_game import add_game
from .delete_game import delete_game
from .get_game import get_game
from .get_game_availability import GameAvailability, get_game_availability
from .list_games import list_games, search_games
from .update_game import update_game

__all__ = [
    "GameAvailability",
    "add_game",
    "delete_game",
    "get_game",
    "get_game_availability",
    "list_games",
    "search_games",
    "update_game",
]
