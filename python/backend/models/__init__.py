from backend.models.grid import Coordinate, Direction, GridLayout
from backend.models.move import MoveRecord
from backend.models.params import InvalidParameters, PuzzleParams
from backend.models.tube import Tube

__all__ = [
    "Coordinate",
    "Direction",
    "GridLayout",
    "InvalidParameters",
    "MoveRecord",
    "PuzzleParams",
    "Tube",
]
