from gridslide.models.grid import BLANK, IdGrid, LabelGrid, SymbolCodec
from gridslide.models.puzzle import Puzzle, PuzzleFormatError

__all__ = [
    "BLANK",
    "IdGrid",
    "LabelGrid",
    "Puzzle",
    "PuzzleFormatError",
    "SymbolCodec",
]
