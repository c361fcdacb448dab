"""Grid types and the label <-> id symbol codec."""

from __future__ import annotations

from dataclasses import dataclass, field

BLANK = ""

LabelGrid = list[list[str]]
IdGrid = list[list[int]]


@dataclass
class SymbolCodec:
    """Bijection between the labels of a grid and small positive ids.

    Ids are handed out from 1 in the order labels are first seen while
    scanning row-major.  0 is never assigned.
    """

    encode_map: dict[str, int] = field(default_factory=dict)
    decode_map: dict[int, str] = field(default_factory=dict)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_grid(cls, grid: LabelGrid) -> tuple[SymbolCodec, IdGrid]:
        """Build a codec from *grid* and return it with the encoded grid.

        Example::

            codec, ids = SymbolCodec.from_grid([["A", "B"], ["", "A"]])
            # ids == [[1, 2], [3, 1]]
        """
        codec = cls()
        ids: IdGrid = []
        for row in grid:
            id_row: list[int] = []
            for label in row:
                if label not in codec.encode_map:
                    next_id = len(codec.encode_map) + 1
                    codec.encode_map[label] = next_id
                    codec.decode_map[next_id] = label
                id_row.append(codec.encode_map[label])
            ids.append(id_row)
        return codec, ids

    # -- queries --------------------------------------------------------------

    @property
    def has_blank(self) -> bool:
        return BLANK in self.encode_map

    @property
    def blank_id(self) -> int | None:
        return self.encode_map.get(BLANK)

    def __len__(self) -> int:
        return len(self.encode_map)

    # -- conversion -----------------------------------------------------------

    def encode(self, grid: LabelGrid) -> IdGrid:
        """Encode *grid* with the existing mapping.

        Every label must already be known to the codec.
        """
        return [[self.encode_map[label] for label in row] for row in grid]

    def decode(self, grid: IdGrid) -> LabelGrid:
        return [[self.decode_map[v] for v in row] for row in grid]


def copy_grid(grid: list[list]) -> list[list]:
    return [row[:] for row in grid]
