"""An immutable grid of Boggle tiles.

Each cell holds one letter A-Z. "Q" stands for the "Qu" tile: it fills a
single cell but spells two letters.
"""

from random import Random
from typing import Sequence

from bogglesolver.dice import DICE_DIMS, random_letters, roll_dice

QU_TILE = "Q"


def parse_tile(tile: str) -> str:
    let = tile.strip().upper()
    if let == "QU":
        return QU_TILE
    if len(let) != 1 or not "A" <= let <= "Z":
        raise ValueError(f"Invalid Boggle tile: {tile!r}")
    return let


def spell(letter: str) -> str:
    """The text a tile contributes to a word."""
    return "QU" if letter == QU_TILE else letter


class Board:
    _rows: int
    _cols: int
    _cells: tuple[str, ...]

    def __init__(self, rows: Sequence[Sequence[str]]):
        grid = [[parse_tile(tile) for tile in row] for row in rows]
        if not grid or not grid[0]:
            raise ValueError("A board needs at least one cell")
        width = len(grid[0])
        for row in grid:
            if len(row) != width:
                raise ValueError(f"Ragged board: expected {width} columns, got {len(row)}")
        self._rows = len(grid)
        self._cols = width
        self._cells = tuple(let for row in grid for let in row)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def dims(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def cells(self) -> tuple[str, ...]:
        """All letters in row-major order."""
        return self._cells

    def letter(self, row: int, col: int) -> str:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"({row}, {col}) is off a {self._rows}x{self._cols} board")
        return self._cells[row * self._cols + col]

    def letters(self) -> str:
        return "".join(self._cells).lower()

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.dims == other.dims and self._cells == other._cells

    def __hash__(self):
        return hash((self.dims, self._cells))

    def __repr__(self):
        return f"Board.from_letters({self.letters()!r}, {self.dims})"

    def __str__(self):
        lines = [f"{self._rows} {self._cols}"]
        for r in range(self._rows):
            row = self._cells[r * self._cols : (r + 1) * self._cols]
            lines.append(" ".join("Qu" if let == QU_TILE else f"{let} " for let in row).rstrip())
        return "\n".join(lines) + "\n"

    # ---

    @staticmethod
    def from_letters(letters: str, dims: tuple[int, int]) -> "Board":
        """Build a board from a row-major string like "perslatgsineters"."""
        rows, cols = dims
        if len(letters) != rows * cols:
            raise ValueError(
                f"{letters!r} has {len(letters)} letters, expected {rows * cols} for {rows}x{cols}"
            )
        return Board([letters[r * cols : (r + 1) * cols] for r in range(rows)])

    @staticmethod
    def parse(text: str) -> "Board":
        """Parse a board written as "ROWS COLS" followed by that many tiles.

        Tiles are separated by whitespace; the Q tile is written "Qu":

            4 4
            A  T  E  E
            A  P  Y  O
            T  I  N  U
            E  D  S  Qu
        """
        tokens = text.split()
        if len(tokens) < 2:
            raise ValueError("Board text must start with its dimensions")
        try:
            rows, cols = int(tokens[0]), int(tokens[1])
        except ValueError:
            raise ValueError(f"Bad board dimensions: {tokens[0]!r} {tokens[1]!r}") from None
        tiles = tokens[2:]
        if rows <= 0 or cols <= 0 or len(tiles) != rows * cols:
            raise ValueError(f"Expected {rows}x{cols} tiles, got {len(tiles)}")
        return Board([tiles[r * cols : (r + 1) * cols] for r in range(rows)])

    @staticmethod
    def from_file(path: str) -> "Board":
        with open(path) as f:
            return Board.parse(f.read())

    @staticmethod
    def random(dims: tuple[int, int], rng: Random | None = None) -> "Board":
        rng = rng or Random()
        rows, cols = dims
        if dims == DICE_DIMS:
            letters = roll_dice(rng)
        else:
            letters = random_letters(rows * cols, rng)
        return Board([letters[r * cols : (r + 1) * cols] for r in range(rows)])
