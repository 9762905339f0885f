"""Canvas: the composited output of a render."""

from dataclasses import dataclass
from typing import Any

PIXEL_OFF = "0"
PIXEL_ON = "1"


@dataclass(frozen=True, slots=True)
class Canvas:
    """A rectangular grid of 0/1 pixels.

    Rows are kept as '0'/'1' strings, which is also the form the CLI prints.

    Attributes:
        rows: Canvas rows, top to bottom
    """

    rows: tuple[str, ...]

    def __post_init__(self) -> None:
        if self.rows:
            width = len(self.rows[0])
            for idx, row in enumerate(self.rows):
                if len(row) != width:
                    raise ValueError(f"Canvas row {idx} has width {len(row)}, expected {width}")
                if row.strip(PIXEL_OFF + PIXEL_ON):
                    raise ValueError(f"Canvas row {idx} contains characters other than 0/1")

    @classmethod
    def from_bits(cls, bits: list[list[int]]) -> "Canvas":
        """Build a canvas from a 2D grid of ints."""
        return cls(rows=tuple("".join(PIXEL_ON if bit else PIXEL_OFF for bit in row) for row in bits))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def is_empty(self) -> bool:
        """Check if the canvas has no rows."""
        return not self.rows

    def pixel(self, row: int, col: int) -> int:
        """Get the pixel at (row, col) as 0 or 1."""
        return 1 if self.rows[row][col] == PIXEL_ON else 0

    def to_bits(self) -> list[list[int]]:
        """Rows as lists of 0/1 ints."""
        return [[1 if ch == PIXEL_ON else 0 for ch in row] for row in self.rows]

    def to_text(self, separator: str = "\n") -> str:
        """Join rows into a single string.

        Args:
            separator: Line separator placed between rows

        Returns:
            All rows joined by separator (no trailing separator)
        """
        return separator.join(self.rows)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with width, height and rows fields
        """
        return {
            "width": self.width,
            "height": self.height,
            "rows": list(self.rows)
        }

    def __str__(self) -> str:
        return self.to_text()
