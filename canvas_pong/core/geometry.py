"""
Axis-aligned rectangles and bounding boxes shared by every entity
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BoundingBox:
    """Edges of an axis-aligned rectangle"""

    left: float
    right: float
    top: float
    bottom: float

    def overlaps(self, other: "BoundingBox") -> bool:
        """
        Strict AABB overlap test.

        Boxes that only share an edge do not overlap, and the result does not
        depend on which box is ``self``.
        """
        return (
            self.left < other.right
            and self.right > other.left
            and self.top < other.bottom
            and self.bottom > other.top
        )


def boxes_overlap(first: BoundingBox, second: BoundingBox) -> bool:
    """Returns True if the two boxes overlap"""
    return first.overlaps(second)


class Rect:
    """Positioned rectangle with a size fixed at construction"""

    __slots__ = ("x", "y", "_width", "_height")

    def __init__(self, x: float, y: float, width: float, height: float):
        if width <= 0 or height <= 0:
            raise ValueError(f"Rect size must be positive, got {width}x{height}")
        self.x = x
        self.y = y
        self._width = width
        self._height = height

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def bounding_box(self) -> BoundingBox:
        """Returns the left, right, top and bottom edges of the rectangle"""
        return BoundingBox(
            left=self.x,
            right=self.x + self._width,
            top=self.y,
            bottom=self.y + self._height,
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Returns (x, y, width, height)"""
        return (self.x, self.y, self._width, self._height)

    def __repr__(self) -> str:
        return f"Rect(x={self.x}, y={self.y}, width={self._width}, height={self._height})"
