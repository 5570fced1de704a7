"""A generic base for open and closed shapes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from planekit.point import Point
    from planekit.rect import Rect
    from planekit.rounded_rect import RoundedRect


class Shape(ABC):
    """Geometry common to shapes: area, perimeter, winding and bounds."""

    @abstractmethod
    def area(self) -> float:
        """Signed area; meaningful for closed shapes only."""

    @abstractmethod
    def perimeter(self, accuracy: float) -> float:
        """Total length of the perimeter."""

    @abstractmethod
    def winding(self, pt: Point) -> int:
        """Winding number of a point; meaningful for closed shapes only."""

    def contains(self, pt: Point) -> bool:
        """Whether the point lies inside the shape."""
        return self.winding(pt) != 0

    @abstractmethod
    def bounding_box(self) -> Rect:
        """The smallest rectangle enclosing the shape."""

    def as_rect(self) -> Rect | None:
        """The shape as a rectangle, if it is one."""
        return None

    def as_rounded_rect(self) -> RoundedRect | None:
        """The shape as a rounded rectangle, if it is one."""
        return None