"""Points, circles and wheels, with fields of embedded values promoted."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Point:
    """A point on the integer plane."""

    x: int = 0
    y: int = 0

    def __str__(self) -> str:
        return f"Point{{X:{self.x}, Y:{self.y}}}"


@dataclass(slots=True)
class Circle:
    """A circle; the fields of its centre point are promoted."""

    point: Point
    radius: int = 0

    @property
    def x(self) -> int:
        return self.point.x

    @x.setter
    def x(self, value: int) -> None:
        self.point.x = value

    @property
    def y(self) -> int:
        return self.point.y

    @y.setter
    def y(self, value: int) -> None:
        self.point.y = value

    def __str__(self) -> str:
        return f"Circle{{Point:{self.point}, Radius:{self.radius}}}"


@dataclass(slots=True)
class Wheel:
    """A wheel; the fields of its circle, and of the circle's point, are promoted."""

    circle: Circle
    spokes: int = 0

    @property
    def point(self) -> Point:
        return self.circle.point

    @point.setter
    def point(self, value: Point) -> None:
        self.circle.point = value

    @property
    def radius(self) -> int:
        return self.circle.radius

    @radius.setter
    def radius(self, value: int) -> None:
        self.circle.radius = value

    @property
    def x(self) -> int:
        return self.circle.x

    @x.setter
    def x(self, value: int) -> None:
        self.circle.x = value

    @property
    def y(self) -> int:
        return self.circle.y

    @y.setter
    def y(self, value: int) -> None:
        self.circle.y = value

    def __str__(self) -> str:
        return f"Wheel{{Circle:{self.circle}, Spokes:{self.spokes}}}"