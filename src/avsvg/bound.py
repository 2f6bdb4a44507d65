"""Axis aligned bounding boxes of normalized path commands."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from avsvg.command import AvCommand  # pylint: disable=unused-import
    from avsvg.matrix import AvMatrix  # pylint: disable=unused-import


###############################################################################
# AvBound
###############################################################################
@dataclass(frozen=True)
class AvBound:
    """
    Represents an axis aligned bounding box.

    Attributes:
        left (float): The minimum x-coordinate.
        top (float): The minimum y-coordinate.
        right (float): The maximum x-coordinate.
        bottom (float): The maximum y-coordinate.

    The empty bound uses the sentinels left = top = +inf and right = bottom = -inf,
    so that the union with any other bound yields the other bound.
    """

    left: float = math.inf
    top: float = math.inf
    right: float = -math.inf
    bottom: float = -math.inf

    @classmethod
    def empty(cls) -> AvBound:
        """Return the empty bound."""
        return cls()

    @classmethod
    def from_points(cls, points: Union[Sequence[Sequence[float]], NDArray[np.float64]]) -> AvBound:
        """Return the tightest bound around the given (x, y) points."""
        arr = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        if not arr.size:
            return cls.empty()
        mins = arr.min(axis=0)
        maxs = arr.max(axis=0)
        return cls(float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))

    @property
    def is_empty(self) -> bool:
        """bool: True if the bound contains no point at all."""
        return self.left > self.right or self.top > self.bottom

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        """The extent of the bound as Tuple (left, top, right, bottom)."""
        return self.left, self.top, self.right, self.bottom

    @property
    def width(self) -> float:
        """float: The width of the bound (0.0 if empty)."""
        return 0.0 if self.is_empty else self.right - self.left

    @property
    def height(self) -> float:
        """float: The height of the bound (0.0 if empty)."""
        return 0.0 if self.is_empty else self.bottom - self.top

    @property
    def centroid(self) -> Tuple[float, float]:
        """
        The center of the bound.

        Returns:
            Tuple[float, float]: The coordinates of the center as (x, y)
        """
        return (self.left + self.right) / 2, (self.top + self.bottom) / 2

    def include_point(self, x: float, y: float) -> AvBound:
        """Return a bound extended so that it contains the point (x, y)."""
        return AvBound(min(self.left, x), min(self.top, y), max(self.right, x), max(self.bottom, y))

    def union(self, other: AvBound) -> AvBound:
        """Return the smallest bound containing this and the _other_ bound."""
        return AvBound(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def transform_affine(self, matrix: AvMatrix) -> AvBound:
        """Transform the four corners by _matrix_ and return the bound around them."""
        return matrix.map_bound(self)

    @classmethod
    def from_dict(cls, data: dict) -> AvBound:
        """Create an AvBound instance from a dictionary."""
        return cls(
            left=data.get("left", math.inf),
            top=data.get("top", math.inf),
            right=data.get("right", -math.inf),
            bottom=data.get("bottom", -math.inf),
        )

    def to_dict(self) -> dict:
        """Convert the AvBound instance to a dictionary."""
        return {
            "left": self.left,
            "top": self.top,
            "right": self.right,
            "bottom": self.bottom,
        }

    def __str__(self) -> str:
        return f"{self.left},{self.top},{self.right},{self.bottom}"


###############################################################################
# BoundCalculator
###############################################################################
class BoundCalculator:
    """Static methods to derive bounds from command sequences."""

    @staticmethod
    def compute_bound(commands: Sequence[AvCommand], matrix: Optional[AvMatrix] = None) -> AvBound:
        """
        Compute the bound of normalized _commands_ (M and C) after mapping them through _matrix_.

        Every coordinate pair is taken into account, control points included,
        so the result encloses the curves (the convex hull property of Bezier curves).

        Args:
            commands: normalized commands, i.e. only pair based commands
            matrix: transformation applied before measuring; None for identity

        Returns:
            AvBound: the bound, empty if there are no coordinates
        """
        coordinates = [value for command in commands for value in command.coordinates]
        if len(coordinates) % 2:
            raise ValueError("Bound computation requires commands with (x, y) pairs only (normalize first)")
        if not coordinates:
            return AvBound.empty()
        points = np.asarray(coordinates, dtype=np.float64).reshape(-1, 2)
        if matrix is not None:
            points = matrix.map_points(points)
        return AvBound.from_points(points)

    @staticmethod
    def union(bounds: Iterable[AvBound]) -> AvBound:
        """Return the component-wise union of all _bounds_ (empty for no bounds)."""
        result = AvBound.empty()
        for bound in bounds:
            result = result.union(bound)
        return result
