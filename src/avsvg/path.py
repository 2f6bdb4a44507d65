"""SVG path object: parsed commands, transformation, render properties and bound."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, List, Optional, Sequence, Set, Tuple

import numpy as np
from fontTools.pens.transformPen import TransformPen
from numpy.typing import NDArray

from avsvg.bound import AvBound, BoundCalculator
from avsvg.command import AvCommand
from avsvg.common import CommandKind
from avsvg.consts import (
    DEFAULT_FILL_COLOR,
    DEFAULT_OPACITY,
    DEFAULT_STROKE_CAP,
    DEFAULT_STROKE_COLOR,
    DEFAULT_STROKE_JOIN,
    DEFAULT_STROKE_WIDTH,
)
from avsvg.matrix import AvMatrix
from avsvg.svgpath import AvSvgPath

logger = logging.getLogger(__name__)


###############################################################################
# AvRenderProperties
###############################################################################


@dataclass
class AvRenderProperties:
    """
    Render properties of a path or a group, opaque to the geometry.

    Each property may be None, meaning "not set": the value is then inherited
    from the group at draw time (see resolve()) or falls back to the default.

    Attributes:
        stroke_join: "miter", "round" or "bevel"
        stroke_cap: "butt", "round" or "square"
        stroke_width: width of the stroke in user units
        stroke_color: stroke paint, e.g. "#000000" or "none"
        fill_color: fill paint, e.g. "#ff0000" or "none"
        opacity: 0.0 (transparent) .. 1.0 (opaque)
    """

    stroke_join: Optional[str] = DEFAULT_STROKE_JOIN
    stroke_cap: Optional[str] = DEFAULT_STROKE_CAP
    stroke_width: Optional[float] = DEFAULT_STROKE_WIDTH
    stroke_color: Optional[str] = DEFAULT_STROKE_COLOR
    fill_color: Optional[str] = DEFAULT_FILL_COLOR
    opacity: Optional[float] = DEFAULT_OPACITY

    @classmethod
    def inherit(cls) -> AvRenderProperties:
        """Return properties with nothing set, so everything comes from the group."""
        return cls(None, None, None, None, None, None)

    def clone(self) -> AvRenderProperties:
        """Return an independent copy."""
        return replace(self)

    def resolve(self, parent: Optional[AvRenderProperties] = None) -> AvRenderProperties:
        """
        Return the effective properties with every value set.

        A value set on this object wins, otherwise the _parent_ (group) value is used,
        otherwise the default. The opacity is the mean of both when both are set.
        """
        defaults = AvRenderProperties()
        resolved: dict[str, Any] = {}
        for prop in fields(self):
            own = getattr(self, prop.name)
            inherited = getattr(parent, prop.name) if parent is not None else None
            if own is not None:
                resolved[prop.name] = own
            elif inherited is not None:
                resolved[prop.name] = inherited
            else:
                resolved[prop.name] = getattr(defaults, prop.name)

        if self.opacity is not None and parent is not None and parent.opacity is not None:
            resolved["opacity"] = (self.opacity + parent.opacity) / 2.0

        return AvRenderProperties(**resolved)

    def to_dict(self) -> dict:
        """Convert the AvRenderProperties instance to a dictionary."""
        return {prop.name: getattr(self, prop.name) for prop in fields(self)}

    @classmethod
    def from_dict(cls, data: dict) -> AvRenderProperties:
        """Create an AvRenderProperties instance from a dictionary (missing keys are not set)."""
        return cls(**{prop.name: data.get(prop.name) for prop in fields(cls)})


###############################################################################
# AvPath
###############################################################################


class AvPath:
    """
    A SVG path created from its path data string, e.g. AvPath("M2,2 L8,8").

    The data is processed once on construction into
        initial_commands     -- the commands as written in the data string
        absolutized_commands -- relative commands converted into absolute ones
        normalized_commands  -- only 'M' and 'C' commands, ready for drawing
    These command tuples never change; a different data string needs a new AvPath.

    The _matrix_ and the _render_properties_ may be changed at any time.
    A given matrix is copied, so every path owns its own matrix.
    The bound is computed lazily and cached until the path is invalidated.
    Changing the matrix through this object invalidates automatically; after
    mutating the matrix object directly call invalidate().
    """

    def __init__(
        self,
        data: str,
        render_properties: Optional[AvRenderProperties] = None,
        matrix: Optional[AvMatrix] = None,
    ):
        """
        Parse, absolutize and normalize _data_.

        Raises:
            MalformedCommandError: if _data_ is not valid path data; no path is created.
        """
        initial = AvSvgPath.parse(data)
        absolutized = AvSvgPath.absolutize(initial)

        normalized: List[AvCommand] = []
        closing_indices: Set[int] = set()
        for source, emitted in AvSvgPath.iter_normalized(absolutized):
            normalized.extend(emitted)
            if source.kind is CommandKind.CLOSE_PATH:
                closing_indices.add(len(normalized) - 1)

        self._data = data
        self._initial_commands: Tuple[AvCommand, ...] = tuple(initial)
        self._absolutized_commands: Tuple[AvCommand, ...] = tuple(absolutized)
        self._normalized_commands: Tuple[AvCommand, ...] = tuple(normalized)
        self._closing_indices: frozenset[int] = frozenset(closing_indices)

        self.render_properties = render_properties if render_properties is not None else AvRenderProperties()
        self._matrix = matrix.copy() if matrix is not None else AvMatrix()
        self._bound: AvBound = AvBound.empty()
        self._revision = 0
        self.is_updated = True

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def data(self) -> str:
        """str: the path data string this path was created from."""
        return self._data

    @property
    def initial_commands(self) -> Tuple[AvCommand, ...]:
        """The commands as parsed from the data string."""
        return self._initial_commands

    @property
    def absolutized_commands(self) -> Tuple[AvCommand, ...]:
        """The commands using absolute coordinates only."""
        return self._absolutized_commands

    @property
    def normalized_commands(self) -> Tuple[AvCommand, ...]:
        """The commands converted to 'M' and 'C' commands only."""
        return self._normalized_commands

    @property
    def matrix(self) -> AvMatrix:
        """AvMatrix: the transformation of this path."""
        return self._matrix

    @matrix.setter
    def matrix(self, matrix: AvMatrix) -> None:
        self._matrix = matrix.copy()
        self.invalidate()

    @property
    def revision(self) -> int:
        """int: counter increased on every invalidation."""
        return self._revision

    @property
    def bound(self) -> AvBound:
        """
        The bound around all (transformed) normalized coordinates, control points included.
        Recomputed only if the path was invalidated since the last call.
        """
        if self.is_updated:
            self._bound = BoundCalculator.compute_bound(self._normalized_commands, self._matrix)
            self.is_updated = False
        return self._bound

    # -------------------------------------------------------------------------
    # Transformation
    # -------------------------------------------------------------------------

    def invalidate(self) -> None:
        """Mark the cached bound as outdated."""
        self.is_updated = True
        self._revision += 1

    def transform(self, matrix: AvMatrix) -> AvPath:
        """Compose _matrix_ onto the path matrix (on the right)."""
        self._matrix.multiply(matrix)
        self.invalidate()
        return self

    def translate(self, x: float = 0.0, y: float = 0.0) -> AvPath:
        """Append a translation to the path matrix."""
        self._matrix.translate(x, y)
        self.invalidate()
        return self

    def rotate(self, degrees: float) -> AvPath:
        """Append a rotation (degrees) to the path matrix."""
        self._matrix.rotate(degrees)
        self.invalidate()
        return self

    def scale(self, x: float = 1.0, y: Optional[float] = None) -> AvPath:
        """Append a scaling to the path matrix."""
        self._matrix.scale(x, y)
        self.invalidate()
        return self

    def skew(self, degrees_x: float = 0.0, degrees_y: float = 0.0) -> AvPath:
        """Append a skew (degrees) to the path matrix."""
        self._matrix.skew(degrees_x, degrees_y)
        self.invalidate()
        return self

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_closed(self) -> bool:
        """Return True if the last command closes the path (Z)."""
        if not self._absolutized_commands:
            return False
        return self._absolutized_commands[-1].kind is CommandKind.CLOSE_PATH

    @staticmethod
    def _coordinates(commands: Sequence[AvCommand]) -> List[Tuple[float, ...]]:
        return [command.coordinates for command in commands]

    def initial_coordinates(self) -> List[Tuple[float, ...]]:
        """The coordinates of each initial command."""
        return self._coordinates(self._initial_commands)

    def absolutized_coordinates(self) -> List[Tuple[float, ...]]:
        """The coordinates of each absolutized command."""
        return self._coordinates(self._absolutized_commands)

    def normalized_coordinates(self) -> List[Tuple[float, ...]]:
        """The coordinates of each normalized command."""
        return self._coordinates(self._normalized_commands)

    def transformed_coordinates(self, matrix: Optional[AvMatrix] = None) -> List[NDArray[np.float64]]:
        """
        The coordinates of each normalized command mapped through _matrix_.
        If no matrix is given the path matrix is used.
        """
        matrix = matrix if matrix is not None else self._matrix
        return [command.transform(matrix) for command in self._normalized_commands]

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def effective_matrix(self, group_matrix: Optional[AvMatrix] = None) -> AvMatrix:
        """Return group_matrix * matrix (the path matrix is applied first)."""
        if group_matrix is None:
            return self._matrix.copy()
        return group_matrix.copy().multiply(self._matrix)

    def draw(self, pen, group_matrix: Optional[AvMatrix] = None) -> None:
        """
        Replay the normalized commands into a fontTools pen (moveTo, curveTo, closePath, endPath).

        Subpaths closed by a 'Z' end with closePath(), all others with endPath().
        The path matrix (preceded by the _group_matrix_, if given) is applied
        through a TransformPen unless it is the identity.

        Args:
            pen: any fontTools (segment) pen
            group_matrix: transformation of the owning group, applied after the path matrix
        """
        matrix = self.effective_matrix(group_matrix)
        if not matrix.is_identity:
            pen = TransformPen(pen, matrix.to_transform())

        current: Optional[Tuple[float, float]] = None  # None = no open subpath
        last_point: Tuple[float, float] = (0.0, 0.0)

        for index, command in enumerate(self._normalized_commands):
            c = command.coordinates
            if command.type == "M":
                if current is not None:
                    pen.endPath()
                pen.moveTo((c[0], c[1]))
            else:
                if current is None:
                    # drawing continues after a closed subpath or the path starts without a move
                    if index == 0:
                        logger.warning("Path data '%s' does not start with a move, starting at (0, 0)", self._data)
                    pen.moveTo(last_point)
                pen.curveTo((c[0], c[1]), (c[2], c[3]), (c[4], c[5]))
            current = last_point = (c[-2], c[-1])

            if index in self._closing_indices:
                pen.closePath()
                current = None

        if current is not None:
            pen.endPath()

    def to_path_string(self, round_func=None) -> str:
        """
        Return the normalized commands as SVG path string, with 'Z' where subpaths are closed.

        Args:
            round_func (Optional[Callable], optional): rounding applied to each coordinate.
        """
        parts = []
        for index, command in enumerate(self._normalized_commands):
            parts.append(AvSvgPath.to_path_string([command], round_func))
            if index in self._closing_indices:
                parts.append("Z")
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"AvPath(data={self._data!r}, matrix={self._matrix!r})"
