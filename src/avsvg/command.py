"""Command model: one SVG path instruction (type letter + coordinates)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from avsvg.common import CommandKind, MalformedCommandError
from avsvg.consts import SVG_ARGS, SVG_ARGS_SEPARATORS

if TYPE_CHECKING:
    from avsvg.matrix import AvMatrix  # pylint: disable=unused-import

Number = Union[int, float]

_ARGS_RE = re.compile(SVG_ARGS)


###############################################################################
# AvCommand
###############################################################################


@dataclass(frozen=True)
class AvCommand:
    """
    One command of a SVG path, e.g. AvCommand("M", (23.6, -12.4)).

    The command _type_ is the command letter with its case preserved:
    uppercase = absolute coordinates, lowercase = relative coordinates.
    The number of _coordinates_ always matches the arity of the command kind
        MoveTo:           2: Mm
        LineTo:           2: Ll   1: Hh(x)   1:Vv(y)
        CubicBezier:      6: Cc   4: Ss
        QuadraticBezier:  4: Qq   2: Tt
        ArcCurve:         7: Aa
        ClosePath:        0: Zz

    Instances are immutable, so pipeline stages never modify a command they did not create.
    """

    type: str = "M"
    coordinates: Tuple[float, ...] = field(default=(0.0, 0.0))

    def __post_init__(self):
        kind = CommandKind.from_letter(self.type)
        coordinates = tuple(float(value) for value in self.coordinates)
        if len(coordinates) != kind.arity:
            raise MalformedCommandError(
                f"Command with type: {self.type}, does not match the expected number of "
                f"parameters: {kind.arity} (got {len(coordinates)})"
            )
        object.__setattr__(self, "coordinates", coordinates)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_string(cls, command_string: str) -> AvCommand:
        """
        Create a command from its raw path data, e.g. "M23.6,-12.4".
        The first (non-blank) character is the type, the remaining numbers are the coordinates.

        Raises:
            MalformedCommandError: on unknown type or wrong number of coordinates.
        """
        text = command_string.strip()
        if not text:
            raise MalformedCommandError("Empty command string")
        return cls(text[0], cls.parse_numbers(text[1:]))

    @classmethod
    def from_coordinates(cls, command_type: str, *coordinates: Number) -> AvCommand:
        """Create a command from coordinates passed as separate arguments."""
        return cls(command_type, tuple(coordinates))

    @classmethod
    def from_points(cls, command_type: str, *points: Sequence[Number]) -> AvCommand:
        """Create a command from (x, y) points passed as separate arguments."""
        coordinates: List[float] = []
        for point in points:
            coordinates.extend((point[0], point[1]))
        return cls(command_type, tuple(coordinates))

    @classmethod
    def from_line(cls, x1: float, y1: float, x2: float, y2: float) -> AvCommand:
        """
        Create a cubic 'C' command representing the straight line from (x1, y1) to (x2, y2).
        Control point 1 collapses onto the start, control point 2 onto the end.
        """
        return cls("C", (x1, y1, x2, y2, x2, y2))

    @classmethod
    def from_quadratic(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        x0: float,
        y0: float,
        qx: float,
        qy: float,
        x2: float,
        y2: float,
    ) -> AvCommand:
        """
        Create a cubic 'C' command from a quadratic Bezier curve by degree elevation.

        Args:
            x0, y0: start point
            qx, qy: quadratic control point
            x2, y2: end point
        """
        factor = 2.0 / 3.0
        return cls(
            "C",
            (
                x0 + factor * (qx - x0),
                y0 + factor * (qy - y0),
                x2 + factor * (qx - x2),
                y2 + factor * (qy - y2),
                x2,
                y2,
            ),
        )

    @staticmethod
    def parse_numbers(raw: str) -> Tuple[float, ...]:
        """
        Extract all numbers of a coordinate run.

        Numbers may be separated by whitespace and/or commas, or not separated at all
        when the next number starts with a sign or a second decimal point ("10-5", "1.5.5").

        Raises:
            MalformedCommandError: if anything else than numbers and separators is found.
        """
        residue = _ARGS_RE.sub(" ", raw)
        if residue.strip(SVG_ARGS_SEPARATORS):
            raise MalformedCommandError(f"Unexpected characters in coordinates: '{raw.strip()}'")
        return tuple(float(arg) for arg in _ARGS_RE.findall(raw))

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def kind(self) -> CommandKind:
        """CommandKind: kind of the command independent of relative/absolute."""
        return CommandKind(self.type.upper())

    @property
    def is_relative(self) -> bool:
        """bool: True for lowercase (relative) commands."""
        return self.type.islower()

    @property
    def is_absolute(self) -> bool:
        """bool: True for uppercase (absolute) commands."""
        return self.type.isupper()

    @property
    def points(self) -> NDArray[np.float64]:
        """
        The coordinates as array of (x, y) pairs, shape (n, 2).
        Only meaningful for pair based commands (M, L, C, S, Q, T) - like the normalized ones.
        """
        if len(self.coordinates) % 2:
            raise ValueError(f"Command '{self.type}' has no coordinate pairs")
        return np.asarray(self.coordinates, dtype=np.float64).reshape(-1, 2)

    @property
    def end_point(self) -> Tuple[float, float]:
        """Tuple[float, float]: last coordinate pair of the command."""
        if len(self.coordinates) < 2:
            raise ValueError(f"Command '{self.type}' has no end point")
        return self.coordinates[-2], self.coordinates[-1]

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def clone(self) -> AvCommand:
        """Return an independent copy of this command."""
        return AvCommand(self.type, self.coordinates)

    def transform(self, matrix: AvMatrix) -> NDArray[np.float64]:
        """
        Map the coordinate pairs through _matrix_ and return them flattened,
        i.e. in the same layout as _coordinates_.
        """
        return matrix.map_points(self.points).reshape(-1)

    def to_string(self) -> str:
        """
        Serialize as "type,coord,coord,...".
        Uses the shortest representation that reads back to the same float.
        """
        return ",".join([self.type] + [repr(value) for value in self.coordinates])

    def __str__(self) -> str:
        return f"AvCommand(type: {self.type}, coordinates: {','.join(f'{v:g}' for v in self.coordinates)})"
