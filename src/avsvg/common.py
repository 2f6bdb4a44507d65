"""Central module containing shared definitions for SVG path processing."""

from __future__ import annotations

from enum import Enum

from avsvg.consts import COMMAND_ARITY, SVG_CMDS

###############################################################################
# Number output
###############################################################################


def format_number(value: float) -> str:
    """Shortest text of _value_ that reads back to the same float, "2" instead of "2.0"."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


###############################################################################
# Errors
###############################################################################


class AvSvgPathError(ValueError):
    """Base class for all errors raised by avsvg."""


class MalformedCommandError(AvSvgPathError):
    """Path data contains an unknown command letter or a wrong number of coordinates."""


class NonInvertibleMatrixError(AvSvgPathError):
    """The determinant of a matrix is zero, so the matrix has no inverse."""


###############################################################################
# Enums
###############################################################################


class CommandKind(Enum):
    """
    Enum of the SVG path command kinds.
    The value is the uppercase (absolute) command letter, the lowercase letter is the relative form.
    """

    MOVE_TO = "M"
    LINE_TO = "L"
    HORIZONTAL_LINE_TO = "H"
    VERTICAL_LINE_TO = "V"
    CURVE_TO = "C"
    SMOOTH_CURVE_TO = "S"
    QUADRATIC_TO = "Q"
    SMOOTH_QUADRATIC_TO = "T"
    ELLIPTICAL_ARC = "A"
    CLOSE_PATH = "Z"

    @property
    def arity(self) -> int:
        """int: Number of coordinates one command of this kind consumes."""
        return COMMAND_ARITY[self.value]

    @property
    def absolute(self) -> str:
        """str: Letter of the absolute form."""
        return self.value

    @property
    def relative(self) -> str:
        """str: Letter of the relative form."""
        return self.value.lower()

    @classmethod
    def from_letter(cls, letter: str) -> CommandKind:
        """
        Return the kind for the given command letter (either case).

        Raises:
            MalformedCommandError: if _letter_ is not a SVG path command.
        """
        if len(letter) != 1 or letter not in SVG_CMDS:
            raise MalformedCommandError(f"Unknown svg path command type: '{letter}'")
        return cls(letter.upper())
