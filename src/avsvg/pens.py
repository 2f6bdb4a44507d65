"""fontTools pen recording drawings as SVG path commands."""

from __future__ import annotations

from typing import List, Tuple

from fontTools.pens.basePen import BasePen

from avsvg.command import AvCommand
from avsvg.svgpath import AvSvgPath


class AvCommandPen(BasePen):
    """
    Records any fontTools drawing (a glyph, a path, another pen's output) as path commands.

    Lines are recorded as straight cubic curves and quadratic curves are raised to
    cubic ones, so the recording only contains the commands M, C and Z.
    `.commands` gives the recording normalized (M and C only, Z lowered to a closing
    line) and `.to_path_string()` gives path data usable for AvPath.

    Example:
        pen = AvCommandPen()
        AvPath("M0,0 L10,0 L10,10").draw(pen)
        pen.to_path_string()  # 'M0 0 C0 0 10 0 10 0 C10 0 10 10 10 10'
    """

    _recorded: List[AvCommand]

    def __init__(self, glyphSet=None):
        """
        Initialize the AvCommandPen.

        Parameters:
            glyphSet (GlyphSet, optional): glyph set to resolve components. Defaults to None.
        """
        super().__init__(glyphSet)
        self._recorded = []

    # BasePen callback methods -------------------------------------------------
    def _moveTo(self, pt: Tuple[float, float]):
        self._recorded.append(AvCommand.from_points("M", pt))

    def _lineTo(self, pt: Tuple[float, float]):
        x0, y0 = self._getCurrentPoint()
        self._recorded.append(AvCommand.from_line(x0, y0, pt[0], pt[1]))

    def _curveToOne(self, pt1: Tuple[float, float], pt2: Tuple[float, float], pt3: Tuple[float, float]):
        self._recorded.append(AvCommand.from_points("C", pt1, pt2, pt3))

    def _qCurveToOne(self, pt1: Tuple[float, float], pt2: Tuple[float, float]):
        x0, y0 = self._getCurrentPoint()
        self._recorded.append(AvCommand.from_quadratic(x0, y0, pt1[0], pt1[1], pt2[0], pt2[1]))

    def _closePath(self):
        self._recorded.append(AvCommand("Z", ()))

    def _endPath(self):
        # an open subpath ends by the next move, nothing to record
        pass

    # Results ------------------------------------------------------------------
    @property
    def recorded_commands(self) -> List[AvCommand]:
        """The commands as recorded (M, C and Z)."""
        return list(self._recorded)

    @property
    def commands(self) -> List[AvCommand]:
        """The recording as normalized commands (M and C only)."""
        return AvSvgPath.normalize(self._recorded)

    def to_path_string(self, round_func=None) -> str:
        """Return the recording as SVG path data (see AvSvgPath.to_path_string)."""
        return AvSvgPath.to_path_string(self._recorded, round_func)

    def reset(self) -> None:
        """Forget everything recorded so far."""
        self._recorded = []
