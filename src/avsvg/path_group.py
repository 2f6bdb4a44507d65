"""Group of SVG paths sharing one transformation and default render properties."""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from avsvg.bound import AvBound, BoundCalculator
from avsvg.matrix import AvMatrix
from avsvg.path import AvPath, AvRenderProperties


class AvPathGroup:
    """
    An ordered collection of AvPath objects.

    The group _matrix_ is applied after each member's own matrix and the group
    _render_properties_ fill in whatever a member leaves unset (None).
    Members do not know their group; both values are passed in at draw time.
    """

    def __init__(
        self,
        paths: Optional[Sequence[AvPath]] = None,
        render_properties: Optional[AvRenderProperties] = None,
        matrix: Optional[AvMatrix] = None,
    ):
        self._paths: List[AvPath] = list(paths) if paths else []
        self.render_properties = render_properties if render_properties is not None else AvRenderProperties()
        self._matrix = matrix.copy() if matrix is not None else AvMatrix()
        self._bound: AvBound = AvBound.empty()
        self._member_revisions: Tuple[Tuple[int, int], ...] = ()
        self.is_updated = True

    @classmethod
    def from_data(
        cls,
        *data: str,
        render_properties: Optional[AvRenderProperties] = None,
        matrix: Optional[AvMatrix] = None,
    ) -> AvPathGroup:
        """
        Create a group with one member per path data string.
        The members inherit all render properties from the group.

        Raises:
            MalformedCommandError: if any string is not valid path data.
        """
        paths = [AvPath(d, AvRenderProperties.inherit()) for d in data]
        return cls(paths, render_properties, matrix)

    # -------------------------------------------------------------------------
    # Members
    # -------------------------------------------------------------------------

    @property
    def paths(self) -> Tuple[AvPath, ...]:
        """The member paths in drawing order."""
        return tuple(self._paths)

    def add(self, *paths: AvPath) -> AvPathGroup:
        """Append _paths_ to the group."""
        self._paths.extend(paths)
        self.is_updated = True
        return self

    def remove(self, index: int) -> AvPath:
        """Remove and return the member at _index_."""
        path = self._paths.pop(index)
        self.is_updated = True
        return path

    def clear(self) -> None:
        """Remove all members."""
        self._paths.clear()
        self.is_updated = True

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[AvPath]:
        return iter(self._paths)

    # -------------------------------------------------------------------------
    # Transformation
    # -------------------------------------------------------------------------

    @property
    def matrix(self) -> AvMatrix:
        """AvMatrix: the group transformation, applied after each member's matrix."""
        return self._matrix

    @matrix.setter
    def matrix(self, matrix: AvMatrix) -> None:
        self._matrix = matrix.copy()
        self.is_updated = True

    def invalidate(self) -> None:
        """Mark the cached bound as outdated, e.g. after changing the matrix in place."""
        self.is_updated = True

    def transform(self, matrix: AvMatrix) -> AvPathGroup:
        """Compose _matrix_ onto the group matrix (on the right)."""
        self._matrix.multiply(matrix)
        self.invalidate()
        return self

    def translate(self, x: float = 0.0, y: float = 0.0) -> AvPathGroup:
        """Append a translation to the group matrix."""
        self._matrix.translate(x, y)
        self.invalidate()
        return self

    def rotate(self, degrees: float) -> AvPathGroup:
        self._matrix.rotate(degrees)
        self.invalidate()
        return self

    def scale(self, x: float = 1.0, y: Optional[float] = None) -> AvPathGroup:
        self._matrix.scale(x, y)
        self.invalidate()
        return self

    def skew(self, degrees_x: float = 0.0, degrees_y: float = 0.0) -> AvPathGroup:
        self._matrix.skew(degrees_x, degrees_y)
        self.invalidate()
        return self

    def _revisions(self) -> Tuple[Tuple[int, int], ...]:
        return tuple((id(path), path.revision) for path in self._paths)

    @property
    def bound(self) -> AvBound:
        """
        The bound around all members, each measured through group matrix * member matrix.
        Empty for an empty group.
        """
        revisions = self._revisions()
        if self.is_updated or revisions != self._member_revisions:
            self._bound = BoundCalculator.union(
                BoundCalculator.compute_bound(path.normalized_commands, path.effective_matrix(self._matrix))
                for path in self._paths
            )
            self._member_revisions = revisions
            self.is_updated = False
        return self._bound

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def resolved_render_properties(self, path: AvPath) -> AvRenderProperties:
        """Return the effective render properties of member _path_ within this group."""
        return path.render_properties.resolve(self.render_properties)

    def draw(self, pen) -> None:
        """Draw all members in order into the fontTools _pen_."""
        for path in self._paths:
            path.draw(pen, self._matrix)

    def __repr__(self) -> str:
        return f"AvPathGroup(paths={len(self._paths)}, matrix={self._matrix!r})"
