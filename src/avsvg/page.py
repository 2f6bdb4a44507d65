"""SVG page export of paths and path groups."""

from __future__ import annotations

import copy
import io
from typing import Optional, Tuple, Union

import svgwrite
import svgwrite.container
import svgwrite.path
from svgwrite.extensions import Inkscape

from avsvg.common import format_number
from avsvg.matrix import AvMatrix
from avsvg.path import AvPath, AvRenderProperties
from avsvg.path_group import AvPathGroup


class AvSvgPage:
    """A page (canvas) described by SVG to draw AvPath and AvPathGroup objects on.

    Uses the SVG coordinate-system left-to-right and top-to-bottom.
    Contains one layer:
        - main   -- editable->locked=False, receives all added paths and groups
    """

    _inkscape: Inkscape  # extension to support layers

    drawing: svgwrite.Drawing
    main_layer: svgwrite.container.Group

    def __init__(
        self,
        width: float,
        height: float,
        viewbox: Optional[Tuple[float, float, float, float]] = None,
    ):
        """
        Initialize the SVG page.

        Args:
            width (float): The width of the canvas in user units.
            height (float): The height of the canvas in user units.
            viewbox (Optional[Tuple[float, float, float, float]], optional):
                (x, y, width, height) of the viewbox. Defaults to (0, 0, width, height).
        """
        if viewbox is None:
            viewbox = (0.0, 0.0, width, height)

        # profile="full" to support numbers with more than 4 decimal digits
        self.drawing = svgwrite.Drawing(
            size=(width, height),
            viewBox=" ".join(format_number(value) for value in viewbox),
            profile="full",
        )

        self._inkscape = Inkscape(self.drawing)
        self.main_layer = self._inkscape.layer(label="main", locked=False)

    @staticmethod
    def _presentation_attributes(properties: AvRenderProperties) -> dict:
        return {
            "stroke": properties.stroke_color,
            "stroke_width": properties.stroke_width,
            "stroke_linejoin": properties.stroke_join,
            "stroke_linecap": properties.stroke_cap,
            "fill": properties.fill_color,
            "opacity": properties.opacity,
        }

    def _path_element(self, path: AvPath, properties: AvRenderProperties) -> svgwrite.path.Path:
        extra = self._presentation_attributes(properties)
        if not path.matrix.is_identity:
            extra["transform"] = path.matrix.to_svg_transform()
        return self.drawing.path(d=path.to_path_string(), **extra)

    def add_path(
        self,
        path: AvPath,
        parent: Optional[svgwrite.container.Group] = None,
    ) -> svgwrite.path.Path:
        """Add _path_ as <path> element with its matrix as transform attribute.

        Args:
            path (AvPath): the path to add
            parent (Optional[svgwrite.container.Group], optional): container to add to.
                Defaults to the main layer.

        Returns:
            svgwrite.path.Path: the added element
        """
        element = self._path_element(path, path.render_properties.resolve())
        container = parent if parent is not None else self.main_layer
        return container.add(element)

    def add_group(self, group: AvPathGroup) -> svgwrite.container.Group:
        """Add _group_ as <g> element holding one <path> element per member.

        The group matrix becomes the transform of the <g> element, the members
        get their render properties resolved against the group.

        Returns:
            svgwrite.container.Group: the added element
        """
        extra = {}
        if not group.matrix.is_identity:
            extra["transform"] = group.matrix.to_svg_transform()
        element = self.drawing.g(**extra)
        for path in group:
            element.add(self._path_element(path, group.resolved_render_properties(path)))
        return self.main_layer.add(element)

    def add(self, item: Union[AvPath, AvPathGroup]):
        """Add a path or a group (see add_path() and add_group())."""
        if isinstance(item, AvPathGroup):
            return self.add_group(item)
        return self.add_path(item)

    def tostring(self, pretty: bool = False, indent: int = 2) -> str:
        """Return the page as SVG (XML) text.

        Args:
            pretty (bool, optional): True for easy readable output. Defaults to False.
            indent (int, optional): Indention if pretty is enabled. Defaults to 2 spaces.
        """
        drawing = copy.deepcopy(self.drawing)
        drawing.add(copy.deepcopy(self.main_layer))

        svg_buffer = io.StringIO()
        drawing.write(svg_buffer, pretty=pretty, indent=indent)
        return svg_buffer.getvalue()

    @staticmethod
    def flip_y_matrix(height: float) -> AvMatrix:
        """Return a matrix turning a bottom-to-top coordinate-system of _height_ into the SVG one."""
        return AvMatrix().translate(0.0, height).scale(1.0, -1.0)
