"""Test module for avsvg.page

The tests are run using pytest.
"""

import xml.etree.ElementTree as ET

import pytest

from avsvg.matrix import AvMatrix
from avsvg.page import AvSvgPage
from avsvg.path import AvPath, AvRenderProperties
from avsvg.path_group import AvPathGroup

SVG_NS = "{http://www.w3.org/2000/svg}"


def svg_paths(svg_text):
    """Return all <path> elements of the SVG text."""
    return list(ET.fromstring(svg_text).iter(f"{SVG_NS}path"))


def svg_groups(svg_text):
    """Return all <g> elements of the SVG text."""
    return list(ET.fromstring(svg_text).iter(f"{SVG_NS}g"))


class TestAvSvgPage:
    """Tests for the SVG export"""

    def test_empty_page(self):
        """Test the size and viewbox of an empty page."""
        root = ET.fromstring(AvSvgPage(100, 50).tostring())
        assert root.tag == f"{SVG_NS}svg"
        assert root.get("viewBox") == "0 0 100 50"
        assert root.get("width") == "100"
        assert root.get("height") == "50"

    def test_custom_viewbox(self):
        """Test a given viewbox."""
        root = ET.fromstring(AvSvgPage(100, 50, (-10, -5, 20, 10)).tostring())
        assert root.get("viewBox") == "-10 -5 20 10"

    def test_add_path(self):
        """Test that a path is written with its normalized data and resolved properties."""
        page = AvSvgPage(100, 100)
        page.add_path(AvPath("M0,0 L10,0 Z", AvRenderProperties(stroke_width=None, fill_color="#ff0000")))
        (element,) = svg_paths(page.tostring())
        assert element.get("d") == "M0 0 C0 0 10 0 10 0 C10 0 0 0 0 0 Z"
        assert element.get("fill") == "#ff0000"
        assert element.get("stroke") == "#000000"
        assert element.get("stroke-width") == "1.0"
        assert element.get("stroke-linejoin") == "miter"
        assert element.get("stroke-linecap") == "square"
        assert element.get("transform") is None

    def test_path_matrix_as_transform(self):
        """Test that the path matrix becomes the transform attribute."""
        page = AvSvgPage(100, 100)
        page.add_path(AvPath("M0,0 L10,0").translate(5, 6))
        (element,) = svg_paths(page.tostring())
        assert element.get("transform") == "matrix(1,0,0,1,5,6)"
        # the data itself stays untransformed
        assert element.get("d") == "M0 0 C0 0 10 0 10 0"

    def test_add_group(self):
        """Test that a group becomes a <g> element with one <path> per member."""
        group = AvPathGroup.from_data(
            "M0,0 L1,1",
            "M2,2 L3,3",
            render_properties=AvRenderProperties(fill_color="#00ff00", opacity=0.5),
            matrix=AvMatrix().scale(2),
        )
        group.paths[1].render_properties.fill_color = "#0000ff"
        page = AvSvgPage(100, 100)
        page.add_group(group)
        svg_text = page.tostring()

        transformed = [g for g in svg_groups(svg_text) if g.get("transform") == "matrix(2,0,0,2,0,0)"]
        assert len(transformed) == 1
        elements = list(transformed[0].iter(f"{SVG_NS}path"))
        assert [e.get("fill") for e in elements] == ["#00ff00", "#0000ff"]
        assert [e.get("opacity") for e in elements] == ["0.5", "0.5"]

    def test_add_dispatches(self):
        """Test that add() accepts paths and groups."""
        page = AvSvgPage(100, 100)
        page.add(AvPath("M0,0 L1,1"))
        page.add(AvPathGroup.from_data("M0,0 L1,1", "M1,1 L2,2"))
        assert len(svg_paths(page.tostring())) == 3

    def test_tostring_repeatable(self):
        """Test that the page can be written several times with the same result."""
        page = AvSvgPage(100, 100)
        page.add_path(AvPath("M0,0 L1,1"))
        assert page.tostring() == page.tostring()
        assert len(svg_paths(page.tostring())) == 1

    def test_pretty(self):
        """Test the readable output."""
        page = AvSvgPage(100, 100)
        page.add_path(AvPath("M0,0 L1,1"))
        assert "\n" in page.tostring(pretty=True)

    def test_flip_y_matrix(self):
        """Test the matrix for bottom-to-top coordinates."""
        matrix = AvSvgPage.flip_y_matrix(100)
        assert matrix.transform_point(0, 0) == pytest.approx((0, 100))
        assert matrix.transform_point(10, 100) == pytest.approx((10, 0))
