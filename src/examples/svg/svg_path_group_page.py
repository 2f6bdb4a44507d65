"""Creates a SVG page with a group of normalized paths:
a square, a quarter circle given as arc and a wave built from smooth curves.
The group is scaled and moved into the page, the bound of the group is drawn
as red outline around it.
"""

import logging

from avsvg.matrix import AvMatrix
from avsvg.page import AvSvgPage
from avsvg.path import AvPath, AvRenderProperties
from avsvg.path_group import AvPathGroup

PAGE_WIDTH = 200
PAGE_HEIGHT = 120

PATH_DATA = (
    "M0,0 L10,0 L10,10 L0,10 Z",
    "m15,10 a10,10 0 0 1 10,-10 v10 z",
    "M30,5 Q32.5,0 35,5 T40,5 T45,5 S50,10 55,5",
)


def main():
    """Builds the group, prints its bound and the resulting SVG text."""
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    group = AvPathGroup.from_data(
        *PATH_DATA,
        render_properties=AvRenderProperties(stroke_width=0.2, stroke_color="#000080", fill_color="#e0e0ff"),
        matrix=AvMatrix().translate(20, 20).scale(3),
    )
    # the last path is an open line, do not fill it
    group.paths[-1].render_properties.fill_color = "none"

    bound = group.bound
    print(f"group bound: {bound}")

    outline = AvPath(
        f"M{bound.left},{bound.top} H{bound.right} V{bound.bottom} H{bound.left} Z",
        AvRenderProperties(stroke_color="#ff0000", stroke_width=0.5),
    )

    svg_page = AvSvgPage(PAGE_WIDTH, PAGE_HEIGHT)
    svg_page.add_group(group)
    svg_page.add_path(outline)

    print(svg_page.tostring(pretty=True))


if __name__ == "__main__":
    main()
