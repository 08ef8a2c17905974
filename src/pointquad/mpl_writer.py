"""
Matplotlib script generation for quadtree visualization.

MplWriter collects rectangles and points and renders them as a
standalone Python script that draws them with matplotlib. The script
is written when the writer is closed, so it can be produced on a
machine without matplotlib and viewed elsewhere.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Union

from .geometry import Point, Rectangle


SCRIPT_HEADER = """\
# Generated by pointquad. Run with: python {name}
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

fig, ax = plt.subplots(figsize=(10, 10))
"""

SCRIPT_FOOTER = """\
ax.autoscale_view()
ax.set_aspect("equal")
plt.show()
"""


class MplWriter:
    """
    Accumulates drawing commands for a matplotlib script.

    Instances can be used directly as a traversal visitor through
    write_leaf, or fed with the << operator.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        marker_size: float = 1.0,
        edge_color: str = "black",
        point_color: str = "tab:blue",
    ):
        """
        Args:
            path: Output script path. None keeps the script in memory only.
            marker_size: Scatter marker size for points
            edge_color: Color of rectangle outlines
            point_color: Color of point markers
        """
        self.path = Path(path) if path is not None else None
        self.marker_size = marker_size
        self.edge_color = edge_color
        self.point_color = point_color
        self._lines: List[str] = []
        self._closed = False

    def write_rectangle(self, rect: Rectangle) -> None:
        bl = rect.bottom_left
        self._lines.append(
            f"ax.add_patch(Rectangle(({bl.x!r}, {bl.y!r}), {rect.width!r}, {rect.height!r}, "
            f"fill=False, edgecolor={self.edge_color!r}, linewidth=0.5))"
        )

    def write_points(self, points: Sequence[Point]) -> None:
        # Skip empty scatter calls
        if not points:
            return
        xs = ", ".join(repr(p.x) for p in points)
        ys = ", ".join(repr(p.y) for p in points)
        self._lines.append(
            f"ax.scatter([{xs}], [{ys}], s={self.marker_size!r}, c={self.point_color!r})"
        )

    def write_leaf(self, points: Sequence[Point], boundary: Rectangle) -> None:
        """Draw a leaf's boundary and its points."""
        self.write_rectangle(boundary)
        self.write_points(points)

    def __lshift__(self, item: Union[Rectangle, Point, Sequence[Point]]) -> "MplWriter":
        if isinstance(item, Rectangle):
            self.write_rectangle(item)
        elif isinstance(item, Point):
            self.write_points([item])
        else:
            self.write_points(list(item))
        return self

    def render(self) -> str:
        """Return the complete script text."""
        name = self.path.name if self.path is not None else "<script>"
        body = "\n".join(self._lines)
        if body:
            body += "\n"
        return SCRIPT_HEADER.format(name=name) + body + SCRIPT_FOOTER

    def close(self) -> None:
        """Write the script to path, if one was given. Idempotent."""
        if self._closed:
            return
        self._closed = True
        if self.path is not None:
            self.path.write_text(self.render())

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
