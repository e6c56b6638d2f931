"""Interactive 2D plotting state: the view, panning and zooming, and curve layers.

The view shows the world rectangle ``center ± (2 / zoom) * (aspect, 1)``.
Mouse interaction maps screen pixels onto twice that span. Each plotted
object is turned into a :class:`Layer` of vertices by the matching solver
whenever the layers are computed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from forestplot.colors import RGBA
from forestplot.curves2d import (
    GeoKind,
    GeoObj,
    Vertex,
    _f32,
    solve_explicit,
    solve_implicit,
    solve_parametric,
)

ZOOM_STEP = 1.1
PIXELS_PER_SCROLL_LINE = 60.0
MOUSE_WORLD_SPAN = 4.0


@dataclass
class ViewState:
    """Centre and zoom of the 2D view, plus the mouse state used to change them."""

    center_x: float = 0.0
    center_y: float = 0.0
    zoom: float = 1.0
    is_dragging: bool = False
    last_mouse_pos: Optional[tuple[float, float]] = None
    dirty: bool = True

    def visible_ranges(self, width, height) -> tuple[tuple[float, float], tuple[float, float]]:
        """The ``(x_range, y_range)`` of world space shown in a window of this size."""
        aspect = _f32(_f32(width) / _f32(height))
        range_y = 2.0 / self.zoom
        range_x = range_y * aspect
        return (
            (self.center_x - range_x, self.center_x + range_x),
            (self.center_y - range_y, self.center_y + range_y),
        )

    def scroll(self, y, width, height) -> None:
        """Zoom by ``y`` wheel lines, keeping the world point under the mouse fixed.

        Without a known mouse position the window centre is used.
        """
        mouse_x, mouse_y = self.last_mouse_pos or (width / 2.0, height / 2.0)
        aspect = width / height
        full_h = MOUSE_WORLD_SPAN / self.zoom
        full_w = full_h * aspect
        rel_x = mouse_x / width - 0.5
        rel_y = 0.5 - mouse_y / height
        world_x = self.center_x + rel_x * full_w
        world_y = self.center_y + rel_y * full_h

        self.zoom *= ZOOM_STEP ** y

        new_h = MOUSE_WORLD_SPAN / self.zoom
        new_w = new_h * aspect
        self.center_x = world_x - rel_x * new_w
        self.center_y = world_y - rel_y * new_h
        self.dirty = True

    def scroll_pixels(self, y, width, height) -> None:
        """Zoom by a wheel delta measured in pixels."""
        self.scroll(y / PIXELS_PER_SCROLL_LINE, width, height)

    def set_dragging(self, pressed) -> None:
        """Start or stop dragging with the left mouse button."""
        self.is_dragging = bool(pressed)

    def cursor_moved(self, x, y, width, height) -> bool:
        """Record a cursor move, panning the view while dragging.

        Returns whether the view changed.
        """
        moved = False
        if self.is_dragging and self.last_mouse_pos is not None:
            last_x, last_y = self.last_mouse_pos
            world_h = MOUSE_WORLD_SPAN / self.zoom
            world_w = world_h * (width / height)
            self.center_x -= (x - last_x) / width * world_w
            self.center_y += (y - last_y) / height * world_h
            self.dirty = True
            moved = True
        self.last_mouse_pos = (x, y)
        return moved


@dataclass
class Layer:
    """The computed geometry of one plotted object, with its style."""

    kind: GeoKind
    color: RGBA
    width: float
    vertices: list[Vertex] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)


@dataclass
class Plotter2D:
    """A set of 2D objects and the view they are plotted in."""

    view: ViewState = field(default_factory=ViewState)
    objects: list[GeoObj] = field(default_factory=list)
    layers: list[Layer] = field(default_factory=list)

    def add_object(self, obj) -> None:
        self.objects.append(obj)
        self.view.dirty = True

    def _vertices_for(self, obj: GeoObj, width: int, height: int) -> list[Vertex]:
        x_range, y_range = self.view.visible_ranges(width, height)
        zoom = _f32(self.view.zoom)
        if obj.kind is GeoKind.IMPLICIT:
            return solve_implicit(obj.func, x_range, y_range, width, height)
        if obj.kind is GeoKind.PARAMETRIC:
            aspect = _f32(_f32(width) / _f32(height))
            return solve_parametric(obj.func, obj.t_range, obj.width, zoom, aspect, height)
        if obj.kind is GeoKind.EXPLICIT:
            return solve_explicit(obj.func, x_range, obj.width, zoom, width, height)
        return []

    def compute_layers(self, width, height) -> list[Layer]:
        """Recompute one layer per object, in order, for a window of this size."""
        width = max(int(width), 1)
        height = max(int(height), 1)
        self.layers = [
            Layer(obj.kind, obj.color, obj.width, self._vertices_for(obj, width, height))
            for obj in self.objects
        ]
        self.view.dirty = False
        return self.layers