"""A 3D scene: meshes with colour, lighting and topology, viewed by an orbit camera.

Opaque objects are drawn first, transparent ones after them. The default
scene holds the three coordinate axes and a translucent ground plane.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator

from forestplot.camera import Camera
from forestplot.colors import RGBA
from forestplot.mesh import MeshData

IDENTITY_MATRIX: tuple[float, ...] = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)

AXIS_LENGTH = 100.0
GROUND_SIZE = 20.0
X_AXIS_COLOR: RGBA = (1.0, 0.0, 0.0, 1.0)
Y_AXIS_COLOR: RGBA = (0.0, 0.7, 0.0, 1.0)
Z_AXIS_COLOR: RGBA = (0.0, 0.0, 1.0, 1.0)
GROUND_COLOR: RGBA = (0.8, 0.8, 0.8, 0.3)


class Topology(enum.Enum):
    """How a mesh's indices are assembled into primitives."""

    TRIANGLE_LIST = "triangle_list"
    LINE_LIST = "line_list"


@dataclass
class GeoObjD3:
    """A mesh with the style it should be drawn in."""

    mesh: MeshData
    color: RGBA
    topology: Topology = Topology.TRIANGLE_LIST
    use_lighting: bool = True
    is_transparent: bool = False

    @classmethod
    def surface(cls, mesh, color) -> GeoObjD3:
        """A solid, lit, opaque surface."""
        return cls(mesh, tuple(color), Topology.TRIANGLE_LIST, True, False)

    @classmethod
    def wireframe(cls, mesh, color) -> GeoObjD3:
        """An unlit, opaque set of line segments."""
        return cls(mesh, tuple(color), Topology.LINE_LIST, False, False)


@dataclass
class _SceneObject:
    """A mesh placed in the scene, with its model matrix (row-major)."""

    mesh: MeshData
    color: RGBA
    use_lighting: bool
    topology: Topology
    model: tuple[float, ...] = IDENTITY_MATRIX

    @property
    def num_indices(self) -> int:
        return len(self.mesh.indices)


@dataclass
class Scene3D:
    """Objects to draw in 3D and the camera looking at them."""

    camera: Camera = field(default_factory=Camera)
    objects: list[_SceneObject] = field(default_factory=list)
    transparent_objects: list[_SceneObject] = field(default_factory=list)

    def add_mesh(self, mesh, color, use_lighting, topology, is_transparent) -> _SceneObject:
        """Place ``mesh`` in the scene with an identity model matrix."""
        obj = _SceneObject(mesh, tuple(color), bool(use_lighting), Topology(topology))
        if is_transparent:
            self.transparent_objects.append(obj)
        else:
            self.objects.append(obj)
        return obj

    def add_object(self, obj) -> _SceneObject:
        """Place a :class:`GeoObjD3` in the scene."""
        return self.add_mesh(
            obj.mesh, obj.color, obj.use_lighting, obj.topology, obj.is_transparent
        )

    def __iter__(self) -> Iterator[_SceneObject]:
        """Objects in draw order: opaque ones first, then transparent ones."""
        yield from self.objects
        yield from self.transparent_objects

    def __len__(self) -> int:
        return len(self.objects) + len(self.transparent_objects)


def _axis(end_index: int) -> MeshData:
    mesh = MeshData.axes(AXIS_LENGTH)
    mesh.indices = [0, end_index]
    return mesh


def default_scene() -> Scene3D:
    """A scene with red, green and blue axes and a translucent grey ground plane."""
    scene = Scene3D()
    scene.add_mesh(_axis(1), X_AXIS_COLOR, False, Topology.LINE_LIST, False)
    scene.add_mesh(_axis(2), Y_AXIS_COLOR, False, Topology.LINE_LIST, False)
    scene.add_mesh(_axis(3), Z_AXIS_COLOR, False, Topology.LINE_LIST, False)
    scene.add_mesh(
        MeshData.plane(GROUND_SIZE), GROUND_COLOR, False, Topology.TRIANGLE_LIST, True
    )
    return scene