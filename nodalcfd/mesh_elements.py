"""Points, edges, triangles and the point-location graph of a Delaunay mesh."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional


class TriangulationError(RuntimeError):
    """Raised when the mesh topology is inconsistent."""


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float

    def describe(self) -> str:
        """Fixed-width text of the coordinates."""
        return f"[{self.x:8.5f},{self.y:8.5f}]"


@dataclass(eq=False)
class Edge:
    """An edge between two vertex indices, with the triangles that use it.

    An immovable edge lies on a boundary and is never flipped.
    """

    verts: tuple[int, int]
    immovable: bool = False
    tris: dict["Tri", None] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        a, b = self.verts
        if a == b:
            raise TriangulationError(f"degenerate edge, points are the same: [{a},{b}]")
        self.verts = (a, b)

    def contains_index(self, index: int) -> bool:
        """Whether ``index`` is one of the edge's two vertices."""
        return index in self.verts

    def add_tri(self, tri: "Tri") -> None:
        """Record ``tri`` as using this edge."""
        self.tris[tri] = None

    def delete_tri(self, tri: "Tri") -> None:
        """Forget ``tri``; nothing happens if it was not recorded."""
        self.tris.pop(tri, None)

    def opposing_vertices(self) -> tuple[list[int], list["Tri"]]:
        """Vertices facing this edge in each attached triangle, with those triangles."""
        points: list[int] = []
        tris: list[Tri] = []
        for tri in self.tris:
            verts, _ = tri.vertices()
            for index in verts:
                if index not in self.verts:
                    points.append(index)
                    tris.append(tri)
                    break
        return points, tris

    def describe(self) -> str:
        """Short text of the edge: its vertices and whether it is fixed."""
        label = "Fixed" if self.immovable else "Movable"
        return f"[{self.verts[0]},{self.verts[1]}]{label} "


def unique_vertices(*edges: Edge) -> list[int]:
    """Distinct vertex indices of the given edges, in order of first appearance."""
    return list(dict.fromkeys(v for edge in edges for v in edge.verts))


@dataclass(eq=False)
class Tri:
    """A triangle made of three edges.

    ``reversals[i]`` is 1 when edge ``i`` is traversed from its second vertex
    to its first.
    """

    edges: list[Edge] = field(default_factory=list)
    reversals: list[int] = field(default_factory=lambda: [0, 0, 0])
    tgn: Optional["TriGraphNode"] = field(default=None, repr=False)

    def add_edge(self, edge: Edge) -> None:
        """Append ``edge`` and register this triangle with it."""
        edge.add_tri(self)
        self.edges.append(edge)

    def vertices(self) -> tuple[tuple[int, int, int], tuple[bool, bool, bool]]:
        """Vertices in traversal order, and whether each side starting there is fixed.

        ``fixed[i]`` refers to the side from vertex ``i`` to vertex ``i + 1``.
        """
        if len(self.edges) != 3:
            raise TriangulationError("not enough edges")
        first, second = self.edges[0], self.edges[1]
        r0, r1 = self.reversals[0], self.reversals[1]
        verts = (first.verts[r0], first.verts[1 - r0], second.verts[1 - r1])
        fixed = [False, False, False]
        for edge in self.edges:
            for i in range(3):
                if edge.contains_index(verts[i]) and edge.contains_index(verts[(i + 1) % 3]):
                    fixed[i] = edge.immovable
        return verts, (fixed[0], fixed[1], fixed[2])

    def name(self) -> str:
        """Identifier built from the vertices, each tagged F (fixed) or M (movable)."""
        verts, fixed = self.vertices()
        return "_".join(f"{v}{'F' if f else 'M'}" for v, f in zip(verts, fixed))


@dataclass(eq=False)
class TriGraphNode:
    """Node of the graph of nested triangles used to locate new points."""

    triangle: Tri
    children: list["TriGraphNode"] = field(default_factory=list)

    def dot_lines(self) -> list[str]:
        """Graphviz lines describing the graph below this node."""
        lines = ["digraph Trigraph {"]
        visited: set[str] = set()
        stack = [self]
        while stack:
            node = stack.pop()
            name = node.triangle.name()
            if name in visited:
                continue
            visited.add(name)
            lines.extend(f"\t_{name} -> _{child.triangle.name()}" for child in node.children)
            stack.extend(reversed(node.children))
        lines.append("}")
        return lines

    def describe(self, label: str = "") -> str:
        """One line naming the node's triangle edges, prefixed by ``label``."""
        edges = self.triangle.edges
        return (
            f"{label} Node Edges: {edges[0].describe()}, "
            f"{edges[1].describe()}, {edges[2].describe()}"
        )

    def describe_all(self) -> list[str]:
        """A description line for every node below this one, depth first."""
        lines = []
        stack = [self]
        while stack:
            node = stack.pop()
            label = "interior node" if node.children else "**leaf** node"
            lines.append(node.describe(label))
            stack.extend(reversed(node.children))
        return lines


def _signbit(value: float) -> bool:
    return math.copysign(1.0, value) < 0


def is_illegal_edge(
    prx: float,
    pry: float,
    pix: float,
    piy: float,
    pjx: float,
    pjy: float,
    pkx: float,
    pky: float,
) -> bool:
    """Whether point r lies strictly inside the circle through i, j and k.

    If so, the edge i-j shared by triangles i-j-k and i-j-r must be flipped
    to r-k. The orientation of i, j, k does not matter.
    """
    ax, ay = pix - prx, piy - pry
    bx, by = pjx - prx, pjy - pry
    cx, cy = pkx - prx, pky - pry
    clockwise = _signbit((pjx - pix) * (pky - piy) - (pkx - pix) * (pjy - piy))
    det = (
        (ax * ax + ay * ay) * (bx * cy - cx * by)
        - (bx * bx + by * by) * (ax * cy - cx * ay)
        + (cx * cx + cy * cy) * (ax * by - bx * ay)
    )
    return det < 0 if clockwise else det > 0