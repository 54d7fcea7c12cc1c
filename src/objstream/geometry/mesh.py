from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import numpy as np

if TYPE_CHECKING:
    import open3d as o3d


class Mesh3D:
    """Polygon mesh assembled from an OBJ file."""

    def __init__(self,
                 vertices: np.ndarray,
                 polygons: list[list[int]],
                 name: str,
                 weights: Optional[np.ndarray] = None,
                 texcoords: Optional[np.ndarray] = None):
        """
        Initialize mesh.

        Args:
            vertices: Nx3 array of vertex coordinates
            polygons: Faces as lists of 0-based vertex indices, any arity >= 3
            name: Mesh identifier (typically the file stem)
            weights: N array of homogeneous ``w`` components, 1.0 when omitted
            texcoords: Tx3 array of texture coordinates
        """
        self.vertices: np.ndarray = np.asarray(vertices, dtype=np.float32).reshape(-1, 3)
        self.polygons: list[list[int]] = polygons
        self.name: str = name

        if weights is None:
            weights = np.ones(len(self.vertices), dtype=np.float32)
        self.weights: np.ndarray = np.asarray(weights, dtype=np.float32)
        if texcoords is None:
            texcoords = np.empty((0, 3), dtype=np.float32)
        self.texcoords: np.ndarray = np.asarray(texcoords, dtype=np.float32).reshape(-1, 3)

        if len(self.weights) != len(self.vertices):
            raise ValueError(
                f"weights must have one entry per vertex, "
                f"got {len(self.weights)} for {len(self.vertices)} vertices"
            )

        self.faces: np.ndarray = Mesh3D.triangulate(polygons)

    @staticmethod
    def triangulate(polygons: list[list[int]]) -> np.ndarray:
        """Fan-triangulate polygons into an Mx3 index array."""
        triangles = [
            (polygon[0], polygon[i], polygon[i + 1])
            for polygon in polygons
            for i in range(1, len(polygon) - 1)
        ]
        return np.asarray(triangles, dtype=np.uint32).reshape(-1, 3)

    def to_open3d(self) -> o3d.geometry.TriangleMesh:
        """Build an Open3D triangle mesh with vertex normals. Needs the ``open3d`` extra."""
        import open3d as o3d

        triangle_mesh = o3d.geometry.TriangleMesh()
        triangle_mesh.vertices = o3d.utility.Vector3dVector(self.vertices.astype(np.float64))
        triangle_mesh.triangles = o3d.utility.Vector3iVector(self.faces.astype(np.int32))
        triangle_mesh.compute_vertex_normals()
        return triangle_mesh

    def __str__(self) -> str:
        return (f"Mesh3D(name='{self.name}', vertices={len(self.vertices)}, "
                f"texcoords={len(self.texcoords)}, faces={len(self.polygons)})")

    def __repr__(self) -> str:
        return self.__str__()
