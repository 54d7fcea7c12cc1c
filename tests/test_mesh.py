import numpy as np
import pytest

from objstream.geometry import Mesh3D


def test_fan_triangulation():
    faces = Mesh3D.triangulate([[0, 1, 2, 3], [4, 5, 6], [7, 8]])
    np.testing.assert_array_equal(faces, [[0, 1, 2], [0, 2, 3], [4, 5, 6]])
    assert faces.dtype == np.uint32


def test_empty_mesh():
    mesh = Mesh3D(vertices=np.empty((0, 3)), polygons=[], name="empty")
    assert mesh.vertices.shape == (0, 3)
    assert mesh.faces.shape == (0, 3)
    assert mesh.texcoords.shape == (0, 3)
    assert str(mesh) == "Mesh3D(name='empty', vertices=0, texcoords=0, faces=0)"


def test_weights_must_match_vertices():
    with pytest.raises(ValueError):
        Mesh3D(vertices=np.zeros((2, 3)), polygons=[], name="m", weights=np.ones(3))


def test_to_open3d():
    pytest.importorskip("open3d")
    mesh = Mesh3D(
        vertices=np.array([[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]]),
        polygons=[[0, 1, 2, 3]],
        name="quad",
    )
    triangle_mesh = mesh.to_open3d()
    assert len(triangle_mesh.vertices) == 4
    assert len(triangle_mesh.triangles) == 2
    assert triangle_mesh.has_vertex_normals()
