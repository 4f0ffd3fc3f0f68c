import pytest

from ascii_wireframe.errors import InvalidGeometryError
from ascii_wireframe.math_utils import Vec3
from ascii_wireframe.mesh import Mesh


def test_cube_is_valid():
    cube = Mesh.cube()
    cube.validate()
    assert len(cube.vertices) == 8
    assert len(list(cube.edge_pairs())) == 12
    assert cube.size == 12.0
    assert cube.center == Vec3(0, 0, 0)


def test_vertices_become_vec3():
    mesh = Mesh([(0, 0, 0), [1, 2, 3]], [0, 1])
    assert mesh.vertices[1] == Vec3(1, 2, 3)
    assert list(mesh.edge_pairs()) == [(0, 1)]


@pytest.mark.parametrize("edges", [
    [0, 1, 1],          # odd length
    [0, 3],             # index == vertex count
    [0, 99],
    [-1, 0],
    [0, 1.0],           # not an integer
])
def test_bad_edges_are_rejected(edges):
    mesh = Mesh([(0, 0, 0), (1, 0, 0), (0, 1, 0)], edges)
    with pytest.raises(InvalidGeometryError):
        mesh.validate()


@pytest.mark.parametrize("size", [0, -1.5])
def test_non_positive_size_is_rejected(size):
    with pytest.raises(InvalidGeometryError):
        Mesh.cube(size=size).validate()


def test_empty_edge_list_is_valid():
    Mesh([(0, 0, 0)], []).validate()
