import numpy as np
import pytest

from phongtracer.transform import Transform


def _composite() -> Transform:
    transform = Transform()
    transform.translate((1.0, -2.0, 3.0))
    transform.rotate(30.0, (1.0, 1.0, 0.0))
    transform.scale((2.0, 0.5, 3.0))
    return transform


def test_identity_leaves_points_alone():
    transform = Transform()
    assert np.allclose(transform.transform_point((1.0, 2.0, 3.0)), [1.0, 2.0, 3.0])


def test_translation_moves_origin():
    transform = Transform()
    transform.translate((2.0, 4.0, 3.0))
    assert np.allclose(transform.transform_point((0.0, 0.0, 0.0)), [2.0, 4.0, 3.0])


def test_translation_does_not_move_vectors():
    transform = Transform()
    transform.translate((2.0, 4.0, 3.0))
    assert np.allclose(transform.transform_vector((1.0, -1.0, 0.5)), [1.0, -1.0, 0.5])


def test_scale_stretches_axis_vector():
    transform = Transform()
    transform.scale((2.0, 3.0, 4.0))
    assert np.allclose(transform.transform_vector((1.0, 0.0, 0.0)), [2.0, 0.0, 0.0])


def test_rotation_about_z():
    transform = Transform()
    transform.rotate(90.0, (0.0, 0.0, 1.0))
    assert np.allclose(transform.transform_point((1.0, 0.0, 0.0)), [0.0, 1.0, 0.0])


def test_rotation_axis_need_not_be_unit():
    unit = Transform()
    unit.rotate(40.0, (0.0, 1.0, 0.0))
    long = Transform()
    long.rotate(40.0, (0.0, 5.0, 0.0))
    assert np.allclose(unit.matrix, long.matrix)


def test_matrix_times_inverse_is_identity():
    transform = _composite()
    assert np.allclose(transform.matrix @ transform.inverse_matrix, np.identity(4))


@pytest.mark.parametrize("point", [(0.0, 0.0, 0.0), (1.0, 2.0, 3.0), (-4.0, 0.5, 9.0)])
def test_point_round_trip(point):
    transform = _composite()
    assert np.allclose(transform.inverse_transform_point(transform.transform_point(point)), point)


@pytest.mark.parametrize("vector", [(1.0, 0.0, 0.0), (0.3, -2.0, 5.0)])
def test_vector_round_trip(vector):
    transform = _composite()
    assert np.allclose(
        transform.inverse_transform_vector(transform.transform_vector(vector)), vector
    )


def test_normals_stay_perpendicular_to_surface():
    transform = _composite()
    normal = (0.0, 0.0, 1.0)
    for tangent in [(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (1.0, 1.0, 0.0)]:
        moved_normal = transform.transform_normal(normal)
        moved_tangent = transform.transform_vector(tangent)
        assert np.dot(moved_normal, moved_tangent) == pytest.approx(0.0, abs=1e-9)


def test_transformed_normal_is_unit_length():
    transform = _composite()
    assert np.linalg.norm(transform.transform_normal((0.0, 3.0, 4.0))) == pytest.approx(1.0)


def test_set_identity_resets_all_matrices():
    transform = _composite()
    transform.set_identity()
    assert np.allclose(transform.matrix, np.identity(4))
    assert np.allclose(transform.inverse_matrix, np.identity(4))
    assert np.allclose(transform.normal_matrix, np.identity(3))