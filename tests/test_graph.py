import numpy as np
import pytest

from graphseg.graph import Edge, gaussian_blur, gaussian_kernel, grid_edges


def test_kernel_is_normalised_and_symmetric():
    kernel = gaussian_kernel(0.8)
    assert kernel.sum() == pytest.approx(1.0)
    assert np.allclose(kernel, kernel[::-1])
    assert len(kernel) % 2 == 1
    assert np.argmax(kernel) == len(kernel) // 2


def test_kernel_size_for_default_sigma():
    assert len(gaussian_kernel(0.8)) == 7


def test_kernel_rejects_non_positive_sigma():
    with pytest.raises(ValueError):
        gaussian_kernel(0)


def test_blur_keeps_constant_image():
    image = np.full((6, 5), 42, dtype=np.uint8)
    blurred = gaussian_blur(image, 1.5)
    assert blurred.dtype == np.float32
    assert np.allclose(blurred, 42.0)


def test_blur_without_sigma_is_copy():
    image = np.arange(12, dtype=np.float32).reshape(3, 4)
    result = gaussian_blur(image, 0)
    assert np.array_equal(result, image)
    result[0, 0] = 99
    assert image[0, 0] == 0


def test_blur_preserves_mean_roughly_and_smooths():
    image = np.zeros((9, 9), dtype=np.float32)
    image[4, 4] = 100.0
    blurred = gaussian_blur(image, 0.8)
    assert blurred[4, 4] < 100.0
    assert blurred.sum() == pytest.approx(100.0, rel=1e-4)


def test_blur_rejects_colour_image():
    with pytest.raises(ValueError):
        gaussian_blur(np.zeros((2, 2, 3)), 0.8)


def test_single_edge():
    edges = grid_edges(np.array([[0, 10]], dtype=np.uint8), 0)
    assert edges == [Edge(10.0, 0, 1)]


@pytest.mark.parametrize("height,width", [(1, 1), (2, 3), (4, 4), (5, 2)])
def test_edge_count(height, width):
    edges = grid_edges(np.zeros((height, width)), 0)
    expected = (width - 1) * height + (height - 1) * width + 2 * (height - 1) * (width - 1)
    assert len(edges) == expected


def test_edges_connect_neighbours_only():
    height, width = 4, 5
    edges = grid_edges(np.random.default_rng(0).integers(0, 255, (height, width)), 0)
    for edge in edges:
        uy, ux = divmod(edge.u, width)
        vy, vx = divmod(edge.v, width)
        assert max(abs(uy - vy), abs(ux - vx)) == 1
        assert edge.u < edge.v


def test_edge_weights_are_differences():
    image = np.random.default_rng(1).integers(0, 255, (3, 3)).astype(np.float32)
    flat = image.ravel()
    for edge in grid_edges(image, 0):
        assert edge.weight == pytest.approx(abs(flat[edge.u] - flat[edge.v]))


def test_edges_sort_by_weight():
    edges = sorted([Edge(3.0, 0, 1), Edge(1.0, 2, 3), Edge(2.0, 4, 5)])
    assert [e.weight for e in edges] == [1.0, 2.0, 3.0]