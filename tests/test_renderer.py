"""Tests for the pixel renderer."""

import numpy as np
import pytest
from PIL import Image

from random_art.builder import build, make_rng
from random_art.operations import ColorMix, Constant, VarX, VarY
from random_art.renderer import Renderer


class TestCoordinateGrids:
    """Test pixel to coordinate mapping."""

    def test_unit_domain(self):
        X, Y = Renderer("unit").create_coordinate_grids((2, 4))
        assert X.shape == (2, 4)
        np.testing.assert_allclose(X[0], [0.0, 0.25, 0.5, 0.75])
        np.testing.assert_allclose(Y[:, 0], [0.0, 0.5])

    def test_signed_domain(self):
        X, Y = Renderer("signed").create_coordinate_grids((3, 5))
        np.testing.assert_allclose(X[0], [-1.0, -0.5, 0.0, 0.5, 1.0])
        np.testing.assert_allclose(Y[:, 0], [-1.0, 0.0, 1.0])

    def test_invalid_options(self):
        with pytest.raises(ValueError):
            Renderer(domain="polar")
        with pytest.raises(ValueError):
            Renderer(normalize="gamma")


class TestEvaluateTree:
    """Test per-pixel evaluation."""

    def test_channels_follow_tree(self, wire):
        tree = wire(ColorMix(), VarX(), VarY(), Constant(0.5))
        renderer = Renderer("unit")
        data = renderer.evaluate_tree(tree, (3, 4))
        X, Y = renderer.create_coordinate_grids((3, 4))

        assert data.shape == (3, 4, 3)
        np.testing.assert_array_equal(data[..., 0], X)
        np.testing.assert_array_equal(data[..., 1], Y)
        assert np.all(data[..., 2] == 0.5)

    def test_matches_scalar_evaluate(self):
        tree = build(make_rng(21), 5)
        renderer = Renderer("signed")
        data = renderer.evaluate_tree(tree, (4, 4))
        X, Y = renderer.create_coordinate_grids((4, 4))
        expected = tree.evaluate(float(X[2, 1]), float(Y[2, 1]))
        np.testing.assert_array_equal(data[2, 1], expected)


class TestQuantization:
    """Test channel normalization and image output."""

    def test_clip(self):
        renderer = Renderer(normalize="clip")
        data = np.array([-0.5, 0.0, 0.5, 1.0, 2.0, np.nan, np.inf, -np.inf])
        np.testing.assert_array_equal(
            renderer._normalize_channel(data),
            [0.0, 0.0, 0.5, 1.0, 1.0, 0.0, 1.0, 0.0],
        )

    def test_stretch(self):
        renderer = Renderer(normalize="stretch")
        np.testing.assert_allclose(
            renderer._normalize_channel(np.array([-1.0, 0.0, 3.0])),
            [0.0, 0.25, 1.0],
        )

    def test_stretch_constant_channel(self):
        renderer = Renderer(normalize="stretch")
        result = renderer._normalize_channel(np.full((2, 2), 7.0))
        assert np.all(result == 0.5)

    def test_to_rgb_array(self):
        data = np.zeros((2, 2, 3))
        data[..., 0] = 1.0
        data[..., 1] = 0.5
        rgb = Renderer().to_rgb_array(data)
        assert rgb.dtype == np.uint8
        assert np.all(rgb[..., 0] == 255)
        assert np.all(rgb[..., 1] == 127)
        assert np.all(rgb[..., 2] == 0)

    def test_render_image(self, tmp_path):
        tree = build(make_rng(4), 4)
        filename = tmp_path / "art.png"
        img = Renderer().render_image(tree, size=(6, 10), filename=str(filename))

        assert img.mode == "RGB"
        assert img.size == (10, 6)
        with Image.open(filename) as saved:
            assert saved.size == (10, 6)
            np.testing.assert_array_equal(np.asarray(saved), np.asarray(img))

    def test_render_is_reproducible(self):
        renderer = Renderer("signed", "stretch")
        first = renderer.render_image(build(make_rng(30), 5), size=(8, 8))
        second = renderer.render_image(build(make_rng(30), 5), size=(8, 8))
        np.testing.assert_array_equal(np.asarray(first), np.asarray(second))

    def test_stretch_maps_infinities_to_finite_extremes(self):
        renderer = Renderer(normalize="stretch")
        np.testing.assert_allclose(
            renderer._normalize_channel(np.array([0.0, 1000.0, np.inf])),
            [0.0, 1.0, 1.0],
        )
        np.testing.assert_allclose(
            renderer._normalize_channel(np.array([-np.inf, 0.0, 5.0, 10.0, np.nan])),
            [0.0, 0.0, 0.5, 1.0, 0.0],
        )

    def test_stretch_without_finite_values(self):
        renderer = Renderer(normalize="stretch")
        result = renderer._normalize_channel(np.array([np.nan, np.inf]))
        assert np.all(result == 0.5)
