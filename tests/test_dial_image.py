"""Tests for hue strip / dial preview rasters."""

import numpy as np
import pytest
from PIL import Image

from huedial.dial_image import encode_display_p3_u8, render_hue_dial, render_hue_strip


class TestEncode:
    """Tests for encode_display_p3_u8()."""

    def test_endpoints(self):
        rgb = np.array([[0.0, 1.0, 0.5]])
        out = encode_display_p3_u8(rgb)
        assert out.dtype == np.uint8
        assert out[0, 0] == 0
        assert out[0, 1] == 255
        assert 180 < out[0, 2] < 195  # 0.5 linear encodes to ~0.735

    def test_clips_out_of_range(self):
        out = encode_display_p3_u8(np.array([[-0.2, 1.3, 1e-7]]))
        np.testing.assert_array_equal(out, [[0, 255, 0]])


class TestHueStrip:
    """Tests for render_hue_strip()."""

    def test_size_and_mode(self):
        image = render_hue_strip(90, 8)
        assert isinstance(image, Image.Image)
        assert image.size == (90, 8)
        assert image.mode == 'RGB'

    def test_rows_identical(self):
        pixels = np.asarray(render_hue_strip(45, 5))
        for row in pixels[1:]:
            np.testing.assert_array_equal(row, pixels[0])

    def test_saturated(self):
        """Every column is a gamut-edge color: one channel full, one empty."""
        pixels = np.asarray(render_hue_strip(72, 1))[0]
        assert np.all(pixels.max(axis=-1) == 255)
        assert np.all(pixels.min(axis=-1) == 0)

    def test_invalid_size(self):
        with pytest.raises(ValueError, match="size"):
            render_hue_strip(0, 10)


class TestHueDial:
    """Tests for render_hue_dial()."""

    def test_size(self):
        image = render_hue_dial(64)
        assert image.size == (64, 64)
        assert image.mode == 'RGB'

    def test_center_and_corner_black(self):
        pixels = np.asarray(render_hue_dial(64))
        np.testing.assert_array_equal(pixels[32, 32], [0, 0, 0])
        np.testing.assert_array_equal(pixels[0, 0], [0, 0, 0])

    def test_hue_zero_points_right(self):
        """The ring pixel right of center sits near hue 0: red, no green."""
        pixels = np.asarray(render_hue_dial(64))
        r, g, b = pixels[31, 62]
        assert r == 255
        assert g == 0

    def test_invalid_arguments(self):
        with pytest.raises(ValueError, match="size"):
            render_hue_dial(1)
        with pytest.raises(ValueError, match="Ring"):
            render_hue_dial(64, ring_fraction=0.0)
