# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""Tests for palette extraction."""

import numpy as np
import pytest
from PIL import Image

import webswatch.palette.extract as extract_module
from webswatch.errors import ExtractionError, InvalidArgumentError
from webswatch.palette import QuantizeMethod, extract_palette
from webswatch.palette.quantize import quantize_kmeans, quantize_mode


def _solid_image(r, g, b, height=50, width=50):
    """Create a solid-color image."""
    return np.full((height, width, 3), [r, g, b], dtype=np.uint8)


def _split_image(rgb1, rgb2, height=40, width=100, split=75):
    """Image whose first ``split`` columns are rgb1 and the rest rgb2."""
    img = np.zeros((height, width, 3), dtype=np.uint8)
    img[:, :split] = rgb1
    img[:, split:] = rgb2
    return img


def _noise_image(seed=0, height=40, width=40):
    return np.random.default_rng(seed).integers(0, 256, size=(height, width, 3), dtype=np.uint8)


class TestValidation:

    @pytest.mark.parametrize("k", [0, -1])
    def test_k_below_one_raises(self, k):
        with pytest.raises(InvalidArgumentError, match="k"):
            extract_palette(_solid_image(1, 2, 3), k)

    def test_k_checked_before_loading(self, tmp_path):
        with pytest.raises(InvalidArgumentError):
            extract_palette(tmp_path / "missing.png", 0)


class TestExtractionErrors:

    def test_missing_file(self, tmp_path):
        result = extract_palette(tmp_path / "missing.png", 3)
        assert result.is_err()
        assert isinstance(result.error, ExtractionError)
        assert result.error.stage == "extraction"
        assert isinstance(result.error.cause, OSError)

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "notes.png"
        path.write_text("definitely not a png")
        result = extract_palette(path, 3)
        assert result.is_err()
        assert "extraction failed" in str(result.error)

    def test_wrong_shape(self):
        result = extract_palette(np.zeros((10, 10), dtype=np.uint8), 3)
        assert result.is_err()
        assert "shape" in str(result.error)

    def test_wrong_dtype(self):
        result = extract_palette(np.zeros((10, 10, 3), dtype=np.float32), 3)
        assert result.is_err()
        assert "uint8" in str(result.error)

    def test_empty_array(self):
        result = extract_palette(np.zeros((0, 10, 3), dtype=np.uint8), 3)
        assert result.is_err()
        assert "empty" in str(result.error)

    def test_unsupported_type(self):
        result = extract_palette(12345, 3)
        assert result.is_err()
        assert isinstance(result.error.cause, TypeError)

    def test_quantizer_failure_is_wrapped(self, monkeypatch):
        def boom(pixels, k):
            raise RuntimeError("quantizer exploded")

        monkeypatch.setattr(extract_module, "quantize_mode", boom)
        result = extract_palette(_solid_image(1, 2, 3), 3, method=QuantizeMethod.MODE)
        assert result.is_err()
        assert isinstance(result.error.cause, RuntimeError)
        assert "mode quantization failed" in str(result.error)


class TestExtractPalette:

    @pytest.mark.parametrize("method", list(QuantizeMethod))
    def test_solid_image_single_color(self, method):
        result = extract_palette(_solid_image(255, 0, 0), 3, method=method)
        assert result.is_ok()
        assert result.value == ((255, 0, 0),)

    @pytest.mark.parametrize("method", [QuantizeMethod.MODE, QuantizeMethod.KMEANS])
    def test_ordered_by_population(self, method):
        pixels = _split_image((10, 200, 30), (250, 250, 250))
        result = extract_palette(pixels, 2, method=method)
        assert result.unwrap() == ((10, 200, 30), (250, 250, 250))

    def test_median_cut_two_tone(self):
        pixels = _split_image((10, 200, 30), (250, 250, 250))
        palette = extract_palette(pixels, 4).unwrap()
        assert 1 <= len(palette) <= 4
        assert set(palette) == {(10, 200, 30), (250, 250, 250)}
        assert palette[0] == (10, 200, 30)

    @pytest.mark.parametrize("method", list(QuantizeMethod))
    @pytest.mark.parametrize("k", [1, 3, 6])
    def test_shape_guarantee(self, method, k):
        palette = extract_palette(_noise_image(), k, method=method).unwrap()
        assert 1 <= len(palette) <= k
        for triple in palette:
            assert len(triple) == 3
            assert all(type(v) is int and 0 <= v <= 255 for v in triple)

    @pytest.mark.parametrize("method", list(QuantizeMethod))
    def test_deterministic(self, method):
        pixels = _noise_image(seed=3)
        assert extract_palette(pixels, 5, method=method) == extract_palette(pixels, 5, method=method)

    def test_pil_input(self):
        img = Image.new("RGBA", (20, 20), (0, 0, 255, 255))
        assert extract_palette(img, 2).unwrap() == ((0, 0, 255),)

    def test_pil_input_not_closed(self):
        img = Image.new("RGB", (20, 20), (0, 0, 255))
        extract_palette(img, 2)
        assert img.getpixel((0, 0)) == (0, 0, 255)

    def test_path_input(self, tmp_path):
        path = tmp_path / "source.png"
        Image.fromarray(_split_image((200, 0, 0), (0, 0, 200))).save(path)
        palette = extract_palette(str(path), 2, method=QuantizeMethod.MODE).unwrap()
        assert palette == ((200, 0, 0), (0, 0, 200))

    def test_downsampling(self):
        pixels = _split_image((200, 0, 0), (0, 0, 200), height=200, width=200, split=100)
        result = extract_palette(pixels, 2, method=QuantizeMethod.MODE, max_pixels=100)
        assert result.is_ok()
        assert 1 <= len(result.value) <= 2

    def test_downsampled_copy_is_closed(self, monkeypatch):
        resized = []
        original_resize = Image.Image.resize

        def recording_resize(self, *args, **kwargs):
            small = original_resize(self, *args, **kwargs)
            resized.append(small)
            return small

        monkeypatch.setattr(Image.Image, "resize", recording_resize)
        pixels = _split_image((200, 0, 0), (0, 0, 200), height=200, width=200, split=100)
        assert extract_palette(pixels, 2, max_pixels=100).is_ok()
        assert len(resized) == 1
        with pytest.raises(ValueError):
            resized[0].getpixel((0, 0))

    @pytest.mark.parametrize("k", [256, 300, 1000])
    def test_median_cut_k_beyond_palette_limit(self, k):
        result = extract_palette(_noise_image(), k, method=QuantizeMethod.MEDIAN_CUT)
        assert result.is_ok()
        assert 1 <= len(result.value) <= 256


class TestQuantizeBackends:

    def test_mode_counts(self):
        pixels = _split_image((1, 2, 3), (4, 5, 6), height=1, width=10, split=7).reshape(-1, 3)
        assert quantize_mode(pixels, 5) == [((1, 2, 3), 7), ((4, 5, 6), 3)]

    def test_mode_truncates_to_k(self):
        pixels = _noise_image().reshape(-1, 3)
        assert len(quantize_mode(pixels, 4)) == 4

    def test_kmeans_fewer_unique_than_k(self):
        pixels = _split_image((1, 2, 3), (4, 5, 6)).reshape(-1, 3)
        result = quantize_kmeans(pixels, 8)
        assert sorted(rgb for rgb, _ in result) == [(1, 2, 3), (4, 5, 6)]

    def test_kmeans_counts_cover_all_pixels(self):
        pixels = _noise_image().reshape(-1, 3)
        result = quantize_kmeans(pixels, 5)
        assert sum(count for _, count in result) == len(pixels)

    @pytest.mark.parametrize("quantize", [quantize_mode, quantize_kmeans])
    def test_empty_pixels_rejected(self, quantize):
        with pytest.raises(ValueError, match="empty"):
            quantize(np.zeros((0, 3), dtype=np.uint8), 3)
