# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""
Color quantization backends.

Three approaches:
1. Median cut: Pillow's built-in quantizer (default, fast, robust on photos)
2. K-means: Statistical clusters in RGB space (averaged colors)
3. Mode: Most common exact pixel values (exact colors)

For flat graphics and screenshots, mode is the most accurate.
For photos and gradients, median cut or k-means are more robust.

Every backend returns ``(rgb_triple, pixel_count)`` pairs ordered by pixel
count descending, ties broken by the backend's own index.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

import numpy as np
from numpy.typing import NDArray
from PIL import Image

Counted = list[tuple[tuple[int, int, int], int]]

MAX_MEDIAN_CUT_COLORS = 256


class QuantizeMethod(Enum):
    """Supported quantization backends."""
    MEDIAN_CUT = "median_cut"
    KMEANS = "kmeans"
    MODE = "mode"


def quantize_median_cut(image: Image.Image, k: int) -> Counted:
    """
    Quantize with Pillow's median cut.

    Only palette entries actually used by the quantized image are returned,
    so the result may hold fewer than ``k`` colors.
    """
    # Pillow palettes hold at most 256 entries
    quantized = image.quantize(colors=min(k, MAX_MEDIAN_CUT_COLORS), method=Image.Quantize.MEDIANCUT)
    palette = quantized.getpalette() or []
    usage = quantized.getcolors(maxcolors=256) or []

    # Most populated first; lower palette index wins ties
    usage.sort(key=lambda entry: (-entry[0], entry[1]))

    result: Counted = []
    for count, index in usage:
        r, g, b = palette[index * 3 : index * 3 + 3]
        result.append(((int(r), int(g), int(b)), int(count)))
    return result


def quantize_mode(pixels: NDArray[np.uint8], k: int) -> Counted:
    """
    Quantize by MODE: the ``k`` most common exact pixel values.

    Args:
        pixels: Array of shape (N, 3) with RGB values [0-255]
        k: Maximum number of colors to return
    """
    if len(pixels) == 0:
        raise ValueError("Cannot quantize an empty pixel array")

    unique, counts = np.unique(pixels, axis=0, return_counts=True)
    order = np.argsort(-counts, kind="stable")[:k]
    return [
        ((int(unique[i][0]), int(unique[i][1]), int(unique[i][2])), int(counts[i]))
        for i in order
    ]


def quantize_kmeans(
    pixels: NDArray[np.uint8],
    k: int,
    max_iter: int = 100,
    seed: Optional[int] = 42,
) -> Counted:
    """
    Quantize with k-means clustering in RGB space.

    Centroids are rounded to the nearest integer color. Clusters that end
    up empty are dropped, and ``k`` shrinks to the number of unique colors.
    """
    if len(pixels) == 0:
        raise ValueError("Cannot quantize an empty pixel array")

    data = pixels.astype(np.float64)
    centroids, labels = _kmeans(data, k=k, max_iter=max_iter, seed=seed)
    counts = np.bincount(labels, minlength=len(centroids))

    rounded = np.clip(np.rint(centroids), 0, 255).astype(np.int64)
    order = np.argsort(-counts, kind="stable")
    return [
        ((int(rounded[i][0]), int(rounded[i][1]), int(rounded[i][2])), int(counts[i]))
        for i in order
        if counts[i] > 0
    ]


def _kmeans(
    data: NDArray[np.float64],
    k: int,
    max_iter: int = 100,
    seed: Optional[int] = None,
) -> tuple[NDArray[np.float64], NDArray[np.int64]]:
    """
    Vectorized k-means with k-means++ initialization.

    Returns:
        (centroids, labels) where:
        - centroids: (k, 3) array of cluster centers
        - labels: (N,) array of cluster assignments
    """
    rng = np.random.default_rng(seed)
    n, d = data.shape

    unique_data = np.unique(data, axis=0)
    n_unique = len(unique_data)
    k = min(k, n_unique)

    centroids = np.empty((k, d), dtype=np.float64)
    centroids[0] = unique_data[rng.integers(n_unique)]

    # Squared distance of each unique point to its nearest chosen centroid
    nearest = np.sum((unique_data - centroids[0]) ** 2, axis=1)
    for i in range(1, k):
        total = nearest.sum()
        if total == 0:
            idx = rng.integers(n_unique)
        else:
            idx = rng.choice(n_unique, p=nearest / total)
        centroids[i] = unique_data[idx]
        nearest = np.minimum(nearest, np.sum((unique_data - centroids[i]) ** 2, axis=1))

    labels = np.zeros(n, dtype=np.int64)
    for iteration in range(max_iter):
        dists = np.sum(
            (data[:, np.newaxis, :] - centroids[np.newaxis, :, :]) ** 2,
            axis=2,
        )
        new_labels = np.argmin(dists, axis=1)
        if iteration > 0 and np.array_equal(new_labels, labels):
            break
        labels = new_labels

        for j in range(k):
            mask = labels == j
            if np.any(mask):
                centroids[j] = data[mask].mean(axis=0)

    return centroids, labels
