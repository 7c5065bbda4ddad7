"""
random_art/renderer.py - Evaluates a tree over a pixel grid and writes images
"""
import logging
import time
from typing import Tuple

import numpy as np
from PIL import Image

from .config import DOMAINS, NORMALIZE_MODES
from .operations import Operation

logger = logging.getLogger(__name__)


class Renderer:
    """Handles evaluation and rendering of operation trees"""

    def __init__(self, domain: str = 'unit', normalize: str = 'clip'):
        if domain not in DOMAINS:
            raise ValueError(f"Unknown domain: {domain}")
        if normalize not in NORMALIZE_MODES:
            raise ValueError(f"Unknown normalize mode: {normalize}")
        self.domain = domain
        self.normalize = normalize

    def create_coordinate_grids(self, size: Tuple[int, int]) -> Tuple[np.ndarray, np.ndarray]:
        """Create coordinate grids for evaluation"""
        height, width = size
        if self.domain == 'unit':
            x = np.arange(width) / width
            y = np.arange(height) / height
        else:
            x = np.linspace(-1, 1, width)
            y = np.linspace(-1, 1, height)
        X, Y = np.meshgrid(x, y)
        return X, Y

    def evaluate_tree(self, tree: Operation, size: Tuple[int, int]) -> np.ndarray:
        """Evaluate the tree at every pixel into a (height, width, 3) array"""
        X, Y = self.create_coordinate_grids(size)
        height, width = X.shape
        data = np.empty((height, width, 3), dtype=np.float64)

        start_time = time.time()
        for row in range(height):
            for col in range(width):
                data[row, col] = tree.evaluate(float(X[row, col]), float(Y[row, col]))
        logger.debug("Evaluated %dx%d pixels in %.2fs", width, height, time.time() - start_time)

        return data

    def _normalize_channel(self, data: np.ndarray) -> np.ndarray:
        """Normalize channel data to [0, 1] range"""
        if self.normalize == 'clip':
            data = np.nan_to_num(data, nan=0.0, posinf=1.0, neginf=0.0)
            return np.clip(data, 0, 1)

        finite = data[np.isfinite(data)]
        if finite.size == 0:
            return np.full_like(data, 0.5, dtype=np.float64)
        data_min, data_max = finite.min(), finite.max()
        # Infinities take the finite extremes, NaN the minimum
        data = np.nan_to_num(data, nan=data_min, posinf=data_max, neginf=data_min)
        if data_max == data_min:
            return np.full_like(data, 0.5)
        normalized = (data - data_min) / (data_max - data_min)
        return np.clip(normalized, 0, 1)

    def to_rgb_array(self, data: np.ndarray) -> np.ndarray:
        """Quantize a float (height, width, 3) array to uint8"""
        channels = [(self._normalize_channel(data[..., i]) * 255).astype(np.uint8)
                    for i in range(3)]
        return np.stack(channels, axis=-1)

    def render_image(self, tree: Operation, size: Tuple[int, int] = (256, 256),
                     filename: str = None) -> Image.Image:
        """Render tree as an image"""
        rgb_array = self.to_rgb_array(self.evaluate_tree(tree, size))
        img = Image.fromarray(rgb_array)
        if filename:
            img.save(filename)
            logger.info("Saved %dx%d image to %s", size[1], size[0], filename)
        return img
