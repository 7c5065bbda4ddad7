"""
random_art/config.py - Render settings shared by the CLI and the renderer
"""
from dataclasses import dataclass
from typing import Optional, Tuple

DOMAINS = ('unit', 'signed')
NORMALIZE_MODES = ('clip', 'stretch')


@dataclass
class RenderConfig:
    """Settings for one render.

    depth bounds the tree height; domain selects how pixel positions map to
    coordinates ('unit' is [0, 1), 'signed' is [-1, 1]); normalize selects how
    channel values are brought into [0, 1] before quantization.
    """

    depth: int = 6
    width: int = 256
    height: int = 256
    domain: str = 'unit'
    normalize: str = 'clip'
    seed: Optional[int] = None
    out: str = 'out/'

    @property
    def size(self) -> Tuple[int, int]:
        return (self.height, self.width)

    def validate(self) -> 'RenderConfig':
        if self.depth < 1:
            raise ValueError(f"depth must be at least 1, got {self.depth}")
        if self.width < 1 or self.height < 1:
            raise ValueError(f"image size must be positive, got {self.width}x{self.height}")
        if self.domain not in DOMAINS:
            raise ValueError(f"Unknown domain: {self.domain}")
        if self.normalize not in NORMALIZE_MODES:
            raise ValueError(f"Unknown normalize mode: {self.normalize}")
        return self
