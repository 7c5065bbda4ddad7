"""
random_art - Procedural images from random expression trees

Builds a random tree of operations over the coordinates (x, y) and evaluates
it at every pixel to get an RGB colour.
"""

__version__ = "0.1.0"

from .operations import (
    Operation, VarX, VarY, Constant, Circle, ColorMix, Inverse, Sum, Product,
    Mod, PerChannelMask, BinaryMask, SmoothMix, Well, Tent, OPERATIONS
)
from .builder import (
    build, evaluate, make_rng, create_operation, pick_operation,
    LEAF_OPERATIONS, COMPOSITE_OPERATIONS
)
from .artwork import Artwork
from .config import RenderConfig
from .renderer import Renderer

__all__ = [
    'Operation', 'VarX', 'VarY', 'Constant', 'Circle', 'ColorMix', 'Inverse',
    'Sum', 'Product', 'Mod', 'PerChannelMask', 'BinaryMask', 'SmoothMix',
    'Well', 'Tent', 'OPERATIONS',
    'build', 'evaluate', 'make_rng', 'create_operation', 'pick_operation',
    'LEAF_OPERATIONS', 'COMPOSITE_OPERATIONS',
    'Artwork',
    'RenderConfig',
    'Renderer',
]
