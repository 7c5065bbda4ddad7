"""
random_art/builder.py - Random construction of operation trees
"""
import logging
import numbers
import random
from typing import Optional

from .operations import (
    RGB, Operation, VarX, VarY, Constant, Circle, ColorMix, Inverse, Sum,
    Product, Mod, PerChannelMask, BinaryMask, SmoothMix, Well, Tent,
)

logger = logging.getLogger(__name__)

# Candidate tables for random selection
LEAF_OPERATIONS = ['x', 'y', 'const', 'circle']
COMPOSITE_OPERATIONS = ['colormix', 'inverse', 'sum', 'product', 'mod',
                        'perchanmask', 'binarymask', 'smoothmix', 'well', 'tent']


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create a dedicated generator for one build"""
    return random.Random(seed)


def create_operation(op_id: str, rng: random.Random) -> Operation:
    """Instantiate an operation, drawing its parameters from rng"""
    if op_id == 'x':
        return VarX()
    elif op_id == 'y':
        return VarY()
    elif op_id == 'const':
        return Constant(rng.random())
    elif op_id == 'circle':
        center_x = rng.random()
        center_y = rng.random()
        return Circle(center_x, center_y)
    elif op_id == 'colormix':
        return ColorMix()
    elif op_id == 'inverse':
        return Inverse()
    elif op_id == 'sum':
        return Sum()
    elif op_id == 'product':
        return Product()
    elif op_id == 'mod':
        return Mod()
    elif op_id == 'perchanmask':
        return PerChannelMask(rng.random())
    elif op_id == 'binarymask':
        return BinaryMask(rng.random())
    elif op_id == 'smoothmix':
        return SmoothMix(rng.random())
    elif op_id == 'well':
        return Well()
    elif op_id == 'tent':
        return Tent()
    else:
        raise ValueError(f"Unknown operation: {op_id}")


def pick_operation(rng: random.Random, depth: int) -> Operation:
    """Pick a composite above the last level and a leaf on it.

    The index is drawn from [0, len - 1), so the last entry of each table
    ('circle' and 'tent') is never picked.
    """
    candidates = COMPOSITE_OPERATIONS if depth > 1 else LEAF_OPERATIONS
    op_id = candidates[rng.randrange(len(candidates) - 1)]
    return create_operation(op_id, rng)


def _build(rng: random.Random, depth: int) -> Operation:
    node = pick_operation(rng, depth)
    node.attach_children([_build(rng, depth - 1) for _ in range(node.arity)])
    return node


def build(rng: random.Random, depth: int) -> Operation:
    """Build a complete operation tree at most depth levels deep"""
    if isinstance(depth, bool) or not isinstance(depth, numbers.Integral) or depth < 1:
        raise ValueError(f"depth must be a positive integer, got {depth!r}")
    depth = int(depth)

    tree = _build(rng, depth)
    logger.debug("Built tree: %d nodes, depth %d", len(tree.get_all_nodes()), tree.get_depth())
    return tree


def evaluate(tree: Operation, x: float, y: float) -> RGB:
    """Compute the colour of the tree at (x, y)"""
    return tree.evaluate(x, y)
