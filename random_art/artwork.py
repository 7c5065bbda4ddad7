"""
random_art/artwork.py - A reproducible artwork: seed, depth and the tree they build
"""
import random
from collections import Counter
from typing import Dict, Optional

from .builder import build, make_rng
from .operations import RGB, Operation


class Artwork:
    """Represents one piece as the tree built from (seed, depth)"""

    def __init__(self, seed: int, depth: int, tree: Operation = None):
        self.seed = seed
        self.depth = depth

        if tree is None:
            self.tree = build(make_rng(seed), depth)
        else:
            self.tree = tree

    @classmethod
    def random(cls, depth: int, rng: Optional[random.Random] = None) -> 'Artwork':
        """Create an artwork with a freshly drawn seed"""
        rng = rng or random.Random()
        return cls(rng.getrandbits(32), depth)

    def evaluate(self, x: float, y: float) -> RGB:
        return self.tree.evaluate(x, y)

    def get_complexity(self) -> int:
        """Get total complexity (number of nodes)"""
        return len(self.tree.get_all_nodes())

    def get_depth(self) -> int:
        return self.tree.get_depth()

    def get_operation_counts(self) -> Dict[str, int]:
        """Count how often each operation appears in the tree"""
        return dict(Counter(node.name for node in self.tree.get_all_nodes()))

    @property
    def formula(self) -> str:
        return str(self.tree)

    def __str__(self) -> str:
        """String representation of the artwork"""
        lines = [f"Artwork (seed {self.seed}, depth budget {self.depth}):"]
        lines.append(f"  Complexity: {self.get_complexity()}, Depth: {self.get_depth()}")

        counts = self.get_operation_counts()
        ops = ', '.join(f"{name}={counts[name]}" for name in sorted(counts))
        lines.append(f"  Operations: {ops}")

        formula = self.formula
        lines.append(f"  Formula: {formula[:100]}{'...' if len(formula) > 100 else ''}")

        return '\n'.join(lines)
