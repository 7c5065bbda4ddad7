"""
random_art/operations.py - Expression tree operations and their evaluation rules
"""
import math
from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

RGB = Tuple[float, float, float]


def length(v: RGB) -> float:
    """Euclidean norm of a colour triple"""
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def fmod(a: float, b: float) -> float:
    """Truncated remainder, NaN where it is undefined"""
    try:
        return math.fmod(a, b)
    except ValueError:
        # fmod(inf, b) and fmod(a, 0) have no value
        return math.nan


def smooth(weight: float, a: float, b: float) -> float:
    return weight * a + (1 - weight) * b


def well(v: float) -> float:
    return (1 - 2 / (1 + v * v)) ** 8


def tent(v: float) -> float:
    return 1 - 2 * abs(v)


class Operation(ABC):
    """Base class for all expression tree operations"""

    name = ''
    arity = 0  # Number of children

    def __init__(self):
        self.children: List['Operation'] = []
        self._attached = False

    def attach_children(self, children: Sequence['Operation']) -> None:
        """Wire up the children; allowed exactly once, with arity children"""
        if self._attached:
            raise ValueError(f"Children of {self.name} are already attached")
        if len(children) != self.arity:
            raise ValueError(
                f"{self.name} takes {self.arity} children, got {len(children)}")
        self.children = list(children)
        self._attached = True

    def check_wired(self) -> None:
        if len(self.children) != self.arity:
            raise ValueError(f"{self.name} evaluated before its children were attached")

    def inputs(self, x: float, y: float) -> List[RGB]:
        """Evaluate every child at (x, y)"""
        self.check_wired()
        return [child.evaluate(x, y) for child in self.children]

    @abstractmethod
    def evaluate(self, x: float, y: float) -> RGB:
        """Evaluate the operation at a coordinate pair"""
        pass

    def get_all_nodes(self) -> List['Operation']:
        """Get all nodes in this subtree"""
        nodes = [self]
        for child in self.children:
            nodes.extend(child.get_all_nodes())
        return nodes

    def get_depth(self) -> int:
        """Get maximum depth of this subtree"""
        if not self.children:
            return 1
        return 1 + max(child.get_depth() for child in self.children)

    def __str__(self):
        if not self.children:
            return self.name
        return f"{self.name}({', '.join(str(child) for child in self.children)})"

    def __repr__(self):
        return f"<{type(self).__name__} {self}>"


class VarX(Operation):
    name = 'x'

    def evaluate(self, x, y):
        return (x, x, x)


class VarY(Operation):
    name = 'y'

    def evaluate(self, x, y):
        return (y, y, y)


class Constant(Operation):
    """Uniform grey level"""

    name = 'const'

    def __init__(self, value: float):
        super().__init__()
        self.value = value

    def evaluate(self, x, y):
        return (self.value, self.value, self.value)

    def __str__(self):
        return f"{self.value:.3f}"


class Circle(Operation):
    """Distance from a fixed center"""

    name = 'circle'

    def __init__(self, center_x: float, center_y: float):
        super().__init__()
        self.center_x = center_x
        self.center_y = center_y

    def evaluate(self, x, y):
        h = math.hypot(x - self.center_x, y - self.center_y)
        return (h, h, h)

    def __str__(self):
        return f"circle({self.center_x:.3f}, {self.center_y:.3f})"


class ColorMix(Operation):
    """Red from the first child, green from the second, blue from the third"""

    name = 'colormix'
    arity = 3

    def evaluate(self, x, y):
        a, b, c = self.inputs(x, y)
        return (a[0], b[1], c[2])


class Inverse(Operation):
    name = 'inverse'
    arity = 1

    def evaluate(self, x, y):
        v, = self.inputs(x, y)
        return (1 - v[0], 1 - v[1], 1 - v[2])


class Sum(Operation):
    """Adds the first child to itself; the second child is never read"""

    name = 'sum'
    arity = 2

    def evaluate(self, x, y):
        self.check_wired()
        a = self.children[0].evaluate(x, y)
        b = self.children[0].evaluate(x, y)
        return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


class Product(Operation):
    name = 'product'
    arity = 2

    def evaluate(self, x, y):
        a, b = self.inputs(x, y)
        return (a[0] * b[0], a[1] * b[1], a[2] * b[2])


class Mod(Operation):
    name = 'mod'
    arity = 2

    def evaluate(self, x, y):
        a, b = self.inputs(x, y)
        return (fmod(a[0], b[0]), fmod(a[1], b[1]), fmod(a[2], b[2]))


class ThresholdOperation(Operation):
    """Three-input operation carrying a threshold drawn at construction"""

    arity = 3

    def __init__(self, threshold: float):
        super().__init__()
        self.threshold = threshold

    def __str__(self):
        args = ', '.join(str(child) for child in self.children)
        return f"{self.name}[{self.threshold:.3f}]({args})"


class PerChannelMask(ThresholdOperation):
    """Selects per channel on the red value of the first child"""

    name = 'perchanmask'

    def evaluate(self, x, y):
        a, b, c = self.inputs(x, y)
        if a[0] > self.threshold:
            return (b[0], b[1], b[2])
        return (c[0], c[1], c[2])


class BinaryMask(ThresholdOperation):
    """Selects a whole child on the length of the first child"""

    name = 'binarymask'

    def evaluate(self, x, y):
        a, b, c = self.inputs(x, y)
        if length(a) > self.threshold:
            return b
        return c


class SmoothMix(ThresholdOperation):
    """Blends the second and third children weighted by the length of the first.

    The threshold is drawn and kept with the node but the blend does not use it.
    """

    name = 'smoothmix'

    def evaluate(self, x, y):
        a, b, c = self.inputs(x, y)
        weight = length(a)
        return (smooth(weight, b[0], c[0]),
                smooth(weight, b[1], c[1]),
                smooth(weight, b[2], c[2]))


class Well(Operation):
    name = 'well'
    arity = 1

    def evaluate(self, x, y):
        v, = self.inputs(x, y)
        return (well(v[0]), well(v[1]), well(v[2]))


class Tent(Operation):
    name = 'tent'
    arity = 1

    def evaluate(self, x, y):
        v, = self.inputs(x, y)
        return (tent(v[0]), tent(v[1]), tent(v[2]))


OPERATIONS = {
    op.name: op for op in (
        VarX, VarY, Constant, Circle,
        ColorMix, Inverse, Sum, Product, Mod,
        PerChannelMask, BinaryMask, SmoothMix, Well, Tent,
    )
}
