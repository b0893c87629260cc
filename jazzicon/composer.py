"""Deterministic identicon composition.

A `JazzIcon` owns its own seeded generator and turns it into a background
colour plus a handful of rotated squares. The draw order below is part of
the output: changing it changes every icon for every existing seed.
"""
import logging
import math
import threading
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar, Union

from .colors import DEFAULT_PALETTE, Color, ColorLike, to_palette
from .rng import SeededGenerator
from .seed import Digest, derive_seed, md5_hexdigest

logger = logging.getLogger(__name__)

DEFAULT_SHAPE_COUNT = 4
DEFAULT_WOBBLE = 30

T = TypeVar("T")
Point = Tuple[float, float]


class PaletteError(ValueError):
    """Palette too short for the configured number of shapes."""


def _round_half_away(value: float, places: int) -> float:
    factor = 10 ** places
    return math.copysign(math.floor(abs(value) * factor + 0.5), value) / factor


@dataclass(frozen=True)
class ShapeDescriptor:
    """One `diameter` sized square, offset from the icon centre and rotated
    about its own centre by `rotation` radians."""
    color: Color
    offset: Point
    rotation: float

    def position(self, diameter: float) -> Point:
        center = diameter / 2
        return center + self.offset[0], center + self.offset[1]

    def corners(self, diameter: float) -> List[Point]:
        cx, cy = self.position(diameter)
        half = diameter / 2
        cos_r, sin_r = math.cos(self.rotation), math.sin(self.rotation)
        points = []
        for dx, dy in ((-half, -half), (half, -half), (half, half), (-half, half)):
            points.append((cx + dx * cos_r - dy * sin_r, cy + dx * sin_r + dy * cos_r))
        return points


@dataclass(frozen=True)
class Identicon:
    diameter: float
    background: Color
    shapes: Tuple[ShapeDescriptor, ...]


class JazzIcon:
    def __init__(
        self,
        seed: Union[int, str],
        palette: Optional[Iterable[ColorLike]] = None,
        *,
        shape_count: int = DEFAULT_SHAPE_COUNT,
        wobble: int = DEFAULT_WOBBLE,
        digest: Optional[Digest] = None,
    ):
        if isinstance(seed, str):
            seed = derive_seed(seed, digest or md5_hexdigest)
        if shape_count < 2:
            raise ValueError(f"shape_count must be at least 2, got {shape_count}")

        colors = DEFAULT_PALETTE if palette is None else to_palette(palette)
        if len(colors) < shape_count + 1:
            raise PaletteError(
                f"palette has {len(colors)} colours, {shape_count + 1} needed for {shape_count} shapes"
            )

        self.generator = SeededGenerator(seed)
        self.palette = colors
        self.shape_count = shape_count
        self.wobble = int(wobble)
        self._lock = threading.Lock()
        logger.debug("JazzIcon seed=%d colours=%d shapes=%d", self.generator.seed, len(colors), shape_count)

    @classmethod
    def from_string(cls, text: str, palette: Optional[Iterable[ColorLike]] = None,
                    *, digest: Optional[Digest] = None, **kwargs) -> "JazzIcon":
        if not isinstance(text, str):
            raise TypeError(f"from_string needs a str seed, got {type(text).__name__}")
        return cls(text, palette, digest=digest, **kwargs)

    @property
    def seed(self) -> int:
        return self.generator.seed

    def generate(self, diameter: float) -> Identicon:
        """Compose the icon for a square of side `diameter`.

        Always restarts the stream, so repeated calls return equal results.
        """
        with self._lock:
            self.generator.reset()

            shuffled = self.shuffle(self.hue_shift(self.palette))
            shapes = tuple(
                self.generate_shape(diameter, shuffled[index + 1], index, self.shape_count - 1)
                for index in range(self.shape_count)
            )
            return Identicon(diameter=diameter, background=shuffled[0], shapes=shapes)

    def hue_shift(self, colors: Sequence[Color]) -> List[Color]:
        # 30 is fixed; only the centring term follows `wobble`
        amount = self.generator.next_float() * 30 - (self.wobble // 2)
        return [c.shift_hue(amount / 360.0) for c in colors]

    def shuffle(self, items: Sequence[T]) -> List[T]:
        mutated = list(items)
        current_index = len(mutated)
        while current_index > 0:
            random_index = self.generator.next() % current_index
            current_index -= 1
            mutated[current_index], mutated[random_index] = mutated[random_index], mutated[current_index]
        return mutated

    def generate_shape(self, diameter: float, color: Color, index: int, total: int) -> ShapeDescriptor:
        first_rotation = self.generator.next_float()
        angle = math.pi * 2 * first_rotation

        a = diameter / total
        b = self.generator.next_float()
        c = index * a
        velocity = a * b + c
        offset = (math.cos(angle) * velocity, math.sin(angle) * velocity)

        # third draw spins the square itself on top of the placement angle
        second_rotation = self.generator.next_float()
        rotation = first_rotation * 360.0 + second_rotation * 180
        radians = _round_half_away(rotation, 1) * math.pi / 180.0

        return ShapeDescriptor(color=color, offset=offset, rotation=radians)
