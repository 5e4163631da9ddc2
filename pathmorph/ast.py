from dataclasses import dataclass, field
from typing import List, Tuple

Vec2 = Tuple[float, float]

ORIGIN: Vec2 = (0.0, 0.0)


@dataclass(frozen=True)
class Anchor:
    abs: Vec2 = ORIGIN
    rel: Vec2 = ORIGIN

    @property
    def x(self) -> float:
        return self.abs[0]

    @property
    def y(self) -> float:
        return self.abs[1]


@dataclass(frozen=True)
class Coordinates:
    abs: Tuple[float, ...] = ()
    rel: Tuple[float, ...] = ()

    def __len__(self) -> int:
        return len(self.abs)


@dataclass(frozen=True)
class Instruction:
    type: str
    coordinates: Coordinates = field(default_factory=Coordinates)
    start: Anchor = field(default_factory=Anchor)
    end: Anchor = field(default_factory=Anchor)

    @property
    def command(self) -> str:
        """Case-folded command letter."""
        return self.type.upper()

    @property
    def is_relative(self) -> bool:
        return self.type.islower()


@dataclass(frozen=True)
class Step:
    instructions: Tuple[Instruction, ...] = ()
    source: str = ''

    def __len__(self) -> int:
        return len(self.instructions)

    def __iter__(self):
        return iter(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    @property
    def commands(self) -> List[str]:
        return [ins.command for ins in self.instructions]


@dataclass(frozen=True)
class Point:
    type: str
    from_: Tuple[float, ...] = ()
    to: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if len(self.from_) != len(self.to):
            raise ValueError(
                f"point {self.type!r} has {len(self.from_)} source and {len(self.to)} target values"
            )


@dataclass(frozen=True)
class Segment:
    points: Tuple[Point, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    @property
    def types(self) -> List[str]:
        return [pt.type for pt in self.points]
