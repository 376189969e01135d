"""
Quantum Flip - Roll Sources

The wager engine never rolls; a roll source hands it one face per round.

RandomRollSource draws a uniform D6. QuantumCube models the numbered cube on
the table: six faces on the +/-X, +/-Y and +/-Z sides, turned in quarter steps
about its own axes, reading whichever face points up.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import ClassVar, Protocol

from src.engine.validators import DIE_FACES

Vector = tuple[int, int, int]
Matrix = tuple[Vector, Vector, Vector]

_IDENTITY: Matrix = ((1, 0, 0), (0, 1, 0), (0, 0, 1))

# Quarter-turn (+90 degrees) rotation matrices about each local axis
_QUARTER_TURNS: dict[str, Matrix] = {
    "x": ((1, 0, 0), (0, 0, -1), (0, 1, 0)),
    "y": ((0, 0, 1), (0, 1, 0), (-1, 0, 0)),
    "z": ((0, -1, 0), (1, 0, 0), (0, 0, 1)),
}

_UP: Vector = (0, 1, 0)


class RollSource(Protocol):
    """Anything that can produce a D6 face for a round."""

    def roll(self) -> int: ...


class RandomRollSource:
    """Uniform D6 draws from an injectable random generator."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def roll(self) -> int:
        return self._rng.randint(1, DIE_FACES)


@dataclass(frozen=True)
class CubeFace:
    """A numbered face and its outward normal in the cube's own frame."""
    value: int
    normal: Vector


def _matmul(a: Matrix, b: Matrix) -> Matrix:
    return tuple(
        tuple(sum(a[i][k] * b[k][j] for k in range(3)) for j in range(3))
        for i in range(3)
    )  # type: ignore[return-value]


def _transpose(m: Matrix) -> Matrix:
    return tuple(tuple(m[j][i] for j in range(3)) for i in range(3))  # type: ignore[return-value]


def _apply(m: Matrix, v: Vector) -> Vector:
    return tuple(sum(m[i][k] * v[k] for k in range(3)) for i in range(3))  # type: ignore[return-value]


class QuantumCube:
    """
    Numbered cube rotated in 90 degree steps.

    Orientation is kept as an integer rotation matrix, so any sequence of
    quarter turns lands exactly on one of the 24 cube orientations and
    exactly one face points up.
    """

    FACES: ClassVar[tuple[CubeFace, ...]] = (
        CubeFace(1, (1, 0, 0)),
        CubeFace(2, (-1, 0, 0)),
        CubeFace(3, (0, 1, 0)),
        CubeFace(4, (0, -1, 0)),
        CubeFace(5, (0, 0, 1)),
        CubeFace(6, (0, 0, -1)),
    )
    AXES: ClassVar[tuple[str, ...]] = ("x", "y", "z")
    MIN_SPIN_STEPS: ClassVar[int] = 6
    MAX_SPIN_STEPS: ClassVar[int] = 13

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._orientation: Matrix = _IDENTITY

    @property
    def orientation(self) -> Matrix:
        return self._orientation

    def rotate_step(self, axis: str, direction: int = 1) -> None:
        """Turn the cube a quarter turn about one of its own axes.

        Args:
            axis: ``"x"``, ``"y"`` or ``"z"``
            direction: +1 or -1

        Raises:
            ValueError: On an unknown axis or direction
        """
        if axis not in _QUARTER_TURNS:
            raise ValueError(f"Axis must be one of {self.AXES}, got {axis!r}.")
        if direction not in (1, -1):
            raise ValueError(f"Direction must be 1 or -1, got {direction}.")

        turn = _QUARTER_TURNS[axis]
        if direction == -1:
            turn = _transpose(turn)
        self._orientation = _matmul(self._orientation, turn)

    def rotate_x_step(self, direction: int = 1) -> None:
        self.rotate_step("x", direction)

    def rotate_y_step(self, direction: int = 1) -> None:
        self.rotate_step("y", direction)

    def rotate_z_step(self, direction: int = 1) -> None:
        self.rotate_step("z", direction)

    def reset_rotation(self) -> None:
        self._orientation = _IDENTITY

    def top_face(self) -> CubeFace:
        """The face whose normal points most nearly straight up."""
        def up_component(face: CubeFace) -> int:
            world = _apply(self._orientation, face.normal)
            return sum(w * u for w, u in zip(world, _UP))

        return max(self.FACES, key=up_component)

    def top_face_value(self) -> int:
        return self.top_face().value

    def spin(self) -> int:
        """Scramble the cube and return the face that lands on top.

        Each axis gets a random budget of quarter turns; axes are turned
        round-robin (x, y, z) with a random direction per step until every
        budget is spent.
        """
        steps = {
            axis: self._rng.randint(self.MIN_SPIN_STEPS, self.MAX_SPIN_STEPS)
            for axis in self.AXES
        }
        i = 0
        while any(remaining > 0 for remaining in steps.values()):
            axis = self.AXES[i % len(self.AXES)]
            if steps[axis] > 0:
                direction = -1 if self._rng.random() < 0.5 else 1
                self.rotate_step(axis, direction)
                steps[axis] -= 1
            i += 1
        return self.top_face_value()

    def roll(self) -> int:
        return self.spin()
