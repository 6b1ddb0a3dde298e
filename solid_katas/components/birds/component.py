"""
Birds component.

make_bird_fly only accepts FlyingBird, so its result never depends on
which bird was passed.
"""

from __future__ import annotations

from collections.abc import Iterable

from .ports import Bird, FlyingBird


def make_bird_fly(bird: FlyingBird) -> str:
    return bird.fly()


def make_bird_move(bird: Bird) -> str:
    return bird.move()


def flying_birds(birds: Iterable[Bird]) -> list[FlyingBird]:
    """Birds from a mixed flock that can fly."""
    return [b for b in birds if isinstance(b, FlyingBird)]
