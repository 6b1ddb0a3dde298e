"""
Birds component (Liskov Substitution).

Flight is a narrower capability than being a bird.
"""

from . import legacy
from .component import flying_birds, make_bird_fly, make_bird_move
from .models import FLYING, Ostrich, Sparrow
from .ports import Bird, FlyingBird

__all__ = [
    "flying_birds",
    "make_bird_fly",
    "make_bird_move",
    "FLYING",
    "Ostrich",
    "Sparrow",
    "Bird",
    "FlyingBird",
    "legacy",
]
