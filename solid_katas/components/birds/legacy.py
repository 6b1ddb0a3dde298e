"""
Birds before the Liskov Substitution fix.

Bird promises fly(); Ostrich overrides it to report that it cannot, so
make_bird_fly silently changes meaning depending on the subtype.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class Bird:
    def fly(self) -> str:
        logger.info("Flying...")
        return "Flying..."


class Ostrich(Bird):
    def fly(self) -> str:
        logger.info("Can't fly")
        return "Can't fly"


def make_bird_fly(bird: Bird) -> str:
    return bird.fly()
