from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

FLYING = "Flying..."


@dataclass(frozen=True)
class Sparrow:
    name: str = "sparrow"

    def fly(self) -> str:
        logger.info(f"{self.name}: {FLYING}")
        return FLYING

    def move(self) -> str:
        return self.fly()


@dataclass(frozen=True)
class Ostrich:
    # Not a FlyingBird: has no fly()
    name: str = "ostrich"

    def move(self) -> str:
        logger.info(f"{self.name}: Running...")
        return "Running..."
