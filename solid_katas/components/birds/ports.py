"""
Birds component ports.

Flight is split out of the base capability so that birds which cannot fly
never promise to.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Bird(Protocol):
    """Every bird can move somehow."""

    @property
    def name(self) -> str: ...

    def move(self) -> str: ...


@runtime_checkable
class FlyingBird(Bird, Protocol):
    """A bird whose fly() always flies."""

    def fly(self) -> str: ...
