"""
SOLID principle katas.

Before/after pairs for the Open/Closed, Liskov Substitution and Single
Responsibility principles. Each component under ``components`` keeps the
violating design in ``legacy.py`` next to its refactored counterpart.
"""
