"""
Period Enumerations.

This module defines the enums used throughout iso_period to standardise constants across the package.
"""

from enum import Enum


class PeriodUnit(Enum):
    """Enum representing the unit designators of a period, in the order they are written out.

    Attributes:
        YEARS: The "Y" designator, stored in the ``years`` field.
        MONTHS: The "M" designator, stored in the ``months`` field.
        WEEKS: The "W" designator, stored in the ``weeks`` field.
        DAYS: The "D" designator, stored in the ``days`` field.
    """

    YEARS = "Y"
    MONTHS = "M"
    WEEKS = "W"
    DAYS = "D"

    @property
    def field_name(self) -> str:
        """The name of the Period field that holds amounts of this unit."""
        return self.name.lower()

    @classmethod
    def of_designator(cls, designator: str) -> "PeriodUnit | None":
        """Return the unit for a designator letter, or None if the letter is not a unit designator.

        Args:
            designator: A single character from a period string

        Returns:
            The matching PeriodUnit, or None
        """
        try:
            return cls(designator)
        except ValueError:
            return None
