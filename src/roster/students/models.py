"""Student entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass
class Student:
    """A student record.

    The entity holds whatever values it is given. Rules about which values
    are acceptable live in StudentService.
    """

    id: str
    first_name: str
    last_name: str | None = ""
    birth_date: date | None = None

    @property
    def full_name(self) -> str:
        """First name, followed by the last name when one is set."""
        if self.last_name is None or not self.last_name.strip():
            return self.first_name
        return f"{self.first_name} {self.last_name}"

    def age_years(self, today: date | None = None) -> int:
        """Whole years elapsed between birth_date and today.

        Args:
            today: Reference date. Defaults to the current date at call time.

        Returns:
            Age in completed years. The count only increments once the
            birthday has been reached in the reference year.
        """
        if self.birth_date is None:
            raise ValueError(f"Student {self.id!r} has no birth date")
        if today is None:
            today = date.today()
        born = self.birth_date
        years = today.year - born.year
        if (today.month, today.day) < (born.month, born.day):
            years -= 1
        return years

    def __repr__(self) -> str:
        return f"<Student(id={self.id!r}, full_name={self.full_name!r})>"
