"""People credited on movies."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field


@dataclass
class Name:
    """A person's first and last name."""

    first_name: str = ""
    last_name: str = ""

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def display(self) -> str:
        """Write the full name to stdout, with no newline, and return it."""
        text = str(self)
        sys.stdout.write(text)
        return text


@dataclass
class Director:
    """A movie director with experience and nationality."""

    name: Name = field(default_factory=Name)
    experience_years: int = 0
    nationality: str = ""

    def update(
        self, first_name: str, last_name: str, experience_years: int, nationality: str
    ) -> None:
        """Replace every detail of the director at once."""
        self.name = Name(first_name, last_name)
        self.experience_years = experience_years
        self.nationality = nationality

    def describe(self) -> str:
        """Return the one-line description of the director."""
        return (
            f"Director: {self.name}, Experience: {self.experience_years} years, "
            f"Nationality: {self.nationality}"
        )

    def display(self) -> str:
        """Write the description to stdout, with no newline, and return it."""
        text = self.describe()
        sys.stdout.write(text)
        return text