"""The common base of every movie in the catalogue."""

from __future__ import annotations

from abc import ABC, abstractmethod

from moviemanager.dates import Date, days_since
from moviemanager.people import Director

REFERENCE_DATE = Date(27, 6, 2025)


class Movie(ABC):
    """A catalogued movie; concrete genres supply the score and extra details."""

    def __init__(
        self,
        title: str = "",
        release_date: Date | None = None,
        rating: float = 0.0,
        director: Director | None = None,
    ) -> None:
        self.title = title
        self.release_date = release_date if release_date is not None else Date()
        self.rating = rating
        self.director = director

    @property
    @abstractmethod
    def genre(self) -> str:
        """The genre label."""

    @abstractmethod
    def calculate_score(self) -> float:
        """Return the genre-specific score in the range used by the catalogue."""

    @abstractmethod
    def _details(self) -> str:
        """Return the genre-specific tail of the description."""

    @property
    def release_year(self) -> int:
        return self.release_date.year

    def days_since_release(self) -> int:
        """Return the day count since release, measured at the reference date."""
        return days_since(self.release_date, REFERENCE_DATE)

    def describe(self) -> str:
        """Return the one-line description of the movie."""
        text = (
            f"Genre: {self.genre}, Title: {self.title}, "
            f"Release Date: {self.release_date}, Rating: {self.rating:g}"
        )
        if self.director is not None:
            text += f", Director: {self.director.describe()}"
        return text + self._details()

    def display(self) -> None:
        """Print the description on its own line."""
        print(self.describe())