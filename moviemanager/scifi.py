"""Science-fiction movies."""

from __future__ import annotations

import math

from moviemanager.dates import Date
from moviemanager.movie import Movie
from moviemanager.people import Director

TECH_LEVELS = (1, 2, 3)


class SciFiMovie(Movie):
    """A science-fiction movie with a tech level, aliens and a future year."""

    def __init__(
        self,
        title: str = "",
        release_date: Date | None = None,
        rating: float = 0.0,
        tech_level: int = 1,
        has_aliens: bool = False,
        future_year: int = 2000,
        director: Director | None = None,
    ) -> None:
        super().__init__(title, release_date, rating, director)
        self._tech_level = tech_level if tech_level in TECH_LEVELS else 1
        self.has_aliens = has_aliens
        self.future_year = future_year

    @property
    def genre(self) -> str:
        return "SciFi"

    @property
    def tech_level(self) -> int:
        return self._tech_level

    @tech_level.setter
    def tech_level(self, level: int) -> None:
        if level in TECH_LEVELS:
            self._tech_level = level

    def calculate_score(self) -> float:
        return math.fmod(self.rating * self.days_since_release() * self._tech_level, 10.0)

    def tech_analysis(self) -> str:
        verdict = "Awesome" if self.calculate_score() > 7 else "Not so awesome"
        return f"Tech Analysis: {verdict}"

    def future_scenario(self) -> str:
        if (
            self.calculate_score() > 7
            and self.has_aliens
            and self.future_year > self.release_date.year
        ):
            return "Future is bright"
        return "Future is not so bright"

    def _details(self) -> str:
        return (
            f", Tech Level: {self._tech_level}, "
            f"Has Aliens: {'Yes' if self.has_aliens else 'No'}, Future Year: {self.future_year}"
        )