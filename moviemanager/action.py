"""Action movies."""

from __future__ import annotations

import math

from moviemanager.dates import Date
from moviemanager.movie import Movie
from moviemanager.people import Director

VIOLENCE_LEVELS = ("D", "M", "U")


class ActionMovie(Movie):
    """An action movie with violence level, fight scenes and stunts."""

    def __init__(
        self,
        title: str = "",
        release_date: Date | None = None,
        rating: float = 0.0,
        violence_level: str = "U",
        fight_scenes: int = 0,
        has_stunts: bool = False,
        director: Director | None = None,
    ) -> None:
        super().__init__(title, release_date, rating, director)
        self._violence_level = violence_level if violence_level in VIOLENCE_LEVELS else "U"
        self.fight_scenes = fight_scenes
        self.has_stunts = has_stunts

    @property
    def genre(self) -> str:
        return "Action"

    @property
    def violence_level(self) -> str:
        return self._violence_level

    @violence_level.setter
    def violence_level(self, level: str) -> None:
        # Unknown levels are ignored and the current one kept.
        if level in VIOLENCE_LEVELS:
            self._violence_level = level

    def count_explosions(self) -> int:
        return 8 if self.fight_scenes > 5 else 2

    def calculate_score(self) -> float:
        multiplier = 2 if self.fight_scenes > 7 else self.fight_scenes
        value = self.rating * self.days_since_release() * multiplier / self.count_explosions()
        return math.fmod(value, 10.0)

    def censorship_assessment(self) -> str:
        if self._violence_level == "D":
            return "violence"
        if self._violence_level == "M":
            return "Mafia"
        return "Ultra Cool"

    def stunt_coordinator_report(self) -> str:
        if self.has_stunts and 5 <= self.fight_scenes <= 10:
            return "Very cool"
        return "Might be boring"

    def _details(self) -> str:
        return (
            f", Violence Level: {self._violence_level}, Fight Scenes: {self.fight_scenes}, "
            f"Has Stunts: {'Yes' if self.has_stunts else 'No'}"
        )