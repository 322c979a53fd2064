"""Animated movies."""

from __future__ import annotations

import math

from moviemanager.dates import Date
from moviemanager.movie import Movie
from moviemanager.people import Director

ANIMATION_STYLES = (1, 2, 3)
AGE_GROUPS = (5, 7, 18)


class AnimationMovie(Movie):
    """An animated movie with a style, target age group and musical flag."""

    def __init__(
        self,
        title: str = "",
        release_date: Date | None = None,
        rating: float = 0.0,
        animation_style: int = 1,
        age_group: int = 5,
        is_musical: bool = False,
        director: Director | None = None,
    ) -> None:
        super().__init__(title, release_date, rating, director)
        self._animation_style = animation_style if animation_style in ANIMATION_STYLES else 1
        self._age_group = age_group if age_group in AGE_GROUPS else 5
        self.is_musical = is_musical

    @property
    def genre(self) -> str:
        return "Animation"

    @property
    def animation_style(self) -> int:
        return self._animation_style

    @animation_style.setter
    def animation_style(self, style: int) -> None:
        if style in ANIMATION_STYLES:
            self._animation_style = style

    @property
    def age_group(self) -> int:
        return self._age_group

    @age_group.setter
    def age_group(self, group: int) -> None:
        if group in AGE_GROUPS:
            self._age_group = group

    def calculate_score(self) -> float:
        factor = self._age_group // self._animation_style
        return math.fmod(self.rating * self.days_since_release() * factor, 10.0)

    def suggest_merchandise(self) -> str:
        if self._animation_style in (2, 3):
            return "Merchandise: Cool"
        return "Merchandise: Not cool"

    def is_family_friendly(self) -> bool:
        return (
            (self._age_group == 18 and self.is_musical)
            or (self._age_group in (5, 7) and not self.is_musical)
            or self._animation_style == 3
        )

    def _details(self) -> str:
        return (
            f", Animation Style: {self._animation_style}, Age Group: {self._age_group}, "
            f"Is Musical: {'Yes' if self.is_musical else 'No'}"
        )