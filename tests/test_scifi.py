import pytest

from moviemanager.dates import Date
from moviemanager.scifi import SciFiMovie

PAST = Date(31, 12, 2024)


def test_invalid_tech_level_falls_back():
    assert SciFiMovie(tech_level=7).tech_level == 1


def test_tech_level_setter_ignores_invalid():
    movie = SciFiMovie(tech_level=2)
    movie.tech_level = 4
    assert movie.tech_level == 2
    movie.tech_level = 3
    assert movie.tech_level == 3


def test_score_scales_with_tech_level():
    strong = SciFiMovie("A", PAST, 1.0, tech_level=3).calculate_score()
    rated = SciFiMovie("B", PAST, 3.0, tech_level=1).calculate_score()
    assert strong == pytest.approx(rated)


def test_worked_example_score():
    assert SciFiMovie("A", PAST, 1.0, tech_level=2).calculate_score() == pytest.approx(8.0)


def test_future_release_is_not_awesome():
    movie = SciFiMovie("X", Date(1, 1, 2030), 9.0, 3, True, 3000)
    assert movie.calculate_score() == 0.0
    assert movie.tech_analysis() == "Tech Analysis: Not so awesome"
    assert movie.future_scenario() == "Future is not so bright"


def test_high_score_is_awesome_and_bright():
    movie = SciFiMovie("A", PAST, 1.0, tech_level=2, has_aliens=True, future_year=2100)
    assert movie.tech_analysis() == "Tech Analysis: Awesome"
    assert movie.future_scenario() == "Future is bright"


def test_future_needs_aliens_and_later_year():
    no_aliens = SciFiMovie("A", PAST, 1.0, tech_level=2, has_aliens=False, future_year=2100)
    past_year = SciFiMovie("B", PAST, 1.0, tech_level=2, has_aliens=True, future_year=2024)
    assert no_aliens.future_scenario() == "Future is not so bright"
    assert past_year.future_scenario() == "Future is not so bright"


def test_describe():
    movie = SciFiMovie("Alien", Date(25, 5, 1979), 8.5, 2, True, 2122)
    assert movie.describe() == (
        "Genre: SciFi, Title: Alien, Release Date: 25/5/1979, Rating: 8.5, "
        "Tech Level: 2, Has Aliens: Yes, Future Year: 2122"
    )
    assert movie.genre == "SciFi"