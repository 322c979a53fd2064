import pytest

from moviemanager.dates import Date, days_since
from moviemanager.movie import REFERENCE_DATE, Movie
from moviemanager.people import Director, Name


class _PlainMovie(Movie):
    @property
    def genre(self):
        return "Plain"

    def calculate_score(self):
        return self.rating

    def _details(self):
        return ", Extra: none"


def test_movie_is_abstract():
    with pytest.raises(TypeError):
        Movie()


def test_defaults():
    movie = _PlainMovie()
    assert movie.title == ""
    assert movie.release_date == Date(1, 1, 2000)
    assert movie.rating == 0.0
    assert movie.director is None
    assert movie.release_year == 2000


def test_describe_without_director():
    movie = _PlainMovie("Heat", Date(15, 12, 1995), 8.5)
    assert movie.describe() == (
        "Genre: Plain, Title: Heat, Release Date: 15/12/1995, Rating: 8.5, Extra: none"
    )


def test_describe_with_director_repeats_label():
    director = Director(Name("Jane", "Doe"), 10, "British")
    movie = _PlainMovie("Heat", Date(15, 12, 1995), 7, director)
    assert movie.describe() == (
        "Genre: Plain, Title: Heat, Release Date: 15/12/1995, Rating: 7, "
        "Director: Director: Jane Doe, Experience: 10 years, Nationality: British"
        ", Extra: none"
    )


def test_display_prints_line(capsys):
    movie = _PlainMovie("Heat", Date(15, 12, 1995), 8.5)
    movie.display()
    assert capsys.readouterr().out == movie.describe() + "\n"


def test_days_since_release_uses_reference_date():
    release = Date(31, 12, 2024)
    movie = _PlainMovie("X", release, 1.0)
    assert movie.days_since_release() == days_since(release, REFERENCE_DATE)
    assert movie.days_since_release() == 544


def test_future_release_has_no_days():
    movie = _PlainMovie("X", Date(1, 1, 2030), 1.0)
    assert movie.days_since_release() == 0


def test_release_date_can_be_replaced():
    movie = _PlainMovie()
    before = movie.days_since_release()
    movie.release_date = Date(2, 3, 2004)
    assert movie.release_year == 2004
    assert "Release Date: 2/3/2004" in movie.describe()
    after = movie.days_since_release()
    assert after == days_since(Date(2, 3, 2004), REFERENCE_DATE)
    assert after < before