# moviemanager

A small library for keeping details about films and their directors, with
genre-specific scoring and reports for action, animation and sci-fi movies.

## Installation

```
pip install .
```

## Overview

- `moviemanager.dates`: the `Date` dataclass (`day`, `month`, `year`,
  printed as `day/month/year`) and the calendar helpers `is_leap_year`,
  `days_in_month` and `days_since`.
- `moviemanager.people`: the `Name` and `Director` dataclasses.
  `Director.update` replaces every detail at once, and `Director.describe`
  returns a line such as
  `Director: Jane Doe, Experience: 12 years, Nationality: Canadian`.
- `moviemanager.movie`: the abstract `Movie` base class, with `title`,
  `release_date`, `rating`, `director`, `genre`, `release_year`,
  `days_since_release`, `describe`, `display` and `calculate_score`.
- `moviemanager.action`: `ActionMovie`, with `violence_level`,
  `fight_scenes`, `has_stunts`, `count_explosions`, `censorship_assessment`
  and `stunt_coordinator_report`.
- `moviemanager.animation`: `AnimationMovie`, with `animation_style`,
  `age_group`, `is_musical`, `suggest_merchandise` and `is_family_friendly`.
- `moviemanager.scifi`: `SciFiMovie`, with `tech_level`, `has_aliens`,
  `future_year`, `tech_analysis` and `future_scenario`.

Days since release are counted up to a fixed reference date, 27/6/2025
(`moviemanager.movie.REFERENCE_DATE`), so scores do not change from day to
day. A release date after that day counts as zero days. Each genre's
`calculate_score` takes its result modulo 10.

The `display` methods write the same text that `describe` returns to
standard output. `Movie.display` ends the line; `Date.display`,
`Name.display` and `Director.display` do not, and also return the text.

## Example

```python
from moviemanager.action import ActionMovie
from moviemanager.dates import Date
from moviemanager.people import Director, Name

movie = ActionMovie("Heist", Date(1, 1, 2020), 8.0, fight_scenes=6, has_stunts=True)
movie.director = Director(Name("Jane", "Doe"), 12, "Canadian")

print(movie.describe())
print(movie.days_since_release())
print(movie.calculate_score())
print(movie.stunt_coordinator_report())
```

## Checked fields

Each genre checks its own fields, both when the movie is created and when
the field is set later:

- A violence level other than `D`, `M` or `U` becomes `U` on creation;
  setting one later is ignored and the old level kept.
- An animation style outside 1–3 becomes 1 and an age group other than 5, 7
  or 18 becomes 5 on creation; setting one later is ignored.
- A tech level outside 1–3 becomes 1 on creation; setting one later is
  ignored.

## What it does not do

The package models single movies and directors only. It has no command,
no interactive menu, no collection that holds a catalogue, and no storage;
adding, searching and sorting movies across a catalogue are left to the
code that uses it.

## Running the tests

```
pip install ".[test]"
pytest
```