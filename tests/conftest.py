"""
Shared Test Configuration and Fixtures

Sample record lists used across the filter, descriptor and entity list
tests: plain dictionaries as they come from UI state, and the Movie and
Category record types.
"""

import logging
import pytest

from gridfilter.core.config.models import FilterConfig
from gridfilter.records import Category, Movie


@pytest.fixture
def scenario_records():
    """The two-record list used in the documented usage scenarios."""
    return [
        {"name": "X", "year": 2000, "rate": 5},
        {"name": "Y", "year": 2010, "rate": 8},
    ]


@pytest.fixture
def movie_dicts():
    """A larger list of movie-like dictionaries."""
    return [
        {"name": "Alien", "year": 1979, "rate": 8.5, "genre": "sci-fi", "awards": ["Oscar"]},
        {"name": "Heat", "year": 1995, "rate": 8.3, "genre": "crime", "awards": []},
        {"name": "Up", "year": 2009, "rate": 8.3, "genre": "animation", "awards": ["Oscar", "BAFTA"]},
        {"name": "Tenet", "year": 2020, "rate": 7.3, "genre": "sci-fi", "awards": ["Oscar"]},
        {"name": "Jaws", "year": 1975, "rate": 8.1, "genre": "thriller", "awards": ["Oscar"]},
        {"name": "Arrival", "year": 2016, "rate": 7.9, "genre": "sci-fi", "awards": []},
    ]


@pytest.fixture
def movies():
    """Movie records."""
    return [
        Movie(name="Alien", year=1979, rate=8.5, awards=["Oscar"]),
        Movie(name="Heat", year=1995, rate=8.3),
        Movie(name="Up", year=2009, rate=8.3, awards=["Oscar", "BAFTA"]),
        Movie(name="Tenet", year=2020, rate=7.3, awards=["Oscar"]),
    ]


@pytest.fixture
def categories(movies):
    """Category records grouping the movie fixtures."""
    return [
        Category(name="Classics", movies=movies[:2]),
        Category(name="Modern", movies=movies[2:]),
        Category(name="Empty"),
    ]


@pytest.fixture
def permissive_config():
    """Filter configuration reproducing the lenient grid behaviour."""
    return FilterConfig(strict_kinds=False, validate_fields=False)


@pytest.fixture
def caplog_debug(caplog):
    """Capture gridfilter debug logging."""
    caplog.set_level(logging.DEBUG, logger="gridfilter")
    return caplog
