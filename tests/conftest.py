"""Pytest configuration and fixtures for glidequery tests."""

from datetime import datetime, timedelta, timezone

import pytest
from dotenv import load_dotenv

from glidequery.querydsl.builder import QueryBuilder

# Load environment variables
load_dotenv()


@pytest.fixture
def builder():
    """A fresh, empty query builder."""
    return QueryBuilder()


@pytest.fixture(scope="session")
def ist_datetime():
    """2020-01-01 17:42:12.345 at +05:30, i.e. 12:12:12 UTC."""
    return datetime(2020, 1, 1, 17, 42, 12, 345000, tzinfo=timezone(timedelta(hours=5, minutes=30)))
