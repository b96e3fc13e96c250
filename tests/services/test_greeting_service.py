"""Tests for the greeting builder."""

import random
from datetime import datetime, timedelta, timezone

import pytest

from pls_cli.services.greeting_service import (
    SALUTATIONS,
    build_greeting,
    time_of_day_greeting,
)

WHEN = datetime(2026, 10, 19, 9, 30, tzinfo=timezone(timedelta(hours=2)))


@pytest.mark.parametrize(
    "hour, expected",
    [
        (5, "good morning"),
        (12, "good morning"),
        (13, "good afternoon"),
        (17, "good afternoon"),
        (18, "good evening"),
        (0, "good evening"),
        (4, "good evening"),
    ],
)
def test_time_of_day(hour, expected):
    assert time_of_day_greeting(hour) == expected


def test_greeting_with_name():
    greeting = build_greeting("Sam", now=WHEN, rng=random.Random(1))

    salutation = greeting.split(",")[0]
    assert salutation in SALUTATIONS
    assert ", good morning, Sam! It is Mon, 19 Oct 2026 09:30:00 +0200" in greeting


def test_greeting_without_name():
    greeting = build_greeting(None, now=WHEN, rng=random.Random(1))

    assert ", good morning! It is " in greeting
