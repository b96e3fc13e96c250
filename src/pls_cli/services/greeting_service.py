"""Greeting text shown at the top of a full ``pls`` run."""

from __future__ import annotations

import random
from datetime import datetime
from email.utils import format_datetime

SALUTATIONS = ["Hello", "Howdy", "Greetings", "What's up", "Salutations"]


def time_of_day_greeting(hour: int) -> str:
    if 5 <= hour <= 12:
        return "good morning"
    if 13 <= hour <= 17:
        return "good afternoon"
    return "good evening"


def build_greeting(
    name: str | None,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> str:
    """Build e.g. ``"Howdy, good morning, Sam! It is Mon, 19 Oct 2026 09:00:00 +0200"``."""
    if now is None:
        now = datetime.now().astimezone()
    salutation = (rng or random).choice(SALUTATIONS)
    parts = [salutation, time_of_day_greeting(now.hour)]
    if name:
        parts.append(name)
    return f"{', '.join(parts)}! It is {format_datetime(now)}"
