"""Values shown on the racing HUD and the end-of-game credits."""

from __future__ import annotations

import math

# How long a checkpoint split time stays fully visible, then how long it fades.
_SPLIT_HOLD = 1.5
_SPLIT_FADE_END = 3.5

# Spacing between credit lines in text units.
_CREDIT_SPACING = 2.0
# Share of the splash timeout spent scrolling; the remainder zooms the text away.
_CREDIT_SCROLL_END = 0.9
_CREDIT_SCROLL_START = -10.0


def _range_adjust(value: float, a: float, b: float, c: float, d: float) -> float:
    """Map value linearly from the range [a, b] onto [c, d]."""
    return (value - a) / (b - a) * (d - c) + c


def course_time_display(finished: bool, coursetime: float, cptime: float) -> tuple[float, float]:
    """Return (time to show, opacity) for the race clock.

    After passing a checkpoint the split time is held, then fades out,
    before the running course time comes back.
    """
    if finished:
        return coursetime, 1.0
    if coursetime < cptime + _SPLIT_HOLD:
        return cptime, 1.0
    if coursetime < cptime + _SPLIT_FADE_END:
        return cptime, ((cptime + _SPLIT_FADE_END) - coursetime) / 2.0
    return coursetime, 1.0


def go_banner_alpha(coursetime: float) -> float | None:
    """Opacity of the "GO!" banner, or None once it has gone."""
    if coursetime < 1.0:
        return 1.0
    if coursetime < 2.0:
        return 1.0 - (coursetime - 1.0)
    return None


def countdown_size(othertime: float) -> float:
    """Scale of the countdown number; it grows during each second."""
    return math.fmod(othertime, 1.0) + 0.5


def counter_text(current: int, total: int, finished: bool) -> str:
    """Text of a checkpoint or lap counter such as "3/10"."""
    shown = total if finished else current
    return f"{shown}/{total}"


def gear_label(gear: int) -> str:
    """Label of the gear indicator: "R" in reverse, otherwise the 1-based gear."""
    return str(gear + 1) if gear >= 0 else "R"


def speed_label(mph: bool) -> str:
    """Unit label shown under the speedometer."""
    return "MPH" if mph else "km/h"


def credits_lines(version: str) -> list[str]:
    """Lines of the scrolling end credits."""
    return [
        f"Trigger Rally {version}",
        "",
        "Various Contributors",
        "(see DATA_AUTHORS.txt)",
        "",
        "",
        "",
        "Thanks for playing Trigger",
    ]


def credits_scroll(splashtimeout: float, count: int) -> float:
    """Scroll position of the credits for the given progress of the end screen."""
    maxscroll = (count - 1) * _CREDIT_SPACING
    scroll = _range_adjust(
        splashtimeout, 0.0, _CREDIT_SCROLL_END, _CREDIT_SCROLL_START, maxscroll
    )
    return min(scroll, maxscroll)


def credit_line_level(scroll: float, index: int, splashtimeout: float) -> tuple[float, float] | None:
    """Return (opacity, enlargement) of credit line `index`, or None if it is not drawn.

    Lines near the centre of the screen are opaque and fade with distance;
    at the very end of the screen every line grows and fades away.
    """
    distance = abs(scroll - index * _CREDIT_SPACING)
    level = _range_adjust(distance, 0.0, 9.0, 3.0, 0.0)
    if level <= 0.0:
        return None
    level = min(level, 1.0)
    enlarge = 1.0
    if splashtimeout > _CREDIT_SCROLL_END:
        amt = (splashtimeout - _CREDIT_SCROLL_END) * 10.0
        amt2 = amt * amt
        enlarge += amt2 / ((1.0001 - amt) * (1.0001 - amt))
        level -= amt2
    return level, enlarge