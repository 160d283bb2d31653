from __future__ import annotations

import random

import pytest

from neon_pong.config import MatchConfig, PongConfig
from neon_pong.engine import Match, MatchContext


class FakeClock:
    """Millisecond clock moved by hand."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float):
        self.now += ms


def _place_ball(ball, x, y, vx, vy):
    ball.position.x = x
    ball.position.y = y
    ball.velocity.vx = vx
    ball.velocity.vy = vy


@pytest.fixture
def place_ball():
    """Put the ball somewhere with a given velocity."""
    return _place_ball


@pytest.fixture
def make_clock():
    """Factory for hand-driven millisecond clocks."""
    return FakeClock


@pytest.fixture
def clock(make_clock):
    return make_clock(1000.0)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def context(rng, clock):
    return MatchContext.create(rng=rng, clock=clock)


@pytest.fixture
def match(context):
    return Match(context)


@pytest.fixture
def playing(match):
    match.start()
    return match


@pytest.fixture
def make_match(make_clock):
    """Factory for seeded matches with custom rules, waiting in start."""

    def factory(win_score=5, auto_start=False, seed=1):
        config = PongConfig(
            match=MatchConfig(
                win_score=win_score, auto_start_on_restart=auto_start
            )
        )
        context = MatchContext.create(
            config, rng=random.Random(seed), clock=make_clock()
        )
        return Match(context)

    return factory
