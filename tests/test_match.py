import math
import random

import pytest

from neon_pong.constants import PADDLE_INSET, PADDLE_SIZE, WINDOW_SIZE
from neon_pong.controllers.player import PaddleIntent
from neon_pong.engine import EventKind, MatchContext, MatchState


def test_new_match_waits_in_start(match):
    assert match.state is MatchState.START
    before = match.snapshot()

    assert match.tick() == []
    assert match.snapshot() == before


def test_invalid_transitions_are_noops(match):
    assert match.pause() is False
    assert match.resume() is False
    assert match.state is MatchState.START

    assert match.start() is True
    assert match.start() is False
    assert match.resume() is False
    assert match.state is MatchState.PLAYING


def test_start_serves_fresh_ball(match):
    match.start()
    ball = match.context.ball

    assert (ball.position.x, ball.position.y) == (450, 300)
    assert ball.speed == 5
    assert math.hypot(ball.velocity.vx, ball.velocity.vy) == pytest.approx(5)


def test_pause_freezes_everything(playing):
    ctx = playing.context
    for _ in range(5):
        playing.tick(PaddleIntent(move_up=True))
    ctx.particles.spawn(100, 100, 4)

    assert playing.pause() is True
    before = playing.snapshot()
    velocity = (ctx.ball.velocity.vx, ctx.ball.velocity.vy)

    for _ in range(10):
        assert playing.tick(PaddleIntent(move_down=True)) == []
    assert playing.pause() is False

    assert playing.snapshot() == before
    assert (ctx.ball.velocity.vx, ctx.ball.velocity.vy) == velocity
    assert playing.state is MatchState.PAUSED


def test_resume_keeps_state_and_trail(playing):
    for _ in range(3):
        playing.tick()
    playing.pause()
    before = playing.snapshot()

    assert playing.resume() is True
    assert playing.snapshot().ball == before.ball
    assert playing.resume() is False
    assert playing.state is MatchState.PLAYING


def test_player_paddle_follows_intent(playing):
    player = playing.context.player
    start_y = player.position.y

    playing.tick(PaddleIntent(move_up=True, move_down=True))
    assert player.position.y == start_y - player.speed

    playing.tick(PaddleIntent(move_down=True))
    assert player.position.y == start_y

    playing.tick(PaddleIntent(touch_y=10))
    assert player.position.y == 0


def test_ai_point_scenario(playing, place_ball):
    ctx = playing.context
    place_ball(ctx.ball, 5, 300, -3, 0)
    ctx.ball.speed = 8.0

    events = playing.tick()

    assert [e.kind for e in events] == [EventKind.AI_SCORED]
    assert (ctx.score.player, ctx.score.ai) == (0, 1)
    assert (ctx.ball.position.x, ctx.ball.position.y) == (450, 300)
    assert ctx.ball.speed == 5
    assert len(ctx.ball.trail) == 0
    assert playing.state is MatchState.PLAYING


def test_paddle_hit_spawns_particles(playing, place_ball):
    ctx = playing.context
    place_ball(ctx.ball, 60, 300, -5, 0)

    events = playing.tick()

    assert [e.kind for e in events] == [EventKind.PLAYER_HIT]
    assert len(ctx.particles) == 10


def test_wall_bounce_spawns_particles(playing, place_ball):
    ctx = playing.context
    place_ball(ctx.ball, 450, 15, -2, -5)

    events = playing.tick()

    assert [e.kind for e in events] == [EventKind.WALL_BOUNCE]
    assert len(ctx.particles) == 5


def test_player_win_ends_match_once(place_ball, make_match):
    match = make_match(win_score=5)
    match.start()
    ctx = match.context
    ctx.score.player = 4
    received = []
    match.events.subscribe(received.append)
    place_ball(ctx.ball, 895, 300, 3, 0)

    events = match.tick()

    assert [e.kind for e in events] == [
        EventKind.PLAYER_SCORED,
        EventKind.GAME_OVER,
    ]
    assert events[-1].winner == "player"
    assert [c.note for c in events[-1].cues] == ["C5", "E5", "G5"]
    assert [c.delay_ms for c in events[-1].cues] == [0, 100, 200]
    assert match.state is MatchState.GAME_OVER
    assert received == events

    frozen = match.snapshot()
    for _ in range(5):
        assert match.tick(PaddleIntent(move_up=True)) == []
    assert match.snapshot() == frozen
    assert frozen.winner == "player"
    assert (frozen.player_score, frozen.ai_score) == (5, 0)


def test_ai_win_fanfare(place_ball, make_match):
    match = make_match(win_score=1)
    match.start()
    place_ball(match.context.ball, 5, 300, -3, 0)

    events = match.tick()

    assert events[-1].kind is EventKind.GAME_OVER
    assert events[-1].winner == "ai"
    assert [c.note for c in events[-1].cues] == ["G4", "E4", "C4"]


def test_restart_clears_match(place_ball, make_match):
    match = make_match(win_score=1)
    match.start()
    ctx = match.context
    ctx.particles.spawn(10, 10, 3)
    ctx.player.position.y = 0
    ctx.ai.position.y = 500
    place_ball(ctx.ball, 895, 300, 3, 0)
    match.tick()
    assert match.state is MatchState.GAME_OVER

    assert match.restart() is True

    assert match.state is MatchState.START
    assert (ctx.score.player, ctx.score.ai) == (0, 0)
    assert ctx.winner is None
    assert ctx.player.position.y == 250
    assert ctx.ai.position.y == 250
    assert len(ctx.particles) == 0
    assert len(ctx.ball.trail) == 0
    assert match.start() is True


def test_restart_can_auto_start(make_match):
    match = make_match(auto_start=True)
    match.start()
    match.pause()

    match.restart()

    assert match.state is MatchState.PLAYING


def test_failing_listener_does_not_stop_tick(playing, place_ball):
    received = []

    def broken(_event):
        raise RuntimeError("audio device gone")

    playing.events.subscribe(broken)
    playing.events.subscribe(received.append)
    place_ball(playing.context.ball, 450, 15, -2, -5)

    events = playing.tick()

    assert [e.kind for e in events] == [EventKind.WALL_BOUNCE]
    assert received == events


def test_unsubscribe(playing, place_ball):
    received = []
    playing.events.subscribe(received.append)
    playing.events.unsubscribe(received.append)
    place_ball(playing.context.ball, 450, 15, -2, -5)

    playing.tick()

    assert received == []


def test_resize_scales_and_clamps(playing, place_ball):
    ctx = playing.context
    place_ball(ctx.ball, 450, 300, 5, 0)
    ctx.ai.position.y = 500

    playing.resize(1800, 1200)

    assert ctx.viewport == (1800.0, 1200.0)
    assert (ctx.ball.position.x, ctx.ball.position.y) == (900, 600)
    assert ctx.ai.position.x == 1800 - 30 - 15
    assert ctx.player.position.x == 30
    assert ctx.ai.position.y == 1000

    playing.resize(900, 150)
    assert ctx.ai.position.y == 150 - ctx.ai.size.height


def test_resize_ignores_invalid_size(playing):
    playing.resize(0, 600)
    assert playing.context.viewport == (900.0, 600.0)


def test_snapshot_contents(playing):
    ctx = playing.context
    playing.tick()
    ctx.particles.spawn(1, 2, 1)

    snap = playing.snapshot()

    assert snap.state == "playing"
    assert snap.player.x == 30
    assert snap.ai.x == 855
    assert snap.ball.radius == 12
    assert snap.ball.trail == tuple(ctx.ball.trail)
    assert snap.particles[0].opacity == 1.0


def test_invariants_hold_over_long_play(make_match):
    match = make_match(win_score=10_000, seed=2024)
    match.start()
    ctx = match.context
    clock = ctx.clock
    intents = random.Random(8)
    config = ctx.config.ball

    for _ in range(5000):
        before = ctx.ball.speed
        choice = intents.random()
        if choice < 0.3:
            intent = PaddleIntent(move_up=True)
        elif choice < 0.6:
            intent = PaddleIntent(move_down=True)
        elif choice < 0.65:
            intent = PaddleIntent(touch_y=intents.uniform(-100, 700))
        else:
            intent = PaddleIntent()

        clock.advance(16)
        events = match.tick(intent)
        scored = any(
            e.kind in (EventKind.PLAYER_SCORED, EventKind.AI_SCORED)
            for e in events
        )

        for paddle in (ctx.player, ctx.ai):
            assert 0 <= paddle.position.y <= 600 - paddle.size.height
        assert config.initial_speed <= ctx.ball.speed <= config.max_speed
        assert len(ctx.ball.trail) <= 10
        if scored:
            assert ctx.ball.speed == config.initial_speed
            assert (ctx.ball.position.x, ctx.ball.position.y) == (450, 300)
        else:
            assert ctx.ball.speed >= before


def test_fresh_ball_velocity_matches_its_speed():
    ctx = MatchContext.create()
    ball = ctx.ball

    assert math.hypot(ball.velocity.vx, ball.velocity.vy) == pytest.approx(
        ball.speed
    )
    assert ball.velocity.vy == 0.0


def test_paddles_use_window_constants():
    ctx = MatchContext.create()

    assert ctx.player.rect == (
        PADDLE_INSET,
        WINDOW_SIZE[1] / 2 - PADDLE_SIZE[1] / 2,
        *PADDLE_SIZE,
    )
    assert ctx.ai.position.x == WINDOW_SIZE[0] - PADDLE_INSET - PADDLE_SIZE[0]
