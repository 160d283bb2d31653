import random

from neon_pong.config import AiConfig
from neon_pong.controllers.cpu import CpuPaddleController

HEIGHT = 600.0


def make_cpu(context, **overrides):
    return CpuPaddleController(
        context.ai,
        context.ball,
        config=AiConfig(**overrides),
        rng=random.Random(42),
    )


def test_receding_ball_sends_target_to_centre(context, place_ball):
    cpu = make_cpu(context)
    place_ball(context.ball, 450, 100, -5, 0)
    cpu.state.target_y = 50

    for now in (0, 10, 500, 501):
        cpu.update_target(now, HEIGHT)
        assert cpu.state.target_y == HEIGHT / 2

    assert cpu.state.last_reaction_ms is None


def test_first_look_samples_with_bounded_error(context, place_ball):
    cpu = make_cpu(context)
    place_ball(context.ball, 450, 120, 5, 0)

    cpu.update_target(1000, HEIGHT)

    assert cpu.state.last_reaction_ms == 1000
    assert -17.5 <= cpu.state.prediction_offset <= 17.5
    assert cpu.state.target_y == 120 + cpu.state.prediction_offset


def test_reaction_delay_limits_resampling(context, place_ball):
    cpu = make_cpu(context)
    ball = context.ball
    place_ball(ball, 450, 120, 5, 0)

    cpu.update_target(1000, HEIGHT)
    first = cpu.state.target_y

    ball.position.y = 400
    cpu.update_target(1100, HEIGHT)
    cpu.update_target(1149, HEIGHT)
    assert cpu.state.target_y == first
    assert cpu.state.last_reaction_ms == 1000

    cpu.update_target(1150, HEIGHT)
    assert cpu.state.last_reaction_ms == 1150
    assert abs(cpu.state.target_y - 400) <= 17.5


def test_zero_error_margin_aims_exactly(context, place_ball):
    cpu = make_cpu(context, error_margin=0.0)
    place_ball(context.ball, 450, 222, 5, 0)

    cpu.update_target(0, HEIGHT)

    assert cpu.state.target_y == 222


def test_dead_zone_holds_position(context, place_ball):
    cpu = make_cpu(context)
    paddle = context.ai
    start_y = paddle.position.y
    place_ball(context.ball, 450, 300, -5, 0)
    cpu.state.target_y = paddle.center_y + 40

    assert cpu.compute_move() == 0.0
    cpu.update(0, HEIGHT)
    assert paddle.position.y == start_y


def test_moves_towards_target_at_ai_speed(context, place_ball):
    cpu = make_cpu(context, error_margin=0.0)
    paddle = context.ai
    start_y = paddle.position.y
    place_ball(context.ball, 450, 550, 5, 0)

    cpu.update(0, HEIGHT)

    assert paddle.position.y == start_y + paddle.speed
    assert paddle.speed < context.player.speed


def test_moves_up_when_target_above(context, place_ball):
    cpu = make_cpu(context, error_margin=0.0)
    paddle = context.ai
    start_y = paddle.position.y
    place_ball(context.ball, 450, 50, 5, 0)

    cpu.update(0, HEIGHT)

    assert paddle.position.y == start_y - paddle.speed


def test_paddle_is_clamped_to_court(context, place_ball):
    cpu = make_cpu(context, error_margin=0.0)
    paddle = context.ai
    paddle.position.y = HEIGHT - paddle.size.height - 1
    place_ball(context.ball, 450, 599, 5, 0)

    cpu.update(0, HEIGHT)

    assert paddle.position.y == HEIGHT - paddle.size.height


def test_reset_forgets_last_sample(context, place_ball):
    cpu = make_cpu(context)
    place_ball(context.ball, 450, 120, 5, 0)
    cpu.update_target(1000, HEIGHT)

    cpu.reset(HEIGHT)

    assert cpu.state.last_reaction_ms is None
    assert cpu.state.target_y == HEIGHT / 2
