import pytest

from springline.core.physics import ControlPoint, DEFAULT_SPRING_CONSTANT, DEFAULT_DAMPING


def test_defaults():
    cp = ControlPoint.at(3.0, 4.0)
    assert cp.position == (3.0, 4.0)
    assert cp.target == (3.0, 4.0)
    assert cp.velocity == (0.0, 0.0)
    assert cp.spring_constant == DEFAULT_SPRING_CONSTANT == 0.15
    assert cp.damping == DEFAULT_DAMPING == 0.85


def test_at_rest_on_target_stays_put():
    cp = ControlPoint.at(10.0, -5.0)
    for _ in range(20):
        cp.step(1.0)
    assert cp.position == (10.0, -5.0)
    assert cp.velocity == (0.0, 0.0)


def test_first_step_by_hand():
    cp = ControlPoint.at(0.0, 0.0)
    cp.set_target(100.0, 100.0)
    cp.step(1.0)
    # a = 0.15 * 100 = 15, v = 15 * 0.85, x = v
    assert cp.velocity[0] == pytest.approx(12.75)
    assert cp.velocity[1] == pytest.approx(12.75)
    assert cp.position[0] == pytest.approx(12.75)
    assert cp.position[1] == pytest.approx(12.75)


def test_second_step_applies_both_damping_terms():
    cp = ControlPoint.at(0.0, 0.0)
    cp.set_target(100.0, 0.0)
    cp.step(1.0)
    cp.step(1.0)
    v1 = 12.75
    x1 = 12.75
    a = -0.15 * (x1 - 100.0) - 0.85 * v1 * 0.1
    v2 = (v1 + a) * 0.85
    assert cp.velocity[0] == pytest.approx(v2)
    assert cp.position[0] == pytest.approx(x1 + v2)
    assert cp.position[1] == 0.0


def test_settles_on_target():
    cp = ControlPoint.at(0.0, 0.0)
    cp.set_target(100.0, 100.0)
    for _ in range(500):
        cp.step(1.0)
    assert cp.position[0] == pytest.approx(100.0, abs=0.01)
    assert cp.position[1] == pytest.approx(100.0, abs=0.01)
    assert cp.velocity[0] == pytest.approx(0.0, abs=1e-3)
    assert cp.velocity[1] == pytest.approx(0.0, abs=1e-3)


def test_set_target_waits_for_next_step():
    cp = ControlPoint.at(1.0, 2.0)
    cp.set_target(50.0, 60.0)
    assert cp.position == (1.0, 2.0)
    assert cp.velocity == (0.0, 0.0)
    assert cp.target == (50.0, 60.0)


def test_repeated_set_target_is_idempotent():
    once = ControlPoint.at(0.0, 0.0)
    many = ControlPoint.at(0.0, 0.0)
    once.set_target(30.0, -40.0)
    for _ in range(60):
        for _ in range(3):
            many.set_target(30.0, -40.0)
        once.step(1.0)
        many.step(1.0)
        assert once.position == many.position
        assert once.velocity == many.velocity


def test_zero_dt_keeps_position():
    cp = ControlPoint.at(0.0, 0.0)
    cp.set_target(10.0, 10.0)
    cp.step(1.0)
    before = cp.position
    cp.step(0.0)
    assert cp.position == before


def test_zero_damping_kills_velocity():
    cp = ControlPoint.at(0.0, 0.0, damping=0.0)
    cp.set_target(100.0, 0.0)
    cp.step(1.0)
    assert cp.velocity == (0.0, 0.0)
    assert cp.position == (0.0, 0.0)


def test_constants_are_per_instance():
    stiff = ControlPoint.at(0.0, 0.0, spring_constant=0.5)
    soft = ControlPoint.at(0.0, 0.0)
    stiff.set_target(100.0, 0.0)
    soft.set_target(100.0, 0.0)
    stiff.step(1.0)
    soft.step(1.0)
    assert stiff.position[0] > soft.position[0]
    assert soft.spring_constant == 0.15


def test_reset_returns_home_at_rest():
    cp = ControlPoint.at(5.0, 5.0)
    cp.set_target(100.0, 100.0)
    for _ in range(10):
        cp.step(1.0)
    cp.reset()
    assert cp.position == (5.0, 5.0)
    assert cp.target == (5.0, 5.0)
    assert cp.velocity == (0.0, 0.0)

    cp.reset((7.0, 8.0))
    assert cp.position == (7.0, 8.0)
    assert cp.target == (7.0, 8.0)
