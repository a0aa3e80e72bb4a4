import pytest

from grapple2d.avatar import Avatar, AvatarState
from grapple2d.collisions import CollisionResolver
from grapple2d.integrators import DampedEulerIntegrator
from grapple2d.level import Level
from grapple2d.primitives import Vector2


@pytest.fixture
def ledge_level():
    level = Level(800)
    level.add_platform(0, 100, 200, 12)
    return level


def test_radius_must_be_positive():
    with pytest.raises(ValueError):
        Avatar(Vector2(), radius=0)


def test_aim_points_arm_at_pointer():
    avatar = Avatar(Vector2(0, 0))
    avatar.aim(Vector2(0, 10))
    assert avatar.arm_direction().y == pytest.approx(1)
    assert avatar.arm_base().y == pytest.approx(24)


def test_latch_onto_platform_under_tip(ledge_level):
    avatar = Avatar(Vector2(50, 50))
    pointer = Vector2(50, 105)
    avatar.aim(pointer)

    assert avatar.try_latch(ledge_level, pointer)

    assert avatar.state is AvatarState.LATCHED
    assert avatar.anchor.x == pytest.approx(50)
    assert avatar.anchor.y == pytest.approx(105)
    assert avatar.rope_length == pytest.approx(31)
    assert avatar.tether.just_latched


def test_latch_misses_empty_space(ledge_level):
    avatar = Avatar(Vector2(50, 50))
    pointer = Vector2(50, 0)
    avatar.aim(pointer)

    assert not avatar.try_latch(ledge_level, pointer)
    assert avatar.state is AvatarState.FREE
    assert avatar.anchor is None


def test_latch_out_of_reach_misses():
    level = Level(800)
    level.add_platform(0, 300, 200, 12)
    avatar = Avatar(Vector2(50, 50))
    pointer = Vector2(50, 305)
    avatar.aim(pointer)

    assert not avatar.try_latch(level, pointer)


def test_latch_while_latched_changes_nothing(ledge_level):
    avatar = Avatar(Vector2(50, 50))
    pointer = Vector2(50, 105)
    avatar.aim(pointer)
    avatar.try_latch(ledge_level, pointer)
    avatar.tether.just_latched = False
    before = avatar.tether.get_constraint_info()

    avatar.position = Vector2(20, 20)
    assert not avatar.try_latch(ledge_level, Vector2(150, 110))

    assert avatar.tether.get_constraint_info() == before


def test_release_then_relatch_reproduces_anchor(ledge_level):
    avatar = Avatar(Vector2(50, 50))
    pointer = Vector2(80, 106)
    avatar.aim(pointer)
    avatar.try_latch(ledge_level, pointer)
    first_anchor = avatar.anchor

    avatar.release()
    assert avatar.state is AvatarState.FREE
    assert avatar.try_latch(ledge_level, pointer)

    assert avatar.anchor.x == pytest.approx(first_anchor.x)
    assert avatar.anchor.y == pytest.approx(first_anchor.y)


def test_free_update_applies_gravity_then_friction():
    level = Level(800)
    level.add_platform(0, 1000, 800, 12)
    avatar = Avatar(Vector2(100, 0))

    avatar.update(Vector2(100, -50), False, level, DampedEulerIntegrator(), CollisionResolver())

    assert avatar.velocity.x == pytest.approx(0)
    assert avatar.velocity.y == pytest.approx(0.392)
    assert avatar.position.y == pytest.approx(0.392)


def test_resting_avatar_stays_on_platform(ledge_level):
    avatar = Avatar(Vector2(100, 76))
    integrator, resolver = DampedEulerIntegrator(), CollisionResolver()

    for _ in range(10):
        avatar.update(Vector2(300, 0), False, ledge_level, integrator, resolver)

    assert avatar.position.y == pytest.approx(76)
    assert avatar.velocity.y == 0


def test_reeling_in_only_while_pointer_held(ledge_level):
    avatar = Avatar(Vector2(50, 10))
    pointer = Vector2(50, 105)
    avatar.aim(pointer)
    avatar.try_latch(ledge_level, pointer)
    start = avatar.rope_length
    integrator, resolver = DampedEulerIntegrator(), CollisionResolver()

    avatar.update(pointer, False, ledge_level, integrator, resolver)
    assert avatar.rope_length == start

    avatar.update(pointer, True, ledge_level, integrator, resolver)
    assert avatar.rope_length < start
    assert 6 <= avatar.rope_length <= 120


def test_reset_returns_to_spawn_unlatched(ledge_level):
    avatar = Avatar(Vector2(50, 50))
    pointer = Vector2(50, 105)
    avatar.aim(pointer)
    avatar.try_latch(ledge_level, pointer)
    avatar.velocity = Vector2(5, 5)

    avatar.reset(Vector2(1, 2))

    assert avatar.position == Vector2(1, 2)
    assert avatar.velocity == Vector2()
    assert avatar.state is AvatarState.FREE
