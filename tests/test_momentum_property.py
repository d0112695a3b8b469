import numpy as np
from hypothesis import given, settings, strategies as st

from orbitsandbox.analysis import total_momentum
from orbitsandbox.collisions import find_overlaps, resolve_collisions
from orbitsandbox.physics import Body
from orbitsandbox.simulation import StepConfig, step

coords = st.floats(-50.0, 50.0, allow_nan=False, allow_infinity=False)
speeds = st.floats(-1e4, 1e4, allow_nan=False, allow_infinity=False)


@st.composite
def body_sets(draw, min_size=0, max_size=8):
    count = draw(st.integers(min_value=min_size, max_value=max_size))
    bodies = []
    for i in range(count):
        mass = draw(st.floats(1e20, 1e30, allow_nan=False, allow_infinity=False))
        radius = draw(st.floats(0.5, 20.0))
        pos = [draw(coords) for _ in range(3)]
        vel = [draw(speeds) for _ in range(3)]
        bodies.append(Body(mass, pos, vel, radius, body_id=f"b{i}"))
    return bodies


@given(body_sets())
@settings(max_examples=50, deadline=None)
def test_no_overlap_after_resolution(bodies):
    result = resolve_collisions(bodies)
    assert find_overlaps(result) == []
    for i, a in enumerate(result):
        for b in result[i + 1:]:
            assert np.linalg.norm(a.pos - b.pos) >= a.radius + b.radius


@given(body_sets())
@settings(max_examples=50, deadline=None)
def test_resolution_conserves_mass_and_momentum(bodies):
    mass_before = sum(b.mass for b in bodies)
    p_before = total_momentum(bodies)
    result = resolve_collisions([b.copy() for b in bodies])
    mass_after = sum(b.mass for b in result)
    assert np.isclose(mass_after, mass_before, rtol=1e-12)
    scale = max(sum(b.mass * np.abs(b.vel).max() for b in bodies), 1.0)
    assert np.allclose(total_momentum(result), p_before, rtol=1e-9, atol=1e-9 * scale)


@given(
    st.floats(1e20, 1e30),
    st.floats(1e20, 1e30),
    st.floats(0.5, 20.0),
    st.floats(0.5, 20.0),
)
@settings(max_examples=50, deadline=None)
def test_pair_merge_is_exact_in_mass(mass_a, mass_b, radius_a, radius_b):
    a = Body(mass_a, [0.0, 0.0, 0.0], [1.0, 0.0, 0.0], radius_a)
    b = Body(mass_b, [0.1, 0.0, 0.0], [0.0, 2.0, 0.0], radius_b)
    (merged,) = resolve_collisions([a, b])
    assert merged.mass == mass_a + mass_b
    assert np.isclose(merged.radius, np.cbrt(radius_a ** 3 + radius_b ** 3))
    expected_vel = (np.array([1.0, 0.0, 0.0]) * mass_a + np.array([0.0, 2.0, 0.0]) * mass_b) / (mass_a + mass_b)
    assert np.allclose(merged.vel, expected_vel)


@given(body_sets(min_size=2, max_size=4))
@settings(max_examples=25, deadline=None)
def test_step_keeps_ids_unique_and_mass_positive(bodies):
    result = step(bodies, 86400.0, StepConfig(collisions_enabled=True))
    ids = [b.id for b in result]
    assert len(ids) == len(set(ids))
    assert all(b.mass > 0 and b.radius > 0 for b in result)
    assert len(result) <= len(bodies)
