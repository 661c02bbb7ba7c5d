import numpy as np

from accrete.accretion.bombardment import (
    bombard,
    capture_probability,
    closest_planet,
    impact,
)
from accrete.base.planet import Planet
from accrete.events import EventLog


def make_planets():
    return [
        Planet(0.7, 0.01, 2.4e-6),
        Planet(1.0, 0.02, 3.0e-6),
        Planet(5.2, 0.05, 9.5e-4, is_gas_giant=True),
    ]


def test_capture_probability_falls_with_target_mass():
    assert capture_probability(1e-12, 1e-6) > capture_probability(1e-12, 1e-3)
    assert 0 < capture_probability(1e-10, 1e-3) < 1


def test_closest_planet():
    planets = make_planets()
    assert closest_planet(planets, 0.1) == 0
    assert closest_planet(planets, 1.2) == 1
    assert closest_planet(planets, 100.0) == 2


def test_impact_capture():
    target = Planet(1.0, 0.0, 3e-6)
    assert impact(target, 1e-10, 0.0, 0.5)
    assert target.mass == 3e-6
    moon = target.moons[0]
    assert moon.is_moon
    assert moon.mass == 1e-10
    assert 0 < moon.a < 1.0


def test_impact_absorbed():
    target = Planet(1.0, 0.0, 3e-6)
    assert not impact(target, 1e-10, 0.999, 0.5)
    assert target.mass == 3e-6 + 1e-10
    assert target.has_collision
    assert not target.moons


def test_zero_intensity_is_noop(rng):
    planets = make_planets()
    state = rng.bit_generator.state
    assert bombard(planets, 0, rng, (0.0, 200.0)) == 0
    assert rng.bit_generator.state == state
    assert [p.mass for p in planets] == [p.mass for p in make_planets()]


def test_bombardment_never_removes_or_shrinks(rng):
    planets = make_planets()
    before = [(id(p), p.a, p.mass) for p in planets]
    bombard(planets, 500, rng, (0.0, 10.0))
    after = [(id(p), p.a, p.mass) for p in planets]
    assert len(after) == len(before)
    for (id0, a0, m0), (id1, a1, m1) in zip(before, after):
        assert id0 == id1
        assert a0 == a1
        assert m1 >= m0
    assert sum(len(p.moons) for p in planets) > 0


def test_bombardment_without_planets_consumes_draws():
    rng = np.random.default_rng(5)
    assert bombard([], 3, rng, (0.0, 200.0)) == 0

    reference = np.random.default_rng(5)
    for _ in range(3):
        reference.uniform()
        reference.uniform()
        reference.random()
        reference.random()
    assert rng.random() == reference.random()


def test_bombardment_events(rng):
    events = EventLog(enabled=True)
    bombard(make_planets(), 10, rng, (0.0, 10.0), events=events)
    names = events.names()
    assert names[0] == "post_accretion_started"
    assert names.count("outer_body_injected") == 10


class ZeroRng:
    """Generator stand-in whose uniform draws sit at the lower bound"""

    def uniform(self, low, high):
        return low

    def random(self):
        return 0.0


def test_captured_moon_orbit_is_positive():
    planets = make_planets()
    assert bombard(planets, 1, ZeroRng(), (0.0, 10.0)) == 1
    moon = planets[0].moons[0]
    assert moon.a > 0
