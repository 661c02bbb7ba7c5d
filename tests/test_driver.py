import numpy as np

from accrete.accretion.collision import zones_overlap
from accrete.accretion.driver import AccretionDriver, State
from accrete.base.disk import DustCloud
from accrete.config import build_config
from accrete.events import EventLog
from accrete.util.constants import MAX_ACCRETION_TRIALS


def run_driver(seed, config=None, events=None):
    config = config or build_config(1.0)
    cloud = DustCloud(config.stellar_mass, config.dust_density_coeff)
    driver = AccretionDriver(cloud, config, np.random.default_rng(seed), events)
    driver.run()
    return driver


def test_driver_terminates():
    driver = run_driver(42)
    assert driver.state is State.EXHAUSTED
    assert driver.trials <= MAX_ACCRETION_TRIALS
    assert len(driver.planets) > 0


def test_planets_sorted_and_separated():
    planets = run_driver(7).planets
    a_vals = [planet.a for planet in planets]
    assert a_vals == sorted(a_vals)
    for p1, p2 in zip(planets[:-1], planets[1:]):
        assert not zones_overlap(p1, p2)


def test_driver_is_deterministic():
    first = [(p.a, p.e, p.mass) for p in run_driver(3).planets]
    second = [(p.a, p.e, p.mass) for p in run_driver(3).planets]
    assert first == second


def test_planets_limit():
    config = build_config(1.0, {"planets_limit": 2})
    assert len(run_driver(42, config).planets) <= 2


def test_trial_orbit_in_bounds(rng):
    config = build_config(1.0)
    cloud = DustCloud(1.0, config.dust_density_coeff)
    driver = AccretionDriver(cloud, config, rng)
    for _ in range(100):
        a, e = driver.trial_orbit()
        assert driver.innermost <= a <= driver.outermost
        assert 0 <= e < 1


def test_zero_cloud_eccentricity_gives_circular_trials(rng):
    config = build_config(1.0, {"cloud_eccentricity": 0.0})
    driver = AccretionDriver(DustCloud(1.0, config.dust_density_coeff), config, rng)
    assert all(driver.trial_orbit()[1] == 0.0 for _ in range(20))


def test_dust_flags_only_switch_off():
    config = build_config(1.0)
    cloud = DustCloud(1.0, config.dust_density_coeff)
    driver = AccretionDriver(cloud, config, np.random.default_rng(11))
    radii = np.linspace(0.05, 199.0, 400)
    previous = [cloud.band_at(r).flags() for r in radii]
    while driver.state is not State.EXHAUSTED:
        resolving = driver.state is State.RESOLVING
        driver.step()
        if not resolving:
            continue
        current = [cloud.band_at(r).flags() for r in radii]
        for (dust0, gas0), (dust1, gas1) in zip(previous, current):
            assert dust1 <= dust0
            assert gas1 <= gas0
        previous = current


def test_driver_records_events():
    events = EventLog(enabled=True)
    run_driver(42, events=events)
    names = events.names()
    assert "planetesimal_created" in names
    assert "dust_bands_updated" in names
