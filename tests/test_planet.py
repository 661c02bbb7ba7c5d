import astropy.units as u
import pytest

from accrete.base.planet import Planet, Ring
from accrete.base.star import Star
from accrete.base.system import System
from accrete.util.misc import earth_to_solar_mass

EARTH = earth_to_solar_mass(1.0)
JUPITER = earth_to_solar_mass(317.8)


def test_effect_zone_grows_with_mass():
    small = Planet(1.0, 0.0, 1e-9).effect_zone(0.2)
    large = Planet(1.0, 0.0, 1e-3).effect_zone(0.2)
    assert large[0] < small[0] < 1.0 < small[1] < large[1]


def test_add_mass():
    body = Planet(1.0, 0.0, 1e-6)
    body.add_mass(dust=1e-7, gas=2e-7)
    assert body.mass == pytest.approx(1.3e-6)
    assert body.dust_mass == pytest.approx(1.1e-6)
    assert body.gas_mass == pytest.approx(2e-7)


def test_earth_properties():
    earth = Planet(1.0, 0.0167, EARTH)
    earth.solve_dependent_params(Star(1.0))
    assert earth.mass_earth == pytest.approx(1.0)
    assert 4000 < earth.radius < 9000
    assert 3 < earth.density < 8
    assert earth.period == pytest.approx(365.25, rel=1e-3)
    assert earth.orbit_zone == 1
    assert earth.hill_sphere > 0


def test_gas_giant_properties():
    jupiter = Planet(5.2, 0.048, JUPITER, is_gas_giant=True)
    jupiter.solve_dependent_params(Star(1.0))
    assert jupiter.radius > 30000
    assert jupiter.density < 3
    assert jupiter.orbit_zone == 2


def test_moons_orbit_their_planet():
    jupiter = Planet(5.2, 0.048, JUPITER, is_gas_giant=True)
    moon = Planet(0.003, 0.0, 1e-8, is_moon=True)
    jupiter.moons.append(moon)
    jupiter.solve_dependent_params(Star(1.0))
    assert moon.orbit_zone == jupiter.orbit_zone
    assert moon.period < 30
    assert moon.hill_sphere < jupiter.hill_sphere


def test_dump_params():
    body = Planet(1.0, 0.0, EARTH)
    params = body.dump_params()
    assert params["a"].unit == u.AU
    assert params["mass"].to(u.M_earth).value == pytest.approx(1.0)
    assert "radius" not in params
    body.solve_dependent_params(Star(1.0))
    assert "radius" in body.dump_params()


def test_record_tree():
    body = Planet(5.2, 0.0, JUPITER, is_gas_giant=True)
    body.moons.append(Planet(0.003, 0.0, 1e-8, is_moon=True))
    body.rings.append(Ring(0.0005, 1e-12, 100.0))
    record = body.to_dict()
    assert record["is_gas_giant"]
    assert record["moons"][0]["is_moon"]
    assert record["rings"][0]["width_km"] == 100.0


def test_copy_is_independent():
    body = Planet(1.0, 0.0, EARTH)
    clone = body.copy()
    clone.moons.append(Planet(0.001, 0.0, 1e-9, is_moon=True))
    assert not body.moons


def test_system_sorts_planets():
    planets = [Planet(5.0, 0.0, EARTH), Planet(1.0, 0.0, EARTH), Planet(2.0, 0.0, EARTH)]
    system = System(Star(1.0), planets)
    assert system.getpattr("a") == [1.0, 2.0, 5.0]
    assert list(system.pInds) == [1, 2, 0]
    assert len(system.get_p_df()) == 3
    assert system.total_mass() == pytest.approx(3 * EARTH)
    assert "Planets:" in repr(system)


def test_empty_system():
    system = System(Star(1.0))
    assert len(system) == 0
    assert system.getpattr("a") == []
    assert system.total_mass() == 0


def test_earth_clears_its_orbit():
    earth = Planet(1.0, 0.0167, EARTH)
    earth.solve_dependent_params(Star(1.0))
    assert earth.orbit_clearing == pytest.approx(807, rel=0.01)
    assert not earth.is_dwarf_planet
    assert earth.to_dict()["is_dwarf_planet"] is False


def test_ceres_is_dwarf_planet():
    ceres = Planet(2.77, 0.076, earth_to_solar_mass(1.57e-4))
    ceres.solve_dependent_params(Star(1.0))
    assert ceres.orbit_clearing == pytest.approx(0.04, rel=0.05)
    assert ceres.is_dwarf_planet
    params = ceres.dump_params()
    assert params["is_dwarf_planet"]
    assert params["orbit_clearing"] < 1.0


def test_moons_are_not_classified_by_orbit_clearing():
    jupiter = Planet(5.2, 0.048, JUPITER, is_gas_giant=True)
    moon = Planet(0.003, 0.0, 1e-12, is_moon=True)
    jupiter.moons.append(moon)
    jupiter.solve_dependent_params(Star(1.0))
    assert not jupiter.is_dwarf_planet
    assert moon.orbit_clearing is None
    assert not moon.is_dwarf_planet
    assert moon.to_dict()["orbit_clearing"] is None
