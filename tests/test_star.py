import astropy.units as u
import pytest

from accrete.base.star import Star, habitable_zone, spectral_class


def test_sun():
    star = Star(1.0)
    assert star.luminosity == pytest.approx(1.0)
    assert star.spectral_class == "G"
    assert 5000 < star.temperature < 6000
    assert star.main_seq_age == pytest.approx(1e10)
    assert star.habitable_zone[0] < 1.0 < star.habitable_zone[1]
    assert star.ecosphere_radius == star.habitable_zone[1]


def test_explicit_luminosity():
    star = Star(1.0, luminosity=2.0)
    assert star.luminosity == 2.0
    assert star.habitable_zone[1] > Star(1.0).habitable_zone[1]


def test_spectral_class():
    assert spectral_class(40000.0) == "O"
    assert spectral_class(5800.0) == "G"
    assert spectral_class(3000.0) == "M"
    assert spectral_class(100.0) == "Rogue"


def test_no_habitable_zone_for_hot_stars():
    assert habitable_zone(100.0, "A") == (0.0, 0.0)
    star = Star(3.0)
    assert star.spectral_class in ("B", "A")
    assert star.ecosphere_radius == pytest.approx(star.luminosity**0.5)


def test_dump_params_units():
    params = Star(1.0).dump_params()
    assert params["mass"].unit == u.M_sun
    assert params["radius"].to(u.R_sun).value == pytest.approx(1.06)
    assert params["temperature"].unit == u.K


def test_repr_and_dict():
    star = Star(0.8)
    assert "Star object" in repr(star)
    record = star.to_dict()
    assert record["mass"] == 0.8
    assert record["spectral_class"] == star.spectral_class
