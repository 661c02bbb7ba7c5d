import copy

import pytest

from accrete.accretion.growth import critical_mass, grow, is_critical
from accrete.base.disk import DustCloud
from accrete.config import build_config
from accrete.events import EventLog
from accrete.util.constants import PROTOPLANET_MASS


def test_critical_mass_decreases_with_distance():
    assert critical_mass(10.0, 0.0, 1.2e-5) < critical_mass(1.0, 0.0, 1.2e-5)


def test_critical_mass_scales_with_coefficient():
    assert critical_mass(1.0, 0.0, 2.4e-5) == pytest.approx(
        2 * critical_mass(1.0, 0.0, 1.2e-5)
    )


def test_is_critical():
    assert is_critical(1e-3, 5.0, 1.2e-5)
    assert not is_critical(3e-6, 1.0, 1.2e-5)
    assert not is_critical(1e-3, 5.0, 1.0)


def test_grow_on_fresh_cloud(cloud, config):
    bands = copy.deepcopy(cloud.bands)
    body = grow(cloud, 1.0, 0.05, config)
    assert body is not None
    assert body.mass > PROTOPLANET_MASS
    assert body.a == 1.0
    assert body.e == 0.05
    assert body.dust_mass + body.gas_mass == pytest.approx(body.mass)
    assert cloud.bands == bands


def test_grow_without_dust_returns_none(cloud, config):
    cloud.sweep(0.0, 10.0)
    assert grow(cloud, 1.0, 0.05, config) is None


def test_gas_giant_accretes_gas(cloud):
    config = build_config(1.0, {"crit_mass_coeff": 1e-12})
    body = grow(cloud, 5.0, 0.0, config)
    assert body.is_gas_giant
    assert body.gas_mass > 0


def test_no_gas_giant_with_high_threshold(cloud):
    config = build_config(1.0, {"crit_mass_coeff": 1e3})
    body = grow(cloud, 5.0, 0.0, config)
    assert not body.is_gas_giant
    assert body.gas_mass == 0


def test_grow_records_events(cloud, config):
    events = EventLog(enabled=True)
    grow(cloud, 1.0, 0.05, config, events)
    assert events.names()[:2] == ["planetesimal_created", "planetesimal_accreted"]


def test_grow_is_deterministic(cloud, config):
    first = grow(cloud, 2.0, 0.1, config)
    second = grow(cloud, 2.0, 0.1, config)
    assert first.mass == second.mass
    assert first.is_gas_giant == second.is_gas_giant


def test_growth_scales_with_cloud_density(config):
    thin = grow(DustCloud(1.0, 1.0e-3), 1.0, 0.05, config)
    thick = grow(DustCloud(1.0, 2.0e-3), 1.0, 0.05, config)
    assert thick.mass > thin.mass
