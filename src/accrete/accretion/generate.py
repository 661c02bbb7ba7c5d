"""
Entry points that turn a seed and a stellar mass into a planetary system or a
single planet. Both are deterministic in their inputs, every random draw comes
from one generator seeded here.
"""

import logging

import numpy as np

import accrete.util.misc as misc
from accrete.accretion.bombardment import bombard
from accrete.accretion.driver import accrete
from accrete.accretion.growth import is_critical
from accrete.base.disk import DustCloud
from accrete.base.planet import Planet
from accrete.base.star import Star
from accrete.base.system import System
from accrete.config import build_config
from accrete.events import EventLog
from accrete.util.constants import (
    PLANET_MAX_A,
    PLANET_MAX_MASS_EARTH,
    PLANET_MIN_A,
    PLANET_MIN_MASS_EARTH,
)

logger = logging.getLogger(__name__)


def planetary_system(seed, stellar_mass, config=None, record_events=False):
    """
    Generate a planetary system by accretion from a dust cloud
    Args:
        seed (int):
            Seed of the random generator
        stellar_mass (float):
            Mass of the primary star in solar masses
        config (SimulationConfig or dict):
            Overrides for the accretion parameters
        record_events (bool):
            Keep a log of the accretion events on the system
    Returns:
        System:
            The star and its planets sorted by semi-major axis
    Raises:
        ConfigurationError:
            If any parameter is out of range, before anything is simulated
    """
    config = build_config(stellar_mass, config)
    rng = np.random.default_rng(seed)
    events = EventLog(enabled=record_events)

    star = Star(config.stellar_mass, config.luminosity)
    cloud = DustCloud(config.stellar_mass, config.dust_density_coeff)
    events.record(
        "system_setup",
        detail=f"M={star.mass:.3f} L={star.luminosity:.3f} seed={seed}",
    )

    planets = accrete(cloud, config, rng, events)
    bombard(
        planets,
        config.post_accretion_intensity,
        rng,
        (cloud.inner_edge, cloud.outer_edge),
        star.mass,
        events,
    )

    system = System(star, planets, cloud, events)
    system.process_planets()
    events.record("system_complete", detail=f"{len(system)} planets")
    logger.info(
        f"Seed {seed}: {len(system)} planets around a {star.mass:.3f} Msun star, "
        f"{sum(planet.is_gas_giant for planet in system.planets)} gas giants"
    )
    return system


def planet(seed, stellar_mass, config=None):
    """
    Generate one planet by sampling its orbit and mass directly, then running
    the bombardment stage on it alone
    Args:
        seed (int):
            Seed of the random generator
        stellar_mass (float):
            Mass of the primary star in solar masses
        config (SimulationConfig or dict):
            Overrides, planet_a, planet_e and planet_mass fix the sampled
            values
    Returns:
        Planet:
            The planet with its derived physical properties
    Raises:
        ConfigurationError:
            If any parameter is out of range
    """
    config = build_config(stellar_mass, config)
    rng = np.random.default_rng(seed)
    star = Star(config.stellar_mass, config.luminosity)

    # Draw all three values so the stream does not depend on the overrides
    a = rng.uniform(PLANET_MIN_A, PLANET_MAX_A)
    e = misc.random_eccentricity(1.0 - rng.random(), config.cloud_eccentricity)
    mass_earth = rng.uniform(PLANET_MIN_MASS_EARTH, PLANET_MAX_MASS_EARTH)
    if config.planet_a is not None:
        a = config.planet_a
    if config.planet_e is not None:
        e = config.planet_e
    if config.planet_mass is not None:
        mass_earth = config.planet_mass

    mass = misc.earth_to_solar_mass(mass_earth)
    body = Planet(
        a,
        e,
        mass,
        is_gas_giant=is_critical(
            mass, a, config.crit_mass_coeff, e, config.luminosity
        ),
    )
    bombard(
        [body],
        config.post_accretion_intensity,
        rng,
        body.effect_zone(config.cloud_eccentricity),
        star.mass,
    )
    body.solve_dependent_params(star)
    logger.debug(
        f"Seed {seed}: planet at {body.a:.3f} AU, {body.mass_earth:.3g} M_earth"
    )
    return body
