"""
Late heavy bombardment of a finished system. Small impactors hit the planet
closest to their orbit and are either absorbed or captured as moons.
"""

import logging

import accrete.util.misc as misc
from accrete.base.planet import Planet
from accrete.util.constants import (
    IMPACT_CAPTURE_EXPONENT,
    IMPACTOR_MAX_MASS,
    IMPACTOR_MIN_MASS,
)

logger = logging.getLogger(__name__)


def capture_probability(impactor_mass, target_mass):
    """
    Chance that an impactor ends up in orbit instead of on the surface, it
    falls as the target grows relative to the impactor
    """
    return (impactor_mass / (impactor_mass + target_mass)) ** IMPACT_CAPTURE_EXPONENT


def closest_planet(planets, r):
    """
    Index of the planet whose semi-major axis is closest to r, ties go to the
    inner planet
    """
    distances = [abs(planet.a - r) for planet in planets]
    return distances.index(min(distances))


def impact(target, impactor_mass, capture_roll, moon_fraction, stellar_mass=1.0):
    """
    Apply one impactor to a target planet
    Args:
        target (Planet):
            Planet that is hit, modified in place
        impactor_mass (float):
            Mass of the impactor in solar masses
        capture_roll (float):
            Uniform draw in [0, 1) compared with the capture probability
        moon_fraction (float):
            Uniform draw in (0, 1] placing a captured moon inside the Hill
            sphere
        stellar_mass (float):
            Mass of the star in solar masses
    Returns:
        bool:
            True if the impactor was captured as a moon
    """
    if capture_roll < capture_probability(impactor_mass, target.mass):
        hill = misc.hill_sphere(target.a, target.e, target.mass, stellar_mass)
        moon = Planet(moon_fraction * hill, 0.0, impactor_mass, is_moon=True)
        target.moons.append(moon)
        return True
    target.add_mass(dust=impactor_mass)
    target.has_collision = True
    return False


def bombard(planets, intensity, rng, extent, stellar_mass=1.0, events=None):
    """
    Hit the planets with a number of late impactors. Every event draws the
    same four numbers in the same order, whether or not it finds a target, so
    the random stream stays aligned.
    Args:
        planets (list of Planet):
            Planets of the system, modified in place but never added to,
            removed or reordered
        intensity (int):
            Number of impact events
        rng (numpy.random.Generator):
            Random source
        extent (tuple of float):
            Inner and outer radius in AU the impactor orbits are drawn from
        stellar_mass (float):
            Mass of the star in solar masses
        events (EventLog):
            Optional event log
    Returns:
        int:
            Number of impactors captured as moons
    """
    if intensity <= 0:
        return 0
    if events is not None:
        events.record("post_accretion_started", detail=f"{intensity} impactors")

    inner, outer = extent
    captured = 0
    for _ in range(intensity):
        impactor_mass = rng.uniform(IMPACTOR_MIN_MASS, IMPACTOR_MAX_MASS)
        r = rng.uniform(inner, outer)
        capture_roll = rng.random()
        moon_fraction = 1.0 - rng.random()
        if not planets:
            continue

        target = planets[closest_planet(planets, r)]
        if impact(
            target, impactor_mass, capture_roll, moon_fraction, stellar_mass
        ):
            captured += 1
        if events is not None:
            events.record("outer_body_injected", target)

    logger.debug(f"{intensity} impactors, {captured} captured as moons")
    return captured
