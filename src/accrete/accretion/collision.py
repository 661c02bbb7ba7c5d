"""
Resolution of a freshly grown protoplanet against the planets already formed.

Bodies interact when their effect zones overlap. Comparable bodies coalesce
into one, a much lighter body on a distinct orbit is captured as a moon, and
a body that touches nothing is inserted as a new planet.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

import accrete.util.misc as misc
from accrete.base.planet import Planet, Ring
from accrete.util.constants import MOON_CAPTURE_RATIO

logger = logging.getLogger(__name__)


class ActionKind(enum.Enum):
    INSERT = "insert"
    MERGE = "merge"
    CAPTURE = "capture"


@dataclass(frozen=True)
class Action:
    """
    Outcome of testing a candidate against the planet list. For MERGE and
    CAPTURE, target is the index of the existing planet involved. For
    CAPTURE, moon_is_candidate tells which of the two becomes the moon.
    """

    kind: ActionKind
    target: Optional[int] = None
    moon_is_candidate: bool = True


def zones_overlap(p1, p2):
    inner1, outer1 = p1.effect_zone(0.0)
    inner2, outer2 = p2.effect_zone(0.0)
    return inner1 < outer2 and inner2 < outer1


def overlapping(planets, candidate):
    """
    Indices of the planets whose effect zone overlaps the candidate's,
    closest orbit first
    """
    inds = [i for i, planet in enumerate(planets) if zones_overlap(planet, candidate)]
    return sorted(inds, key=lambda i: abs(planets[i].a - candidate.a))


def body_radius(body, stellar_luminosity):
    zone = misc.orbital_zone(stellar_luminosity, body.a)
    return misc.kothari_radius(body.mass, body.is_gas_giant, zone)


def is_capture(larger, smaller, stellar_luminosity=1.0):
    """
    Whether the lighter of two interacting bodies ends up as a satellite of
    the heavier one instead of colliding with it
    """
    if smaller.mass >= MOON_CAPTURE_RATIO * larger.mass:
        return False
    roche = misc.roche_limit(
        larger.mass, smaller.mass, body_radius(smaller, stellar_luminosity)
    )
    return abs(larger.a - smaller.a) > 2.0 * roche


def resolve(planets, candidate, stellar_luminosity=1.0):
    """
    Decide what happens to a candidate body
    Args:
        planets (list of Planet):
            Planets already formed, sorted by semi-major axis
        candidate (Planet):
            The newly grown body
        stellar_luminosity (float):
            Luminosity of the star, used for the bodies' radii
    Returns:
        Action:
            What to do with the candidate. With several overlapping planets
            the closest one is merged first, the caller resolves again
            afterwards.
    """
    inds = overlapping(planets, candidate)
    if not inds:
        return Action(ActionKind.INSERT)
    target = inds[0]
    if len(inds) > 1:
        return Action(ActionKind.MERGE, target)

    existing = planets[target]
    if existing.mass >= candidate.mass:
        larger, smaller = existing, candidate
    else:
        larger, smaller = candidate, existing
    if is_capture(larger, smaller, stellar_luminosity):
        return Action(ActionKind.CAPTURE, target, moon_is_candidate=smaller is candidate)
    return Action(ActionKind.MERGE, target)


def coalesce_two_planets(p1, p2):
    """
    Two bodies collide and form one. Mass is additive, the orbit conserves
    energy and angular momentum, and a gas giant stays a gas giant.
    """
    a, e = misc.coalesce_orbits(p1.mass, p1.a, p1.e, p2.mass, p2.a, p2.e)
    coalesced = Planet(
        a,
        e,
        mass=p1.mass + p2.mass,
        dust_mass=p1.dust_mass + p2.dust_mass,
        gas_mass=p1.gas_mass + p2.gas_mass,
        is_gas_giant=p1.is_gas_giant or p2.is_gas_giant,
    )
    coalesced.has_collision = True
    coalesced.moons = p1.moons + p2.moons
    coalesced.rings = p1.rings + p2.rings
    return coalesced


def capture_moon(larger, smaller, stellar_mass, stellar_luminosity, rng):
    """
    The larger body captures the smaller one as a moon. The parent's orbit
    shifts toward the moon's, the moon and its own satellites get random
    orbits inside the parent's Hill sphere.
    """
    planet = larger
    moon = smaller
    planet.a, planet.e = misc.coalesce_orbits(
        planet.mass, planet.a, planet.e, moon.mass, moon.a, moon.e
    )

    new_moons = moon.moons + [moon]
    moon.moons = []
    planet.rings.extend(moon.rings)
    moon.rings = []

    hill = misc.hill_sphere(planet.a, planet.e, planet.mass, stellar_mass)
    zone = misc.orbital_zone(stellar_luminosity, planet.a)
    rings = []
    for m in new_moons:
        m.is_moon = True
        m.a = rng.uniform(0.0, hill)
        radius = misc.kothari_radius(m.mass, m.is_gas_giant, zone)
        roche = misc.roche_limit(planet.mass, m.mass, radius)
        if m.a <= roche:
            rings.append(Ring(roche, m.mass, 2.0 * radius))
        else:
            planet.moons.append(m)
    planet.rings.extend(rings)
    return planet, len(rings)


def coalesce(planets, candidate, cloud, config, rng, events=None):
    """
    Apply the collision rules until the candidate, or whatever it turned
    into, finds a place in the planet list. Updates the planet list and the
    dust cloud in place.
    Args:
        planets (list of Planet):
            Planets sorted by semi-major axis
        candidate (Planet):
            The newly grown body
        cloud (DustCloud):
            The dust cloud
        config (SimulationConfig):
            Simulation parameters
        rng (numpy.random.Generator):
            Random source for moon orbits
        events (EventLog):
            Optional event log
    Returns:
        Planet:
            The body that was inserted
    """
    ce = config.cloud_eccentricity
    luminosity = config.luminosity

    inner, outer = candidate.effect_zone(ce)
    cloud.sweep(inner, outer, sweep_gas=candidate.is_gas_giant)

    body = candidate
    while True:
        action = resolve(planets, body, luminosity)
        if action.kind is ActionKind.INSERT:
            break

        existing = planets.pop(action.target)
        if action.kind is ActionKind.MERGE:
            logger.debug(
                f"Coalescing bodies at {existing.a:.3f} and {body.a:.3f} AU"
            )
            body = coalesce_two_planets(existing, body)
            if events is not None:
                events.record("planetesimals_coalesced", body)
        else:
            if action.moon_is_candidate:
                larger, smaller = existing, body
            else:
                larger, smaller = body, existing
            logger.debug(
                f"Body at {larger.a:.3f} AU captured a moon from {smaller.a:.3f} AU"
            )
            body, n_rings = capture_moon(
                larger, smaller, cloud.stellar_mass, luminosity, rng
            )
            if events is not None:
                events.record("planetesimal_capture_moon", body)
                for _ in range(n_rings):
                    events.record("moon_to_ring", body)

    position = sum(1 for planet in planets if planet.a <= body.a)
    planets.insert(position, body)

    inner, outer = body.effect_zone(ce)
    cloud.sweep(inner, outer, sweep_gas=body.is_gas_giant)
    if events is not None:
        events.record("dust_bands_updated", detail=f"{len(cloud.bands)} bands")
    return body
