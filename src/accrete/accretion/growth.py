"""
Growth of a single planetary nucleus in the dust cloud, after Dole (1969).

A nucleus sweeps up everything inside its effect limits. The more mass it
gathers the farther its gravity reaches, so the sweep is repeated until the
mass stops changing. Above the critical mass the nucleus also pulls in gas
and turns into a gas giant (Fogg 1985).
"""

import logging

import numpy as np

import accrete.util.misc as misc
from accrete.base.planet import Planet
from accrete.util.constants import (
    CONVERGENCE_THRESHOLD,
    MAX_GROWTH_ITERATIONS,
    PROTOPLANET_MASS,
)

logger = logging.getLogger(__name__)


def critical_mass(a, e, crit_mass_coeff, stellar_luminosity=1.0):
    """
    Mass in solar masses above which a body at the given orbit accretes gas
    """
    return misc.critical_limit(crit_mass_coeff, a, e, stellar_luminosity)


def is_critical(mass, a, crit_mass_coeff, e=0.0, stellar_luminosity=1.0):
    """
    Whether a body has crossed into runaway gas accretion
    Args:
        mass (float):
            Mass of the body in solar masses
        a (float):
            Semi-major axis in AU
        crit_mass_coeff (float):
            Critical mass coefficient, B in Dole's paper
        e (float):
            Eccentricity, the threshold is set at perihelion
        stellar_luminosity (float):
            Luminosity of the star in solar luminosities
    Returns:
        bool:
            True if the mass is above the critical mass
    """
    return mass > critical_mass(a, e, crit_mass_coeff, stellar_luminosity)


def collect_dust(cloud, mass, a, e, crit_mass, k, cloud_eccentricity):
    """
    Dust and gas inside the effect limits of a body of the given mass
    Args:
        cloud (DustCloud):
            The dust cloud
        mass (float):
            Current mass of the body in solar masses
        a (float):
            Semi-major axis in AU
        e (float):
            Eccentricity of the body
        crit_mass (float):
            Critical mass of the body in solar masses
        k (float):
            Gas-to-dust ratio of the cloud
        cloud_eccentricity (float):
            Eccentricity of the dust particle orbits
    Returns:
        dust (float):
            Swept dust mass in solar masses
        gas (float):
            Swept gas mass in solar masses
    """
    r_inner = misc.inner_effect_limit(a, e, mass, cloud_eccentricity)
    r_outer = misc.outer_effect_limit(a, e, mass, cloud_eccentricity)
    bandwidth = r_outer - r_inner
    if bandwidth <= 0:
        return 0.0, 0.0

    density = cloud.profile(a)
    reach = misc.reduced_margin(mass)

    dust = 0.0
    gas = 0.0
    for band in cloud.bands:
        if not band.dust_present or not band.overlaps(r_inner, r_outer):
            continue

        if mass < crit_mass or not band.gas_present:
            gas_density = 0.0
        else:
            gas_density = misc.mass_density(k, density, crit_mass, mass) - density

        # Parts of the effect zone hanging over either edge of the band
        outer_overhang = max(r_outer - band.outer_edge, 0.0)
        inner_overhang = max(band.inner_edge - r_inner, 0.0)
        width = bandwidth - outer_overhang - inner_overhang
        volume = (
            4.0
            * np.pi
            * a**2
            * reach
            * width
            * (1.0 - e * (outer_overhang - inner_overhang) / bandwidth)
        )
        dust += volume * density
        gas += volume * gas_density
    return dust, gas


def grow(cloud, a, e, config, events=None):
    """
    Grow a planetary nucleus at a trial orbit until its mass converges
    Args:
        cloud (DustCloud):
            The dust cloud, not modified
        a (float):
            Trial semi-major axis in AU
        e (float):
            Trial eccentricity
        config (SimulationConfig):
            Simulation parameters
        events (EventLog):
            Optional event log
    Returns:
        Planet or None:
            The grown protoplanet, None if there is no dust to accrete at the
            trial orbit
    """
    inner = misc.inner_effect_limit(a, e, PROTOPLANET_MASS, config.cloud_eccentricity)
    outer = misc.outer_effect_limit(a, e, PROTOPLANET_MASS, config.cloud_eccentricity)
    if not cloud.dust_available(inner, outer):
        return None

    crit_mass = critical_mass(a, e, config.crit_mass_coeff, config.luminosity)
    protoplanet = Planet(a, e, PROTOPLANET_MASS)
    if events is not None:
        events.record("planetesimal_created", protoplanet)

    mass = PROTOPLANET_MASS
    dust, gas = 0.0, 0.0
    for _ in range(MAX_GROWTH_ITERATIONS):
        dust, gas = collect_dust(
            cloud, mass, a, e, crit_mass, config.k, config.cloud_eccentricity
        )
        new_mass = dust + gas
        if new_mass > crit_mass:
            protoplanet.is_gas_giant = True
        converged = new_mass - mass < CONVERGENCE_THRESHOLD * mass
        mass = new_mass
        if converged:
            break
    else:
        logger.debug(
            f"Nucleus at {a:.3f} AU still growing after {MAX_GROWTH_ITERATIONS}"
            " iterations, stopping"
        )

    if mass <= 0:
        return None

    protoplanet.mass = mass
    protoplanet.dust_mass = dust
    protoplanet.gas_mass = gas
    if events is not None:
        events.record("planetesimal_accreted", protoplanet)
        if protoplanet.is_gas_giant:
            events.record("planetesimal_to_gas_giant", protoplanet)
    return protoplanet
