"""
Orbital and physical formulas of the accretion model. Everything here works
on plain floats in solar masses, AU and km so the accretion loops stay fast,
astropy is only used to pin down the unit conversions.
"""

import astropy.units as u
import numpy as np
from astropy import constants as c

from accrete.util.constants import (
    A1_20,
    A2_20,
    ALPHA,
    BETA_20,
    CLEARING_MASS_EARTH,
    ECCENTRICITY_COEFF,
    GAS_GIANT_DENSITY,
    INNERMOST_PLANET_COEFF,
    JIMS_FUDGE,
    N,
    OUTER_DUST_COEFF,
    OUTERMOST_PLANET_COEFF,
    REFERENCE_CLOUD_ECCENTRICITY,
    ROCKY_DENSITY,
)

SOLAR_MASS_IN_GRAMS = c.M_sun.cgs.value
EARTH_MASSES_PER_SOLAR_MASS = (c.M_sun / c.M_earth).decompose().value
KM_PER_AU = u.AU.to(u.km)
CM_PER_KM = u.km.to(u.cm)
DAYS_PER_YEAR = u.yr.to(u.d)


def scale_cube_root_mass(scale, mass):
    return scale * mass ** (1 / 3)


def inner_dust_limit(stellar_mass):
    """
    Inner edge of the dust cloud. Dole lets the cloud reach all the way to the
    star for every stellar mass, so unlike the outer edge this one does not
    grow with the mass, it only never shrinks.
    """
    return 0.0


def outer_dust_limit(stellar_mass):
    return scale_cube_root_mass(OUTER_DUST_COEFF, stellar_mass)


def innermost_planet(stellar_mass):
    """
    "...the semimajor axes of planetary nuclei can never be greater than 50
    distance units, which effectively sets an outer boundary to the problem.
    An inner boundary was also established, arbitrarily at 0.3 distance unit."
    (Dole 1969)
    """
    return scale_cube_root_mass(INNERMOST_PLANET_COEFF, stellar_mass)


def outermost_planet(stellar_mass):
    return scale_cube_root_mass(OUTERMOST_PLANET_COEFF, stellar_mass)


def solar_to_earth_mass(mass):
    return mass * EARTH_MASSES_PER_SOLAR_MASS


def earth_to_solar_mass(mass):
    return mass / EARTH_MASSES_PER_SOLAR_MASS


def perihelion_distance(a, e):
    return a * (1.0 - e)


def aphelion_distance(a, e):
    return a * (1.0 + e)


def reduced_margin(mass):
    """
    Fractional reach of a body's gravity, (m / (1 + m))**(1/4)
    """
    return (mass / (1.0 + mass)) ** 0.25


def inner_effect_limit(a, e, mass, cloud_eccentricity):
    """
    Innermost distance a body can sweep dust from
    Args:
        a (float):
            Semi-major axis in AU
        e (float):
            Eccentricity of the body
        mass (float):
            Mass of the body in solar masses
        cloud_eccentricity (float):
            Eccentricity of the dust particle orbits
    Returns:
        float:
            Inner limit in AU, never negative
    """
    limit = (
        perihelion_distance(a, e)
        * (1.0 - reduced_margin(mass))
        / (1.0 + cloud_eccentricity)
    )
    return max(limit, 0.0)


def outer_effect_limit(a, e, mass, cloud_eccentricity):
    """
    Outermost distance a body can sweep dust from, in AU
    """
    return (
        aphelion_distance(a, e)
        * (1.0 + reduced_margin(mass))
        / (1.0 - cloud_eccentricity)
    )


def dust_density(dust_density_coeff, stellar_mass, orbital_radius):
    """
    "The density of dust within the cloud depends on a function of the form
    p1 = A exp(-a r^(1/n))" (Dole 1969)
    """
    return (
        dust_density_coeff
        * np.sqrt(stellar_mass)
        * np.exp(-ALPHA * orbital_radius ** (1.0 / N))
    )


def mass_density(k, dust_density, critical_mass, mass):
    """
    Combined dust and gas density seen by a body above the critical mass
    """
    return k * dust_density / (1.0 + np.sqrt(critical_mass / mass) * (k - 1.0))


def critical_limit(b, a, e, stellar_luminosity):
    """
    Mass at which a body starts to accrete gas as well as dust
    Args:
        b (float):
            Critical mass coefficient, B in Dole's paper
        a (float):
            Semi-major axis in AU
        e (float):
            Eccentricity
        stellar_luminosity (float):
            Luminosity of the star in solar luminosities
    Returns:
        float:
            Critical mass in solar masses
    """
    temp = perihelion_distance(a, e) * np.sqrt(stellar_luminosity)
    return b * temp**-0.75


def eccentricity_exponent(cloud_eccentricity):
    return ECCENTRICITY_COEFF * cloud_eccentricity / REFERENCE_CLOUD_ECCENTRICITY


def random_eccentricity(random, cloud_eccentricity):
    """
    Dole's empirical eccentricity distribution, 1 - u**0.077, with the
    exponent scaled so the mean follows the cloud eccentricity
    Args:
        random (float):
            Uniform draw in (0, 1]
        cloud_eccentricity (float):
            Eccentricity of the dust cloud
    Returns:
        float:
            Eccentricity in [0, 1)
    """
    return 1.0 - random ** eccentricity_exponent(cloud_eccentricity)


def luminosity(stellar_mass):
    """
    Main sequence mass-luminosity relation
    """
    return stellar_mass**3.5


def orbital_zone(stellar_luminosity, a):
    """
    Fogg's orbital zone, 1 is inside 4 AU for a solar luminosity, 3 is
    outside 15 AU
    """
    if a < 4.0 * np.sqrt(stellar_luminosity):
        return 1
    elif a < 15.0 * np.sqrt(stellar_luminosity):
        return 2
    return 3


def kothari_radius(mass, is_gas_giant, zone):
    """
    Radius of a body from Kothari's eq.23 (Mon. Not. R. Astron. Soc. 96,
    1936), listed as eq.9 in Fogg's article
    Args:
        mass (float):
            Mass in solar masses
        is_gas_giant (bool):
            Whether the body is a gas giant
        zone (int):
            Orbital zone of the body
    Returns:
        float:
            Equatorial radius in km
    """
    if zone == 1:
        atomic_weight, atomic_num = (9.5, 4.5) if is_gas_giant else (15.0, 8.0)
    elif zone == 2:
        atomic_weight, atomic_num = (2.47, 2.0) if is_gas_giant else (10.0, 5.0)
    else:
        atomic_weight, atomic_num = (7.0, 4.0) if is_gas_giant else (10.0, 5.0)

    temp = (
        2.0
        * BETA_20
        * SOLAR_MASS_IN_GRAMS ** (1 / 3)
        / (A1_20 * (atomic_weight * atomic_num) ** (1 / 3))
    )
    temp2 = (
        A2_20
        * atomic_weight ** (4 / 3)
        * SOLAR_MASS_IN_GRAMS ** (2 / 3)
        * mass ** (2 / 3)
        / (A1_20 * atomic_num**2)
        + 1.0
    )
    return temp / temp2 * mass ** (1 / 3) / CM_PER_KM / JIMS_FUDGE


def empirical_density(mass, a, ecosphere_radius, is_gas_giant):
    """
    Density in g/cc from Fogg's empirical relation
    """
    density = solar_to_earth_mass(mass) ** (1 / 8) * (ecosphere_radius / a) ** 0.25
    if is_gas_giant:
        return density * GAS_GIANT_DENSITY
    return density * ROCKY_DENSITY


def volume_radius(mass, density):
    """
    Radius in km of a sphere of the given mass (solar masses) and density
    (g/cc)
    """
    volume = mass * SOLAR_MASS_IN_GRAMS / density
    return (3.0 * volume / (4.0 * np.pi)) ** (1 / 3) / CM_PER_KM


def volume_density(mass, radius):
    """
    Density in g/cc of a sphere of the given mass (solar masses) and radius
    (km)
    """
    radius_cm = radius * CM_PER_KM
    volume = 4.0 * np.pi * radius_cm**3 / 3.0
    return mass * SOLAR_MASS_IN_GRAMS / volume


def period(separation, small_mass, large_mass):
    """
    Orbital period in days of two masses (solar masses) separated by the given
    distance in AU
    """
    period_in_years = np.sqrt(separation**3 / (small_mass + large_mass))
    return period_in_years * DAYS_PER_YEAR


def hill_sphere(a, e, mass, central_mass):
    """
    Hill sphere radius in AU of a body orbiting a central mass
    """
    return a * (1.0 - e) * (mass / (3.0 * central_mass)) ** (1 / 3)


def clearing_neighbourhood(mass, a, stellar_mass):
    """
    Margot's planetary discriminant, the ratio of a body's mass to the mass
    needed to clear its orbital zone within the lifetime of the star
    Args:
        mass (float):
            Mass of the body in solar masses
        a (float):
            Semi-major axis in AU
        stellar_mass (float):
            Mass of the star in solar masses
    Returns:
        float:
            Discriminant, bodies below 1 are dwarf planets
    """
    clearing_mass = CLEARING_MASS_EARTH * stellar_mass**2.5 * a ** (9 / 8)
    return solar_to_earth_mass(mass) / clearing_mass


def roche_limit(larger_mass, smaller_mass, smaller_radius):
    """
    Rigid body Roche limit of the smaller body around the larger one
    Args:
        larger_mass (float):
            Mass of the primary in solar masses
        smaller_mass (float):
            Mass of the satellite in solar masses
        smaller_radius (float):
            Radius of the satellite in km
    Returns:
        float:
            Roche limit in AU
    """
    return smaller_radius * (2.0 * larger_mass / smaller_mass) ** (1 / 3) / KM_PER_AU


def coalesce_orbits(m1, a1, e1, m2, a2, e2):
    """
    Orbit of two bodies merged into one, conserving orbital energy and angular
    momentum
    Returns:
        a (float):
            Semi-major axis of the merged body in AU
        e (float):
            Eccentricity of the merged body
    """
    new_mass = m1 + m2
    new_a = new_mass / (m1 / a1 + m2 / a2)
    term1 = m1 * np.sqrt(a1 * (1.0 - e1**2))
    term2 = m2 * np.sqrt(a2 * (1.0 - e2**2))
    term3 = (term1 + term2) / (new_mass * np.sqrt(new_a))
    new_e = np.sqrt(abs(1.0 - term3**2))
    # Numerical noise can push a circular merge just past one
    return new_a, min(new_e, 1.0 - 1e-9)
