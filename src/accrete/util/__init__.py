__all__ = [
    "aphelion_distance",
    "clearing_neighbourhood",
    "coalesce_orbits",
    "critical_limit",
    "dust_density",
    "empirical_density",
    "hill_sphere",
    "inner_dust_limit",
    "inner_effect_limit",
    "innermost_planet",
    "kothari_radius",
    "luminosity",
    "mass_density",
    "orbital_zone",
    "outer_dust_limit",
    "outer_effect_limit",
    "outermost_planet",
    "perihelion_distance",
    "period",
    "random_eccentricity",
    "roche_limit",
    "solar_to_earth_mass",
    "earth_to_solar_mass",
    "volume_density",
    "volume_radius",
]

from .misc import (
    aphelion_distance,
    clearing_neighbourhood,
    coalesce_orbits,
    critical_limit,
    dust_density,
    earth_to_solar_mass,
    empirical_density,
    hill_sphere,
    inner_dust_limit,
    inner_effect_limit,
    innermost_planet,
    kothari_radius,
    luminosity,
    mass_density,
    orbital_zone,
    outer_dust_limit,
    outer_effect_limit,
    outermost_planet,
    perihelion_distance,
    period,
    random_eccentricity,
    roche_limit,
    solar_to_earth_mass,
    volume_density,
    volume_radius,
)
