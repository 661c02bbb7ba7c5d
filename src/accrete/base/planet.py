import copy
from dataclasses import dataclass

import astropy.units as u
import pandas as pd

import accrete.util.misc as misc
from accrete.util.constants import PROTOPLANET_MASS


@dataclass
class Ring:
    """
    Ring left behind by a moon torn apart inside its planet's Roche limit
    Args:
        a (float):
            Planetocentric radius in AU
        mass (float):
            Mass in solar masses
        width (float):
            Radial width in km
    """

    a: float
    mass: float
    width: float

    def to_dict(self):
        return {
            "a": float(self.a),
            "mass_earth": float(misc.solar_to_earth_mass(self.mass)),
            "width_km": float(self.width),
        }


class Planet:
    """
    Class for a planet, or a protoplanet while it is still accreting. Moons
    are planets too, their semi-major axis is measured from the parent.

    Masses are kept in solar masses, the unit the accretion model works in,
    and converted to Earth masses on the way out.
    """

    def __init__(
        self,
        a,
        e,
        mass=PROTOPLANET_MASS,
        dust_mass=None,
        gas_mass=0.0,
        is_gas_giant=False,
        is_moon=False,
    ) -> None:
        self.a = a
        self.e = e
        self.mass = mass
        self.dust_mass = mass - gas_mass if dust_mass is None else dust_mass
        self.gas_mass = gas_mass
        self.is_gas_giant = is_gas_giant
        self.is_moon = is_moon
        self.has_collision = False
        self.moons = []
        self.rings = []

        # Filled in by solve_dependent_params
        self.orbit_zone = None
        self.radius = None
        self.density = None
        self.period = None
        self.hill_sphere = None
        self.orbit_clearing = None
        self.is_dwarf_planet = False

    def __repr__(self):
        """
        Make dataframe with planet attributes
        """
        params = self.dump_params()
        res = {}
        for key, val in params.items():
            if type(val) == u.Quantity:
                res[key] = val.value
            else:
                res[key] = val

        p_df = pd.DataFrame(res, index=[0])

        return f"{type(self).__name__} object\n{p_df}"

    @property
    def orbital_radius_au(self):
        return self.a

    @property
    def eccentricity(self):
        return self.e

    @property
    def mass_earth(self):
        return misc.solar_to_earth_mass(self.mass)

    def effect_zone(self, cloud_eccentricity):
        """
        Radial band of the cloud the body gravitationally dominates
        Returns:
            inner (float):
                Inner limit in AU
            outer (float):
                Outer limit in AU
        """
        return (
            misc.inner_effect_limit(self.a, self.e, self.mass, cloud_eccentricity),
            misc.outer_effect_limit(self.a, self.e, self.mass, cloud_eccentricity),
        )

    def copy(self):
        return copy.deepcopy(self)

    def add_mass(self, dust=0.0, gas=0.0):
        self.dust_mass += dust
        self.gas_mass += gas
        self.mass += dust + gas

    def solve_dependent_params(
        self, star, central_mass=None, zone=None, distance_to_star=None
    ):
        """
        Calculate the physical properties that follow from the orbit and mass
        Args:
            star (Star):
                Primary star of the system
            central_mass (float):
                Mass the body orbits in solar masses, the star if not given
            zone (int):
                Orbital zone, derived from the star's luminosity if not given
            distance_to_star (float):
                Distance to the star in AU, the semi-major axis if not given
        """
        if central_mass is None:
            central_mass = star.mass
        if distance_to_star is None:
            distance_to_star = self.a
        if zone is None:
            zone = misc.orbital_zone(star.luminosity, distance_to_star)
        self.orbit_zone = zone

        if self.is_gas_giant:
            self.density = misc.empirical_density(
                self.mass, distance_to_star, star.ecosphere_radius, True
            )
            self.radius = misc.volume_radius(self.mass, self.density)
        else:
            self.radius = misc.kothari_radius(self.mass, False, zone)
            self.density = misc.volume_density(self.mass, self.radius)

        self.period = misc.period(self.a, self.mass, central_mass)
        self.hill_sphere = misc.hill_sphere(self.a, self.e, self.mass, central_mass)

        # Orbit clearing only applies to bodies orbiting the star
        if not self.is_moon:
            self.orbit_clearing = misc.clearing_neighbourhood(
                self.mass, self.a, central_mass
            )
            self.is_dwarf_planet = self.orbit_clearing < 1.0

        for moon in self.moons:
            moon.solve_dependent_params(
                star,
                central_mass=self.mass,
                zone=zone,
                distance_to_star=distance_to_star,
            )

    def dump_params(self):
        params = {
            "a": self.a * u.AU,
            "e": self.e,
            "mass": self.mass_earth * u.M_earth,
            "dust_mass": misc.solar_to_earth_mass(self.dust_mass) * u.M_earth,
            "gas_mass": misc.solar_to_earth_mass(self.gas_mass) * u.M_earth,
            "is_gas_giant": self.is_gas_giant,
            "n_moons": len(self.moons),
            "n_rings": len(self.rings),
        }
        if self.radius is not None:
            params["radius"] = self.radius * u.km
            params["density"] = self.density * u.g / u.cm**3
            params["period"] = self.period * u.d
            params["hill_sphere"] = self.hill_sphere * u.AU
            params["orbit_zone"] = self.orbit_zone
            params["is_dwarf_planet"] = self.is_dwarf_planet
            if self.orbit_clearing is not None:
                params["orbit_clearing"] = self.orbit_clearing
        return params

    def to_dict(self):
        """
        Plain record tree of the planet and its moons for serialization
        """
        res = {
            "orbital_radius_au": float(self.a),
            "eccentricity": float(self.e),
            "mass_earth": float(self.mass_earth),
            "dust_mass_earth": float(misc.solar_to_earth_mass(self.dust_mass)),
            "gas_mass_earth": float(misc.solar_to_earth_mass(self.gas_mass)),
            "is_gas_giant": bool(self.is_gas_giant),
            "is_moon": bool(self.is_moon),
            "has_collision": bool(self.has_collision),
            "moons": [moon.to_dict() for moon in self.moons],
            "rings": [ring.to_dict() for ring in self.rings],
        }
        if self.radius is not None:
            res.update(
                {
                    "orbit_zone": int(self.orbit_zone),
                    "radius_km": float(self.radius),
                    "density_g_cc": float(self.density),
                    "period_days": float(self.period),
                    "hill_sphere_au": float(self.hill_sphere),
                    "is_dwarf_planet": bool(self.is_dwarf_planet),
                    "orbit_clearing": None
                    if self.orbit_clearing is None
                    else float(self.orbit_clearing),
                }
            )
        return res
