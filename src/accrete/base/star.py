import astropy.constants as const
import astropy.units as u
import numpy as np
import pandas as pd

import accrete.util.misc as misc

# Outer and inner normalized stellar flux bounding the habitable zone
# http://www.solstation.com/habitable.html
HABITABLE_FLUX_FACTORS = {
    "O": (0.0, 0.0),
    "B": (0.0, 0.0),
    "A": (0.0, 0.0),
    "F": (0.46, 1.9),
    "G": (0.36, 1.41),
    "K": (0.27, 1.05),
    "M": (0.27, 1.05),
    "L": (0.16, 0.7),
    "T": (0.05, 0.2),
    "Y": (0.0, 0.0),
    "Rogue": (0.0, 0.0),
}

# Lower temperature bound of each spectral class in Kelvin, hottest first
SPECTRAL_CLASS_TEMPERATURES = (
    ("O", 30000.0),
    ("B", 10000.0),
    ("A", 7500.0),
    ("F", 6000.0),
    ("G", 5200.0),
    ("K", 3700.0),
    ("M", 2400.0),
    ("L", 1300.0),
    ("T", 550.0),
    ("Y", 273.15),
)


class Star:
    """
    The primary star of a generated system

    Args:
        mass (float):
            Mass in solar masses
        luminosity (float):
            Luminosity in solar luminosities, main sequence value if not given
    """

    def __init__(self, mass, luminosity=None):
        self.mass = mass
        if luminosity is None:
            luminosity = misc.luminosity(mass)
        self.luminosity = luminosity
        self.name = f"{mass:.3f} Msun"
        self.solve_dependent_params()

    def __repr__(self):
        params = self.dump_params()
        res = {
            key: val.value if isinstance(val, u.Quantity) else val
            for key, val in params.items()
        }
        s_df = pd.DataFrame(res, index=[0])
        return f"{type(self).__name__} object\n{s_df}"

    def solve_dependent_params(self):
        # Empirical main sequence radius
        if self.mass <= 1.66:
            radius = 1.06 * self.mass**0.945 * const.R_sun
        else:
            radius = 1.33 * self.mass**0.555 * const.R_sun
        self.radius = radius.to(u.AU).value

        # Stefan-Boltzmann effective temperature
        self.temperature = (
            (
                self.luminosity
                * const.L_sun
                / (4 * np.pi * radius**2 * const.sigma_sb)
            )
            ** 0.25
        ).to(u.K).value

        self.main_seq_age = 1.0e10 * self.mass / self.luminosity
        self.spectral_class = spectral_class(self.temperature)
        self.bv_color_index = (5601.0 / self.temperature) ** 1.5 - 0.4
        self.habitable_zone = habitable_zone(self.luminosity, self.spectral_class)

        # Fogg's ecosphere radius, used for bodies around stars without a
        # habitable zone
        if self.habitable_zone[1] > 0:
            self.ecosphere_radius = self.habitable_zone[1]
        else:
            self.ecosphere_radius = np.sqrt(self.luminosity)

    def dump_params(self):
        params = {
            "mass": self.mass * u.M_sun,
            "luminosity": self.luminosity * u.L_sun,
            "radius": (self.radius * u.AU).to(u.R_sun),
            "temperature": self.temperature * u.K,
            "main_seq_age": self.main_seq_age * u.yr,
            "spectral_class": self.spectral_class,
            "bv_color_index": self.bv_color_index,
            "hz_inner": self.habitable_zone[0] * u.AU,
            "hz_outer": self.habitable_zone[1] * u.AU,
        }
        return params

    def to_dict(self):
        return {
            "mass": float(self.mass),
            "luminosity": float(self.luminosity),
            "radius_au": float(self.radius),
            "temperature_k": float(self.temperature),
            "main_seq_age_yr": float(self.main_seq_age),
            "spectral_class": self.spectral_class,
            "bv_color_index": float(self.bv_color_index),
            "habitable_zone_au": [float(r) for r in self.habitable_zone],
        }


def spectral_class(temperature):
    for name, lower_bound in SPECTRAL_CLASS_TEMPERATURES:
        if temperature >= lower_bound:
            return name
    return "Rogue"


def habitable_zone(luminosity, spectral_class):
    """
    Inner and outer edge of the habitable zone in AU, (0, 0) for classes
    without one
    """
    outer_flux, inner_flux = HABITABLE_FLUX_FACTORS[spectral_class]
    if outer_flux == 0 or inner_flux == 0:
        return (0.0, 0.0)
    return (np.sqrt(luminosity / inner_flux), np.sqrt(luminosity / outer_flux))
