import astropy.units as u
import numpy as np
import pandas as pd

from accrete.events import EventLog


class System:
    """
    Class for a single planetary system. Must have a star and a list of
    planets, the planets are kept sorted by semi-major axis.
    """

    def __init__(self, star=None, planets=None, disk=None, events=None) -> None:
        self.star = star
        self.planets = [] if planets is None else planets
        self.disk = disk
        self.events = EventLog() if events is None else events
        self.planet_cleanup()
        self.origin = "Accrete"

    def __repr__(self):
        return (
            f"{self.star.name}\tL:{self.star.luminosity:.3f}\t"
            f"Type:{self.star.spectral_class}\n\n"
            f"Planets:\n{self.get_p_df()}"
        )

    def __len__(self):
        return len(self.planets)

    def planet_cleanup(self):
        self.pInds = np.arange(len(self.planets))
        # Sort the planets in the system by semi-major axis, the sort is
        # stable so equal axes keep their order
        a_vals = [planet.a for planet in self.planets]
        order = np.argsort(a_vals, kind="stable")
        self.planets = [self.planets[i] for i in order]
        self.pInds = self.pInds[order]

    def process_planets(self):
        """
        Derive the physical properties of every planet and moon
        """
        for planet in self.planets:
            planet.solve_dependent_params(self.star)

    def getpattr(self, attr):
        # Return array of all planet's attribute value, e.g. all semi-major
        # axis values
        if not self.planets:
            return []
        if type(getattr(self.planets[0], attr)) == u.Quantity:
            return [getattr(planet, attr).value for planet in self.planets] * getattr(
                self.planets[0], attr
            ).unit
        else:
            return [getattr(planet, attr) for planet in self.planets]

    def get_p_df(self):
        p_df = pd.DataFrame()
        for planet in self.planets:
            params = planet.dump_params()
            row = {
                key: val.value if type(val) == u.Quantity else val
                for key, val in params.items()
            }
            p_df = pd.concat([p_df, pd.DataFrame(row, index=[0])], ignore_index=True)
        return p_df

    def get_event_df(self):
        return self.events.to_df()

    def total_mass(self):
        """
        Mass of all planets, moons and rings in solar masses
        """

        def body_mass(body):
            return (
                body.mass
                + sum(body_mass(moon) for moon in body.moons)
                + sum(ring.mass for ring in body.rings)
            )

        return sum(body_mass(planet) for planet in self.planets)

    def to_dict(self):
        """
        Plain record tree of the star and its planets for serialization
        """
        return {
            "star": self.star.to_dict(),
            "planets": [planet.to_dict() for planet in self.planets],
        }
