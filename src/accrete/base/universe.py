import multiprocessing
import os

import numpy as np
import pandas as pd
from tqdm import tqdm

import accrete.util.misc as misc
from accrete.errors import ConfigurationError


class Universe:
    """
    A collection of independently generated planetary systems, one per seed

    Args:
        seeds (list of int):
            Seeds of the systems
        stellar_masses (float or list of float):
            Mass of each primary star in solar masses, a single value is used
            for every seed
        config (SimulationConfig or dict):
            Parameter overrides shared by all systems
        workers (int):
            Number of processes, systems are generated in the calling process
            when 1
    """

    def __init__(self, seeds, stellar_masses=1.0, config=None, workers=1) -> None:
        self.type = "Accrete"
        self.seeds = [int(seed) for seed in seeds]
        masses = np.atleast_1d(np.asarray(stellar_masses, dtype=float))
        if masses.size == 1:
            masses = np.full(len(self.seeds), masses[0])
        if masses.size != len(self.seeds):
            raise ConfigurationError(
                f"Got {masses.size} stellar masses for {len(self.seeds)} seeds"
            )
        self.stellar_masses = masses.tolist()
        self.config = config

        inputs = [
            (seed, mass, config) for seed, mass in zip(self.seeds, self.stellar_masses)
        ]
        cores = min(workers, os.cpu_count() or 1, max(len(inputs), 1))
        if cores > 1:
            with multiprocessing.Pool(cores) as pool:
                self.systems = pool.starmap(_generate_system, inputs)
        else:
            self.systems = [
                _generate_system(*args)
                for args in tqdm(inputs, desc="Generating systems", leave=False)
            ]

    def __repr__(self):
        str = f"{self.type} universe\n"
        str += f"{len(self.systems)} systems generated"
        return str

    def __len__(self):
        return len(self.systems)

    def get_summary_df(self):
        """
        One row per system with the star and a count of its planets
        """
        rows = []
        for seed, system in zip(self.seeds, self.systems):
            rows.append(
                {
                    "seed": seed,
                    "stellar_mass": system.star.mass,
                    "luminosity": system.star.luminosity,
                    "spectral_class": system.star.spectral_class,
                    "n_planets": len(system),
                    "n_gas_giants": sum(system.getpattr("is_gas_giant")),
                    "n_moons": sum(len(planet.moons) for planet in system.planets),
                    "total_mass_earth": misc.solar_to_earth_mass(system.total_mass()),
                }
            )
        return pd.DataFrame(rows)


def _generate_system(seed, stellar_mass, config):
    # Imported here, the accretion package imports the base classes
    from accrete.accretion.generate import planetary_system

    return planetary_system(seed, stellar_mass, config)
