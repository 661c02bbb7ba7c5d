"""Procedural planetary system generation by dust accretion.

>>> from accrete import planetary_system
>>> system = planetary_system(42, 1.0)
"""

from accrete.accretion import planet, planetary_system
from accrete.base import Planet, Star, System, Universe
from accrete.config import SimulationConfig, build_config
from accrete.errors import AccreteError, ConfigurationError

__all__ = [
    "AccreteError",
    "ConfigurationError",
    "Planet",
    "SimulationConfig",
    "Star",
    "System",
    "Universe",
    "build_config",
    "planet",
    "planetary_system",
]
