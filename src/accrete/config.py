"""Simulation parameters for planetary system generation.

The defaults follow Dole's 1969 aggregation paper and Fogg's 1985 extensions,
the recommended ranges are noted on each field.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from accrete.errors import ConfigurationError
from accrete.util import constants
from accrete.util.misc import luminosity


class SimulationConfig(BaseModel):
    """Immutable set of accretion parameters for a single run."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    stellar_mass: float = Field(..., gt=0, description="Primary star mass [M_sun]")
    dust_density_coeff: float = Field(
        constants.DUST_DENSITY_COEFF,
        gt=0,
        description="'A' in Dole's paper, recommended range 0.00125-0.0015",
    )
    k: float = Field(
        constants.K,
        gt=0,
        description="Gas-to-dust ratio of the cloud, recommended range 50-100",
    )
    cloud_eccentricity: float = Field(
        constants.CLOUD_ECCENTRICITY,
        ge=0,
        lt=1,
        description="Eccentricity of the dust particle orbits, high values give fewer planets",
    )
    crit_mass_coeff: float = Field(
        constants.B,
        gt=0,
        description="'B' in Dole's paper, gas giant threshold, recommended range 1.0e-5-1.2e-5",
    )
    post_accretion_intensity: int = Field(
        constants.POST_ACCRETION_INTENSITY,
        ge=0,
        description="Number of late impactors bombarding the finished system",
    )
    stellar_luminosity: Optional[float] = Field(
        None, gt=0, description="Luminosity [L_sun], derived from the mass when unset"
    )
    planet_a: Optional[float] = Field(
        None, gt=0, description="Standalone planet semi-major axis [AU]"
    )
    planet_e: Optional[float] = Field(
        None, ge=0, lt=1, description="Standalone planet eccentricity"
    )
    planet_mass: Optional[float] = Field(
        None, gt=0, description="Standalone planet mass [M_earth]"
    )
    planets_limit: Optional[int] = Field(
        None, ge=1, description="Stop accretion once this many planets exist"
    )

    @property
    def luminosity(self) -> float:
        """Configured luminosity, or the main sequence value for the mass."""
        if self.stellar_luminosity is not None:
            return self.stellar_luminosity
        return luminosity(self.stellar_mass)


ConfigLike = Union[None, SimulationConfig, Mapping[str, Any]]


def build_config(stellar_mass: float, config: ConfigLike = None) -> SimulationConfig:
    """
    Validate the stellar mass together with any parameter overrides
    Args:
        stellar_mass (float):
            Mass of the primary star in solar masses
        config (SimulationConfig or dict):
            Overrides for any subset of the tuning parameters
    Returns:
        SimulationConfig:
            Validated configuration
    Raises:
        ConfigurationError:
            If any parameter is out of range
    """
    if config is None:
        data = {}
    elif isinstance(config, SimulationConfig):
        data = config.model_dump(exclude_unset=True)
    elif isinstance(config, Mapping):
        data = dict(config)
    else:
        raise ConfigurationError(
            f"config must be a mapping or SimulationConfig, got {type(config).__name__}"
        )
    data["stellar_mass"] = stellar_mass
    try:
        return SimulationConfig(**data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid simulation parameters: {exc}") from exc


__all__ = ["SimulationConfig", "build_config"]
