"""
Outer accretion loop. Nuclei are injected at random orbits inside the
remaining dust until the cloud between the planet bounds is swept clean.
"""

import enum
import logging
import math

import accrete.util.misc as misc
from accrete.accretion.collision import coalesce
from accrete.accretion.growth import grow
from accrete.util.constants import MAX_ACCRETION_TRIALS, NO_GROWTH_TRIALS_PER_AU

logger = logging.getLogger(__name__)


class State(enum.Enum):
    SEEDING = "seeding"
    GROWING = "growing"
    RESOLVING = "resolving"
    EXHAUSTED = "exhausted"


class AccretionDriver:
    """
    Runs the accretion of one dust cloud into a list of planets

    Args:
        cloud (DustCloud):
            The dust cloud, swept in place as planets form
        config (SimulationConfig):
            Simulation parameters
        rng (numpy.random.Generator):
            Random source for the trial orbits and moon orbits
        events (EventLog):
            Optional event log
    """

    def __init__(self, cloud, config, rng, events=None):
        self.cloud = cloud
        self.config = config
        self.rng = rng
        self.events = events
        self.planets = []

        self.state = State.SEEDING
        self.innermost = misc.innermost_planet(config.stellar_mass)
        self.outermost = misc.outermost_planet(config.stellar_mass)
        self.max_no_growth = math.ceil(
            NO_GROWTH_TRIALS_PER_AU * (self.outermost - self.innermost)
        )
        self.no_growth = 0
        self.trials = 0

        self._trial = None
        self._candidate = None

    def __repr__(self):
        return (
            f"{type(self).__name__}(state={self.state.value}, "
            f"planets={len(self.planets)}, trials={self.trials})"
        )

    def is_exhausted(self):
        if not self.cloud.dust_available(self.innermost, self.outermost):
            return True
        if self.no_growth > self.max_no_growth:
            logger.debug(
                f"No growth in {self.no_growth} consecutive trials, stopping"
            )
            return True
        if self.config.planets_limit is not None:
            if len(self.planets) >= self.config.planets_limit:
                return True
        if self.trials >= MAX_ACCRETION_TRIALS:
            logger.warning(
                f"Accretion stopped after {self.trials} trials with dust left"
            )
            return True
        return False

    def trial_orbit(self):
        """
        Draw a trial semi-major axis and eccentricity. The axis is uniform
        over the part of the remaining dust that lies between the planet
        bounds.
        """
        lower, upper = self.innermost, self.outermost
        extent = self.cloud.dust_extent()
        if extent is not None:
            lower = max(lower, extent[0])
            upper = min(upper, extent[1])
        if upper <= lower:
            lower, upper = self.innermost, self.outermost
        a = self.rng.uniform(lower, upper)
        e = misc.random_eccentricity(
            1.0 - self.rng.random(), self.config.cloud_eccentricity
        )
        return a, e

    def step(self):
        """
        Advance the state machine by one transition
        """
        if self.state is State.SEEDING:
            if self.is_exhausted():
                self.state = State.EXHAUSTED
                return self.state
            self.trials += 1
            self._trial = self.trial_orbit()
            self.state = State.GROWING
        elif self.state is State.GROWING:
            a, e = self._trial
            self._candidate = grow(self.cloud, a, e, self.config, self.events)
            if self._candidate is None:
                self.no_growth += 1
                self.state = State.SEEDING
            else:
                self.no_growth = 0
                self.state = State.RESOLVING
        elif self.state is State.RESOLVING:
            body = coalesce(
                self.planets,
                self._candidate,
                self.cloud,
                self.config,
                self.rng,
                self.events,
            )
            logger.debug(
                f"Planet at {body.a:.3f} AU, e={body.e:.3f}, "
                f"{misc.solar_to_earth_mass(body.mass):.3g} M_earth"
            )
            self._candidate = None
            self.state = State.SEEDING
        return self.state

    def run(self):
        """
        Run until the cloud is exhausted
        Returns:
            list of Planet:
                Planets sorted by semi-major axis
        """
        while self.state is not State.EXHAUSTED:
            self.step()
        return self.planets


def accrete(cloud, config, rng, events=None):
    return AccretionDriver(cloud, config, rng, events).run()
