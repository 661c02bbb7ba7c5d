"""
Constants of the Dole (1969) accretion model and Fogg's (1985) extensions.

Masses are in solar masses and distances in AU unless noted otherwise.
"""

# Seed mass of a planetary nucleus, solar masses
PROTOPLANET_MASS = 1.0e-15

# Empirical exponent of Dole's eccentricity distribution, e = 1 - u**0.077
ECCENTRICITY_COEFF = 0.077

# Cloud eccentricity the exponent above was calibrated against
REFERENCE_CLOUD_ECCENTRICITY = 0.2

# Dust density decay, rho = A * sqrt(M) * exp(-ALPHA * r**(1/N))
ALPHA = 5.0
N = 3.0

# Relative mass growth below which a nucleus has stopped accreting
CONVERGENCE_THRESHOLD = 1.0e-4
MAX_GROWTH_ITERATIONS = 10000

# Dust cloud and planetary nuclei boundaries, scaled by M**(1/3)
OUTER_DUST_COEFF = 200.0
INNERMOST_PLANET_COEFF = 0.3
OUTERMOST_PLANET_COEFF = 50.0

# Consecutive failed trials allowed per AU of the planetesimal zone
NO_GROWTH_TRIALS_PER_AU = 200.0
MAX_ACCRETION_TRIALS = 200000

# Smaller/larger mass ratio below which an overlapping body is captured
MOON_CAPTURE_RATIO = 0.05

# Bombardment impactor masses, solar masses
IMPACTOR_MIN_MASS = PROTOPLANET_MASS
IMPACTOR_MAX_MASS = PROTOPLANET_MASS * 1.0e5
IMPACT_CAPTURE_EXPONENT = 0.25

# Standalone planet sampling ranges
PLANET_MIN_A = 0.3
PLANET_MAX_A = 50.0
PLANET_MIN_MASS_EARTH = 3.3467202125167e-10
PLANET_MAX_MASS_EARTH = 500.0

# Default tuning values
DUST_DENSITY_COEFF = 1.5e-3
K = 50.0
CLOUD_ECCENTRICITY = 0.2
B = 1.2e-5
POST_ACCRETION_INTENSITY = 1000

# Kothari radius coefficients (cgs)
A1_20 = 6.485e12
A2_20 = 4.0032e-8
BETA_20 = 5.71e12
JIMS_FUDGE = 1.004

# Empirical gas giant density scale, g/cc
GAS_GIANT_DENSITY = 1.2
ROCKY_DENSITY = 5.5

# Margot (2015) orbit clearing mass in Earth masses for a body at 1 AU around
# one solar mass, a discriminant below 1 marks a dwarf planet
CLEARING_MASS_EARTH = 1.2392e-3
