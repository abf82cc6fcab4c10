"""Physical constants and numerical tolerances."""

R_GAS = 8.31446262  # J/(mol*K)

BAR = 1.0e5  # Pa per bar
ZERO_CELSIUS = 273.15  # K

# Molar fractions summing to 1 within this absolute tolerance are accepted.
FRACTION_TOLERANCE = 1e-9
