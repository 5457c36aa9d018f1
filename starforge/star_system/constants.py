# Number of re-attempts after the first failed subsystem generation
DEFAULT_RETRIES = 10

# Chance that a subsystem splits into two further subsystems.
# Must stay below 0.5 for the expected tree size to be finite.
PROBABILITY_OF_BINARY_STARS = 0.3
