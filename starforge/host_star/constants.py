# Share of host stars that are close binaries rather than solitary stars.
BINARY_STAR_PROBABILITY = 0.4
