# Earth masses
MINIMUM_MASS = 0.0001
MAXIMUM_MASS = 0.3
MINIMUM_HABITABLE_MASS = 0.1
MAXIMUM_HABITABLE_MASS = 0.3

# Bond albedo
MINIMUM_ALBEDO = 0.05
MAXIMUM_ALBEDO = 0.7
MINIMUM_HABITABLE_ALBEDO = 0.25
MAXIMUM_HABITABLE_ALBEDO = 0.4
