"""Default pricing parameters.

These are read-only values used as explicit parameter defaults; nothing in
the package mutates them.
"""

# Square feet one gallon of paint covers.
DEFAULT_COVERAGE_SQFT_PER_GALLON = 350.0

# Share of the post-materials margin allocated to labor, in percent.
DEFAULT_LABOR_PERCENT = 30.0
