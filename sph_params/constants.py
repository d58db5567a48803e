"""
Build-wide constants of the SPH scheme.

Values here are fixed for a build and shared by every record; only the
runtime parameters end up in the sub-model records.
"""

#--- Parameter file ---#
PARAMETER_SECTION: str = "SPH"

#--- Viscosity ---#
# Beta as in e.g. Price (2010) Eqn (103); not configurable at run time.
VISCOSITY_BETA: float = 3.0

# The "initial" viscosity, or the fixed value for non-variable schemes.
DEFAULT_VISCOSITY_ALPHA: float = 0.8

# Value particles are reset to after being hit by a feedback event.
DEFAULT_VISCOSITY_ALPHA_FEEDBACK_RESET: float = 0.8

#--- MHD ---#
# Default and inclusive lower bound.
DEFAULT_DIV_B_OVER_CLEAN_FACTOR: float = 1.0
