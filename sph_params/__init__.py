"""
Parameters of the SPH sub-models: artificial viscosity, thermal diffusion and,
when built with it, MHD dissipation and divergence cleaning.

Provides:
- one frozen record per sub-model, with init / init_for_testing / report / serialize
- the hydro scheme owning every enabled record
- TOML parameter files and JSON snapshot metadata
"""

from . import features
from .constants import (
    VISCOSITY_BETA,
    DEFAULT_VISCOSITY_ALPHA,
    DEFAULT_VISCOSITY_ALPHA_FEEDBACK_RESET,
    DEFAULT_DIV_B_OVER_CLEAN_FACTOR,
)
from .errors import ParameterError, MissingParameterError, InvalidParameterError
from .config import ParameterFile, load_parameters, save_used_parameters
from .io import MetadataGroup, SnapshotMetadata, HYDRO_GROUP
from .viscosity import ViscosityConfig
from .diffusion import DiffusionConfig
from .scheme import HydroScheme, enabled_submodel_types, startup

__all__ = [
    "features",
    "VISCOSITY_BETA",
    "DEFAULT_VISCOSITY_ALPHA",
    "DEFAULT_VISCOSITY_ALPHA_FEEDBACK_RESET",
    "DEFAULT_DIV_B_OVER_CLEAN_FACTOR",
    "ParameterError",
    "MissingParameterError",
    "InvalidParameterError",
    "ParameterFile",
    "load_parameters",
    "save_used_parameters",
    "MetadataGroup",
    "SnapshotMetadata",
    "HYDRO_GROUP",
    "ViscosityConfig",
    "DiffusionConfig",
    "HydroScheme",
    "enabled_submodel_types",
    "startup",
]

if features.WITH_MHD:
    from .mhd import MHDConfig
    __all__.append("MHDConfig")
