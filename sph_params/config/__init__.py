"""
Parameter file access for the SPH sub-models.

Provides:
- ParameterFile: required / optional lookups addressed by "SECTION:name"
- TOML loading of parameter files
- TOML saving of the parameters a run actually used
"""

from .loader import ParameterFile, load_parameters, save_used_parameters

__all__ = [
    "ParameterFile",
    "load_parameters",
    "save_used_parameters",
]
