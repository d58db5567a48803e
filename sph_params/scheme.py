"""
The sub-models of the hydro scheme, owned together.

`HydroScheme` builds every enabled sub-model from one parameter file at
startup, reports them, and writes them into the snapshot metadata. MHD is
only part of the scheme when the package is built with it.
"""

import logging
from typing import Any

from sph_params import features
from sph_params.config import ParameterFile
from sph_params.diffusion import DiffusionConfig
from sph_params.errors import ParameterError
from sph_params.io import SnapshotMetadata, HYDRO_GROUP
from sph_params.submodel import AttributeSink
from sph_params.viscosity import ViscosityConfig


logger = logging.getLogger(__name__)


def enabled_submodel_types() -> dict[str, type]:
    """Record type of every sub-model in this build, in reporting order."""
    types = {
        "viscosity": ViscosityConfig,
        "diffusion": DiffusionConfig,
    }
    if features.WITH_MHD:
        from sph_params.mhd import MHDConfig
        types["mhd"] = MHDConfig
    return types


class HydroScheme:
    """
    Holds one record per enabled sub-model, as attributes named after it.

    Without MHD support there is no `mhd` attribute at all.
    """

    def __init__(self, **records):
        expected = enabled_submodel_types()
        if set(records) != set(expected):
            raise TypeError(f"Expected records {sorted(expected)}, got {sorted(records)}.")
        self._names = list(expected)
        for name, record in records.items():
            setattr(self, name, record)

    @classmethod
    def init(cls, params: ParameterFile, units: Any = None, constants: Any = None):
        """Read every sub-model; configuration errors propagate to the caller."""
        return cls(**{
            name: SubModelType.init(params, units, constants)
            for name, SubModelType in enabled_submodel_types().items()
        })

    @classmethod
    def init_for_testing(cls):
        return cls(**{
            name: SubModelType.init_for_testing()
            for name, SubModelType in enabled_submodel_types().items()
        })

    @property
    def submodels(self):
        return tuple(getattr(self, name) for name in self._names)

    def report(self):
        for submodel in self.submodels:
            submodel.report()

    def serialize(self, group: AttributeSink):
        for submodel in self.submodels:
            submodel.serialize(group)

    def write_snapshot_metadata(self, path):
        """Write the scheme into the hydro group of a snapshot metadata file."""
        metadata = SnapshotMetadata(path)
        self.serialize(metadata.create_group(HYDRO_GROUP))
        metadata.save()
        return metadata


def startup(params: ParameterFile, units: Any = None, constants: Any = None) -> HydroScheme:
    """
    Build the hydro scheme, or stop the run.

    A simulation must never proceed with a missing or invalid parameter, so
    any ParameterError ends the process with exit status 1.
    """
    try:
        return HydroScheme.init(params, units, constants)
    except ParameterError as error:
        logger.critical(f"Invalid hydro scheme configuration: {error}")
        raise SystemExit(1) from error
