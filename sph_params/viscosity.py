"""Artificial viscosity parameters."""

import dataclasses as dc
import logging
from typing import Any

from sph_params.config import ParameterFile
from sph_params.constants import DEFAULT_VISCOSITY_ALPHA, VISCOSITY_BETA
from sph_params.submodel import AttributeSink


logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True)
class ViscosityConfig:
    alpha: float
    """strength of the artificial viscosity; also the initial value for variable schemes"""

    @classmethod
    def init(cls, params: ParameterFile, units: Any = None, constants: Any = None):
        alpha = params.get_opt_float("SPH:viscosity_alpha", DEFAULT_VISCOSITY_ALPHA)
        return cls(alpha=alpha)

    @classmethod
    def init_for_testing(cls):
        return cls(alpha=DEFAULT_VISCOSITY_ALPHA)

    def report(self):
        logger.info(f"Artificial viscosity parameters set to alpha: {self.alpha:.3f}")

    def serialize(self, group: AttributeSink):
        group.write_attribute("Alpha viscosity", self.alpha)
        # beta is fixed for the build, not part of the record
        group.write_attribute("Beta viscosity", VISCOSITY_BETA)
