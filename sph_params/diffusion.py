"""
Thermal diffusion parameters.

No diffusion coefficient is configurable yet. The record keeps the same
lifecycle as the other sub-models so that callers treat all of them alike.
"""

import dataclasses as dc
from typing import Any

from sph_params.config import ParameterFile
from sph_params.submodel import AttributeSink


@dc.dataclass(frozen=True)
class DiffusionConfig:

    @classmethod
    def init(cls, params: ParameterFile, units: Any = None, constants: Any = None):
        return cls()

    @classmethod
    def init_for_testing(cls):
        return cls()

    def report(self):
        pass

    def serialize(self, group: AttributeSink):
        pass
