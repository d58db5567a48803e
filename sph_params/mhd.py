"""
MHD artificial dissipation and divergence cleaning parameters.

Only available when the package is built with MHD support; otherwise this
module cannot be imported, so no code path can reach its fields.
"""

import dataclasses as dc
import logging
from typing import Any

from sph_params import features
from sph_params.config import ParameterFile
from sph_params.constants import DEFAULT_DIV_B_OVER_CLEAN_FACTOR
from sph_params.errors import InvalidParameterError
from sph_params.submodel import AttributeSink

if not features.WITH_MHD:
    raise ImportError("MHD support is disabled; set SPH_PARAMS_WITH_MHD=1 to enable it.")


logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True)
class MHDConfig:
    artificial_dissipation_constant: float
    artificial_dissipation_minimum: float
    artificial_dissipation_source: float
    artificial_dissipation_timescale: float
    with_div_B_cleaning: bool
    div_B_parabolic_sigma: float
    """only meaningful with divB cleaning on"""
    div_B_over_clean_factor: float
    """only meaningful with divB cleaning on; >= 1 when read from a parameter file"""

    @classmethod
    def init(cls, params: ParameterFile, units: Any = None, constants: Any = None):
        """
        Read the MHD parameters; the dissipation terms and sigma are required.

        Raises InvalidParameterError if div_B_over_clean_factor < 1; no record
        is created in that case.
        """
        values = dict(
            artificial_dissipation_constant=params.get_float("SPH:artificial_dissipation_constant"),
            artificial_dissipation_minimum=params.get_float("SPH:artificial_dissipation_minimum"),
            artificial_dissipation_source=params.get_float("SPH:artificial_dissipation_source"),
            artificial_dissipation_timescale=params.get_float("SPH:artificial_dissipation_timescale"),
            with_div_B_cleaning=bool(params.get_opt_int("SPH:with_div_B_cleaning", 0)),
            div_B_parabolic_sigma=params.get_float("SPH:div_B_parabolic_sigma"),
            div_B_over_clean_factor=params.get_opt_float(
                "SPH:div_B_over_clean_factor", DEFAULT_DIV_B_OVER_CLEAN_FACTOR
            ),
        )
        # also rejects NaN
        if not values["div_B_over_clean_factor"] >= DEFAULT_DIV_B_OVER_CLEAN_FACTOR:
            raise InvalidParameterError("Cannot have div_B_over_clean_factor < 1.")
        return cls(**values)

    @classmethod
    def init_for_testing(cls):
        # Structurally complete but physically meaningless
        return cls(
            artificial_dissipation_constant=0.,
            artificial_dissipation_minimum=0.,
            artificial_dissipation_source=0.,
            artificial_dissipation_timescale=0.,
            with_div_B_cleaning=False,
            div_B_parabolic_sigma=0.,
            div_B_over_clean_factor=0.,
        )

    def report(self):
        for name in (
            "artificial_dissipation_constant",
            "artificial_dissipation_minimum",
            "artificial_dissipation_source",
            "artificial_dissipation_timescale",
        ):
            logger.info(f"MHD {name} = {getattr(self, name):g}")

        if self.with_div_B_cleaning:
            logger.info("MHD is running with divB cleaning ON.")
            logger.info(f"MHD div_B_parabolic_sigma = {self.div_B_parabolic_sigma:g}")
            logger.info(f"MHD div_B_over_clean_factor = {self.div_B_over_clean_factor:g}")
        else:
            logger.info("MHD is running with divB cleaning OFF.")

    def serialize(self, group: AttributeSink):
        group.write_attribute("Artificial dissipation constant", self.artificial_dissipation_constant)
        group.write_attribute("Artificial dissipation minimum", self.artificial_dissipation_minimum)
        group.write_attribute("Artificial dissipation source", self.artificial_dissipation_source)
        group.write_attribute("Artificial dissipation timescale", self.artificial_dissipation_timescale)
        group.write_attribute("divB cleaning turned on", int(self.with_div_B_cleaning))

        # Undefined for readers when cleaning is off, so not written at all
        if self.with_div_B_cleaning:
            group.write_attribute("divB parabolic sigma", self.div_B_parabolic_sigma)
            group.write_attribute("divB over-cleaning factor", self.div_B_over_clean_factor)
