"""
Tests of the artificial viscosity parameters.
"""

import dataclasses as dc
import logging

import pytest

from sph_params.config import ParameterFile
from sph_params.constants import VISCOSITY_BETA, DEFAULT_VISCOSITY_ALPHA_FEEDBACK_RESET
from sph_params.io import MetadataGroup
from sph_params.submodel import SubModel
from sph_params.viscosity import ViscosityConfig


def test_default_alpha():
    viscosity = ViscosityConfig.init(ParameterFile({"SPH": {}}), None, None)
    assert viscosity.alpha == 0.8


@pytest.mark.parametrize("alpha", [0.0, 0.1, 1.0, 2.5])
def test_alpha_from_parameters(alpha):
    viscosity = ViscosityConfig.init(ParameterFile({"SPH": {"viscosity_alpha": alpha}}))
    assert viscosity.alpha == alpha


def test_init_for_testing():
    assert ViscosityConfig.init_for_testing().alpha == 0.8


def test_record_is_immutable():
    viscosity = ViscosityConfig.init_for_testing()
    assert isinstance(viscosity, SubModel)
    with pytest.raises(dc.FrozenInstanceError):
        viscosity.alpha = 1.0


def test_report(caplog):
    caplog.set_level(logging.INFO)
    ViscosityConfig(alpha=1.23456).report()

    assert caplog.messages == ["Artificial viscosity parameters set to alpha: 1.235"]


def test_serialize():
    group = MetadataGroup("HydroScheme")
    ViscosityConfig(alpha=1.2).serialize(group)

    assert group.attrs == {"Alpha viscosity": 1.2, "Beta viscosity": VISCOSITY_BETA}
    assert group["Beta viscosity"] == 3.0


def test_feedback_reset_matches_default_alpha():
    assert DEFAULT_VISCOSITY_ALPHA_FEEDBACK_RESET == ViscosityConfig.init_for_testing().alpha
