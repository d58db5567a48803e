import logging
import os

# The MHD sub-model is part of this build for the tests; must be set before
# the package is imported.
os.environ["SPH_PARAMS_WITH_MHD"] = "1"

import pytest

from sph_params.config import ParameterFile


@pytest.fixture
def sample_toml_content():
    return """
[SPH]
viscosity_alpha = 1.2
artificial_dissipation_constant = 1.0
artificial_dissipation_minimum = 0.01
artificial_dissipation_source = 0.1
artificial_dissipation_timescale = 0.5
with_div_B_cleaning = 1
div_B_parabolic_sigma = 0.5
div_B_over_clean_factor = 1.5

[TimeIntegration]
time_end = 0.2
"""


@pytest.fixture
def temp_toml_file(tmp_path, sample_toml_content):
    filepath = tmp_path / "params.toml"
    filepath.write_text(sample_toml_content, encoding="utf-8")
    return filepath


@pytest.fixture
def mhd_values():
    return {
        "artificial_dissipation_constant": 1.0,
        "artificial_dissipation_minimum": 0.01,
        "artificial_dissipation_source": 0.1,
        "artificial_dissipation_timescale": 0.5,
        "with_div_B_cleaning": 1,
        "div_B_parabolic_sigma": 0.5,
        "div_B_over_clean_factor": 1.5,
    }


@pytest.fixture
def mhd_params(mhd_values):
    return ParameterFile({"SPH": mhd_values})


@pytest.fixture
def restore_root_logger():
    """Undo handler changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
