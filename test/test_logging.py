"""
Tests of the run logging setup.
"""

import logging

from sph_params.runtime.logging import setup_logging


def test_console_is_message_only(capsys, restore_root_logger):
    setup_logging()
    logging.getLogger("sph_params.viscosity").info("alpha: 0.800")
    logging.getLogger("sph_params.viscosity").debug("hidden")

    assert capsys.readouterr().out == "alpha: 0.800\n"


def test_log_file_and_repeated_setup(tmp_path, capsys, restore_root_logger):
    first, second = tmp_path / "first.txt", tmp_path / "second.txt"
    setup_logging(log_file=first)
    setup_logging(level=logging.DEBUG, log_file=second)
    logging.getLogger("sph_params.mhd").debug("divB cleaning OFF")

    root_logger = logging.getLogger()
    assert sum(isinstance(h, logging.FileHandler) for h in root_logger.handlers) == 1
    assert first.read_text(encoding="utf-8") == ""
    assert second.read_text(encoding="utf-8") == "sph_params.mhd DEBUG divB cleaning OFF\n"
    assert capsys.readouterr().out == "divB cleaning OFF\n"
