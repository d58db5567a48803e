"""
Optional features, fixed once when the package is imported.

MHD support is switched on through the environment, the way a configure
flag would select it for a compiled solver.
"""

import os


_truthy = ("1", "true", "yes", "on")


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in _truthy


WITH_MHD: bool = _flag("SPH_PARAMS_WITH_MHD")
