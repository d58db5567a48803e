"""
Lifecycle shared by the SPH sub-model records.

Records share this protocol, not data: each one is a frozen dataclass with
its own fields, built exactly once by either `init` or `init_for_testing`.
"""

from typing import Any, Protocol, runtime_checkable

from sph_params.config import ParameterFile


@runtime_checkable
class AttributeSink(Protocol):

    def write_attribute(self, name: str, value) -> None:
        ...


@runtime_checkable
class SubModel(Protocol):

    @classmethod
    def init(cls, params: ParameterFile, units: Any = None, constants: Any = None) -> "SubModel":
        """Read the record from the parameter file, falling back to defaults."""
        ...

    @classmethod
    def init_for_testing(cls) -> "SubModel":
        """Fixed values, for when no parameter file is available."""
        ...

    def report(self) -> None:
        """Log the parameters at the start of a run."""
        ...

    def serialize(self, group: AttributeSink) -> None:
        """Write the parameters as attributes of a snapshot group."""
        ...
