"""
Snapshot metadata stored in a self-describing manner.

A snapshot metadata file is a JSON document of named groups, each holding
scalar attributes. Sub-models write their parameters into one group.
"""

import json
import numbers
from pathlib import Path

import numpy as np


_UTF_8 = "UTF-8"
_JSON_indent = 2

HYDRO_GROUP = "HydroScheme"


class MetadataGroup:

    name: str
    attrs: dict[str, float | int]

    def __init__(self, name: str, attrs: dict | None = None):
        self.name = name
        self.attrs = dict(attrs) if attrs else {}

    def write_attribute(self, name: str, value):
        """Store a scalar attribute; numpy scalars are kept as plain numbers."""
        if isinstance(value, np.generic):
            value = value.item()
        if isinstance(value, bool):
            value = int(value)
        if not isinstance(value, numbers.Real):
            raise TypeError(f"Attribute '{name}' must be a scalar number, got {value!r}.")
        self.attrs[name] = value

    def __contains__(self, name: str):
        return name in self.attrs

    def __getitem__(self, name: str):
        return self.attrs[name]


class SnapshotMetadata:

    path: Path
    groups: dict[str, MetadataGroup]

    def __init__(self, path):
        self.path = Path(path)
        self.groups = {}

    def create_group(self, name: str) -> MetadataGroup:
        if name in self.groups:
            raise ValueError(f"Group '{name}' already exists in {self.path}.")
        group = MetadataGroup(name)
        self.groups[name] = group
        return group

    def group(self, name: str) -> MetadataGroup:
        return self.groups[name]

    def save(self):
        # Update rather than overwrite other groups already on disk
        content = {}
        if self.path.exists():
            with open(self.path, "r", encoding=_UTF_8) as fp:
                content = json.load(fp)
        content.update({name: group.attrs for name, group in self.groups.items()})
        with open(self.path, "w", encoding=_UTF_8) as fp:
            json.dump(content, fp, indent=_JSON_indent, sort_keys=True)

    @classmethod
    def load(cls, path):
        metadata = cls(path)
        with open(metadata.path, "r", encoding=_UTF_8) as fp:
            content: dict = json.load(fp)
        for name, attrs in content.items():
            metadata.groups[name] = MetadataGroup(name, attrs)
        return metadata
