from .metadata import MetadataGroup, SnapshotMetadata, HYDRO_GROUP
