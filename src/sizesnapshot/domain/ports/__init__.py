from .build_runner import BuildRunnerPort
from .size_source import SizeSourcePort
from .snapshot_store import SnapshotStorePort

__all__ = [
    "BuildRunnerPort",
    "SizeSourcePort",
    "SnapshotStorePort",
]
