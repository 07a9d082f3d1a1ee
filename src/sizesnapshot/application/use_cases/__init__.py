from .create_snapshot import CreateSizeSnapshotUseCase, merge_entries

__all__ = [
    "CreateSizeSnapshotUseCase",
    "merge_entries",
]
