"""Operations on restaurant lists."""

from .merge import (
    MergeCommand,
    MergePreconditions,
    MergeResult,
    MergeService,
    merge_lists,
)

__all__ = [
    "MergeCommand",
    "MergePreconditions",
    "MergeResult",
    "MergeService",
    "merge_lists",
]
