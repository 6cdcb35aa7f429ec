"""Merge engine entrypoints."""

from gradlesync.engine.merger import PHASES, ModelMerger
from gradlesync.engine.progress import MergeProgress, NullMergeProgress
from gradlesync.engine.utils import subtract, subtract_mapping

__all__ = ["PHASES", "MergeProgress", "ModelMerger", "NullMergeProgress", "subtract", "subtract_mapping"]
