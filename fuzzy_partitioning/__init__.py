"""
Top-level re-exports for the fuzzy partitioning model.

Public API (function-shaped re-exports for callers)
---------------------------------------------------
FuzzyPartitioningModel(cores)                     -> immutable model
from_splits(splits, continuous=None)              -> FuzzyPartitioningModel
ReportConfig(indent="\\t", precision=None)         -> report layout
"""

from .model import (
	FuzzyPartitioningModel,
	ReportConfig,
	PartitioningModelError,
	EmptyPartitionError,
	UndefinedAverageError,
)

from_splits = FuzzyPartitioningModel.from_splits

__all__ = [
	"FuzzyPartitioningModel", "from_splits", "ReportConfig",
	"PartitioningModelError", "EmptyPartitionError", "UndefinedAverageError",
]
