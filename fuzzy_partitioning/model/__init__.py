"""
Fuzzy partitioning model: package re-exports

Public API:
  FuzzyPartitioningModel, ReportConfig,
  PartitioningModelError, EmptyPartitionError, UndefinedAverageError
"""

from .config import ReportConfig
from .errors import PartitioningModelError, EmptyPartitionError, UndefinedAverageError
from .partitioning import FuzzyPartitioningModel

__all__ = [
	"FuzzyPartitioningModel",
	"ReportConfig",
	"PartitioningModelError", "EmptyPartitionError", "UndefinedAverageError",
]
