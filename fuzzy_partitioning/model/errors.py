"""Error taxonomy for queries over a fuzzy partitioning model."""

from __future__ import annotations


class PartitioningModelError(Exception):
	"""Root of every error raised by FuzzyPartitioningModel queries."""


class EmptyPartitionError(PartitioningModelError, ValueError):
	"""An extremal query (max, or min over partitioned features) has no candidate feature."""


class UndefinedAverageError(PartitioningModelError, ZeroDivisionError):
	"""The average number of fuzzy sets was requested over zero features."""
