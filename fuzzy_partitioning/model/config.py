"""
Presentation configuration for the textual report of a partitioning model.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class ReportConfig:
	"""
	Layout of FuzzyPartitioningModel.report().

	indent    : prefix of every per-feature line
	precision : decimals used for cut points; None keeps repr(float)
	"""
	indent: str = "\t"
	precision: Optional[int] = None

	def __post_init__(self) -> None:
		if self.precision is not None and int(self.precision) < 0:
			raise ValueError(f"ReportConfig: precision must be >= 0, got {self.precision}")

	def format_core(self, x: float) -> str:
		if self.precision is None:
			return repr(float(x))
		return f"{float(x):.{int(self.precision)}f}"

	def format_cores(self, cores: Sequence[float]) -> str:
		"""Render a cut-point sequence as `[a, b, ...]`."""
		return "[" + ", ".join(self.format_core(x) for x in cores) + "]"
