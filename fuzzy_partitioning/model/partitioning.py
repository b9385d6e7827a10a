"""
FuzzyPartitioningModel
----------------------
Read-only result of the FuzzyPartitioning filter. For each continuous feature
the cut points generated by the filter are stored; each cut point is the core
of a triangular fuzzy set. Categorical features are not considered.

The model owns a private copy of the mapping taken at construction:
  • keys taken through operator.index (non-integral keys raise TypeError)
  • values copied into tuples of Python floats
  • per-feature order and duplicates kept exactly as supplied
  • features held in ascending index order

Extremal queries use a deterministic tie policy: among features sharing the
extremal count, the lowest feature index wins.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
import operator
from typing import Dict, FrozenSet, Iterator, List, Mapping, Optional, Sequence, Tuple
import numpy as np
import pandas as pd

from .config import ReportConfig
from .errors import EmptyPartitionError, UndefinedAverageError


@dataclass(frozen=True, eq=False, repr=False)
class FuzzyPartitioningModel:
	"""
	Immutable mapping feature index -> cut points, with derived statistics.

	Attributes
	----------
	cores : Mapping[int, Tuple[float, ...]]
		Read-only view of the cut points of each continuous feature. An empty
		tuple marks a discarded feature (no fuzzy set was generated).
	"""
	cores: Mapping[int, Tuple[float, ...]] = field(default_factory=dict)

	def __post_init__(self) -> None:
		owned: Dict[int, Tuple[float, ...]] = {}
		for k in sorted(self.cores, key=operator.index):
			owned[operator.index(k)] = tuple(float(x) for x in self.cores[k])
		object.__setattr__(self, "cores", MappingProxyType(owned))

	@classmethod
	def from_splits(
		cls,
		splits: Sequence[Sequence[float]],
		continuous: Optional[Sequence[bool]] = None,
	) -> "FuzzyPartitioningModel":
		"""
		Build a model from a per-column list of cut-point sequences.

		Column position becomes the feature index. With a `continuous` mask,
		columns flagged False are categorical and left out of the model.
		"""
		if continuous is None:
			return cls({j: s for j, s in enumerate(splits)})
		mask = np.asarray(continuous, dtype=bool).ravel()
		if mask.size != len(splits):
			raise ValueError(
				f"from_splits: continuous mask has {mask.size} entries for {len(splits)} columns"
			)
		return cls({j: s for j, s in enumerate(splits) if mask[j]})

	def __len__(self) -> int:
		return len(self.cores)

	def __iter__(self) -> Iterator[int]:
		return iter(self.cores)

	def __contains__(self, feature: object) -> bool:
		return feature in self.cores

	def __getitem__(self, feature: int) -> Tuple[float, ...]:
		return self.cores[feature]

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, FuzzyPartitioningModel):
			return NotImplemented
		return dict(self.cores) == dict(other.cores)

	def __hash__(self) -> int:
		return hash(frozenset(self.cores.items()))

	def __reduce__(self):
		return (type(self), (dict(self.cores),))

	def __repr__(self) -> str:
		return f"FuzzyPartitioningModel({dict(self.cores)!r})"

	def __str__(self) -> str:
		return self.report()

	@property
	def num_features(self) -> int:
		"""Number of continuous features, discarded ones included."""
		return len(self.cores)

	def num_fuzzy_sets_of(self, feature: int) -> int:
		"""Number of cut points of a single feature; KeyError if unknown."""
		return len(self.cores[feature])

	def num_fuzzy_sets(self) -> int:
		"""
		Total number of cut points across all continuous features.
		Discarded features contribute 0; an empty model yields 0.
		"""
		return sum(len(c) for c in self.cores.values())

	def average_fuzzy_sets(self) -> float:
		"""
		Average number of cut points per continuous feature.

		Raises UndefinedAverageError when the model has no features.
		"""
		n = len(self.cores)
		if n == 0:
			raise UndefinedAverageError("average_fuzzy_sets: model has no features")
		return float(self.num_fuzzy_sets()) / float(n)

	def discarded_features(self) -> FrozenSet[int]:
		"""Features for which no cut points were generated."""
		return frozenset(k for k, c in self.cores.items() if len(c) == 0)

	def partitioned_features(self) -> FrozenSet[int]:
		"""Features with at least one cut point."""
		return frozenset(k for k, c in self.cores.items() if len(c) > 0)

	def max_fuzzy_sets(self) -> Tuple[int, int]:
		"""
		(feature, count) for the feature with the most cut points, discarded
		features included. Ties go to the lowest feature index.
		"""
		counts = [(k, len(c)) for k, c in self.cores.items()]
		if not counts:
			raise EmptyPartitionError("max_fuzzy_sets: model has no features")
		counts.sort(key=lambda kc: (-kc[1], kc[0]))
		return counts[0]

	def min_fuzzy_sets(self) -> Tuple[int, int]:
		"""
		(feature, count) for the feature with the fewest cut points. Discarded
		features are not considered. Ties go to the lowest feature index.
		"""
		counts = [(k, len(c)) for k, c in self.cores.items() if len(c) > 0]
		if not counts:
			raise EmptyPartitionError("min_fuzzy_sets: model has no partitioned features")
		counts.sort(key=lambda kc: (kc[1], kc[0]))
		return counts[0]

	def to_dict(self) -> Dict[int, List[float]]:
		"""
		Plain-container export: a fresh dict of int -> list[float].
		Mutating the result never reaches the model.
		"""
		return {int(k): [float(x) for x in c] for k, c in self.cores.items()}

	def to_arrays(self) -> Dict[int, np.ndarray]:
		"""NumPy export: a fresh float64 array per feature."""
		return {int(k): np.array(c, dtype=np.float64) for k, c in self.cores.items()}

	def to_frame(self) -> pd.DataFrame:
		"""One row per feature, ascending feature index."""
		rows = [
			{
				"feature": int(k),
				"num_fuzzy_sets": len(c),
				"discarded": len(c) == 0,
				"cores": tuple(c),
			}
			for k, c in self.cores.items()
		]
		return pd.DataFrame(rows, columns=["feature", "num_fuzzy_sets", "discarded", "cores"])

	def report(self, config: Optional[ReportConfig] = None) -> str:
		"""
		Human-readable summary: feature counts, then one line per feature in
		ascending feature-index order, `<feature> -> [<cut points>]`.
		"""
		cfg = config if config is not None else ReportConfig()
		n = len(self.cores)
		n_disc = len(self.discarded_features())
		lines = [f"Number of continuous features {n} ({n - n_disc} partitioned and {n_disc} discarded):"]
		for k in sorted(self.cores):
			lines.append(f"{cfg.indent}{k} -> {cfg.format_cores(self.cores[k])}")
		return "\n".join(lines) + "\n"
