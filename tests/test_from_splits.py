from __future__ import annotations

import numpy as np
import pytest

from fuzzy_partitioning import FuzzyPartitioningModel, from_splits


def test_column_position_becomes_feature_index():
	m = from_splits([np.array([0.0, 0.5, 1.0]), [], [2.0, 4.0, 6.0]])
	assert m.to_dict() == {0: [0.0, 0.5, 1.0], 1: [], 2: [2.0, 4.0, 6.0]}
	assert m.discarded_features() == {1}


def test_categorical_columns_are_left_out():
	splits = [[0.0, 1.0, 2.0], [], [], [3.0, 4.0, 5.0]]
	m = FuzzyPartitioningModel.from_splits(splits, continuous=[True, False, True, True])
	assert list(m) == [0, 2, 3]
	assert m.discarded_features() == {2}
	assert 1 not in m


def test_mask_length_mismatch_raises():
	with pytest.raises(ValueError):
		from_splits([[1.0], [2.0]], continuous=[True])
