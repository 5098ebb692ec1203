from __future__ import annotations

import numpy as np
import pytest

from tests.fuzzing.operations import run_random_ops


@pytest.mark.fuzz
@pytest.mark.parametrize("seed", range(20))
def test_random_ops_match_dict_baseline(seed):
    run_random_ops(np.random.default_rng(seed), steps=500)


def test_random_ops_smoke():
    run_random_ops(np.random.default_rng(0), steps=50)
