from __future__ import annotations

import numpy as np

from tests.fuzzing.operations import run_random_ops

it = int(input("number of iterations: "))
steps = int(input("number of operations per iteration: "))
seed = int(input("seed: "))

rng = np.random.default_rng(seed)

for i in range(it):
    run_random_ops(rng, steps)
    print(f"iteration {i + 1}/{it} ok")
