# renderer/sampler.py
from typing import Iterator, Tuple
import numpy as np

def stratified_offsets(aa: int, rng) -> Iterator[Tuple[float, float]]:
    """
    Yield aa*aa sub-pixel offsets in [0, 1)^2, one per cell of an aa x aa grid.

    With aa == 1 the single sample sits exactly on the pixel center and the
    generator is never consumed, so the default render has no grain.
    """
    aa = max(1, int(aa))
    for sy in range(aa):
        for sx in range(aa):
            if aa == 1:
                yield 0.5, 0.5
            else:
                u = (sx + rng.random()) / aa
                v = (sy + rng.random()) / aa
                yield u, v

def row_generator(seed: int, row: int) -> np.random.Generator:
    """Independent, reproducible random stream for one image row."""
    return np.random.default_rng([seed, row])
