"""Random fixed-size subsets of the candidate set, as boolean membership rows.

Each row of the result marks exactly k of n candidates, drawn uniformly
without replacement; rows are independent and may repeat.

Draws are generated in chunks of CHUNK_SIZE. Chunk i gets its own generator
spawned from the master seed sequence at index i, so the output for a given
seed is the same whatever the worker count.
"""

from concurrent.futures import ThreadPoolExecutor

import numpy as np

from mpd_palette.core.errors import InvalidParameterError, InvalidSubsetSizeError

CHUNK_SIZE = 1024

RandomSource = int | np.random.Generator | np.random.SeedSequence | None


def seed_sequence(rng: RandomSource) -> np.random.SeedSequence:
    """Normalise a seed, generator or seed sequence into a SeedSequence.

    None draws entropy from the OS. A Generator is consumed for one value.
    """
    if isinstance(rng, np.random.SeedSequence):
        return rng
    if isinstance(rng, np.random.Generator):
        return np.random.SeedSequence(int(rng.integers(0, 2**63)))
    if rng is None:
        return np.random.SeedSequence()
    if isinstance(rng, bool) or not isinstance(rng, (int, np.integer)):
        raise InvalidParameterError(f'seed must be a non-negative integer, got {rng!r}')
    if rng < 0:
        raise InvalidParameterError(f'seed must be a non-negative integer, got {rng}')
    return np.random.SeedSequence(int(rng))


def _sample_chunk(n: int, k: int, count: int, seq: np.random.SeedSequence) -> np.ndarray:
    gen = np.random.default_rng(seq)
    keys = gen.random((count, n))
    # First k positions of a random permutation form a uniform k-subset
    picks = np.argsort(keys, axis=1)[:, :k]
    mask = np.zeros((count, n), dtype=bool)
    np.put_along_axis(mask, picks, True, axis=1)
    return mask


def sample_subsets(n: int, k: int, nreps: int, rng: RandomSource = None, workers: int = 1) -> np.ndarray:
    """Draw `nreps` k-subsets of range(n). Returns a (nreps, n) bool array."""
    if k < 2 or k > n:
        raise InvalidSubsetSizeError(f'Subset size must be between 2 and {n}, got {k}')
    if nreps < 1:
        raise InvalidParameterError(f'nreps must be a positive integer, got {nreps}')
    if workers < 1:
        raise InvalidParameterError(f'workers must be a positive integer, got {workers}')

    sizes = [CHUNK_SIZE] * (nreps // CHUNK_SIZE)
    if nreps % CHUNK_SIZE:
        sizes.append(nreps % CHUNK_SIZE)
    children = seed_sequence(rng).spawn(len(sizes))

    if workers == 1 or len(sizes) == 1:
        chunks = [_sample_chunk(n, k, size, seq) for size, seq in zip(sizes, children)]
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            # map() yields in submission order, i.e. by draw index
            chunks = list(pool.map(lambda job: _sample_chunk(n, k, *job), zip(sizes, children)))
    return np.concatenate(chunks, axis=0)
