"""Pairwise perceptual distances: Euclidean distance between CIE LAB coordinates."""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from mpd_palette.core.colourspace import hex_to_rgb, rgb_to_lab


@dataclass(frozen=True, eq=False)
class DistanceMatrix:
    """Symmetric distance matrix indexed by candidate position and hex code.

    `values` is read-only once built. Duplicate hex codes keep their own rows;
    `lookup` resolves a name to its first position.
    """

    names: tuple[str, ...]
    lab: np.ndarray  # (N, 3)
    values: np.ndarray  # (N, N)

    def __len__(self) -> int:
        return len(self.names)

    def index(self, name: str) -> int:
        return self.names.index(name)

    def lookup(self, a: str, b: str) -> float:
        return float(self.values[self.index(a), self.index(b)])

    def max_pair(self) -> tuple[str, str, float]:
        """Return the two most distant colours and their distance."""
        i, j = np.unravel_index(int(np.argmax(self.values)), self.values.shape)
        i, j = sorted((int(i), int(j)))
        return self.names[i], self.names[j], float(self.values[i, j])


def pairwise_distances(lab: np.ndarray) -> np.ndarray:
    """Full (N, N) Euclidean distance matrix over rows of `lab`."""
    lab = np.asarray(lab, dtype=float)
    diffs = lab[:, None, :] - lab[None, :, :]
    dist = np.linalg.norm(diffs, axis=-1)
    # Force exact symmetry and a zero diagonal
    dist = (dist + dist.T) / 2.0
    np.fill_diagonal(dist, 0.0)
    return dist


def build_distance_matrix(palette: Sequence[str]) -> DistanceMatrix:
    """Convert every colour to LAB and compute all pairwise distances."""
    rgbs = [hex_to_rgb(h) for h in palette]
    lab = rgb_to_lab(rgbs)
    values = pairwise_distances(lab)
    lab.setflags(write=False)
    values.setflags(write=False)
    return DistanceMatrix(names=tuple(h.strip() for h in palette), lab=lab, values=values)
