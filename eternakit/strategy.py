"""The base class of design strategies and the pieces they share."""

from __future__ import annotations

import abc
from itertools import islice
from typing import Iterable

from eternakit.features import Features, Helix


class Strategy(abc.ABC):
    """A named rule that gives a design a score, higher being better."""

    name: str = ""
    mean: float = 0.0
    stdev: float = 0.0
    params: tuple[float, ...] = ()

    @abc.abstractmethod
    def score(self, features: Features) -> float:
        """Score the design described by ``features``."""


def _helix_cap_score(helix: Helix) -> float:
    bps = helix.basepairs
    n = len(bps)
    if n == 0:
        return 0.0
    if n == 1:
        return 1.0 if bps[0].is_gc() else 0.0
    if n == 2:
        return sum(0.5 for bp in bps if bp.is_gc())
    if n == 3:
        return sum(0.4 for bp in bps if bp.is_gc())
    weighted = ((bps[0], 1.0 / 3.0), (bps[1], 1.0 / 6.0),
                (bps[-2], 1.0 / 6.0), (bps[-1], 1.0 / 3.0))
    return sum(weight for bp, weight in weighted if bp.is_gc())


def cap_score(helices: Iterable[Helix]) -> float:
    """Mean over helices of how well their ends are capped by GC pairs."""
    scores = [_helix_cap_score(h) for h in helices]
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def plot_penalty(features: Features, threshold: float) -> float:
    """Total probability of predicted pairs, at or above ``threshold``, not in the target."""
    entries = islice(features.dotplot, features.length * features.length)
    return sum(
        entry.p
        for entry in entries
        if entry.p >= threshold and features.pairmap.get(entry.i) != entry.j
    )