"""Sequence and structure features that design strategies score."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

_GC = frozenset({("G", "C"), ("C", "G")})
_AU = frozenset({("A", "U"), ("U", "A")})
_GU = frozenset({("G", "U"), ("U", "G")})


@dataclass(frozen=True)
class BasePair:
    """Two paired residues by type, with their optional 1-based positions."""

    res1: str
    res2: str
    i: Optional[int] = None
    j: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "res1", self.res1.upper())
        object.__setattr__(self, "res2", self.res2.upper())

    def is_gc(self) -> bool:
        """True for a G-C or C-G pair."""
        return (self.res1, self.res2) in _GC

    def is_au(self) -> bool:
        """True for an A-U or U-A pair."""
        return (self.res1, self.res2) in _AU

    def is_gu(self) -> bool:
        """True for a G-U or U-G wobble pair."""
        return (self.res1, self.res2) in _GU

    def bp_type(self) -> str:
        """The pair's residue types in order, such as ``"GC"`` or ``"CG"``."""
        return self.res1 + self.res2


@dataclass(frozen=True)
class Helix:
    """A run of stacked base pairs, in order along the helix."""

    basepairs: tuple[BasePair, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "basepairs", tuple(self.basepairs))


@dataclass(frozen=True)
class MultiLoop:
    """A junction of several helices, described by its closing base pairs."""

    ends: tuple[BasePair, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "ends", tuple(self.ends))


@dataclass(frozen=True)
class PairProbability:
    """Probability ``p`` that residues ``i`` and ``j`` pair."""

    i: int
    j: int
    p: float


@dataclass
class Features:
    """Everything a strategy needs to know about a designed sequence."""

    length: int = 0
    a_count: int = 0
    c_count: int = 0
    g_count: int = 0
    u_count: int = 0
    gu: float = 0
    gc: float = 0
    ua: float = 0
    meltpoint: float = 97
    fe: float = 0
    dotplot: list[PairProbability] = field(default_factory=list)
    pairmap: dict[int, int] = field(default_factory=dict)
    helices: list[Helix] = field(default_factory=list)
    multi_loops: list[MultiLoop] = field(default_factory=list)
    structure: str = ""

    def count_sequence(self, sequence: str) -> None:
        """Set the length and per-nucleotide counts from ``sequence``."""
        seq = sequence.upper()
        self.length = len(seq)
        self.a_count = seq.count("A")
        self.c_count = seq.count("C")
        self.g_count = seq.count("G")
        self.u_count = seq.count("U")

    def count_basepairs(self, basepairs: Iterable[BasePair]) -> None:
        """Set the GC, AU and GU pair counts and the pair map from ``basepairs``."""
        pairs: Sequence[BasePair] = list(basepairs)
        self.gc = sum(1 for bp in pairs if bp.is_gc())
        self.ua = sum(1 for bp in pairs if bp.is_au())
        self.gu = sum(1 for bp in pairs if bp.is_gu())
        for bp in pairs:
            if bp.i is not None and bp.j is not None:
                self.pairmap[bp.i] = bp.j
                self.pairmap[bp.j] = bp.i