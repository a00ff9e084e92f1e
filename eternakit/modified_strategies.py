"""Retuned versions of the classic player strategies."""

from __future__ import annotations

import math

from eternakit.features import Features
from eternakit.strategies import NumofYellowNucleotidesperLengthofString
from eternakit.strategy import Strategy, cap_score, plot_penalty

__all__ = [
    "ModifiedABasicTest",
    "ModifiedBerexTest",
    "ModifiedCleanPlotStackCapsandSafeGC",
    "ModifiedDirectionofGCPairsinMultiLoops",
    "ModifiedNumofYellowNucleotidesperLengthofString",
]


class ModifiedABasicTest(Strategy):
    """Like ABasicTest, with refitted weights and one extra pair in the energy target."""

    name = "ModifiedABasicTest"
    mean = 83.5007560083
    stdev = 10.5290224709
    params = (0.303497971269, 92.9893755247, -1.37878787864, 0.512804062262,
              0.477932936507, 84.4793979751, 124.345433009)

    def score(self, features: Features) -> float:
        p = self.params
        total_pairs = features.gc + features.gu + features.ua
        score = 100.0
        if total_pairs > 0:
            score -= abs(features.ua / total_pairs - p[0]) * p[1]
        target_fe = p[2] * (total_pairs + 1)
        score -= abs(target_fe - features.fe) * p[3]

        if features.meltpoint < p[5]:
            score -= abs(features.meltpoint - p[5]) * p[4]
        elif features.meltpoint > p[6]:
            score -= abs(features.meltpoint - p[6]) * p[4]
        return score


class ModifiedBerexTest(Strategy):
    """Like BerexTest, but composition only counts for long designs and the
    energy and melting terms are weighted by how close the length is to 100."""

    name = "ModifiedBerexTest"
    mean = 84.0125821249
    stdev = 8.91633847502
    params = (0.150150639777, 116.231035752, 0.068678024689, 129.231308029,
              0.195823646983, 117.625896452, -68.3488778805, -30.2069356813,
              1.12021566776, 35.4749400799, 133.662333848, 1.36225265987)

    @staticmethod
    def length_weight(length: int) -> float:
        """Weight of the energy and melting terms; the exponent is a whole number."""
        offset = length - 100
        return math.exp(-((offset * offset) // 5000)) / math.sqrt(2 * 3.14 * 1) * 2.5

    def score(self, features: Features) -> float:
        p = self.params
        length = features.length
        score = 100.0

        if length > 30:
            score -= abs(features.g_count / length - p[0]) * p[1]
            score -= abs(features.u_count / length - p[2]) * p[3]
            score -= abs(features.c_count / length - p[4]) * p[5]

        weight = self.length_weight(length)
        if features.fe < p[6]:
            score -= abs(features.fe - p[6]) * p[8] * weight
        elif features.fe > p[7]:
            score -= abs(features.fe - p[7]) * p[8] * weight

        if features.meltpoint < p[9]:
            score -= abs(features.meltpoint - p[9]) * p[11] * weight
        elif features.meltpoint > p[10]:
            score -= abs(features.meltpoint - p[10]) * p[11] * weight
        return score


class ModifiedCleanPlotStackCapsandSafeGC(Strategy):
    """Like CleanPlotStackCapsandSafeGC, refitted and with a smoothed plot score."""

    name = "ModifiedCleanPlotStackCapsandSafeGC"
    mean = 82.3365692703
    stdev = 12.050647236
    params = (0.100135909783, 1.76372839803, 3.11085515568, 0.966424875922)

    def score(self, features: Features) -> float:
        p = self.params
        npairs = features.gc + features.gu + features.ua
        penalty = plot_penalty(features, 0.0001)

        plotscore = 1.0 - penalty / (npairs + 1)
        gc_penalty = 0.0
        if npairs > 0 and features.gc / npairs > p[3]:
            gc_penalty = 1.0

        caps = cap_score(features.helices)
        return (2.0 + caps * p[1] + plotscore * p[0] - gc_penalty * p[2]) * 50


class ModifiedDirectionofGCPairsinMultiLoops(Strategy):
    """A neutral version of DirectionofGCPairsinMultiLoops: every design scores 100."""

    name = "ModifiedDirectionofGCPairsinMultiLoops"
    mean = 85.2869664088
    stdev = 26.9535204308

    def score(self, features: Features) -> float:
        return 100.0


class ModifiedNumofYellowNucleotidesperLengthofString(
    NumofYellowNucleotidesperLengthofString
):
    """NumofYellowNucleotidesperLengthofString with a much heavier penalty weight."""

    name = "ModifiedNumofYellowNucleotidesperLengthofString"
    params = (791.641998291,)

    def score(self, features: Features) -> float:
        return super().score(features)