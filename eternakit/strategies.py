"""The classic player strategies used to score RNA designs."""

from __future__ import annotations

from eternakit.features import Features
from eternakit.strategy import Strategy, cap_score, plot_penalty

__all__ = [
    "ABasicTest",
    "BerexTest",
    "CleanPlotStackCapsandSafeGC",
    "DirectionofGCPairsinMultiLoops",
    "NumofYellowNucleotidesperLengthofString",
]


class ABasicTest(Strategy):
    """Targets an AU fraction, a free energy per pair and a melting range."""

    name = "ABasicTest"
    mean = 83.5007560083
    stdev = 10.5290224709
    params = (0.423966515526, 93.0846762218, -1.87306343871, 1.15267359738,
              0.9458, 63.60, 102.0)

    def score(self, features: Features) -> float:
        p = self.params
        total_pairs = features.gc + features.gu + features.ua
        score = 100.0
        if total_pairs > 0:
            score -= abs(features.ua / total_pairs - p[0]) * p[1]
        target_fe = p[2] * total_pairs
        score -= abs(target_fe - features.fe) * p[3]

        if features.meltpoint < p[5]:
            score -= abs(features.meltpoint - p[5]) * p[4]
        elif features.meltpoint > p[6]:
            score -= abs(features.meltpoint - p[6]) * p[4]
        return score


class BerexTest(Strategy):
    """Targets G, U and C fractions, a free-energy range and a melting range."""

    name = "BerexTest"
    mean = 84.0125821249
    stdev = 8.91633847502
    params = (0.150150639777, 116.231035752, 0.068678024689, 129.231308029,
              0.195823646983, 117.625896452, -68.3488778805, -30.2069356813,
              1.12021566776, 35.4749400799, 133.662333848, 1.36225265987)

    def score(self, features: Features) -> float:
        p = self.params
        length = features.length
        score = 100.0
        score -= abs(features.g_count / length - p[0]) * p[1]
        score -= abs(features.u_count / length - p[2]) * p[3]
        score -= abs(features.c_count / length - p[4]) * p[5]

        if features.fe < p[6]:
            score -= abs(features.fe - p[6]) * p[8]
        elif features.fe > p[7]:
            score -= abs(features.fe - p[7]) * p[8]

        if features.meltpoint < p[9]:
            score -= abs(features.meltpoint - p[9]) * p[11]
        elif features.meltpoint > p[10]:
            score -= abs(features.meltpoint - p[10]) * p[11]
        return score


class CleanPlotStackCapsandSafeGC(Strategy):
    """Rewards a clean pairing plot and GC-capped helices, penalises too much GC."""

    name = "CleanPlotStackCapsandSafeGC"
    mean = 82.3365692703
    stdev = 12.050647236
    params = (0.88, 1.05, 2.10, 0.83)

    def score(self, features: Features) -> float:
        p = self.params
        npairs = features.gc + features.gu + features.ua
        penalty = plot_penalty(features, 0.0001)

        plotscore = 0.0
        gc_penalty = 0.0
        if npairs > 0:
            plotscore = 1.0 - penalty / npairs
            if features.gc / npairs > p[3]:
                gc_penalty = 1.0

        caps = cap_score(features.helices)
        return (2.0 + caps * p[1] + plotscore * p[0] - gc_penalty * p[2]) * 25


class DirectionofGCPairsinMultiLoops(Strategy):
    """Penalises multiloop closing pairs that are not oriented G-C outward."""

    name = "DirectionofGCPairsinMultiLoops"
    mean = 85.2869664088
    stdev = 26.9535204308
    params = (-5.71, -6.63)

    def score(self, features: Features) -> float:
        p = self.params
        penalty = 0.0
        for loop in features.multi_loops:
            # The position only advances past ends that were penalised.
            position = 0
            for end in loop.ends:
                bp_type = end.bp_type()
                preferred, reversed_ = ("CG", "GC") if position == 0 else ("GC", "CG")
                if bp_type == preferred:
                    continue
                penalty += p[0] if bp_type == reversed_ else p[1]
                position += 1
        return 100 + penalty


class NumofYellowNucleotidesperLengthofString(Strategy):
    """Keeps the number of AU pairs in each helix within a range set by its length."""

    name = "NumofYellowNucleotidesperLengthofString"
    mean = 91.2420911348
    stdev = 12.5663926344
    params = (10.50,)
    upper_length = (0, 1, 2, 2, 2, 3, 3, 4, 5, 4)
    lower_length = (0, 0, 0, 1, 1, 1, 2, 3, 2, 1)

    def score(self, features: Features) -> float:
        penalty = 0.0
        count = 0
        for helix in features.helices:
            stack_length = len(helix.basepairs)
            if stack_length < 2:
                continue
            count += 1
            yellow_count = sum(1 for bp in helix.basepairs if bp.is_au())

            if stack_length > 9:
                upper_limit = float(stack_length // 2 + 1)
                lower_limit = 1.0
            else:
                upper_limit = self.upper_length[stack_length]
                lower_limit = self.lower_length[stack_length]

            if upper_limit < yellow_count:
                penalty += yellow_count - upper_limit
            elif lower_limit > yellow_count:
                penalty += lower_limit - yellow_count

        if count == 0:
            return 100.0
        return 100 - self.params[0] * penalty / features.length