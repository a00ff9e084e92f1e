import pytest

from eternakit.features import BasePair, Features, Helix, MultiLoop, PairProbability
from eternakit.modified_strategies import (
    ModifiedABasicTest,
    ModifiedBerexTest,
    ModifiedCleanPlotStackCapsandSafeGC,
    ModifiedDirectionofGCPairsinMultiLoops,
    ModifiedNumofYellowNucleotidesperLengthofString,
)
from eternakit.strategies import NumofYellowNucleotidesperLengthofString


def _helix(*pairs):
    return Helix(tuple(BasePair(a, b) for a, b in pairs))


# ModifiedABasicTest

def test_modified_a_basic_perfect_when_no_pairs_and_fe_on_target():
    f = Features(fe=-1.37878787864, meltpoint=97)
    assert ModifiedABasicTest().score(f) == pytest.approx(100.0)


def test_modified_a_basic_meltpoint_outside_range_lowers_score():
    s = ModifiedABasicTest()
    inside = s.score(Features(fe=-1.37878787864, meltpoint=97))
    low = s.score(Features(fe=-1.37878787864, meltpoint=50))
    high = s.score(Features(fe=-1.37878787864, meltpoint=150))
    assert low < inside
    assert high < inside


def test_modified_a_basic_energy_target_counts_extra_pair():
    s = ModifiedABasicTest()
    f = Features(gc=2, ua=0, gu=0, fe=-1.37878787864 * 3, meltpoint=97)
    g = Features(gc=2, ua=0, gu=0, fe=-1.37878787864 * 2, meltpoint=97)
    assert s.score(f) > s.score(g)


# ModifiedBerexTest

def test_modified_berex_short_design_ignores_composition():
    s = ModifiedBerexTest()
    a = Features(length=20, g_count=20, fe=-40, meltpoint=97)
    b = Features(length=20, u_count=20, fe=-40, meltpoint=97)
    assert s.score(a) == pytest.approx(100.0)
    assert s.score(b) == pytest.approx(100.0)


def test_modified_berex_long_design_penalises_composition():
    s = ModifiedBerexTest()
    f = Features(length=31, g_count=31, fe=-40, meltpoint=97)
    assert s.score(f) < 100.0


def test_modified_berex_energy_penalty_shrinks_far_from_length_100():
    s = ModifiedBerexTest()
    near = Features(length=20, fe=-10, meltpoint=97)
    far = Features(length=400, fe=-10, meltpoint=97)
    near_ok = Features(length=20, fe=-40, meltpoint=97)
    far_ok = Features(length=400, fe=-40, meltpoint=97)
    near_penalty = s.score(near_ok) - s.score(near)
    far_penalty = s.score(far_ok) - s.score(far)
    assert near_penalty > 0
    assert far_penalty < near_penalty


def test_modified_berex_weight_exponent_is_whole_number():
    assert ModifiedBerexTest.length_weight(100) == ModifiedBerexTest.length_weight(170)
    assert ModifiedBerexTest.length_weight(171) < ModifiedBerexTest.length_weight(170)


# ModifiedCleanPlotStackCapsandSafeGC

def test_modified_clean_plot_gc_caps_raise_score():
    s = ModifiedCleanPlotStackCapsandSafeGC()
    capped = Features(gc=2, ua=2, helices=[_helix(("G", "C"), ("A", "U"), ("U", "A"), ("C", "G"))])
    bare = Features(gc=2, ua=2, helices=[_helix(("A", "U"), ("G", "C"), ("C", "G"), ("U", "A"))])
    assert s.score(capped) > s.score(bare)


def test_modified_clean_plot_all_gc_is_penalised():
    s = ModifiedCleanPlotStackCapsandSafeGC()
    all_gc = Features(gc=10, ua=0)
    mixed = Features(gc=9, ua=1)
    assert s.score(all_gc) < s.score(mixed)


def test_modified_clean_plot_wrong_pairs_in_plot_lower_score():
    s = ModifiedCleanPlotStackCapsandSafeGC()
    pairmap = {1: 4, 4: 1}
    good = Features(length=4, gc=1, pairmap=dict(pairmap),
                    dotplot=[PairProbability(1, 4, 0.9)])
    bad = Features(length=4, gc=1, pairmap=dict(pairmap),
                   dotplot=[PairProbability(1, 3, 0.9)])
    clean = Features(length=4, gc=1, pairmap=dict(pairmap))
    assert s.score(good) == pytest.approx(s.score(clean))
    assert s.score(bad) < s.score(clean)


# ModifiedDirectionofGCPairsinMultiLoops

def test_modified_direction_always_100():
    loop = MultiLoop((BasePair("A", "U"), BasePair("G", "U")))
    assert ModifiedDirectionofGCPairsinMultiLoops().score(Features(multi_loops=[loop])) == 100.0
    assert ModifiedDirectionofGCPairsinMultiLoops().score(Features()) == 100.0


# ModifiedNumofYellowNucleotidesperLengthofString

def test_modified_yellow_no_helices_is_100():
    assert ModifiedNumofYellowNucleotidesperLengthofString().score(Features(length=10)) == 100.0


def test_modified_yellow_within_limits_is_100():
    f = Features(length=10, helices=[_helix(("A", "U"), ("U", "A"))])
    assert ModifiedNumofYellowNucleotidesperLengthofString().score(f) == pytest.approx(100.0)


def test_modified_yellow_penalty_scales_with_weight():
    f = Features(length=10, helices=[_helix(("G", "C"), ("G", "C"), ("C", "G"))])
    mod = 100 - ModifiedNumofYellowNucleotidesperLengthofString().score(f)
    orig = 100 - NumofYellowNucleotidesperLengthofString().score(f)
    assert orig > 0
    assert mod / orig == pytest.approx(791.641998291 / 10.50)