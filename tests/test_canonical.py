import pytest

from ecfmp.canonical import CanonicalFlowMeasureInfo


def test_it_splits_identifier_and_revision():
    info = CanonicalFlowMeasureInfo("EGTT05A-2")
    assert info.identifier == "EGTT05A"
    assert info.revision == 2


def test_identifier_without_separator_is_kept_whole_with_revision_zero():
    info = CanonicalFlowMeasureInfo("EGTT05A")
    assert info.identifier == "EGTT05A"
    assert info.revision == 0


def test_non_numeric_revision_is_zero():
    info = CanonicalFlowMeasureInfo("EHAA15A-B")
    assert info.identifier == "EHAA15A"
    assert info.revision == 0


def test_only_last_separator_is_used():
    info = CanonicalFlowMeasureInfo("EG-TT05A-3")
    assert info.identifier == "EG-TT05A"
    assert info.revision == 3


def test_leading_digits_of_revision_are_parsed():
    assert CanonicalFlowMeasureInfo("EGTT05A-4x").revision == 4


def test_empty_revision_is_zero():
    info = CanonicalFlowMeasureInfo("EGTT05A-")
    assert info.identifier == "EGTT05A"
    assert info.revision == 0


def test_out_of_range_revision_raises():
    with pytest.raises(OverflowError):
        CanonicalFlowMeasureInfo("EGTT05A-99999999999999")


def test_later_revision_is_after():
    assert CanonicalFlowMeasureInfo("EGTT05A-2").is_after(CanonicalFlowMeasureInfo("EGTT05A-1"))


def test_later_revision_is_after_unrevised():
    assert CanonicalFlowMeasureInfo("EGTT05A-1").is_after(CanonicalFlowMeasureInfo("EGTT05A"))


def test_earlier_revision_is_not_after():
    assert not CanonicalFlowMeasureInfo("EGTT05A-1").is_after(CanonicalFlowMeasureInfo("EGTT05A-2"))


def test_same_revision_is_not_after():
    assert not CanonicalFlowMeasureInfo("EGTT05A-2").is_after(CanonicalFlowMeasureInfo("EGTT05A-2"))


def test_different_identifier_is_not_after():
    assert not CanonicalFlowMeasureInfo("EGTT06A-3").is_after(CanonicalFlowMeasureInfo("EGTT05A-1"))


def test_equal_infos_compare_equal():
    first = CanonicalFlowMeasureInfo("EGTT05A-2")
    second = CanonicalFlowMeasureInfo("EGTT05A-2")
    later = CanonicalFlowMeasureInfo("EGTT05A-3")
    assert first == second
    assert (first == later) is False
    assert (first.identifier, first.revision) == ("EGTT05A", 2)