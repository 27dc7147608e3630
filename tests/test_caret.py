import pytest

from tagspan.caret import (
    CaretDirection,
    RunBoundary,
    plain_to_structured,
    remap_caret,
    run_boundaries,
    structured_to_plain,
)
from tagspan.segmentation import segment

SAMPLE_LINE = "@you #hello there #welcome to @ our"


def test_plain_to_structured_sample_caret():
    """Plain caret 28 lands on structured offset 39 in the sample line."""
    assert plain_to_structured(segment(SAMPLE_LINE), 28) == 39


def test_structured_to_plain_sample_caret():
    assert structured_to_plain(segment(SAMPLE_LINE), 39) == 28


def test_boundary_caret_stays_in_earlier_run():
    spans = segment("@you rest")
    # Offset 4 is the end of "@you"; it belongs to the first run.
    assert plain_to_structured(spans, 4) == 5
    assert plain_to_structured(spans, 5) == 8


def test_offsets_past_the_end_use_the_last_run():
    spans = segment("#a b")
    assert plain_to_structured(spans, 4) == 7
    assert plain_to_structured(spans, 6) == 9
    assert structured_to_plain(spans, 9) == 6


def test_empty_line_leaves_offset_unchanged():
    assert plain_to_structured([], 0) == 0
    assert structured_to_plain([], 0) == 0


def test_run_boundaries_account_for_slots():
    spans = segment("@you #hi")
    assert list(run_boundaries(spans)) == [
        RunBoundary(index=0, start=1, end=5),
        RunBoundary(index=1, start=7, end=8),
        RunBoundary(index=2, start=10, end=13),
    ]


@pytest.mark.parametrize(
    "line",
    [SAMPLE_LINE, "plain only", "#a", "@x #y z", " #lead @trail"],
)
def test_caret_round_trip(line: str):
    spans = segment(line)
    for offset in range(len(line) + 1):
        structured = plain_to_structured(spans, offset)
        assert structured_to_plain(spans, structured) == offset


def test_remap_caret_dispatches_on_direction():
    spans = segment(SAMPLE_LINE)
    assert remap_caret(spans, 28) == 39
    assert remap_caret(spans, 39, CaretDirection.STRUCTURED_TO_PLAIN) == 28
    assert remap_caret(spans, 39, "structured_to_plain") == 28


def test_remap_caret_rejects_unknown_direction():
    with pytest.raises(ValueError):
        remap_caret(segment("#a"), 0, "sideways")
