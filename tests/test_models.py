import dataclasses

import pytest

from chordline.models import Segment


def test_segment_stores_chord_and_text():
    seg = Segment(chord="Am", text="Hello ")
    assert seg.chord == "Am"
    assert seg.text == "Hello "


def test_segment_none_chord():
    seg = Segment(chord=None, text="Oh ")
    assert seg.chord is None


def test_segment_text_defaults_to_empty():
    assert Segment(chord="G").text == ""


def test_segment_is_immutable():
    seg = Segment(chord="Am", text="x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        seg.chord = "G"


def test_segments_compare_by_value():
    assert Segment("Am", "baby") == Segment("Am", "baby")
    assert Segment("Am", "baby") != Segment(None, "baby")
