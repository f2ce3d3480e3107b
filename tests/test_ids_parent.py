"""Tests for parent ID extraction."""

from folgezettel.core.ids import parent_id, trailing_suffix
from folgezettel.core.model import Suffix


def test_parent_strips_trailing_letters():
    assert parent_id("1a") == "1"
    assert parent_id("1ab") == "1"
    assert parent_id("1A2B") == "1A2"


def test_parent_strips_trailing_digits():
    assert parent_id("1a2") == "1a"
    assert parent_id("1A23") == "1A"


def test_parent_of_single_run_is_root():
    """Test that single-run IDs yield the empty root parent."""
    assert parent_id("1") == ""
    assert parent_id("12") == ""
    assert parent_id("a") == ""
    assert parent_id("") == ""


def test_trailing_suffix():
    assert trailing_suffix("1a2") == Suffix("digits", "2")
    assert trailing_suffix("1Ab") == Suffix("letters", "Ab")
    assert trailing_suffix("") is None
    assert trailing_suffix("1a_") is None
