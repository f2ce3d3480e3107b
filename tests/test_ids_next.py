"""Tests for sibling IDs and depth-first advancing."""

from string import ascii_uppercase

from folgezettel.core.ids import next_id, next_sibling_id, starts_new_run


def test_next_sibling():
    assert next_sibling_id("1A", ["1.md", "1A.md"]) == "1B"
    assert next_sibling_id("1a2", ["1a1.md", "1a2.md", "1a3 Later.md"]) == "1a4"


def test_next_sibling_counts_itself():
    """Test that the note being advanced from is always taken."""
    assert next_sibling_id("1A", []) == "1B"
    assert next_sibling_id("1a1", []) == "1a2"


def test_next_sibling_at_root():
    """Test the degenerate root case: siblings hang off the empty parent."""
    assert next_sibling_id("1", ["1.md"]) == "B"
    assert next_sibling_id("1", ["1.md", "2.md"]) == "C"


def test_starts_new_run():
    assert starts_new_run("1a")
    assert starts_new_run("1A")
    assert starts_new_run("1ba")
    assert starts_new_run("1a1")
    assert starts_new_run("1A1")
    assert not starts_new_run("1B")
    assert not starts_new_run("1a2")
    assert not starts_new_run("1a11")
    assert not starts_new_run("11")
    assert not starts_new_run("1")
    assert not starts_new_run("")


def test_next_from_root_descends():
    """Test that a root note with no children advances to its first child."""
    assert next_id("1", []) == "1A"
    assert next_id("1", ["1.md"]) == "1A"


def test_next_descends_depth_first():
    files = ["1.md", "1A.md"]
    assert next_id("1A", files) == "1A1"
    files.append("1A1.md")
    assert next_id("1A1", files) == "1A1A"
    assert next_id("1a1", ["1a1.md"]) == "1a1a"


def test_next_skips_existing_children():
    """Test that descending picks the next free child, not the first."""
    files = ["1.md", "1A.md", "1A1.md", "1A2 Title.md"]
    assert next_id("1A", files) == "1A3"


def test_next_takes_sibling_when_it_opens_a_run():
    """Test that rolling over to a two-letter suffix ending in A takes the sibling."""
    files = ["1.md"] + [f"1{c}.md" for c in ascii_uppercase]
    assert next_id("1Z", files) == "1AA"
