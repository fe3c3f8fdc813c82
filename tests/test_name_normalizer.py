import pytest

from name_resolution_engine.normalizers.contact_normalizer import (
    normalize_email,
    normalize_phone_number,
    split_full_name,
)
from name_resolution_engine.normalizers.name_normalizer import (
    edit_distance,
    normalize_name,
    similarity,
)

SAMPLES = [
    "",
    "   ",
    "Texas A&M",
    "  St. John's  (NY) ",
    "Miami (OH) .",
    "Louisiana\tState\nUniversity",
    "UNC-Chapel Hill",
    "William & Mary",
]


def test_normalize_name_applies_steps_in_order():
    assert normalize_name("  St. John's  (NY) ") == "st johns ny"
    assert normalize_name("UNC-Chapel Hill") == "uncchapel hill"
    assert normalize_name("William & Mary") == "william and mary"
    assert normalize_name("Texas A&M") == "texas aandm"


def test_normalize_name_ignores_case_and_punctuation():
    assert normalize_name("Texas A & M") == normalize_name("texas a and m")
    assert normalize_name("OHIO STATE.") == normalize_name("ohio state")


def test_normalize_name_handles_empty_input():
    assert normalize_name("") == ""
    assert normalize_name(None) == ""
    assert normalize_name(" ... ") == ""


@pytest.mark.parametrize("raw", SAMPLES)
def test_normalize_name_is_idempotent(raw):
    once = normalize_name(raw)
    assert normalize_name(once) == once


def test_edit_distance_basics():
    assert edit_distance("kitten", "sitting") == 3
    assert edit_distance("ohio st", "ohio state") == 3
    assert edit_distance("", "abc") == 3
    assert edit_distance("clemson", "clemson") == 0


def test_edit_distance_is_symmetric():
    pairs = [("duke", "clemson university"), ("tulsx", "tulsa"), ("", "osu")]
    for a, b in pairs:
        assert edit_distance(a, b) == edit_distance(b, a)


def test_similarity_bounds_and_identity():
    assert similarity("", "") == 1.0
    assert similarity("ohio state", "ohio state") == 1.0
    assert similarity("abc", "") == 0.0
    assert similarity("tulsx", "tulsa") == 0.8
    assert similarity("ohio st", "ohio state") == pytest.approx(0.7)


def test_normalize_phone_number_strips_country_code():
    assert normalize_phone_number("+1 (614) 555-0199") == "6145550199"
    assert normalize_phone_number("614.555.0199") == "6145550199"
    assert normalize_phone_number(None) == ""


def test_normalize_email():
    assert normalize_email("  Coach@Example.COM ") == "coach@example.com"
    assert normalize_email(None) == ""


def test_split_full_name():
    assert split_full_name("Jordan A. Smith") == ("Jordan", "Smith")
    assert split_full_name("Jordan") == ("Jordan", "")
    assert split_full_name("   ") == ("", "")
    assert split_full_name(None) == ("", "")
