"""Tests for keyword scheme matching."""

from types import SimpleNamespace

from sahayak.db.models import SchemeCategory
from sahayak.services.matching import match_schemes, matched_categories


def _scheme(scheme_id, category, state=None):
    return SimpleNamespace(id=scheme_id, category=category, state=state)


SCHEMES = [
    _scheme("pm-kisan", "agriculture"),
    _scheme("kisan-credit", "agriculture"),
    _scheme("soil-card", "agriculture"),
    _scheme("crop-insurance", "agriculture"),
    _scheme("pmay", "housing"),
    _scheme("ladki-bahin", "women", state="Maharashtra"),
    _scheme("kanya-sumangala", "women", state="Uttar Pradesh"),
]


def test_categories_from_hindi_and_english():
    assert matched_categories("मैं किसान हूं") == [SchemeCategory.AGRICULTURE]
    assert matched_categories("I need a HOUSE") == [SchemeCategory.HOUSING]
    assert matched_categories("hello") == []


def test_match_by_category_keeps_candidate_order():
    assert match_schemes("I want a home", SCHEMES) == ["pmay"]


def test_match_is_capped():
    assert match_schemes("farmer schemes", SCHEMES) == ["pm-kisan", "kisan-credit", "soil-card"]
    assert match_schemes("farmer schemes", SCHEMES, limit=1) == ["pm-kisan"]


def test_no_keywords_no_match():
    assert match_schemes("what is the weather", SCHEMES) == []


def test_occupation_widens_keywords():
    assert match_schemes("what can I get?", SCHEMES, {"occupation": "farmer"})[0] == "pm-kisan"


def test_state_excludes_other_state_schemes():
    matched = match_schemes("schemes for women", SCHEMES, {"state": "maharashtra"})

    assert matched == ["ladki-bahin"]


def test_central_schemes_match_any_state():
    assert match_schemes("housing", SCHEMES, {"state": "Kerala"}) == ["pmay"]


def test_duplicate_ids_are_returned_once():
    schemes = [_scheme("pmay", "housing"), _scheme("pmay", "housing")]

    assert match_schemes("house", schemes) == ["pmay"]
