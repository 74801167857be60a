from __future__ import annotations

import pytest

from mapping_engine.mappers.normalizer import normalize
from mapping_engine.mappers.similarity import (
    AFFIX_SCORE,
    COMMON_VARIATIONS,
    DISPLAY_NAME_SCORE,
    EXACT_SCORE,
    MATCH_FLOOR,
    OVERLAP_SCALE,
    SUBSTRING_SCORE,
    SYNONYM_SCORE,
    similarity,
    synonym_match,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Email Address", "emailaddress"),
        ("email_address", "emailaddress"),
        ("E-mail  Address!", "emailaddress"),
        ("  Zip/Postal Code ", "zippostalcode"),
        ("Phone #2", "phone2"),
        ("", ""),
        ("---", ""),
    ],
)
def test_normalize(raw: str, expected: str) -> None:
    assert normalize(raw) == expected


def test_confidence_constants() -> None:
    assert EXACT_SCORE == 1.0
    assert DISPLAY_NAME_SCORE == 0.95
    assert SYNONYM_SCORE == 0.9
    assert SUBSTRING_SCORE == 0.8
    assert AFFIX_SCORE == 0.7
    assert MATCH_FLOOR == 0.7
    assert OVERLAP_SCALE == 0.6


def test_exact_and_substring_rules() -> None:
    assert similarity("email", "email") == EXACT_SCORE
    assert similarity("emailaddress", "email") == SUBSTRING_SCORE
    assert similarity("email", "emailaddress") == SUBSTRING_SCORE


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("name", "mean", 0.6),
        ("tel", "let", 0.6),
        ("ab", "ba", 0.6),
        ("city", "zip", 0.15),
        ("foo", "ooo", 0.6),
        ("ooo", "foo", 0.4),
        ("abc", "xyz", 0.0),
    ],
)
def test_character_overlap_fallback_on_short_keys(a: str, b: str, expected: float) -> None:
    assert similarity(a, b) == pytest.approx(expected)


def test_overlap_fallback_never_reaches_the_floor() -> None:
    assert similarity("listen", "silent") < MATCH_FLOOR


def test_degenerate_keys() -> None:
    assert similarity("", "") == EXACT_SCORE
    assert similarity("", "email") == SUBSTRING_SCORE


def test_synonym_table_covers_common_contact_concepts() -> None:
    for concept in ("email", "phone", "firstname", "lastname", "company", "address",
                    "city", "state", "zip", "country", "website", "notes"):
        assert concept in COMMON_VARIATIONS[concept]


@pytest.mark.parametrize(
    ("column_key", "field_key", "expected"),
    [
        ("emailaddress", "email", True),
        ("mobile", "cell", True),
        ("surname", "lastname", True),
        ("postcode", "zip", True),
        ("town", "city", True),
        ("email", "phone", False),
        ("backupemail", "email", False),
    ],
)
def test_synonym_match(column_key: str, field_key: str, expected: bool) -> None:
    assert synonym_match(column_key, field_key) is expected


def test_synonym_match_with_custom_table() -> None:
    table = {"sku": ("sku", "itemcode", "productcode")}

    assert synonym_match("itemcode", "sku", table)
    assert not synonym_match("emailaddress", "email", table)
