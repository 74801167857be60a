"""
mapping_engine/mappers/similarity.py

Confidence scoring between normalized column and field keys.
"""

from __future__ import annotations

from typing import Mapping, Sequence

EXACT_SCORE = 1.0
DISPLAY_NAME_SCORE = 0.95
SYNONYM_SCORE = 0.9
SUBSTRING_SCORE = 0.8
AFFIX_SCORE = 0.7
OVERLAP_SCALE = 0.6
MATCH_FLOOR = 0.7

# Canonical concept -> accepted normalized variants.
COMMON_VARIATIONS: dict[str, tuple[str, ...]] = {
    "email": ("email", "emailaddress", "mail", "emailid"),
    "phone": ("phone", "phonenumber", "telephone", "tel", "mobile", "cell"),
    "name": ("name", "fullname", "customername", "clientname"),
    "firstname": ("firstname", "first", "fname", "givenname"),
    "lastname": ("lastname", "last", "lname", "surname", "familyname"),
    "company": ("company", "companyname", "organization", "org", "business"),
    "address": ("address", "streetaddress", "street"),
    "city": ("city", "town"),
    "state": ("state", "province", "region"),
    "zip": ("zip", "zipcode", "postalcode", "postcode"),
    "country": ("country", "countryname"),
    "website": ("website", "url", "web", "site"),
    "notes": ("notes", "note", "comments", "comment", "description"),
}


def similarity(a: str, b: str) -> float:
    """
    Score how likely two normalized keys name the same concept.

    The first rule that applies wins: equality, containment, prefix/suffix,
    then a character-overlap ratio scaled down to at most OVERLAP_SCALE.
    The overlap ratio ignores character order, so short keys built from the
    same letters can score surprisingly high.
    """

    if a == b:
        return EXACT_SCORE
    if a in b or b in a:
        return SUBSTRING_SCORE

    shorter, longer = (a, b) if len(a) < len(b) else (b, a)
    if longer.startswith(shorter) or longer.endswith(shorter):
        return AFFIX_SCORE

    matches = sum(1 for char in shorter if char in longer)
    return matches / len(longer) * OVERLAP_SCALE


def synonym_match(
    column_key: str,
    field_key: str,
    variations: Mapping[str, Sequence[str]] | None = None,
) -> bool:
    """
    Return True when the column key is a known variant of a concept that the
    field key either names canonically or is itself a variant of.
    """

    for canonical, variants in (variations or COMMON_VARIATIONS).items():
        if column_key not in variants:
            continue
        if field_key == canonical or field_key in variants:
            return True
    return False
