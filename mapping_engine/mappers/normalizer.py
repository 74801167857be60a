"""
mapping_engine/mappers/normalizer.py

Canonical comparison keys for column labels and field names.
"""

from __future__ import annotations

import re

_SEPARATOR_RUNS = re.compile(r"[\s_\-]+")
_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize(text: str) -> str:
    """
    Fold a free-text label into a comparison key.

    `"Email Address"`, `"email_address"` and `"E-mail address!"` all become
    `emailaddress`. Empty input yields an empty key.
    """

    lowered = text.lower()
    return _NON_ALNUM.sub("", _SEPARATOR_RUNS.sub("", lowered))
