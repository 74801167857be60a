"""
mapping_engine/mappers/field_matcher.py

Auto-matching engine proposing a CSV column -> object field mapping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Collection, Mapping, Sequence

from mapping_engine.domain.field_mapping import (
    UNASSIGNED,
    FieldDescriptor,
    FieldMapping,
    MappingEntry,
    MatchCandidate,
)
from mapping_engine.logging_utils import log_event
from mapping_engine.mappers.normalizer import normalize
from mapping_engine.mappers.similarity import (
    COMMON_VARIATIONS,
    DISPLAY_NAME_SCORE,
    EXACT_SCORE,
    MATCH_FLOOR,
    SYNONYM_SCORE,
    similarity,
    synonym_match,
)

logger = logging.getLogger(__name__)

# Import-protocol metadata columns; compared after strip() + lower().
RESERVED_COLUMNS: frozenset[str] = frozenset(
    {"id", "external_id", "object_key", "created_at", "updated_at"}
)

STRATEGY_EXACT_KEY = "exact_key"
STRATEGY_EXACT_NAME = "exact_name"
STRATEGY_SYNONYM = "synonym"
STRATEGY_FUZZY = "fuzzy"


@dataclass(frozen=True)
class MatchingThresholds:
    """
    Confidence constants used by the auto-matcher.

    `match_floor` is a hard cut-off: nothing below it is ever auto-assigned.
    """

    match_floor: float = MATCH_FLOOR
    exact_key_score: float = EXACT_SCORE
    display_name_score: float = DISPLAY_NAME_SCORE
    synonym_score: float = SYNONYM_SCORE


def is_reserved_column(column: str) -> bool:
    return column.strip().lower() in RESERVED_COLUMNS


class FieldMatcher:
    """
    Greedy, left-to-right column matcher.

    Each column takes the best still-unused field at or above the floor, so
    the resulting mapping never assigns one field to two columns.
    """

    def __init__(
        self,
        *,
        thresholds: MatchingThresholds | None = None,
        variations: Mapping[str, Sequence[str]] | None = None,
        log_decisions: bool = True,
    ) -> None:
        self._thresholds = thresholds or MatchingThresholds()
        self._variations: dict[str, tuple[str, ...]] = {
            canonical: tuple(values)
            for canonical, values in (variations or COMMON_VARIATIONS).items()
        }
        self._log_decisions = log_decisions

    def auto_match(
        self,
        columns: Sequence[str],
        fields: Sequence[FieldDescriptor],
    ) -> FieldMapping:
        """
        Seed a mapping for every non-blank column.
        """

        mapping: FieldMapping = {}
        used_keys: set[str] = set()

        for column in columns:
            if not column or not column.strip():
                continue

            if is_reserved_column(column):
                mapping[column] = UNASSIGNED
                self._log(logging.DEBUG, "column_reserved", column=column)
                continue

            match = self.find_best_match(column, fields, used_keys)
            if match is None:
                mapping[column] = UNASSIGNED
                self._log(logging.DEBUG, "column_unmatched", column=column)
                continue

            # A repeated label replaces the earlier entry; the field that entry
            # took stays consumed.
            mapping[column] = MappingEntry(field_key=match.field_key, auto_matched=True)
            used_keys.add(match.field_key)
            self._log(
                logging.DEBUG,
                "column_matched",
                column=column,
                field_key=match.field_key,
                confidence=match.confidence,
                strategy=match.strategy,
            )

        self._log(
            logging.INFO,
            "auto_match_completed",
            columns=len(mapping),
            fields=len(fields),
            matched=len(used_keys),
        )
        return mapping

    def find_best_match(
        self,
        column: str,
        fields: Sequence[FieldDescriptor],
        used_keys: Collection[str] = (),
    ) -> MatchCandidate | None:
        """
        Return the best unused field for one column, or None below the floor.

        An exact key-suffix match stops the scan. A candidate only replaces
        the current best on a strictly higher confidence, so the earlier
        field in schema order wins ties. Every strategy, exact key included,
        is held to the floor.
        """

        column_key = normalize(column)
        if not column_key:
            return None

        best: MatchCandidate | None = None
        for descriptor in fields:
            if descriptor.key in used_keys:
                continue

            key_norm = normalize(descriptor.field_name)
            name_norm = normalize(descriptor.name)

            if column_key == key_norm:
                best = self._prefer(
                    best,
                    descriptor.key,
                    self._thresholds.exact_key_score,
                    STRATEGY_EXACT_KEY,
                )
                break

            if column_key == name_norm:
                best = self._prefer(
                    best,
                    descriptor.key,
                    self._thresholds.display_name_score,
                    STRATEGY_EXACT_NAME,
                )
                continue

            if key_norm and synonym_match(column_key, key_norm, self._variations):
                best = self._prefer(
                    best,
                    descriptor.key,
                    self._thresholds.synonym_score,
                    STRATEGY_SYNONYM,
                )

            score = self._fuzzy_score(column_key, key_norm, name_norm)
            if score >= self._thresholds.match_floor:
                best = self._prefer(best, descriptor.key, score, STRATEGY_FUZZY)

        if best is not None and best.confidence >= self._thresholds.match_floor:
            return best
        return None

    @staticmethod
    def _fuzzy_score(column_key: str, key_norm: str, name_norm: str) -> float:
        # An empty key would be "contained" in every column label.
        scores = [similarity(column_key, candidate) for candidate in (key_norm, name_norm) if candidate]
        return max(scores, default=0.0)

    @staticmethod
    def _prefer(
        current: MatchCandidate | None,
        field_key: str,
        confidence: float,
        strategy: str,
    ) -> MatchCandidate:
        if current is None or current.confidence < confidence:
            return MatchCandidate(field_key=field_key, confidence=confidence, strategy=strategy)
        return current

    def _log(self, level: int, event: str, **fields: object) -> None:
        if self._log_decisions:
            log_event(logger, level, event, **fields)


def auto_match(
    columns: Sequence[str],
    fields: Sequence[FieldDescriptor],
    *,
    thresholds: MatchingThresholds | None = None,
) -> FieldMapping:
    """
    Propose a one-to-one column -> field mapping with default settings.
    """

    return FieldMatcher(thresholds=thresholds).auto_match(columns, fields)
