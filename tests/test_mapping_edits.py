from __future__ import annotations

from mapping_engine.domain.field_mapping import UNASSIGNED, FieldDescriptor, MappingEntry, MappingSummary
from mapping_engine.mappers.field_matcher import auto_match
from mapping_engine.mappers.mapping_edits import get_available_fields, set_mapping_entry, summarize_mapping
from mapping_engine.validators.mapping_validator import validate

FIELDS = [
    FieldDescriptor(key="obj.contact.email", name="Email", required=True),
    FieldDescriptor(key="obj.contact.phone", name="Phone"),
    FieldDescriptor(key="obj.contact.city", name="City"),
]


def test_user_edit_replaces_one_entry_and_clears_auto_flag() -> None:
    original = {"Email": MappingEntry(field_key="obj.contact.email", auto_matched=True), "Town": UNASSIGNED}

    edited = set_mapping_entry(original, "Town", "obj.contact.city")

    assert edited["Town"] == MappingEntry(field_key="obj.contact.city", auto_matched=False)
    assert edited["Email"] is original["Email"]
    assert original["Town"] == UNASSIGNED


def test_user_can_skip_a_column() -> None:
    original = {"Email": MappingEntry(field_key="obj.contact.email", auto_matched=True)}

    assert set_mapping_entry(original, "Email", None)["Email"] == UNASSIGNED
    assert set_mapping_entry(original, "Email", "")["Email"] == UNASSIGNED


def test_edit_creating_duplicate_is_caught_on_revalidation() -> None:
    mapping = auto_match(["Email Address", "Backup Email"], FIELDS)
    assert validate(mapping, FIELDS).can_proceed

    edited = set_mapping_entry(mapping, "Backup Email", "obj.contact.email")
    report = validate(edited, FIELDS)

    assert not report.can_proceed
    assert report.errors == ('Multiple CSV columns are mapped to "Email". Each field can only be mapped once.',)


def test_available_fields_keep_the_current_columns_own_field() -> None:
    mapping = {
        "Email": MappingEntry(field_key="obj.contact.email", auto_matched=True),
        "Phone": MappingEntry(field_key="obj.contact.phone", auto_matched=True),
        "Town": UNASSIGNED,
    }

    assert [f.key for f in get_available_fields(mapping, FIELDS, "Email")] == [
        "obj.contact.email",
        "obj.contact.city",
    ]
    assert [f.key for f in get_available_fields(mapping, FIELDS, "Town")] == ["obj.contact.city"]


def test_summary_counts() -> None:
    mapping = {
        "Email": MappingEntry(field_key="obj.contact.email", auto_matched=True),
        "Cell": MappingEntry(field_key="obj.contact.phone", auto_matched=False),
        "id": UNASSIGNED,
    }

    assert summarize_mapping(mapping) == MappingSummary(mapped_count=2, total_columns=3, auto_matched_count=1)
    assert summarize_mapping({}) == MappingSummary(mapped_count=0, total_columns=0, auto_matched_count=0)
