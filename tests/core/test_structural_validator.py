"""
Test suite for structural validation of course records.

System role: Verification of the course schema layer
"""

from datetime import datetime, timezone
from typing import Any

import pytest

from backend.core.readiness import missing_field_labels, validate_structure
from backend.core.readiness.field_labels import FIELD_LABELS, get_field_label
from backend.core.readiness.structural_validator import (
    KNOWN_FIELDS,
    FieldError,
    as_wire_mapping,
    unknown_fields,
)
from backend.models.course import CourseRecord


class TestValidateStructure:
    """Tests for validate_structure."""

    def test_empty_record_is_valid(self) -> None:
        result = validate_structure({})

        assert result.ok is True
        assert result.errors == ()

    def test_ready_course_is_valid(self, ready_course: dict[str, Any]) -> None:
        assert validate_structure(ready_course).ok

    def test_wrong_boolean_type_is_reported(self) -> None:
        result = validate_structure({"surveysAdded": "true"})

        assert result.ok is False
        assert [e.field for e in result.errors] == ["surveysAdded"]

    def test_integer_is_not_a_boolean(self) -> None:
        result = validate_structure({"syllabusRequired": 1})

        assert [e.field for e in result.errors] == ["syllabusRequired"]

    def test_unknown_type_is_reported(self) -> None:
        result = validate_structure({"type": "diploma"})

        assert [e.field for e in result.errors] == ["type"]

    def test_empty_name_is_reported(self) -> None:
        result = validate_structure({"name": ""})

        assert [e.field for e in result.errors] == ["name"]

    def test_null_means_absent(self) -> None:
        """None on any field is treated as if the field were missing."""
        result = validate_structure({"name": None, "surveysAdded": None, "type": None})

        assert result.ok

    def test_unknown_fields_are_allowed(self) -> None:
        assert validate_structure({"legacyFlag": [1, 2, 3]}).ok

    def test_home_page_option_is_not_checked(self) -> None:
        assert validate_structure({"homePageOption": "landingPage"}).ok

    def test_errors_follow_schema_order(self) -> None:
        result = validate_structure(
            {"supportContact": 5, "name": 7, "surveysAdded": "no"}
        )

        assert [e.field for e in result.errors] == ["name", "surveysAdded", "supportContact"]
        assert all(e.message for e in result.errors)

    def test_accepts_models(self) -> None:
        record = CourseRecord(
            id=1,
            name="Intro to X",
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

        assert validate_structure(record).ok

    def test_does_not_mutate_input(self) -> None:
        record = {"name": 3, "newName": None}

        validate_structure(record)

        assert record == {"name": 3, "newName": None}


class TestAsWireMapping:
    """Tests for as_wire_mapping."""

    def test_drops_none_values(self) -> None:
        assert as_wire_mapping({"name": "A", "newName": None}) == {"name": "A"}

    def test_models_dump_by_alias_with_enum_values(self) -> None:
        record = CourseRecord(id=1, name="A", home_page_option="aboutLink")

        data = as_wire_mapping(record)

        assert data["homePageOption"] == "aboutLink"
        assert data["type"] == "no_certificate"
        assert "newName" not in data


class TestMissingFieldLabels:
    """Tests for translating structural errors to labels."""

    def test_labelled_fields_are_translated(self) -> None:
        errors = [
            FieldError(field="name", message="bad"),
            FieldError(field="signerName", message="bad"),
        ]

        assert missing_field_labels(errors) == [
            FIELD_LABELS["name"],
            FIELD_LABELS["signerName"],
        ]

    @pytest.mark.parametrize(
        "field", ["homePageFile", "aboutPageLink", "homePageOption", "id", "createdAt"]
    )
    def test_unlabelled_fields_are_dropped(self, field: str) -> None:
        assert get_field_label(field) is None
        assert missing_field_labels([FieldError(field=field, message="bad")]) == []


class TestUnknownFields:
    """Tests for rejecting keys that are not wire field names."""

    def test_wire_names_are_known(self, ready_course: dict[str, Any]) -> None:
        assert unknown_fields(ready_course) == []
        assert {"homePageOption", "id", "createdAt", "courseLaunchDate"} <= KNOWN_FIELDS

    def test_snake_case_and_unknown_keys_are_reported_in_order(self) -> None:
        errors = unknown_fields({"support_contact": "x", "name": "A", "bogusField": 1})

        assert [e.field for e in errors] == ["support_contact", "bogusField"]
        assert all(e.message == "Unknown field" for e in errors)
