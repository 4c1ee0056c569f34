"""
Course validation utilities.

Runs incoming payloads through the structural validator before they reach
the service, so a malformed field type is rejected before it is ever
considered for readiness. Unlike readiness labels, these errors report
every offending field, labelled or not. Create and update payloads must
use the camelCase wire names; anything else is rejected as unknown.

Dependencies: backend.core.readiness, backend.models.course
System role: Course request validation
"""

from typing import Any

from backend.core.exceptions import InvalidCourseDataError
from backend.core.readiness import FieldError, unknown_fields, validate_structure
from backend.core.readiness.field_labels import get_field_label
from backend.models.course import IMMUTABLE_FIELDS, CourseDraft, CourseRecord


def _describe(error: FieldError) -> dict[str, Any]:
    return {
        "field": error.field,
        "label": get_field_label(error.field),
        "message": error.message,
    }


def _structural_errors(payload: dict[str, Any]) -> list[dict[str, Any]]:
    return [_describe(error) for error in validate_structure(payload).errors]


def _editable_field_errors(payload: dict[str, Any]) -> list[dict[str, Any]]:
    # id and createdAt are server-assigned and ignored on input
    editable = {k: v for k, v in payload.items() if k not in IMMUTABLE_FIELDS}
    return [_describe(error) for error in unknown_fields(editable)] + _structural_errors(editable)


def validate_course_creation(payload: dict[str, Any]) -> CourseDraft:
    """
    Validate a course creation payload.

    Args:
        payload: camelCase course fields; ``id``/``createdAt`` are ignored

    Returns:
        CourseDraft: Parsed draft

    Raises:
        InvalidCourseDataError: If the payload is malformed, has unknown
            fields or has no name
    """
    errors = _editable_field_errors(payload)
    if payload.get("name") is None:
        errors.insert(0, _describe(FieldError(field="name", message="Course name is required")))
    if errors:
        raise InvalidCourseDataError("Invalid course data", errors=errors)
    return CourseDraft.model_validate(
        {k: v for k, v in payload.items() if k not in IMMUTABLE_FIELDS}
    )


def validate_course_update(payload: dict[str, Any], course_id: int) -> dict[str, Any]:
    """
    Validate a partial update payload.

    ``None`` values are allowed and mean "clear this field". ``id`` and
    ``createdAt`` pass through unchecked; the service ignores them.

    Args:
        payload: camelCase fields to change
        course_id: Target course, for error context

    Returns:
        dict: The payload, unchanged

    Raises:
        InvalidCourseDataError: If the payload is empty, malformed or has
            unknown fields
    """
    if not payload:
        raise InvalidCourseDataError(
            "At least one field must be provided for update", course_id=course_id
        )

    errors = _editable_field_errors(payload)
    if errors:
        raise InvalidCourseDataError("Invalid course data", errors=errors, course_id=course_id)
    return payload


def validate_course_list(payload: list[Any]) -> list[CourseRecord]:
    """
    Validate a complete course list for a whole-list save.

    Each entry must be an object with an ``id`` and a ``name`` and pass
    structural validation.

    Args:
        payload: List of camelCase course objects

    Returns:
        list[CourseRecord]: Parsed records, in input order

    Raises:
        InvalidCourseDataError: Listing every offending entry by index
    """
    errors: list[dict[str, Any]] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            errors.append({"index": index, "field": None, "label": None,
                           "message": "Course entry must be an object"})
            continue

        item_errors = _structural_errors(item)
        for required in ("id", "name"):
            if item.get(required) is None:
                item_errors.append(
                    _describe(FieldError(field=required, message="Field required"))
                )
        errors.extend({"index": index, **error} for error in item_errors)

    if errors:
        raise InvalidCourseDataError("Invalid course list", errors=errors)
    return [CourseRecord.model_validate(item) for item in payload]
