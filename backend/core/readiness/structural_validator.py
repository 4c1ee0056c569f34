"""
Structural validation of course records.

Checks the shape and primitive types of a possibly partial course record
against a declared pydantic schema. Cross-field business rules are not
checked here; see readiness_evaluator.

Dependencies: pydantic
System role: Schema layer of the readiness engine
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictInt,
    StrictStr,
    StringConstraints,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from backend.core.readiness.field_labels import get_field_label

NonEmptyStr = Annotated[str, StringConstraints(strict=True, min_length=1)]


class CourseShape(BaseModel):
    """
    Declared shape of a course record.

    Every field may be absent. Unknown fields are allowed and left
    unchecked, which includes ``homePageOption``: its validity is a
    readiness concern, not a shape concern.
    """

    model_config = ConfigDict(alias_generator=to_camel, extra="allow")

    id: StrictInt | None = None
    name: NonEmptyStr | None = None
    type: Literal["certificate", "no_certificate"] = "no_certificate"
    name_change_required: StrictBool = False
    new_name: StrictStr | None = None
    home_page_file: StrictStr | None = None
    about_file: StrictStr | None = None
    about_page_link: StrictStr | None = None
    syllabus_required: StrictBool = False
    learning_hours: StrictStr | None = None
    syllabus_file: StrictStr | None = None
    surveys_added: StrictBool = False
    grading_percentages: StrictStr | None = None
    grading_file: StrictStr | None = None
    marketing_images_available: StrictBool = False
    marketing_images_link: StrictStr | None = None
    client_logo_required: StrictBool | None = None
    client_logo: StrictStr | None = None
    signer_role: StrictStr | None = None
    signer_name: StrictStr | None = None
    certificate_signature: StrictStr | None = None
    support_contact: StrictStr | None = None
    course_launch_date: datetime | None = None
    additional_notes: StrictStr | None = None
    created_at: datetime | None = None


KNOWN_FIELDS: frozenset[str] = frozenset(
    {field.alias or name for name, field in CourseShape.model_fields.items()}
    | {"homePageOption"}
)


@dataclass(frozen=True)
class FieldError:
    """A single structural violation on a first-level field."""

    field: str
    message: str


@dataclass(frozen=True)
class StructuralValidationResult:
    """Outcome of structural validation: ok, or an ordered list of errors."""

    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


def as_wire_mapping(record: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    """
    Normalize a course-like input into a plain camelCase mapping.

    Models are dumped by alias. ``None`` values are dropped so that null
    and absent mean the same thing, and enum members become their values.

    Args:
        record: Mapping of wire field names, or a course model

    Returns:
        dict[str, Any]: New mapping; the input is never mutated
    """
    if isinstance(record, BaseModel):
        data = record.model_dump(by_alias=True, exclude_none=True)
    else:
        data = {key: value for key, value in record.items() if value is not None}

    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in data.items()
    }


def validate_structure(record: Mapping[str, Any] | BaseModel) -> StructuralValidationResult:
    """
    Validate the shape of a course record.

    Args:
        record: Mapping of wire field names to arbitrary values, or a model

    Returns:
        StructuralValidationResult: Errors in schema field order, empty when ok
    """
    try:
        CourseShape.model_validate(as_wire_mapping(record))
    except ValidationError as e:
        return StructuralValidationResult(
            errors=tuple(
                FieldError(field=str(error["loc"][0]), message=error["msg"])
                for error in e.errors()
                if error["loc"]
            )
        )
    return StructuralValidationResult()


def unknown_fields(record: Mapping[str, Any]) -> list[FieldError]:
    """
    Report keys that are not course wire field names.

    Snake_case spellings of real fields count as unknown.

    Args:
        record: Mapping of field names to values

    Returns:
        list[FieldError]: One error per unknown key, in input order
    """
    return [
        FieldError(field=str(key), message="Unknown field")
        for key in record
        if key not in KNOWN_FIELDS
    ]


def missing_field_labels(errors: tuple[FieldError, ...] | list[FieldError]) -> list[str]:
    """
    Translate structural errors into display labels.

    Errors on fields without a label are dropped.

    Args:
        errors: Structural errors in report order

    Returns:
        list[str]: Labels in the same order
    """
    labels = []
    for error in errors:
        label = get_field_label(error.field)
        if label:
            labels.append(label)
    return labels
