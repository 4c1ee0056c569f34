"""
Launch readiness evaluation.

Computes every unmet mandatory condition of a course record and derives
the single "ready for launch" flag. Structural errors come first, then
the business checks in a fixed order. All checks always run, so several
labels can be reported at once. Pure: no I/O, no hidden state, the input
is never mutated.

Dependencies: backend.core.readiness
System role: Business-rule layer of the readiness engine
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from backend.core.readiness import field_labels as labels
from backend.core.readiness.structural_validator import (
    as_wire_mapping,
    missing_field_labels,
    validate_structure,
)

CERTIFICATE = "certificate"

# Home page option -> (evidence field, label when that evidence is empty)
HOME_PAGE_EVIDENCE: dict[str, tuple[str, str]] = {
    "homePageFile": ("homePageFile", labels.HOME_PAGE_FILE_REQUIRED),
    "aboutFile": ("aboutFile", labels.ABOUT_FILE_REQUIRED),
    "aboutLink": ("aboutPageLink", labels.ABOUT_PAGE_LINK_REQUIRED),
}


@dataclass(frozen=True)
class ReadinessReport:
    """Missing-field labels plus the readiness flag derived from them."""

    missing_fields: tuple[str, ...]

    @property
    def is_ready(self) -> bool:
        return not self.missing_fields


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value is False


def _certificate_checks(course: Mapping[str, Any]) -> list[str]:
    missing = []
    if _is_empty(course.get("gradingPercentages")) and _is_empty(course.get("gradingFile")):
        missing.append(labels.GRADING_MODEL_REQUIRED)
    if course.get("clientLogoRequired") is True and _is_empty(course.get("clientLogo")):
        missing.append(labels.CLIENT_LOGO_REQUIRED)
    if _is_empty(course.get("signerRole")):
        missing.append(labels.SIGNER_ROLE_REQUIRED)
    if _is_empty(course.get("signerName")):
        missing.append(labels.SIGNER_NAME_REQUIRED)
    if _is_empty(course.get("certificateSignature")):
        missing.append(labels.CERTIFICATE_SIGNATURE_REQUIRED)
    return missing


def _home_page_checks(course: Mapping[str, Any]) -> list[str]:
    option = course.get("homePageOption")
    if not isinstance(option, str) or option not in HOME_PAGE_EVIDENCE:
        return [labels.HOME_PAGE_SELECTION_REQUIRED]

    # Only the evidence matching the chosen option counts
    evidence_field, label = HOME_PAGE_EVIDENCE[option]
    if _is_empty(course.get(evidence_field)):
        return [label]
    return []


def compute_missing_fields(record: Mapping[str, Any] | BaseModel) -> list[str]:
    """
    List every unmet mandatory condition of a course.

    Args:
        record: Course-like mapping (camelCase wire names, any subset of
            fields) or a course model

    Returns:
        list[str]: Missing-field labels in check order; empty when ready
    """
    course = as_wire_mapping(record)

    missing = missing_field_labels(validate_structure(course).errors)

    if course.get("nameChangeRequired") is True and _is_empty(course.get("newName")):
        missing.append(labels.NEW_NAME_REQUIRED)

    if course.get("type") == CERTIFICATE:
        missing.extend(_certificate_checks(course))

    if course.get("syllabusRequired") is True:
        if _is_empty(course.get("learningHours")) and _is_empty(course.get("syllabusFile")):
            missing.append(labels.SYLLABUS_DETAILS_REQUIRED)

    missing.extend(_home_page_checks(course))

    if course.get("marketingImagesAvailable") is not True:
        missing.append(labels.MARKETING_IMAGES_REQUIRED)

    if _is_empty(course.get("supportContact")):
        missing.append(labels.SUPPORT_CONTACT_REQUIRED)

    if course.get("surveysAdded") is not True:
        missing.append(labels.SURVEYS_REQUIRED)

    return missing


def is_ready_for_launch(record: Mapping[str, Any] | BaseModel) -> bool:
    """Whether a course has no missing mandatory fields."""
    return len(compute_missing_fields(record)) == 0


def evaluate_readiness(record: Mapping[str, Any] | BaseModel) -> ReadinessReport:
    """
    Evaluate a course once and return both labels and flag.

    Args:
        record: Course-like mapping or course model

    Returns:
        ReadinessReport: Frozen report
    """
    return ReadinessReport(missing_fields=tuple(compute_missing_fields(record)))
