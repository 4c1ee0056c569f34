"""
Test suite for the launch readiness evaluator.

Covers the fixed check order, certificate-only requirements, the home page
branch, the strict booleans and the purity of the evaluator.

System role: Verification of the readiness business rules
"""

import copy
from typing import Any

import pytest

from backend.core.readiness import (
    compute_missing_fields,
    evaluate_readiness,
    is_ready_for_launch,
)
from backend.core.readiness import field_labels as labels
from backend.models.course import CourseDraft, CourseRecord

CERTIFICATE_LABELS = [
    labels.GRADING_MODEL_REQUIRED,
    labels.SIGNER_ROLE_REQUIRED,
    labels.SIGNER_NAME_REQUIRED,
    labels.CERTIFICATE_SIGNATURE_REQUIRED,
]


@pytest.fixture
def certificate_course(ready_course: dict[str, Any]) -> dict[str, Any]:
    """A fully satisfied certificate course."""
    return {
        **ready_course,
        "type": "certificate",
        "gradingPercentages": "exam 60 / tasks 40",
        "signerRole": "Dean",
        "signerName": "Dana Levi",
        "certificateSignature": "signature.png",
    }


class TestReadyCourse:
    """A fully populated course is ready."""

    def test_ready_course_has_no_missing_fields(self, ready_course: dict[str, Any]) -> None:
        assert compute_missing_fields(ready_course) == []
        assert is_ready_for_launch(ready_course) is True

    def test_ready_certificate_course(self, certificate_course: dict[str, Any]) -> None:
        assert compute_missing_fields(certificate_course) == []

    @pytest.mark.parametrize(
        "option, evidence",
        [
            ("homePageFile", {"homePageFile": "home.docx"}),
            ("aboutFile", {"aboutFile": "about.docx"}),
            ("aboutLink", {"aboutPageLink": "https://x.test/about"}),
        ],
    )
    def test_each_home_page_option_with_its_evidence_is_ready(
        self, ready_course: dict[str, Any], option: str, evidence: dict[str, str]
    ) -> None:
        course = {**ready_course, "homePageOption": option, **evidence}

        assert is_ready_for_launch(course) is True

    def test_models_are_accepted(self, ready_course: dict[str, Any]) -> None:
        """Course models are evaluated the same way as wire mappings."""
        draft = CourseDraft.model_validate(ready_course)
        record = CourseRecord.model_validate({**ready_course, "id": 1})

        assert compute_missing_fields(draft) == []
        assert compute_missing_fields(record) == []


class TestScenarios:
    """Concrete scenarios from the product rules."""

    def test_certificate_without_signer_fields(self, ready_course: dict[str, Any]) -> None:
        course = {**ready_course, "type": "certificate"}

        missing = compute_missing_fields(course)

        assert missing == CERTIFICATE_LABELS
        assert is_ready_for_launch(course) is False

    def test_absent_home_page_option_always_reported(
        self, ready_course: dict[str, Any]
    ) -> None:
        course = dict(ready_course)
        del course["homePageOption"]

        assert labels.HOME_PAGE_SELECTION_REQUIRED in compute_missing_fields(course)
        assert labels.HOME_PAGE_SELECTION_REQUIRED in compute_missing_fields({})

    def test_name_change_requires_new_name(self, ready_course: dict[str, Any]) -> None:
        course = {**ready_course, "nameChangeRequired": True, "newName": ""}
        assert labels.NEW_NAME_REQUIRED in compute_missing_fields(course)

        course["newName"] = "Intro to Y"
        assert labels.NEW_NAME_REQUIRED not in compute_missing_fields(course)

    def test_new_name_ignored_without_name_change(self, ready_course: dict[str, Any]) -> None:
        course = {**ready_course, "nameChangeRequired": False, "newName": ""}
        assert compute_missing_fields(course) == []


class TestHomePageBranch:
    """Only the evidence matching the selected option counts."""

    def test_wrong_evidence_does_not_satisfy_about_link(
        self, ready_course: dict[str, Any]
    ) -> None:
        course = {**ready_course, "homePageFile": "home.docx"}
        del course["aboutPageLink"]

        assert compute_missing_fields(course) == [labels.ABOUT_PAGE_LINK_REQUIRED]

    def test_home_page_file_option_needs_home_page_file(
        self, ready_course: dict[str, Any]
    ) -> None:
        course = {**ready_course, "homePageOption": "homePageFile"}
        assert compute_missing_fields(course) == [labels.HOME_PAGE_FILE_REQUIRED]

    def test_about_file_option_needs_about_file(self, ready_course: dict[str, Any]) -> None:
        course = {**ready_course, "homePageOption": "aboutFile", "aboutFile": ""}
        assert compute_missing_fields(course) == [labels.ABOUT_FILE_REQUIRED]

    @pytest.mark.parametrize("option", ["landingPage", "", 3, ["aboutLink"]])
    def test_unknown_option_reports_selection(
        self, ready_course: dict[str, Any], option: Any
    ) -> None:
        course = {**ready_course, "homePageOption": option}
        assert compute_missing_fields(course) == [labels.HOME_PAGE_SELECTION_REQUIRED]


class TestStrictBooleans:
    """Marketing images and surveys must be exactly True."""

    @pytest.mark.parametrize(
        "field, label",
        [
            ("marketingImagesAvailable", labels.MARKETING_IMAGES_REQUIRED),
            ("surveysAdded", labels.SURVEYS_REQUIRED),
        ],
    )
    def test_explicit_false_blocks_launch(
        self, certificate_course: dict[str, Any], field: str, label: str
    ) -> None:
        course = {**certificate_course, field: False}

        assert compute_missing_fields(course) == [label]
        assert is_ready_for_launch(course) is False

    def test_absent_booleans_block_launch(self, ready_course: dict[str, Any]) -> None:
        course = dict(ready_course)
        del course["marketingImagesAvailable"]
        del course["surveysAdded"]

        assert compute_missing_fields(course) == [
            labels.MARKETING_IMAGES_REQUIRED,
            labels.SURVEYS_REQUIRED,
        ]

    def test_truthy_string_is_not_true(self, ready_course: dict[str, Any]) -> None:
        """A non-boolean is a structural error and also fails the check."""
        course = {**ready_course, "surveysAdded": "yes"}

        assert compute_missing_fields(course) == [
            labels.FIELD_LABELS["surveysAdded"],
            labels.SURVEYS_REQUIRED,
        ]


class TestConditionalRequirements:
    """Syllabus and client logo requirements."""

    def test_syllabus_required_needs_hours_or_file(self, ready_course: dict[str, Any]) -> None:
        course = {**ready_course, "syllabusRequired": True}
        assert compute_missing_fields(course) == [labels.SYLLABUS_DETAILS_REQUIRED]

        assert compute_missing_fields({**course, "learningHours": "12"}) == []
        assert compute_missing_fields({**course, "syllabusFile": "syllabus.pdf"}) == []

    def test_grading_file_alone_satisfies_grading(
        self, certificate_course: dict[str, Any]
    ) -> None:
        course = {**certificate_course, "gradingFile": "grading.xlsx"}
        del course["gradingPercentages"]

        assert compute_missing_fields(course) == []

    def test_client_logo_only_checked_for_certificate(
        self, ready_course: dict[str, Any], certificate_course: dict[str, Any]
    ) -> None:
        assert compute_missing_fields({**ready_course, "clientLogoRequired": True}) == []
        assert compute_missing_fields({**certificate_course, "clientLogoRequired": True}) == [
            labels.CLIENT_LOGO_REQUIRED
        ]
        assert compute_missing_fields(
            {**certificate_course, "clientLogoRequired": True, "clientLogo": "logo.png"}
        ) == []


class TestOrderingAndPurity:
    """Check order, idempotence, monotonicity and no mutation."""

    def test_empty_record_reports_every_unconditional_check_in_order(self) -> None:
        assert compute_missing_fields({}) == [
            labels.HOME_PAGE_SELECTION_REQUIRED,
            labels.MARKETING_IMAGES_REQUIRED,
            labels.SUPPORT_CONTACT_REQUIRED,
            labels.SURVEYS_REQUIRED,
        ]

    def test_structural_labels_come_first(self, ready_course: dict[str, Any]) -> None:
        course = {**ready_course, "type": "certificate", "signerName": 42}

        missing = compute_missing_fields(course)

        assert missing[0] == labels.FIELD_LABELS["signerName"]
        assert labels.SIGNER_NAME_REQUIRED not in missing

    def test_unlabelled_structural_errors_are_dropped(
        self, ready_course: dict[str, Any]
    ) -> None:
        course = {**ready_course, "aboutPageLink": 404, "additionalNotes": ["x"]}

        # aboutPageLink is truthy evidence and has no label of its own
        assert compute_missing_fields(course) == []

    def test_idempotent(self, ready_course: dict[str, Any]) -> None:
        course = {**ready_course, "type": "certificate", "syllabusRequired": True}

        assert compute_missing_fields(course) == compute_missing_fields(course)

    def test_does_not_mutate_input(self, ready_course: dict[str, Any]) -> None:
        course = {**ready_course, "type": "certificate", "newName": None}
        snapshot = copy.deepcopy(course)

        compute_missing_fields(course)

        assert course == snapshot

    @pytest.mark.parametrize(
        "overrides",
        [
            {},
            {"homePageOption": None},
            {"surveysAdded": False, "supportContact": ""},
            {"syllabusRequired": True, "nameChangeRequired": True},
            {"gradingFile": "g.xlsx", "signerRole": "Dean"},
            {"clientLogoRequired": True},
        ],
    )
    def test_switching_to_certificate_only_adds_labels(
        self, ready_course: dict[str, Any], overrides: dict[str, Any]
    ) -> None:
        base = {**ready_course, **overrides}
        without = compute_missing_fields({**base, "type": "no_certificate"})
        with_cert = compute_missing_fields({**base, "type": "certificate"})

        assert set(without) <= set(with_cert)
        assert len(with_cert) >= len(without)

    def test_evaluate_readiness_matches_helpers(self, ready_course: dict[str, Any]) -> None:
        course = {**ready_course, "supportContact": ""}

        report = evaluate_readiness(course)

        assert report.missing_fields == (labels.SUPPORT_CONTACT_REQUIRED,)
        assert report.is_ready is False
        assert report.is_ready == is_ready_for_launch(course)
