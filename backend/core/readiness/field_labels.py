"""
Display labels for course fields and readiness checks.

Two disjoint vocabularies: FIELD_LABELS names a field that failed the
structural schema, the *_REQUIRED constants name an unmet launch condition.

Dependencies: None (pure domain layer)
System role: User-facing label vocabulary of the readiness engine
"""

# Fields without an entry here are dropped from user-facing structural errors.
FIELD_LABELS: dict[str, str] = {
    "name": "Course name",
    "type": "Course type",
    "nameChangeRequired": "Name change required",
    "newName": "New name",
    "aboutFile": "About file",
    "syllabusRequired": "Syllabus required",
    "learningHours": "Learning hours",
    "syllabusFile": "Syllabus file",
    "surveysAdded": "Surveys added",
    "gradingPercentages": "Grading percentages",
    "gradingFile": "Grading model file",
    "marketingImagesAvailable": "Marketing images available",
    "marketingImagesLink": "Marketing images link",
    "clientLogoRequired": "Client logo required",
    "clientLogo": "Client logo",
    "signerRole": "Signer role",
    "signerName": "Signer name",
    "certificateSignature": "Certificate signature",
    "supportContact": "Support contact",
}

NEW_NAME_REQUIRED = "New name (required when a name change is needed)"

GRADING_MODEL_REQUIRED = "Grading model (required for certificate courses)"
CLIENT_LOGO_REQUIRED = "Client logo (required for certificate courses)"
SIGNER_ROLE_REQUIRED = "Signer role (required for certificate courses)"
SIGNER_NAME_REQUIRED = "Signer name (required for certificate courses)"
CERTIFICATE_SIGNATURE_REQUIRED = "Certificate signature (required for certificate courses)"

SYLLABUS_DETAILS_REQUIRED = "Syllabus details (required when a syllabus is needed)"

HOME_PAGE_SELECTION_REQUIRED = "Home page selection (choose one of the options)"
HOME_PAGE_FILE_REQUIRED = "Home page details file (required for the selected option)"
ABOUT_FILE_REQUIRED = "About page file (required for the selected option)"
ABOUT_PAGE_LINK_REQUIRED = "About page link (required for the selected option)"

MARKETING_IMAGES_REQUIRED = "Marketing images (must be checked)"
SUPPORT_CONTACT_REQUIRED = "Support tab details (must be filled in)"
SURVEYS_REQUIRED = "Feedback surveys added (must be checked)"


def get_field_label(field: str) -> str | None:
    """
    Look up the display label of a wire field name.

    Args:
        field: camelCase field name

    Returns:
        str | None: Label, or None when the field has no entry
    """
    return FIELD_LABELS.get(field)
