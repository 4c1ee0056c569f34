"""
Course domain models and schemas.

The persisted course record, the all-optional draft used for creation and
partial updates, and the API response shapes that carry derived readiness.
Field names travel as camelCase on the wire and are snake_case in Python.

Dependencies: pydantic
System role: Course record contracts
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CourseType(str, Enum):
    """Whether the course awards a certificate."""

    CERTIFICATE = "certificate"
    NO_CERTIFICATE = "no_certificate"


class HomePageOption(str, Enum):
    """How the course home page content is delivered."""

    HOME_PAGE_FILE = "homePageFile"
    ABOUT_FILE = "aboutFile"
    ABOUT_LINK = "aboutLink"


IMMUTABLE_FIELDS = frozenset({"id", "createdAt"})


class CourseModelBase(BaseModel):
    """Shared config: camelCase aliases, snake_case attribute access."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_wire(self) -> dict:
        """
        Dump to the JSON-compatible wire form.

        Absent optional fields are omitted and datetimes become ISO-8601
        strings, matching what the key-value store holds.

        Returns:
            dict: camelCase field mapping
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CourseDraft(CourseModelBase):
    """
    A record-of-optionals describing a course that may be partially filled.

    This is what the form sends and what readiness is evaluated against
    before anything is saved. Nothing here is mandatory.
    """

    name: str | None = None
    type: CourseType | None = None
    name_change_required: bool | None = None
    new_name: str | None = None
    home_page_option: HomePageOption | None = None
    home_page_file: str | None = None
    about_file: str | None = None
    about_page_link: str | None = None
    syllabus_required: bool | None = None
    learning_hours: str | None = None
    syllabus_file: str | None = None
    surveys_added: bool | None = None
    grading_percentages: str | None = None
    grading_file: str | None = None
    marketing_images_available: bool | None = None
    marketing_images_link: str | None = None
    client_logo_required: bool | None = None
    client_logo: str | None = None
    signer_role: str | None = None
    signer_name: str | None = None
    certificate_signature: str | None = None
    support_contact: str | None = None
    course_launch_date: datetime | None = None
    additional_notes: str | None = None


class CourseRecord(CourseModelBase):
    """
    A persisted course.

    ``id`` and ``created_at`` are assigned once at creation and never change.
    Readiness is not stored here; it is recomputed from the fields.
    """

    id: int
    name: str = Field(..., min_length=1)
    type: CourseType = CourseType.NO_CERTIFICATE
    name_change_required: bool = False
    new_name: str | None = None
    home_page_option: HomePageOption | None = None
    home_page_file: str | None = None
    about_file: str | None = None
    about_page_link: str | None = None
    syllabus_required: bool = False
    learning_hours: str | None = None
    syllabus_file: str | None = None
    surveys_added: bool = False
    grading_percentages: str | None = None
    grading_file: str | None = None
    marketing_images_available: bool = False
    marketing_images_link: str | None = None
    client_logo_required: bool | None = None
    client_logo: str | None = None
    signer_role: str | None = None
    signer_name: str | None = None
    certificate_signature: str | None = None
    support_contact: str | None = None
    course_launch_date: datetime | None = None
    additional_notes: str | None = None
    created_at: datetime | None = None


class CourseResponse(CourseRecord):
    """Response schema for a course with its derived readiness."""

    missing_fields: list[str] = Field(default_factory=list)
    is_ready_for_launch: bool = False


class ReadinessResponse(CourseModelBase):
    """Response schema for a readiness evaluation."""

    missing_fields: list[str]
    is_ready_for_launch: bool


class SaveCoursesResponse(BaseModel):
    """Response schema for a whole-list save."""

    success: bool = True
    message: str
    count: int


class CourseSortKey(str, Enum):
    """Dashboard ordering."""

    NAME = "name"
    DATE = "date"
    STATUS = "status"
