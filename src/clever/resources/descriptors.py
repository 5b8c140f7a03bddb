"""Static descriptions of the Clever resource types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResourceDescriptor:
    """What the client needs to know about one resource type.

    Attributes:
        name: Singular name, e.g. "student".
        uri: Collection path segment under the API root.
        plural: Plural name, e.g. "students".
        optional_attributes: Attributes records may legitimately omit.
            Informational only; decoding never enforces them.
        linked_resources: Names of the sub-collections reachable from a
            record, e.g. a student's "sections".
    """

    name: str
    uri: str
    plural: str
    optional_attributes: tuple[str, ...] = ()
    linked_resources: tuple[str, ...] = ()

    def collection_path(self) -> str:
        return self.uri

    def record_path(self, id: str) -> str:
        return f"{self.uri}/{id}"

    def linked_path(self, id: str, link_name: str) -> str:
        return f"{self.uri}/{id}/{link_name}"


DISTRICT = ResourceDescriptor(
    name="district",
    uri="districts",
    plural="districts",
    linked_resources=("schools", "teachers", "students", "sections", "events"),
)

SCHOOL = ResourceDescriptor(
    name="school",
    uri="schools",
    plural="schools",
    optional_attributes=(
        "school_number",
        "sis_id",
        "state_id",
        "nces_id",
        "mdr_number",
        "low_grade",
        "high_grade",
        "principal",
        "location",
        "phone",
    ),
    linked_resources=("district", "teachers", "students", "sections", "events"),
)

STUDENT = ResourceDescriptor(
    name="student",
    uri="students",
    plural="students",
    optional_attributes=(
        "student_number",
        "state_id",
        "location",
        "gender",
        "dob",
        "grade",
        "frl_status",
        "race",
        "hispanic_ethnicity",
        "email",
        "credentials",
        "ell_status",
        "iep_status",
    ),
    linked_resources=("school", "district", "sections", "teachers", "events"),
)

TEACHER = ResourceDescriptor(
    name="teacher",
    uri="teachers",
    plural="teachers",
    optional_attributes=("teacher_number", "sis_id", "state_id", "title", "email", "credentials"),
    linked_resources=("school", "district", "students", "sections", "events"),
)

SECTION = ResourceDescriptor(
    name="section",
    uri="sections",
    plural="sections",
    optional_attributes=("sis_id", "section_number", "course_name", "course_number", "period", "subject", "term"),
    linked_resources=("school", "district", "students", "teacher", "events"),
)

EVENT = ResourceDescriptor(
    name="event",
    uri="events",
    plural="events",
    optional_attributes=("previous_attributes",),
)

SCHOOL_ADMIN = ResourceDescriptor(
    name="school_admin",
    uri="school_admins",
    plural="school_admins",
    optional_attributes=("email", "title", "staff_id"),
    linked_resources=("schools",),
)

ALL_DESCRIPTORS: tuple[ResourceDescriptor, ...] = (
    DISTRICT,
    SCHOOL,
    STUDENT,
    TEACHER,
    SECTION,
    EVENT,
    SCHOOL_ADMIN,
)

_BY_NAME: dict[str, ResourceDescriptor] = {}
for _descriptor in ALL_DESCRIPTORS:
    _BY_NAME[_descriptor.name] = _descriptor
    _BY_NAME[_descriptor.plural] = _descriptor


def get_descriptor(name: str) -> ResourceDescriptor:
    """Look up a descriptor by singular or plural name.

    Raises:
        KeyError: If no resource type has that name.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown resource type: {name!r}") from None


def descriptor_for_link(link_name: str) -> ResourceDescriptor:
    """Resource type of the records behind a link, e.g. "sections" -> SECTION."""
    return get_descriptor(link_name)
