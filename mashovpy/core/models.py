"""
Record shapes returned by the Mashov API.

The client hands back decoded JSON untouched, so these are TypedDicts
describing the wire format rather than classes that wrap it. Keys keep the
portal's camelCase names. All of them are total=False: the portal omits
fields freely and the client does not validate element shape.
"""
from enum import Enum
from typing import Any, Dict, List, TypedDict


class Resource(Enum):
    """Per-student data categories and their URL path suffixes."""

    GRADES = 'grades'
    GROUPS = 'groups'
    BEHAVIOR = 'behave'

    @classmethod
    def parse(cls, value) -> 'Resource':
        """
        Resolve a Resource from an instance, its name or its path suffix.

        >>> Resource.parse('behavior') is Resource.parse('behave')
        True
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        try:
            return cls[text.upper()]
        except KeyError:
            return cls(text.lower())


# ---------------------------------------------------------------------------
# Login session
# ---------------------------------------------------------------------------

class Credential(TypedDict, total=False):
    sessionId: str
    userId: str
    idNumber: int
    userType: int
    roleUserType: int
    schoolUserType: int
    idp: str
    hasAuthenticated: bool
    hasStronglyAuthenticated: bool
    semel: int
    year: int
    displayName: str
    correlationId: str


class UserSettings(TypedDict, total=False):
    pushOptions: int
    selectedChild: Any
    detailsState: int


class AccessToken(TypedDict, total=False):
    """User and school settings block of the login response."""
    userSettings: UserSettings
    schoolSettings: Dict[str, Any]
    schoolOptions: Dict[str, Any]
    roles: List[Any]
    rolePermissions: List[Any]
    children: List[Any]
    inactiveChildren: List[Any]
    externChildren: List[Any]
    username: str
    lastLogin: str
    lastPassSet: str
    displayName: str
    gender: str
    networks: List[int]
    userSchools: List[Any]
    userSchoolYears: List[int]


class MashovSession(TypedDict, total=False):
    """Decoded body of a successful login."""
    sessionId: str
    credential: Credential
    accessToken: AccessToken


# ---------------------------------------------------------------------------
# Student resources
# ---------------------------------------------------------------------------

class GradeEntry(TypedDict, total=False):
    """One grading event for the student."""
    id: int
    year: int
    studentGuid: str
    gradingEventId: int
    grade: int
    rangeGrade: str
    textualGrade: str
    rate: int
    timestamp: str
    teacherName: str
    groupId: int
    groupName: str
    subjectName: str
    groupLevel: str
    eventDate: str
    gradingPeriod: int
    gradingEvent: str
    gradeRate: int
    gradeTypeId: int
    gradeType: str


class AttendanceEvent(TypedDict, total=False):
    """One attendance or behavior event reported in a lesson."""
    studentGuid: str
    eventCode: int
    justified: int
    lessonId: int
    reporterGuid: str
    timestamp: str
    groupId: int
    lessonType: int
    lesson: int
    lessonDate: str
    lessonReporter: str
    achvaCode: int
    achvaName: str
    achvaAval: int
    justificationId: int
    justification: str
    reporter: str
    subject: str
    justifiedBy: str


class GroupTeacher(TypedDict, total=False):
    teacherGuid: str
    teacherName: str


class StudyGroup(TypedDict, total=False):
    """A course group the student is enrolled in."""
    groupId: int
    groupName: str
    subjectName: str
    groupLevel: str
    groupTeachers: List[GroupTeacher]
    groupInactiveTeachers: List[GroupTeacher]


GradeList = List[GradeEntry]
AttendanceList = List[AttendanceEvent]
GroupList = List[StudyGroup]
