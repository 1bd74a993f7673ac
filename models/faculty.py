"""Datenmodell für eine Lehrkraft samt Stundenplan (Pydantic v2)."""

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from models.course import Course


class ScheduleConflictError(ValueError):
    """Veranstaltung kann nicht in den Stundenplan übernommen werden."""


class FacultySchedule:
    """Stundenplan einer Lehrkraft.

    Eigene Regeln: keine zwei Sektionen desselben Kurses und keine
    Zeitüberschneidungen an gemeinsamen Tagen.
    """

    def __init__(self, faculty_id: str) -> None:
        self.faculty_id = faculty_id
        self._courses: list[Course] = []

    def add_course_to_schedule(self, course: Course) -> None:
        """Fügt eine Veranstaltung hinzu.

        Raises:
            ScheduleConflictError: bei Duplikat oder Zeitkonflikt.
        """
        for existing in self._courses:
            if existing.name == course.name:
                raise ScheduleConflictError(
                    f"{self.faculty_id}: {course.name} ist bereits im Stundenplan."
                )
            if existing.conflicts_with(course):
                raise ScheduleConflictError(
                    f"{self.faculty_id}: {course.name}-{course.section} "
                    f"kollidiert mit {existing.name}-{existing.section} "
                    f"({existing.meeting_string()})."
                )
        self._courses.append(course)

    def remove_course_from_schedule(self, course: Course) -> bool:
        """Entfernt eine Veranstaltung. True wenn etwas entfernt wurde."""
        before = len(self._courses)
        self._courses = [c for c in self._courses if c.identity_key != course.identity_key]
        return len(self._courses) < before

    def reset_schedule(self) -> None:
        self._courses = []

    def get_num_scheduled_courses(self) -> int:
        return len(self._courses)

    @property
    def courses(self) -> list[Course]:
        """Kopie der eingeplanten Veranstaltungen."""
        return list(self._courses)

    def __len__(self) -> int:
        return len(self._courses)

    def __repr__(self) -> str:
        return f"FacultySchedule({self.faculty_id}, {len(self._courses)} Kurse)"


class Faculty(BaseModel):
    """Repräsentiert eine Lehrkraft."""

    id: str                                # Unity-ID ("jdyoung2")
    first_name: str
    last_name: str
    email: str
    max_courses: int = Field(3, ge=1, le=3)  # Lehrdeputat in Veranstaltungen

    _schedule: FacultySchedule = PrivateAttr()

    @field_validator("id", "first_name", "last_name")
    @classmethod
    def _not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("darf nicht leer sein")
        return v

    @field_validator("email")
    @classmethod
    def _check_email(cls, v: str) -> str:
        at = v.find("@")
        if at < 1 or "." not in v[at:]:
            raise ValueError(f"Ungültige E-Mail-Adresse: {v!r}")
        return v

    def model_post_init(self, __context) -> None:
        self._schedule = FacultySchedule(self.id)

    @property
    def schedule(self) -> FacultySchedule:
        return self._schedule

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def is_overloaded(self) -> bool:
        """True wenn mehr Veranstaltungen eingeplant sind als max_courses."""
        return self._schedule.get_num_scheduled_courses() > self.max_courses
