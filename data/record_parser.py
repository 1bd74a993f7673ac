"""Zeilen-Parser für Kurs-Datensätze.

Format (eine Veranstaltung pro Zeile, kommagetrennt, ohne Quoting):

    name,title,section,creditHours,instructorId,enrollmentCap,meetingDays[,startTime,endTime]

Beginn/Ende folgen genau dann, wenn meetingDays nicht "A" (arranged) ist.
Der Parser ist seiteneffektfrei; die Zuordnung zu Dozenten-Stundenplänen
übernimmt ``data.course_records.link_instructor``.
"""

import re
from enum import Enum

from pydantic import ValidationError

from models.course import ARRANGED, Course

_INT_RE = re.compile(r"[+-]?[0-9]{1,10}")

# Wertebereich wie int32
INT_MIN, INT_MAX = -2**31, 2**31 - 1


class RecordErrorReason(str, Enum):
    MISSING_FIELD = "missing_field"
    BAD_INTEGER = "bad_integer"
    TRAILING_FIELDS = "trailing_fields"
    INVALID_VALUE = "invalid_value"
    SCHEDULE_CONFLICT = "schedule_conflict"


class CourseRecordError(ValueError):
    """Eine Zeile ergibt keinen gültigen Kurs-Datensatz.

    Alle Gründe werden beim Import gleich behandelt (Zeile wird übersprungen);
    ``reason`` dient nur der Diagnose.
    """

    def __init__(self, reason: RecordErrorReason, message: str = "") -> None:
        super().__init__(message or reason.value)
        self.reason = reason


class _Fields:
    """Liest die Tokens einer Zeile der Reihe nach."""

    def __init__(self, tokens: list[str]) -> None:
        self._tokens = tokens
        self._pos = 0

    def next(self, label: str) -> str:
        if self._pos >= len(self._tokens):
            raise CourseRecordError(
                RecordErrorReason.MISSING_FIELD, f"Feld '{label}' fehlt"
            )
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def next_int(self, label: str) -> int:
        token = self.next(label)
        if not _INT_RE.fullmatch(token):
            raise CourseRecordError(
                RecordErrorReason.BAD_INTEGER, f"Feld '{label}' ist keine Zahl: {token!r}"
            )
        value = int(token)
        if not INT_MIN <= value <= INT_MAX:
            raise CourseRecordError(
                RecordErrorReason.BAD_INTEGER, f"Feld '{label}' außerhalb int32: {token}"
            )
        return value

    def expect_end(self) -> None:
        rest = len(self._tokens) - self._pos
        if rest:
            raise CourseRecordError(
                RecordErrorReason.TRAILING_FIELDS, f"{rest} überzählige(s) Feld(er)"
            )


def parse_course_line(line: str) -> Course:
    """Parst eine Zeile zu einem ``Course``.

    Raises:
        CourseRecordError: bei fehlenden Feldern, ungültigen Zahlen,
            überzähligen Feldern (auch einem leeren Feld nach dem letzten
            erwarteten) oder ungültigen Werten.
    """
    fields = _Fields(line.rstrip("\r\n").split(","))

    name = fields.next("name")
    title = fields.next("title")
    section = fields.next("section")
    credit_hours = fields.next_int("creditHours")
    instructor_id = fields.next("instructorId")
    enrollment_cap = fields.next_int("enrollmentCap")
    meeting_days = fields.next("meetingDays")

    start_time = end_time = None
    if meeting_days != ARRANGED:
        start_time = fields.next_int("startTime")
        end_time = fields.next_int("endTime")
    fields.expect_end()

    try:
        return Course(
            name=name,
            title=title,
            section=section,
            credit_hours=credit_hours,
            instructor_id=instructor_id or None,
            enrollment_cap=enrollment_cap,
            meeting_days=meeting_days,
            start_time=start_time,
            end_time=end_time,
        )
    except ValidationError as e:
        raise CourseRecordError(RecordErrorReason.INVALID_VALUE, str(e)) from e
