"""Tests für den Zeilen-Parser der Kurs-Datensätze."""

import pytest

from data.record_parser import CourseRecordError, RecordErrorReason, parse_course_line


# ─── GÜLTIGE ZEILEN ───────────────────────────────────────────────────────────

class TestValidLines:
    def test_timed_course(self):
        """Zeile mit 9 Feldern → Kurs mit Beginn/Ende."""
        c = parse_course_line("CSC216,Software Engineering,001,3,jdyoung2,20,MW,1330,1445")
        assert c.name == "CSC216"
        assert c.title == "Software Engineering"
        assert c.section == "001"
        assert c.credit_hours == 3
        assert c.instructor_id == "jdyoung2"
        assert c.enrollment_cap == 20
        assert c.meeting_days == "MW"
        assert c.start_time == 1330
        assert c.end_time == 1445

    def test_arranged_course(self):
        """Zeile mit 7 Feldern und 'A' → Kurs ohne Uhrzeiten."""
        c = parse_course_line("CSC216,Software Engineering,601,3,jctetter,20,A")
        assert c.is_arranged
        assert c.start_time is None
        assert c.end_time is None
        assert c.instructor_id == "jctetter"

    def test_empty_instructor_is_none(self):
        """Leeres instructorId-Feld → keine Lehrkraft."""
        c = parse_course_line("CSC216,Software Engineering,001,3,,20,A")
        assert c.instructor_id is None

    def test_line_terminator_stripped(self):
        """Zeilenumbruch (auch CRLF) zählt nicht als Feldinhalt."""
        c = parse_course_line("CSC116,Intro to Programming - Java,001,3,,10,MW,910,1100\r\n")
        assert c.end_time == 1100

    def test_negative_integer_accepted(self):
        """Zeiten werden nur syntaktisch geprüft, nicht auf Plausibilität."""
        c = parse_course_line("CSC116,Intro,001,3,,10,MW,-5,2")
        assert c.start_time == -5


# ─── UNGÜLTIGE ZEILEN ─────────────────────────────────────────────────────────

class TestInvalidLines:
    @pytest.mark.parametrize("line,reason", [
        ("CSC216,Software Engineering,002,3,jdyoung2,20,MW,1330",
         RecordErrorReason.MISSING_FIELD),
        ("CSC216,Software Engineering,001", RecordErrorReason.MISSING_FIELD),
        ("", RecordErrorReason.MISSING_FIELD),
        ("CSC216,Software Engineering,001,three,,20,A", RecordErrorReason.BAD_INTEGER),
        ("CSC216,Software Engineering,001,3,,20,MW,1330,14:45",
         RecordErrorReason.BAD_INTEGER),
        ("CSC216,Software Engineering,001,3,,2 0,A", RecordErrorReason.BAD_INTEGER),
        ("CSC216,Software Engineering,001,3,,20,A,1330,1445",
         RecordErrorReason.TRAILING_FIELDS),
        ("CSC216,Software Engineering,001,3,,20,MW,1330,1445,x",
         RecordErrorReason.TRAILING_FIELDS),
        (",Software Engineering,001,3,,20,A", RecordErrorReason.INVALID_VALUE),
        ("CSC216,Software Engineering,001,3,,20,,1330,1445",
         RecordErrorReason.INVALID_VALUE),
    ])
    def test_rejected_with_reason(self, line, reason):
        """Jeder Fehler ergibt CourseRecordError mit passendem Grund."""
        with pytest.raises(CourseRecordError) as exc_info:
            parse_course_line(line)
        assert exc_info.value.reason == reason

    def test_empty_trailing_field_arranged(self):
        """Leeres Feld nach 'A' ist ein überzähliges Feld."""
        with pytest.raises(CourseRecordError) as exc_info:
            parse_course_line("CSC216,Software Engineering,001,3,,20,A,")
        assert exc_info.value.reason == RecordErrorReason.TRAILING_FIELDS

    def test_empty_trailing_field_timed(self):
        """Leeres Feld nach endTime ist ein überzähliges Feld."""
        with pytest.raises(CourseRecordError):
            parse_course_line("CSC216,Software Engineering,001,3,,20,MW,1330,1445,")

    def test_record_error_is_value_error(self):
        """Alle Satzfehler sind ValueErrors (einheitlich behandelbar)."""
        with pytest.raises(ValueError):
            parse_course_line("nicht,genug")


# ─── ZAHLENBEREICH ────────────────────────────────────────────────────────────

class TestIntegerRange:
    def test_int32_bounds_accepted(self):
        """Grenzwerte des int32-Bereichs sind gültig."""
        c = parse_course_line("CSC116,Intro,001,3,,2147483647,MW,-2147483648,0")
        assert c.enrollment_cap == 2147483647
        assert c.start_time == -2147483648

    @pytest.mark.parametrize("token", ["2147483648", "-2147483649", "99999999999"])
    def test_beyond_int32_rejected(self, token):
        with pytest.raises(CourseRecordError) as exc_info:
            parse_course_line(f"CSC116,Intro,001,{token},,20,A")
        assert exc_info.value.reason == RecordErrorReason.BAD_INTEGER

    def test_huge_digit_string_rejected(self):
        """Tausende Ziffern ergeben einen Satzfehler, keinen Absturz."""
        with pytest.raises(CourseRecordError) as exc_info:
            parse_course_line("CSC116,Intro,001," + "9" * 5000 + ",,20,A")
        assert exc_info.value.reason == RecordErrorReason.BAD_INTEGER
