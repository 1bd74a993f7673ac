"""Datenmodell für eine Lehrveranstaltung (Pydantic v2)."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# Sentinel für Veranstaltungen ohne feste Zeit ("arranged")
ARRANGED = "A"


class Course(BaseModel):
    """Eine Lehrveranstaltung (eine Sektion eines Kurses).

    Unveränderlich: Änderungen (z.B. Dozenten-Zuordnung) erzeugen eine Kopie
    via ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)

    name: str                           # "CSC216"
    title: str                          # "Software Engineering"
    section: str                        # "001"
    credit_hours: int
    instructor_id: Optional[str] = None # Unity-ID der Lehrkraft, None = keine
    enrollment_cap: int
    meeting_days: str                   # "MW", "TH" oder "A"
    start_time: Optional[int] = None    # z.B. 1330, nur wenn nicht "A"
    end_time: Optional[int] = None

    @field_validator("name", "title", "section", "meeting_days")
    @classmethod
    def _plain_field(cls, v: str) -> str:
        if not v:
            raise ValueError("darf nicht leer sein")
        if any(ch in v for ch in ",\r\n"):
            raise ValueError("darf weder Komma noch Zeilenumbruch enthalten")
        return v

    @field_validator("instructor_id")
    @classmethod
    def _empty_id_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v and any(ch in v for ch in ",\r\n"):
            raise ValueError("darf weder Komma noch Zeilenumbruch enthalten")
        return v or None

    @model_validator(mode="after")
    def _check_meeting_times(self):
        if self.is_arranged:
            if self.start_time is not None or self.end_time is not None:
                raise ValueError("Veranstaltung 'A' (arranged) hat keine Uhrzeiten.")
        elif self.start_time is None or self.end_time is None:
            raise ValueError(
                f"Veranstaltung '{self.meeting_days}' braucht Beginn und Ende."
            )
        return self

    @property
    def is_arranged(self) -> bool:
        """True wenn die Veranstaltung keine festen Zeiten hat."""
        return self.meeting_days == ARRANGED

    @property
    def identity_key(self) -> tuple[str, str]:
        """(name, section) – zwei Datensätze mit gleichem Schlüssel sind Duplikate."""
        return (self.name, self.section)

    @property
    def sort_key(self) -> tuple[str, str]:
        return self.identity_key

    def to_record(self) -> str:
        """Kanonische Textzeile im Import-Format (ohne Zeilenumbruch)."""
        fields = [
            self.name,
            self.title,
            self.section,
            str(self.credit_hours),
            self.instructor_id or "",
            str(self.enrollment_cap),
            self.meeting_days,
        ]
        if not self.is_arranged:
            fields += [str(self.start_time), str(self.end_time)]
        return ",".join(fields)

    def meeting_string(self) -> str:
        """Lesbare Zeitangabe, z.B. "MW 1330-1445" oder "Arranged"."""
        if self.is_arranged:
            return "Arranged"
        return f"{self.meeting_days} {self.start_time:04d}-{self.end_time:04d}"

    def conflicts_with(self, other: "Course") -> bool:
        """Prüft Zeitüberschneidung an mindestens einem gemeinsamen Tag.

        Grenzen zählen mit (Ende 1445 und Beginn 1445 überschneiden sich).
        Veranstaltungen ohne feste Zeit kollidieren nie.
        """
        if self.is_arranged or other.is_arranged:
            return False
        if not set(self.meeting_days) & set(other.meeting_days):
            return False
        return self.start_time <= other.end_time and other.start_time <= self.end_time

    def __str__(self) -> str:
        return self.to_record()
