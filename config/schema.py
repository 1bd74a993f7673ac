import codecs

from pydantic import BaseModel, Field, field_validator, model_validator


# ─── LEHRKRÄFTE ───

class FacultyDefinition(BaseModel):
    """Eine Lehrkraft im Verzeichnis."""
    # Unity-ID, wie sie im Feld instructorId der Kursdatei steht
    id: str
    # Vorname
    first_name: str
    # Nachname
    last_name: str
    # Dienstliche E-Mail-Adresse
    email: str
    # Maximale Anzahl Veranstaltungen pro Semester
    max_courses: int = Field(3, ge=1, le=3,
        description="Max. Veranstaltungen pro Semester")


# ─── GESAMT-CONFIG ───

class CatalogConfig(BaseModel):
    """Gesamtkonfiguration des Kurskatalogs."""
    # Anzeigename des Katalogs
    catalog_name: str = Field("Kurskatalog",
        description="Name des Katalogs")
    # Zeichenkodierung der Kursdateien (Import und Export)
    encoding: str = Field("utf-8",
        description="Zeichenkodierung der Kursdateien")
    # Verzeichnis der Lehrkräfte
    faculty: list[FacultyDefinition] = Field(default_factory=list,
        description="Lehrkräfte-Verzeichnis")

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Prüfe dass Python die Kodierung kennt."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unbekannte Zeichenkodierung: {v}")
        return v

    @model_validator(mode='after')
    def validate_unique_faculty_ids(self):
        """Prüfe dass jede Unity-ID nur einmal vorkommt."""
        seen: set[str] = set()
        for f in self.faculty:
            if f.id in seen:
                raise ValueError(f"Lehrkraft-ID '{f.id}' ist doppelt vergeben")
            seen.add(f.id)
        return self
