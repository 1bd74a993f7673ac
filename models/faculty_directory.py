"""FacultyDirectory – Verzeichnis aller Lehrkräfte, Suche per ID."""

import logging
from typing import TYPE_CHECKING, Iterable, Iterator, Optional

from models.faculty import Faculty

if TYPE_CHECKING:
    from config.schema import FacultyDefinition

logger = logging.getLogger(__name__)


class FacultyDirectory:
    """Verwaltet Lehrkräfte und deren Stundenpläne.

    Wird explizit an Import-Funktionen übergeben (kein globaler Zustand),
    damit mehrere Importe gegen getrennte Verzeichnisse laufen können.
    """

    def __init__(self) -> None:
        self._faculty: dict[str, Faculty] = {}

    @classmethod
    def from_definitions(cls, definitions: Iterable["FacultyDefinition"]) -> "FacultyDirectory":
        """Baut ein Verzeichnis aus den Einträgen der Konfiguration."""
        directory = cls()
        for d in definitions:
            directory.add_faculty(Faculty(**d.model_dump()))
        return directory

    def add_faculty(self, faculty: Faculty) -> bool:
        """Fügt eine Lehrkraft hinzu. False wenn die ID schon vergeben ist."""
        if faculty.id in self._faculty:
            logger.warning(f"Lehrkraft {faculty.id} existiert bereits – ignoriert.")
            return False
        self._faculty[faculty.id] = faculty
        return True

    def remove_faculty(self, faculty_id: str) -> bool:
        """Entfernt eine Lehrkraft. True wenn eine entfernt wurde."""
        return self._faculty.pop(faculty_id, None) is not None

    def get_faculty_by_id(self, faculty_id: Optional[str]) -> Optional[Faculty]:
        if not faculty_id:
            return None
        return self._faculty.get(faculty_id)

    def new_directory(self) -> None:
        """Leert das Verzeichnis (inkl. aller Stundenpläne)."""
        self._faculty = {}

    def __len__(self) -> int:
        return len(self._faculty)

    def __iter__(self) -> Iterator[Faculty]:
        return iter(self._faculty.values())

    def __repr__(self) -> str:
        return f"FacultyDirectory({len(self._faculty)} Lehrkräfte)"
