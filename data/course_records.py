"""Import und Export von Kurs-Datensätzen (Textdatei ↔ SortedList[Course]).

Import ist best-effort: ungültige Zeilen werden übersprungen, Duplikate
(gleiches (name, section)) verworfen – der erste Datensatz gewinnt.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, Optional, Union

from pydantic import BaseModel

from data.record_parser import CourseRecordError, RecordErrorReason, parse_course_line
from models.course import Course
from models.faculty import ScheduleConflictError
from models.faculty_directory import FacultyDirectory
from models.sorted_list import SortedList

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class CourseFileAccessError(OSError):
    """Kursdatei kann nicht gelesen bzw. geschrieben werden."""


class ImportReport(BaseModel):
    """Aggregierte Zählwerte eines Imports (keine Einzelfehler)."""

    lines_read: int = 0
    accepted: int = 0
    duplicates: int = 0
    skipped: dict[str, int] = {}   # RecordErrorReason.value → Anzahl

    @property
    def skipped_total(self) -> int:
        return sum(self.skipped.values())

    def print_rich(self) -> None:
        from rich.console import Console
        from rich.panel import Panel
        console = Console()
        lines = [f"[green]Übernommen: {self.accepted}[/green]  "
                 f"[dim]Zeilen gelesen: {self.lines_read}[/dim]"]
        if self.duplicates:
            lines.append(f"[yellow]Duplikate verworfen: {self.duplicates}[/yellow]")
        if self.skipped:
            lines.append(f"\n[yellow]Übersprungen: {self.skipped_total}[/yellow]")
            for reason, count in sorted(self.skipped.items()):
                lines.append(f"  [yellow]• {reason}: {count}[/yellow]")
        console.print(Panel("\n".join(lines), title="Kurs-Import", border_style="cyan"))


def new_course_list() -> SortedList[Course]:
    return SortedList(key=lambda c: c.sort_key)


# ─── Dozenten-Zuordnung ───────────────────────────────────────────────────────

def link_instructor(course: Course, directory: Optional[FacultyDirectory]) -> Course:
    """Ordnet eine Veranstaltung dem Stundenplan ihrer Lehrkraft zu.

    - Ohne Verzeichnis oder ohne instructor_id: unverändert.
    - ID bekannt: Kurs wird dem Stundenplan angehängt.
    - ID unbekannt: Kurs bleibt gültig, aber ohne instructor_id.

    Raises:
        CourseRecordError: (SCHEDULE_CONFLICT) wenn der Stundenplan den Kurs ablehnt.
    """
    if directory is None or course.instructor_id is None:
        return course
    faculty = directory.get_faculty_by_id(course.instructor_id)
    if faculty is None:
        logger.debug(f"Lehrkraft '{course.instructor_id}' unbekannt – "
                     f"{course.name}-{course.section} ohne Zuordnung.")
        return course.model_copy(update={"instructor_id": None})
    try:
        faculty.schedule.add_course_to_schedule(course)
    except ScheduleConflictError as e:
        raise CourseRecordError(RecordErrorReason.SCHEDULE_CONFLICT, str(e)) from e
    return course


# ─── Import ───────────────────────────────────────────────────────────────────

def _decode_line(raw: bytes, encoding: str) -> str:
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise CourseRecordError(
            RecordErrorReason.INVALID_VALUE, f"nicht dekodierbar ({encoding}): {e}"
        ) from e


def read_course_records_with_report(
    path: PathLike,
    directory: Optional[FacultyDirectory] = None,
    encoding: str = "utf-8",
) -> tuple[SortedList[Course], ImportReport]:
    """Liest eine Kursdatei und liefert Kursliste + Import-Bericht.

    Raises:
        CourseFileAccessError: wenn die Datei nicht geöffnet werden kann.
    """
    path = Path(path)
    courses = new_course_list()
    seen: set[tuple[str, str]] = set()
    skipped: Counter = Counter()
    report = ImportReport()

    try:
        f = open(path, "rb")
    except OSError as e:
        raise CourseFileAccessError(f"Kursdatei nicht lesbar: {path} ({e})") from e

    # Binär lesen und zeilenweise dekodieren: ein ungültiges Byte kostet nur seine Zeile.
    with f:
        for lineno, raw in enumerate(f, start=1):
            report.lines_read += 1
            try:
                course = parse_course_line(_decode_line(raw, encoding))
                if course.identity_key in seen:
                    report.duplicates += 1
                    logger.debug(f"{path.name}:{lineno}: Duplikat "
                                 f"{course.name}-{course.section} verworfen.")
                    continue
                course = link_instructor(course, directory)
            except CourseRecordError as e:
                skipped[e.reason.value] += 1
                logger.debug(f"{path.name}:{lineno}: übersprungen ({e.reason.value}): {e}")
                continue
            seen.add(course.identity_key)
            courses.add(course)

    report.accepted = len(courses)
    report.skipped = dict(skipped)
    logger.info(f"{path}: {report.accepted} Kurse übernommen, "
                f"{report.duplicates} Duplikate, {report.skipped_total} übersprungen.")
    return courses, report


def read_course_records(
    path: PathLike,
    directory: Optional[FacultyDirectory] = None,
    encoding: str = "utf-8",
) -> SortedList[Course]:
    """Liest eine Kursdatei; ungültige Zeilen und Duplikate werden ignoriert.

    Raises:
        CourseFileAccessError: wenn die Datei nicht geöffnet werden kann.
    """
    courses, _ = read_course_records_with_report(path, directory, encoding)
    return courses


# ─── Export ───────────────────────────────────────────────────────────────────

def write_course_records(
    path: PathLike, courses: Iterable[Course], encoding: str = "utf-8"
) -> None:
    """Schreibt jede Veranstaltung als kanonische Zeile in Listenreihenfolge.

    Eine bestehende Datei wird ohne Backup überschrieben.

    Raises:
        CourseFileAccessError: wenn die Zieldatei nicht geöffnet werden kann.
    """
    path = Path(path)
    try:
        f = open(path, "w", encoding=encoding)
    except OSError as e:
        raise CourseFileAccessError(f"Kursdatei nicht schreibbar: {path} ({e})") from e

    written = 0
    with f:
        for course in courses:
            f.write(course.to_record() + "\n")
            written += 1
    logger.info(f"{path}: {written} Kurse geschrieben.")
