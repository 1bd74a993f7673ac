"""Kurskatalog — Haupt-CLI.

Verwendung:
  python main.py setup                          Default-Konfiguration anlegen
  python main.py config show                    Konfiguration anzeigen
  python main.py import <kurse.txt>             Kursdatei importieren
  python main.py import <kurse.txt> -o <ziel>   Importieren + kanonisch exportieren
  python main.py faculty <kurse.txt>            Lehrkräfte-Auslastung nach Import
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()

DEFAULT_CONFIG_PATH = Path("config/catalog_config.yaml")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_config_or_abort(config_path: Optional[Path]):
    """Lädt die Konfiguration oder bricht mit Fehlermeldung ab."""
    from config.manager import ConfigManager
    mgr = ConfigManager(config_path)
    if mgr.first_run_check():
        console.print(
            f"[red]Keine Konfiguration gefunden: {mgr.DEFAULT_CONFIG}[/red]\n"
            "Führen Sie zunächst [bold]python main.py setup[/bold] aus."
        )
        sys.exit(1)
    try:
        return mgr, mgr.load()
    except ValueError as e:
        console.print(f"[red bold]{e}[/red bold]")
        sys.exit(1)


def _import_or_abort(datei: Path, mgr, config):
    """Importiert eine Kursdatei gegen ein frisches Lehrkräfte-Verzeichnis."""
    from data.course_records import CourseFileAccessError, read_course_records_with_report

    directory = mgr.load_directory()
    try:
        courses, report = read_course_records_with_report(
            datei, directory, encoding=config.encoding
        )
    except CourseFileAccessError as e:
        console.print(f"[red bold]Import fehlgeschlagen:[/red bold]\n{e}")
        sys.exit(1)
    return courses, report, directory


config_option = click.option(
    "--config", "config_path", type=click.Path(path_type=Path),
    default=str(DEFAULT_CONFIG_PATH), help="Pfad zur YAML-Konfiguration.",
)
verbose_option = click.option(
    "--verbose", "-v", is_flag=True, default=False,
    help="Übersprungene Zeilen und Duplikate protokollieren.",
)


# ─── SETUP ────────────────────────────────────────────────────────────────────

@click.command("setup")
@config_option
def cmd_setup(config_path: Path):
    """Legt die Default-Konfiguration (inkl. Beispiel-Lehrkräfte) an."""
    from config.defaults import default_catalog_config
    from config.manager import ConfigManager

    mgr = ConfigManager(config_path)
    if not mgr.first_run_check():
        console.print("[yellow]Eine Konfiguration existiert bereits.[/yellow]")
        if not click.confirm("Trotzdem überschreiben?", default=False):
            return

    mgr.save(default_catalog_config())
    console.print("[bold green]Einrichtung abgeschlossen![/bold green]")


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen."""


@cmd_config.command("show")
@config_option
def config_show(config_path: Path):
    """Zeigt die aktuelle Konfiguration an."""
    mgr, config = _load_config_or_abort(config_path)

    console.print(Panel(
        f"[bold]{config.catalog_name}[/bold]  |  Kodierung: {config.encoding}",
        title="Katalog-Konfiguration",
        border_style="cyan",
    ))

    table = Table(title="Lehrkräfte", box=box.ROUNDED)
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("E-Mail")
    table.add_column("Max. Kurse")
    for f in config.faculty:
        table.add_row(f.id, f"{f.first_name} {f.last_name}", f.email, str(f.max_courses))
    console.print(table)


# ─── IMPORT ───────────────────────────────────────────────────────────────────

@click.command("import")
@click.argument("datei", type=click.Path(path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None,
              help="Übernommene Kurse kanonisch in diese Datei schreiben.")
@config_option
@verbose_option
def cmd_import(datei: Path, output: Optional[Path], config_path: Path, verbose: bool):
    """Importiert eine Kursdatei und zeigt die übernommenen Kurse."""
    _setup_logging(verbose)
    mgr, config = _load_config_or_abort(config_path)
    from data.course_records import CourseFileAccessError, write_course_records

    console.print(f"[bold]Importiere:[/bold] {datei}")
    courses, report, _ = _import_or_abort(datei, mgr, config)

    table = Table(title=config.catalog_name, box=box.ROUNDED)
    table.add_column("Kurs", style="bold")
    table.add_column("Sektion")
    table.add_column("Titel")
    table.add_column("Credits", justify="right")
    table.add_column("Lehrkraft")
    table.add_column("Plätze", justify="right")
    table.add_column("Termin")
    for c in courses:
        table.add_row(
            c.name, c.section, c.title, str(c.credit_hours),
            c.instructor_id or "[dim]–[/dim]", str(c.enrollment_cap), c.meeting_string(),
        )
    console.print(table)
    report.print_rich()

    if output is not None:
        try:
            write_course_records(output, courses, encoding=config.encoding)
        except CourseFileAccessError as e:
            console.print(f"[red bold]Export fehlgeschlagen:[/red bold]\n{e}")
            sys.exit(1)
        console.print(f"[green]✓[/green] {len(courses)} Kurse gespeichert: {output}")


# ─── FACULTY ──────────────────────────────────────────────────────────────────

@click.command("faculty")
@click.argument("datei", type=click.Path(path_type=Path))
@config_option
@verbose_option
def cmd_faculty(datei: Path, config_path: Path, verbose: bool):
    """Importiert eine Kursdatei und zeigt die Stundenpläne der Lehrkräfte."""
    _setup_logging(verbose)
    mgr, config = _load_config_or_abort(config_path)
    _, _, directory = _import_or_abort(datei, mgr, config)

    table = Table(title="Lehrkräfte-Auslastung", box=box.ROUNDED)
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Kurse", justify="right")
    table.add_column("Veranstaltungen")
    for faculty in directory:
        n = faculty.schedule.get_num_scheduled_courses()
        load = f"{n}/{faculty.max_courses}"
        if faculty.is_overloaded():
            load = f"[red]{load}[/red]"
        table.add_row(
            faculty.id, faculty.full_name, load,
            ", ".join(f"{c.name}-{c.section}" for c in faculty.schedule.courses),
        )
    console.print(table)


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
def cli():
    """Kurskatalog: Import/Export von Kurs-Datensätzen.

    Starten Sie mit: python main.py setup
    """


def main():
    """Einstiegspunkt."""
    cli()


# Befehle registrieren
cli.add_command(cmd_setup)
cli.add_command(cmd_config)
cli.add_command(cmd_import)
cli.add_command(cmd_faculty)


if __name__ == "__main__":
    main()
