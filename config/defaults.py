from config.schema import CatalogConfig, FacultyDefinition


# Beispiel-Lehrkräfte (Informatik)
DEFAULT_FACULTY = [
    ("jdyoung2", "Jason", "Young", 3),
    ("sesmith5", "Sarah", "Smith", 3),
    ("tmbarnes", "Tiffany", "Barnes", 2),
    ("kpatel", "Kiran", "Patel", 2),
    ("ajwhite", "Alex", "White", 1),
]


def default_faculty() -> list[FacultyDefinition]:
    """Standard-Lehrkräfte mit E-Mail nach Schema <id>@ncsu.edu."""
    return [
        FacultyDefinition(
            id=uid, first_name=first, last_name=last,
            email=f"{uid}@ncsu.edu", max_courses=max_courses,
        )
        for uid, first, last, max_courses in DEFAULT_FACULTY
    ]


def default_catalog_config() -> CatalogConfig:
    """Vollständige Default-Konfiguration."""
    return CatalogConfig(
        catalog_name="Informatik-Kurskatalog",
        encoding="utf-8",
        faculty=default_faculty(),
    )
