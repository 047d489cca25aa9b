"""
Pytest configuration and fixtures for i18n-service tests.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path to allow importing i18n_service
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from i18n_service import MappingResourceLoader, ResourceStore, TranslationResolver  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"

EN_US = {
    "app": {"title": "Term Resolver"},
    "user": {"name": "Name", "gender": "Gender"},
    "greet": "Hi {0}, meet {1}",
    "welcome": "Welcome, {0}!",
}
FR_FR = {
    "user": {"name": "Nom"},
    "greet": "Salut {0}, voici {1}",
}
ES_ES = {"user": {"name": "Nombre", "gender": "Sexo"}}
DE_DE = {"user": {"name": "Benutzername"}}


class RecordingDiagnostics:
    """Diagnostics sink that keeps every message for assertions."""

    def __init__(self) -> None:
        self.warnings: list[str] = []
        self.errors: list[str] = []

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def diagnostics() -> RecordingDiagnostics:
    return RecordingDiagnostics()


@pytest.fixture
def loader() -> MappingResourceLoader:
    """In-memory loader serving en-us, fr-fr, es-es and de-de under i18n/."""
    return MappingResourceLoader({
        "i18n/resources.en-us.json": EN_US,
        "i18n/resources.fr-fr.json": FR_FR,
        "i18n/resources.es-es.json": ES_ES,
        "i18n/resources.de-de.json": DE_DE,
        "i18n/resources.it-it.json": {},
        "i18n/resources.xx-xx.json": "{not json",
    })


@pytest.fixture
def store(loader: MappingResourceLoader, diagnostics: RecordingDiagnostics) -> ResourceStore:
    return ResourceStore(loader, diagnostics=diagnostics, base_path="i18n/")


@pytest.fixture
def resolver(store: ResourceStore, diagnostics: RecordingDiagnostics) -> TranslationResolver:
    return TranslationResolver(store, diagnostics=diagnostics)
