import csv
from pathlib import Path

from core.config.config_service import LABELS_TSV
from core.logging.logic.logger import logger

LOCALE_TRACK_MISSING_KEYS = True
DEFAULT_LANGUAGE = "de"


class TranslationManager:
    """
    Verwaltet UI-Texte aus einer zentralen labels.tsv Datei
    (Spalten: label, de). Fehlende Einträge werden einmalig geloggt.
    """

    def __init__(self, lang: str = DEFAULT_LANGUAGE):
        self.lang = lang
        self.translations = {}  # {lang: {label: text}}
        self.file_path: Path | None = None
        self._missing_keys_logged = set()

    def load_files(self, file_paths: list[Path]) -> None:
        """Lädt mehrere Übersetzungsdateien; spätere überschreiben frühere."""
        self.translations = {}
        self.file_path = None

        for file_path in file_paths:
            if self.file_path is None:
                self.file_path = file_path.resolve()
            with open(file_path, encoding="utf-8", newline="") as f:
                reader = csv.reader(f, delimiter="\t")
                header = next(reader, None)
                if not header:
                    continue
                langs = header[1:]
                for lang in langs:
                    self.translations.setdefault(lang, {})

                for row in reader:
                    if not row or row[0].startswith("#"):
                        continue
                    label = row[0]
                    for i, lang in enumerate(langs):
                        text = row[i + 1] if i + 1 < len(row) else ""
                        self.translations[lang][label] = text

    def load_file(self, file_path: Path) -> None:
        """Kompatibilitätsmethode für Einzeldateien."""
        self.load_files([file_path])

    def t(self, label: str, default: str | None = None) -> str:
        """
        Gibt die Übersetzung zurück, sonst den Default, sonst das Label selbst.
        """
        value = self.translations.get(self.lang, {}).get(label)
        if value:
            return value

        if LOCALE_TRACK_MISSING_KEYS and label not in self._missing_keys_logged:
            logger.log(
                feature="Locale",
                event="MissingKey",
                level="DEBUG",
                message=f"Missing translation key '{label}' (lang={self.lang})",
            )
            self._missing_keys_logged.add(label)

        return default if default is not None else label


translations = TranslationManager()
if LABELS_TSV.exists():
    translations.load_file(LABELS_TSV)


def T(label: str, default: str | None = None) -> str:
    return translations.t(label, default)
