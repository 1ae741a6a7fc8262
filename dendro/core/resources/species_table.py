"""
SpeciesTable — Таблица кодов древесных видов

Ресурс в формате properties: одна строка `ID = Name`.
- Пробелы вокруг ID и Name обрезаются
- Пустые строки и строки, начинающиеся с '#', пропускаются
- Разделение по первому '=' (в имени '=' допустим)
- ID — 4 заглавные ASCII-буквы, название не пустое

Таблица загружается один раз на процесс и далее только читается.
"""

import logging
import os
import re
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Final, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)


# Ресурс по умолчанию (внутри пакета)
DEFAULT_SPECIES_RESOURCE: Final[str] = "Species.properties"

# Переменная окружения для подмены ресурса
SPECIES_FILE_ENV_VAR: Final[str] = "DENDRO_SPECIES_FILE"

# Код вида: 4 заглавные ASCII-буквы
SPECIES_ID_PATTERN: Final = re.compile(r"^[A-Z]{4}\Z")


class SpeciesTableError(ValueError):
    """Некорректная строка в ресурсе таблицы видов."""

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"Malformed species entry at line {line_number}: {line!r} (expected 'ID = Name')"
        )


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SpeciesTableConfig:
    """Конфигурация загрузки таблицы видов.

    path=None — использовать ресурс пакета.
    """

    path: Optional[Path] = None
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> "SpeciesTableConfig":
        """Конфигурация из окружения (DENDRO_SPECIES_FILE)."""
        raw = os.environ.get(SPECIES_FILE_ENV_VAR)
        return cls(path=Path(raw) if raw else None)


# =============================================================================
# TABLE
# =============================================================================


class SpeciesTable:
    """
    Двунаправленная таблица ID ↔ Name.

    Immutable после создания: обе стороны отдаются как read-only mapping.
    """

    def __init__(self, entries: Iterable[tuple]):
        id2name: Dict[str, str] = {}
        name2id: Dict[str, str] = {}
        for species_id, name in entries:
            # Повторный ID перезаписывает предыдущий, старое название удаляется
            previous = id2name.get(species_id)
            if previous is not None and name2id.get(previous) == species_id:
                del name2id[previous]
            id2name[species_id] = name
            name2id[name] = species_id
        self._id2name: Mapping[str, str] = MappingProxyType(id2name)
        self._name2id: Mapping[str, str] = MappingProxyType(name2id)

    @classmethod
    def from_text(cls, text: str) -> "SpeciesTable":
        """
        Разбор текста properties.

        Raises:
            SpeciesTableError: Строка без '=', с пустым названием
                или с кодом не из 4 заглавных букв
        """
        return cls(_parse_properties(text))

    @classmethod
    def from_path(cls, path: Path, encoding: str = "utf-8") -> "SpeciesTable":
        """Загрузка из файла."""
        return cls.from_text(Path(path).read_text(encoding=encoding))

    def lookup_name(self, species_id: str) -> Optional[str]:
        return self._id2name.get(species_id)

    def lookup_id(self, name: str) -> Optional[str]:
        return self._name2id.get(name)

    @property
    def ids(self) -> frozenset:
        return frozenset(self._id2name)

    @property
    def names(self) -> frozenset:
        return frozenset(self._name2id)

    def __contains__(self, species_id: object) -> bool:
        return species_id in self._id2name

    def __len__(self) -> int:
        return len(self._id2name)

    def __repr__(self) -> str:
        return f"SpeciesTable({len(self)} species)"


def _parse_properties(text: str) -> Iterable[tuple]:
    entries = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            logger.debug("Skipping line %d of species table", line_number)
            continue

        species_id, sep, name = stripped.partition("=")
        if not sep:
            raise SpeciesTableError(line_number, line)

        species_id, name = species_id.strip(), name.strip()
        if not name or not SPECIES_ID_PATTERN.match(species_id):
            raise SpeciesTableError(line_number, line)

        entries.append((species_id, name))
    return entries


# =============================================================================
# PROCESS-WIDE TABLE
# =============================================================================


def load_species_table(config: Optional[SpeciesTableConfig] = None) -> SpeciesTable:
    """
    Загрузка таблицы согласно конфигурации.

    Args:
        config: Конфигурация (по умолчанию — из окружения)

    Returns:
        SpeciesTable
    """
    if config is None:
        config = SpeciesTableConfig.from_env()

    if config.path is not None:
        source = str(config.path)
        table = SpeciesTable.from_path(config.path, encoding=config.encoding)
    else:
        source = f"package resource {DEFAULT_SPECIES_RESOURCE}"
        text = (
            resources.files("dendro.core.resources")
            .joinpath(DEFAULT_SPECIES_RESOURCE)
            .read_text(encoding=config.encoding)
        )
        table = SpeciesTable.from_text(text)

    logger.info("Loaded %d species from %s", len(table), source)
    return table


@lru_cache(maxsize=None)
def get_species_table() -> SpeciesTable:
    """Таблица видов процесса (загружается при первом обращении)."""
    return load_species_table()


def reset_species_table() -> None:
    """Сброс кэша таблицы (следующий вызов get_species_table перечитает ресурс)."""
    get_species_table.cache_clear()
