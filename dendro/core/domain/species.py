"""
Species — Древесный вид

Вид задаётся либо 4-буквенным кодом (ID, уникален), либо, если код
неизвестен, произвольным названием. Сопоставление ID ↔ Name идёт через
таблицу видов процесса (dendro.core.resources.species_table).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from dendro.core.resources.species_table import (
    SPECIES_ID_PATTERN,
    SpeciesTable,
    get_species_table,
)


# =============================================================================
# ENUMS
# =============================================================================


class SpeciesKind(str, Enum):
    """Как задан вид"""

    ID = "id"
    NAME = "name"


# =============================================================================
# SPECIES MODEL
# =============================================================================


class Species(BaseModel):
    """
    Вид по коду или по названию.

    Immutable модель (frozen=True).

    Равенство:
    - id / id: по коду
    - name / name: по названию
    - id / name: если таблица сопоставляет название этому коду
    """

    kind: SpeciesKind = Field(..., description="Код (ID) или название (NAME)")
    text: str = Field(..., min_length=1, description="Код или название")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_species_id(self) -> "Species":
        """Код вида — ровно 4 заглавные ASCII-буквы."""
        if self.kind == SpeciesKind.ID and not SPECIES_ID_PATTERN.match(self.text):
            raise ValueError(f"species id must be 4 upper-case letters, got {self.text!r}")
        return self

    @classmethod
    def from_id(cls, species_id: str) -> "Species":
        return cls(kind=SpeciesKind.ID, text=species_id)

    @classmethod
    def from_name(cls, name: str) -> "Species":
        return cls(kind=SpeciesKind.NAME, text=name)

    @property
    def name(self) -> Optional[str]:
        """Название вида (None, если код неизвестен)."""
        if self.kind == SpeciesKind.ID:
            return get_species_table().lookup_name(self.text)
        return self.text

    @property
    def id(self) -> Optional[str]:
        """Код вида (None, если название неизвестно)."""
        if self.kind == SpeciesKind.ID:
            return self.text
        return get_species_table().lookup_id(self.text)

    @property
    def is_known(self) -> bool:
        """Есть ли вид в таблице."""
        table = get_species_table()
        if self.kind == SpeciesKind.ID:
            return self.text in table
        return table.lookup_id(self.text) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Species):
            return NotImplemented
        if self.kind == other.kind:
            return self.text == other.text
        # id / name: сравнение через таблицу
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        """
        Согласовано с __eq__: известные виды хешируются по коду.

        Хеш зависит от таблицы процесса: после reset_species_table() с другим
        ресурсом Species, уже лежащие в set или ключах dict, могут сменить хеш.
        """
        species_id = self.id
        if species_id is not None:
            return hash((SpeciesKind.ID, species_id))
        return hash((self.kind, self.text))

    def __str__(self) -> str:
        return self.name or self.text


def all_species(table: Optional[SpeciesTable] = None) -> frozenset:
    """Все известные виды (по коду)."""
    if table is None:
        table = get_species_table()
    return frozenset(Species.from_id(species_id) for species_id in table.ids)
