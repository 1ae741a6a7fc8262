"""
Domain models and value objects.

Contains the fundamental domain values: CalendarYear, Species.
"""

from dendro.core.domain.errors import DomainMismatchError, InvalidYearError, YearError
from dendro.core.domain.species import Species, SpeciesKind, all_species
from dendro.core.domain.year import (
    DEFAULT_RELATIVE_YEAR,
    YEARS_PER_ROW,
    CalendarYear,
    year_range,
)

__all__ = [
    # Year
    "DEFAULT_RELATIVE_YEAR",
    "YEARS_PER_ROW",
    "CalendarYear",
    "year_range",
    # Species
    "Species",
    "SpeciesKind",
    "all_species",
    # Errors
    "YearError",
    "InvalidYearError",
    "DomainMismatchError",
]
