"""
Bundled resources and their loaders.

Species.properties — species code table (see species_table).
"""

from dendro.core.resources.species_table import (
    DEFAULT_SPECIES_RESOURCE,
    SPECIES_FILE_ENV_VAR,
    SPECIES_ID_PATTERN,
    SpeciesTable,
    SpeciesTableConfig,
    SpeciesTableError,
    get_species_table,
    load_species_table,
    reset_species_table,
)

__all__ = [
    "DEFAULT_SPECIES_RESOURCE",
    "SPECIES_FILE_ENV_VAR",
    "SPECIES_ID_PATTERN",
    "SpeciesTable",
    "SpeciesTableConfig",
    "SpeciesTableError",
    "get_species_table",
    "load_species_table",
    "reset_species_table",
]
