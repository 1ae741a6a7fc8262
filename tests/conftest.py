"""Shared fixtures."""

import pytest

from dendro.core.resources import SPECIES_FILE_ENV_VAR, reset_species_table


@pytest.fixture(autouse=True)
def bundled_species_table(monkeypatch):
    """Каждый тест начинает с таблицы видов из ресурса пакета"""
    monkeypatch.delenv(SPECIES_FILE_ENV_VAR, raising=False)
    reset_species_table()
    yield
    reset_species_table()
