"""FastAPI dependency injection."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from iconlint.config import settings
from iconlint.engine.config import LintConfig
from iconlint.engine.ledger import Ledger
from iconlint.engine.linter import Linter
from iconlint.svg.catalog import IconCatalog

logger = logging.getLogger(__name__)


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_linter() -> Linter:
    # The service never rebuilds the ledger, it only honours it
    ledger = Ledger.open(settings.ledger_path, required=settings.ledger_required)

    catalog = None
    if Path(settings.catalog_path).exists():
        catalog = IconCatalog.load(settings.catalog_path)
    else:
        logger.warning("Catalog %s not found, title lookup disabled", settings.catalog_path)

    return Linter(
        config=LintConfig.from_settings(settings),
        ledger=ledger,
        catalog=catalog,
        max_workers=settings.max_workers,
    )
