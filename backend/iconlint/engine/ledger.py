"""Known-issues ledger — accepted rule failures keyed by rule and raw path.

Two modes, fixed at construction:

- LOADED: read from disk, read-only; failures already listed are suppressed.
- REGENERATING: starts empty, write-only; every failure is recorded and the
  whole ledger is written back once when the run ends.

On disk the ledger is ``{rule: {path: icon_name}}`` as indented JSON.
"""

from __future__ import annotations

import enum
import json
import logging
import threading
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class LedgerError(RuntimeError):
    pass


class LedgerMode(enum.Enum):
    LOADED = "loaded"
    REGENERATING = "regenerating"


class Ledger:
    def __init__(
        self,
        mode: LedgerMode = LedgerMode.LOADED,
        entries: dict[str, dict[str, str]] | None = None,
        path: Path | str | None = None,
    ) -> None:
        self.mode = mode
        self.path = Path(path) if path is not None else None
        # Regeneration always starts from scratch
        self._entries: dict[str, dict[str, str]] = {}
        if mode is LedgerMode.LOADED and entries:
            self._entries = {rule: dict(paths) for rule, paths in entries.items()}
        self._lock = threading.Lock()
        self._flushed = False

    @classmethod
    def open(
        cls,
        path: Path | str,
        regenerate: bool = False,
        required: bool = False,
    ) -> "Ledger":
        """Load the ledger at ``path``, or start an empty one to regenerate it."""
        path = Path(path)
        if regenerate:
            logger.info("Regenerating ledger %s", path)
            return cls(LedgerMode.REGENERATING, path=path)

        if not path.exists():
            if required:
                raise LedgerError(f"Ledger file not found: {path}")
            logger.warning("Ledger %s not found, starting with no known issues", path)
            return cls(LedgerMode.LOADED, path=path)

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise LedgerError(f"Cannot read ledger {path}: {e}") from e

        entries = _validate(data, path)
        logger.debug("Loaded ledger %s (%d rules)", path, len(entries))
        return cls(LedgerMode.LOADED, entries=entries, path=path)

    @property
    def regenerating(self) -> bool:
        return self.mode is LedgerMode.REGENERATING

    def is_ignored(self, rule: str, path_data: str) -> bool:
        """True when a LOADED ledger lists ``path_data`` under ``rule``."""
        if self.regenerating:
            return False
        return path_data in self._entries.get(rule, {})

    def record(self, rule: str, path_data: str, icon_name: str) -> None:
        if not self.regenerating:
            return
        with self._lock:
            self._entries.setdefault(rule, {})[path_data] = icon_name

    def entries(self) -> dict[str, dict[str, str]]:
        """Snapshot sorted by rule name, then by icon name."""
        with self._lock:
            return {
                rule: dict(sorted(self._entries[rule].items(), key=lambda kv: (kv[1], kv[0])))
                for rule in sorted(self._entries)
            }

    def __len__(self) -> int:
        with self._lock:
            return sum(len(paths) for paths in self._entries.values())

    def flush(self) -> bool:
        """Write a regenerated ledger to disk. Only the first call writes.

        Returns True when the file was written.
        """
        if not self.regenerating:
            return False
        if self._flushed:
            logger.warning("Ledger %s already flushed, ignoring", self.path)
            return False
        if self.path is None:
            raise LedgerError("Cannot flush a ledger with no path")

        text = json.dumps(self.entries(), indent=2, ensure_ascii=False) + "\n"
        self.path.write_text(text, encoding="utf-8")
        self._flushed = True
        logger.info("Wrote ledger %s (%d entries)", self.path, len(self))
        return True

    def __enter__(self) -> "Ledger":
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        # A run that died halfway must not overwrite the ledger
        if exc_type is None:
            self.flush()


def _validate(data: Any, path: Path) -> dict[str, dict[str, str]]:
    if not isinstance(data, dict):
        raise LedgerError(f"Ledger {path} must be a JSON object")
    for rule, paths in data.items():
        if not isinstance(paths, dict) or not all(isinstance(v, str) for v in paths.values()):
            raise LedgerError(f"Ledger {path}: entry {rule!r} must map path strings to icon names")
    return data
