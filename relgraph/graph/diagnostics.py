"""Recoverable diagnostics collected while a graph is built.

Gaps in the input metadata (an unresolvable lookup, a many-to-many table
with no primary key, ...) never abort a build.  Each one is recorded here
for the caller to display and is also sent to the module logger.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

NULL_COLUMN = "null_column"
UNRESOLVED_LOOKUP = "unresolved_lookup"
MISSING_PAIR = "missing_pair"
MISSING_PRIMARY_KEY = "missing_primary_key"


@dataclass
class Diagnostic:
    kind: str
    table: str
    message: str
    level: int = logging.WARNING

    @property
    def is_warning(self) -> bool:
        return self.level >= logging.WARNING


@dataclass
class Diagnostics:
    entries: list[Diagnostic] = field(default_factory=list)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def report(
        self, kind: str, table: str, message: str, level: int = logging.WARNING
    ) -> Diagnostic:
        entry = Diagnostic(kind=kind, table=table, message=message, level=level)
        self.entries.append(entry)
        logger.log(level, "%s: %s", kind, message)
        return entry

    def warn(self, kind: str, table: str, message: str) -> Diagnostic:
        return self.report(kind, table, message, logging.WARNING)

    def note(self, kind: str, table: str, message: str) -> Diagnostic:
        """Record a skipped element that is expected and not worth a warning."""
        return self.report(kind, table, message, logging.DEBUG)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.entries if d.is_warning]

    def of_kind(self, kind: str, table: Optional[str] = None) -> list[Diagnostic]:
        return [
            d for d in self.entries
            if d.kind == kind and (table is None or d.table == table)
        ]
