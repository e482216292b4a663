"""Import set management for generated code.

Keeps a ClassModel's imports consistent with the symbols that generated
code references: each missing import is added once, present ones are
left alone, and clashes with a different type under the same short name
are reported rather than resolved.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from ..java_model.models import ClassModel, SymbolRef

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportConflict:
    """A required import that clashes with an existing one."""

    name: str
    existing: str
    requested: str

    @property
    def message(self) -> str:
        return (
            f"{self.name} is already imported as {self.existing}; "
            f"{self.requested} was not imported"
        )


@dataclass
class ImportReport:
    """Outcome of reconciling a class's imports."""

    added: List[SymbolRef] = field(default_factory=list)
    present: List[SymbolRef] = field(default_factory=list)
    conflicts: List[ImportConflict] = field(default_factory=list)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)


def ensure_imported(model: ClassModel, symbols: Iterable[SymbolRef]) -> ImportReport:
    """Add an import for every referenced symbol the model is missing.

    Symbols are processed in the order given; duplicates and symbols
    that need no import (``java.lang`` types, unqualified names) are
    skipped. Calling this twice with the same symbols changes nothing
    the second time.

    Args:
        model: Class whose imports are updated in place
        symbols: Types referenced by generated code

    Returns:
        ImportReport listing added, already-present and conflicting imports
    """
    report = ImportReport()
    seen = set()

    for symbol in symbols:
        if symbol.qualified_name in seen:
            continue
        seen.add(symbol.qualified_name)

        if not symbol.requires_import:
            logger.debug(f"No import needed for {symbol.qualified_name}")
            continue

        existing = model.get_import(symbol.name)
        if existing == symbol.qualified_name:
            report.present.append(symbol)
        elif existing is not None:
            conflict = ImportConflict(symbol.name, existing, symbol.qualified_name)
            logger.warning(f"Import conflict in {model.qualified_name}: {conflict.message}")
            report.conflicts.append(conflict)
        else:
            model.add_import(symbol)
            report.added.append(symbol)

    return report
