"""Symbols referenced by generated exception handler code."""

from dataclasses import dataclass

from ..constants import (
    CAUGHT_EXCEPTION,
    CONTAINER_MARKER,
    DEFAULT_ANNOTATION_PACKAGE,
    HANDLER_MARKER,
    PRECEDENCE,
    TRAVERSAL_MODE,
)
from ..java_model.models import SymbolRef


@dataclass(frozen=True)
class CatchSymbols:
    """The exception control API types, resolved against one package."""

    container: SymbolRef
    handles: SymbolRef
    traversal_mode: SymbolRef
    precedence: SymbolRef
    caught_exception: SymbolRef

    @classmethod
    def for_package(cls, package: str = DEFAULT_ANNOTATION_PACKAGE) -> "CatchSymbols":
        def ref(name: str) -> SymbolRef:
            return SymbolRef(name=name, qualified_name=f"{package}.{name}")

        return cls(
            container=ref(CONTAINER_MARKER),
            handles=ref(HANDLER_MARKER),
            traversal_mode=ref(TRAVERSAL_MODE),
            precedence=ref(PRECEDENCE),
            caught_exception=ref(CAUGHT_EXCEPTION),
        )


DEFAULT_SYMBOLS = CatchSymbols.for_package()
