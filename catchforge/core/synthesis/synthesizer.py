"""Exception handler method synthesis.

Appends a handler method to a container class:

    @HandlesExceptions
    public class Handlers {
        public void onCreation(@Handles(precedence = Precedence.LOW) final CaughtException<CreationException> caughtException) {
        }
    }

and imports every type the new method references. Synthesis runs
through VALIDATING -> RENDERING -> APPENDING -> IMPORT_RECONCILING -> DONE.
All checks happen while VALIDATING, so a failed synthesis leaves the
class untouched.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..constants import CAUGHT_EXCEPTION, HANDLER_PARAMETER_NAME
from ..errors import PreconditionError
from ..java_model.models import ClassModel, MethodStub, Parameter, SymbolRef
from ..java_model.utils import require_identifier, require_qualified_name
from .annotations import render_handler_annotation
from .imports import ImportConflict, ensure_imported
from .precedence import PrecedenceLevel, resolve_level
from .symbols import DEFAULT_SYMBOLS, CatchSymbols

logger = logging.getLogger(__name__)

PRECONDITION_MESSAGE = (
    "This class is not an Exception Handler Container "
    "(it must be annotated with @HandlesExceptions)"
)


class SynthesisState(Enum):
    VALIDATING = "validating"
    RENDERING = "rendering"
    APPENDING = "appending"
    IMPORT_RECONCILING = "import_reconciling"
    DONE = "done"


@dataclass(frozen=True)
class HandlerSpec:
    """Options for one handler method.

    ``exception_type`` may be qualified (``javax.enterprise.inject.CreationException``)
    or a bare ``java.lang`` name (``Throwable``).
    """

    method_name: str
    exception_type: str
    breadth_first: bool = False
    precedence: int = 0

    def __post_init__(self):
        require_identifier(self.method_name, "method name")
        require_qualified_name(self.exception_type, "exception type")


@dataclass
class SynthesisResult:
    """What a synthesis did to its class."""

    model: ClassModel
    method: MethodStub
    annotation: str
    level: PrecedenceLevel
    added_imports: List[SymbolRef] = field(default_factory=list)
    conflicts: List[ImportConflict] = field(default_factory=list)


def clean_exception_type(
    exception_type: str, model: Optional[ClassModel] = None
) -> Tuple[str, SymbolRef]:
    """Return the type name to render and the symbol it refers to.

    Top-level ``java.lang`` types render unqualified unless ``model``
    imports another type under the same short name; everything else
    keeps the name it was given.
    """
    symbol = SymbolRef.from_qualified(exception_type)
    if not symbol.default_visible:
        return exception_type, symbol
    imported = model.get_import(symbol.name) if model is not None else None
    if imported is not None and imported != symbol.qualified_name:
        logger.warning(
            f"{symbol.name} is imported as {imported}; rendering {symbol.qualified_name} qualified"
        )
        return symbol.qualified_name, symbol
    return symbol.name, symbol


class HandlerSynthesizer:
    """Adds exception handler methods to handler container classes.

    Holds only immutable configuration, so one instance can serve any
    number of classes.
    """

    def __init__(
        self,
        symbols: Optional[CatchSymbols] = None,
        strict_precedence: bool = False,
    ):
        self.symbols = symbols or DEFAULT_SYMBOLS
        self.strict_precedence = strict_precedence

    def synthesize(self, model: ClassModel, spec: HandlerSpec) -> SynthesisResult:
        """Append a handler method described by ``spec`` to ``model``.

        Args:
            model: Container class, modified in place
            spec: Handler options

        Returns:
            SynthesisResult with the new method and the import changes

        Raises:
            PreconditionError: ``model`` is not annotated as a handler container
            PrecedenceError: strict precedence is on and ``spec.precedence``
                is not a named level
        """
        self._enter(SynthesisState.VALIDATING, model, spec)
        if not model.has_marker(self.symbols.container):
            raise PreconditionError(PRECONDITION_MESSAGE)
        level = resolve_level(spec.precedence, strict=self.strict_precedence)

        self._enter(SynthesisState.RENDERING, model, spec)
        type_name, exception_symbol = clean_exception_type(spec.exception_type, model)
        annotation = render_handler_annotation(
            spec.breadth_first, level, marker=self.symbols.handles.name
        )

        self._enter(SynthesisState.APPENDING, model, spec)
        method = model.add_method(
            MethodStub(
                name=spec.method_name,
                visibility="public",
                return_type="void",
                parameters=(
                    Parameter(
                        type_name=f"{CAUGHT_EXCEPTION}<{type_name}>",
                        name=HANDLER_PARAMETER_NAME,
                        annotation=annotation,
                        final=True,
                    ),
                ),
            )
        )

        self._enter(SynthesisState.IMPORT_RECONCILING, model, spec)
        report = ensure_imported(model, self._referenced_symbols(spec, level, exception_symbol))

        self._enter(SynthesisState.DONE, model, spec)
        logger.info(f"Added handler {spec.method_name} to {model.qualified_name}")
        return SynthesisResult(
            model=model,
            method=method,
            annotation=annotation,
            level=level,
            added_imports=report.added,
            conflicts=report.conflicts,
        )

    def _referenced_symbols(
        self, spec: HandlerSpec, level: PrecedenceLevel, exception_symbol: SymbolRef
    ) -> List[SymbolRef]:
        symbols = [self.symbols.handles, self.symbols.caught_exception]
        if spec.breadth_first:
            symbols.append(self.symbols.traversal_mode)
        if level is not PrecedenceLevel.DEFAULT:
            symbols.append(self.symbols.precedence)
        symbols.append(exception_symbol)
        return symbols

    @staticmethod
    def _enter(state: SynthesisState, model: ClassModel, spec: HandlerSpec) -> None:
        logger.debug("%s %s.%s", state.value, model.qualified_name, spec.method_name)


def create_handler(
    model: ClassModel,
    spec: HandlerSpec,
    symbols: Optional[CatchSymbols] = None,
    strict_precedence: bool = False,
) -> SynthesisResult:
    """Append a handler method to a container class. See HandlerSynthesizer."""
    return HandlerSynthesizer(symbols, strict_precedence).synthesize(model, spec)
