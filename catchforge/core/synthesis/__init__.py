"""Exception handler synthesis.

Public API:
    create_container(name, package_name) -> ClassModel
    create_handler(model, spec) -> SynthesisResult
    resolve_level(value, strict) -> PrecedenceLevel
    render_handler_annotation(breadth_first, level) -> str
    ensure_imported(model, symbols) -> ImportReport
"""

from .annotations import render_handler_annotation
from .container import create_container
from .imports import ImportConflict, ImportReport, ensure_imported
from .precedence import PrecedenceLevel, resolve_level
from .symbols import DEFAULT_SYMBOLS, CatchSymbols
from .synthesizer import (
    PRECONDITION_MESSAGE,
    HandlerSpec,
    HandlerSynthesizer,
    SynthesisResult,
    SynthesisState,
    create_handler,
)

__all__ = [
    "render_handler_annotation",
    "create_container",
    "ImportConflict",
    "ImportReport",
    "ensure_imported",
    "PrecedenceLevel",
    "resolve_level",
    "DEFAULT_SYMBOLS",
    "CatchSymbols",
    "PRECONDITION_MESSAGE",
    "HandlerSpec",
    "HandlerSynthesizer",
    "SynthesisResult",
    "SynthesisState",
    "create_handler",
]
