"""catchforge Java model: in-memory Java classes and their source form.

Public API:
    parse_java_source(source, file_path) -> ClassModel
    parse_java_file(path) -> ClassModel
    to_source(model) -> str
"""

from .models import ClassModel, MethodStub, Parameter, SourceOrigin, SymbolRef
from .parser import JavaClassReader, parse_java_file, parse_java_source
from .writer import render_class, splice_class, to_source

__all__ = [
    "ClassModel",
    "MethodStub",
    "Parameter",
    "SourceOrigin",
    "SymbolRef",
    "JavaClassReader",
    "parse_java_file",
    "parse_java_source",
    "render_class",
    "splice_class",
    "to_source",
]
