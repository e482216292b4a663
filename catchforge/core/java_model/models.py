"""Java class model.

Defines the in-memory representation of a Java class under
construction or modification. These are data containers plus the
small invariant-keeping mutators the synthesis engine relies on.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple, Union

from ..constants import DEFAULT_VISIBLE_PACKAGE
from ..errors import ImportConflictError
from .utils import split_qualified_name


@dataclass(frozen=True)
class SymbolRef:
    """A type referenced by generated code.

    ``default_visible`` symbols (``java.lang`` top-level types) never
    need an import statement.
    """

    name: str  # "CreationException"
    qualified_name: str  # "javax.enterprise.inject.CreationException"
    default_visible: bool = False

    @classmethod
    def from_qualified(cls, qualified_name: str) -> "SymbolRef":
        package, name = split_qualified_name(qualified_name)
        return cls(
            name=name,
            qualified_name=qualified_name,
            default_visible=package == DEFAULT_VISIBLE_PACKAGE,
        )

    @property
    def package(self) -> str:
        return split_qualified_name(self.qualified_name)[0]

    @property
    def requires_import(self) -> bool:
        return not self.default_visible and bool(self.package)


@dataclass(frozen=True)
class Parameter:
    """A single formal parameter of a method."""

    type_name: str  # "CaughtException<Throwable>"
    name: str  # "caughtException"
    annotation: str = ""  # "@Handles(precedence = Precedence.LOW)"
    final: bool = False

    @property
    def declaration(self) -> str:
        parts = [self.annotation, "final" if self.final else "", self.type_name, self.name]
        return " ".join(part for part in parts if part)


@dataclass(frozen=True)
class MethodStub:
    """A method declaration belonging to a ClassModel.

    Created once and never edited after it is appended; adding another
    handler always appends another MethodStub.
    """

    name: str
    visibility: Optional[str] = "public"
    return_type: str = "void"
    parameters: Tuple[Parameter, ...] = ()

    @property
    def signature(self) -> str:
        """Declaration header, e.g. ``public void onError(final Foo foo)``."""
        params = ", ".join(p.declaration for p in self.parameters)
        head = f"{self.visibility} " if self.visibility else ""
        return f"{head}{self.return_type} {self.name}({params})"


@dataclass(frozen=True)
class SourceOrigin:
    """Where a parsed ClassModel came from, and where new text may be spliced.

    Offsets are byte offsets into ``source`` (UTF-8), as reported by
    tree-sitter.
    """

    source: bytes
    import_offset: int  # insert new imports here
    import_anchor: str  # "import" | "package" | "start"
    body_end_offset: int  # start of the class body's closing brace
    loaded_imports: FrozenSet[str] = frozenset()
    loaded_method_count: int = 0
    file_path: Optional[str] = None
    newline: str = "\n"  # line ending used when splicing


@dataclass
class ClassModel:
    """A mutable Java class under construction or modification.

    Invariant: no two imports share a short name, and adding an import
    that is already present is a no-op.
    """

    name: str
    package: str = ""
    visibility: Optional[str] = "public"
    imports: Dict[str, str] = field(default_factory=dict)  # short name -> qualified name
    markers: List[str] = field(default_factory=list)  # class-level annotation names
    methods: List[MethodStub] = field(default_factory=list)
    origin: Optional[SourceOrigin] = field(default=None, compare=False, repr=False)

    @property
    def qualified_name(self) -> str:
        return f"{self.package}.{self.name}" if self.package else self.name

    # =========================================================================
    # Imports
    # =========================================================================

    def get_import(self, name: str) -> Optional[str]:
        """Return the qualified name imported under ``name``, if any."""
        return self.imports.get(name)

    def has_import(self, symbol: Union[str, SymbolRef]) -> bool:
        """Check whether exactly this type is imported."""
        if isinstance(symbol, str):
            symbol = SymbolRef.from_qualified(symbol)
        return self.imports.get(symbol.name) == symbol.qualified_name

    def add_import(self, symbol: Union[str, SymbolRef]) -> bool:
        """Import a type.

        Returns:
            True if the import was added, False if it was already present

        Raises:
            ImportConflictError: A different type is imported under the same short name
        """
        if isinstance(symbol, str):
            symbol = SymbolRef.from_qualified(symbol)
        existing = self.imports.get(symbol.name)
        if existing == symbol.qualified_name:
            return False
        if existing is not None:
            raise ImportConflictError(symbol.name, existing, symbol.qualified_name)
        self.imports[symbol.name] = symbol.qualified_name
        return True

    # =========================================================================
    # Markers and methods
    # =========================================================================

    def has_marker(self, symbol: SymbolRef) -> bool:
        """Check whether the class carries the given annotation.

        A short-name annotation counts unless an import maps that short
        name to some other type.
        """
        if symbol.qualified_name in self.markers:
            return True
        if symbol.name not in self.markers:
            return False
        imported = self.imports.get(symbol.name)
        return imported is None or imported == symbol.qualified_name

    def add_marker(self, name: str) -> None:
        if name not in self.markers:
            self.markers.append(name)

    def add_method(self, method: MethodStub) -> MethodStub:
        self.methods.append(method)
        return method

    def get_methods(self, name: str) -> List[MethodStub]:
        return [m for m in self.methods if m.name == name]
