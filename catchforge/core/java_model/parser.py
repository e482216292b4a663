"""Java class reader using tree-sitter.

Walks the tree-sitter AST of a compilation unit and builds a ClassModel
for its first top-level class: package, single-type imports, class
annotations, visibility and method declarations. The original source
bytes and the offsets where new imports and members can be spliced are
kept on ``ClassModel.origin`` so the writer can leave everything else
untouched.
"""

import logging
from typing import List, Optional, Tuple

import tree_sitter
import tree_sitter_java

from ..errors import NotAJavaClassError
from .models import ClassModel, MethodStub, Parameter, SourceOrigin

logger = logging.getLogger(__name__)

_JAVA_LANGUAGE = tree_sitter.Language(tree_sitter_java.language())

_VISIBILITY_KEYWORDS = ("public", "protected", "private")
_ANNOTATION_TYPES = ("marker_annotation", "annotation")


class JavaClassReader:
    """tree-sitter based reader producing ClassModel objects.

    Extracts:
    - Package declaration -> ClassModel.package
    - Single-type imports -> ClassModel.imports (static and on-demand
      imports are left in the source but not modelled)
    - Class annotations -> ClassModel.markers
    - Method declarations -> ClassModel.methods
    """

    def parse_file(self, file_path: str) -> ClassModel:
        """Read and parse a Java source file.

        Args:
            file_path: Path to the ``.java`` file

        Returns:
            ClassModel for the first top-level class in the file

        Raises:
            OSError: The file cannot be read
            NotAJavaClassError: The file declares no top-level class
        """
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            source_text = f.read()
        return self.parse_source(source_text, file_path)

    def parse_source(self, source_text: str, file_path: Optional[str] = None) -> ClassModel:
        """Parse Java source text into a ClassModel.

        Args:
            source_text: Java source code
            file_path: Optional path, kept on the origin for diagnostics

        Returns:
            ClassModel with ``origin`` populated
        """
        source = source_text.encode("utf-8")
        parser = tree_sitter.Parser(_JAVA_LANGUAGE)
        tree = parser.parse(source)
        root = tree.root_node

        if root.has_error:
            logger.warning(f"Tree-sitter reported parse errors in {file_path or '<source>'}")

        class_node = self._get_child_by_type(root, "class_declaration")
        if class_node is None:
            raise NotAJavaClassError(f"No top-level class declared in {file_path or '<source>'}")

        package = self._extract_package(root, source)
        imports, import_offset, import_anchor = self._extract_imports(root, source)

        name = self._get_child_text(class_node, "name", source) or ""
        modifiers = self._get_child_by_type(class_node, "modifiers")
        markers = self._extract_annotation_names(modifiers, source)
        visibility = self._extract_visibility(modifiers)

        body = class_node.child_by_field_name("body")
        methods = self._extract_methods(body, source) if body else []
        body_end = self._closing_brace_offset(body) if body else class_node.end_byte

        model = ClassModel(
            name=name,
            package=package,
            visibility=visibility,
            imports=dict(imports),
            markers=markers,
            methods=methods,
        )
        model.origin = SourceOrigin(
            source=source,
            import_offset=import_offset,
            import_anchor=import_anchor,
            body_end_offset=body_end,
            loaded_imports=frozenset(model.imports),
            loaded_method_count=len(methods),
            file_path=file_path,
            newline="\r\n" if b"\r\n" in source else "\n",
        )
        logger.debug(
            "Parsed %s: %d imports, %d methods, markers=%s",
            model.qualified_name, len(model.imports), len(methods), markers,
        )
        return model

    # =========================================================================
    # Extractors
    # =========================================================================

    def _extract_package(self, root: tree_sitter.Node, source: bytes) -> str:
        node = self._get_child_by_type(root, "package_declaration")
        if node is None:
            return ""
        for child in node.named_children:
            if child.type in ("scoped_identifier", "identifier"):
                return self._text(child, source)
        return ""

    def _extract_imports(
        self, root: tree_sitter.Node, source: bytes
    ) -> Tuple[List[Tuple[str, str]], int, str]:
        """Extract single-type imports and the offset where new ones go.

        Returns:
            (imports as (short name, qualified name) pairs, offset, anchor)
        """
        imports: List[Tuple[str, str]] = []
        seen = set()
        offset, anchor = 0, "start"

        package = self._get_child_by_type(root, "package_declaration")
        if package is not None:
            offset, anchor = package.end_byte, "package"

        for child in root.children:
            if child.type != "import_declaration":
                continue
            offset, anchor = child.end_byte, "import"

            child_types = {c.type for c in child.children}
            if "static" in child_types or "asterisk" in child_types:
                logger.debug(f"Leaving unmodelled import: {self._text(child, source)}")
                continue

            target = next(
                (c for c in child.named_children if c.type in ("scoped_identifier", "identifier")),
                None,
            )
            if target is None:
                continue
            qualified_name = self._text(target, source)
            short_name = qualified_name.rsplit(".", 1)[-1]
            if short_name in seen:
                logger.warning(f"Duplicate import for {short_name} ignored: {qualified_name}")
                continue
            seen.add(short_name)
            imports.append((short_name, qualified_name))

        return imports, offset, anchor

    def _extract_methods(self, body: tree_sitter.Node, source: bytes) -> List[MethodStub]:
        methods: List[MethodStub] = []
        for child in body.children:
            if child.type != "method_declaration":
                continue
            name = self._get_child_text(child, "name", source)
            if not name:
                continue
            modifiers = self._get_child_by_type(child, "modifiers")
            return_type = self._get_child_text(child, "type", source) or "void"
            params_node = child.child_by_field_name("parameters")
            parameters = self._extract_parameters(params_node, source) if params_node else ()
            methods.append(
                MethodStub(
                    name=name,
                    visibility=self._extract_visibility(modifiers),
                    return_type=return_type,
                    parameters=parameters,
                )
            )
        return methods

    def _extract_parameters(self, node: tree_sitter.Node, source: bytes) -> Tuple[Parameter, ...]:
        params: List[Parameter] = []
        for child in node.named_children:
            if child.type == "formal_parameter":
                modifiers = self._get_child_by_type(child, "modifiers")
                annotations = []
                final = False
                if modifiers is not None:
                    for mod in modifiers.children:
                        if mod.type in _ANNOTATION_TYPES:
                            annotations.append(self._text(mod, source))
                        elif mod.type == "final":
                            final = True
                params.append(
                    Parameter(
                        type_name=self._get_child_text(child, "type", source) or "",
                        name=self._get_child_text(child, "name", source) or "",
                        annotation=" ".join(annotations),
                        final=final,
                    )
                )
            elif child.type == "spread_parameter":
                # Varargs are kept verbatim
                params.append(Parameter(type_name=self._text(child, source), name=""))
        return tuple(params)

    def _extract_annotation_names(
        self, modifiers: Optional[tree_sitter.Node], source: bytes
    ) -> List[str]:
        names: List[str] = []
        if modifiers is None:
            return names
        for child in modifiers.children:
            if child.type in _ANNOTATION_TYPES:
                name = self._get_child_text(child, "name", source)
                if name and name not in names:
                    names.append(name)
        return names

    @staticmethod
    def _extract_visibility(modifiers: Optional[tree_sitter.Node]) -> Optional[str]:
        if modifiers is None:
            return None
        for child in modifiers.children:
            if child.type in _VISIBILITY_KEYWORDS:
                return child.type
        return None

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _text(node: tree_sitter.Node, source: bytes) -> str:
        return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")

    @staticmethod
    def _get_child_text(node: tree_sitter.Node, field_name: str, source: bytes) -> Optional[str]:
        child = node.child_by_field_name(field_name)
        if child:
            return source[child.start_byte:child.end_byte].decode("utf-8", errors="replace")
        return None

    @staticmethod
    def _get_child_by_type(node: tree_sitter.Node, type_name: str) -> Optional[tree_sitter.Node]:
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    @staticmethod
    def _closing_brace_offset(body: tree_sitter.Node) -> int:
        for child in reversed(body.children):
            if child.type == "}":
                return child.start_byte
        return body.end_byte


def parse_java_source(source_text: str, file_path: Optional[str] = None) -> ClassModel:
    """Parse Java source text into a ClassModel."""
    return JavaClassReader().parse_source(source_text, file_path)


def parse_java_file(file_path: str) -> ClassModel:
    """Parse a Java source file into a ClassModel."""
    return JavaClassReader().parse_file(file_path)
