"""Java source writer.

Serializes a ClassModel back to Java source. Models created in memory
are rendered as a fresh compilation unit; models read from a file get
their new imports and appended methods spliced into the original text,
so existing code, comments, formatting and line endings are preserved
byte-for-byte.
"""

import logging
from typing import List

from .models import ClassModel, MethodStub

logger = logging.getLogger(__name__)

INDENT = "    "


def render_method(method: MethodStub, indent: str = INDENT) -> List[str]:
    """Render a method stub with an empty body, one line per entry."""
    return [
        f"{indent}{method.signature} {{",
        f"{indent}}}",
    ]


def render_class(model: ClassModel) -> str:
    """Render a complete compilation unit for a ClassModel."""
    lines: List[str] = []

    if model.package:
        lines.append(f"package {model.package};")
        lines.append("")

    if model.imports:
        lines.extend(f"import {qualified};" for qualified in model.imports.values())
        lines.append("")

    lines.extend(f"@{marker}" for marker in model.markers)

    head = f"{model.visibility} class" if model.visibility else "class"
    lines.append(f"{head} {model.name} {{")
    for i, method in enumerate(model.methods):
        if i:
            lines.append("")
        lines.extend(render_method(method))
    lines.append("}")

    return "\n".join(lines) + "\n"


def splice_class(model: ClassModel) -> str:
    """Insert imports and methods added since parsing into the original source."""
    origin = model.origin
    if origin is None:
        raise ValueError(f"{model.qualified_name} was not parsed from source")

    new_imports = [
        qualified for name, qualified in model.imports.items()
        if name not in origin.loaded_imports
    ]
    new_methods = model.methods[origin.loaded_method_count:]

    nl = origin.newline
    import_lines = nl.join(f"import {qualified};" for qualified in new_imports)
    if not new_imports:
        import_text = ""
    elif origin.import_anchor == "import":
        import_text = nl + import_lines
    elif origin.import_anchor == "package":
        import_text = nl + nl + import_lines
    else:
        import_text = import_lines + nl + nl

    method_text = "".join(
        nl + nl.join(render_method(method)) + nl for method in new_methods
    )

    source = origin.source
    spliced = (
        source[:origin.import_offset]
        + import_text.encode("utf-8")
        + source[origin.import_offset:origin.body_end_offset]
        + method_text.encode("utf-8")
        + source[origin.body_end_offset:]
    )

    logger.debug(
        "Spliced %d imports and %d methods into %s",
        len(new_imports), len(new_methods), model.qualified_name,
    )
    return spliced.decode("utf-8")


def to_source(model: ClassModel) -> str:
    """Serialize a ClassModel to Java source text."""
    if model.origin is not None:
        return splice_class(model)
    return render_class(model)
