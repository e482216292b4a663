"""Shared constants for catchforge.

Symbol names used by generated exception handler code and the
defaults applied when no configuration overrides them.
"""

# =============================================================================
# Exception control annotations
# =============================================================================

# Package holding the exception control API (Solder / Seam Catch)
DEFAULT_ANNOTATION_PACKAGE = "org.jboss.solder.exception.control"

# Class-level marker identifying a handler container
CONTAINER_MARKER = "HandlesExceptions"

# Parameter-level marker identifying a handler method
HANDLER_MARKER = "Handles"

TRAVERSAL_MODE = "TraversalMode"
BREADTH_FIRST = "BREADTH_FIRST"
PRECEDENCE = "Precedence"

# Event wrapper passed to every handler
CAUGHT_EXCEPTION = "CaughtException"
HANDLER_PARAMETER_NAME = "caughtException"

# =============================================================================
# Java language
# =============================================================================

# Types in this package are visible without an import
DEFAULT_VISIBLE_PACKAGE = "java.lang"

JAVA_KEYWORDS = frozenset({
    "abstract", "assert", "boolean", "break", "byte", "case", "catch",
    "char", "class", "const", "continue", "default", "do", "double",
    "else", "enum", "extends", "final", "finally", "float", "for", "goto",
    "if", "implements", "import", "instanceof", "int", "interface", "long",
    "native", "new", "package", "private", "protected", "public", "return",
    "short", "static", "strictfp", "super", "switch", "synchronized",
    "this", "throw", "throws", "transient", "try", "void", "volatile",
    "while", "true", "false", "null", "_",
})

# =============================================================================
# Project layout
# =============================================================================

DEFAULT_SOURCE_FOLDERS = ["src/main/java"]

CONFIG_FILE_NAME = "catchforge.yaml"
