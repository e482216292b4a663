"""Rendering of the handler marker and its arguments."""

from typing import List

from ..constants import BREADTH_FIRST, HANDLER_MARKER, PRECEDENCE, TRAVERSAL_MODE
from .precedence import PrecedenceLevel

TRAVERSAL_ARGUMENT = f"during = {TRAVERSAL_MODE}.{BREADTH_FIRST}"

# DEFAULT renders nothing
PRECEDENCE_ARGUMENTS = {
    level: f"precedence = {PRECEDENCE}.{level.name}"
    for level in PrecedenceLevel
    if level is not PrecedenceLevel.DEFAULT
}


def handler_arguments(breadth_first: bool, level: PrecedenceLevel) -> List[str]:
    """Keyed annotation arguments, traversal mode always before precedence."""
    arguments = []
    if breadth_first:
        arguments.append(TRAVERSAL_ARGUMENT)
    precedence = PRECEDENCE_ARGUMENTS.get(level)
    if precedence:
        arguments.append(precedence)
    return arguments


def render_handler_annotation(
    breadth_first: bool = False,
    level: PrecedenceLevel = PrecedenceLevel.DEFAULT,
    marker: str = HANDLER_MARKER,
) -> str:
    """Render the handler marker, e.g. ``@Handles(precedence = Precedence.LOW)``.

    With no modifiers the bare marker is returned without parentheses.
    """
    arguments = handler_arguments(breadth_first, level)
    if not arguments:
        return f"@{marker}"
    return f"@{marker}({', '.join(arguments)})"
