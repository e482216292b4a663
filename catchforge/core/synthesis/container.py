"""Creation of exception handler container classes."""

import logging
from typing import Optional

from ..java_model.models import ClassModel
from ..java_model.utils import require_identifier, require_qualified_name
from .symbols import DEFAULT_SYMBOLS, CatchSymbols

logger = logging.getLogger(__name__)


def create_container(
    name: str,
    package_name: str = "",
    symbols: Optional[CatchSymbols] = None,
) -> ClassModel:
    """Build an empty public class annotated as a handler container.

    Args:
        name: Simple class name, e.g. ``"TestContainer"``
        package_name: Dotted package; empty for the default package
        symbols: Exception control API types to use

    Returns:
        New ClassModel carrying the container marker and its import

    Raises:
        InvalidIdentifierError: ``name`` or ``package_name`` is not valid Java
    """
    symbols = symbols or DEFAULT_SYMBOLS
    require_identifier(name, "class name")
    if package_name:
        require_qualified_name(package_name, "package name")

    model = ClassModel(name=name, package=package_name, visibility="public")
    model.add_import(symbols.container)
    model.add_marker(symbols.container.name)

    logger.debug(f"Created handler container model {model.qualified_name}")
    return model
