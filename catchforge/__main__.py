import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.config import CatchForgeConfig, load_config
from .core.errors import (
    ConfigurationError,
    InvalidIdentifierError,
    NotAJavaClassError,
    PrecedenceError,
    PreconditionError,
)
from .core.project import ProjectLayout
from .core.synthesis import CatchSymbols, HandlerSpec, HandlerSynthesizer, create_container


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    # Reduce noise from third-party libraries
    logging.getLogger("tree_sitter").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catchforge",
        description="catchforge - create Seam Catch exception handler containers and handlers",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to catchforge.yaml (default: <project>/catchforge.yaml)"
    )
    parser.add_argument(
        "--project",
        type=str,
        default=None,
        help="Project root directory (default: current directory)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    container = commands.add_parser(
        "create-handler-container",
        help="Create a Seam Catch Exception Handler container class."
    )
    container.add_argument(
        "--named",
        required=True,
        help="The name of the containing class to create"
    )
    container.add_argument(
        "--package",
        default=None,
        help="Containing package name (default: inferred from the current directory)"
    )
    container.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace an existing file for the class"
    )
    container.set_defaults(handler=cmd_create_container)

    handler = commands.add_parser("handler", help="Manage Seam Catch Exception Handlers.")
    handler_commands = handler.add_subparsers(dest="handler_command", required=True)

    create = handler_commands.add_parser(
        "create",
        help="Create a Seam Catch Exception Handler method."
    )
    create.add_argument(
        "--file",
        required=True,
        help="Java source file of the handler container"
    )
    create.add_argument(
        "--method-name",
        required=True,
        help="Name of the handler method to create"
    )
    create.add_argument(
        "--exception-type",
        required=True,
        help="Type of the exception the handler will handle"
    )
    create.add_argument(
        "--breadth-first",
        action="store_true",
        help="Make the handler a BREADTH_FIRST handler"
    )
    create.add_argument(
        "--precedence",
        type=int,
        default=0,
        help="Precedence level relative to other handlers for the same exception type"
    )
    create.add_argument(
        "--strict-precedence",
        action="store_true",
        help="Reject precedence values other than -100, -50, 0, 50 and 100"
    )
    create.set_defaults(handler=cmd_create_handler)

    return parser


def _layout(args: argparse.Namespace, config: CatchForgeConfig) -> ProjectLayout:
    return ProjectLayout(args.project or Path.cwd(), config.source_folders)


def cmd_create_container(args: argparse.Namespace, config: CatchForgeConfig) -> int:
    """Create a class to hold exception handlers."""
    layout = _layout(args, config)

    package = args.package or layout.package_for_directory(Path.cwd())
    if not package:
        print(
            "Could not determine a package from the current directory; use --package",
            file=sys.stderr,
        )
        return 2

    try:
        model = create_container(args.named, package, CatchSymbols.for_package(config.annotation_package))
        path = layout.save_java_source(model, overwrite=args.overwrite)
    except InvalidIdentifierError as e:
        print(str(e), file=sys.stderr)
        return 2
    except FileExistsError as e:
        print(f"{e}; use --overwrite to replace it", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error writing the class source file: {e}", file=sys.stderr)
        return 1

    print(f"Created Exception Handler Container [{model.qualified_name}]")
    print(f"  {path}")
    return 0


def cmd_create_handler(args: argparse.Namespace, config: CatchForgeConfig) -> int:
    """Add a handler method to an existing container class."""
    layout = _layout(args, config)

    try:
        spec = HandlerSpec(
            method_name=args.method_name,
            exception_type=args.exception_type,
            breadth_first=args.breadth_first,
            precedence=args.precedence,
        )
    except InvalidIdentifierError as e:
        print(str(e), file=sys.stderr)
        return 2

    try:
        model = layout.load_java_class(args.file)
    except OSError:
        print(f"Error finding the class source file: {args.file}", file=sys.stderr)
        return 1
    except NotAJavaClassError as e:
        print(str(e), file=sys.stderr)
        return 1

    synthesizer = HandlerSynthesizer(
        CatchSymbols.for_package(config.annotation_package),
        strict_precedence=args.strict_precedence or config.strict_precedence,
    )
    try:
        result = synthesizer.synthesize(model, spec)
    except PreconditionError as e:
        print(str(e), file=sys.stderr)
        return 1
    except PrecedenceError as e:
        print(str(e), file=sys.stderr)
        return 2

    for conflict in result.conflicts:
        print(f"Warning: {conflict.message}", file=sys.stderr)

    try:
        layout.save_java_source(model)
    except OSError as e:
        print(f"Error writing the class source file: {e}", file=sys.stderr)
        return 1
    print(f"Added Handler [{spec.method_name}] to container [{model.qualified_name}]")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for catchforge."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config, args.project)
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return 2

    setup_logging(args.log_level or config.log_level)
    logger.debug(f"Running {args.command} with config {config}")

    return args.handler(args, config)


if __name__ == "__main__":
    sys.exit(main())
