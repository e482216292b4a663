"""Project layout for catchforge.

Maps Java packages to files under a project's source folders, infers
the package of a working directory, and loads and saves ClassModels.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..constants import DEFAULT_SOURCE_FOLDERS
from ..java_model.models import ClassModel
from ..java_model.parser import parse_java_file, parse_java_source
from ..java_model.utils import JAVA_EXTENSION, is_qualified_name
from ..java_model.writer import to_source

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ProjectLayout:
    """Source folder layout of a Java project rooted at ``root``."""

    def __init__(self, root: PathLike, source_folders: Optional[List[str]] = None):
        self.root = Path(root).resolve()
        self.source_folders = [
            self.root / folder for folder in (source_folders or DEFAULT_SOURCE_FOLDERS)
        ]

    @property
    def primary_source_folder(self) -> Path:
        return self.source_folders[0]

    # =========================================================================
    # Packages and paths
    # =========================================================================

    def package_for_directory(self, directory: PathLike) -> Optional[str]:
        """Return the package a directory corresponds to, or None.

        Args:
            directory: Usually the current working directory

        Returns:
            Dotted package name when ``directory`` lies strictly inside
            a source folder and every path segment is a Java identifier
        """
        directory = Path(directory).resolve()
        for folder in self.source_folders:
            try:
                relative = directory.relative_to(folder.resolve())
            except ValueError:
                continue
            if not relative.parts:
                return None
            package = ".".join(relative.parts)
            return package if is_qualified_name(package) else None
        return None

    def path_for(self, model: ClassModel) -> Path:
        """File a class belongs in, under the primary source folder."""
        directory = self.primary_source_folder
        if model.package:
            directory = directory.joinpath(*model.package.split("."))
        return directory / f"{model.name}{JAVA_EXTENSION}"

    # =========================================================================
    # Persistence
    # =========================================================================

    def load_java_class(self, path: PathLike) -> ClassModel:
        """Parse a Java file into a ClassModel.

        Raises:
            FileNotFoundError: ``path`` does not exist
            NotAJavaClassError: The file declares no top-level class
        """
        return parse_java_file(str(path))

    def save_java_source(self, model: ClassModel, overwrite: bool = False) -> Path:
        """Write a ClassModel to disk and return where it was written.

        Parsed models are written back to the file they came from;
        new models go to ``path_for(model)``. After saving, the model's
        origin points at the written text, so saving again only adds
        what changed since.

        Raises:
            FileExistsError: A new model's target file exists and ``overwrite`` is False
        """
        if model.origin is not None and model.origin.file_path:
            path = Path(model.origin.file_path)
        else:
            path = self.path_for(model)
            if path.exists() and not overwrite:
                raise FileExistsError(f"{path} already exists")

        source_text = to_source(model)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(source_text)

        model.origin = parse_java_source(source_text, str(path)).origin
        logger.info(f"Saved {model.qualified_name} to {path}")
        return path
