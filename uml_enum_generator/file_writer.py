"""
Output sink for generated sources.

Persists each generated unit as ``<output_dir>/<package as directories>/<Type><ext>``.
"""

import logging
from pathlib import Path
from typing import Union

from .constants import Separators

logger = logging.getLogger(__name__)


class SourceFileWriter:
    """Writes generated source files below an output directory."""

    def __init__(self, output_dir: Union[str, Path], file_extension: str = ".java"):
        self.output_dir = Path(output_dir)
        self.file_extension = file_extension

    def path_for(self, package_name: str, type_name: str) -> Path:
        """Path of the source file of a type in a package."""
        directory = self.output_dir
        for segment in package_name.split(Separators.PACKAGE):
            if segment:
                directory = directory / segment
        return directory / f"{type_name}{self.file_extension}"

    def write(self, package_name: str, type_name: str, source_text: str) -> Path:
        """
        Persist the source of one type.

        Raises:
            OSError: If the directory or file cannot be written
        """
        output_path = self.path_for(package_name, type_name)
        try:
            # Ensure the parent directory exists
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(source_text)
        except OSError as e:
            logger.error(f"Error writing generated file '{output_path}': {e}")
            raise
        logger.debug(f"Generated file: {output_path}")
        return output_path
