"""Input validation utilities for scaffolding."""

import logging
import os
import re
import sys
from pathlib import Path
from typing import Union

from arquillian_scaffold.exceptions import ValidationError, ProjectStructureError

logger = logging.getLogger(__name__)

_IDENTIFIER = r"[A-Za-z_$][A-Za-z0-9_$]*"
QUALIFIED_NAME_PATTERN = re.compile(rf"^{_IDENTIFIER}(\.{_IDENTIFIER})*$")


class SystemValidator:
    """System-level validation utilities."""

    @staticmethod
    def check_python_version(min_version: tuple = (3, 8)) -> None:
        """Check if Python version meets requirements."""
        current_version = sys.version_info[:2]
        if current_version < min_version:
            raise ValidationError(
                f"Python {min_version[0]}.{min_version[1]}+ required, found {current_version[0]}.{current_version[1]}",
                suggestion=f"Please upgrade to Python {min_version[0]}.{min_version[1]} or higher."
            )


class Validator:
    """Input validation with helpful error messages."""

    PROJECT_INDICATORS = ('pom.xml',)

    @staticmethod
    def find_project_root(start_dir: Union[str, Path]) -> Path:
        """Walk up from ``start_dir`` to the nearest directory holding a pom.xml."""
        current_dir = Path(start_dir).resolve()

        for parent in [current_dir] + list(current_dir.parents):
            for indicator in Validator.PROJECT_INDICATORS:
                if (parent / indicator).exists():
                    logger.debug(f"Found project root at {parent} (indicator: {indicator})")
                    return parent

        raise ProjectStructureError(
            f"No Maven project found at or above: {current_dir}",
            suggestion="Run the command inside a Maven project (a directory with pom.xml) or pass --directory."
        )

    @staticmethod
    def validate_directory(directory: Union[str, Path], must_be_writable: bool = False) -> Path:
        """
        Validate directory path.

        Args:
            directory: Directory path to validate
            must_be_writable: Whether directory must be writable

        Returns:
            Resolved Path object

        Raises:
            ValidationError: If validation fails
        """
        dir_path = Path(directory).resolve()

        if not dir_path.exists():
            raise ValidationError(
                f"Directory does not exist: {dir_path}",
                suggestion="Please provide an existing project directory."
            )

        if not dir_path.is_dir():
            raise ValidationError(
                f"Path exists but is not a directory: {dir_path}",
                suggestion="Please provide a path to a directory, not a file."
            )

        if must_be_writable and not os.access(dir_path, os.W_OK):
            raise ValidationError(
                f"Directory is not writable: {dir_path}",
                suggestion="Please check permissions and ensure you have write access."
            )

        return dir_path

    @staticmethod
    def validate_class_reference(value: str) -> str:
        """Accept a qualified/simple Java class name or a path to a .java file."""
        candidate = (value or "").strip()
        if not candidate:
            raise ValidationError(
                "No class given",
                suggestion="Pass --class with a class name such as com.acme.Widget."
            )
        if candidate.endswith(".java") or QUALIFIED_NAME_PATTERN.match(candidate):
            return candidate
        raise ValidationError(
            f"Not a Java class name or source file: {candidate}",
            suggestion="Use a name like com.acme.Widget or a path like src/main/java/com/acme/Widget.java."
        )

    @staticmethod
    def validate_config_file(config_file: Union[str, Path]) -> Path:
        """
        Validate configuration file.

        Raises:
            ValidationError: If config file is invalid
        """
        config_path = Path(config_file)

        if config_path.exists():
            if not config_path.is_file():
                raise ValidationError(
                    f"Config path is not a file: {config_path}",
                    suggestion="Provide a path to a configuration file."
                )

            if config_path.suffix not in ['.yml', '.yaml']:
                raise ValidationError(
                    f"Unsupported config file format: {config_path.suffix}",
                    suggestion="Use a .yml or .yaml configuration file."
                )

        return config_path.resolve()
