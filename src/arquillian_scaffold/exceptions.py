"""Custom exception classes for arquillian scaffold."""

from typing import Optional


class ArquillianScaffoldError(Exception):
    """Base exception for all arquillian scaffold errors."""

    def __init__(self, message: str, suggestion: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self):
        result = self.message
        if self.suggestion:
            result += f"\n\nSuggestion: {self.suggestion}"
        return result


class ConfigurationError(ArquillianScaffoldError):
    """Raised when a required option is missing or a coordinate can't be resolved."""
    pass


class ValidationError(ArquillianScaffoldError):
    """Raised when input validation fails."""
    pass


class ProjectStructureError(ArquillianScaffoldError):
    """Raised when there are issues with project structure."""
    pass


class FileOperationError(ArquillianScaffoldError):
    """Raised when file operations fail."""

    def __init__(self, message: str, filepath: Optional[str] = None, suggestion: Optional[str] = None):
        super().__init__(message, suggestion)
        self.filepath = filepath


class GenerationError(ArquillianScaffoldError):
    """Raised when a class under test can't be resolved into a scaffold."""
    pass


class DependencyError(ArquillianScaffoldError):
    """Raised when dependency lookup or POM updates fail."""

    def __init__(self, message: str, coordinate: Optional[str] = None, suggestion: Optional[str] = None):
        super().__init__(message, suggestion)
        self.coordinate = coordinate


class ExecutionError(ArquillianScaffoldError):
    """Raised when a project class can't be run out of process."""

    def __init__(self, message: str, returncode: Optional[int] = None, suggestion: Optional[str] = None):
        super().__init__(message, suggestion)
        self.returncode = returncode


class ExportError(ArquillianScaffoldError):
    """Raised when the deployment export fails; wraps the original cause."""

    def __init__(self, message: str, state=None, suggestion: Optional[str] = None):
        super().__init__(message, suggestion)
        self.state = state
