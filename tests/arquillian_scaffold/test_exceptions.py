import pytest
from arquillian_scaffold.exceptions import (
    ArquillianScaffoldError,
    ConfigurationError,
    DependencyError,
    ExecutionError,
    ExportError,
    FileOperationError,
)
from arquillian_scaffold.models.data_models import ExportState


class TestArquillianScaffoldError:
    """Test ArquillianScaffoldError class."""

    def test_init_with_message_only(self):
        """Test initialization with message only."""
        # Act
        error = ArquillianScaffoldError("Something broke")

        # Assert
        assert error.message == "Something broke"
        assert error.suggestion is None
        assert str(error) == "Something broke"

    def test_str_with_message_and_suggestion(self):
        """Test __str__ appends the suggestion."""
        # Arrange
        error = ArquillianScaffoldError("Something broke", "Try again")

        # Act
        result = str(error)

        # Assert
        assert result == "Something broke\n\nSuggestion: Try again"

    def test_str_with_empty_suggestion(self):
        """Test __str__ ignores an empty suggestion."""
        error = ArquillianScaffoldError("Something broke", "")

        assert str(error) == "Something broke"

    def test_subclasses_are_catchable_as_base(self):
        """Test every specific error is an ArquillianScaffoldError."""
        with pytest.raises(ArquillianScaffoldError):
            raise ConfigurationError("no versions")


class TestSpecificErrors:
    """Test the extra attributes of specific errors."""

    def test_file_operation_error_keeps_filepath(self):
        error = FileOperationError("Cannot write", filepath="/tmp/A.java", suggestion="Check permissions")

        assert error.filepath == "/tmp/A.java"
        assert error.suggestion == "Check permissions"

    def test_dependency_error_keeps_coordinate(self):
        error = DependencyError("Missing", coordinate="junit:junit")

        assert error.coordinate == "junit:junit"
        assert error.suggestion is None

    def test_execution_error_keeps_returncode(self):
        error = ExecutionError("Failed", returncode=3)

        assert error.returncode == 3

    def test_export_error_keeps_state_and_cause(self):
        """Test ExportError records the state reached and chains the cause."""
        # Arrange
        cause = RuntimeError("boom")

        # Act
        with pytest.raises(ExportError) as exc_info:
            try:
                raise cause
            except RuntimeError as e:
                raise ExportError("Export failed", state=ExportState.GENERATED) from e

        # Assert
        assert exc_info.value.state == ExportState.GENERATED
        assert exc_info.value.__cause__ is cause
