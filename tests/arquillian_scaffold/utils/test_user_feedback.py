import pytest
from unittest.mock import Mock, patch, call

from arquillian_scaffold.utils.user_feedback import StatusIcon, UserFeedback


class TestUserFeedback:
    """Test UserFeedback class."""

    @patch('arquillian_scaffold.utils.user_feedback.Console')
    def test_init_console_configuration(self, mock_console):
        """Test that stdout and stderr consoles are created."""
        UserFeedback()

        assert mock_console.call_args_list == [
            call(stderr=False, force_terminal=True),
            call(stderr=True, force_terminal=True),
        ]

    def test_success_basic_message(self):
        feedback = UserFeedback()
        feedback.console = Mock()

        feedback.success("Test created")

        feedback.console.print.assert_called_once_with(f"{StatusIcon.SUCCESS} Test created")

    def test_quiet_suppresses_success_but_not_errors(self):
        """Test quiet mode still reports errors on the error console."""
        # Arrange
        feedback = UserFeedback(quiet=True)
        feedback.console = Mock()
        feedback.error_console = Mock()

        # Act
        feedback.success("hidden")
        feedback.error("Export failed", suggestion="Check the build")

        # Assert
        feedback.console.print.assert_not_called()
        assert feedback.error_console.print.call_count == 2

    def test_debug_only_when_verbose(self):
        feedback = UserFeedback(verbose=False)
        feedback.console = Mock()

        feedback.debug("details")

        feedback.console.print.assert_not_called()

    def test_status_icon_lookup(self):
        feedback = UserFeedback()

        assert feedback._get_status_icon("added") == StatusIcon.SUCCESS
        assert feedback._get_status_icon("FAILED") == StatusIcon.ERROR
        assert feedback._get_status_icon("missing") == StatusIcon.WARNING
        assert feedback._get_status_icon("other") == StatusIcon.INFO


class TestPromptChoice:
    """Test numbered choice prompts."""

    @patch('arquillian_scaffold.utils.user_feedback.Prompt.ask', return_value="2")
    def test_returns_selected_choice(self, mock_ask):
        """Test the answer is mapped back to the listed choice."""
        # Arrange
        feedback = UserFeedback()
        feedback.console = Mock()

        # Act
        result = feedback.prompt_choice("Which version?", ["1.0.0.Alpha5", "1.0.0.Alpha4"])

        # Assert
        assert result == "1.0.0.Alpha4"
        assert feedback.console.print.call_count == 2
        assert mock_ask.call_args.kwargs["default"] == "1"
        assert mock_ask.call_args.kwargs["choices"] == ["1", "2"]

    def test_empty_choices_raise(self):
        feedback = UserFeedback()

        with pytest.raises(ValueError):
            feedback.prompt_choice("Which version?", [])
