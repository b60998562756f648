from unittest.mock import Mock

from arquillian_scaffold.config import Config
from arquillian_scaffold.project import MavenProject
from arquillian_scaffold.services.base_service import BaseService


class ConcreteService(BaseService):
    """Minimal subclass used to exercise the shared helpers."""


class TestBaseService:
    """Test BaseService class."""

    def test_init_sets_project_attributes(self, tmp_path):
        # Arrange
        config = Config(None)
        project = MavenProject(tmp_path, config)

        # Act
        service = ConcreteService(project, config)

        # Assert
        assert service.project is project
        assert service.project_root == tmp_path.resolve()
        assert service.config is config
        assert service.use_rich_ui is False
        assert service.logger.name == "ConcreteService"

    def test_messages_go_to_feedback_when_given(self, tmp_path):
        """Test the rich UI receives messages once a feedback object is handed in."""
        # Arrange
        config = Config(None)
        feedback = Mock(verbose=False)
        service = ConcreteService(MavenProject(tmp_path, config), config, feedback)

        # Act
        service._log_success("done")
        service._log_warning("careful", "do this")
        service._log_debug("hidden")

        # Assert
        feedback.success.assert_called_once_with("done")
        feedback.warning.assert_called_once_with("careful", "do this")
        feedback.debug.assert_not_called()

    def test_messages_go_to_logger_without_feedback(self, tmp_path, caplog):
        config = Config(None)
        service = ConcreteService(MavenProject(tmp_path, config), config)

        with caplog.at_level("INFO"):
            service._log_error("broken", "fix it")

        assert "broken" in caplog.text
        assert "Suggestion: fix it" in caplog.text
