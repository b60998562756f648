"""Base service class for common functionality."""

import logging
from abc import ABC
from typing import Optional

from arquillian_scaffold.config import Config
from arquillian_scaffold.project import MavenProject
from arquillian_scaffold.utils.user_feedback import UserFeedback


class BaseService(ABC):
    """Base class for all services providing common functionality."""

    def __init__(self, project: MavenProject, config: Config, feedback: Optional[UserFeedback] = None):
        self.project = project
        self.project_root = project.root
        self.config = config
        self.feedback = feedback or UserFeedback()
        self.logger = logging.getLogger(self.__class__.__name__)

        # Use Rich UI only when a feedback object was handed in
        self.use_rich_ui = feedback is not None

    def _log_info(self, message: str):
        """Log info message."""
        if self.use_rich_ui:
            self.feedback.info(message)
        else:
            self.logger.info(message)

    def _log_success(self, message: str):
        """Log success message."""
        if self.use_rich_ui:
            self.feedback.success(message)
        else:
            self.logger.info(f"SUCCESS: {message}")

    def _log_warning(self, message: str, suggestion: Optional[str] = None):
        """Log warning message."""
        if self.use_rich_ui:
            self.feedback.warning(message, suggestion)
        else:
            self.logger.warning(message)
            if suggestion:
                self.logger.warning(f"Suggestion: {suggestion}")

    def _log_error(self, message: str, suggestion: Optional[str] = None):
        """Log error message."""
        if self.use_rich_ui:
            self.feedback.error(message, suggestion)
        else:
            self.logger.error(message)
            if suggestion:
                self.logger.error(f"Suggestion: {suggestion}")

    def _log_debug(self, message: str):
        """Log debug message."""
        if self.use_rich_ui and self.feedback.verbose:
            self.feedback.debug(message)
        else:
            self.logger.debug(message)
