"""Utility modules for arquillian scaffold."""

from .user_feedback import UserFeedback, StatusIcon
from .validation import Validator, SystemValidator
from .writer import SourceFileWriter, WriteResult

__all__ = ['UserFeedback', 'StatusIcon', 'Validator', 'SystemValidator', 'SourceFileWriter', 'WriteResult']
