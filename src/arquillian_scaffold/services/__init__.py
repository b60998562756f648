"""Services package for arquillian scaffold."""

from .base_service import BaseService
from .dependency_service import MavenDependencyService
from .java_source_service import JavaSourceService
from .execution_service import JavaExecutionService
from .setup_service import SetupService, SetupResult
from .test_class_service import TestClassService, CreateTestResult
from .export_service import ExportPipeline

__all__ = [
    'BaseService',
    'MavenDependencyService',
    'JavaSourceService',
    'JavaExecutionService',
    'SetupService',
    'SetupResult',
    'TestClassService',
    'CreateTestResult',
    'ExportPipeline',
]
