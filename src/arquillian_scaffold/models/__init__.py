"""Data models for arquillian scaffold."""

from .data_models import (
    Annotation,
    ClassReference,
    DependencyCoordinate,
    ExportRequest,
    ExportResult,
    ExportState,
    Field,
    JavaResource,
    Method,
    Parameter,
    ProjectFacts,
    ScaffoldState,
    SourceTemplate,
    Visibility,
)

__all__ = [
    "Annotation",
    "ClassReference",
    "DependencyCoordinate",
    "ExportRequest",
    "ExportResult",
    "ExportState",
    "Field",
    "JavaResource",
    "Method",
    "Parameter",
    "ProjectFacts",
    "ScaffoldState",
    "SourceTemplate",
    "Visibility",
]
