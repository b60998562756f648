"""Data models for Arquillian scaffolding."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

if TYPE_CHECKING:
    from arquillian_scaffold.generation.statements import Statement


class Visibility(Enum):
    """Java access modifiers."""
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    PACKAGE = ""


@dataclass(frozen=True)
class Annotation:
    """An annotation; literal_value is inserted verbatim (e.g. ``Arquillian.class``)."""
    name: str
    literal_value: Optional[str] = None


@dataclass(frozen=True)
class Parameter:
    type: str
    name: str


@dataclass
class Field:
    """A class field."""
    type: str
    name: str
    visibility: Visibility = Visibility.PRIVATE
    is_static: bool = False
    annotations: List[Annotation] = field(default_factory=list)

    def add_annotation(self, name: str, literal_value: Optional[str] = None) -> "Field":
        self.annotations.append(Annotation(name, literal_value))
        return self


@dataclass
class Method:
    """A method; return_type of None renders as ``void``."""
    name: str
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = False
    return_type: Optional[str] = None
    parameters: List[Parameter] = field(default_factory=list)
    body: Tuple["Statement", ...] = ()
    annotations: List[Annotation] = field(default_factory=list)

    def add_annotation(self, name: str, literal_value: Optional[str] = None) -> "Method":
        self.annotations.append(Annotation(name, literal_value))
        return self


@dataclass
class SourceTemplate:
    """A compilable Java source unit held as a structured tree.

    Building never validates identifiers; callers pass well-formed names.
    Imports keep insertion order and silently ignore duplicates.
    """
    package: str
    name: str
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = False
    super_type: Optional[str] = None
    imports: List[str] = field(default_factory=list)
    annotations: List[Annotation] = field(default_factory=list)
    fields: List[Field] = field(default_factory=list)
    methods: List[Method] = field(default_factory=list)

    @property
    def qualified_name(self) -> str:
        if not self.package:
            return self.name
        return f"{self.package}.{self.name}"

    @property
    def relative_path(self) -> Path:
        """Path of the source file relative to a source root."""
        parts = self.package.split(".") if self.package else []
        return Path(*parts, f"{self.name}.java")

    def set_public(self) -> "SourceTemplate":
        self.visibility = Visibility.PUBLIC
        return self

    def set_private(self) -> "SourceTemplate":
        self.visibility = Visibility.PRIVATE
        return self

    def set_super_type(self, super_type: Optional[str]) -> "SourceTemplate":
        self.super_type = super_type
        return self

    def add_import(self, qualified_name: str) -> "SourceTemplate":
        if qualified_name not in self.imports:
            self.imports.append(qualified_name)
        return self

    def add_annotation(self, name: str, literal_value: Optional[str] = None) -> "SourceTemplate":
        self.annotations.append(Annotation(name, literal_value))
        return self

    def add_field(self, type_name: str, name: str,
                  visibility: Visibility = Visibility.PRIVATE, is_static: bool = False) -> Field:
        new_field = Field(type=type_name, name=name, visibility=visibility, is_static=is_static)
        self.fields.append(new_field)
        return new_field

    def add_method(self, name: str, *, visibility: Visibility = Visibility.PUBLIC,
                   is_static: bool = False, return_type: Optional[str] = None,
                   parameters: Optional[List[Parameter]] = None,
                   body: Tuple["Statement", ...] = ()) -> Method:
        method = Method(
            name=name,
            visibility=visibility,
            is_static=is_static,
            return_type=return_type,
            parameters=list(parameters or []),
            body=tuple(body),
        )
        self.methods.append(method)
        return method

    def get_method(self, name: str) -> Optional[Method]:
        for method in self.methods:
            if method.name == name:
                return method
        return None


@dataclass(frozen=True)
class ClassReference:
    """The package and simple name of a Java class."""
    package: str
    name: str

    @property
    def qualified_name(self) -> str:
        if not self.package:
            return self.name
        return f"{self.package}.{self.name}"

    @classmethod
    def parse(cls, qualified_name: str) -> "ClassReference":
        package, _, name = qualified_name.rpartition(".")
        return cls(package=package, name=name)


@dataclass
class JavaResource:
    """A Java source file on disk."""
    path: Path
    package: str
    name: str

    @property
    def qualified_name(self) -> str:
        if not self.package:
            return self.name
        return f"{self.package}.{self.name}"

    @property
    def reference(self) -> ClassReference:
        return ClassReference(self.package, self.name)

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def delete(self) -> bool:
        """Delete the file; returns False if it was already gone."""
        if not self.path.exists():
            return False
        self.path.unlink()
        return True


@dataclass(frozen=True)
class ProjectFacts:
    """Project features the test scaffold depends on."""
    junit: bool = True
    testng: bool = False
    cdi: bool = False


@dataclass(frozen=True)
class DependencyCoordinate:
    """A Maven dependency; matching ignores version and scope."""
    group_id: str
    artifact_id: str
    version: Optional[str] = None
    scope: Optional[str] = None

    @property
    def key(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"

    def with_version(self, version: Optional[str]) -> "DependencyCoordinate":
        return DependencyCoordinate(self.group_id, self.artifact_id, version, self.scope)

    def __str__(self):
        parts = [self.group_id, self.artifact_id]
        if self.version:
            parts.append(self.version)
        return ":".join(parts)


@dataclass
class ScaffoldState:
    """Persisted state between command invocations."""
    timestamp: str
    active_resource: Optional[Dict[str, str]] = None  # {'qualified_name', 'path'}
    history: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class ExportRequest:
    """One invocation of the export operation."""
    project_root: Path
    class_under_test: str
    keep_runner: bool = False


class ExportState(Enum):
    """Lifecycle of the generated runner during one export."""
    ABSENT = "absent"
    GENERATED = "generated"
    EXECUTED = "executed"
    DELETED = "deleted"
    KEPT = "kept"


@dataclass
class ExportResult:
    """Outcome of a finished export."""
    state: ExportState
    runner_path: Path
    reused_runner: bool = False
    archive_path: Optional[Path] = None
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""
