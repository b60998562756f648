"""Java source lookup and persistence inside the Maven source roots."""

import re
from pathlib import Path
from typing import Iterable, Optional, Union

from arquillian_scaffold.exceptions import GenerationError
from arquillian_scaffold.generation.renderer import render_source
from arquillian_scaffold.models.data_models import JavaResource, SourceTemplate
from arquillian_scaffold.services.base_service import BaseService
from arquillian_scaffold.utils.writer import SourceFileWriter, WriteResult

PACKAGE_PATTERN = re.compile(r"^\s*package\s+([\w.]+)\s*;", re.MULTILINE)


def read_package(source: str) -> str:
    """Return the package declared in ``source`` ('' for the default package)."""
    match = PACKAGE_PATTERN.search(source)
    return match.group(1) if match else ""


class JavaSourceService(BaseService):
    """Source facet: find classes under test and save generated test sources."""

    def __init__(self, project, config, feedback=None):
        super().__init__(project, config, feedback)
        self.test_writer = SourceFileWriter(project.test_source_root)
        self.last_write: Optional[WriteResult] = None

    def save_test_java_source(self, template: SourceTemplate, dry_run: bool = False) -> JavaResource:
        """Render ``template`` and write it under the test source root."""
        source = render_source(template)
        self.last_write = self.test_writer.write(template.relative_path, source, dry_run=dry_run)
        if self.last_write.changed and not dry_run:
            self._log_debug(f"Saved {template.qualified_name} to {self.last_write.path}")
        return JavaResource(path=self.last_write.path, package=template.package, name=template.name)

    def get_test_java_resource(self, relative_path: Union[str, Path]) -> JavaResource:
        """Resource for ``relative_path`` below the test root; the file may not exist yet."""
        relative = Path(relative_path)
        package = ".".join(relative.parent.parts)
        return JavaResource(path=self.project.test_source_root / relative, package=package, name=relative.stem)

    def find_java_resource(self, class_ref: str) -> JavaResource:
        """Locate a class by qualified name, simple name, or path to its .java file."""
        path = self._locate(class_ref)
        if path is None:
            raise GenerationError(
                f"Cannot find a Java source for '{class_ref}'",
                suggestion=f"Check the class name; sources are searched in {self.project.main_source_root} "
                           f"and {self.project.test_source_root}."
            )

        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise GenerationError(
                f"Cannot read {path}: {e}",
                suggestion="Check the file permissions and encoding."
            ) from e

        return JavaResource(path=path, package=read_package(source), name=path.stem)

    def _source_roots(self) -> Iterable[Path]:
        return (self.project.main_source_root, self.project.test_source_root)

    def _locate(self, class_ref: str) -> Optional[Path]:
        if class_ref.endswith(".java"):
            candidate = Path(class_ref)
            if not candidate.is_absolute():
                candidate = self.project_root / candidate
            return candidate if candidate.is_file() else None

        relative = Path(*class_ref.split(".")).with_suffix(".java")
        for root in self._source_roots():
            candidate = root / relative
            if candidate.is_file():
                return candidate

        # A bare simple name: search the source trees
        if "." not in class_ref:
            for root in self._source_roots():
                if not root.exists():
                    continue
                matches = sorted(root.rglob(f"{class_ref}.java"))
                if len(matches) > 1:
                    self._log_warning(
                        f"Several classes named {class_ref}; using {matches[0]}",
                        "Pass the fully qualified class name to pick another one.",
                    )
                if matches:
                    return matches[0]
        return None
