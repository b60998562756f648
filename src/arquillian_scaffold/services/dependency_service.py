"""Maven dependency lookup and POM updates."""

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Tuple

import requests

from arquillian_scaffold.exceptions import ConfigurationError, DependencyError, ProjectStructureError
from arquillian_scaffold.models.data_models import DependencyCoordinate
from arquillian_scaffold.services.base_service import BaseService

# XML declaration, comments, PIs and DOCTYPE ahead of the root element
PROLOG_PATTERN = re.compile(
    rb"\A(?:\xef\xbb\xbf)?(?:\s*(?:<\?.*?\?>|<!--.*?-->|<!DOCTYPE[^\[>]*(?:\[.*?\])?\s*>))*\s*",
    re.DOTALL,
)
ENCODING_PATTERN = re.compile(rb"<\?xml[^>]*?encoding=[\"']([A-Za-z0-9._-]+)[\"']")


def _namespace(element: ET.Element) -> str:
    if element.tag.startswith("{"):
        return element.tag[:element.tag.index("}") + 1]
    return ""


def _text(element: ET.Element, tag: str) -> Optional[str]:
    child = element.find(tag)
    if child is None or child.text is None:
        return None
    return child.text.strip()


class MavenDependencyService(BaseService):
    """Dependency facet backed by the project's pom.xml and a Maven repository."""

    def __init__(self, project, config, feedback=None, session: Optional[requests.Session] = None):
        super().__init__(project, config, feedback)
        self.session = session or requests.Session()

    # -- reading -------------------------------------------------------------

    def _read_pom(self) -> bytes:
        pom_path = self.project.pom_path
        if not pom_path.exists():
            raise ProjectStructureError(
                f"No pom.xml found in {self.project_root}",
                suggestion="Run the command from the root of a Maven project."
            )
        return pom_path.read_bytes()

    def _load_pom(self, raw: Optional[bytes] = None) -> ET.ElementTree:
        if raw is None:
            raw = self._read_pom()
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
        try:
            parser.feed(raw)
            return ET.ElementTree(parser.close())
        except ET.ParseError as e:
            raise DependencyError(
                f"Cannot parse {self.project.pom_path}: {e}",
                suggestion="Fix the XML syntax of pom.xml and try again."
            ) from e

    def declared_dependencies(self) -> List[DependencyCoordinate]:
        """Dependencies declared directly under <project><dependencies>."""
        root = self._load_pom().getroot()
        ns = _namespace(root)
        dependencies = root.find(f"{ns}dependencies")
        if dependencies is None:
            return []

        declared = []
        for dependency in dependencies.findall(f"{ns}dependency"):
            group_id = _text(dependency, f"{ns}groupId")
            artifact_id = _text(dependency, f"{ns}artifactId")
            if not group_id or not artifact_id:
                continue
            declared.append(DependencyCoordinate(
                group_id=group_id,
                artifact_id=artifact_id,
                version=_text(dependency, f"{ns}version"),
                scope=_text(dependency, f"{ns}scope"),
            ))
        return declared

    def has_dependency(self, coordinate: DependencyCoordinate) -> bool:
        return any(d.key == coordinate.key for d in self.declared_dependencies())

    def get_dependency(self, coordinate: DependencyCoordinate) -> DependencyCoordinate:
        for declared in self.declared_dependencies():
            if declared.key == coordinate.key:
                return declared
        raise DependencyError(
            f"Dependency {coordinate.key} is not declared in pom.xml",
            coordinate=coordinate.key,
        )

    # -- repository lookup ---------------------------------------------------

    def metadata_url(self, coordinate: DependencyCoordinate) -> str:
        repository = self.config.get('dependencies.repository_url', 'https://repo1.maven.org/maven2').rstrip("/")
        group_path = coordinate.group_id.replace(".", "/")
        return f"{repository}/{group_path}/{coordinate.artifact_id}/maven-metadata.xml"

    def resolve_available_versions(self, coordinate: DependencyCoordinate) -> List[DependencyCoordinate]:
        """List published versions of ``coordinate``, newest first."""
        url = self.metadata_url(coordinate)
        timeout = self.config.get('dependencies.timeout', 30)
        self._log_debug(f"Fetching {url}")
        try:
            response = self.session.get(url, timeout=timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise ConfigurationError(
                f"Cannot resolve {coordinate.key}: repository answered {e.response.status_code if e.response is not None else 'an error'}",
                suggestion="Check the coordinate or dependencies.repository_url in the configuration."
            ) from e
        except requests.exceptions.RequestException as e:
            raise ConfigurationError(
                f"Cannot reach the Maven repository for {coordinate.key}: {e}",
                suggestion="Check your network connection or dependencies.repository_url."
            ) from e

        try:
            metadata = ET.fromstring(response.content)
        except ET.ParseError as e:
            raise ConfigurationError(f"Invalid repository metadata at {url}: {e}") from e

        versions = [v.text.strip() for v in metadata.findall("./versioning/versions/version") if v.text]
        if not versions:
            raise ConfigurationError(
                f"No published versions found for {coordinate.key}",
                suggestion="Check the groupId and artifactId."
            )
        return [coordinate.with_version(v) for v in reversed(versions)]

    # -- writing -------------------------------------------------------------

    def add_dependency(self, coordinate: DependencyCoordinate) -> bool:
        """Declare ``coordinate`` in pom.xml; returns False if it is already there."""
        if self.has_dependency(coordinate):
            self._log_debug(f"{coordinate.key} already declared")
            return False

        raw = self._read_pom()
        root = self._load_pom(raw).getroot()
        ns = _namespace(root)
        unit = _indent_unit(root)

        dependencies = root.find(f"{ns}dependencies")
        if dependencies is None:
            dependencies = ET.Element(f"{ns}dependencies")
            _append_indented(root, dependencies, level=1, unit=unit)

        element = ET.Element(f"{ns}dependency")
        fields = [("groupId", coordinate.group_id), ("artifactId", coordinate.artifact_id)]
        if coordinate.version:
            fields.append(("version", coordinate.version))
        if coordinate.scope:
            fields.append(("scope", coordinate.scope))
        for tag, value in fields:
            child = ET.SubElement(element, f"{ns}{tag}")
            child.text = value

        _append_indented(dependencies, element, level=2, unit=unit)
        self._write_pom(root, raw)
        self._log_success(f"Added dependency {coordinate}")
        return True

    def _write_pom(self, root: ET.Element, raw: bytes) -> None:
        """Serialize ``root`` between the original text before and after it."""
        ns = _namespace(root)
        if ns:
            ET.register_namespace("", ns[1:-1])
        prolog, epilog = _surrounding_text(raw, root)
        match = ENCODING_PATTERN.search(prolog)
        encoding = match.group(1).decode("ascii") if match else "UTF-8"
        pom_path: Path = self.project.pom_path
        try:
            body = ET.tostring(root, encoding=encoding, xml_declaration=False)
            pom_path.write_bytes(prolog + body + epilog)
        except LookupError as e:
            raise DependencyError(f"Unsupported pom.xml encoding {encoding}") from e
        except OSError as e:
            raise DependencyError(f"Failed to update {pom_path}: {e}") from e


def _surrounding_text(raw: bytes, root: ET.Element) -> Tuple[bytes, bytes]:
    """Split off the bytes before the root start tag and after its end tag."""
    prolog = PROLOG_PATTERN.match(raw).group(0)

    local = root.tag.rsplit("}", 1)[-1].encode("ascii")
    closing = None
    for closing in re.finditer(rb"</(?:[\w.-]+:)?" + re.escape(local) + rb"\s*>", raw):
        pass
    epilog = raw[closing.end():] if closing else b"\n"
    return prolog, epilog


def _indent_unit(root: ET.Element) -> str:
    """Guess the POM's indentation from the whitespace before its first child."""
    leading = (root.text or "").lstrip("\r\n")
    if leading and not leading.strip():
        return leading
    return "    "


def _append_indented(parent: ET.Element, element: ET.Element, level: int, unit: str) -> None:
    """Append ``element`` at nesting ``level`` keeping the surrounding layout."""
    child_pad = "\n" + unit * level
    closing_pad = "\n" + unit * (level - 1)

    if len(parent):
        parent[-1].tail = child_pad
    else:
        parent.text = child_pad
    parent.append(element)
    element.tail = closing_pad

    if len(element):
        element.text = child_pad + unit
        for child in element:
            child.tail = child_pad + unit
        element[-1].tail = child_pad
