"""Declare Arquillian, test framework and container dependencies."""

from dataclasses import dataclass, field
from typing import List

from arquillian_scaffold.containers import ArquillianContainer
from arquillian_scaffold.exceptions import ConfigurationError
from arquillian_scaffold.models.data_models import DependencyCoordinate
from arquillian_scaffold.services.base_service import BaseService

TEST_FRAMEWORKS = ("junit", "testng")

ARQUILLIAN_API = DependencyCoordinate("org.jboss.arquillian", "arquillian-api", scope="test")
JUNIT = DependencyCoordinate("junit", "junit", scope="test")
TESTNG = DependencyCoordinate("org.testng", "testng", scope="test")


def framework_dependency(test_framework: str) -> DependencyCoordinate:
    return TESTNG if test_framework == "testng" else JUNIT


def framework_integration(test_framework: str, arquillian_version: str) -> DependencyCoordinate:
    artifact = "arquillian-testng" if test_framework == "testng" else "arquillian-junit"
    return DependencyCoordinate("org.jboss.arquillian", artifact, arquillian_version, "test")


@dataclass
class SetupResult:
    arquillian_version: str
    test_framework: str
    container: str
    added: List[DependencyCoordinate] = field(default_factory=list)


class SetupService(BaseService):
    """Idempotently declares everything an Arquillian test needs."""

    def __init__(self, project, config, dependency_service, feedback=None):
        super().__init__(project, config, feedback)
        self.dependencies = dependency_service

    def setup(self, test_framework: str, container_id: str) -> SetupResult:
        if test_framework not in TEST_FRAMEWORKS:
            raise ConfigurationError(
                f"Unsupported test framework '{test_framework}'",
                suggestion=f"Use one of: {', '.join(TEST_FRAMEWORKS)}"
            )
        if not container_id:
            raise ConfigurationError(
                "No container given",
                suggestion=f"Pass --container with one of: {', '.join(ArquillianContainer.ids())}"
            )
        container = ArquillianContainer.from_id(container_id).container

        added: List[DependencyCoordinate] = []
        arquillian_version = self._install_arquillian(added)

        framework = framework_dependency(test_framework)
        if not self.dependencies.has_dependency(framework):
            chosen = self._prompt_version(framework, f"Which version of {_label(test_framework)} do you want to install?")
            self._add(chosen, added)

        integration = framework_integration(test_framework, arquillian_version)
        if not self.dependencies.has_dependency(integration):
            self._add(integration, added)

        added.extend(container.install_dependencies(self.dependencies, arquillian_version))

        self._log_success(f"Arquillian {arquillian_version} set up with {_label(test_framework)} on {container.id}")
        return SetupResult(arquillian_version, test_framework, container.id, added)

    def _install_arquillian(self, added: List[DependencyCoordinate]) -> str:
        if self.dependencies.has_dependency(ARQUILLIAN_API):
            version = self.dependencies.get_dependency(ARQUILLIAN_API).version
            if version:
                return version
            raise ConfigurationError(
                "arquillian-api is declared without a version",
                suggestion="Set an explicit <version> for org.jboss.arquillian:arquillian-api in pom.xml."
            )

        chosen = self._prompt_version(ARQUILLIAN_API, "Which version of Arquillian do you want to install?")
        self._add(chosen, added)
        return chosen.version

    def _prompt_version(self, coordinate: DependencyCoordinate, question: str) -> DependencyCoordinate:
        with self.feedback.status_spinner(f"Resolving versions of {coordinate.key}"):
            available = self.dependencies.resolve_available_versions(coordinate)
        return self.feedback.prompt_choice(question, available)

    def _add(self, coordinate: DependencyCoordinate, added: List[DependencyCoordinate]) -> None:
        if self.dependencies.add_dependency(coordinate):
            added.append(coordinate)


def _label(test_framework: str) -> str:
    return "TestNG" if test_framework == "testng" else "JUnit"
