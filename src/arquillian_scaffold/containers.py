"""Arquillian container adapters and the runtime dependencies they need."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from arquillian_scaffold.exceptions import ConfigurationError
from arquillian_scaffold.models.data_models import DependencyCoordinate

logger = logging.getLogger(__name__)

ARQUILLIAN_CONTAINER_GROUP = "org.jboss.arquillian.container"


@dataclass(frozen=True)
class Container:
    """A target runtime: the Arquillian adapter plus its own dependencies."""
    id: str
    description: str
    adapter_artifact: str
    runtime_dependencies: Tuple[DependencyCoordinate, ...] = field(default_factory=tuple)

    def adapter(self, arquillian_version: str) -> DependencyCoordinate:
        return DependencyCoordinate(ARQUILLIAN_CONTAINER_GROUP, self.adapter_artifact, arquillian_version, "test")

    def dependencies(self, arquillian_version: str) -> List[DependencyCoordinate]:
        return [self.adapter(arquillian_version), *self.runtime_dependencies]

    def install_dependencies(self, dependency_service, arquillian_version: str) -> List[DependencyCoordinate]:
        """Declare missing dependencies; returns the ones that were added."""
        added = []
        for coordinate in self.dependencies(arquillian_version):
            if dependency_service.has_dependency(coordinate):
                continue
            dependency_service.add_dependency(coordinate)
            added.append(coordinate)
        logger.debug(f"Container {self.id}: added {len(added)} dependencies")
        return added


class ArquillianContainer(Enum):
    """Containers offered by ``setup --container``."""

    JBOSS_AS_REMOTE_6 = Container(
        id="jbossas-remote-6",
        description="JBoss AS 6 running as a separate server",
        adapter_artifact="arquillian-jbossas-remote-6",
        runtime_dependencies=(
            DependencyCoordinate("org.jboss.jbossas", "jboss-as-client", "6.0.0.Final", "test"),
        ),
    )
    JBOSS_AS_MANAGED_6 = Container(
        id="jbossas-managed-6",
        description="JBoss AS 6 started and stopped by Arquillian",
        adapter_artifact="arquillian-jbossas-managed-6",
        runtime_dependencies=(
            DependencyCoordinate("org.jboss.jbossas", "jboss-server-manager", "1.0.3.GA", "test"),
            DependencyCoordinate("org.jboss.jbossas", "jboss-as-client", "6.0.0.Final", "test"),
        ),
    )
    GLASSFISH_EMBEDDED_3 = Container(
        id="glassfish-embedded-3",
        description="Embedded GlassFish 3",
        adapter_artifact="arquillian-glassfish-embedded-3",
        runtime_dependencies=(
            DependencyCoordinate("org.glassfish.extras", "glassfish-embedded-all", "3.0.1", "test"),
        ),
    )
    WELD_EE_EMBEDDED_1_1 = Container(
        id="weld-ee-embedded-1.1",
        description="Embedded Weld EE mock container",
        adapter_artifact="arquillian-weld-ee-embedded-1.1",
        runtime_dependencies=(
            DependencyCoordinate("org.jboss.weld", "weld-core", "1.1.0.Final", "test"),
            DependencyCoordinate("org.slf4j", "slf4j-simple", "1.6.1", "test"),
        ),
    )
    OPENWEBBEANS_EMBEDDED_1 = Container(
        id="openwebbeans-embedded-1",
        description="Embedded OpenWebBeans",
        adapter_artifact="arquillian-openwebbeans-embedded-1",
        runtime_dependencies=(
            DependencyCoordinate("org.apache.openwebbeans", "openwebbeans-impl", "1.0.0", "test"),
        ),
    )

    @property
    def container(self) -> Container:
        return self.value

    @classmethod
    def ids(cls) -> List[str]:
        return [member.value.id for member in cls]

    @classmethod
    def from_id(cls, container_id: str) -> "ArquillianContainer":
        for member in cls:
            if member.value.id == container_id:
                return member
        raise ConfigurationError(
            f"Unknown container '{container_id}'",
            suggestion=f"Choose one of: {', '.join(cls.ids())}"
        )
