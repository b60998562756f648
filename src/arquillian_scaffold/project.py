"""Maven project layout and detected features."""

import logging
from pathlib import Path

from arquillian_scaffold.config import Config

logger = logging.getLogger(__name__)


class MavenProject:
    """Paths of a Maven project, resolved from configuration."""

    def __init__(self, root: Path, config: Config):
        self.root = Path(root).resolve()
        self.config = config

    @property
    def pom_path(self) -> Path:
        return self.root / "pom.xml"

    @property
    def main_source_root(self) -> Path:
        return self.root / self.config.get('project.main_source_dir', 'src/main/java')

    @property
    def test_source_root(self) -> Path:
        return self.root / self.config.get('project.test_source_dir', 'src/test/java')

    @property
    def beans_descriptors(self):
        resources = self.root / self.config.get('project.resources_dir', 'src/main/resources')
        webapp = self.root / self.config.get('project.webapp_dir', 'src/main/webapp')
        return [resources / "META-INF" / "beans.xml", webapp / "WEB-INF" / "beans.xml"]

    def has_cdi_support(self) -> bool:
        """CDI is enabled when the project ships a beans.xml descriptor."""
        for descriptor in self.beans_descriptors:
            if descriptor.exists():
                logger.debug(f"CDI enabled by {descriptor}")
                return True
        return False
