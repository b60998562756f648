"""Configuration management for Arquillian scaffolding."""

import copy
import os
import yaml
import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".arquillian.yml"


class Config:
    """Configuration management for Arquillian scaffolding."""

    DEFAULT_CONFIG = {
        'project': {
            'main_source_dir': 'src/main/java',
            'test_source_dir': 'src/test/java',
            'resources_dir': 'src/main/resources',
            'webapp_dir': 'src/main/webapp',
        },
        'dependencies': {
            'repository_url': 'https://repo1.maven.org/maven2',
            'timeout': 30,             # Seconds for repository metadata requests
        },
        'generation': {
            'archive_name': 'test.jar',   # Name passed to ShrinkWrap.create
        },
        'execution': {
            'maven': 'mvn',
            'goals': ['test-compile', 'exec:java'],
            'extra_args': ['-q'],
            'classpath_scope': 'test',
            'timeout': None,          # None blocks until the child exits
            'artifacts': True,        # Write stdout/stderr/cmd.json under .artifacts/export
            'artifacts_keep': 10,     # Newest run directories kept; None keeps all
            'env': {
                'propagate': True,
                'extra': {},
            },
        },
        'export': {
            'runner_package': 'forge.arquillian',
            'runner_class': 'DeploymentExporter',
            'fail_on_error': True,        # Runner exits 1 when the export fails
            'cleanup_on_failure': False,  # Delete a freshly generated runner if execution fails
        },
        'state': {
            'file': '.arquillian_state.json',
            'max_history': 50,
        },
    }

    def __init__(self, config_file: str = DEFAULT_CONFIG_FILE):
        self.config_file = config_file
        self.config = self.load_config()

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file or use defaults."""
        # When config_file is None or falsy, skip file I/O and return defaults
        if not self.config_file:
            return copy.deepcopy(self.DEFAULT_CONFIG)
        if os.path.exists(self.config_file):
            try:
                with open(self.config_file, 'r') as f:
                    user_config = yaml.safe_load(f)
                    # yaml.safe_load can return None
                    if not user_config:
                        return copy.deepcopy(self.DEFAULT_CONFIG)
                    return self._deep_merge(self.DEFAULT_CONFIG, user_config)
            except Exception as e:
                logger.warning(f"Failed to load config from {self.config_file}: {e}")
        return copy.deepcopy(self.DEFAULT_CONFIG)

    def create_sample_config(self, filepath: str = DEFAULT_CONFIG_FILE) -> None:
        """Create a configuration file with all options and explanations."""
        config_content = """# Arquillian Scaffold Configuration
# Uncomment and modify the sections you want to customize.

# =============================================================================
# PROJECT LAYOUT
# =============================================================================
project:
  main_source_dir: 'src/main/java'
  test_source_dir: 'src/test/java'      # Generated tests and the exporter land here
  resources_dir: 'src/main/resources'   # META-INF/beans.xml here enables CDI stanzas
  webapp_dir: 'src/main/webapp'         # WEB-INF/beans.xml here enables CDI stanzas

# =============================================================================
# DEPENDENCY RESOLUTION
# =============================================================================
dependencies:
  repository_url: 'https://repo1.maven.org/maven2'
  timeout: 30                           # Seconds per metadata request

# =============================================================================
# TEST CLASS GENERATION
# =============================================================================
generation:
  archive_name: 'test.jar'              # Archive created in the @Deployment method

# =============================================================================
# OUT-OF-PROCESS EXECUTION
# =============================================================================
execution:
  maven: 'mvn'                          # Maven executable
  goals: ['test-compile', 'exec:java']
  extra_args: ['-q']
  classpath_scope: 'test'
  timeout: null                         # Seconds; null waits for the child to exit
  artifacts: true                       # Keep stdout/stderr under .artifacts/export
  artifacts_keep: 10                    # Newest runs kept; null keeps every run
  env:
    propagate: true
    extra: {}

# =============================================================================
# DEPLOYMENT EXPORT
# =============================================================================
export:
  runner_package: 'forge.arquillian'
  runner_class: 'DeploymentExporter'
  fail_on_error: true                   # false: runner prints errors and exits 0
  cleanup_on_failure: false             # true: delete a generated runner when the run fails

state:
  file: '.arquillian_state.json'
  max_history: 50
"""

        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(config_content)

        logger.info(f"Configuration created at {filepath}")

    def get(self, key: str, default=None):
        """Get configuration value using dot notation."""
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def _deep_merge(self, default: Dict, user: Dict) -> Dict:
        """Deeply merge user config with defaults."""
        result = copy.deepcopy(default)

        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
