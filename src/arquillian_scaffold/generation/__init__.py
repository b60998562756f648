"""Java source synthesis for Arquillian tests and the deployment exporter."""

from .renderer import render_source
from .runner_scaffold import RunnerScaffoldSynthesizer
from .test_scaffold import TestScaffoldSynthesizer

__all__ = ["render_source", "RunnerScaffoldSynthesizer", "TestScaffoldSynthesizer"]
