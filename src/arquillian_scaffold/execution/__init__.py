"""Out-of-process execution of project classes."""

from .command_builder import CommandSpec, build_exec_command
from .runner import RunResult, run_command, default_artifacts_dir

__all__ = ['CommandSpec', 'build_exec_command', 'RunResult', 'run_command', 'default_artifacts_dir']
