"""Command builder for running a project class through Maven."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence


@dataclass
class CommandSpec:
    argv: List[str]
    cwd: Path
    env: Dict[str, str]


def _quote_exec_arg(arg: str) -> str:
    if not arg or any(ch.isspace() for ch in arg) or '"' in arg:
        escaped = arg.replace('"', '\\"')
        return f'"{escaped}"'
    return arg


def build_exec_command(
    *,
    project_root: Path,
    config,
    main_class: str,
    args: Sequence[str] = (),
) -> CommandSpec:
    """Construct the Maven command that compiles the project and runs ``main_class``.

    - Goals default to 'test-compile exec:java' so test classes are compiled first
    - exec.classpathScope=test puts the project's test output on the classpath
    - Propagates env by default; merges execution.env.extra
    """
    maven = config.get('execution.maven', 'mvn') or 'mvn'
    goals = list(config.get('execution.goals', ['test-compile', 'exec:java']) or [])
    extra_args = list(config.get('execution.extra_args', []) or [])
    scope = config.get('execution.classpath_scope', 'test') or 'test'

    argv = [maven, *extra_args, *goals, f"-Dexec.mainClass={main_class}"]
    if args:
        argv.append("-Dexec.args=" + " ".join(_quote_exec_arg(a) for a in args))
    argv.append(f"-Dexec.classpathScope={scope}")

    propagate = bool(config.get('execution.env.propagate', True))
    env: Dict[str, str] = dict(os.environ) if propagate else {}
    extra_env: Dict[str, str] = config.get('execution.env.extra', {}) or {}
    for k, v in extra_env.items():
        env[str(k)] = str(v)

    return CommandSpec(argv=argv, cwd=Path(project_root), env=env)
