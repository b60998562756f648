"""Process runner for executing a child command with structured capture and artifacts."""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Dict, Optional

from .command_builder import CommandSpec

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    returncode: int
    stdout: str
    stderr: str
    duration: float
    cmd: List[str]
    cwd: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(
    spec: CommandSpec,
    *,
    timeout: Optional[float] = None,
    artifacts_dir: Optional[Path] = None,
) -> RunResult:
    """Run the command spec and block until it exits.

    - Captures stdout/stderr, return code, and duration
    - Writes artifacts (stdout.txt, stderr.txt, cmd.json) to artifacts_dir if provided
    - Launch failures (missing executable) propagate as OSError
    - Raises TimeoutError on timeout with partial outputs saved to artifacts
    """
    start = time.time()
    try:
        completed = subprocess.run(
            spec.argv,
            cwd=spec.cwd,
            env=spec.env,
            text=True,
            capture_output=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        partial_result = RunResult(
            returncode=-1,
            stdout=_as_text(e.stdout),
            stderr=_as_text(e.stderr),
            duration=time.time() - start,
            cmd=list(spec.argv),
            cwd=str(spec.cwd),
        )
        if artifacts_dir is not None:
            _write_artifacts(partial_result, artifacts_dir)
        raise TimeoutError(
            f"Command timed out after {timeout}s. Partial stdout/stderr saved to artifacts."
        ) from e

    result = RunResult(
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
        duration=time.time() - start,
        cmd=list(spec.argv),
        cwd=str(spec.cwd),
    )
    if artifacts_dir is not None:
        _write_artifacts(result, artifacts_dir)
    return result


def default_artifacts_dir(cwd: Path) -> Path:
    ts = int(time.time() * 1000)
    return cwd / ".artifacts" / "export" / str(ts)


def prune_artifacts(export_dir: Path, keep: Optional[int]) -> List[Path]:
    """Delete all but the newest ``keep`` run directories under ``export_dir``."""
    if keep is None or keep < 0 or not export_dir.is_dir():
        return []
    runs = sorted(
        (p for p in export_dir.iterdir() if p.is_dir() and p.name.isdigit()),
        key=lambda p: int(p.name),
        reverse=True,
    )
    removed = []
    for stale in runs[keep:]:
        try:
            shutil.rmtree(stale)
            removed.append(stale)
        except OSError as e:
            logger.debug(f"Could not remove old artifacts {stale}: {e}")
    return removed


def _as_text(output) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output


def _write_artifacts(result: RunResult, base_dir: Path) -> None:
    try:
        base_dir.mkdir(parents=True, exist_ok=True)
        (base_dir / "stdout.txt").write_text(result.stdout)
        (base_dir / "stderr.txt").write_text(result.stderr)
        cmd_payload: Dict[str, object] = {
            "argv": result.cmd,
            "cwd": result.cwd,
            "returncode": result.returncode,
            "duration": result.duration,
        }
        (base_dir / "cmd.json").write_text(json.dumps(cmd_payload, indent=2))
    except OSError as e:
        # Best-effort artifacts
        logger.debug(f"Could not write run artifacts to {base_dir}: {e}")
