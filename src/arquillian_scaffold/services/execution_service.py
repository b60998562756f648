"""Run project classes in a child Maven process."""

from typing import Optional

from arquillian_scaffold.exceptions import ExecutionError
from arquillian_scaffold.execution.command_builder import build_exec_command
from arquillian_scaffold.execution.runner import RunResult, default_artifacts_dir, prune_artifacts, run_command
from arquillian_scaffold.services.base_service import BaseService


class JavaExecutionService(BaseService):
    """Execution facet: run a main class with the project's compiled classpath."""

    def execute_project_class(self, qualified_class_name: str, *args: str) -> RunResult:
        """Compile the project and run ``qualified_class_name`` with ``args``.

        Blocks until the child exits. Raises ExecutionError when the process
        can't be launched, times out, or exits with a non-zero status.
        """
        spec = build_exec_command(
            project_root=self.project_root,
            config=self.config,
            main_class=qualified_class_name,
            args=args,
        )
        timeout: Optional[float] = self.config.get('execution.timeout')
        artifacts_dir = default_artifacts_dir(self.project_root) if self.config.get('execution.artifacts', True) else None

        self._log_debug(f"Running: {' '.join(spec.argv)}")
        try:
            result = run_command(spec, timeout=timeout, artifacts_dir=artifacts_dir)
        except TimeoutError as e:
            raise ExecutionError(
                f"{qualified_class_name} did not finish: {e}",
                suggestion="Raise execution.timeout or check the @Deployment method for blocking calls."
            ) from e
        except OSError as e:
            raise ExecutionError(
                f"Failed to launch '{spec.argv[0]}': {e}",
                suggestion="Install Maven or set execution.maven to the mvn executable."
            ) from e
        finally:
            if artifacts_dir is not None:
                prune_artifacts(artifacts_dir.parent, self.config.get('execution.artifacts_keep', 10))

        if not result.ok:
            self.logger.error(f"{qualified_class_name} exited with {result.returncode}")
            raise ExecutionError(
                f"{qualified_class_name} exited with status {result.returncode}",
                returncode=result.returncode,
                suggestion=_failure_hint(result, artifacts_dir),
            )

        self._log_debug(f"{qualified_class_name} finished in {result.duration:.1f}s")
        return result


def _failure_hint(result: RunResult, artifacts_dir) -> str:
    tail = [line for line in (result.stderr or result.stdout).splitlines() if line.strip()][-5:]
    hint = "\n".join(tail) if tail else "No output captured."
    if artifacts_dir is not None:
        hint += f"\nFull output saved under {artifacts_dir}"
    return hint
