"""Export a @Deployment archive to disk by running a generated class out of process.

The tool's own process can't load the project's compiled classes, so the
export works in steps:

1. Generate ``DeploymentExporter`` into the test source root (reused if a
   previous run left it behind)
2. Compile the project and run the exporter with ``mvn exec:java`` so the
   project's classes are on the classpath
3. Delete the generated exporter unless asked to keep it
"""

from pathlib import Path
from typing import Optional

from arquillian_scaffold.exceptions import ArquillianScaffoldError, ExportError
from arquillian_scaffold.generation.runner_scaffold import EXPORT_MARKER, RunnerScaffoldSynthesizer
from arquillian_scaffold.models.data_models import ExportRequest, ExportResult, ExportState, JavaResource
from arquillian_scaffold.services.base_service import BaseService


class ExportPipeline(BaseService):
    """Drives the runner through ABSENT -> GENERATED -> EXECUTED -> DELETED | KEPT."""

    def __init__(self, project, config, source_service, execution_service, feedback=None):
        super().__init__(project, config, feedback)
        self.sources = source_service
        self.execution = execution_service
        self.synthesizer = RunnerScaffoldSynthesizer(
            fail_on_error=bool(config.get('export.fail_on_error', True)),
            package=config.get('export.runner_package', 'forge.arquillian'),
            name=config.get('export.runner_class', 'DeploymentExporter'),
        )

    def runner_resource(self) -> JavaResource:
        package_parts = self.synthesizer.package.split(".") if self.synthesizer.package else []
        return self.sources.get_test_java_resource(Path(*package_parts, f"{self.synthesizer.name}.java"))

    def export(self, request: ExportRequest) -> ExportResult:
        runner = self.runner_resource()
        state = ExportState.ABSENT
        generated_now = False
        reused = False

        try:
            if runner.exists():
                reused = True
                self._log_debug(f"Reusing existing {runner.path}")
            else:
                runner = self.sources.save_test_java_source(self.synthesizer.synthesize())
                generated_now = True
                self._log_debug(f"Generated {runner.path}")
            state = ExportState.GENERATED

            with self.feedback.status_spinner(f"Exporting deployment of {request.class_under_test}"):
                run = self.execution.execute_project_class(runner.qualified_name, request.class_under_test)
            state = ExportState.EXECUTED

            if request.keep_runner:
                state = ExportState.KEPT
            else:
                runner.delete()
                state = ExportState.DELETED
        except Exception as e:
            if generated_now and self.config.get('export.cleanup_on_failure', False):
                self._cleanup(runner)
            suggestion = e.suggestion if isinstance(e, ArquillianScaffoldError) else None
            raise ExportError(
                f"Error while calling generated {self.synthesizer.name}: {getattr(e, 'message', e)}",
                state=state,
                suggestion=suggestion,
            ) from e

        archive_path = self._archive_path(run.stdout, request.project_root)
        if archive_path:
            self._log_success(f"Exported deployment to {archive_path}")
        else:
            self._log_warning(
                "The exporter finished but reported no archive",
                "Run with export.fail_on_error: true to surface failures inside the exporter.",
            )

        return ExportResult(
            state=state,
            runner_path=runner.path,
            reused_runner=reused,
            archive_path=archive_path,
            returncode=run.returncode,
            stdout=run.stdout,
            stderr=run.stderr,
        )

    def _cleanup(self, runner: JavaResource) -> None:
        try:
            if runner.delete():
                self._log_debug(f"Removed {runner.path} after failure")
        except OSError as e:
            self._log_warning(f"Could not remove {runner.path}: {e}")

    @staticmethod
    def _archive_path(stdout: str, project_root: Path) -> Optional[Path]:
        for line in reversed((stdout or "").splitlines()):
            line = line.strip()
            if line.startswith(EXPORT_MARKER):
                path = Path(line[len(EXPORT_MARKER):].strip())
                return path if path.is_absolute() else Path(project_root) / path
        return None
