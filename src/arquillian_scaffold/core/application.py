"""Main application orchestrator."""

from pathlib import Path
from typing import Optional

from arquillian_scaffold.config import Config
from arquillian_scaffold.exceptions import ValidationError
from arquillian_scaffold.models.data_models import ExportRequest, ExportResult
from arquillian_scaffold.project import MavenProject
from arquillian_scaffold.services import (
    CreateTestResult,
    ExportPipeline,
    JavaExecutionService,
    JavaSourceService,
    MavenDependencyService,
    SetupResult,
    SetupService,
    TestClassService,
)
from arquillian_scaffold.tracking.state_tracker import ScaffoldStateTracker
from arquillian_scaffold.utils.user_feedback import UserFeedback


class ArquillianScaffoldApp:
    """Main application orchestrator that coordinates between services."""

    def __init__(self, project_root: Path, config: Config, feedback: Optional[UserFeedback] = None):
        self.project_root = Path(project_root).resolve()
        self.config = config
        self.feedback = feedback or UserFeedback()
        self.project = MavenProject(self.project_root, config)

        self.dependency_service = MavenDependencyService(self.project, config, feedback)
        self.source_service = JavaSourceService(self.project, config, feedback)
        self.execution_service = JavaExecutionService(self.project, config, feedback)
        self.setup_service = SetupService(self.project, config, self.dependency_service, feedback)
        self.test_class_service = TestClassService(
            self.project, config, self.dependency_service, self.source_service, feedback
        )
        self.export_pipeline = ExportPipeline(
            self.project, config, self.source_service, self.execution_service, feedback
        )

        state_file = self.project_root / config.get('state.file', '.arquillian_state.json')
        self.state_tracker = ScaffoldStateTracker(str(state_file), config.get('state.max_history', 50))

    def run_setup(self, test_framework: str, container: str) -> SetupResult:
        result = self.setup_service.setup(test_framework, container)
        self.state_tracker.record(
            "setup", container,
            framework=test_framework,
            arquillian_version=result.arquillian_version,
            added=[str(c) for c in result.added],
        )
        return result

    def run_create_test(self, class_ref: str, enable_jpa: bool = False, dry_run: bool = False) -> CreateTestResult:
        result = self.test_class_service.create_test(class_ref, enable_jpa=enable_jpa, dry_run=dry_run)
        if not dry_run:
            # The new test becomes the current resource, as if the shell picked it up
            self.state_tracker.pick_up(result.resource)
            self.state_tracker.record("create-test", result.template.qualified_name, jpa=enable_jpa)
        return result

    def current_resource(self, class_ref: Optional[str] = None) -> str:
        """Qualified name of ``class_ref`` or, when omitted, of the active resource."""
        if class_ref:
            return self.source_service.find_java_resource(class_ref).qualified_name

        active = self.state_tracker.active_qualified_name
        if not active:
            raise ValidationError(
                "No active Java resource",
                suggestion="Pass --class or run create-test first."
            )
        return active

    def run_export(self, keep_runner: bool = False, class_ref: Optional[str] = None) -> ExportResult:
        request = ExportRequest(
            project_root=self.project_root,
            class_under_test=self.current_resource(class_ref),
            keep_runner=keep_runner,
        )
        result = self.export_pipeline.export(request)
        self.state_tracker.record(
            "export", request.class_under_test,
            state=result.state.value,
            archive=str(result.archive_path) if result.archive_path else None,
        )
        return result

    def run_status(self) -> str:
        active = self.state_tracker.active_qualified_name or "none"
        lines = [f"Active resource: {active}"]
        for entry in self.state_tracker.recent():
            lines.append(f"{entry['timestamp']}  {entry['action']:<12} {entry['target']}")
        return "\n".join(lines)
