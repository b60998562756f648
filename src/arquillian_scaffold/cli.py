"""Command-line interface for Arquillian scaffolding."""

import argparse
import logging
import os
import sys
import traceback
from pathlib import Path

from arquillian_scaffold.config import Config, DEFAULT_CONFIG_FILE
from arquillian_scaffold.containers import ArquillianContainer
from arquillian_scaffold.core import ArquillianScaffoldApp
from arquillian_scaffold.utils.user_feedback import UserFeedback
from arquillian_scaffold.utils.validation import Validator, SystemValidator
from arquillian_scaffold.exceptions import (
    ArquillianScaffoldError,
    ValidationError,
    ConfigurationError,
    ProjectStructureError,
)

MODES = ['setup', 'create-test', 'export', 'status', 'init-config']


# Configure logging
def configure_logging(verbose: bool = False, quiet: bool = False):
    """Configure logging based on verbosity level."""
    if quiet:
        logging.basicConfig(level=logging.ERROR, format='%(message)s')
        logging.getLogger('urllib3').setLevel(logging.WARNING)
        logging.getLogger('requests').setLevel(logging.WARNING)
    elif verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    else:
        # User-facing output goes through the rich console; logging only carries warnings
        logging.basicConfig(
            level=logging.WARNING,
            format='%(levelname)s: %(message)s'
        )
        logging.getLogger('urllib3').setLevel(logging.ERROR)
        logging.getLogger('requests').setLevel(logging.ERROR)

logger = logging.getLogger(__name__)


def show_welcome_banner(feedback: UserFeedback, mode: str):
    """Display a concise welcome banner."""
    if not feedback.quiet:
        feedback.brand_header(mode)


def setup_argparse() -> argparse.ArgumentParser:
    """Set up command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="arquillian-scaffold",
        description="Set up Arquillian in a Maven project, create Arquillian tests and export deployments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  arquillian-scaffold setup --test-framework junit --container weld-ee-embedded-1.1
  arquillian-scaffold create-test --class com.acme.Widget --enableJPA
  arquillian-scaffold export --keepExporter
"""
    )

    parser.add_argument(
        "mode",
        choices=MODES,
        help="Mode of operation"
    )

    parser.add_argument(
        "--directory",
        default=".",
        help="Directory inside the Maven project (default: current directory)"
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Configuration file (default: {DEFAULT_CONFIG_FILE})"
    )

    # setup
    parser.add_argument(
        "--test-framework",
        dest="test_framework",
        default="junit",
        choices=['junit', 'testng'],
        help="Test framework to integrate with (setup, default: junit)"
    )
    parser.add_argument(
        "--container",
        choices=ArquillianContainer.ids(),
        help="Container adapter to install (setup)"
    )

    # create-test / export
    parser.add_argument(
        "--class",
        dest="class_ref",
        help="create-test: the class under test; export: the test class holding the @Deployment method "
             "(default: the test created last). Qualified name, simple name or path to a .java file"
    )
    parser.add_argument(
        "--enableJPA",
        dest="enable_jpa",
        action="store_true",
        help="Add META-INF/persistence.xml to the deployment (create-test)"
    )
    parser.add_argument(
        "--keepExporter",
        dest="keep_exporter",
        action="store_true",
        help="Keep the generated exporter class after the export (export)"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the generated test instead of writing it (create-test)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only show errors and results"
    )

    return parser


def validate_system_and_project(args, feedback: UserFeedback) -> Path:
    """Validate the interpreter and locate the Maven project root."""
    try:
        with feedback.status_spinner("Validating project structure"):
            SystemValidator.check_python_version()
            specified_dir = Validator.validate_directory(args.directory, must_be_writable=True)
            project_root = Validator.find_project_root(specified_dir)

        if feedback.verbose:
            feedback.status_table("Validation Results", [
                ("success", "Python Version", "Compatible (>= 3.8)"),
                ("success", "Target Directory", f"Valid directory: {specified_dir}"),
                ("success", "Project Root", f"Found pom.xml in {project_root}"),
            ])
        return project_root

    except (ValidationError, ProjectStructureError) as e:
        feedback.error(str(e.message), getattr(e, 'suggestion', None))
        sys.exit(1)


def resolve_config_path(config_arg: str, project_root: Path) -> str:
    """Relative config paths fall back to the project root when absent from the cwd."""
    path = Path(config_arg)
    if path.is_absolute() or path.exists():
        return str(path)
    return str(project_root / path)


def load_and_validate_config(args, project_root: Path, feedback: UserFeedback) -> Config:
    """Load and validate configuration with status display."""
    with feedback.status_spinner("Loading configuration"):
        try:
            config_path = resolve_config_path(args.config, project_root)
            Validator.validate_config_file(config_path)
            config = Config(config_path)
        except (ConfigurationError, ValidationError) as e:
            feedback.error(str(e.message), getattr(e, 'suggestion', None))
            sys.exit(1)

    if feedback.verbose:
        feedback.summary_panel("Configuration Loaded", {
            "Config File": config_path if os.path.exists(config_path) else "defaults",
            "Test Sources": config.get('project.test_source_dir'),
            "Maven": config.get('execution.maven'),
            "Exporter": f"{config.get('export.runner_package')}.{config.get('export.runner_class')}",
        }, "blue")
    return config


def validate_arguments(args):
    """Check mode-specific arguments argparse cannot express."""
    if args.mode == 'setup' and not args.container:
        raise ValidationError(
            "setup needs a container",
            suggestion=f"Pass --container with one of: {', '.join(ArquillianContainer.ids())}"
        )
    if args.mode == 'create-test':
        if not args.class_ref:
            raise ValidationError(
                "create-test needs a class under test",
                suggestion="Pass --class, e.g. --class com.acme.Widget"
            )
        Validator.validate_class_reference(args.class_ref)
    if args.mode == 'export' and args.class_ref:
        Validator.validate_class_reference(args.class_ref)


def handle_init_config_mode(args, feedback: UserFeedback):
    """Write a commented sample configuration file."""
    feedback.section_header("Configuration Initialization")

    config_file = args.config
    if os.path.exists(config_file):
        feedback.warning(f"Configuration file {config_file} already exists!")
        if not feedback.confirm("Do you want to overwrite it?", default=False):
            feedback.info("Configuration generation cancelled")
            return

    with feedback.status_spinner("Creating configuration file"):
        try:
            Config(None).create_sample_config(config_file)
        except OSError as e:
            feedback.error(f"Failed to create configuration file: {e}",
                           "Check file permissions and try again.")
            sys.exit(1)

    feedback.success(f"Sample configuration created at {config_file}")


def execute_mode_with_status(app: ArquillianScaffoldApp, args, feedback: UserFeedback) -> dict:
    """Run the requested mode and return the rows of the final summary."""
    if args.mode == 'status':
        feedback.result("Scaffold status", app.run_status())
        return {}

    if args.mode == 'setup':
        feedback.section_header("Arquillian Setup")
        result = app.run_setup(args.test_framework, args.container)
        if result.added:
            feedback.status_table("Dependencies", [
                ("added", coordinate.key, coordinate.version or "-") for coordinate in result.added
            ])
        else:
            feedback.info("All dependencies were already declared")
        return {
            "Arquillian": result.arquillian_version,
            "Test Framework": result.test_framework,
            "Container": result.container,
            "Added": len(result.added),
        }

    if args.mode == 'create-test':
        feedback.section_header("Create Test")
        result = app.run_create_test(args.class_ref, enable_jpa=args.enable_jpa, dry_run=args.dry_run)
        if args.dry_run:
            feedback.show_source(str(result.resource.path), result.source)
            if result.diff and feedback.verbose:
                feedback.debug("Changes against the file on disk", result.diff)
        return {
            "Test Class": result.template.qualified_name,
            "File": str(result.resource.path),
            "Written": "No (dry run)" if args.dry_run else ("Yes" if result.changed else "Unchanged"),
        }

    if args.mode == 'export':
        feedback.section_header("Export Deployment")
        result = app.run_export(keep_runner=args.keep_exporter, class_ref=args.class_ref)
        return {
            "Exporter": f"{result.state.value} ({'reused' if result.reused_runner else 'generated'})",
            "Archive": str(result.archive_path) if result.archive_path else "not reported",
        }

    raise ValidationError(f"Unknown mode: {args.mode}")


def main():
    """Main execution function."""
    feedback = None

    try:
        parser = setup_argparse()
        args = parser.parse_args()

        feedback = UserFeedback(verbose=args.verbose, quiet=args.quiet)
        configure_logging(verbose=args.verbose, quiet=args.quiet)
        show_welcome_banner(feedback, args.mode)

        # init-config does not need a project
        if args.mode == 'init-config':
            handle_init_config_mode(args, feedback)
            return

        validate_arguments(args)
        project_root = validate_system_and_project(args, feedback)
        config = load_and_validate_config(args, project_root, feedback)

        app = ArquillianScaffoldApp(project_root, config, feedback)
        summary = execute_mode_with_status(app, args, feedback)

        if summary:
            feedback.divider()
            feedback.summary_panel("Execution Summary", {"Mode": args.mode, "Project": str(project_root), **summary}, "green")

    except KeyboardInterrupt:
        if feedback:
            feedback.warning("Operation cancelled by user")
        else:
            print("\nOperation cancelled by user")
        sys.exit(130)

    except ArquillianScaffoldError as e:
        if feedback:
            feedback.error(e.message, e.suggestion)
            if feedback.verbose and e.__cause__ is not None:
                logger.error(f"Caused by: {e.__cause__!r}")
        else:
            print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        if feedback:
            feedback.error(f"Unexpected error: {e}",
                           "This appears to be a bug. Please report it with the details below.")
            if feedback.verbose:
                feedback.error("Full traceback:", details=traceback.format_exc())
        else:
            print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
