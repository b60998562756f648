"""Synthesize the runner class that exports a @Deployment archive to disk.

The runner is compiled and executed inside the target project, where the
test classes are on the classpath. It resolves the class named by its first
argument, finds the public method annotated with ``@Deployment``, invokes it
statically and zips the returned archive into the working directory.
"""

import logging

from arquillian_scaffold.generation.statements import (
    NULL,
    Assign,
    BinaryOperation,
    BooleanLiteral,
    Break,
    Cast,
    ClassLiteral,
    ExpressionStatement,
    ForEach,
    If,
    Index,
    IntLiteral,
    LocalVariable,
    Name,
    New,
    StringLiteral,
    Throw,
    TryCatch,
)
from arquillian_scaffold.models.data_models import Parameter, SourceTemplate

logger = logging.getLogger(__name__)

RUNNER_PACKAGE = "forge.arquillian"
RUNNER_CLASS = "DeploymentExporter"
EXPORT_MARKER = "Exported deployment to: "

RUNNER_IMPORTS = (
    "org.jboss.arquillian.api.Deployment",
    "org.jboss.shrinkwrap.api.Archive",
    "org.jboss.shrinkwrap.api.exporter.ZipExporter",
    "java.io.File",
    "java.lang.reflect.Method",
)


class RunnerScaffoldSynthesizer:
    """Build the fixed-shape DeploymentExporter SourceTemplate.

    Args:
        fail_on_error: when True the runner exits with status 1 after printing
            a failure; when False it only prints it and exits normally.
    """

    def __init__(self, fail_on_error: bool = True,
                 package: str = RUNNER_PACKAGE, name: str = RUNNER_CLASS):
        self.fail_on_error = fail_on_error
        self.package = package
        self.name = name

    def synthesize(self) -> SourceTemplate:
        runner = SourceTemplate(package=self.package, name=self.name).set_public()
        runner.add_method(
            "main",
            is_static=True,
            parameters=[Parameter("String[]", "args")],
            body=(self._main_body(),),
        )
        for name in RUNNER_IMPORTS:
            runner.add_import(name)
        logger.debug(f"Synthesized runner {runner.qualified_name} (fail_on_error={self.fail_on_error})")
        return runner

    def _main_body(self) -> TryCatch:
        test_class = Name("testClass")
        deployment_method = Name("deploymentMethod")
        archive = Name("archive")
        target = Name("target")

        lookup = ForEach(
            "Method", "method", test_class.call("getMethods"),
            (
                If(
                    BinaryOperation(Name("method").call("getAnnotation", ClassLiteral("Deployment")), "!=", NULL),
                    (Assign("deploymentMethod", Name("method")), Break()),
                ),
            ),
        )
        missing = If(
            BinaryOperation(deployment_method, "==", NULL),
            (
                Throw(New("IllegalStateException", (
                    BinaryOperation(StringLiteral("No @Deployment method found on "), "+",
                                    test_class.call("getName")),
                ))),
            ),
        )

        body = (
            LocalVariable("Class<?>", "testClass",
                          Name("Class").call("forName", Index(Name("args"), IntLiteral(0)))),
            LocalVariable("Method", "deploymentMethod", NULL),
            lookup,
            missing,
            LocalVariable("Archive<?>", "archive",
                          Cast("Archive<?>", deployment_method.call("invoke", NULL))),
            LocalVariable("File", "target", New("File", (archive.call("getName"),))),
            ExpressionStatement(
                archive.call("as", ClassLiteral("ZipExporter")).call("exportTo", target, BooleanLiteral(True))
            ),
            ExpressionStatement(
                Name("System").field("out").call(
                    "println",
                    BinaryOperation(StringLiteral(EXPORT_MARKER), "+", target.call("getAbsolutePath")),
                )
            ),
        )

        handler = [ExpressionStatement(Name("ex").call("printStackTrace"))]
        if self.fail_on_error:
            handler.append(ExpressionStatement(Name("System").call("exit", IntLiteral(1))))

        return TryCatch(body, "Exception", "ex", tuple(handler))
