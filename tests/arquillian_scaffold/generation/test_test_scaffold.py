import pytest

from arquillian_scaffold.generation.renderer import render_source
from arquillian_scaffold.generation.test_scaffold import (
    DEPLOYMENT_METHOD,
    JUNIT_IMPORTS,
    JUNIT_RUNNER_IMPORT,
    RUNNER_TYPE,
    TEST_METHOD,
    TESTNG_IMPORTS,
    TESTNG_RUNNER_IMPORT,
    TestScaffoldSynthesizer,
)
from arquillian_scaffold.models.data_models import ClassReference, ProjectFacts, Visibility

WIDGET = ClassReference("com.acme", "Widget")
JUNIT_FACTS = ProjectFacts(junit=True, testng=False, cdi=False)
TESTNG_FACTS = ProjectFacts(junit=False, testng=True, cdi=False)


def deployment_line(template):
    method = template.get_method(DEPLOYMENT_METHOD)
    return "\n".join(line for statement in method.body for line in statement.render())


class TestTestClassShape:
    """Test the structure of the synthesized test class."""

    @pytest.mark.parametrize("package,name", [("com.acme", "Widget"), ("", "Cart"), ("a.b.c", "X1")])
    def test_named_after_class_under_test(self, package, name):
        template = TestScaffoldSynthesizer(JUNIT_FACTS).synthesize(ClassReference(package, name))

        assert template.name == f"{name}Test"
        assert template.package == package
        assert template.visibility == Visibility.PUBLIC

    def test_single_injected_field(self):
        """Test exactly one private field typed as the class under test, named in lower case."""
        # Act
        template = TestScaffoldSynthesizer(JUNIT_FACTS).synthesize(ClassReference("com.acme", "ShoppingCart"))

        # Assert
        assert len(template.fields) == 1
        member = template.fields[0]
        assert member.type == "ShoppingCart"
        assert member.name == "shoppingcart"
        assert member.visibility == Visibility.PRIVATE
        assert [a.name for a in member.annotations] == ["Inject"]

    def test_deployment_method(self):
        template = TestScaffoldSynthesizer(JUNIT_FACTS).synthesize(WIDGET)

        method = template.get_method(DEPLOYMENT_METHOD)
        assert method.is_static
        assert method.visibility == Visibility.PUBLIC
        assert method.return_type == "JavaArchive"
        assert [a.name for a in method.annotations] == ["Deployment"]

    def test_is_deployed_method(self):
        template = TestScaffoldSynthesizer(JUNIT_FACTS).synthesize(WIDGET)

        method = template.get_method(TEST_METHOD)
        assert not method.is_static
        assert [a.name for a in method.annotations] == ["Test"]
        assert method.body[0].render() == ["Assert.assertNotNull(widget);"]

    def test_run_with_is_always_present(self):
        for facts in (JUNIT_FACTS, TESTNG_FACTS):
            template = TestScaffoldSynthesizer(facts).synthesize(WIDGET)

            assert template.annotations[0].name == "RunWith"
            assert template.annotations[0].literal_value == f"{RUNNER_TYPE}.class"

    def test_super_type_depends_on_framework(self):
        """Test JUnit and TestNG make opposite choices about the super type."""
        junit = TestScaffoldSynthesizer(JUNIT_FACTS).synthesize(WIDGET)
        testng = TestScaffoldSynthesizer(TESTNG_FACTS).synthesize(WIDGET)

        assert junit.super_type is None
        assert testng.super_type == RUNNER_TYPE


class TestDeploymentBody:
    """Test the conditional stanzas of createDeployment."""

    @pytest.mark.parametrize("cdi", [False, True])
    @pytest.mark.parametrize("jpa", [False, True])
    def test_stanzas_are_independent(self, cdi, jpa):
        """Test beans.xml follows CDI support and persistence.xml follows the JPA flag."""
        # Arrange
        synthesizer = TestScaffoldSynthesizer(ProjectFacts(junit=True, cdi=cdi))

        # Act
        line = deployment_line(synthesizer.synthesize(WIDGET, enable_jpa=jpa))

        # Assert
        assert ("EmptyAsset.INSTANCE, ArchivePaths.create(\"beans.xml\")" in line) == cdi
        assert ("addAsManifestResource(\"persistence.xml\", ArchivePaths.create(\"persistence.xml\"))" in line) == jpa

    def test_full_body_with_both_stanzas(self):
        synthesizer = TestScaffoldSynthesizer(ProjectFacts(junit=True, cdi=True), archive_name="widget.jar")

        line = deployment_line(synthesizer.synthesize(WIDGET, enable_jpa=True))

        assert line == (
            'return ShrinkWrap.create(JavaArchive.class, "widget.jar").addClass(Widget.class)'
            '.addAsManifestResource(EmptyAsset.INSTANCE, ArchivePaths.create("beans.xml"))'
            '.addAsManifestResource("persistence.xml", ArchivePaths.create("persistence.xml"));'
        )


class TestImports:
    """Test framework-specific imports."""

    def test_junit_imports(self):
        template = TestScaffoldSynthesizer(JUNIT_FACTS).synthesize(WIDGET)

        assert JUNIT_RUNNER_IMPORT in template.imports
        assert all(name in template.imports for name in JUNIT_IMPORTS)
        assert not any(name in template.imports for name in TESTNG_IMPORTS)

    def test_testng_imports_only_its_test_annotation(self):
        template = TestScaffoldSynthesizer(TESTNG_FACTS).synthesize(WIDGET)

        assert TESTNG_RUNNER_IMPORT in template.imports
        assert "org.testng.annotations.Test" in template.imports
        assert not any(name in template.imports for name in JUNIT_IMPORTS)

    def test_imports_are_unique(self):
        template = TestScaffoldSynthesizer(JUNIT_FACTS).synthesize(WIDGET)

        assert len(template.imports) == len(set(template.imports))


class TestScenarios:
    """End-to-end checks on rendered sources."""

    def test_junit_project_without_jpa_or_cdi(self):
        """Test com.acme.Widget in a plain JUnit project."""
        # Act
        template = TestScaffoldSynthesizer(JUNIT_FACTS).synthesize(WIDGET)
        source = render_source(template)

        # Assert
        assert template.qualified_name == "com.acme.WidgetTest"
        assert "@RunWith(Arquillian.class)\npublic class WidgetTest {" in source
        assert "persistence.xml" not in source
        assert "beans.xml" not in source
        assert "extends" not in source

    def test_testng_project(self):
        template = TestScaffoldSynthesizer(TESTNG_FACTS).synthesize(WIDGET)
        source = render_source(template)

        assert "public class WidgetTest extends Arquillian {" in source
        assert "import org.junit" not in source

    def test_synthesis_is_deterministic(self):
        """Test equal inputs render identical sources."""
        facts = ProjectFacts(junit=True, cdi=True)

        first = render_source(TestScaffoldSynthesizer(facts).synthesize(WIDGET, enable_jpa=True))
        second = render_source(TestScaffoldSynthesizer(facts).synthesize(WIDGET, enable_jpa=True))

        assert first == second
