from pathlib import Path

from arquillian_scaffold.models.data_models import (
    ClassReference,
    DependencyCoordinate,
    JavaResource,
    Parameter,
    SourceTemplate,
    Visibility,
)


class TestSourceTemplate:
    """Test the SourceTemplate builder."""

    def test_qualified_name_and_relative_path(self):
        template = SourceTemplate(package="com.acme.shop", name="CartTest")

        assert template.qualified_name == "com.acme.shop.CartTest"
        assert template.relative_path == Path("com/acme/shop/CartTest.java")

    def test_default_package(self):
        template = SourceTemplate(package="", name="CartTest")

        assert template.qualified_name == "CartTest"
        assert template.relative_path == Path("CartTest.java")

    def test_add_import_keeps_order_and_ignores_duplicates(self):
        """Test imports are deduplicated in insertion order."""
        # Arrange
        template = SourceTemplate(package="p", name="A")

        # Act
        template.add_import("b.B").add_import("a.A").add_import("b.B")

        # Assert
        assert template.imports == ["b.B", "a.A"]

    def test_add_field_and_method_return_members(self):
        # Arrange
        template = SourceTemplate(package="p", name="A")

        # Act
        member = template.add_field("Cart", "cart").add_annotation("Inject")
        method = template.add_method(
            "main", is_static=True, parameters=[Parameter("String[]", "args")]
        ).add_annotation("Deprecated")

        # Assert
        assert member.visibility == Visibility.PRIVATE
        assert member.annotations[0].name == "Inject"
        assert method.is_static
        assert method.return_type is None
        assert template.get_method("main") is method
        assert template.get_method("missing") is None

    def test_set_super_type(self):
        template = SourceTemplate(package="p", name="A").set_super_type("Arquillian")

        assert template.super_type == "Arquillian"

    def test_visibility_setters(self):
        template = SourceTemplate(package="p", name="A", visibility=Visibility.PACKAGE)

        assert template.set_private().visibility == Visibility.PRIVATE
        assert template.set_public().visibility == Visibility.PUBLIC


class TestClassReference:
    """Test ClassReference parsing."""

    def test_parse_qualified_name(self):
        ref = ClassReference.parse("com.acme.Widget")

        assert ref.package == "com.acme"
        assert ref.name == "Widget"
        assert ref.qualified_name == "com.acme.Widget"

    def test_parse_simple_name(self):
        ref = ClassReference.parse("Widget")

        assert ref.package == ""
        assert ref.qualified_name == "Widget"


class TestJavaResource:
    """Test JavaResource file operations."""

    def test_delete_existing_and_missing_file(self, tmp_path):
        # Arrange
        path = tmp_path / "Widget.java"
        path.write_text("class Widget {}")
        resource = JavaResource(path, "com.acme", "Widget")

        # Act / Assert
        assert resource.exists()
        assert resource.read() == "class Widget {}"
        assert resource.delete() is True
        assert resource.delete() is False
        assert resource.reference == ClassReference("com.acme", "Widget")


class TestDependencyCoordinate:
    """Test DependencyCoordinate helpers."""

    def test_key_ignores_version_and_scope(self):
        coordinate = DependencyCoordinate("junit", "junit", "4.8.2", "test")

        assert coordinate.key == "junit:junit"
        assert str(coordinate) == "junit:junit:4.8.2"

    def test_with_version_keeps_scope(self):
        coordinate = DependencyCoordinate("junit", "junit", scope="test").with_version("4.8.2")

        assert coordinate.version == "4.8.2"
        assert coordinate.scope == "test"
        assert str(DependencyCoordinate("junit", "junit")) == "junit:junit"
