"""Render a SourceTemplate into Java source text."""

from typing import List

from arquillian_scaffold.generation.statements import INDENT, render_block
from arquillian_scaffold.models.data_models import Annotation, Field, Method, SourceTemplate, Visibility


def render_annotation(annotation: Annotation) -> str:
    if annotation.literal_value is None:
        return f"@{annotation.name}"
    return f"@{annotation.name}({annotation.literal_value})"


def _modifiers(visibility: Visibility, is_static: bool) -> str:
    words = [visibility.value] if visibility.value else []
    if is_static:
        words.append("static")
    return " ".join(words)


def _declaration(modifiers: str, rest: str) -> str:
    return f"{modifiers} {rest}" if modifiers else rest


def _render_field(member: Field) -> List[str]:
    lines = [f"{INDENT}{render_annotation(a)}" for a in member.annotations]
    modifiers = _modifiers(member.visibility, member.is_static)
    lines.append(f"{INDENT}{_declaration(modifiers, f'{member.type} {member.name}')};")
    return lines


def _render_method(method: Method) -> List[str]:
    lines = [f"{INDENT}{render_annotation(a)}" for a in method.annotations]
    modifiers = _modifiers(method.visibility, method.is_static)
    return_type = method.return_type or "void"
    parameters = ", ".join(f"{p.type} {p.name}" for p in method.parameters)
    signature = _declaration(modifiers, f"{return_type} {method.name}({parameters})")
    lines.append(f"{INDENT}{signature} {{")
    lines.extend(render_block(method.body, 2))
    lines.append(f"{INDENT}}}")
    return lines


def render_source(template: SourceTemplate) -> str:
    """Return the Java compilation unit for ``template``."""
    lines: List[str] = []
    if template.package:
        lines.append(f"package {template.package};")
        lines.append("")

    if template.imports:
        lines.extend(f"import {name};" for name in template.imports)
        lines.append("")

    lines.extend(render_annotation(a) for a in template.annotations)
    header = _declaration(_modifiers(template.visibility, template.is_static), f"class {template.name}")
    if template.super_type:
        header += f" extends {template.super_type}"
    lines.append(f"{header} {{")

    members: List[List[str]] = [_render_field(f) for f in template.fields]
    members.extend(_render_method(m) for m in template.methods)
    for member in members:
        lines.append("")
        lines.extend(member)

    lines.append("}")
    return "\n".join(lines) + "\n"
