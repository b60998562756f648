"""Structured Java expression and statement nodes.

Method bodies are built from these nodes instead of concatenated strings, so
a generated body is a plain value that can be compared, inspected in tests and
rendered deterministically. String literals are escaped at render time.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

INDENT = "    "

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def escape_java_string(value: str) -> str:
    """Escape a Python string for use inside a Java string literal."""
    return "".join(_ESCAPES.get(ch, ch) for ch in value)


class Expression:
    """Base class for expression nodes."""

    def render(self) -> str:
        raise NotImplementedError

    def call(self, method: str, *args: "Expression") -> "Call":
        """Chain a method invocation on this expression."""
        return Call(self, method, tuple(args))

    def field(self, name: str) -> "FieldAccess":
        return FieldAccess(self, name)


class Statement:
    """Base class for statement nodes."""

    def render(self, depth: int = 0) -> List[str]:
        raise NotImplementedError


@dataclass(frozen=True)
class Name(Expression):
    identifier: str

    def render(self) -> str:
        return self.identifier


NULL = Name("null")


@dataclass(frozen=True)
class StringLiteral(Expression):
    value: str

    def render(self) -> str:
        return f'"{escape_java_string(self.value)}"'


@dataclass(frozen=True)
class IntLiteral(Expression):
    value: int

    def render(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BooleanLiteral(Expression):
    value: bool

    def render(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class ClassLiteral(Expression):
    type_name: str

    def render(self) -> str:
        return f"{self.type_name}.class"


@dataclass(frozen=True)
class FieldAccess(Expression):
    target: Expression
    name: str

    def render(self) -> str:
        return f"{self.target.render()}.{self.name}"


@dataclass(frozen=True)
class Call(Expression):
    """Method invocation; ``target`` of None means an unqualified call."""

    target: Optional[Expression]
    method: str
    args: Tuple[Expression, ...] = ()

    def render(self) -> str:
        arguments = ", ".join(arg.render() for arg in self.args)
        if self.target is None:
            return f"{self.method}({arguments})"
        return f"{self.target.render()}.{self.method}({arguments})"


@dataclass(frozen=True)
class New(Expression):
    type_name: str
    args: Tuple[Expression, ...] = ()

    def render(self) -> str:
        arguments = ", ".join(arg.render() for arg in self.args)
        return f"new {self.type_name}({arguments})"


@dataclass(frozen=True)
class Cast(Expression):
    type_name: str
    expression: Expression

    def render(self) -> str:
        return f"({self.type_name}) {self.expression.render()}"


@dataclass(frozen=True)
class Index(Expression):
    target: Expression
    index: Expression

    def render(self) -> str:
        return f"{self.target.render()}[{self.index.render()}]"


@dataclass(frozen=True)
class BinaryOperation(Expression):
    left: Expression
    operator: str
    right: Expression

    def render(self) -> str:
        return f"{self.left.render()} {self.operator} {self.right.render()}"


def _indent(depth: int) -> str:
    return INDENT * depth


def render_block(statements: Tuple[Statement, ...], depth: int) -> List[str]:
    lines: List[str] = []
    for statement in statements:
        lines.extend(statement.render(depth))
    return lines


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    expression: Expression

    def render(self, depth: int = 0) -> List[str]:
        return [f"{_indent(depth)}{self.expression.render()};"]


@dataclass(frozen=True)
class Return(Statement):
    expression: Optional[Expression] = None

    def render(self, depth: int = 0) -> List[str]:
        if self.expression is None:
            return [f"{_indent(depth)}return;"]
        return [f"{_indent(depth)}return {self.expression.render()};"]


@dataclass(frozen=True)
class LocalVariable(Statement):
    type_name: str
    name: str
    initializer: Optional[Expression] = None

    def render(self, depth: int = 0) -> List[str]:
        if self.initializer is None:
            return [f"{_indent(depth)}{self.type_name} {self.name};"]
        return [f"{_indent(depth)}{self.type_name} {self.name} = {self.initializer.render()};"]


@dataclass(frozen=True)
class Assign(Statement):
    name: str
    expression: Expression

    def render(self, depth: int = 0) -> List[str]:
        return [f"{_indent(depth)}{self.name} = {self.expression.render()};"]


@dataclass(frozen=True)
class Break(Statement):

    def render(self, depth: int = 0) -> List[str]:
        return [f"{_indent(depth)}break;"]


@dataclass(frozen=True)
class Throw(Statement):
    expression: Expression

    def render(self, depth: int = 0) -> List[str]:
        return [f"{_indent(depth)}throw {self.expression.render()};"]


@dataclass(frozen=True)
class If(Statement):
    condition: Expression
    then: Tuple[Statement, ...]
    otherwise: Tuple[Statement, ...] = ()

    def render(self, depth: int = 0) -> List[str]:
        pad = _indent(depth)
        lines = [f"{pad}if ({self.condition.render()}) {{"]
        lines.extend(render_block(self.then, depth + 1))
        if self.otherwise:
            lines.append(f"{pad}}} else {{")
            lines.extend(render_block(self.otherwise, depth + 1))
        lines.append(f"{pad}}}")
        return lines


@dataclass(frozen=True)
class ForEach(Statement):
    type_name: str
    name: str
    iterable: Expression
    body: Tuple[Statement, ...]

    def render(self, depth: int = 0) -> List[str]:
        pad = _indent(depth)
        lines = [f"{pad}for ({self.type_name} {self.name} : {self.iterable.render()}) {{"]
        lines.extend(render_block(self.body, depth + 1))
        lines.append(f"{pad}}}")
        return lines


@dataclass(frozen=True)
class TryCatch(Statement):
    body: Tuple[Statement, ...]
    exception_type: str
    exception_name: str
    handler: Tuple[Statement, ...]

    def render(self, depth: int = 0) -> List[str]:
        pad = _indent(depth)
        lines = [f"{pad}try {{"]
        lines.extend(render_block(self.body, depth + 1))
        lines.append(f"{pad}}} catch ({self.exception_type} {self.exception_name}) {{")
        lines.extend(render_block(self.handler, depth + 1))
        lines.append(f"{pad}}}")
        return lines
