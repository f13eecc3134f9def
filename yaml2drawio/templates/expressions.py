#!/usr/bin/env python3
"""
Variable substitution for template strings.

Only a small action syntax is understood:

    {{.name}}                          variable lookup
    {{eq .a "x"}} {{ne .a 1}}          comparison
    {{and .a .b}} {{or .a .b}} {{not .a}}
    {{if <expr>}}...{{else}}...{{end}}
    {{- .name -}}                      trim surrounding whitespace

Arguments are variables, string literals (double quotes or backticks),
numbers, ``true``/``false`` or a parenthesised expression. Unknown
variables render as the empty string.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Tuple, Union

from yaml2drawio.errors import ExpressionError
from yaml2drawio.utils.values import is_number, to_text

# "{{- " and " -}}" trim the adjacent text; "{{-3}}" is the number -3
ACTION_RE = re.compile(r"\{\{(-\s)?\s*(.*?)\s*(\s-)?\}\}", re.DOTALL)
TRIM_CHARS = " \t\r\n"
TOKEN_RE = re.compile(r'\s*(\(|\)|"(?:[^"\\]|\\.)*"|`[^`]*`|[^\s()]+)')


def truthy(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if is_number(value):
        return value != 0
    if isinstance(value, (str, list, dict, tuple)):
        return len(value) > 0
    return True


FUNCTIONS: Dict[str, Tuple[int, Callable[..., Any]]] = {
    "eq": (2, lambda a, b: a == b),
    "ne": (2, lambda a, b: a != b),
    "and": (2, lambda a, b: truthy(a) and truthy(b)),
    "or": (2, lambda a, b: truthy(a) or truthy(b)),
    "not": (1, lambda a: not truthy(a)),
}


# ===============================================
# EXPRESSIONS
# ===============================================

@dataclass
class Literal:
    value: Any

    def evaluate(self, variables: Mapping[str, Any]) -> Any:
        return self.value


@dataclass
class Variable:
    name: str

    def evaluate(self, variables: Mapping[str, Any]) -> Any:
        return variables.get(self.name)


@dataclass
class Call:
    function: str
    args: List["Expr"]

    def evaluate(self, variables: Mapping[str, Any]) -> Any:
        _, fn = FUNCTIONS[self.function]
        return fn(*(arg.evaluate(variables) for arg in self.args))


Expr = Union[Literal, Variable, Call]


class ExpressionParser:
    def __init__(self, source: str) -> None:
        self.source = source
        self.tokens = self._tokenize(source)
        self.pos = 0

    def _tokenize(self, source: str) -> List[str]:
        tokens: List[str] = []
        pos = 0
        while pos < len(source):
            if source[pos:].strip() == "":
                break
            match = TOKEN_RE.match(source, pos)
            if match is None:
                raise ExpressionError(source, f"unexpected input at offset {pos}")
            tokens.append(match.group(1))
            pos = match.end()
        return tokens

    def _peek(self) -> str:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else ""

    def _next(self) -> str:
        token = self._peek()
        if not token:
            raise ExpressionError(self.source, "unexpected end of expression")
        self.pos += 1
        return token

    def parse(self) -> Expr:
        if not self.tokens:
            raise ExpressionError(self.source, "empty action")
        expr = self._command()
        if self.pos != len(self.tokens):
            raise ExpressionError(self.source, f"unexpected {self._peek()!r}")
        return expr

    def _command(self) -> Expr:
        head = self._peek()
        if head in FUNCTIONS:
            self.pos += 1
            arity, _ = FUNCTIONS[head]
            args = [self._operand() for _ in range(arity)]
            return Call(head, args)
        return self._operand()

    def _operand(self) -> Expr:
        token = self._next()
        if token == "(":
            expr = self._command()
            if self._next() != ")":
                raise ExpressionError(self.source, "missing ')'")
            return expr
        if token == ")":
            raise ExpressionError(self.source, "unexpected ')'")
        if token in FUNCTIONS:
            raise ExpressionError(self.source, f"{token} must be parenthesised when used as an argument")
        if token.startswith("."):
            return Variable(token[1:])
        if token.startswith('"'):
            return Literal(re.sub(r"\\(.)", r"\1", token[1:-1]))
        if token.startswith("`"):
            return Literal(token[1:-1])
        if token == "true":
            return Literal(True)
        if token == "false":
            return Literal(False)
        try:
            return Literal(int(token))
        except ValueError:
            pass
        try:
            return Literal(float(token))
        except ValueError:
            raise ExpressionError(self.source, f"unknown token {token!r}") from None


# ===============================================
# TEMPLATE BODY
# ===============================================

@dataclass
class IfNode:
    condition: Expr
    then: List[Any] = field(default_factory=list)
    otherwise: List[Any] = field(default_factory=list)


def _parse_body(template: str) -> List[Any]:
    """Text pieces, expressions and IfNodes in document order."""
    root: List[Any] = []
    # stack of (node, active branch)
    stack: List[Tuple[IfNode, List[Any]]] = []
    pos = 0

    def current() -> List[Any]:
        return stack[-1][1] if stack else root

    for match in ACTION_RE.finditer(template):
        text = template[pos:match.start()]
        if match.group(1):
            text = text.rstrip(TRIM_CHARS)
        if text:
            current().append(text)
        pos = match.end()
        if match.group(3):
            while pos < len(template) and template[pos] in TRIM_CHARS:
                pos += 1
        action = match.group(2).strip()

        if action.startswith("if ") or action == "if":
            node = IfNode(condition=ExpressionParser(action[2:]).parse())
            current().append(node)
            stack.append((node, node.then))
        elif action == "else":
            if not stack:
                raise ExpressionError(template, "{{else}} without {{if}}")
            node, _ = stack[-1]
            stack[-1] = (node, node.otherwise)
        elif action == "end":
            if not stack:
                raise ExpressionError(template, "{{end}} without {{if}}")
            stack.pop()
        else:
            current().append(ExpressionParser(action).parse())

    if stack:
        raise ExpressionError(template, "unclosed {{if}}")
    if pos < len(template):
        root.append(template[pos:])
    return root


def _render_nodes(nodes: List[Any], variables: Mapping[str, Any], out: List[str]) -> None:
    for node in nodes:
        if isinstance(node, str):
            out.append(node)
        elif isinstance(node, IfNode):
            branch = node.then if truthy(node.condition.evaluate(variables)) else node.otherwise
            _render_nodes(branch, variables, out)
        else:
            out.append(to_text(node.evaluate(variables)))


def render(template: str, variables: Mapping[str, Any]) -> str:
    if "{{" not in template:
        return template
    out: List[str] = []
    _render_nodes(_parse_body(template), variables, out)
    return "".join(out)


__all__ = ["render", "truthy", "ExpressionParser"]
