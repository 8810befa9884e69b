"""
Token Tree Serialization to S-Expressions
==========================================

Renders token trees and collected states as S-expressions for debugging
and for readable test expectations::

    dumps(tokenize("2018Y3ML1K1IN"))
    # (date (year 2018) (month 3) (selection (selection (day_of_week 1) (instance 1))))

Uses structured sexpr (nested lists + sexpdata.Symbol), then pretty-prints
for readable output.
"""

from typing import Any, List

import sexpdata

from .token_visitor import TokenVisitor


def _sym(s: str) -> sexpdata.Symbol:
    return sexpdata.Symbol(s)


def _pretty_dumps(sexpr: Any, indent: int = 0, indent_str: str = "  ", max_line: int = 100) -> str:
    """
    Pretty-print structured sexpr. Keeps short forms on one line; breaks only when needed.
    """
    if sexpr is None:
        return "()"
    if isinstance(sexpr, bool):
        return "true" if sexpr else "false"
    if isinstance(sexpr, int):
        return str(sexpr)
    # Check Symbol before str (sexpdata.Symbol subclasses str)
    if isinstance(sexpr, sexpdata.Symbol):
        return str(sexpr)
    if isinstance(sexpr, str):
        escaped = sexpr.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(sexpr, sexpdata.Brackets):
        inner = " ".join(_pretty_dumps(e, indent + 1, indent_str, max_line) for e in sexpr.I)
        return f"[{inner}]"
    if isinstance(sexpr, list):
        if not sexpr:
            return "()"
        parts = [_pretty_dumps(e, indent + 1, indent_str, max_line) for e in sexpr]
        one_line = "(" + " ".join(parts) + ")"
        if len(one_line) <= max_line and "\n" not in one_line:
            return one_line
        prefix = indent_str * indent
        next_prefix = indent_str * (indent + 1)
        rest = "\n".join(next_prefix + p for p in parts[1:])
        inner = parts[0] + ("\n" + rest if rest else "")
        return f"({inner}\n{prefix})"
    return str(sexpr)


class SexprSerializer(TokenVisitor[Any]):
    """
    Token tree to structured S-expression.

    Nodes become ``(kind ...)`` lists, unit pairs ``(unit value)``,
    ``{...}`` sets ``(all ...)``, ``[...]`` sets ``(one ...)`` and masks
    ``(mask d d X)``.
    """

    def serialize(self, value: Any) -> Any:
        """Any token, unit value, unit list or collected state"""
        if value is None:
            return [_sym("nil")]
        if isinstance(value, str):
            return _sym(value)
        if isinstance(value, list):
            return [self.serialize(item) for item in value]
        if isinstance(value, tuple):
            if len(value) == 2 and isinstance(value[0], str):
                return [_sym(value[0]), self.serialize(value[1])]
            return [self.serialize(item) for item in value]
        return self.visit_value(value)

    def _units(self, kind: str, units) -> List[Any]:
        return [_sym(kind)] + [[_sym(unit), self.serialize(value)] for unit, value in units]

    def visit_integer(self, value: int) -> Any:
        return value

    def visit_range(self, node) -> Any:
        if node.is_open:
            return [_sym("range"), node.first, node.last, _sym("open")]
        if node.step != 1:
            return [_sym("range"), node.first, node.last, node.step]
        return [_sym("range"), node.first, node.last]

    def visit_all_of(self, node) -> Any:
        return [_sym("all")] + [self.serialize(m) for m in node.members]

    def visit_one_of(self, node) -> Any:
        return [_sym("one")] + [self.serialize(m) for m in node.members]

    def visit_mask(self, node) -> Any:
        if node.all_unknown:
            return [_sym("mask"), _sym("*")]
        return [_sym("mask")] + [self.serialize(d) for d in node.digits]

    def visit_recurrence(self, node) -> Any:
        return [_sym("repeat"), _sym("infinite") if node.infinite else node.count]

    def visit_time_shift(self, node) -> Any:
        return self._units("shift", node.units)

    def visit_selection(self, node) -> Any:
        return self._units("selection", node.units)

    def visit_group(self, node) -> Any:
        return [_sym("group"), self.serialize(node.count)] + self._units("duration", node.units)[1:]

    def visit_date(self, node) -> Any:
        return self._units("date", node.units)

    def visit_time_of_day(self, node) -> Any:
        return self._units("time", node.units)

    def visit_datetime(self, node) -> Any:
        return self._units("datetime", node.units)

    def visit_duration(self, node) -> Any:
        kind = "-duration" if node.negative else "duration"
        return self._units(kind, node.units)

    def visit_interval(self, node) -> Any:
        out = [_sym("interval")]
        if node.recurrence is not None:
            out.append(self.serialize(node.recurrence))
        out.extend([self.serialize(node.start), self.serialize(node.end)])
        return out


def to_sexpr(value: Any) -> Any:
    """Structured sexpr (nested lists and symbols) for ``value``"""
    return SexprSerializer().serialize(value)


def dumps(value: Any, pretty: bool = True) -> str:
    """
    Serialize a token tree, unit list or collected state to an
    S-expression string (pretty-printed by default).
    """
    sexpr = to_sexpr(value)
    if pretty:
        return _pretty_dumps(sexpr)
    return sexpdata.dumps(sexpr)


def loads(text: str) -> Any:
    """Parse a dumped S-expression back to nested lists and symbols"""
    return sexpdata.loads(text)
