"""Extraction of polygon vertices from the path elements of simple SVG files."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator

from marioworld.geometry import Point2f

logger = logging.getLogger(__name__)

_COMMANDS = frozenset("mMZzLlHhVvCcSsQqTtAa")

_PATH_LEXEME = re.compile(
    r"(?P<number>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
    r"|(?P<command>[A-Za-z])"
    r"|(?P<separator>[\s,]+)"
    r"|(?P<other>.)",
    re.DOTALL,
)


class SvgError(ValueError):
    """Raised for SVG content that is malformed or not supported."""


class _PathLexer:
    """Command letters and numbers of SVG path data, with one item of look-ahead."""

    def __init__(self, path_data: str) -> None:
        self._items: list[str | float] = []
        for match in _PATH_LEXEME.finditer(path_data):
            if match.lastgroup == "number":
                self._items.append(float(match.group()))
            elif match.lastgroup == "command":
                self._items.append(match.group())
            elif match.lastgroup == "other":
                raise SvgError(f"unexpected character {match.group()!r} in path data")
        self._pos = 0

    def exhausted(self) -> bool:
        return self._pos >= len(self._items)

    def peek(self) -> str | float:
        return self._items[self._pos]

    def advance(self) -> None:
        self._pos += 1

    def number(self) -> float:
        if self.exhausted() or isinstance(self.peek(), str):
            raise SvgError("expected a coordinate in path data")
        value = self.peek()
        self.advance()
        return value  # type: ignore[return-value]

    def point(self) -> Point2f:
        x = self.number()
        y = self.number()
        return Point2f(x, y)


def remove_spaces(svg_text: str) -> str:
    """Drop spaces around '=' and just inside '<' and '>'."""
    for spaced, tight in ((" =", "="), ("= ", "="), (" >", ">"), ("< ", "<")):
        while spaced in svg_text:
            svg_text = svg_text.replace(spaced, tight)
    return svg_text


def element_contents(svg_text: str, element_name: str) -> Iterator[str]:
    """Yield the text inside each element with the given name.

    Both ``<name> content <name/>`` and ``<name content />`` are recognised.
    """
    open_tag = "<" + element_name
    close_tag = "<" + element_name + "/>"
    pos = 0
    while (start := svg_text.find(open_tag, pos)) != -1:
        start += len(open_tag)
        if svg_text.startswith(">", start):
            start += 1
            end = svg_text.find(close_tag, start)
            if end == -1:
                return
            yield svg_text[start:end]
            pos = end + len(close_tag)
        else:
            end = svg_text.find("/>", start)
            if end == -1:
                return
            yield svg_text[start:end]
            pos = start


def attribute_value(svg_text: str, attribute_name: str) -> str | None:
    """The double-quoted value of the first ``name=`` attribute, or None."""
    attribute_pos = svg_text.find(attribute_name + "=")
    if attribute_pos == -1:
        return None
    opening = svg_text.find('"', attribute_pos)
    if opening == -1:
        return None
    closing = svg_text.find('"', opening + 1)
    if closing == -1:
        return None
    return svg_text[opening + 1 : closing]


def vertices_from_path_data(path_data: str) -> list[Point2f]:
    """Vertices of path data made of move, line, horizontal, vertical and close commands.

    Lower-case commands are relative to the current point. Coordinates that
    follow a move or line command without a new letter repeat it as a line.
    """
    lexer = _PathLexer(path_data)
    vertices: list[Point2f] = []
    cursor = Point2f()
    command: str | None = None
    is_open = True

    while not lexer.exhausted():
        item = lexer.peek()
        new_command = isinstance(item, str)
        if new_command:
            lexer.advance()
            command = item  # type: ignore[assignment]
        elif command is None:
            raise SvgError("path data must start with a command")

        relative = command.islower()
        if command not in _COMMANDS:
            raise SvgError(f"{command} is not a supported SVG command")

        if command in "Zz":
            if not new_command:
                raise SvgError("unexpected coordinate after a close-path command")
            is_open = True
        elif command in "Mm" and is_open:
            point = lexer.point()
            if relative:
                point = Point2f(cursor.x + point.x, cursor.y + point.y)
            cursor = point
            vertices.append(Point2f(point.x, point.y))
            is_open = False
        elif command in "MmLl":
            if is_open:
                logger.warning("line command before a move command in path data")
            point = lexer.point()
            if relative:
                point = Point2f(cursor.x + point.x, cursor.y + point.y)
            cursor = point
            vertices.append(Point2f(point.x, point.y))
        elif command in "Hh":
            if is_open:
                logger.warning("horizontal line before a move command in path data")
            value = lexer.number()
            cursor = Point2f(cursor.x + value if relative else value, cursor.y)
            vertices.append(Point2f(cursor.x, cursor.y))
        elif command in "Vv":
            if is_open:
                logger.warning("vertical line before a move command in path data")
            value = lexer.number()
            cursor = Point2f(cursor.x, cursor.y + value if relative else value)
            vertices.append(Point2f(cursor.x, cursor.y))
        elif command in "Cc":
            raise SvgError(
                "beziers are not supported; convert curves to line segments first"
            )
        else:
            raise SvgError(f"{command} is not a supported SVG command")

    return vertices


def vertices_from_svg_string(svg_text: str) -> list[list[Point2f]]:
    """One vertex list for each path element, in SVG coordinates."""
    polygons: list[list[Point2f]] = []
    for content in element_contents(svg_text, "path"):
        path_data = attribute_value(content, " d")
        if path_data is None:
            raise SvgError("path element doesn't contain a d-attribute")
        vertices = vertices_from_path_data(path_data)
        if not vertices:
            raise SvgError("no vertices found in the path element")
        polygons.append(vertices)
    if not polygons:
        raise SvgError("no path element(s) found")
    return polygons


def _view_box_height(svg_text: str) -> float:
    value = attribute_value(svg_text, "viewBox")
    if value is None:
        raise SvgError("no viewbox information found")
    fields = [field for field in re.split(r"[\s,]+", value.strip()) if field]
    if len(fields) < 4:
        raise SvgError(f"malformed viewbox {value!r}")
    try:
        return float(fields[3])
    except ValueError as exc:
        raise SvgError(f"malformed viewbox {value!r}") from exc


def vertices_from_svg_file(path: str | os.PathLike[str]) -> list[list[Point2f]]:
    """Polygons of an SVG file with y flipped so that the origin is at the bottom left."""
    try:
        with open(path, encoding="utf-8") as stream:
            svg_text = "".join(line.rstrip("\r\n") for line in stream)
    except OSError as exc:
        raise SvgError(f"failed to load vertices from file {path}") from exc

    svg_text = remove_spaces(svg_text)
    try:
        polygons = vertices_from_svg_string(svg_text)
        height = _view_box_height(svg_text)
    except SvgError as exc:
        raise SvgError(f"{exc} in file {path}") from exc

    return [[Point2f(p.x, height - p.y) for p in polygon] for polygon in polygons]