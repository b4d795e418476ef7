#!/usr/bin/env python3
"""
Shared JavaScript/TypeScript component parsing utilities.

This module finds React component definitions (createReactClass object
literals and React.Component classes) in source files and describes their
members as ESTree-shaped nodes, so that the member extractor can consume
them exactly like the output of a full JavaScript parser.
"""

import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..models import ComponentInfo


ANONYMOUS_COMPONENT = "<anonymous>"

# Characters that leave an expression unfinished at the end of a line
_CONTINUATION_END = set('=,.([{:?|&+-*/%!~<')
# Characters that continue the previous line's expression
_CONTINUATION_START = set('.=([{?:|&+-*/%,)]}>')

# Tokens after which a `/` starts a regex literal
_REGEX_PRECEDERS = set('(,=:[!&|?{};')
_REGEX_KEYWORDS = {'return', 'typeof', 'case', 'in', 'of', 'void', 'delete', 'throw', 'new',
                   'else', 'do', 'yield', 'await'}

_MODIFIERS = r'(?:static|async|get|set|public|private|protected|readonly|abstract|override|declare|accessor)'
_KEY = r'(?:[\w$]+|\#[\w$]+|\'[^\'\n]*\'|"[^"\n]*"|\[[^\]]*\])'


class ComponentParser:
    """
    Lightweight React component parser for code analysis.

    Works on a masked copy of the source where comments and string contents
    are blanked out, so that braces and keywords inside them are never
    mistaken for code. Offsets in the masked copy match the original.
    """

    def __init__(self):
        self.create_class_pattern = re.compile(
            r'\b(?:[\w$]+\s*\.\s*)?(?:createReactClass|createClass)\s*\(\s*\{'
        )
        self.component_class_pattern = re.compile(
            r'\bclass\s+([\w$]+)?\s*(?:<[^>{]*>\s*)?extends\s+(?:React\s*\.\s*)?(?:Pure)?Component\b'
        )
        self.assignment_pattern = re.compile(r'([\w$]+)\s*[=:]\s*$')

        self.class_member_pattern = re.compile(
            r'^(?P<decorators>(?:@[\w$.]+\s*(?:\([^)]*\))?\s*)*)'
            r'(?P<modifiers>(?:' + _MODIFIERS + r'\s+)*)'
            r'(?P<generator>\*\s*)?'
            r'(?P<key>' + _KEY + r')'
            r'\s*[?!]?\s*'
            r'(?P<rest>[\s\S]*)$'
        )
        self.object_member_pattern = re.compile(
            r'^(?P<modifiers>(?:(?:async|get|set)\s+)*)'
            r'(?P<generator>\*\s*)?'
            r'(?P<key>' + _KEY + r')'
            r'\s*(?P<rest>[\s\S]*)$'
        )
        self.decorators_only_pattern = re.compile(r'^(?:@[\w$.]+\s*(?:\([^)]*\))?\s*)+$')
        self.arrow_function_pattern = re.compile(
            r'^(?:async\s*)?(?:\([^)]*\)|[\w$]+)\s*(?::[^=]*)?=>'
        )

    def find_components(self, content: str, file_path: Path) -> List[ComponentInfo]:
        """Find every component definition in the file content, in source order."""
        masked = mask_non_code(content)
        components = []

        for match in self.create_class_pattern.finditer(masked):
            open_brace = match.end() - 1
            close_brace = find_matching_brace(masked, open_brace)
            if close_brace is None:
                continue
            name = self._find_assigned_name(masked, match.start())
            skipped_lines: List[int] = []
            node = self.parse_object_body(content, masked, open_brace, close_brace, skipped_lines)
            components.append(ComponentInfo(
                name=name,
                kind='object',
                file_path=file_path,
                line_number=line_number_at(content, match.start()),
                node=node,
                skipped_lines=skipped_lines,
            ))

        for match in self.component_class_pattern.finditer(masked):
            open_brace = find_class_body(masked, match.end())
            if open_brace is None:
                continue
            close_brace = find_matching_brace(masked, open_brace)
            if close_brace is None:
                continue
            name = match.group(1) or self._find_assigned_name(masked, match.start())
            skipped_lines = []
            node = self.parse_class_body(content, masked, open_brace, close_brace, skipped_lines)
            components.append(ComponentInfo(
                name=name,
                kind='class',
                file_path=file_path,
                line_number=line_number_at(content, match.start()),
                node=node,
                skipped_lines=skipped_lines,
            ))

        components.sort(key=lambda c: c.line_number)
        return components

    def _find_assigned_name(self, masked: str, start: int) -> str:
        """Get the variable a component is assigned to, e.g. `var Hello = createReactClass(`."""
        line_start = masked.rfind('\n', 0, start) + 1
        name_match = self.assignment_pattern.search(masked[line_start:start])
        return name_match.group(1) if name_match else ANONYMOUS_COMPONENT

    # ------------------------------------------------------------------
    # Object literals
    # ------------------------------------------------------------------

    def parse_object_body(self, content: str, masked: str, open_brace: int, close_brace: int,
                          skipped_lines: Optional[List[int]] = None) -> Dict:
        """
        Describe a createReactClass object literal as an ObjectExpression node.

        Lines of members that cannot be parsed are appended to ``skipped_lines``.
        """
        properties = []
        for start, end in split_top_level(masked, open_brace + 1, close_brace, ','):
            node = self._parse_object_member(content, masked, start, end)
            if node:
                properties.append(node)
            elif skipped_lines is not None:
                skipped_lines.append(line_number_at(content, start))
        return {
            'type': 'ObjectExpression',
            'properties': properties,
            'loc': _loc(content, open_brace),
        }

    def _parse_object_member(self, content: str, masked: str, start: int, end: int) -> Optional[Dict]:
        segment = masked[start:end]
        if segment.startswith('...'):
            return {'type': 'SpreadElement', 'loc': _loc(content, start)}

        match = self.object_member_pattern.match(segment)
        if not match:
            return None

        key, computed = self._parse_key(content, start + match.start('key'), start + match.end('key'))
        rest = match.group('rest').strip()
        modifiers = match.group('modifiers').split()
        accessor = next((m for m in modifiers if m in ('get', 'set')), None)

        node = {
            'type': 'Property',
            'key': key,
            'computed': computed,
            'method': False,
            'shorthand': False,
            'kind': accessor or 'init',
            'value': None,
            'loc': _loc(content, start),
        }
        if rest.startswith('(') or rest.startswith('<'):
            node['method'] = accessor is None
            node['value'] = {'type': 'FunctionExpression'}
        elif rest.startswith(':'):
            node['value'] = {'type': self._expression_type(rest[1:].strip())}
        elif not rest:
            node['shorthand'] = True
            node['value'] = {'type': 'Identifier'}
        else:
            return None
        return node

    # ------------------------------------------------------------------
    # Class bodies
    # ------------------------------------------------------------------

    def parse_class_body(self, content: str, masked: str, open_brace: int, close_brace: int,
                         skipped_lines: Optional[List[int]] = None) -> Dict:
        """Describe a component class body as a ClassBody node."""
        body = []
        for start, end in self._split_class_members(masked, open_brace + 1, close_brace):
            node = self._parse_class_member(content, masked, start, end)
            if node:
                body.append(node)
            elif skipped_lines is not None:
                skipped_lines.append(line_number_at(content, start))
        return {
            'type': 'ClassBody',
            'body': body,
            'loc': _loc(content, open_brace),
        }

    def _split_class_members(self, masked: str, start: int, end: int) -> List[Tuple[int, int]]:
        """
        Split a class body into member spans.

        A member ends at a top-level semicolon, at the closing brace of a
        method body, or at a line break when neither side of the break
        continues the expression.
        """
        spans = []
        depth = 0
        segment_start = None
        i = start

        while i < end:
            char = masked[i]

            if segment_start is None:
                if char.isspace() or char == ';':
                    i += 1
                    continue
                segment_start = i

            if char in '([{':
                depth += 1
            elif char in ')]}':
                depth -= 1
                if depth == 0 and char == '}' and self._looks_like_method(masked[segment_start:i + 1]):
                    spans.append((segment_start, i + 1))
                    segment_start = None
            elif depth == 0 and char == ';':
                spans.append((segment_start, i))
                segment_start = None
            elif depth == 0 and char == '\n':
                if self._ends_member_at_newline(masked, segment_start, i, end):
                    spans.append((segment_start, i))
                    segment_start = None
            i += 1

        if segment_start is not None and masked[segment_start:end].strip():
            spans.append((segment_start, end))
        return spans

    def _ends_member_at_newline(self, masked: str, segment_start: int, newline: int, end: int) -> bool:
        segment = masked[segment_start:newline].rstrip()
        if not segment or self.decorators_only_pattern.match(segment):
            return False
        if segment.endswith('=>') or segment[-1] in _CONTINUATION_END:
            return False

        next_index = newline + 1
        while next_index < end and masked[next_index].isspace():
            next_index += 1
        if next_index >= end:
            return True
        return masked[next_index] not in _CONTINUATION_START

    def _looks_like_method(self, segment: str) -> bool:
        match = self.class_member_pattern.match(segment)
        if not match:
            return False
        rest = match.group('rest').lstrip()
        return rest.startswith('(') or rest.startswith('<')

    def _parse_class_member(self, content: str, masked: str, start: int, end: int) -> Optional[Dict]:
        segment = masked[start:end]
        match = self.class_member_pattern.match(segment)
        if not match:
            return None

        modifiers = match.group('modifiers').split()
        key, computed = self._parse_key(content, start + match.start('key'), start + match.end('key'))
        rest = match.group('rest').strip()
        line_offset = start + match.start('modifiers')

        if rest.startswith('(') or rest.startswith('<'):
            kind = 'method'
            if 'get' in modifiers:
                kind = 'get'
            elif 'set' in modifiers:
                kind = 'set'
            elif key.get('name') == 'constructor' and not computed:
                kind = 'constructor'
            return {
                'type': 'MethodDefinition',
                'kind': kind,
                'static': 'static' in modifiers,
                'computed': computed,
                'key': key,
                'loc': _loc(content, line_offset),
            }

        type_annotation = None
        value = None
        if rest.startswith(':'):
            type_annotation = {'type': 'TypeAnnotation'}
            value_start = _find_initializer(rest)
            if value_start is not None:
                value = {'type': self._expression_type(rest[value_start + 1:].strip())}
        elif rest.startswith('='):
            value = {'type': self._expression_type(rest[1:].strip())}
        elif rest:
            return None

        return {
            'type': 'ClassProperty',
            'static': 'static' in modifiers,
            'computed': computed,
            'key': key,
            'typeAnnotation': type_annotation,
            'value': value,
            'loc': _loc(content, line_offset),
        }

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _parse_key(self, content: str, start: int, end: int) -> Tuple[Dict, bool]:
        """Build a key node from the original (unmasked) key text."""
        raw = content[start:end]
        computed = raw.startswith('[')
        if computed:
            raw = raw[1:-1].strip()

        if len(raw) >= 2 and raw[0] in '\'"' and raw[-1] == raw[0]:
            return {'type': 'Literal', 'value': raw[1:-1]}, computed
        if re.match(r'^\d+(?:\.\d+)?$', raw):
            return {'type': 'Literal', 'value': raw}, computed
        if raw.startswith('#'):
            return {'type': 'PrivateIdentifier', 'name': raw[1:]}, computed
        return {'type': 'Identifier', 'name': raw}, computed

    def _expression_type(self, expression: str) -> str:
        if re.match(r'^(?:async\s+)?function\b', expression):
            return 'FunctionExpression'
        if self.arrow_function_pattern.match(expression):
            return 'ArrowFunctionExpression'
        return 'Expression'


def mask_non_code(content: str) -> str:
    """
    Blank out comments and the contents of string, template and regex literals.

    Quote characters, slashes and line breaks are kept so that offsets and
    line numbers stay aligned with the original content. A quoted string ends
    at the end of its line, which keeps a stray apostrophe in JSX text from
    masking the rest of the file. A `/` only opens a regex literal where an
    operand is expected, and `/>` always closes a JSX tag.
    """
    result = list(content)
    length = len(content)
    i = 0

    while i < length:
        char = content[i]
        nxt = content[i + 1] if i + 1 < length else ''

        if char == '/' and nxt == '/':
            while i < length and content[i] != '\n':
                result[i] = ' '
                i += 1
            continue

        if char == '/' and nxt == '*':
            close = content.find('*/', i + 2)
            stop = length if close == -1 else close + 2
            _blank(result, content, i, stop)
            i = stop
            continue

        if char in '\'"`':
            quote = char
            j = i + 1
            while j < length:
                current = content[j]
                if current == '\\':
                    j += 2
                    continue
                if current == quote:
                    break
                if current == '\n' and quote != '`':
                    break
                j += 1
            stop = min(j, length)
            _blank(result, content, i + 1, stop)
            i = stop + 1
            continue

        if char == '/' and nxt != '>' and _expects_operand(result, i):
            close = _regex_literal_end(content, i)
            if close is not None:
                _blank(result, content, i + 1, close)
                i = close + 1
                continue

        i += 1

    return ''.join(result)


def _expects_operand(masked: List[str], index: int) -> bool:
    """Whether a `/` at ``index`` starts a regex literal rather than a division."""
    j = index - 1
    while j >= 0 and masked[j] in ' \t\r':
        j -= 1
    if j < 0 or masked[j] == '\n':
        return True

    prev = masked[j]
    if prev in _REGEX_PRECEDERS:
        return True
    if prev == '>':
        return j > 0 and masked[j - 1] == '='
    if prev.isalnum() or prev in '_$':
        word_end = j + 1
        while j >= 0 and (masked[j].isalnum() or masked[j] in '_$'):
            j -= 1
        return ''.join(masked[j + 1:word_end]) in _REGEX_KEYWORDS
    return False


def _regex_literal_end(content: str, start: int) -> Optional[int]:
    """Index of the `/` closing the regex literal opened at ``start``, if any."""
    in_class = False
    j = start + 1
    while j < len(content):
        char = content[j]
        if char == '\\':
            j += 2
            continue
        if char == '\n':
            return None
        if in_class:
            if char == ']':
                in_class = False
        elif char == '[':
            in_class = True
        elif char == '/':
            return j if j > start + 1 else None
        j += 1
    return None


def find_class_body(masked: str, start: int) -> Optional[int]:
    """
    Find the brace opening a class body after its superclass.

    Type arguments such as ``Component<{ name: string }, {}>`` are skipped.
    A `;` before any body brace means there is no body.
    """
    depth = 0
    for i in range(start, len(masked)):
        char = masked[i]
        if char == '<':
            depth += 1
        elif char == '>' and depth > 0 and masked[i - 1] != '=':
            depth -= 1
        elif depth == 0 and char == '{':
            return i
        elif depth == 0 and char == ';':
            return None
    return None


def find_matching_brace(masked: str, open_brace: int) -> Optional[int]:
    """Find the index of the brace closing the one at ``open_brace``."""
    depth = 0
    for i in range(open_brace, len(masked)):
        char = masked[i]
        if char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
            if depth == 0:
                return i
    return None


def split_top_level(masked: str, start: int, end: int, separator: str) -> List[Tuple[int, int]]:
    """Split ``masked[start:end]`` on separators outside any brackets, trimming whitespace."""
    spans = []
    depth = 0
    segment_start = start

    for i in range(start, end):
        char = masked[i]
        if char in '([{':
            depth += 1
        elif char in ')]}':
            depth -= 1
        elif char == separator and depth == 0:
            spans.append((segment_start, i))
            segment_start = i + 1
    spans.append((segment_start, end))

    trimmed = []
    for span_start, span_end in spans:
        while span_start < span_end and masked[span_start].isspace():
            span_start += 1
        while span_end > span_start and masked[span_end - 1].isspace():
            span_end -= 1
        if span_start < span_end:
            trimmed.append((span_start, span_end))
    return trimmed


def line_number_at(content: str, offset: int) -> int:
    return content.count('\n', 0, offset) + 1


def _find_initializer(rest: str) -> Optional[int]:
    """Find the `=` starting a property initializer after its type annotation."""
    depth = 0
    for i, char in enumerate(rest):
        if char in '([{<':
            depth += 1
        elif char in ')]}>':
            if char == '>' and i > 0 and rest[i - 1] == '=':
                continue
            depth -= 1
        elif char == '=' and depth == 0:
            nxt = rest[i + 1] if i + 1 < len(rest) else ''
            if nxt not in '=>':
                return i
    return None


def _blank(result: List[str], content: str, start: int, stop: int) -> None:
    for k in range(start, stop):
        if content[k] != '\n':
            result[k] = ' '


def _loc(content: str, offset: int) -> Dict:
    return {'start': {'line': line_number_at(content, offset)}}
