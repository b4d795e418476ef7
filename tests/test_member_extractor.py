"""
Tests for member extraction from ESTree-shaped component nodes.
"""

import pytest

from sort_comp.models import MemberKind
from sort_comp.shared.member_extractor import (
    extract_members, get_property_name, members_for_validation,
)


def identifier(name):
    return {'type': 'Identifier', 'name': name}


def line(number):
    return {'start': {'line': number}}


class TestObjectExpressions:
    """createReactClass({...}) objects."""

    def setup_method(self):
        self.node = {
            'type': 'ObjectExpression',
            'properties': [
                {'type': 'Property', 'key': identifier('displayName'),
                 'value': {'type': 'Literal', 'value': 'Hello'}, 'loc': line(2)},
                {'type': 'ExperimentalSpreadProperty', 'argument': identifier('proto'), 'loc': line(3)},
                {'type': 'Property', 'key': identifier('onClick'),
                 'value': {'type': 'ArrowFunctionExpression'}, 'loc': line(4)},
                {'type': 'Property', 'key': identifier('render'), 'method': True,
                 'value': {'type': 'FunctionExpression'}, 'loc': line(5)},
            ],
        }

    def test_members_in_declaration_order(self):
        members = extract_members(self.node)
        assert [m.kind for m in members] == [
            MemberKind.PROPERTY, MemberKind.SPREAD, MemberKind.METHOD, MemberKind.METHOD,
        ]
        assert [m.position for m in members] == [0, 1, 2, 3]
        assert [m.line_number for m in members] == [2, 3, 4, 5]

    def test_spreads_dropped_for_validation(self):
        members = members_for_validation(self.node)
        assert [m.name for m in members] == ['displayName', 'onClick', 'render']
        assert [m.position for m in members] == [0, 1, 2]


class TestClassBodies:
    """React.Component class bodies."""

    def test_class_members(self):
        node = {
            'type': 'ClassDeclaration',
            'id': identifier('Hello'),
            'body': {
                'type': 'ClassBody',
                'body': [
                    {'type': 'ClassProperty', 'key': identifier('props'),
                     'typeAnnotation': {'type': 'TypeAnnotation'}, 'value': None},
                    {'type': 'PropertyDefinition', 'key': identifier('state'),
                     'typeAnnotation': {'type': 'TypeAnnotation'}, 'value': {'type': 'ObjectExpression'}},
                    {'type': 'ClassProperty', 'key': identifier('displayName'), 'static': True,
                     'value': {'type': 'Literal', 'value': 'Hello'}},
                    {'type': 'MethodDefinition', 'key': identifier('create'), 'static': True,
                     'kind': 'method'},
                    {'type': 'MethodDefinition', 'key': identifier('render'), 'kind': 'method'},
                ],
            },
        }
        members = members_for_validation(node)
        assert [(m.name, m.kind, m.is_static) for m in members] == [
            ('props', MemberKind.TYPE_ANNOTATION_PROPERTY, False),
            ('state', MemberKind.PROPERTY, False),
            ('displayName', MemberKind.PROPERTY, True),
            ('create', MemberKind.METHOD, True),
            ('render', MemberKind.METHOD, False),
        ]

    def test_unsupported_node(self):
        with pytest.raises(ValueError):
            extract_members({'type': 'FunctionDeclaration'})


class TestPropertyNames:
    """Key resolution, including computed keys."""

    def test_identifier_key(self):
        assert get_property_name({'key': identifier('render')}) == 'render'

    def test_literal_keys(self):
        assert get_property_name({'key': {'type': 'Literal', 'value': 'display-name'}}) == 'display-name'
        assert get_property_name({'key': {'type': 'NumericLiteral', 'value': 1}}) == '1'

    def test_computed_literal_key_keeps_name(self):
        node = {'key': {'type': 'Literal', 'value': 'render'}, 'computed': True}
        assert get_property_name(node) == 'render'

    def test_computed_expression_key_is_unknown(self):
        node = {'key': identifier('handlerName'), 'computed': True}
        assert get_property_name(node) is None

    def test_private_key(self):
        assert get_property_name({'key': {'type': 'PrivateIdentifier', 'name': 'cache'}}) == '#cache'

    def test_missing_key(self):
        assert get_property_name({}) is None
