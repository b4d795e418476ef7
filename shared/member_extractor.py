#!/usr/bin/env python3
"""
Member extraction from component syntax trees.

Converts an ESTree-shaped component definition (an object literal passed to
createReactClass, or a class body) into ordered member descriptors.
"""

from typing import Dict, List, Optional

from ..models import MemberDescriptor, MemberKind


SPREAD_NODE_TYPES = {'SpreadElement', 'ExperimentalSpreadProperty', 'SpreadProperty', 'RestElement'}
CLASS_PROPERTY_TYPES = {'ClassProperty', 'PropertyDefinition', 'ClassPrivateProperty'}
FUNCTION_VALUE_TYPES = {'FunctionExpression', 'ArrowFunctionExpression'}
LITERAL_KEY_TYPES = {'Literal', 'StringLiteral', 'NumericLiteral'}


def extract_members(component_node: Dict) -> List[MemberDescriptor]:
    """
    Extract every member of a component definition in declaration order.

    Spread elements are included with kind SPREAD; use
    ``members_for_validation`` to get the sequence the validator expects.
    """
    member_nodes = _member_nodes(component_node)
    members = []
    for position, node in enumerate(member_nodes):
        members.append(_describe_member(node, position))
    return members


def members_for_validation(component_node: Dict) -> List[MemberDescriptor]:
    """Extract members without spreads, positions renumbered contiguously."""
    members = []
    for member in extract_members(component_node):
        if member.kind == MemberKind.SPREAD:
            continue
        members.append(MemberDescriptor(
            name=member.name,
            position=len(members),
            kind=member.kind,
            is_static=member.is_static,
            line_number=member.line_number,
        ))
    return members


def get_property_name(node: Dict) -> Optional[str]:
    """Get the declared name of a member node, or None if it is computed."""
    key = node.get('key')
    if not key:
        return None

    key_type = key.get('type')
    if key_type in LITERAL_KEY_TYPES:
        value = key.get('value')
        return str(value) if value is not None else None
    if node.get('computed'):
        return None
    if key_type == 'Identifier':
        return key.get('name')
    if key_type == 'PrivateIdentifier' or key_type == 'PrivateName':
        inner = key.get('id', key)
        return f"#{inner.get('name')}"
    return None


def _member_nodes(component_node: Dict) -> List[Dict]:
    node_type = component_node.get('type')
    if node_type == 'ObjectExpression':
        return list(component_node.get('properties', []))
    if node_type in ('ClassDeclaration', 'ClassExpression'):
        return _member_nodes(component_node.get('body', {}))
    if node_type == 'ClassBody':
        return list(component_node.get('body', []))
    raise ValueError(f"Unsupported component node type: {node_type!r}")


def _describe_member(node: Dict, position: int) -> MemberDescriptor:
    line_number = _line_number(node)
    node_type = node.get('type')

    if node_type in SPREAD_NODE_TYPES:
        return MemberDescriptor(
            name=None, position=position, kind=MemberKind.SPREAD, line_number=line_number,
        )

    return MemberDescriptor(
        name=get_property_name(node),
        position=position,
        kind=_member_kind(node),
        is_static=bool(node.get('static', False)),
        line_number=line_number,
    )


def _member_kind(node: Dict) -> MemberKind:
    node_type = node.get('type')
    if node_type in ('MethodDefinition', 'ClassMethod', 'ClassPrivateMethod', 'ObjectMethod'):
        return MemberKind.METHOD
    if node_type in CLASS_PROPERTY_TYPES:
        # Flow/TypeScript declarations such as `props: Props;`
        if node.get('typeAnnotation') and node.get('value') is None:
            return MemberKind.TYPE_ANNOTATION_PROPERTY
        return MemberKind.PROPERTY
    if node.get('method') or (node.get('value') or {}).get('type') in FUNCTION_VALUE_TYPES:
        return MemberKind.METHOD
    return MemberKind.PROPERTY


def _line_number(node: Dict) -> Optional[int]:
    loc = node.get('loc') or {}
    start = loc.get('start') or {}
    return start.get('line')
