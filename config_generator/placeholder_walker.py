"""
Placeholder Walker Module

Replaces every leaf of a resource configuration with a Helm value reference.
The reference path is the dotted chain of mapping keys leading to the leaf,
so '{{.Values.deployment.spec.replicas}}' points at the same value in
values.yaml that the caller supplied under deployment.spec.replicas.

Arrays are transparent: mapping elements of a list are walked with the list's
own path, without the index. Two containers in one list therefore share the
same placeholder paths. Scalars and nested lists inside a list are kept as-is.
"""

import threading
from typing import Dict, Optional, Tuple

from .constants import PLACEHOLDER_FORMAT
from .errors import GenerationCancelled, TypeMismatch
from .tree import ConfigTree, Mapping, Scalar, Sequence

PATH_SEPARATOR = '.'


def make_placeholder(resource_key: str, path: str) -> str:
    """Build the Helm value reference for a dotted path

    Args:
        resource_key: Top-level key of the resource (e.g. 'deployment')
        path: Dotted path of the leaf below the resource key

    Returns:
        Placeholder string such as '{{.Values.deployment.spec.replicas}}'
    """
    return PLACEHOLDER_FORMAT.format(resource_key=resource_key, path=path)


def walk(node: ConfigTree, path_prefix: str, resource_key: str,
         accumulator: Dict[str, str],
         cancel_event: Optional[threading.Event] = None) -> ConfigTree:
    """Return a templated copy of node

    Args:
        node: Tree to walk
        path_prefix: Dotted path of node's ancestors, ending with the separator
            ('' at the resource root)
        resource_key: Resource key used as the first placeholder segment
        accumulator: Receives leaf key -> placeholder for every templated leaf
        cancel_event: Optional event; when set the walk stops

    Returns:
        New tree of the same shape with leaves replaced by placeholders

    Raises:
        GenerationCancelled: If cancel_event is set during the walk
        TypeMismatch: If node is not a ConfigTree node
    """
    _check_cancelled(cancel_event)

    if isinstance(node, Mapping):
        return Mapping({
            key: _walk_entry(key, value, path_prefix, resource_key, accumulator, cancel_event)
            for key, value in node.items()
        })

    if isinstance(node, Sequence):
        return Sequence(tuple(
            walk(item, path_prefix, resource_key, accumulator, cancel_event)
            if isinstance(item, Mapping) else item
            for item in node.items
        ))

    if isinstance(node, Scalar):
        path = path_prefix[:-len(PATH_SEPARATOR)] if path_prefix.endswith(PATH_SEPARATOR) else path_prefix
        leaf_key = path.rpartition(PATH_SEPARATOR)[2]
        return _template_leaf(leaf_key, path, resource_key, accumulator)

    raise TypeMismatch(f"Unexpected node while templating '{resource_key}': {type(node).__name__}")


def template_resource(value: ConfigTree, resource_key: str,
                      cancel_event: Optional[threading.Event] = None) -> Tuple[Mapping, Dict[str, str]]:
    """Template the configuration of one resource

    Args:
        value: Sub-tree found under the resource key
        resource_key: Resource key as it appears in the configuration

    Returns:
        Tuple of (templated mapping, leaf key -> placeholder accumulator)

    Raises:
        TypeMismatch: If value is not a mapping
    """
    if not isinstance(value, Mapping):
        raise TypeMismatch(
            f"Configuration for '{resource_key}' must be an object, got {type(value).__name__.lower()}"
        )

    accumulator: Dict[str, str] = {}
    templated = walk(value, '', resource_key, accumulator, cancel_event)
    return templated, accumulator


def _walk_entry(key: str, value: ConfigTree, path_prefix: str, resource_key: str,
                accumulator: Dict[str, str], cancel_event: Optional[threading.Event]) -> ConfigTree:
    if isinstance(value, Scalar):
        return _template_leaf(key, path_prefix + key, resource_key, accumulator)
    return walk(value, path_prefix + key + PATH_SEPARATOR, resource_key, accumulator, cancel_event)


def _template_leaf(leaf_key: str, path: str, resource_key: str, accumulator: Dict[str, str]) -> Scalar:
    placeholder = make_placeholder(resource_key, path)
    # last write wins when the same leaf key appears under several paths
    accumulator[leaf_key] = placeholder
    return Scalar(placeholder)


def _check_cancelled(cancel_event: Optional[threading.Event]):
    if cancel_event is not None and cancel_event.is_set():
        raise GenerationCancelled("Generation cancelled before templating finished")
