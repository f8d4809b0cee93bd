"""
YAML Serializer Module

Renders configuration trees as YAML text with key order preserved.
"""

from typing import Any, Optional

import yaml

from .errors import SerializationError, TypeMismatch
from .tree import ConfigTree, to_plain


# Custom YAML representer to handle dict in order
class OrderedDumper(yaml.SafeDumper):
    """YAML dumper that preserves dictionary order"""
    pass


def dict_representer(dumper, data):
    """Represent dict as ordered mapping"""
    return dumper.represent_mapping(
        yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG,
        data.items()
    )


# Register the representer
OrderedDumper.add_representer(dict, dict_representer)


def generate_header(chart_name: str) -> str:
    """Generate header comment for values.yaml.

    Args:
        chart_name: Name of the Helm chart

    Returns:
        Header comment string
    """
    return f"""# Default values for {chart_name}
# This is a YAML-formatted file.
# Declare variables to be passed into your templates.

# NOTE: This file was auto-generated from the submitted configuration.
# Templates under templates/ reference these keys as .Values.<resource>.<path>

"""


def dump_plain(data: Any) -> str:
    """Dump plain Python data (dict/list/scalars) to YAML text

    Raises:
        SerializationError: If PyYAML cannot represent the data
    """
    try:
        # Use very large width so placeholders are never folded across lines
        return yaml.dump(data, Dumper=OrderedDumper,
                         default_flow_style=False,
                         sort_keys=False,
                         width=float('inf'),
                         allow_unicode=True)
    except yaml.YAMLError as e:
        raise SerializationError(f"Failed to convert configuration to YAML: {e}") from e


def dump_yaml(tree: ConfigTree, header: Optional[str] = None) -> str:
    """Serialize a configuration tree to YAML text

    Args:
        tree: Tree to serialize
        header: Optional comment block written before the document

    Returns:
        YAML text

    Raises:
        SerializationError: If the tree cannot be represented as YAML
    """
    try:
        data = to_plain(tree)
    except TypeMismatch as e:
        raise SerializationError(str(e)) from e
    content = dump_plain(data)
    return f"{header}{content}" if header else content
