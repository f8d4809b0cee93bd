"""
Configuration Tree Module

Closed variant model for decoded configuration payloads. A tree is made of
Scalar, Sequence and Mapping nodes; walkers dispatch on these three classes
only, so no unchecked cast is ever needed.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

from .errors import TypeMismatch

ScalarValue = Union[str, int, float, bool, None]

SCALAR_TYPES = (str, int, float, bool, type(None))


@dataclass(frozen=True)
class Scalar:
    """Leaf value (string, number, boolean or null)"""
    value: ScalarValue


@dataclass(frozen=True)
class Sequence:
    """Ordered list of child nodes"""
    items: Tuple['ConfigTree', ...] = ()


@dataclass(frozen=True)
class Mapping:
    """String-keyed child nodes, kept in insertion order"""
    entries: Dict[str, 'ConfigTree'] = field(default_factory=dict)

    def keys(self):
        return self.entries.keys()

    def items(self):
        return self.entries.items()

    def get(self, key: str, default=None):
        return self.entries.get(key, default)

    def __contains__(self, key: str) -> bool:
        return key in self.entries

    def __getitem__(self, key: str) -> 'ConfigTree':
        return self.entries[key]

    def __len__(self) -> int:
        return len(self.entries)

    def with_entries(self, **extra: 'ConfigTree') -> 'Mapping':
        """Return a copy with extra entries set (existing keys are overwritten in place)"""
        entries = dict(self.entries)
        entries.update(extra)
        return Mapping(entries)


ConfigTree = Union[Scalar, Sequence, Mapping]


def from_plain(obj: Any) -> ConfigTree:
    """Convert decoded JSON (dict/list/scalars) into a ConfigTree

    Args:
        obj: Object produced by json.loads or yaml.safe_load

    Returns:
        Equivalent ConfigTree

    Raises:
        TypeMismatch: If obj contains a value that is not JSON-like
    """
    if isinstance(obj, dict):
        entries = {}
        for key, value in obj.items():
            if not isinstance(key, str):
                raise TypeMismatch(f"Mapping keys must be strings, got {type(key).__name__}: {key!r}")
            entries[key] = from_plain(value)
        return Mapping(entries)
    if isinstance(obj, (list, tuple)):
        return Sequence(tuple(from_plain(item) for item in obj))
    if isinstance(obj, SCALAR_TYPES):
        return Scalar(obj)
    raise TypeMismatch(f"Unsupported value type in configuration: {type(obj).__name__}")


def to_plain(tree: ConfigTree) -> Any:
    """Convert a ConfigTree back into dict/list/scalars for serialization"""
    if isinstance(tree, Mapping):
        return {key: to_plain(value) for key, value in tree.items()}
    if isinstance(tree, Sequence):
        return [to_plain(item) for item in tree.items]
    if isinstance(tree, Scalar):
        return tree.value
    raise TypeMismatch(f"Not a configuration tree node: {type(tree).__name__}")
