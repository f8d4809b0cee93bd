"""
Tests for tree module
"""
import pytest

from config_generator.errors import TypeMismatch
from config_generator.tree import Mapping, Scalar, Sequence, from_plain, to_plain


class TestFromPlain:
    """Test conversion of decoded JSON into tree nodes"""

    def test_variants(self):
        """Test dicts, lists and scalars map to the three node types"""
        tree = from_plain({'a': [1, {'b': None}], 'c': 'd'})

        assert tree == Mapping({
            'a': Sequence((Scalar(1), Mapping({'b': Scalar(None)}))),
            'c': Scalar('d'),
        })

    def test_round_trip(self):
        """Test to_plain undoes from_plain"""
        config = {'deployment': {'replicas': 2, 'labels': {'app': 'web'}, 'ports': [80, 443]}}

        assert to_plain(from_plain(config)) == config

    def test_non_string_key_raises(self):
        """Test mapping keys must be strings"""
        with pytest.raises(TypeMismatch, match='keys must be strings'):
            from_plain({1: 'a'})

    def test_unsupported_value_raises(self):
        """Test values outside the JSON data model raise"""
        with pytest.raises(TypeMismatch, match='Unsupported value type'):
            from_plain({'a': object()})


class TestMapping:
    """Test Mapping helpers"""

    def test_with_entries_overwrites_in_place(self):
        """Test existing keys keep their position when overwritten"""
        mapping = Mapping({'kind': Scalar('Pod'), 'spec': Mapping()})
        updated = mapping.with_entries(kind=Scalar('Deployment'), apiVersion=Scalar('apps/v1'))

        assert list(updated.keys()) == ['kind', 'spec', 'apiVersion']
        assert updated['kind'] == Scalar('Deployment')
        assert mapping['kind'] == Scalar('Pod')

    def test_container_protocol(self):
        """Test membership, lookup and length"""
        mapping = Mapping({'a': Scalar(1)})

        assert 'a' in mapping
        assert mapping.get('b') is None
        assert len(mapping) == 1


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
