"""
Tests for classifier module
"""
import pytest

from config_generator.classifier import ResourceDescriptor, ResourceKind, classify


class TestClassify:
    """Test resource classification of top-level keys"""

    @pytest.mark.parametrize('key, api_version, kind', [
        ('deployment', 'apps/v1', 'Deployment'),
        ('service', 'v1', 'Service'),
        ('ingress', 'networking.k8s.io/v1', 'Ingress'),
    ])
    def test_known_resources(self, key, api_version, kind):
        """Test the three fixed resources"""
        descriptor = classify(key)

        assert descriptor == ResourceDescriptor(key, api_version, kind)

    @pytest.mark.parametrize('key', ['Deployment', 'DEPLOYMENT', 'dEpLoYmEnT'])
    def test_case_insensitive(self, key):
        """Test mixed-case keys classify like the lower-case name"""
        assert classify(key) == classify('deployment')

    @pytest.mark.parametrize('key', ['unknownthing', 'deployments', 'configmap', '', ' service'])
    def test_unknown_keys(self, key):
        """Test keys that are not resources return None"""
        assert classify(key) is None

    def test_non_string_key(self):
        """Test classification never raises"""
        assert classify(None) is None

    def test_descriptor_is_immutable(self):
        """Test descriptors cannot be changed"""
        descriptor = classify('service')
        with pytest.raises(AttributeError):
            descriptor.kind = 'Pod'

    def test_closed_set(self):
        """Test exactly three resource kinds exist"""
        assert {kind.descriptor.resource_key for kind in ResourceKind} == {'deployment', 'service', 'ingress'}


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
