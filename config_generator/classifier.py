"""
Resource Classifier Module

Maps top-level configuration keys to the Kubernetes resource they describe.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import DEPLOYMENT_NAME, SERVICE_NAME, INGRESS_NAME


@dataclass(frozen=True)
class ResourceDescriptor:
    """Metadata needed to emit a manifest for one resource"""
    resource_key: str
    api_version: str
    kind: str


class ResourceKind(Enum):
    """The fixed set of resources a configuration may describe"""
    DEPLOYMENT = ResourceDescriptor(DEPLOYMENT_NAME, 'apps/v1', 'Deployment')
    SERVICE = ResourceDescriptor(SERVICE_NAME, 'v1', 'Service')
    INGRESS = ResourceDescriptor(INGRESS_NAME, 'networking.k8s.io/v1', 'Ingress')

    @property
    def descriptor(self) -> ResourceDescriptor:
        return self.value


_BY_NAME = {kind.descriptor.resource_key: kind.descriptor for kind in ResourceKind}


def classify(key: str) -> Optional[ResourceDescriptor]:
    """Classify a top-level configuration key

    Matching is case-insensitive, so 'Deployment' and 'deployment' both map
    to the Deployment descriptor.

    Args:
        key: Top-level key from the configuration payload

    Returns:
        The matching ResourceDescriptor, or None if the key is not a resource
    """
    if not isinstance(key, str):
        return None
    return _BY_NAME.get(key.casefold())
