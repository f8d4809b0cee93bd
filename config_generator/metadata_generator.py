"""
Metadata generator for Helm charts
Handles generation of Chart.yaml
"""
from dataclasses import dataclass

from .constants import DEFAULT_APP_VERSION, DEFAULT_CHART_VERSION
from .errors import ConfigurationError
from .serializer import dump_plain


@dataclass(frozen=True)
class ChartMetadata:
    """Values written to Chart.yaml"""
    name: str
    version: str = DEFAULT_CHART_VERSION
    app_version: str = DEFAULT_APP_VERSION
    description: str = 'A Helm chart for Kubernetes'


def generate_chart_yaml(metadata: ChartMetadata) -> str:
    """Generate Chart.yaml content

    Values are written through the YAML dumper so names or versions
    containing ':' or '#' are quoted.

    Args:
        metadata: Chart name and versions

    Returns:
        Chart.yaml text

    Raises:
        ConfigurationError: If the chart name is empty
    """
    if not metadata.name:
        raise ConfigurationError("Chart metadata missing required 'name' field")

    return dump_plain({
        'apiVersion': 'v2',
        'name': metadata.name,
        'description': metadata.description,
        'type': 'application',
        'version': metadata.version,
        'appVersion': str(metadata.app_version),
    })
