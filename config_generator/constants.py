"""Constants for config-generator

Centralized location for hardcoded values to improve maintainability.
"""

# Top-level configuration keys recognized as Kubernetes resources
DEPLOYMENT_NAME = 'deployment'
SERVICE_NAME = 'service'
INGRESS_NAME = 'ingress'

# Chart layout
BASE_HELM_FOLDER = 'helm'
TEMPLATES_FOLDER = 'templates'
VALUES_FILE = 'values.yaml'
CHART_FILE = 'Chart.yaml'

# Destination ids understood by output sinks (resource keys are destinations too)
VALUES_DESTINATION = 'values'
CHART_DESTINATION = 'chart'

# Helm value reference written in place of every templated leaf
PLACEHOLDER_FORMAT = '{{{{.Values.{resource_key}.{path}}}}}'

# Keys injected into every rendered manifest
API_VERSION_KEY = 'apiVersion'
KIND_KEY = 'kind'

# Service defaults
DEFAULT_HOST = '0.0.0.0'
DEFAULT_PORT = 8080
DEFAULT_CHART_NAME = 'config-generator'
DEFAULT_CHART_VERSION = '0.1.0'
DEFAULT_APP_VERSION = '1.0.0'
