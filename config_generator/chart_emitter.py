"""
Chart Emitter Module

Generates the Helm chart scaffold for a configuration payload: values.yaml
holding the configuration as submitted, and one templated manifest per
recognized resource.
"""

import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from . import logger
from .classifier import ResourceDescriptor, classify
from .constants import API_VERSION_KEY, CHART_DESTINATION, KIND_KEY, VALUES_DESTINATION
from .errors import GenerationCancelled
from .metadata_generator import ChartMetadata, generate_chart_yaml
from .output_sink import OutputSink
from .placeholder_walker import template_resource
from .serializer import dump_yaml, generate_header
from .tree import ConfigTree, Mapping, Scalar


@dataclass
class EmissionResult:
    """What one emit() call produced"""
    manifests: Dict[str, Mapping] = field(default_factory=dict)
    accumulators: Dict[str, Dict[str, str]] = field(default_factory=dict)
    skipped: List[str] = field(default_factory=list)
    destinations: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)


def render_manifest(value: ConfigTree, resource_key: str, descriptor: ResourceDescriptor,
                    cancel_event: Optional[threading.Event] = None):
    """Template a resource and attach its apiVersion and kind

    Existing apiVersion/kind keys in the configuration are overwritten.

    Returns:
        Tuple of (manifest mapping, leaf key -> placeholder accumulator)

    Raises:
        TypeMismatch: If value is not a mapping
    """
    templated, accumulator = template_resource(value, resource_key, cancel_event)
    manifest = templated.with_entries(**{
        API_VERSION_KEY: Scalar(descriptor.api_version),
        KIND_KEY: Scalar(descriptor.kind),
    })
    return manifest, accumulator


class ChartEmitter:
    """Generates chart files for configuration payloads"""

    def __init__(self, sink: OutputSink,
                 serializer: Callable[..., str] = dump_yaml,
                 chart_metadata: Optional[ChartMetadata] = None):
        self.sink = sink
        self.serializer = serializer
        self.chart_metadata = chart_metadata

    def emit(self, configs: Mapping, cancel_event: Optional[threading.Event] = None) -> EmissionResult:
        """Generate values.yaml and resource templates for a configuration

        Everything is rendered before the first write, so a failing resource
        leaves the sink untouched.

        Args:
            configs: Decoded top-level configuration
            cancel_event: Optional event; when set generation stops before writing

        Returns:
            EmissionResult with the rendered manifests and written destinations

        Raises:
            TypeMismatch: If a recognized resource is not an object
            SerializationError: If a tree cannot be rendered as YAML
            WriteError: If the sink fails
            GenerationCancelled: If cancel_event is set
        """
        result = EmissionResult()
        # destination id -> rendered text, in write order
        outputs: Dict[str, str] = {}

        header = generate_header(self.chart_metadata.name) if self.chart_metadata else None
        outputs[VALUES_DESTINATION] = self._serialize(configs, header)

        for key, value in configs.items():
            descriptor = classify(key)
            if descriptor is None:
                logger.log_warning(f"Skipping '{key}': not a deployment, service or ingress")
                result.skipped.append(key)
                continue

            destination = descriptor.resource_key
            if destination in result.manifests:
                logger.log_warning(f"'{key}' replaces an earlier {descriptor.kind} configuration")

            manifest, accumulator = render_manifest(value, key, descriptor, cancel_event)
            result.manifests[destination] = manifest
            result.accumulators[destination] = accumulator
            outputs[destination] = self._serialize(manifest)
            logger.log_info(f"Templated {descriptor.kind} from '{key}' ({len(accumulator)} values)")

        if self.chart_metadata is not None:
            outputs[CHART_DESTINATION] = generate_chart_yaml(self.chart_metadata)

        if cancel_event is not None and cancel_event.is_set():
            raise GenerationCancelled("Generation cancelled before writing output")

        for destination, content in outputs.items():
            self.sink.write(destination, content)
            result.destinations.append(destination)

        # templates from an earlier configuration would no longer match values.yaml
        result.removed = self.sink.prune(result.destinations)
        for destination in result.removed:
            logger.log_info(f"Removed stale {destination} template")

        return result

    def _serialize(self, tree: ConfigTree, header: Optional[str] = None) -> str:
        if header is None:
            return self.serializer(tree)
        return self.serializer(tree, header=header)
