"""
Helm chart scaffolding from JSON configuration payloads
"""
from .chart_emitter import ChartEmitter, EmissionResult, render_manifest
from .classifier import ResourceDescriptor, ResourceKind, classify
from .errors import (
    ConfigGeneratorError,
    DecodeError,
    GenerationCancelled,
    SerializationError,
    TypeMismatch,
    WriteError,
)
from .output_sink import ChartDirectorySink, MemorySink, OutputSink
from .payload_decoder import decode_payload
from .placeholder_walker import make_placeholder, template_resource, walk
from .serializer import dump_yaml
from .tree import ConfigTree, Mapping, Scalar, Sequence, from_plain, to_plain

__all__ = [
    'ChartEmitter',
    'EmissionResult',
    'render_manifest',
    'ResourceDescriptor',
    'ResourceKind',
    'classify',
    'ConfigGeneratorError',
    'DecodeError',
    'GenerationCancelled',
    'SerializationError',
    'TypeMismatch',
    'WriteError',
    'ChartDirectorySink',
    'MemorySink',
    'OutputSink',
    'decode_payload',
    'make_placeholder',
    'template_resource',
    'walk',
    'dump_yaml',
    'ConfigTree',
    'Mapping',
    'Scalar',
    'Sequence',
    'from_plain',
    'to_plain',
]
