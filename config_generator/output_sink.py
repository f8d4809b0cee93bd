"""
Output Sink Module

Destinations for generated chart files. A destination id is either
'values', 'chart' or a resource key ('deployment', 'service', 'ingress').
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List

from .classifier import ResourceKind
from .constants import (
    CHART_DESTINATION,
    CHART_FILE,
    TEMPLATES_FOLDER,
    VALUES_DESTINATION,
    VALUES_FILE,
)
from .errors import WriteError

RESOURCE_DESTINATIONS = {kind.descriptor.resource_key for kind in ResourceKind}


class OutputSink(ABC):
    """Interface for chart output destinations"""

    @abstractmethod
    def write(self, destination_id: str, content: str) -> None:
        """Write content to a destination, replacing what was there

        Raises:
            WriteError: If the destination is unknown or cannot be written
        """

    @abstractmethod
    def prune(self, keep: Iterable[str]) -> List[str]:
        """Remove resource outputs left by earlier runs that are not in keep

        Returns:
            Destination ids that were removed
        """

    def _check_destination(self, destination_id: str):
        if destination_id not in (VALUES_DESTINATION, CHART_DESTINATION) and \
                destination_id not in RESOURCE_DESTINATIONS:
            raise WriteError(f"Unknown output destination: {destination_id}")


class ChartDirectorySink(OutputSink):
    """Writes chart files below a chart directory

    Layout:
        <chart_dir>/values.yaml
        <chart_dir>/Chart.yaml
        <chart_dir>/templates/<resource>.yaml
    """

    def __init__(self, chart_dir: Path):
        self.chart_dir = Path(chart_dir)
        self.templates_dir = self.chart_dir / TEMPLATES_FOLDER

    def path_for(self, destination_id: str) -> Path:
        """Resolve the file a destination id is written to"""
        self._check_destination(destination_id)
        if destination_id == VALUES_DESTINATION:
            return self.chart_dir / VALUES_FILE
        if destination_id == CHART_DESTINATION:
            return self.chart_dir / CHART_FILE
        return self.templates_dir / f"{destination_id}.yaml"

    def write(self, destination_id: str, content: str) -> None:
        """Write content to the destination's file, replacing it

        Raises:
            WriteError: If the destination is unknown or the file cannot be written
        """
        output_file = self.path_for(destination_id)
        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            with open(output_file, 'w') as f:
                f.write(content)
        except OSError as e:
            raise WriteError(f"Failed to write {output_file}: {e}") from e

    def prune(self, keep: Iterable[str]) -> List[str]:
        """Delete templates/<resource>.yaml files not produced by this run

        Only the resource template files this tool writes are considered;
        other files in templates/ are left alone.

        Raises:
            WriteError: If a stale file cannot be deleted
        """
        keep = set(keep)
        removed = []
        for destination_id in sorted(RESOURCE_DESTINATIONS - keep):
            stale_file = self.path_for(destination_id)
            if not stale_file.exists():
                continue
            try:
                stale_file.unlink()
            except OSError as e:
                raise WriteError(f"Failed to remove stale {stale_file}: {e}") from e
            removed.append(destination_id)
        return removed


class MemorySink(OutputSink):
    """Keeps generated files in memory (dry runs and tests)"""

    def __init__(self):
        self.files: Dict[str, str] = {}
        self.order: List[str] = []

    def write(self, destination_id: str, content: str) -> None:
        self._check_destination(destination_id)
        self.files[destination_id] = content
        self.order.append(destination_id)

    def prune(self, keep: Iterable[str]) -> List[str]:
        keep = set(keep)
        removed = [d for d in self.files if d in RESOURCE_DESTINATIONS and d not in keep]
        for destination_id in removed:
            del self.files[destination_id]
        return removed
