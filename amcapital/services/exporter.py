"""Export services for simulation results.

Saves simulation reports to JSON files for the sales team and audits.
"""

import json
import os
from datetime import datetime
from typing import Any, Dict, List, Optional

from amcapital.core.exceptions import ReportExportError
from amcapital.core.logging import get_logger
from amcapital.domain.models.report import SimulationReport

log = get_logger(__name__)


class ResultExporter:
    """Handles exporting of simulation reports."""

    def __init__(self, output_dir: str = "reports"):
        """Initialize exporter.

        Args:
            output_dir: Directory where reports will be saved.
        """
        self.output_dir = output_dir

    def _ensure_dir(self):
        """Ensure output directory exists."""
        if os.path.isdir(self.output_dir):
            return
        try:
            os.makedirs(self.output_dir, exist_ok=True)
            log.info("created_output_directory", path=self.output_dir)
        except OSError as e:
            log.error("output_directory_creation_failed", path=self.output_dir, error=str(e))
            raise ReportExportError(f"Cannot create {self.output_dir}: {e}") from e

    @staticmethod
    def serialize(report: SimulationReport) -> Dict[str, Any]:
        """JSON-ready dict with camelCase result fields."""
        payload = report.model_dump(mode="json", by_alias=True, exclude={"market_data"})
        payload["result"] = report.result.to_payload()
        return payload

    def save_results(
        self,
        reports: List[SimulationReport],
        prefix: str = "simulation",
        metadata: Optional[Dict[str, Any]] = None
    ) -> str:
        """Save reports to a JSON file.

        Args:
            reports: Simulation reports to save.
            prefix: Filename prefix.
            metadata: Optional metadata to include in the file.

        Returns:
            Path to the saved file.
        """
        self._ensure_dir()
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"{prefix}_{timestamp}.json"
        filepath = os.path.join(self.output_dir, filename)

        payload = {
            "metadata": {
                "timestamp": datetime.now().isoformat(),
                "count": len(reports),
                **(metadata or {})
            },
            "reports": [self.serialize(r) for r in reports]
        }

        try:
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
        except OSError as e:
            log.error("results_save_failed", path=filepath, error=str(e))
            raise ReportExportError(f"Cannot write {filepath}: {e}") from e

        log.info("results_saved", path=filepath, count=len(reports))
        return filepath
