"""JSON exporter: serializes SQI results into the summary-agent handoff document."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from config.models import SQIResult

logger = logging.getLogger(__name__)


class JSONExporter:
    """Renders an SQIResult with stable key names and writes it to disk on request."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def to_dict(self, result: SQIResult) -> Dict[str, Any]:
        return result.model_dump(mode="json")

    def to_json(self, result: SQIResult) -> str:
        return json.dumps(self.to_dict(result), indent=self.indent, ensure_ascii=False)

    @staticmethod
    def default_filename(result: SQIResult) -> str:
        return f"sqi_result_{result.student_id}.json"

    def write(self, result: SQIResult, destination: Union[str, Path]) -> Path:
        """
        Write the result JSON. A directory destination gets the default
        `sqi_result_<student_id>.json` file name.
        """
        path = Path(destination)
        if path.is_dir():
            path = path / self.default_filename(result)

        path.write_text(self.to_json(result) + "\n", encoding="utf-8")
        logger.info(f"Wrote SQI result for {result.student_id} to {path}")
        return path
