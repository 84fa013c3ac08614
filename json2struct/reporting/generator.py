"""Report generation for inferred type models."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

import yaml

from ..model.type_table import render_field_type
from ..model.types import RecordType
from ..utils.helpers import escape_annotation

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Render inference results as JSON, YAML or a text outline."""

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize report generator.

        Args:
            config: Reporting configuration
        """
        self.config = config
        self.output_format = config.get('output_format', 'json')
        self.include_stats = config.get('include_stats', True)

    def build_report(self, results: List[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Assemble the report document.

        Args:
            results: One entry per language run, each with 'language',
                'model' (RecordType) and optionally 'stats' (StructureStats)
                and 'elapsed_ms'

        Returns:
            Plain-data report dictionary
        """
        runs = []
        for result in results:
            model: RecordType = result['model']
            run = {
                'language': result['language'],
                'record_count': sum(1 for _ in model.iter_records()),
                'model': model.to_dict(),
            }
            if self.include_stats and result.get('stats') is not None:
                run['stats'] = result['stats'].to_dict()
            if result.get('elapsed_ms') is not None:
                run['elapsed_ms'] = round(result['elapsed_ms'], 3)
            runs.append(run)

        return {
            'timestamp': datetime.now().isoformat(),
            'runs': runs,
        }

    def render(self, results: List[Dict[str, Any]]) -> str:
        """Render results in the configured output format."""
        if self.output_format == 'text':
            return self._render_text(results)

        report = self.build_report(results)
        if self.output_format == 'yaml':
            return yaml.safe_dump(report, sort_keys=False)
        if self.output_format != 'json':
            logger.warning(f"Unknown report format: {self.output_format}, using json")
        return json.dumps(report, indent=2)

    def write(self, results: List[Dict[str, Any]], file_path: Path) -> Path:
        """
        Render results and write them to file_path.

        Returns:
            The written path
        """
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w') as f:
            f.write(self.render(results))
        logger.info(f"{self.output_format.upper()} report generated: {file_path}")
        return file_path

    def _render_text(self, results: List[Dict[str, Any]]) -> str:
        lines: List[str] = []
        for result in results:
            language = result['language']
            lines.append(f"# {language}")
            if self.include_stats and result.get('stats') is not None:
                stats = result['stats']
                lines.append(
                    f"# Structure complexity: {stats.max_depth} levels deep, "
                    f"{stats.object_count} objects, {stats.array_count} arrays, "
                    f"{stats.field_count} total fields"
                )
            lines.append("")

            # Nested records first so every referenced name is defined above its use
            records = list(result['model'].iter_records())
            for record in reversed(records):
                lines.extend(self._outline_record(record, language))
                lines.append("")
        return "\n".join(lines).rstrip() + "\n"

    def _outline_record(self, record: RecordType, language: str) -> List[str]:
        lines = []
        if record.annotation:
            lines.append(f"// {escape_annotation(record.annotation)}")
        lines.append(f"record {record.name} {{")
        for slot in record.fields:
            line = f"    {slot.display_name}: {render_field_type(slot, language)}"
            if slot.display_name != slot.source_key:
                line += f"  // json: \"{slot.source_key}\""
            if slot.annotation:
                line += f"  // {escape_annotation(slot.annotation)}"
            lines.append(line)
        lines.append("}")
        return lines
