"""Unit tests for report generation."""

import json
import pytest
import yaml
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from json2struct.reporting.generator import ReportGenerator
from json2struct.schema_inference.inferrer import infer
from json2struct.schema_inference.structure import estimate_complexity

SAMPLE = {
    "id": 1,
    "created-at": "2024-01-01",
    "profile": {"bio": None},
    "mixed": [1, "a"],
}


@pytest.fixture
def results():
    return [{
        'language': 'typescript',
        'model': infer(SAMPLE, root_name="Account", language="typescript"),
        'stats': estimate_complexity(SAMPLE),
        'elapsed_ms': 1.23456,
    }]


class TestReportGenerator:
    """Test report output formats."""

    def test_build_report(self, results):
        report = ReportGenerator({}).build_report(results)
        assert 'timestamp' in report
        run = report['runs'][0]
        assert run['language'] == 'typescript'
        assert run['record_count'] == 2
        assert run['model']['name'] == 'Account'
        assert run['stats']['object_count'] == 2
        assert run['elapsed_ms'] == 1.235

    def test_stats_can_be_excluded(self, results):
        report = ReportGenerator({'include_stats': False}).build_report(results)
        assert 'stats' not in report['runs'][0]

    def test_json(self, results):
        output = ReportGenerator({'output_format': 'json'}).render(results)
        assert json.loads(output)['runs'][0]['model']['name'] == 'Account'

    def test_yaml(self, results):
        output = ReportGenerator({'output_format': 'yaml'}).render(results)
        assert yaml.safe_load(output)['runs'][0]['record_count'] == 2

    def test_unknown_format_falls_back_to_json(self, results):
        output = ReportGenerator({'output_format': 'xml'}).render(results)
        assert json.loads(output)['runs'][0]['language'] == 'typescript'

    def test_text_outline(self, results):
        output = ReportGenerator({'output_format': 'text'}).render(results)
        lines = output.splitlines()

        assert lines[0] == "# typescript"
        assert lines[1] == (
            "# Structure complexity: 2 levels deep, 2 objects, 1 arrays, 5 total fields"
        )
        # nested records are listed before the records that use them
        assert output.index("record Profile {") < output.index("record Account {")
        assert '    createdAt: string  // json: "created-at"' in lines
        assert "    bio: any | null" in lines
        assert "    mixed: any[]  // Mixed types: Integer, String" in lines
        assert output.endswith("}\n")

    def test_write(self, results, tmp_path):
        path = tmp_path / "out" / "report.yaml"
        written = ReportGenerator({'output_format': 'yaml'}).write(results, path)
        assert written == path
        assert yaml.safe_load(path.read_text())['runs'][0]['model']['name'] == 'Account'
