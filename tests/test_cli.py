"""
Tests for the command-line interface.
"""
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from loguru import logger

from java_samples import REST_APPLICATION, WIDGET_RESOURCE
from jaxrs_lens.cli import create_parser, main


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger.remove()


@pytest.fixture
def java_project(tmp_path):
    package_dir = tmp_path / "src" / "main" / "java" / "com" / "example"
    package_dir.mkdir(parents=True)
    (package_dir / "WidgetResource.java").write_text(WIDGET_RESOURCE, encoding="utf-8")
    (package_dir / "RestApplication.java").write_text(REST_APPLICATION, encoding="utf-8")
    return tmp_path


class TestCli:

    def test_scan_json(self, java_project, capsys):
        exit_code = main(["scan", str(java_project), "--base-url", "http://localhost:9000", "--format", "json"])

        assert exit_code == 0
        endpoints = json.loads(capsys.readouterr().out)
        assert [e["url"] for e in endpoints] == [
            "http://localhost:9000/api/widgets/{id}",
            "http://localhost:9000/api/widgets",
        ]
        assert endpoints[0]["http_method"] == "GET"
        assert endpoints[0]["is_primary"] is True
        assert endpoints[0]["class_name"] == "WidgetResource"
        assert endpoints[1]["position"] == {"line": 14, "character": 9}

    def test_scan_text(self, java_project, capsys):
        exit_code = main(["scan", str(java_project), "--base-url", "http://localhost:9000"])

        assert exit_code == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("* GET    http://localhost:9000/api/widgets/{id}  ")
        assert lines[0].endswith("WidgetResource.java:11:19")
        assert lines[1].startswith("  POST   http://localhost:9000/api/widgets  ")

    def test_scan_output_file(self, java_project, tmp_path, capsys):
        output = tmp_path / "out" / "endpoints.json"

        exit_code = main(["scan", str(java_project), "--port", "9090", "-f", "json", "-o", str(output)])

        assert exit_code == 0
        assert capsys.readouterr().out == ""
        endpoints = json.loads(output.read_text(encoding="utf-8"))
        assert endpoints[0]["url"].endswith(":9090/api/widgets/{id}")

    def test_labels(self, java_project, capsys):
        assert main(["labels", str(java_project)]) == 0
        assert capsys.readouterr().out.splitlines() == ["jaxrs", "javax", "jakarta"]

    def test_missing_project(self, tmp_path):
        assert main(["scan", str(tmp_path / "missing"), "--base-url", "http://x"]) == 1

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_base_url_and_port_are_exclusive(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["scan", ".", "--base-url", "http://x", "--port", "1"])
