"""
Tests for project-level checking, configuration files and reporting.
"""

import json

import pytest

from helpers import create_test_project

from sort_comp.checker import SortCompChecker
from sort_comp.main import main
from sort_comp.models import ErrorType, Severity
from sort_comp.reporter import SortCompReporter
from sort_comp.rules.resolver import ConfigurationError
from sort_comp.utils.config import (
    SortCompConfig, find_config_file, load_config, load_config_for,
)
from sort_comp.utils.file_utils import find_component_files


VALID_COMPONENT = """
var Hello = createReactClass({
  displayName: 'Hello',
  onClick: function() {},
  render: function() {
    return <button onClick={this.onClick}>Hello</button>;
  }
});
""".strip()

RENDER_FIRST_COMPONENT = """
import React from 'react';

export default class Greeting extends React.Component {
  render() {
    return <div>Hello</div>;
  }
  static displayName = 'Greeting';
  onClick() {}
}
""".strip()


class TestSortCompChecker:
    """Checking every component of a project."""

    def test_valid_project(self):
        files = {
            "package.json": "{}",
            "src/components/Hello.jsx": VALID_COMPONENT,
            "src/utils/format.js": "export function format(value) { return String(value); }",
        }

        with create_test_project(files) as project_path:
            results = SortCompChecker(str(project_path / "src")).run_all_checks()

            assert results.errors == [], [e.message for e in results.errors]
            assert results.files_checked == 2
            assert results.components_checked == 1
            assert not results.has_errors()

    def test_violations_are_reported_with_location(self):
        files = {
            "package.json": "{}",
            "src/Greeting.tsx": RENDER_FIRST_COMPONENT,
        }

        with create_test_project(files) as project_path:
            results = SortCompChecker(str(project_path / "src")).run_all_checks()

            assert [e.message for e in results.errors] == [
                "render should be placed after displayName",
                "render should be placed after onClick",
            ]
            error = results.errors[0]
            assert error.error_type == ErrorType.MEMBER_ORDER
            assert error.severity == Severity.ERROR
            assert error.file_path == "Greeting.tsx"
            assert error.line_number == 4
            assert error.component == "Greeting"
            assert error.recommendation == "Move 'render' below 'displayName'"

    def test_config_file_is_used(self):
        files = {
            "package.json": "{}",
            ".sort-comp.json": json.dumps({"order": ["lifecycle", "render", "everything-else"]}),
            "src/Hello.jsx": "\n".join([
                "var Hello = createReactClass({",
                "  displayName: 'Hello',",
                "  render: function() {},",
                "  onClick: function() {}",
                "});",
            ]),
        }

        with create_test_project(files) as project_path:
            configured = SortCompChecker(str(project_path / "src")).run_all_checks()
            default = SortCompChecker(str(project_path / "src"), config=SortCompConfig()).run_all_checks()

            assert configured.errors == []
            assert [e.message for e in default.errors] == ["render should be placed after onClick"]

    def test_invalid_config_fails_before_checking(self):
        files = {
            "package.json": "{}",
            ".sort-comp.json": json.dumps({"order": ["lifecycle", "handlers"]}),
            "src/Hello.jsx": VALID_COMPONENT,
        }

        with create_test_project(files) as project_path:
            with pytest.raises(ConfigurationError):
                SortCompChecker(str(project_path / "src"))

    def test_single_file_target(self):
        files = {"package.json": "{}", "src/Greeting.jsx": RENDER_FIRST_COMPONENT}

        with create_test_project(files) as project_path:
            results = SortCompChecker(str(project_path / "src" / "Greeting.jsx")).run_all_checks()

            assert results.files_checked == 1
            assert {e.file_path for e in results.errors} == {"Greeting.jsx"}


class TestUnparsedMembers:
    """Members the scanner cannot read are reported as warnings."""

    BROKEN_COMPONENT = "\n".join([
        "var Hello = createReactClass({",
        "  onClick function() {},",
        "  render: function() {}",
        "});",
    ])

    def test_check_source_reports_warning(self):
        checker = SortCompChecker(config=SortCompConfig())

        issues = checker.check_source(self.BROKEN_COMPONENT, "Hello.jsx")

        assert len(issues) == 1
        warning = issues[0]
        assert warning.severity == Severity.WARNING
        assert warning.error_type == ErrorType.UNPARSED_MEMBER
        assert warning.line_number == 2
        assert warning.component == "Hello"

    def test_warnings_do_not_fail_the_run(self, tmp_path, capsys):
        files = {"package.json": "{}", "src/Hello.jsx": self.BROKEN_COMPONENT}

        with create_test_project(files) as project_path:
            results = SortCompChecker(str(project_path / "src")).run_all_checks()
            success = SortCompReporter(str(tmp_path / "report.json")).report_results(results)

            assert results.errors == []
            assert [w.line_number for w in results.warnings] == [2]
            assert success is True
            assert "0 errors, 1 warnings" in capsys.readouterr().out


class TestFileDiscovery:
    """Source file discovery."""

    def test_skips_tests_dependencies_and_declarations(self):
        files = {
            "src/App.jsx": VALID_COMPONENT,
            "src/App.test.jsx": RENDER_FIRST_COMPONENT,
            "src/__tests__/Other.jsx": RENDER_FIRST_COMPONENT,
            "src/node_modules/lib/index.js": RENDER_FIRST_COMPONENT,
            "src/types.d.ts": "declare module 'x';",
            "src/styles.css": "body {}",
        }

        with create_test_project(files) as project_path:
            found = find_component_files(project_path / "src")

            assert [p.name for p in found] == ["App.jsx"]


class TestConfigLoading:
    """.sort-comp.json discovery and validation."""

    def test_closest_config_wins(self):
        files = {
            "package.json": "{}",
            ".sort-comp.json": json.dumps({"order": ["render"]}),
            "src/.sort-comp.json": json.dumps({"order": ["lifecycle"]}),
            "src/components/Hello.jsx": VALID_COMPONENT,
        }

        with create_test_project(files) as project_path:
            config_file = find_config_file(project_path / "src" / "components")

            assert config_file == (project_path / "src" / ".sort-comp.json").resolve()
            assert load_config(config_file).order == ["lifecycle"]

    def test_search_stops_at_project_root(self):
        files = {
            ".sort-comp.json": json.dumps({"order": ["render"]}),
            "app/package.json": "{}",
            "app/src/Hello.jsx": VALID_COMPONENT,
        }

        with create_test_project(files) as project_path:
            assert find_config_file(project_path / "app" / "src") is None
            assert load_config_for(project_path / "app" / "src").order == []

    def test_groups_are_loaded(self):
        files = {
            "sort-comp.json": json.dumps({
                "order": ["lifecycle", "handlers", "render"],
                "groups": {"handlers": ["/on.*/"]},
            }),
        }

        with create_test_project(files) as project_path:
            config = load_config(project_path / "sort-comp.json")

            assert config.groups == {"handlers": ["/on.*/"]}

    @pytest.mark.parametrize("data", [
        {"order": "render"},
        {"order": ["render", 1]},
        {"groups": ["/on.*/"]},
        {"groups": {"handlers": "/on.*/"}},
        ["render"],
    ])
    def test_invalid_value_types(self, data):
        with pytest.raises(ConfigurationError):
            SortCompConfig.from_dict(data)

    def test_invalid_json(self):
        with create_test_project({"bad.json": "{ order: "}) as project_path:
            with pytest.raises(ConfigurationError, match="Invalid JSON"):
                load_config(project_path / "bad.json")

    def test_unknown_keys_warn(self, capsys):
        config = SortCompConfig.from_dict({"order": ["render"], "fix": True})

        assert config.order == ["render"]
        assert "Warning" in capsys.readouterr().out


class TestReporting:
    """JSON report and CLI exit codes."""

    def test_json_report(self, tmp_path):
        files = {"package.json": "{}", "src/Greeting.jsx": RENDER_FIRST_COMPONENT}

        with create_test_project(files) as project_path:
            results = SortCompChecker(str(project_path / "src")).run_all_checks()
            output_file = tmp_path / "reports" / "sort-comp.json"

            success = SortCompReporter(str(output_file)).report_results(results)

            report = json.loads(output_file.read_text())
            assert success is False
            assert report["summary"]["total_errors"] == 2
            assert report["summary"]["by_component"] == {"Greeting.jsx:Greeting": 2}
            assert report["errors"][0]["earlier"] == {"name": "render", "position": 0}
            assert report["errors"][0]["later"] == {"name": "displayName", "position": 1}
            assert report["timestamp"]

    def test_console_output(self, tmp_path, capsys):
        files = {"package.json": "{}", "src/Greeting.jsx": RENDER_FIRST_COMPONENT}

        with create_test_project(files) as project_path:
            results = SortCompChecker(str(project_path / "src")).run_all_checks()
            SortCompReporter(str(tmp_path / "report.json")).report_results(results)

            out = capsys.readouterr().out
            assert "Greeting.jsx" in out
            assert "render should be placed after displayName [Greeting]" in out
            assert "2 errors" in out

    def test_main_exit_codes(self, tmp_path, capsys):
        files = {
            "package.json": "{}",
            "valid/Hello.jsx": VALID_COMPONENT,
            "invalid/Greeting.jsx": RENDER_FIRST_COMPONENT,
            "bad-config.json": json.dumps({"order": ["/[/"]}),
        }
        output = str(tmp_path / "report.json")

        with create_test_project(files) as project_path:
            with pytest.raises(SystemExit) as valid_exit:
                main([str(project_path / "valid"), "--output", output])
            with pytest.raises(SystemExit) as invalid_exit:
                main([str(project_path / "invalid"), "--output", output, "--format", "json"])
            with pytest.raises(SystemExit) as config_exit:
                main([str(project_path / "valid"), "--config", str(project_path / "bad-config.json"),
                      "--output", output])

        assert valid_exit.value.code == 0
        assert invalid_exit.value.code == 1
        assert config_exit.value.code == 2
        assert "Configuration error" in capsys.readouterr().err
