"""Tests for package-manager output parsers."""

import json

from claw_deps.models import AdvisoryList, SeverityCounts
from claw_deps.parsing import (
    Parsed,
    parse_cargo_audit,
    parse_cargo_outdated,
    parse_cargo_update,
    parse_go_list,
    parse_json,
    parse_npm_audit,
    parse_npm_outdated,
    parse_pip_audit,
    parse_pip_outdated,
)


class TestParseJson:
    """Tests for parse_json()."""

    def test_empty_text_is_default(self):
        result = parse_json("", dict, {})
        assert result.ok
        assert result.value == {}

    def test_invalid_json(self):
        result = parse_json("npm ERR! oops", dict, {})
        assert not result.ok
        assert result.value == {}
        assert "Invalid JSON" in result.error

    def test_wrong_top_level(self):
        result = parse_json("[1, 2]", dict, {})
        assert not result.ok
        assert result.value == {}

    def test_parsed_empty(self):
        result = Parsed.empty([], "nope")
        assert result.value == []
        assert result.ok is False


class TestNpm:
    """Tests for npm outdated/audit parsing."""

    def test_outdated(self):
        text = json.dumps(
            {
                "lodash": {
                    "current": "4.17.20",
                    "wanted": "4.17.21",
                    "latest": "4.17.21",
                    "type": "dependencies",
                },
                "jest": {
                    "current": "27.0.0",
                    "wanted": "27.5.1",
                    "latest": "29.7.0",
                    "type": "devDependencies",
                },
            }
        )
        result = parse_npm_outdated(text)

        assert result.ok
        assert [e.name for e in result.value] == ["lodash", "jest"]
        lodash = result.value[0]
        assert lodash.current == "4.17.20"
        assert lodash.wanted == "4.17.21"
        assert lodash.latest == "4.17.21"
        assert lodash.kind == "dependencies"

    def test_outdated_skips_uninstalled(self):
        """Packages not installed have no current version."""
        text = json.dumps({"left-pad": {"wanted": "1.3.0", "latest": "1.3.0"}})
        assert parse_npm_outdated(text).value == []

    def test_outdated_workspace_list(self):
        text = json.dumps(
            {"react": [{"current": "17.0.0", "latest": "18.2.0"}, {"current": "17.0.1", "latest": "18.2.0"}]}
        )
        result = parse_npm_outdated(text)
        assert [e.current for e in result.value] == ["17.0.0", "17.0.1"]

    def test_outdated_garbage(self):
        result = parse_npm_outdated("not json")
        assert not result.ok
        assert result.value == []

    def test_audit(self):
        text = json.dumps(
            {
                "metadata": {
                    "vulnerabilities": {
                        "info": 0,
                        "low": 1,
                        "moderate": 2,
                        "high": 0,
                        "critical": 1,
                        "total": 4,
                    }
                }
            }
        )
        result = parse_npm_audit(text)

        assert result.ok
        assert result.value.total == 4
        assert isinstance(result.value.breakdown, SeverityCounts)
        assert result.value.breakdown.get("critical") == 1
        assert result.value.breakdown.get("high") == 0

    def test_audit_zero_total(self):
        result = parse_npm_audit('{"metadata":{"vulnerabilities":{"total":0}}}')
        assert result.value.total == 0

    def test_audit_missing_metadata(self):
        result = parse_npm_audit('{"error": {"code": "ENOLOCK"}}')
        assert result.ok
        assert result.value.total == 0
        assert result.value.breakdown.to_data() == {}

    def test_audit_negative_counts_clamped(self):
        result = parse_npm_audit('{"metadata":{"vulnerabilities":{"total":-3,"high":"x"}}}')
        assert result.value.total == 0
        assert result.value.breakdown.get("high") == 0

    def test_audit_garbage(self):
        result = parse_npm_audit("<html>")
        assert not result.ok
        assert result.value.total == 0
        assert result.value.breakdown is None


class TestPip:
    """Tests for pip list / pip-audit parsing."""

    def test_outdated(self):
        text = json.dumps(
            [
                {
                    "name": "requests",
                    "version": "2.25.0",
                    "latest_version": "2.31.0",
                    "latest_filetype": "wheel",
                }
            ]
        )
        [entry] = parse_pip_outdated(text).value
        assert entry.name == "requests"
        assert entry.current == "2.25.0"
        assert entry.latest == "2.31.0"
        assert entry.kind == "wheel"
        assert entry.wanted is None

    def test_outdated_wrong_shape(self):
        result = parse_pip_outdated('{"name": "requests"}')
        assert not result.ok
        assert result.value == []

    def test_audit_list(self):
        findings = [{"name": "jinja2", "version": "2.11.0", "vulns": [{"id": "PYSEC-1"}]}]
        result = parse_pip_audit(json.dumps(findings))

        assert result.value.total == 1
        assert isinstance(result.value.breakdown, AdvisoryList)
        assert result.value.breakdown.to_data() == findings

    def test_audit_dependencies_object(self):
        text = json.dumps(
            {
                "dependencies": [
                    {"name": "flask", "version": "3.0.0", "vulns": []},
                    {"name": "jinja2", "version": "2.11.0", "vulns": [{"id": "PYSEC-1"}]},
                ],
                "fixes": [],
            }
        )
        result = parse_pip_audit(text)
        assert result.value.total == 1
        assert result.value.breakdown.to_data()[0]["name"] == "jinja2"

    def test_audit_empty(self):
        result = parse_pip_audit("")
        assert result.ok
        assert result.value.total == 0


class TestGo:
    """Tests for go list -m -u all parsing."""

    def test_bracket_lines_only(self):
        text = "module/a v1.0.0\nmodule/b v2.0.0 [v2.1.0]\n"
        [entry] = parse_go_list(text).value
        assert entry.name == "module/b"
        assert entry.current == "v2.0.0"
        assert entry.latest == "v2.1.0"

    def test_malformed_bracket_line_dropped(self):
        text = "example.com/m [broken\ngolang.org/x/text v0.3.0 [v0.14.0]\n"
        result = parse_go_list(text)
        assert [e.name for e in result.value] == ["golang.org/x/text"]

    def test_empty(self):
        assert parse_go_list("").value == []


class TestCargo:
    """Tests for cargo outdated / update / audit parsing."""

    def test_outdated_mapping(self):
        text = json.dumps({"dependencies": {"serde": {"project": "1.0.100", "latest": "1.0.190"}}})
        [entry] = parse_cargo_outdated(text).value
        assert (entry.name, entry.current, entry.latest) == ("serde", "1.0.100", "1.0.190")

    def test_outdated_list(self):
        text = json.dumps(
            {"dependencies": [{"name": "rand", "project": "0.7.3", "latest": "0.8.5"}]}
        )
        [entry] = parse_cargo_outdated(text).value
        assert entry.name == "rand"

    def test_outdated_invalid(self):
        assert not parse_cargo_outdated("error: no such command").ok

    def test_update_dry_run(self):
        text = (
            "    Updating crates.io index\n"
            "    Updating foo v1.0.0 -> v1.2.0\n"
            "    Locking 1 package\n"
            "warning: not updating lockfile due to dry run\n"
        )
        [entry] = parse_cargo_update(text).value
        assert (entry.name, entry.current, entry.latest) == ("foo", "1.0.0", "1.2.0")

    def test_audit(self):
        advisories = [{"advisory": {"id": "RUSTSEC-2020-0071"}}]
        text = json.dumps({"vulnerabilities": {"found": True, "count": 1, "list": advisories}})
        result = parse_cargo_audit(text)
        assert result.value.total == 1
        assert result.value.breakdown.to_data() == advisories

    def test_audit_no_list(self):
        result = parse_cargo_audit('{"database": {}}')
        assert result.value.total == 0
        assert result.value.breakdown.to_data() == []
