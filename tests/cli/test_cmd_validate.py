"""Tests for the validate and rules CLI commands."""

from __future__ import annotations

import argparse
import json
import shutil
from pathlib import Path

import pandas as pd
import pytest

from build_model.interfaces.cli.main import build_parser, cmd_rules, cmd_validate, main

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures" / "poms" / "validation"


def _args(*descriptors, **overrides) -> argparse.Namespace:
    values = {
        "descriptors": [str(d) for d in descriptors],
        "level": "STRICT",
        "mode": "effective",
        "report": False,
        "report_json": False,
        "report_csv": None,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


@pytest.fixture
def workdir(tmp_path):
    """Copy a few fixtures into a scratch directory so reports land there."""
    for name in ("valid-pom.yaml", "missing-version-pom.yaml", "missing-type-pom.yaml"):
        shutil.copy(FIXTURES_DIR / name, tmp_path / name)
    return tmp_path


class TestCmdValidate:
    """Tests for cmd_validate function."""

    def test_valid_descriptor_passes(self):
        assert cmd_validate(_args(FIXTURES_DIR / "valid-pom.yaml")) == 0

    def test_invalid_descriptor_fails(self, capsys):
        result = cmd_validate(_args(FIXTURES_DIR / "missing-version-pom.yaml"))

        assert result == 2
        assert "❌ 'version' is missing." in capsys.readouterr().out

    def test_level_controls_exit_code(self):
        """Test that a missing plugin version only fails at the strictest level."""
        descriptor = FIXTURES_DIR / "missing-plugin-version-pom.yaml"

        assert cmd_validate(_args(descriptor, level="MAVEN_3_0")) == 0
        assert cmd_validate(_args(descriptor, level="STRICT")) == 2

    def test_raw_mode_skips_effective_checks(self):
        descriptor = FIXTURES_DIR / "missing-type-pom.yaml"

        assert cmd_validate(_args(descriptor, mode="raw")) == 0
        assert cmd_validate(_args(descriptor, mode="effective")) == 2

    def test_missing_descriptor_only(self, tmp_path):
        """Test that nothing validated returns 1."""
        assert cmd_validate(_args(tmp_path / "absent.yaml")) == 1

    def test_missing_descriptor_is_skipped(self, tmp_path):
        result = cmd_validate(_args(tmp_path / "absent.yaml", FIXTURES_DIR / "valid-pom.yaml"))
        assert result == 0

    def test_unparseable_descriptor(self, tmp_path):
        broken = tmp_path / "broken.yaml"
        broken.write_text("groupId: [unclosed\n", encoding="utf-8")

        assert cmd_validate(_args(broken)) == 1

    def test_unknown_level(self):
        assert cmd_validate(_args(FIXTURES_DIR / "valid-pom.yaml", level="MAVEN_9")) == 2

    def test_unknown_mode(self):
        assert cmd_validate(_args(FIXTURES_DIR / "valid-pom.yaml", mode="merged")) == 2

    def test_no_descriptors(self):
        assert cmd_validate(_args()) == 2

    def test_directory_is_expanded(self, workdir, capsys):
        result = cmd_validate(_args(workdir))

        assert result == 2
        out = capsys.readouterr().out
        assert "valid-pom.yaml" in out
        assert "missing-version-pom.yaml" in out

    def test_reports_from_earlier_run_are_not_descriptors(self, tmp_path):
        """Test that a second run over a directory ignores the reports of the first."""
        shutil.copy(FIXTURES_DIR / "valid-pom.yaml", tmp_path / "valid-pom.yaml")

        assert cmd_validate(_args(tmp_path, mode="both", report_json=True)) == 0
        assert (tmp_path / "valid-pom_effective_validation.json").exists()
        assert (tmp_path / "valid-pom_raw_validation.json").exists()

        assert cmd_validate(_args(tmp_path, report_json=True)) == 0
        assert cmd_validate(_args(tmp_path)) == 0

    def test_markdown_report_next_to_descriptor(self, workdir):
        result = cmd_validate(_args(workdir / "missing-version-pom.yaml", report=True))

        assert result == 2
        report = workdir / "missing-version-pom_effective_validation.md"
        assert report.exists()
        content = report.read_text(encoding="utf-8")
        assert "# Validation Report: missing-version-pom.yaml" in content
        assert "- 'version' is missing." in content

    def test_reports_in_custom_directory(self, workdir):
        report_dir = workdir / "reports"
        result = cmd_validate(
            _args(
                workdir / "valid-pom.yaml",
                mode="both",
                report=str(report_dir),
                report_json=str(report_dir),
            )
        )

        assert result == 0
        for mode in ("raw", "effective"):
            assert (report_dir / f"valid-pom_{mode}_validation.md").exists()
            data = json.loads(
                (report_dir / f"valid-pom_{mode}_validation.json").read_text(encoding="utf-8")
            )
            assert data["metadata"] == {"mode": mode, "level": "MAVEN_3_1"}
            assert data["summary"] == {"errors": 0, "warnings": 0}

    def test_csv_report(self, workdir):
        csv_path = workdir / "out" / "findings.csv"
        result = cmd_validate(_args(workdir, mode="both", report_csv=str(csv_path)))

        assert result == 2
        df = pd.read_csv(csv_path)
        assert list(df.columns) == ["descriptor", "mode", "level", "severity", "message"]
        assert set(df["message"]) == {"'version' is missing.", "'packaging' is missing."}
        packaging = df[df["message"] == "'packaging' is missing."]
        assert list(packaging["mode"]) == ["effective"]
        assert set(df["level"]) == {"MAVEN_3_1"}


class TestCmdRules:
    def test_rules_at_level(self, capsys):
        assert cmd_rules(argparse.Namespace(level="MINIMAL")) == 0

        out = capsys.readouterr().out
        assert "Rules at level MINIMAL:" in out
        assert "plugin_version_required" in out
        assert "suppressed" in out

    def test_unknown_level(self):
        assert cmd_rules(argparse.Namespace(level="LATEST")) == 2


class TestParser:
    def test_level_is_case_insensitive(self):
        args = build_parser().parse_args(["validate", "pom.yaml", "--level", "maven_2_0"])
        assert args.level == "MAVEN_2_0"
        assert args.mode == "effective"

    def test_rejects_unknown_mode(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["validate", "pom.yaml", "--mode", "merged"])

    def test_main_runs_validation(self):
        result = main(["validate", str(FIXTURES_DIR / "valid-pom.yaml"), "--mode", "both"])
        assert result == 0
