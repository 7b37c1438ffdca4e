"""Tests for the clinic-roster command line, run through click's CliRunner."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from clinic_roster.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def log_args(tmp_path: Path) -> list[str]:
    """Global options that keep log files inside tmp_path."""
    return ["--log-file", str(tmp_path / "logs" / "test.log")]


class TestGlobalOptions:
    """Test the top-level group and its options."""

    def test_cli_help(self, runner):
        """Test main CLI help output."""
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "Clinic Roster" in result.output
        assert "--verbose" in result.output
        assert "--version" in result.output

    def test_cli_version(self, runner):
        """Test --version displays version."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "clinic-roster" in result.output

    def test_cli_version_command(self, runner, log_args):
        """Test explicit version command."""
        result = runner.invoke(cli, [*log_args, "version"])

        assert result.exit_code == 0
        assert "clinic-roster version" in result.output

    def test_verbose_flag_configures_logging(self, runner):
        """Test --verbose flag enables DEBUG logging."""
        with patch("clinic_roster.cli.main.configure_logging") as mock_config:
            result = runner.invoke(cli, ["--verbose", "roster", "--help"])

        assert result.exit_code == 0
        mock_config.assert_called_once()
        assert mock_config.call_args[1]["level"] == "DEBUG"

    def test_no_verbose_flag_uses_info_logging(self, runner, tmp_path, monkeypatch):
        """Test without --verbose flag uses INFO logging."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("CLINIC_ROSTER_LOG_LEVEL", raising=False)

        with patch("clinic_roster.cli.main.configure_logging") as mock_config:
            result = runner.invoke(cli, ["roster", "--help"])

        assert result.exit_code == 0
        assert mock_config.call_args[1]["level"] == "INFO"

    def test_redact_pii_flag(self, runner):
        """Test --redact-pii is passed to logging configuration."""
        with patch("clinic_roster.cli.main.configure_logging") as mock_config:
            runner.invoke(cli, ["--redact-pii", "roster", "--help"])

        assert mock_config.call_args[1]["redact_pii"] is True

    def test_invalid_config_file_exits(self, runner, tmp_path):
        """Test a malformed config file aborts with exit code 1."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{bad")

        result = runner.invoke(cli, ["--config", str(config_file), "version"])

        assert result.exit_code == 1
        assert "Error loading configuration" in result.output


class TestConfigCommands:
    """Test config validate."""

    def test_config_validate_valid(self, runner, tmp_path, log_args):
        """Test valid config file is reported."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"clinic": {"name": "City Clinic No. 1"}}))

        result = runner.invoke(cli, [*log_args, "config", "validate", str(config_file)])

        assert result.exit_code == 0
        assert "Configuration is valid" in result.output
        assert "City Clinic No. 1" in result.output

    def test_config_validate_invalid(self, runner, tmp_path, log_args):
        """Test invalid config file exits with code 1."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"logging": {"level": "LOUD"}}))

        result = runner.invoke(cli, [*log_args, "config", "validate", str(config_file)])

        assert result.exit_code == 1
        assert "Configuration validation failed" in result.output


class TestRosterShow:
    """Test cases for roster show."""

    def test_show_lists_patients(self, runner, patients_csv, log_args):
        """Test clinic summary and every patient are displayed."""
        result = runner.invoke(
            cli,
            [*log_args, "roster", "show", str(patients_csv), "--name", "City Clinic No. 1",
             "--address", "10 Main St", "--doctors", "25"],
        )

        assert result.exit_code == 0
        assert "Clinic 'City Clinic No. 1' at 10 Main St | doctors: 25 | patients: 3" in result.output
        assert "Child patient: Marta" in result.output
        assert "Needs parental permission: yes" in result.output
        assert "Elder patient: Petro" in result.output
        assert "Patient: Oleksii" in result.output

    def test_show_negative_doctors_clamped(self, runner, patients_csv, log_args):
        """Test negative doctor count is shown as 0."""
        result = runner.invoke(
            cli, [*log_args, "roster", "show", str(patients_csv), "--doctors", "-3"]
        )

        assert result.exit_code == 0
        assert "doctors: 0" in result.output

    def test_show_invalid_csv(self, runner, tmp_path, log_args):
        """Test invalid CSV exits with code 1."""
        csv_file = tmp_path / "bad.csv"
        csv_file.write_text("type,name\nPatient,Ivan\n")

        result = runner.invoke(cli, [*log_args, "roster", "show", str(csv_file)])

        assert result.exit_code == 1
        assert "Validation Error" in result.output


class TestRosterExport:
    """Test cases for roster export."""

    def test_export_writes_file(self, runner, patients_csv, tmp_path, log_args):
        """Test export writes the line format."""
        output = tmp_path / "out.txt"

        result = runner.invoke(
            cli, [*log_args, "roster", "export", str(patients_csv), "--output", str(output)]
        )

        assert result.exit_code == 0
        assert "Exported 3 patient(s)" in result.output
        assert output.read_text(encoding="utf-8").splitlines() == [
            "Child|Marta|7|Cold|+380501112233",
            "Elder|Petro|72|Heart disease|Penicillin|Intense physical exertion",
            "Patient|Oleksii|40|Flu",
        ]

    def test_export_uses_configured_output(self, runner, patients_csv, tmp_path, log_args):
        """Test output path falls back to configuration."""
        config_file = tmp_path / "config.json"
        output = tmp_path / "configured.txt"
        config_file.write_text(json.dumps({"export": {"output_path": str(output)}}))

        result = runner.invoke(
            cli, ["--config", str(config_file), *log_args, "roster", "export", str(patients_csv)]
        )

        assert result.exit_code == 0
        assert output.exists()

    def test_export_to_missing_directory_fails(self, runner, patients_csv, tmp_path, log_args):
        """Test FileSaveError is reported with exit code 1."""
        output = tmp_path / "nonexistent_dir" / "out.txt"

        result = runner.invoke(
            cli, [*log_args, "roster", "export", str(patients_csv), "--output", str(output)]
        )

        assert result.exit_code == 1
        assert "Export failed" in result.output
        assert not output.exists()

    def test_export_rejects_separator_in_csv(self, runner, tmp_path, log_args):
        """Test a CSV value containing '|' fails before anything is written."""
        csv_file = tmp_path / "patients.csv"
        csv_file.write_text("type,name,age,disease\nPatient,Ann|Lee,30,Flu\n", encoding="utf-8")
        output = tmp_path / "out.txt"

        result = runner.invoke(
            cli, [*log_args, "roster", "export", str(csv_file), "--output", str(output)]
        )

        assert result.exit_code == 1
        assert "must not contain '|'" in result.output
        assert not output.exists()

    def test_export_writes_audit_event(self, runner, patients_csv, tmp_path):
        """Test audit event lands in the log file."""
        log_file = tmp_path / "audit.log"
        output = tmp_path / "out.txt"

        runner.invoke(
            cli,
            ["--log-file", str(log_file), "roster", "export", str(patients_csv),
             "--output", str(output)],
        )

        content = log_file.read_text(encoding="utf-8")
        assert "AUDIT [ROSTER_EXPORTED]" in content
        assert "record_count=3" in content


class TestRosterMerge:
    """Test cases for roster merge."""

    def test_merge_exports_combined_roster(self, runner, patients_csv, tmp_path, log_args):
        """Test merged roster lists first file then second file."""
        # Arrange
        second_csv = tmp_path / "riverside.csv"
        second_csv.write_text(
            "type,name,age,disease,parent_contact\nChild,Oleh,12,Injury,+380631234567\n",
            encoding="utf-8",
        )
        output = tmp_path / "merged.txt"

        # Act
        result = runner.invoke(
            cli,
            [*log_args, "roster", "merge", str(patients_csv), str(second_csv),
             "--output", str(output), "--name", "City Clinic", "--doctors", "25",
             "--other-doctors", "4"],
        )

        # Assert
        assert result.exit_code == 0
        assert "Clinic 'City Clinic + riverside'" in result.output
        assert "doctors: 29 | patients: 4" in result.output
        lines = output.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 4
        assert lines[-1] == "Child|Oleh|12|Injury|+380631234567"
