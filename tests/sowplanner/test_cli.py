"""
Unit tests for the command line entry point
"""
from datetime import date
from unittest.mock import patch

import pytest

from src.sowplanner import cli
from src.sowplanner.exceptions import BlockedPageError, FetchError, RecordStoreError
from src.sowplanner.models.plant import PlantRecord
from src.sowplanner.pipelines.batch_scrape import BatchResult
from src.sowplanner.pipelines.export import ExportResult


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("src.sowplanner.cli.setup_logging"):
        yield


class TestParseArgs:
    """Tests for argument parsing"""

    def test_single(self):
        args = cli.parse_args(["single", "--url", "http://example.com", "--output", "out.json"])
        assert args.command == "single"
        assert args.url == "http://example.com"
        assert args.output == "out.json"

    def test_batch(self):
        args = cli.parse_args(["batch", "-f", "roster.csv", "-j", "records"])
        assert (args.file, args.json_dir) == ("roster.csv", "records")

    def test_export_frost_date(self):
        args = cli.parse_args([
            "export", "-i", "roster.csv", "-o", "out.csv", "-j", "records", "--frost-date", "2025-04-30",
        ])
        assert args.frost_date == date(2025, 4, 30)

    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            cli.parse_args([])


class TestMain:
    """Tests for main"""

    def test_single_prints_json(self, capsys):
        record = PlantRecord(url="http://example.com", title="Carrot")
        with patch("src.sowplanner.cli.scrape_single", return_value=record) as mock_scrape:
            exit_code = cli.main(["single", "--url", "http://example.com"])

        assert exit_code == 0
        mock_scrape.assert_called_once_with("http://example.com", output=None)
        assert '"title": "Carrot"' in capsys.readouterr().out

    def test_single_blocked_exits_nonzero(self, capsys):
        with patch("src.sowplanner.cli.scrape_single", side_effect=BlockedPageError(url="u")):
            exit_code = cli.main(["single", "--url", "u"])

        assert exit_code == 1
        assert "blocked" in capsys.readouterr().err

    def test_single_fetch_error_exits_nonzero(self):
        with patch("src.sowplanner.cli.scrape_single", side_effect=FetchError("refused", url="u")):
            assert cli.main(["single", "--url", "u"]) == 1

    def test_batch_reports_failures(self, capsys):
        with patch("src.sowplanner.cli.BatchScraper") as mock_batch:
            mock_batch.return_value.run.return_value = BatchResult(processed=1, failed=["Basil"])
            exit_code = cli.main(["batch", "-f", "roster.csv", "-j", "records"])

        assert exit_code == 0
        mock_batch.assert_called_once_with(records_dir="records")
        assert "- Basil" in capsys.readouterr().err

    def test_export_summary(self, capsys):
        with patch("src.sowplanner.cli.ExportPipeline") as mock_export:
            mock_export.return_value.run.return_value = ExportResult(processed=3, missing=2)
            exit_code = cli.main(["export", "-i", "roster.csv", "-o", "out.csv", "-j", "records"])

        assert exit_code == 0
        mock_export.assert_called_once_with(records_dir="records", frost_date=None)
        mock_export.return_value.run.assert_called_once_with("roster.csv", "out.csv")
        assert "Processed 5 plants (2 with missing JSON data marked as ERR)" in capsys.readouterr().out

    def test_log_level_passed_to_setup(self):
        with patch("src.sowplanner.cli.setup_logging") as mock_setup, \
                patch("src.sowplanner.cli.BatchScraper") as mock_batch:
            mock_batch.return_value.run.return_value = BatchResult()
            cli.main(["--log-level", "DEBUG", "batch", "-f", "roster.csv", "-j", "records"])

        mock_setup.assert_called_once_with(level="DEBUG")

    def test_log_level_defaults_to_settings(self):
        with patch("src.sowplanner.cli.setup_logging") as mock_setup, \
                patch("src.sowplanner.cli.BatchScraper") as mock_batch:
            mock_batch.return_value.run.return_value = BatchResult()
            cli.main(["batch", "-f", "roster.csv", "-j", "records"])

        mock_setup.assert_called_once_with(level=None)

    def test_export_missing_directory(self):
        with patch("src.sowplanner.cli.ExportPipeline") as mock_export:
            mock_export.return_value.run.side_effect = RecordStoreError("Directory records does not exist")
            assert cli.main(["export", "-i", "r.csv", "-o", "o.csv", "-j", "records"]) == 1
