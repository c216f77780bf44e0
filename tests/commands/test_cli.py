"""Tests for the pennybook CLI and interactive menu.

Uses typer's CliRunner to invoke commands in-process against a ledger file
in a temporary directory.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from pennybook.cli import app
from pennybook.domain.codec import HEADER
from pennybook.domain.models import Record
from pennybook.store import load_records, save_records

SAMPLE = [
    Record(date="2024-01-15", amount=200.0, category="Salary", note="january"),
    Record(date="2024-01-20", amount=-50.0, category="Food", note="groceries, weekly"),
    Record(date="2024-02-01", amount=10.0, category="Gift", note=""),
]


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the user's config and environment out of the tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("PENNYBOOK_FILE", raising=False)
    monkeypatch.delenv("PENNYBOOK_LOG_LEVEL", raising=False)


@pytest.fixture
def data_path(tmp_path: Path) -> Path:
    return tmp_path / "data.csv"


@pytest.fixture
def sample_path(data_path: Path) -> Path:
    save_records(SAMPLE, data_path)
    return data_path


class TestAddCommand:
    """Tests for the add command."""

    def test_adds_record(self, runner: CliRunner, data_path: Path) -> None:
        """Should append the record and write the file."""
        result = runner.invoke(
            app,
            ["--file", str(data_path), "add", "--date", "2024-01-05", "--amount=-42.50", "-c", "Food", "-n", "lunch"],
        )

        assert result.exit_code == 0
        assert "Record added" in result.output
        assert load_records(data_path) == [Record("2024-01-05", -42.5, "Food", "lunch")]

    def test_blank_category_is_uncategorized(self, runner: CliRunner, data_path: Path) -> None:
        """Should store a blank category as Uncategorized."""
        result = runner.invoke(app, ["--file", str(data_path), "add", "--date", "2024-01-05", "--amount", "10"])

        assert result.exit_code == 0
        assert load_records(data_path)[0].category == "Uncategorized"

    def test_blank_date_is_today(self, runner: CliRunner, data_path: Path) -> None:
        """Should default the date to today."""
        from pennybook.dates import today

        result = runner.invoke(app, ["--file", str(data_path), "add", "--amount", "10"])

        assert result.exit_code == 0
        assert load_records(data_path)[0].date == today()

    def test_invalid_amount_aborts(self, runner: CliRunner, sample_path: Path) -> None:
        """Should exit 1 and leave the file untouched."""
        before = sample_path.read_text()

        result = runner.invoke(app, ["--file", str(sample_path), "add", "--date", "2024-03-01", "--amount", "abc"])

        assert result.exit_code == 1
        assert "Invalid amount. Aborting add." in result.output
        assert sample_path.read_text() == before

    def test_invalid_date_aborts(self, runner: CliRunner, data_path: Path) -> None:
        """Should exit 1 without creating the file."""
        result = runner.invoke(app, ["--file", str(data_path), "add", "--date", "someday", "--amount", "5"])

        assert result.exit_code == 1
        assert "Invalid date" in result.output
        assert not data_path.exists()

    def test_note_with_line_break_stays_one_record(self, runner: CliRunner, data_path: Path) -> None:
        """Should write a note containing a newline as a single record."""
        result = runner.invoke(
            app,
            ["--file", str(data_path), "add", "--date", "2024-01-05", "--amount", "-1", "-n", "x\n2024-01-06,999,Injected,"],
        )

        assert result.exit_code == 0
        assert load_records(data_path) == [Record("2024-01-05", -1.0, "Uncategorized", "x 2024-01-06,999,Injected,")]
        assert len(data_path.read_text().splitlines()) == 2

    def test_category_is_stored_as_typed(self, runner: CliRunner, data_path: Path) -> None:
        """Should not strip whitespace around the category."""
        result = runner.invoke(app, ["--file", str(data_path), "add", "--date", "2024-01-05", "--amount", "3", "-c", " Food "])

        assert result.exit_code == 0
        assert load_records(data_path)[0].category == " Food "


class TestListCommand:
    """Tests for the list command."""

    def test_lists_all(self, runner: CliRunner, sample_path: Path) -> None:
        """Should show every record with two-decimal amounts."""
        result = runner.invoke(app, ["--file", str(sample_path), "list"])

        assert result.exit_code == 0
        assert "Date        Amount      Category       Note" in result.output
        assert "2024-01-20  -50.00      Food           groceries, weekly" in result.output
        assert "2024-02-01" in result.output

    def test_prints_emoji_codes_literally(self, runner: CliRunner, data_path: Path) -> None:
        """Should print :name: text in notes as typed."""
        save_records([Record("2024-01-05", 1.0, "Food", ":pizza: night")], data_path)

        result = runner.invoke(app, ["--file", str(data_path), "list"])

        assert result.exit_code == 0
        assert ":pizza: night" in result.output

    def test_empty_ledger(self, runner: CliRunner, data_path: Path) -> None:
        """Should say so when there is nothing to list."""
        result = runner.invoke(app, ["--file", str(data_path), "list"])

        assert result.exit_code == 0
        assert "No records found." in result.output

    def test_filters_by_date_and_category(self, runner: CliRunner, sample_path: Path) -> None:
        """Should apply the date range and exact category."""
        result = runner.invoke(
            app, ["--file", str(sample_path), "list", "--from", "2024-01-16", "--to", "2024-01-31", "-c", "Food"]
        )

        assert "2024-01-20" in result.output
        assert "2024-01-15" not in result.output
        assert "2024-02-01" not in result.output

    def test_category_is_case_sensitive(self, runner: CliRunner, sample_path: Path) -> None:
        """Should not match a category in a different case."""
        result = runner.invoke(app, ["--file", str(sample_path), "list", "-c", "food"])

        assert "No records found." in result.output

    def test_month_filter(self, runner: CliRunner, sample_path: Path) -> None:
        """Should list a single month."""
        result = runner.invoke(app, ["--file", str(sample_path), "list", "--month", "2024-02"])

        assert "2024-02-01" in result.output
        assert "2024-01-15" not in result.output

    def test_invalid_month(self, runner: CliRunner, sample_path: Path) -> None:
        """Should reject a malformed month."""
        result = runner.invoke(app, ["--file", str(sample_path), "list", "--month", "2024-13"])

        assert result.exit_code == 1

    def test_summary_flag(self, runner: CliRunner, sample_path: Path) -> None:
        """Should print totals for the listed records."""
        result = runner.invoke(app, ["--file", str(sample_path), "list", "--month", "2024-01", "--summary"])

        assert "Total income : 200.00" in result.output
        assert "Total expense: 50.00" in result.output
        assert "Net balance  : 150.00" in result.output


class TestSummaryCommands:
    """Tests for the summary and monthly commands."""

    def test_summary(self, runner: CliRunner, sample_path: Path) -> None:
        """Should total the whole ledger."""
        result = runner.invoke(app, ["--file", str(sample_path), "summary"])

        assert result.exit_code == 0
        assert "Total income : 210.00" in result.output
        assert "Total expense: 50.00" in result.output
        assert "Net balance  : 160.00" in result.output

    def test_monthly(self, runner: CliRunner, sample_path: Path) -> None:
        """Should show one row per month in order."""
        result = runner.invoke(app, ["--file", str(sample_path), "monthly"])

        assert result.exit_code == 0
        assert "2024-01   200.00      50.00       150.00" in result.output
        assert "2024-02   10.00       0.00        10.00" in result.output
        assert result.output.index("2024-01") < result.output.index("2024-02")


class TestExportCommand:
    """Tests for the export command."""

    def test_exports_all_records(self, runner: CliRunner, sample_path: Path, tmp_path: Path) -> None:
        """Should write every record and report the count."""
        target = tmp_path / "export.csv"

        result = runner.invoke(app, ["--file", str(sample_path), "export", str(target)])

        assert result.exit_code == 0
        assert "Exported 3 records to" in result.output
        assert target.read_text().startswith(HEADER + "\n")
        assert load_records(target) == SAMPLE

    def test_empty_filename(self, runner: CliRunner, sample_path: Path) -> None:
        """Should refuse an empty filename."""
        result = runner.invoke(app, ["--file", str(sample_path), "export", ""])

        assert result.exit_code == 1
        assert "Invalid filename." in result.output


class TestInitCommand:
    """Tests for the init command."""

    def test_creates_config(self, runner: CliRunner, tmp_path: Path) -> None:
        """Should write the config file under XDG_CONFIG_HOME."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert (tmp_path / "config" / "pennybook" / "config.toml").exists()

    def test_refuses_overwrite(self, runner: CliRunner) -> None:
        """Should fail without --force when a config exists."""
        runner.invoke(app, ["init"])

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_force_overwrites(self, runner: CliRunner) -> None:
        """Should overwrite with --force."""
        runner.invoke(app, ["init"])

        result = runner.invoke(app, ["init", "--force"])

        assert result.exit_code == 0


class TestShell:
    """Tests for the interactive menu."""

    def test_add_through_menu(self, runner: CliRunner, data_path: Path) -> None:
        """Should add a record from prompted values."""
        user_input = "1\n2024-01-05\n-42.50\n\nweekly shop\n0\n"

        result = runner.invoke(app, ["--file", str(data_path)], input=user_input)

        assert result.exit_code == 0
        assert load_records(data_path) == [Record("2024-01-05", -42.5, "Uncategorized", "weekly shop")]

    def test_invalid_amount_through_menu(self, runner: CliRunner, data_path: Path) -> None:
        """Should abort the add and keep running."""
        user_input = "1\n2024-01-05\nlots\nFood\n\n0\n"

        result = runner.invoke(app, ["--file", str(data_path), "shell"], input=user_input)

        assert result.exit_code == 0
        assert "Invalid amount. Aborting add." in result.output
        assert not data_path.exists()

    def test_filtered_list_with_summary(self, runner: CliRunner, sample_path: Path) -> None:
        """Should filter by category and show totals for the view."""
        user_input = "2\nn\ny\nFood\ny\n0\n"

        result = runner.invoke(app, ["--file", str(sample_path)], input=user_input)

        assert "groceries, weekly" in result.output
        assert "january" not in result.output
        assert "Total expense: 50.00" in result.output

    def test_export_with_blank_filename(self, runner: CliRunner, sample_path: Path) -> None:
        """Should report an invalid filename and continue."""
        result = runner.invoke(app, ["--file", str(sample_path)], input="5\n\n0\n")

        assert result.exit_code == 0
        assert "Invalid filename." in result.output

    def test_invalid_choice(self, runner: CliRunner, data_path: Path) -> None:
        """Should reject unknown menu entries."""
        result = runner.invoke(app, ["--file", str(data_path)], input="9\n0\n")

        assert "Invalid choice" in result.output

    def test_end_of_input_exits(self, runner: CliRunner, data_path: Path) -> None:
        """Should leave the menu cleanly when input runs out."""
        result = runner.invoke(app, ["--file", str(data_path)], input="")

        assert result.exit_code == 0
        assert "Goodbye." in result.output
