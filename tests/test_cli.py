"""
Tests for the command-line interface.
"""

import json

import pytest
from labcompounds.cli import LabCompoundsCLI, main, parse_element_arg
from labcompounds.compounds import ElementSpec, InvalidElementsError, InvalidFilterError
from loguru import logger


class TestParseElementArg:
    """Test suite for element argument parsing."""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("H:2", [ElementSpec("H", 2)]),
            ("Na", [ElementSpec("Na", 1)]),
            ("CO2", [ElementSpec("C", 1), ElementSpec("O", 2)]),
            ("H₂O", [ElementSpec("H", 2), ElementSpec("O", 1)]),
        ],
    )
    def test_valid(self, token, expected):
        assert parse_element_arg(token) == expected

    @pytest.mark.parametrize("token", ["H:x", "H:0", ":2", "h", ""])
    def test_invalid(self, token):
        with pytest.raises(InvalidElementsError):
            parse_element_arg(token)


class TestLabCompoundsCLI:
    """Test suite for CLI commands."""

    @pytest.fixture
    def cli(self):
        return LabCompoundsCLI()

    def test_match_table_output(self, cli):
        """Test the default text output lists ranked candidates."""
        output = cli.match("H:2", "O:1")

        assert "H₂O" in output
        assert "Hydrogen Peroxide" in output
        assert output.index("H₂O₂") > output.index("Water")

    def test_match_formula_argument(self, cli):
        """Test a formula argument expands to element counts."""
        payload = json.loads(cli.match("CO2", as_json=True))

        assert payload["compounds"][0]["formula"] == "CO₂"
        assert payload["compounds"][0]["score"] == 1.0

    def test_match_limit(self, cli):
        """Test limit caps the result."""
        payload = json.loads(cli.match("N:2", "O:4", limit=2, as_json=True))

        assert payload["count"] == 2

    def test_match_nothing(self, cli):
        """Test unknown elements report an empty result."""
        assert cli.match("Xx:5") == "No matching compounds."
        assert json.loads(cli.match("Xx:5", as_json=True))["count"] == 0

    def test_find(self, cli):
        """Test compound lookup by formula."""
        data = json.loads(cli.find("H2O2"))

        assert data["name"] == "Hydrogen Peroxide"

    def test_find_unknown(self, cli):
        """Test unknown formulas raise."""
        with pytest.raises(InvalidElementsError):
            cli.find("XYZ")

    def test_table(self, cli):
        """Test the table listing."""
        output = cli.table()

        assert "NaCl" in output
        assert "Fe₂O₃" in output

    def test_custom_table(self, tmp_path):
        """Test --table_csv swaps the reference table."""
        path = tmp_path / "custom.csv"
        path.write_text("formula,name\nXY2,Testium\n", encoding="utf-8")

        payload = json.loads(LabCompoundsCLI(table_csv=str(path)).match("X:1", "Y:2", as_json=True))

        assert [c["name"] for c in payload["compounds"]] == ["Testium"]


class TestMatchFilters:
    """Test suite for match options that narrow the result."""

    @pytest.fixture
    def cli(self):
        return LabCompoundsCLI()

    def test_only_buckets(self, cli):
        """Test --only keeps the named ratioMatch buckets."""
        payload = json.loads(cli.match("N:2", "O:4", only="good,fair", as_json=True))

        assert payload["count"] == 5
        assert {c["ratioMatch"] for c in payload["compounds"]} == {"good", "fair"}

    def test_only_as_sequence(self, cli):
        """Test fire's tuple form of a comma list is accepted."""
        output = cli.match("N:2", "O:4", only=("poor",))

        assert "Nitric Oxide" in output
        assert "N₂O₄" not in output

    def test_safety(self, cli):
        """Test --safety keeps the named safety levels."""
        payload = json.loads(cli.match("N:2", "O:4", safety="caution", as_json=True))

        assert [c["formula"] for c in payload["compounds"]] == ["N₂O", "NO"]

    def test_filters_can_empty_the_result(self, cli):
        """Test filtering everything away reports no matches."""
        assert cli.match("H:2", "O:1", only="poor") == "No matching compounds."

    def test_unknown_bucket(self, cli):
        """Test an unknown bucket raises."""
        with pytest.raises(InvalidFilterError):
            cli.match("H:2", "O:1", only="great")

    def test_negative_limit(self, cli):
        """Test a negative limit is rejected, not applied as a slice."""
        with pytest.raises(ValueError):
            cli.match("N:2", "O:4", limit=-1, as_json=True)


class TestMain:
    """Test suite for the console entry point."""

    @pytest.fixture(autouse=True)
    def reset_logging(self):
        yield
        logger.remove()
        logger.disable("labcompounds")

    def test_main_match(self, capsys):
        """Test fire dispatch prints the payload."""
        main(["match", "H:2", "O:1", "--as_json"])

        payload = json.loads(capsys.readouterr().out)
        assert payload["compounds"][0]["formula"] == "H₂O"

    def test_main_only(self, capsys):
        """Test --only is passed through fire."""
        main(["match", "N:2", "O:4", "--only", "good", "--as_json"])

        payload = json.loads(capsys.readouterr().out)
        assert payload["count"] == 3

    def test_main_error_exits(self):
        """Test library errors exit with status 1."""
        with pytest.raises(SystemExit) as excinfo:
            main(["find", "XYZ"])

        assert excinfo.value.code == 1

    def test_main_negative_limit_exits(self, capsys):
        """Test a negative limit exits with status 1 and prints no payload."""
        with pytest.raises(SystemExit) as excinfo:
            main(["match", "N:2", "O:4", "--limit", "-1", "--as_json"])

        assert excinfo.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "must not be negative" in captured.err

    def test_verbose_logs_matches(self, capsys):
        """Test --verbose sends debug lines to stderr."""
        main(["--verbose", "match", "H:2", "O:1"])

        assert "Matched 2 candidates for H, O" in capsys.readouterr().err

    def test_cli_construction_leaves_logging_alone(self):
        """Test building the CLI object does not replace log sinks."""
        handler_id = logger.add(lambda message: None)

        LabCompoundsCLI()

        logger.remove(handler_id)
