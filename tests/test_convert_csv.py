"""Tests for romantic.convert_csv module."""
import pandas as pd
import pytest

from romantic import convert_csv_column


@pytest.fixture
def numbers_csv(tmp_path):
    path = tmp_path / "subquestions.csv"
    path.write_text("student_id,subquestion,score\nabc123,1,2.5\ndef456,4,\nghi789,,1\n")
    return path


@pytest.fixture
def numerals_csv(tmp_path):
    path = tmp_path / "numerals.csv"
    path.write_text("student_id,subquestion\nabc123,IX\ndef456,MMXXII\n")
    return path


class TestToRoman:
    """Test converting integer columns to numerals."""

    def test_default_output_path(self, numbers_csv):
        output = convert_csv_column(numbers_csv, "subquestion", "roman")
        assert output == numbers_csv.with_name("subquestions_converted.csv")
        assert output.is_file()

    def test_values(self, numbers_csv):
        output = convert_csv_column(numbers_csv, "subquestion", "roman")
        df = pd.read_csv(output, dtype={"subquestion": str})
        assert df["subquestion"].iloc[0] == "I"
        assert df["subquestion"].iloc[1] == "IV"
        assert pd.isna(df["subquestion"].iloc[2])

    def test_other_columns_unchanged(self, numbers_csv):
        output = convert_csv_column(numbers_csv, "subquestion", "roman")
        df = pd.read_csv(output)
        assert list(df.columns) == ["student_id", "subquestion", "score"]
        assert list(df["student_id"]) == ["abc123", "def456", "ghi789"]

    def test_custom_alphabet(self, numbers_csv, tmp_path):
        output = convert_csv_column(numbers_csv, "subquestion", "roman",
                                    output_path=tmp_path / "out" / "custom.csv", alphabet="AB")
        df = pd.read_csv(output, dtype={"subquestion": str})
        assert list(df["subquestion"].iloc[:2]) == ["A", "AB"]

    def test_float_formatted_integers(self, tmp_path):
        """Whole-number floats written by pandas for columns with gaps should convert."""
        path = tmp_path / "gaps.csv"
        path.write_text("student_id,subquestion\nabc123,1.0\ndef456,\nghi789,2.0\n")
        output = convert_csv_column(path, "subquestion", "roman")
        df = pd.read_csv(output, dtype={"subquestion": str})
        assert df["subquestion"].iloc[0] == "I"
        assert pd.isna(df["subquestion"].iloc[1])
        assert df["subquestion"].iloc[2] == "II"

    def test_fractional_number_raises(self, tmp_path):
        path = tmp_path / "fraction.csv"
        path.write_text("subquestion\n1.0\n1.5\n")
        with pytest.raises(ValueError, match="Row 2.*whole number"):
            convert_csv_column(path, "subquestion", "roman")


class TestToInt:
    """Test converting numeral columns to integers."""

    def test_values(self, numerals_csv):
        output = convert_csv_column(numerals_csv, "subquestion", "int")
        df = pd.read_csv(output)
        assert list(df["subquestion"]) == [9, 2022]

    def test_overflow_reports_row(self, numerals_csv):
        with pytest.raises(ValueError, match="Row 2"):
            convert_csv_column(numerals_csv, "subquestion", "int", kind="i8")

    def test_nothing_written_on_error(self, numerals_csv):
        with pytest.raises(ValueError):
            convert_csv_column(numerals_csv, "subquestion", "int", kind="i8")
        assert not numerals_csv.with_name("numerals_converted.csv").exists()


class TestErrors:
    """Test invalid inputs."""

    def test_missing_column(self, numbers_csv):
        with pytest.raises(ValueError, match="not found"):
            convert_csv_column(numbers_csv, "problem", "roman")

    def test_unknown_target(self, numbers_csv):
        with pytest.raises(ValueError, match="Unknown conversion target"):
            convert_csv_column(numbers_csv, "subquestion", "hex")

    def test_not_a_csv(self, tmp_path):
        with pytest.raises(ValueError, match="not a valid CSV"):
            convert_csv_column(tmp_path / "missing.csv", "subquestion", "roman")

    def test_invalid_number(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("subquestion\n1\n-3\n")
        with pytest.raises(ValueError, match="Row 2.*cannot be negative"):
            convert_csv_column(path, "subquestion", "roman")
