from click.testing import CliRunner

from prime_oracle.cli import main


def test_nth_prints_answers() -> None:
    result = CliRunner().invoke(main, ["nth", "0", "19", "99", "2000"])
    assert result.exit_code == 0, result.output
    assert "19 -> 71" in result.output
    assert "99 -> 541" in result.output
    assert "2,000 -> 17,393" in result.output


def test_nth_with_stats() -> None:
    result = CliRunner().invoke(main, ["nth", "500", "19", "--stats"])
    assert result.exit_code == 0, result.output
    assert "500 -> 3,581" in result.output
    assert "Cache hits:       1" in result.output


def test_nth_negative_index_fails() -> None:
    result = CliRunner().invoke(main, ["nth", "5", "--", "-3"])
    assert result.exit_code == 1
    assert "5 -> 13" in result.output
    assert "non-negative" in result.output


def test_first_csv() -> None:
    result = CliRunner().invoke(main, ["first", "5", "--csv"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "2,3,5,7,11"


def test_first_lines() -> None:
    result = CliRunner().invoke(main, ["first", "3"])
    assert result.exit_code == 0
    assert result.output.split() == ["2", "3", "5"]


def test_validate_passes() -> None:
    result = CliRunner().invoke(main, ["validate", "--max-index", "1000"])
    assert result.exit_code == 0, result.output
    assert "ORACLE NOMINAL" in result.output


def test_validate_with_small_segments() -> None:
    result = CliRunner().invoke(main, ["validate", "--max-index", "500",
                                       "--segment-size", "4096"])
    assert result.exit_code == 0, result.output
    assert "W=4096" in result.output


def test_info_shows_estimates() -> None:
    result = CliRunner().invoke(main, ["info", "--index", "1000000"])
    assert result.exit_code == 0, result.output
    assert "Rosser bound" in result.output
    assert "Segment width (W):     1,000,000" in result.output
