from __future__ import annotations

from pathlib import Path

import pytest

from syntaxsakura import config
from syntaxsakura.cards import Color


def _write(tmp_path: Path, lines: list[str]) -> Path:
    path = tmp_path / "deck.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def _card_lines() -> list[str]:
    return [f"{rank}_{'rgbw'[rank % 4]}" for rank in range(1, 21)]


def test_load_config_reads_players_and_cards(config_file: Path) -> None:
    loaded = config.load_config(config_file)
    assert loaded.path == config_file
    assert loaded.player_count == 2
    assert len(loaded.cards) == 20
    assert loaded.cards[0].code == "1_r"
    assert loaded.cards[1].code == "11_b"
    assert loaded.cards[1].color is Color.BLUE


def test_load_config_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "nope.txt"
    with pytest.raises(config.CannotOpenConfig) as excinfo:
        config.load_config(missing)
    assert excinfo.value.exit_code == config.CANNOT_OPEN_FILE
    assert excinfo.value.message == f"Error: Cannot open file: {missing}"


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["ESQ", "2", *_card_lines()],
        ["esp", "2", *_card_lines()],
        ["ESP"],
        ["ESP", "two", *_card_lines()],
        ["ESP", "2", *_card_lines()[:19]],
        ["ESP", "2", "5_x", *_card_lines()[1:]],
        ["ESP", "2", "5r", *_card_lines()[1:]],
        ["ESP", "2", "0_r", *_card_lines()[1:]],
        ["ESP", "2", "121_r", *_card_lines()[1:]],
    ],
)
def test_load_config_rejects_malformed_files(tmp_path: Path, lines: list[str]) -> None:
    path = _write(tmp_path, lines)
    with pytest.raises(config.InvalidConfig) as excinfo:
        config.load_config(path)
    assert excinfo.value.exit_code == config.INVALID_FILE
    assert excinfo.value.message == f"Error: Invalid file: {path}"


def test_load_config_tolerates_windows_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "deck.txt"
    path.write_bytes(("\r\n".join(["ESP", "2", *_card_lines()]) + "\r\n").encode())
    loaded = config.load_config(path)
    assert loaded.cards[-1].code == "20_r"


def test_player_count_is_informational(tmp_path: Path) -> None:
    loaded = config.load_config(_write(tmp_path, ["ESP", "4", *_card_lines()]))
    assert loaded.player_count == 4
    assert len(loaded.cards) == 20


def test_append_results_appends_report(config_file: Path) -> None:
    before = config_file.read_text(encoding="utf-8")
    assert config.append_results(config_file, "Player 1: 3 points\n")
    assert config_file.read_text(encoding="utf-8") == before + "Player 1: 3 points\n"


def test_append_results_reports_failure(tmp_path: Path) -> None:
    assert not config.append_results(tmp_path / "missing" / "deck.txt", "report\n")


def test_load_config_accepts_highest_choosable_rank(tmp_path: Path) -> None:
    loaded = config.load_config(_write(tmp_path, ["ESP", "2", "120_w", *_card_lines()[1:]]))
    assert loaded.cards[0].rank == 120
