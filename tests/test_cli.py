import json
from pathlib import Path

import yaml

from cli.main import build_parser, main


def _config(tmp_path: Path) -> Path:
    path = tmp_path / "dosname.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "profiles": {
                    "emulator": {"rename": True, "truncate": True},
                    "listing": {"rename": True, "truncate": False},
                }
            }
        ),
        encoding="utf-8",
    )
    return path


def test_cli_parsing():
    parser = build_parser()
    args = parser.parse_args(["readme.txt", "--profile", "listing", "--strict"])
    assert args.names == ["readme.txt"]
    assert args.profile == "listing"
    assert args.strict is True
    assert args.listing is None


def test_cli_prints_dos_names(tmp_path: Path, capsys):
    code = main(["--config", str(_config(tmp_path)), "GAME.EXE", "résumé 01.zip"])
    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out == ["GAME.EXE", "RESUME~1.ZIP"]


def test_cli_strict_exit_code(tmp_path: Path):
    assert main(["--config", str(_config(tmp_path)), "--strict", "readme.txt"]) == 2
    assert main(["--config", str(_config(tmp_path)), "--strict", "README.TXT"]) == 0


def test_cli_listing_file_json(tmp_path: Path, capsys):
    listing = tmp_path / "content.txt"
    listing.write_bytes("SETUP.EXE\r\nlong filename.txt\r\n".encode("utf-8"))
    code = main(["--config", str(_config(tmp_path)), "--profile", "listing", "--listing", str(listing), "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["profile"] == "listing"
    assert [n["dos_name"] for n in payload["names"]] == ["SETUP.EXE", "LONG_FILENAME.TXT"]


def test_cli_empty_name_is_error(tmp_path: Path):
    assert main(["--config", str(_config(tmp_path)), "  "]) == 1


def test_cli_config_error(tmp_path: Path, capsys):
    code = main(["--config", str(tmp_path / "nope.yaml"), "a.txt"])
    assert code == 3
    assert "Configuration not found" in capsys.readouterr().err


def test_cli_unknown_profile(tmp_path: Path, capsys):
    code = main(["--config", str(_config(tmp_path)), "--profile", "amiga", "a.txt"])
    assert code == 3
    assert "Available: emulator, listing" in capsys.readouterr().err


def test_cli_report(tmp_path: Path, capsys):
    code = main(["--config", str(_config(tmp_path)), "--report", "--technical", "Γεåd.më"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Γεåd.më -> XXAD.ME | WARNING" in out
    assert "placeholder_used" in out


def test_cli_missing_listing_file(tmp_path: Path, capsys):
    code = main(["--config", str(_config(tmp_path)), "--listing", str(tmp_path / "absent.txt")])
    assert code == 4
    assert "cannot read listing" in capsys.readouterr().err


def test_cli_find_binary(tmp_path: Path, capsys):
    listing = tmp_path / "content.txt"
    listing.write_text("readme.txt\nRUN.BAT\napp.com\n", encoding="utf-8")
    code = main(["--config", str(_config(tmp_path)), "--listing", str(listing), "--find-binary", "game.zip"])
    assert code == 0
    assert capsys.readouterr().out.strip() == "RUN.BAT"


def test_cli_find_binary_none(tmp_path: Path, capsys):
    listing = tmp_path / "content.txt"
    listing.write_text("readme.txt\n", encoding="utf-8")
    code = main(["--config", str(_config(tmp_path)), "--listing", str(listing), "--find-binary", "game.zip"])
    assert code == 1
    assert capsys.readouterr().out == ""
