"""Tests for the poco2csla command-line interface."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from poco2csla.cli import build_parser, main
from poco2csla.config import load_config
from poco2csla.exceptions import StructuralError


CUSTOMER_POCO = """
namespace App.Models
{
    public class Customer
    {
        public string Name { get; set; }
    }
}
"""


@pytest.fixture
def poco(tmp_path: Path) -> Path:
    path = tmp_path / "Customer.cs"
    path.write_text(CUSTOMER_POCO, encoding="utf-8")
    return path


class TestArgumentParsing:
    """Test the argparse surface."""

    def test_version_in_description(self):
        parser = build_parser("9.9.9")

        assert parser.description == "poco2csla v9.9.9"

    def test_defaults(self, poco):
        args = build_parser("1.0").parse_args([str(poco)])

        assert args.input_file == poco
        assert args.dest is None
        assert args.types is None
        assert args.namespace is None

    def test_repeatable_types(self, poco):
        args = build_parser("1.0").parse_args(
            [str(poco), "--type", "bo", "info", "-t", "RL", "--t", "EL"]
        )

        assert args.types == ["BO", "Info", "RL", "EL"]

    def test_dest_aliases(self, poco, tmp_path):
        for flag in ("-d", "--dest", "--d"):
            args = build_parser("1.0").parse_args([str(poco), flag, str(tmp_path)])
            assert args.dest == str(tmp_path)

    def test_missing_input_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser("1.0").parse_args([str(tmp_path / "Missing.cs")])

        assert exc_info.value.code == 2
        assert "File does not exist" in capsys.readouterr().err

    def test_invalid_type_token(self, poco, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser("1.0").parse_args([str(poco), "-t", "DTO"])

        assert exc_info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err


class TestMain:
    """Test running the command end to end in-process."""

    def test_generates_requested_variants(self, poco, tmp_path, capsys):
        out_dir = tmp_path / "out"
        out_dir.mkdir()

        code = main([str(poco), "-d", str(out_dir), "-t", "BO", "RL"], version="1.0")

        assert code == 0
        assert sorted(p.name for p in out_dir.iterdir()) == ["CustomerBO.cs", "CustomerRL.cs"]
        assert str(out_dir / "CustomerBO.cs") in capsys.readouterr().out

    def test_json_output(self, poco, tmp_path, capsys):
        out_dir = tmp_path / "out"
        out_dir.mkdir()

        code = main(
            [str(poco), "-d", str(out_dir), "-t", "Info", "-n", "Other.Ns", "--json"],
            version="1.0",
        )

        output = json.loads(capsys.readouterr().out)
        assert code == 0
        assert output["status"] == "success"
        assert output["class_name"] == "Customer"
        assert output["namespace"] == "Other.Ns"
        assert output["files"] == [str(out_dir / "CustomerInfo.cs")]

    def test_core_failure_returns_1(self, poco, tmp_path, capsys):
        with patch(
            "poco2csla.cli.GenerationOrchestrator.generate",
            side_effect=StructuralError("no namespace"),
        ):
            code = main([str(poco), "-d", str(tmp_path), "--json"], version="1.0")

        assert code == 1
        assert json.loads(capsys.readouterr().out) == {"status": "error", "error": "no namespace"}

    def test_uses_config_file(self, poco, tmp_path):
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        config_file = tmp_path / "poco2csla.yaml"
        config_file.write_text("generation:\n  file_extension: .g.cs\n")

        code = main(
            [str(poco), "-d", str(out_dir), "-t", "EL", "--config", str(config_file)],
            version="1.0",
        )

        assert code == 0
        assert (out_dir / "CustomerEL.g.cs").is_file()

    def test_invalid_config_exits_2(self, poco, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(poco), "--config", str(tmp_path / "missing.yaml")], version="1.0")

        assert exc_info.value.code == 2

    def test_empty_namespace_rejected(self, poco, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(poco), "-n", ""], version="1.0")

        assert exc_info.value.code == 2
        assert "namespace must not be empty" in capsys.readouterr().err

    def test_save_config(self, poco, tmp_path):
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        config_file = tmp_path / "poco2csla.yaml"
        config_file.write_text("destination:\n  objects_directory: Entities\n")
        saved = tmp_path / "saved" / "effective.yaml"

        code = main(
            [str(poco), "-d", str(out_dir), "-t", "BO", "--config", str(config_file),
             "--save-config", str(saved)],
            version="1.0",
        )

        assert code == 0
        assert load_config(str(saved)) == load_config(str(config_file))
        assert (out_dir / "CustomerBO.cs").is_file()
