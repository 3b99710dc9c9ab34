"""Tests for the floatq8 command line interface."""

from pathlib import Path

import numpy as np
import pytest

from floatq8.api import load_samples, save_samples
from floatq8.cli import build_parser, main
from floatq8.config import CONFIG_ENV


@pytest.fixture(autouse=True)
def no_env_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user configuration out of CLI tests."""
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path / "home"))


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Write a small .npy sample file."""
    path = tmp_path / "samples.npy"
    save_samples(path, np.array([1.0, 2.0, 3.0, 4.0, 5.0], dtype=np.float32))
    return path


class TestParser:
    """Test argument parsing."""

    def test_requires_command(self) -> None:
        """Test that a subcommand is required."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_encode_args(self) -> None:
        """Test encode options."""
        args = build_parser().parse_args(["encode", "in.npy", "-o", "out.q8", "--verify"])
        assert args.command == "encode"
        assert args.src == Path("in.npy")
        assert args.output == Path("out.q8")
        assert args.verify is True


class TestCommands:
    """Test subcommands end to end."""

    def test_encode_decode(self, sample_file: Path, tmp_path: Path, capsys) -> None:
        """Test encode then decode through the CLI."""
        assert main(["encode", str(sample_file)]) == 0
        encoded = tmp_path / "samples.q8"
        assert encoded.stat().st_size == 13
        assert str(encoded) in capsys.readouterr().out

        out = tmp_path / "recon.npy"
        assert main(["decode", str(encoded), "-o", str(out)]) == 0
        recon = load_samples(out)
        np.testing.assert_allclose(recon, [1.0, 2.0, 3.0, 4.0, 5.0], atol=0.1)
        assert recon[0] == 1.0
        assert recon[4] == 5.0

    def test_encode_verify(self, sample_file: Path) -> None:
        """Test encode with verification."""
        assert main(["encode", str(sample_file), "--verify"]) == 0

    def test_info(self, sample_file: Path, tmp_path: Path, capsys) -> None:
        """Test header printing."""
        main(["encode", str(sample_file)])
        capsys.readouterr()
        assert main(["info", str(tmp_path / "samples.q8")]) == 0
        out = capsys.readouterr().out
        assert "count" in out
        assert "5" in out
        assert "min" in out

    def test_stats(self, sample_file: Path, capsys) -> None:
        """Test round-trip statistics printing."""
        assert main(["stats", str(sample_file), "--cycles", "2"]) == 0
        out = capsys.readouterr().out
        assert "max_abs_error" in out
        assert "within_bound" in out
        assert "True" in out

    def test_config_suffix(self, sample_file: Path, tmp_path: Path) -> None:
        """Test the configured suffix is used for default outputs."""
        config = tmp_path / "cfg.toml"
        config.write_text('[floatq8]\nencoded_suffix = ".u8"\n')
        assert main(["--config", str(config), "encode", str(sample_file)]) == 0
        assert (tmp_path / "samples.u8").exists()


class TestFailures:
    """Test error exit codes."""

    def test_truncated_input(self, tmp_path: Path, caplog) -> None:
        """Test decoding a truncated file fails cleanly."""
        bad = tmp_path / "bad.q8"
        bad.write_bytes(b"\x00\x01")
        assert main(["decode", str(bad)]) == 1
        assert "Buffer too short" in caplog.text

    def test_empty_input(self, tmp_path: Path) -> None:
        """Test encoding an empty file fails cleanly."""
        src = tmp_path / "empty.f32"
        src.write_bytes(b"")
        assert main(["encode", str(src)]) == 1
        assert not (tmp_path / "empty.q8").exists()

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing source file."""
        assert main(["info", str(tmp_path / "missing.q8")]) == 1

    def test_missing_config(self, sample_file: Path, tmp_path: Path) -> None:
        """Test a missing explicit config file."""
        assert main(["--config", str(tmp_path / "none.toml"), "encode", str(sample_file)]) == 1

    def test_encode_would_overwrite_input(self, tmp_path: Path) -> None:
        """Test encoding a raw file named *.q8 fails and leaves it intact."""
        src = tmp_path / "raw.q8"
        save_samples(src, np.arange(4, dtype=np.float32))
        before = src.read_bytes()
        assert main(["encode", str(src)]) == 1
        assert src.read_bytes() == before
