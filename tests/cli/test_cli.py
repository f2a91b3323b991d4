#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the huffxor command-line interface."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from huffxor.cli import main as cli_main


class TestCliGroup:
    """Test the top-level group."""

    def test_help(self) -> None:
        result = CliRunner().invoke(cli_main, ["--help"])
        assert result.exit_code == 0
        for command in ["compress", "decompress", "xor", "pipeline", "inspect"]:
            assert command in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli_main, ["--version"])
        assert result.exit_code == 0
        assert "huffxor version" in result.output


class TestCompressCommand:
    """Test 'huffxor compress' and 'huffxor decompress'."""

    def test_round_trip(self, tmp_path: Path, sample_file: Path, sample_bytes: bytes) -> None:
        archive = tmp_path / "out.hxf"
        restored = tmp_path / "restored.txt"
        runner = CliRunner()

        result = runner.invoke(cli_main, ["compress", str(sample_file), str(archive)])
        assert result.exit_code == 0, result.output
        assert "Compressed" in result.output

        result = runner.invoke(cli_main, ["decompress", str(archive), str(restored)])
        assert result.exit_code == 0, result.output
        assert restored.read_bytes() == sample_bytes

    def test_round_trip_with_xor_key(self, tmp_path: Path, sample_file: Path, sample_bytes: bytes) -> None:
        archive = tmp_path / "out.hxf"
        restored = tmp_path / "restored.txt"
        runner = CliRunner()

        result = runner.invoke(cli_main, ["compress", str(sample_file), str(archive), "--xor-key", "s3cret"])
        assert result.exit_code == 0, result.output

        result = runner.invoke(cli_main, ["decompress", str(archive), str(restored), "--xor-key", "wrong"])
        assert result.exit_code != 0
        assert not restored.exists()

        result = runner.invoke(cli_main, ["decompress", str(archive), str(restored), "--xor-key", "s3cret"])
        assert result.exit_code == 0, result.output
        assert restored.read_bytes() == sample_bytes

    @patch.dict(os.environ, {"HUFFXOR_XOR_KEY": "env-key"})
    def test_xor_flag_uses_configured_key(
        self, tmp_path: Path, sample_file: Path, sample_bytes: bytes
    ) -> None:
        archive = tmp_path / "out.hxf"
        restored = tmp_path / "restored.txt"
        runner = CliRunner()

        result = runner.invoke(cli_main, ["compress", str(sample_file), str(archive), "--xor"])
        assert result.exit_code == 0, result.output

        result = runner.invoke(cli_main, ["decompress", str(archive), str(restored)])
        assert result.exit_code == 0, result.output
        assert restored.read_bytes() == sample_bytes

    def test_raw(self, tmp_path: Path) -> None:
        source = tmp_path / "aaab.txt"
        source.write_bytes(b"aaab")
        raw = tmp_path / "out.huf"

        result = CliRunner().invoke(cli_main, ["compress", str(source), str(raw), "--raw"])

        assert result.exit_code == 0, result.output
        assert raw.read_bytes() == b"\xe0"

    def test_refuses_to_overwrite(self, tmp_path: Path, sample_file: Path) -> None:
        archive = tmp_path / "out.hxf"
        archive.write_bytes(b"keep")

        result = CliRunner().invoke(cli_main, ["compress", str(sample_file), str(archive)])

        assert result.exit_code != 0
        assert "already exists" in result.output
        assert archive.read_bytes() == b"keep"

    def test_force_overwrites(self, tmp_path: Path, sample_file: Path) -> None:
        archive = tmp_path / "out.hxf"
        archive.write_bytes(b"keep")

        result = CliRunner().invoke(cli_main, ["compress", str(sample_file), str(archive), "--force"])

        assert result.exit_code == 0, result.output
        assert archive.read_bytes()[:4] == b"HXF1"

    def test_default_output_path(self, tmp_path: Path, sample_file: Path, sample_bytes: bytes) -> None:
        runner = CliRunner()

        result = runner.invoke(cli_main, ["compress", str(sample_file)])
        assert result.exit_code == 0, result.output
        archive = tmp_path / "input.txt.hxf"
        assert archive.read_bytes()[:4] == b"HXF1"

        restored = tmp_path / "restored.txt"
        result = runner.invoke(cli_main, ["decompress", str(archive), str(restored)])
        assert result.exit_code == 0, result.output
        assert restored.read_bytes() == sample_bytes

    def test_default_output_path_raw(self, tmp_path: Path, sample_file: Path) -> None:
        result = CliRunner().invoke(cli_main, ["compress", str(sample_file), "--raw"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "input.txt.huf").exists()
        assert not (tmp_path / "input.txt.hxf").exists()

    def test_write_failure(self, tmp_path: Path, sample_file: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_bytes(b"regular file")

        result = CliRunner().invoke(cli_main, ["compress", str(sample_file), str(blocker / "out.hxf")])

        assert result.exit_code != 0
        assert "Compression failed" in result.output
        assert blocker.read_bytes() == b"regular file"

    def test_empty_input(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty.txt"
        empty.write_bytes(b"")

        result = CliRunner().invoke(cli_main, ["compress", str(empty), str(tmp_path / "out.hxf")])

        assert result.exit_code != 0
        assert "Compression failed" in result.output

    def test_decompress_rejects_raw_stream(self, tmp_path: Path) -> None:
        raw = tmp_path / "raw.huf"
        raw.write_bytes(b"\xe0")

        result = CliRunner().invoke(cli_main, ["decompress", str(raw), str(tmp_path / "out.txt")])

        assert result.exit_code != 0
        assert "Decompression failed" in result.output


class TestXorCommand:
    """Test 'huffxor xor'."""

    def test_twice_restores(self, tmp_path: Path, sample_file: Path, sample_bytes: bytes) -> None:
        encrypted = tmp_path / "enc.xor"
        decrypted = tmp_path / "dec.txt"
        runner = CliRunner()

        result = runner.invoke(cli_main, ["xor", str(sample_file), str(encrypted), "--key", "k"])
        assert result.exit_code == 0, result.output
        assert "XOR operation completed" in result.output

        result = runner.invoke(cli_main, ["xor", str(encrypted), str(decrypted), "-k", "k"])
        assert result.exit_code == 0, result.output
        assert decrypted.read_bytes() == sample_bytes

    def test_empty_key(self, tmp_path: Path, sample_file: Path) -> None:
        result = CliRunner().invoke(cli_main, ["xor", str(sample_file), str(tmp_path / "enc"), "--key", ""])

        assert result.exit_code != 0
        assert "XOR failed" in result.output

    def test_default_output_path(self, tmp_path: Path, sample_file: Path, sample_bytes: bytes) -> None:
        result = CliRunner().invoke(cli_main, ["xor", str(sample_file), "--key", "k"])

        assert result.exit_code == 0, result.output
        encrypted = tmp_path / "input.txt.xor"
        assert encrypted.exists()
        assert encrypted.read_bytes() != sample_bytes

    def test_write_failure(self, tmp_path: Path, sample_file: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_bytes(b"regular file")

        result = CliRunner().invoke(cli_main, ["xor", str(sample_file), str(blocker / "enc.xor"), "-k", "k"])

        assert result.exit_code != 0
        assert "XOR failed" in result.output


def _pipeline_args(tmp_path: Path, sample_file: Path) -> list[str]:
    return [
        "pipeline",
        str(sample_file),
        "--compressed",
        str(tmp_path / "c.huf"),
        "--decompressed",
        str(tmp_path / "d.txt"),
        "--encrypted",
        str(tmp_path / "e.xor"),
        "--decrypted",
        str(tmp_path / "f.huf"),
        "--key",
        "key",
    ]


class TestPipelineCommand:
    """Test 'huffxor pipeline'."""

    def test_pipeline(self, tmp_path: Path, sample_file: Path, sample_bytes: bytes) -> None:
        result = CliRunner().invoke(cli_main, _pipeline_args(tmp_path, sample_file))

        assert result.exit_code == 0, result.output
        assert "Compression done" in result.output
        assert "Decompression done" in result.output
        assert (tmp_path / "d.txt").read_bytes() == sample_bytes
        assert (tmp_path / "f.huf").read_bytes() == (tmp_path / "c.huf").read_bytes()

    def test_refuses_to_overwrite(self, tmp_path: Path, sample_file: Path) -> None:
        (tmp_path / "e.xor").write_bytes(b"keep")

        result = CliRunner().invoke(cli_main, _pipeline_args(tmp_path, sample_file))

        assert result.exit_code != 0
        assert "already exists" in result.output
        assert (tmp_path / "e.xor").read_bytes() == b"keep"
        assert not (tmp_path / "c.huf").exists()

    def test_force_overwrites(self, tmp_path: Path, sample_file: Path, sample_bytes: bytes) -> None:
        (tmp_path / "d.txt").write_bytes(b"keep")

        result = CliRunner().invoke(cli_main, [*_pipeline_args(tmp_path, sample_file), "--force"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "d.txt").read_bytes() == sample_bytes

    def test_write_failure(self, tmp_path: Path, sample_file: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_bytes(b"regular file")
        args = _pipeline_args(tmp_path, sample_file)
        args[args.index("--compressed") + 1] = str(blocker / "c.huf")

        result = CliRunner().invoke(cli_main, args)

        assert result.exit_code != 0
        assert "Pipeline failed" in result.output
        assert not (tmp_path / "d.txt").exists()

    def test_missing_option(self, tmp_path: Path, sample_file: Path) -> None:
        result = CliRunner().invoke(cli_main, ["pipeline", str(sample_file), "--compressed", "x"])
        assert result.exit_code == 2


class TestInspectCommand:
    """Test 'huffxor inspect'."""

    def test_inspect(self, tmp_path: Path) -> None:
        source = tmp_path / "aaab.txt"
        source.write_bytes(b"aaab")
        archive = tmp_path / "out.hxf"
        runner = CliRunner()
        runner.invoke(cli_main, ["compress", str(source), str(archive)])

        result = runner.invoke(cli_main, ["inspect", str(archive)])

        assert result.exit_code == 0, result.output
        assert "Symbols:         2" in result.output
        assert "XOR obfuscated:  no" in result.output

    def test_inspect_json(self, tmp_path: Path) -> None:
        source = tmp_path / "aaab.txt"
        source.write_bytes(b"aaab")
        archive = tmp_path / "out.hxf"
        runner = CliRunner()
        runner.invoke(cli_main, ["compress", str(source), str(archive)])

        result = runner.invoke(cli_main, ["inspect", str(archive), "--json"])

        assert result.exit_code == 0, result.output
        assert '"symbol_count": 2' in result.output
        assert '"bit_length": 4' in result.output

    def test_inspect_invalid(self, tmp_path: Path) -> None:
        bogus = tmp_path / "bogus.hxf"
        bogus.write_bytes(b"not an archive at all, definitely not")

        result = CliRunner().invoke(cli_main, ["inspect", str(bogus)])

        assert result.exit_code != 0
        assert "Inspect failed" in result.output


# 🌶️📦🔚
