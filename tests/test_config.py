"""Tests for the configuration module."""

from pathlib import Path

import pytest

from dasel._cli.config import (
    ConfigError,
    DaselConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        assert find_pyproject_toml(tmp_path) == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "data" / "graphs"
        subdir.mkdir(parents=True)

        assert find_pyproject_toml(subdir) == pyproject


class TestLoadConfig:
    def test_full_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.dasel]
root = 7
depth = 4
directed = true
""",
        )

        config = load_config(pyproject)

        assert config == DaselConfig(root=7, depth=4, directed=True, project_root=tmp_path)

    def test_partial_section_keeps_defaults(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.dasel]\ndepth = 0\n")

        config = load_config(pyproject)

        assert config.root == 1
        assert config.depth == 0
        assert config.directed is False

    def test_no_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        assert load_config(pyproject) == DaselConfig(project_root=tmp_path)

    @pytest.mark.parametrize(
        ("body", "message"),
        [
            ("root = 'one'", "root: expected integer"),
            ("depth = true", "depth: expected integer"),
            ("depth = -1", "depth: must be >= 0"),
            ("directed = 'yes'", "directed: expected boolean"),
            ("root = 18446744073709551616", "root: must be <= 18446744073709551615"),
        ],
    )
    def test_invalid_values(self, tmp_path: Path, body: str, message: str) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f"[tool.dasel]\n{body}\n")

        with pytest.raises(ConfigError, match=message):
            load_config(pyproject)

    def test_root_at_upper_bound(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.dasel]\nroot = 18446744073709551615\n")

        assert load_config(pyproject).root == 2**64 - 1

    def test_tool_not_a_table(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("tool = 1\n")

        with pytest.raises(ConfigError, match=r"Invalid \[tool\]: expected a table"):
            load_config(pyproject)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.dasel\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)


def test_get_config_reads_current_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.dasel]\nroot = 3\n")
    monkeypatch.chdir(tmp_path)

    assert get_config().root == 3
