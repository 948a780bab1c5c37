"""Tests for contrast_checker.core.env — .env loading, walk-up logic and defaults."""

import os
from pathlib import Path

import pytest
from contrast_checker.core.env import _find_dotenv, _parse_dotenv, default_level, default_theme, load_env


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('FOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('KEY="hello world"\nKEY2=\'single\'\n')
        assert _parse_dotenv(f) == {'KEY': 'hello world', 'KEY2': 'single'}

    def test_comments_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\nFOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_export_prefix(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('export CONTRAST_TOOL_LEVEL=AAA\n')
        assert _parse_dotenv(f) == {'CONTRAST_TOOL_LEVEL': 'AAA'}

    def test_only_matching_quotes_stripped(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('A="it\'s"\nB="half\nC=\'\'\n')
        assert _parse_dotenv(f) == {'A': "it's", 'B': '"half', 'C': ''}

    def test_no_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('NOEQUALS\nFOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}


class TestFindDotenv:
    def test_finds_in_cwd(self, tmp_path: Path) -> None:
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(tmp_path) == dotenv

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        parent = tmp_path / 'repo'
        parent.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (parent / '.git').mkdir()
        subdir = parent / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        # .git as a file (worktree)
        parent = tmp_path / 'repo'
        parent.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (parent / '.git').write_text('gitdir: ../somewhere\n')
        subdir = parent / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        # setenv first so teardown removes what load_env sets
        monkeypatch.setenv('CONTRAST_TOOL_LEVEL', '')
        monkeypatch.delenv('CONTRAST_TOOL_LEVEL')
        (tmp_path / '.env').write_text('CONTRAST_TOOL_LEVEL=AAA\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('CONTRAST_TOOL_LEVEL') == 'AAA'

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('CONTRAST_TOOL_LEVEL', 'AA')
        (tmp_path / '.env').write_text('CONTRAST_TOOL_LEVEL=AAA\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('CONTRAST_TOOL_LEVEL') == 'AA'

    def test_explicit_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('CONTRAST_TOOL_THEME', '')
        monkeypatch.delenv('CONTRAST_TOOL_THEME')
        dotenv = tmp_path / 'custom.env'
        dotenv.write_text('CONTRAST_TOOL_THEME=brand.theme\n')
        assert load_env(env_file=str(dotenv)) == dotenv
        assert os.environ.get('CONTRAST_TOOL_THEME') == 'brand.theme'

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'absent.env')) is None

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestDefaults:
    def test_level_defaults_to_aa(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('CONTRAST_TOOL_LEVEL', raising=False)
        assert default_level() == 'AA'

    def test_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('CONTRAST_TOOL_LEVEL', 'AAA')
        assert default_level() == 'AAA'

    def test_theme_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('CONTRAST_TOOL_THEME', raising=False)
        assert default_theme() is None

    def test_theme_empty_is_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('CONTRAST_TOOL_THEME', '')
        assert default_theme() is None
