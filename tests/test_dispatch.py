"""Tests for extractor selection."""

import pytest

from depextify.extractors import (
    DockerfileExtractor,
    MakefileExtractor,
    ShellExtractor,
    StructuredExtractor,
    get_extractor,
    is_shell_file,
    resolve_extractor,
)


@pytest.mark.parametrize("path,expected", [
    ("Makefile", MakefileExtractor),
    ("makefile", MakefileExtractor),
    ("GNUmakefile", MakefileExtractor),
    ("build/Makefile.am", MakefileExtractor),
    ("Dockerfile", DockerfileExtractor),
    ("Dockerfile.dev", DockerfileExtractor),
    ("images/api.Dockerfile", DockerfileExtractor),
    (".github/workflows/ci.yml", StructuredExtractor),
    (".github/workflows/deploy.yaml", StructuredExtractor),
    (".gitea/workflows/test.yml", StructuredExtractor),
    (".forgejo/workflows/test.yaml", StructuredExtractor),
    ("Taskfile.yml", StructuredExtractor),
    ("taskfile.yaml", StructuredExtractor),
])
def test_get_extractor(path, expected):
    assert isinstance(get_extractor(path), expected)


@pytest.mark.parametrize("path", [
    "script.sh",
    "config.yml",
    ".github/ISSUE_TEMPLATE/bug.yml",
    "README.md",
])
def test_get_extractor_none(path):
    assert get_extractor(path) is None


class TestIsShellFile:
    """Test plain shell script detection."""

    @pytest.mark.parametrize("name", ["a.sh", "a.bash", "a.zsh", "a.ksh", "a.dash", "a.bsh"])
    def test_shell_extensions(self, tmp_path, name):
        # the extension alone is enough, the file need not exist
        assert is_shell_file(tmp_path / name) is True

    def test_shebang_without_extension(self, tmp_path):
        path = tmp_path / "deploy"
        path.write_text("#!/usr/bin/env bash\njq .\n")
        assert is_shell_file(path) is True

    def test_direct_shebang(self, tmp_path):
        path = tmp_path / "install"
        path.write_text("#!/bin/sh\n")
        assert is_shell_file(path) is True

    def test_non_shell_shebang(self, tmp_path):
        path = tmp_path / "tool"
        path.write_text("#!/usr/bin/env python3\nprint('x')\n")
        assert is_shell_file(path) is False

    def test_shebang_ignored_with_other_extension(self, tmp_path):
        path = tmp_path / "tool.py"
        path.write_text("#!/bin/sh\n")
        assert is_shell_file(path) is False

    def test_missing_file(self, tmp_path):
        assert is_shell_file(tmp_path / "missing") is False


class TestResolveExtractor:
    def test_specific_format_wins(self, tmp_path):
        assert isinstance(resolve_extractor(tmp_path / "Makefile"), MakefileExtractor)

    def test_shell_fallback(self, tmp_path):
        assert isinstance(resolve_extractor(tmp_path / "run.sh"), ShellExtractor)

    def test_unknown_file(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("jq .\n")
        assert resolve_extractor(path) is None

    def test_forced_shell(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("jq .\n")
        assert isinstance(resolve_extractor(path, force_shell=True), ShellExtractor)
