"""Tests for the per-format extractors."""

import pytest

from depextify.core.errors import ShellParseError
from depextify.core.models import Position
from depextify.extractors.base import ShellExtractor
from depextify.extractors.dockerfile import DockerfileExtractor, run_to_shell
from depextify.extractors.makefile import MakefileExtractor, recipe_to_shell
from depextify.extractors.structured import StructuredExtractor


class TestShellExtractor:
    def test_whole_script(self):
        result = ShellExtractor().extract(b"#!/bin/sh\nset -e\njq . file\n")
        assert result["jq"] == [Position(3, 1, 2)]

    def test_invalid_script_raises(self):
        """A broken script is dropped as a whole."""
        with pytest.raises(ShellParseError):
            ShellExtractor().extract(b"jq .\nif true; then\n")


class TestMakefileExtractor:
    """Test recipe extraction."""

    CONTENT = b"""
all:
\techo "hello"
\tls -l

build:
\t@go build
\t-rm old_binary
"""

    def test_recipe_commands(self):
        result = MakefileExtractor().extract(self.CONTENT)
        assert {"echo", "ls", "go", "rm"} <= set(result)

    def test_recipe_positions(self):
        """The tab and recipe modifiers keep their width."""
        result = MakefileExtractor().extract(self.CONTENT)
        assert result["echo"] == [Position(3, 2, 4)]
        assert result["go"] == [Position(7, 3, 2)]
        assert result["rm"] == [Position(8, 3, 2)]

    def test_single_recipe_line(self):
        result = MakefileExtractor().extract(b'\techo "hi"\n')
        assert result == {"echo": [Position(1, 2, 4)]}

    def test_non_recipe_lines_ignored(self):
        """Variables and targets are not shell."""
        content = b"CC = gcc\nGO := go\nall: deps\n\tmake test\n"
        result = MakefileExtractor().extract(content)
        assert set(result) == {"make"}

    def test_invalid_recipe_line_skipped(self):
        """One broken recipe line does not hide the others."""
        content = b"all:\n\tif true; then\n\tjq . x\n"
        result = MakefileExtractor().extract(content)
        assert result["jq"] == [Position(3, 2, 2)]

    def test_recipe_to_shell(self):
        assert recipe_to_shell("\t@-go test") == "   go test"
        assert recipe_to_shell("\t  +make") == "    make"


class TestDockerfileExtractor:
    """Test RUN instruction extraction."""

    CONTENT = b"""
FROM alpine
RUN apk add git
RUN go build \\
    && ls -l
RUN ["echo", "hello"]
"""

    def test_run_commands(self):
        result = DockerfileExtractor().extract(self.CONTENT)
        assert {"apk", "go", "ls"} <= set(result)
        # exec form is an argv, not shell
        assert "echo" not in result

    def test_run_positions(self):
        result = DockerfileExtractor().extract(self.CONTENT)
        assert result["apk"] == [Position(3, 5, 3)]
        assert result["go"] == [Position(4, 5, 2)]
        assert result["ls"] == [Position(5, 8, 2)]

    def test_comment_inside_continuation(self):
        """Comment and blank lines inside a continuation keep the line count."""
        content = b"RUN apt-get update \\\n    # refresh\n\n    && pip install x\nRUN jq .\n"
        result = DockerfileExtractor().extract(content)
        assert result["pip"] == [Position(4, 8, 3)]
        assert result["jq"] == [Position(5, 5, 2)]

    def test_buildkit_options(self):
        """RUN --mount flags are not commands."""
        content = b"RUN --mount=type=cache,target=/root/.cache pip install x\n"
        result = DockerfileExtractor().extract(content)
        assert set(result) == {"pip"}
        assert result["pip"] == [Position(1, 44, 3)]

    def test_unterminated_continuation(self):
        """An instruction still open at end of file is analysed."""
        content = b"RUN make \\\n    && cargo build \\\n"
        result = DockerfileExtractor().extract(content)
        assert result["cargo"] == [Position(2, 8, 5)]

    def test_lowercase_run_ignored(self):
        assert DockerfileExtractor().extract(b"run jq .\n") == {}

    def test_run_to_shell(self):
        assert run_to_shell("RUN jq .") == "    jq ."
        assert run_to_shell('RUN ["jq", "."]') is None
        assert run_to_shell("FROM alpine") is None
        assert run_to_shell("RUNNER x") is None


class TestStructuredExtractor:
    """Test YAML extraction for workflows and Taskfiles."""

    def test_github_actions(self):
        content = b"""
jobs:
  test:
    steps:
      - run: go test ./...
      - name: Build
        run: |
          go build
          ls -l
"""
        result = StructuredExtractor().extract(content)
        assert result["go"] == [Position(5, 14, 2), Position(8, 11, 2)]
        assert result["ls"] == [Position(9, 11, 2)]

    def test_taskfile(self):
        content = b"""version: '3'
tasks:
  build:
    cmds:
      - go build
      - cmd: ls -l
"""
        result = StructuredExtractor().extract(content)
        assert result["go"] == [Position(5, 9, 2)]
        assert result["ls"] == [Position(6, 14, 2)]

    def test_multiline_block(self):
        """Comments and blank lines in a block scalar keep their lines."""
        content = b"""
steps:
  - run: |
      # This is a comment
      echo "first"

      ls -l
"""
        result = StructuredExtractor().extract(content)
        assert result["echo"] == [Position(5, 7, 4)]
        assert result["ls"] == [Position(7, 7, 2)]

    def test_non_posix_shell_skipped(self):
        """Steps running under another interpreter are not shell."""
        content = b"""
steps:
  - shell: pwsh
    run: Get-ChildItem
  - shell: bash
    run: jq .
"""
        result = StructuredExtractor().extract(content)
        assert set(result) == {"jq"}

    def test_non_string_scalars_ignored(self):
        content = b"run: 42\ncmd: true\n"
        assert StructuredExtractor().extract(content) == {}

    def test_alias_analysed_once(self):
        content = b"""
defaults: &step
  run: make lint
jobs:
  a: *step
  b: *step
"""
        result = StructuredExtractor().extract(content)
        assert result["make"] == [Position(3, 8, 4)]

    def test_multiple_documents(self):
        content = b"run: jq .\n---\nrun: yq .\n"
        result = StructuredExtractor().extract(content)
        assert result["jq"] == [Position(1, 6, 2)]
        assert result["yq"] == [Position(3, 6, 2)]

    def test_malformed_yaml(self):
        assert StructuredExtractor().extract(b"run: [unclosed\n") == {}

    def test_invalid_script_skipped(self):
        content = b"""
- run: if true; then
- run: jq .
"""
        result = StructuredExtractor().extract(content)
        assert set(result) == {"jq"}
