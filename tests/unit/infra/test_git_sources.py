"""Git 메타데이터 소스 체인 테스트."""

import json
import subprocess
import sys
from unittest.mock import MagicMock, patch

import pytest

from doc_actuator.domain import GIT_UNAVAILABLE_ERROR, GitInfo, GitUnavailable
from doc_actuator.domain.config import GitConfig
from doc_actuator.infra.git import (
    FileMetadataSource,
    GitMetadataChain,
    LiveToolMetadataSource,
    MetadataUnavailable,
    build_default_chain,
)

_GIT_JSON = {
    "commit": {
        "hash": "9b1c7e2f4a6d8c0e1f3a5b7d9e2c4f6a8b0d1e3f",
        "shortHash": "9b1c7e2",
        "message": "Render mermaid blocks",
        "author": {"name": "Jordan Lee", "email": "jordan@example.com"},
        "date": "2026-09-30T18:00:00+00:00",
    },
    "branch": "release/1.0",
}

_MISSING_GIT = "doc-actuator-no-such-git-binary"

# Latin-1 작성자 이름(0xE9)을 출력하는 가짜 git
_LATIN1_GIT = (
    b"#!/bin/sh\n"
    b'if [ "$1" = log ]; then\n'
    b"  printf 'abc123\\000abc\\000Jos\\351\\000jose@example.com\\000%s\\000init\\n' 2026-10-01T00:00:00+00:00\n"
    b"else\n"
    b"  echo main\n"
    b"fi\n"
)


def _completed(stdout: str) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=["git"], returncode=0, stdout=stdout, stderr="")


@pytest.fixture
def git_info_file(tmp_path):
    path = tmp_path / "git-info.json"
    path.write_text(json.dumps(_GIT_JSON), encoding="utf-8")
    return path


@pytest.fixture
def latin1_git(tmp_path):
    path = tmp_path / "fake-git"
    path.write_bytes(_LATIN1_GIT)
    path.chmod(0o755)
    return path


# ─── FileMetadataSource ─────────────────────────────────────────


class TestFileMetadataSource:
    def test_reads_precomputed_file(self, git_info_file):
        info = FileMetadataSource(git_info_file).fetch()
        assert info.model_dump(by_alias=True) == _GIT_JSON

    def test_missing_file(self, tmp_path):
        with pytest.raises(MetadataUnavailable, match="not found"):
            FileMetadataSource(tmp_path / "git-info.json").fetch()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "git-info.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(MetadataUnavailable, match="not valid"):
            FileMetadataSource(path).fetch()

    def test_extra_keys_preserved(self, tmp_path):
        raw = {**_GIT_JSON, "tag": "v1.0", "buildNumber": 42}
        path = tmp_path / "git-info.json"
        path.write_text(json.dumps(raw), encoding="utf-8")

        info = FileMetadataSource(path).fetch()

        assert info.model_dump(by_alias=True) == raw

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "git-info.json"
        path.write_text(json.dumps({"branch": "main"}), encoding="utf-8")
        with pytest.raises(MetadataUnavailable):
            FileMetadataSource(path).fetch()


# ─── LiveToolMetadataSource ─────────────────────────────────────


class TestLiveToolMetadataSource:
    @patch("doc_actuator.infra.git.sources.subprocess.run")
    def test_parses_git_output(self, mock_run):
        log = "\x00".join(
            [
                "9b1c7e2f4a6d8c0e1f3a5b7d9e2c4f6a8b0d1e3f",
                "9b1c7e2",
                "Jordan Lee",
                "jordan@example.com",
                "2026-09-30T18:00:00+00:00",
                "Render mermaid blocks\n\nAlso pass fences through.\n",
            ]
        )
        mock_run.side_effect = [_completed(log + "\n"), _completed("main\n")]

        info = LiveToolMetadataSource(timeout=2.0).fetch()

        assert info.commit.hash == "9b1c7e2f4a6d8c0e1f3a5b7d9e2c4f6a8b0d1e3f"
        assert info.commit.short_hash == "9b1c7e2"
        assert info.commit.author.name == "Jordan Lee"
        assert info.commit.message == "Render mermaid blocks\n\nAlso pass fences through."
        assert info.branch == "main"
        assert mock_run.call_args_list[0].kwargs["timeout"] == 2.0

    def test_executable_missing(self):
        with pytest.raises(MetadataUnavailable, match="executable not found"):
            LiveToolMetadataSource(executable=_MISSING_GIT).fetch()

    @patch("doc_actuator.infra.git.sources.subprocess.run")
    def test_not_a_repository(self, mock_run):
        mock_run.side_effect = subprocess.CalledProcessError(
            128, ["git", "log"], stderr="fatal: not a git repository (or any of the parent directories): .git\n"
        )
        with pytest.raises(MetadataUnavailable, match="not a git repository"):
            LiveToolMetadataSource().fetch()

    @patch("doc_actuator.infra.git.sources.subprocess.run")
    def test_timeout(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(["git", "log"], 0.5)
        with pytest.raises(MetadataUnavailable, match="timed out"):
            LiveToolMetadataSource(timeout=0.5).fetch()

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX shell script")
    def test_non_utf8_output_is_replaced(self, latin1_git, tmp_path):
        info = LiveToolMetadataSource(executable=str(latin1_git), cwd=tmp_path).fetch()

        assert info.commit.author.name == "Jos\ufffd"
        assert info.commit.hash == "abc123"
        assert info.branch == "main"

    @patch("doc_actuator.infra.git.sources.subprocess.run")
    def test_unexpected_output(self, mock_run):
        mock_run.return_value = _completed("garbage")
        with pytest.raises(MetadataUnavailable, match="Unexpected"):
            LiveToolMetadataSource().fetch()


# ─── GitMetadataChain ───────────────────────────────────────────


class TestGitMetadataChain:
    @patch("doc_actuator.infra.git.sources.subprocess.run")
    def test_file_wins_without_invoking_git(self, mock_run, git_info_file):
        chain = GitMetadataChain([FileMetadataSource(git_info_file), LiveToolMetadataSource()])

        result = chain.resolve()

        assert isinstance(result, GitInfo)
        assert result.model_dump(by_alias=True) == _GIT_JSON
        mock_run.assert_not_called()

    def test_corrupt_file_falls_through_to_git(self, tmp_path):
        path = tmp_path / "git-info.json"
        path.write_text("[]", encoding="utf-8")
        live = LiveToolMetadataSource()
        expected = GitInfo.model_validate(_GIT_JSON)

        with patch.object(live, "fetch", return_value=expected) as mock_fetch:
            result = GitMetadataChain([FileMetadataSource(path), live]).resolve()

        assert result == expected
        mock_fetch.assert_called_once()

    def test_nothing_available_returns_value(self, tmp_path):
        chain = GitMetadataChain(
            [
                FileMetadataSource(tmp_path / "git-info.json"),
                LiveToolMetadataSource(executable=_MISSING_GIT, cwd=tmp_path),
            ]
        )

        result = chain.resolve()

        assert isinstance(result, GitUnavailable)
        assert result.error == GIT_UNAVAILABLE_ERROR
        assert "not found" in result.message

    def test_unexpected_source_error_becomes_value(self):
        broken = MagicMock()
        broken.name = "broken"
        broken.fetch.side_effect = UnicodeDecodeError("utf-8", b"\xe9", 0, 1, "invalid continuation byte")

        result = GitMetadataChain([broken]).resolve()

        assert isinstance(result, GitUnavailable)
        assert "broken source failed" in result.message

    def test_unexpected_error_falls_through_to_next_source(self, git_info_file):
        broken = MagicMock()
        broken.name = "broken"
        broken.fetch.side_effect = RuntimeError("boom")

        result = GitMetadataChain([broken, FileMetadataSource(git_info_file)]).resolve()

        assert isinstance(result, GitInfo)

    def test_empty_chain(self):
        result = GitMetadataChain([]).resolve()
        assert isinstance(result, GitUnavailable)


class TestBuildDefaultChain:
    def test_order_and_paths(self, tmp_path):
        chain = build_default_chain(GitConfig(timeout_seconds=1.0, executable="git"), cwd=tmp_path)

        file_source, live_source = chain.sources
        assert isinstance(file_source, FileMetadataSource)
        assert file_source.path == tmp_path / "git-info.json"
        assert isinstance(live_source, LiveToolMetadataSource)
        assert live_source.timeout == 1.0
