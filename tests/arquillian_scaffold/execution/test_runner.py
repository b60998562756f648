import json
import sys

import pytest

from arquillian_scaffold.execution.command_builder import CommandSpec
from arquillian_scaffold.execution.runner import default_artifacts_dir, prune_artifacts, run_command


def python_command(tmp_path, code):
    return CommandSpec(argv=[sys.executable, "-c", code], cwd=tmp_path, env={})


class TestRunCommand:
    """Test run_command with a real child process."""

    def test_captures_output_and_returncode(self, tmp_path):
        # Act
        result = run_command(python_command(tmp_path, "import sys; print('out'); print('err', file=sys.stderr); sys.exit(3)"))

        # Assert
        assert result.returncode == 3
        assert result.ok is False
        assert result.stdout.strip() == "out"
        assert result.stderr.strip() == "err"
        assert result.cwd == str(tmp_path)

    def test_writes_artifacts(self, tmp_path):
        """Test stdout, stderr and cmd.json land in the artifacts directory."""
        # Arrange
        artifacts = tmp_path / "artifacts"

        # Act
        result = run_command(python_command(tmp_path, "print('hello')"), artifacts_dir=artifacts)

        # Assert
        assert result.ok
        assert (artifacts / "stdout.txt").read_text().strip() == "hello"
        payload = json.loads((artifacts / "cmd.json").read_text())
        assert payload["returncode"] == 0
        assert payload["argv"][0] == sys.executable

    def test_timeout_raises_and_keeps_partial_artifacts(self, tmp_path):
        artifacts = tmp_path / "artifacts"

        with pytest.raises(TimeoutError):
            run_command(python_command(tmp_path, "import time; time.sleep(10)"), timeout=0.5, artifacts_dir=artifacts)

        assert (artifacts / "cmd.json").exists()

    def test_missing_executable_propagates_os_error(self, tmp_path):
        spec = CommandSpec(argv=[str(tmp_path / "no-such-mvn")], cwd=tmp_path, env={})

        with pytest.raises(OSError):
            run_command(spec)


class TestDefaultArtifactsDir:
    """Test artifacts directory naming."""

    def test_lives_under_export(self, tmp_path):
        path = default_artifacts_dir(tmp_path)

        assert path.parent == tmp_path / ".artifacts" / "export"
        assert path.name.isdigit()


class TestPruneArtifacts:
    """Test old run directories are cleaned up."""

    def test_keeps_newest_runs(self, tmp_path):
        # Arrange
        for ts in ("1000", "3000", "2000", "900"):
            (tmp_path / ts).mkdir()
            (tmp_path / ts / "stdout.txt").write_text("x")
        (tmp_path / "notes").mkdir()

        # Act
        removed = prune_artifacts(tmp_path, keep=2)

        # Assert
        assert sorted(p.name for p in removed) == ["1000", "900"]
        assert sorted(p.name for p in tmp_path.iterdir()) == ["2000", "3000", "notes"]

    def test_none_keeps_everything(self, tmp_path):
        (tmp_path / "1000").mkdir()

        assert prune_artifacts(tmp_path, keep=None) == []
        assert (tmp_path / "1000").is_dir()

    def test_missing_directory_is_ignored(self, tmp_path):
        assert prune_artifacts(tmp_path / "absent", keep=1) == []
