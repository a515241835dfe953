"""Integration tests for svcs config command."""

from pathlib import Path

from svcs.cli.main import app


class TestConfigCommand:
    """Test svcs config command."""

    def test_config_unset(self, runner, workspace_dir: Path) -> None:
        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "Please, tell me who you are." in result.stdout

    def test_config_set(self, runner, workspace_dir: Path) -> None:
        result = runner.invoke(app, ["config", "alice"])

        assert result.exit_code == 0
        assert "The username is alice." in result.stdout
        assert (workspace_dir / "vcs" / "config.txt").read_text() == "alice"

    def test_config_show(self, runner, workspace_dir: Path) -> None:
        runner.invoke(app, ["config", "alice"])

        result = runner.invoke(app, ["config"])

        assert "The username is alice." in result.stdout

    def test_config_change(self, runner, workspace_dir: Path) -> None:
        runner.invoke(app, ["config", "alice"])
        runner.invoke(app, ["config", "bob"])

        result = runner.invoke(app, ["config"])

        assert "The username is bob." in result.stdout

    def test_config_multiline_rejected(self, runner, workspace_dir: Path) -> None:
        result = runner.invoke(app, ["config", "al\n\nice"])

        assert result.exit_code == 0
        assert "The username must be a single line." in result.stdout
        assert not (workspace_dir / "vcs" / "config.txt").exists()


class TestGlobalOptions:
    """Test options shared by all commands."""

    def test_version(self, runner) -> None:
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "SVCS version 0.1.0" in result.stdout

    def test_help_lists_commands(self, runner) -> None:
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("config", "add", "log", "commit", "checkout"):
            assert command in result.stdout

    def test_repo_option(self, runner, workspace_dir: Path) -> None:
        result = runner.invoke(app, ["--repo", "elsewhere", "config", "alice"])

        assert result.exit_code == 0
        assert (workspace_dir / "elsewhere" / "config.txt").read_text() == "alice"
        assert not (workspace_dir / "vcs").exists()

    def test_repo_env_var(self, runner, workspace_dir: Path) -> None:
        result = runner.invoke(app, ["config", "alice"], env={"SVCS_DIR": "fromenv"})

        assert result.exit_code == 0
        assert (workspace_dir / "fromenv" / "config.txt").exists()

    def test_storage_failure_exits_with_system_error(self, runner, workspace_dir: Path) -> None:
        # A regular file where the storage directory should be
        (workspace_dir / "vcs").write_text("not a directory")

        result = runner.invoke(app, ["config", "alice"])

        assert result.exit_code == 2
