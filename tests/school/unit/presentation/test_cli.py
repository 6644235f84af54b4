"""Unit tests for the school CLI."""

from unittest.mock import Mock

from typer.testing import CliRunner

from school.presentation.cli import app as cli_module

runner = CliRunner()


class TestSecretsCommand:
    """Tests for `school secrets generate`."""

    def test_generate_prints_jwt_secret(self):
        """A fresh JWT secret is printed in .env format."""
        result = runner.invoke(cli_module.app, ["secrets", "generate"])

        assert result.exit_code == 0
        assert "JWT_SECRET_KEY=" in result.output

    def test_generate_differs_between_runs(self):
        """Every run produces a new secret."""

        def _secret(output: str) -> str:
            line = next(x for x in output.splitlines() if "JWT_SECRET_KEY=" in x)
            return line.split("=", 1)[1].strip()

        first = runner.invoke(cli_module.app, ["secrets", "generate"])
        second = runner.invoke(cli_module.app, ["secrets", "generate"])

        assert _secret(first.output) != _secret(second.output)


class TestDbCommands:
    """Tests for `school db ...` with the database calls mocked."""

    def test_init(self, monkeypatch):
        """init creates the tables."""
        db_init = Mock()
        monkeypatch.setattr(cli_module, "db_init", db_init)

        result = runner.invoke(cli_module.app, ["db", "init"])

        assert result.exit_code == 0
        db_init.assert_called_once_with()

    def test_reset_aborted(self, monkeypatch):
        """Declining the confirmation leaves the database alone."""
        db_reset = Mock()
        monkeypatch.setattr(cli_module, "db_reset", db_reset)

        result = runner.invoke(cli_module.app, ["db", "reset"], input="n\n")

        assert result.exit_code == 1
        assert "Aborted" in result.output
        db_reset.assert_not_called()

    def test_reset_forced(self, monkeypatch):
        """--force skips the confirmation."""
        db_reset = Mock()
        monkeypatch.setattr(cli_module, "db_reset", db_reset)

        result = runner.invoke(cli_module.app, ["db", "reset", "--force"])

        assert result.exit_code == 0
        db_reset.assert_called_once_with()

    def test_seed_reports_skip(self, monkeypatch):
        """Seeding a populated database is reported, not an error."""
        monkeypatch.setattr(cli_module, "db_seed", Mock(return_value=False))

        result = runner.invoke(cli_module.app, ["db", "seed"])

        assert result.exit_code == 0
        assert "nothing seeded" in result.output

    def test_seed_prints_password(self, monkeypatch):
        """The shared development password is shown after seeding."""
        monkeypatch.setattr(cli_module, "db_seed", Mock(return_value=True))

        result = runner.invoke(cli_module.app, ["db", "seed"])

        assert result.exit_code == 0
        assert cli_module.DEFAULT_SEED_PASSWORD in result.output
