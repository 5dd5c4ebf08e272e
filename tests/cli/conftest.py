"""Pytest configuration and fixtures for CLI tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner():
    """Click CLI test runner that invokes the restlist group."""

    class RestlistCliRunner(CliRunner):
        def invoke(self, args, **kwargs):  # type: ignore
            """Invoke the restlist CLI with a list of arguments."""
            from restlist.cli.main import cli

            if isinstance(args, list):
                return super().invoke(cli, ["--no-color", *args], **kwargs)
            return super().invoke(args, **kwargs)

    return RestlistCliRunner()


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config file and return its path."""

    def _write(text: str):
        path = tmp_path / "custom.yaml"
        path.write_text(text)
        return path

    return _write
