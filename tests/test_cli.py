from loguru import logger
from typer.testing import CliRunner

from recipebook import __version__
from recipebook.cli import app
from recipebook.console import RecipeConsole
from recipebook.runtime import RuntimeContext, get_runtime_context, set_runtime_context

runner = CliRunner()


def test_version() -> None:
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert f"recipebook {__version__}" in result.output


def test_profile_option_selects_profile() -> None:
    result = runner.invoke(app, ["--profile", "testing", "version"])

    assert result.exit_code == 0
    assert get_runtime_context().profile.name == "testing"


def test_no_command_opens_console() -> None:
    result = runner.invoke(app, [], input="3\n4\n")

    assert result.exit_code == 0
    assert "Recipe Management System" in result.output
    assert "No recipes available." in result.output


def test_console_adds_to_runtime_catalog() -> None:
    result = runner.invoke(app, [], input="1\nOmelette\n1\nEgg\n3\nwhole\n78\nProtein\n1\nWhisk and cook\n4\n")

    assert result.exit_code == 0
    catalog = get_runtime_context().catalog
    assert [name for _, name in catalog.list_recipes()] == ["Omelette"]
    assert catalog.get(1).total_calories == 234


def test_console_exits_on_end_of_input() -> None:
    result = runner.invoke(app, [], input="")

    assert result.exit_code == 0
    assert "Session ended" in result.output


def test_console_failure_exits_with_error(monkeypatch) -> None:
    ctx = RuntimeContext()
    ctx.ensure_logging_configured()
    set_runtime_context(ctx)

    def broken_run(self):
        raise RuntimeError("bad {brace} input")

    monkeypatch.setattr(RecipeConsole, "run", broken_run)
    records = []
    sink_id = logger.add(lambda message: records.append(message.record), level="ERROR")
    try:
        result = runner.invoke(app, [])
    finally:
        logger.remove(sink_id)

    assert result.exit_code == 1
    assert "Error launching console: bad {brace} input" in result.output
    assert [r["message"] for r in records] == ["Console failed: bad {brace} input"]
    assert records[0]["exception"] is not None
    assert records[0]["extra"]["component"] == "cli"
