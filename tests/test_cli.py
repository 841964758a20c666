"""Tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

from penandpaper import cli
from penandpaper.display import HeadlessDisplay
from penandpaper.paper import Paper
from penandpaper.primitives import Line, Oval, TextStamp


@pytest.fixture
def papers(monkeypatch):
    """Route the CLI to headless papers and collect them."""
    opened = []
    answers = []

    def open_paper(config, title):
        paper = Paper(title=title, display=HeadlessDisplay(answers=answers), config=config)
        opened.append(paper)
        return paper

    monkeypatch.setattr(cli, "_open_paper", open_paper)
    return opened, answers


class TestConfigCommand:
    def test_prints_defaults(self):
        result = CliRunner().invoke(cli.main, ["config"])
        assert result.exit_code == 0
        assert json.loads(result.output)["paper"]["width"] == 854

    def test_loads_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"pen": {"color": "red"}}))
        result = CliRunner().invoke(cli.main, ["--config", str(path), "config"])
        assert result.exit_code == 0
        assert json.loads(result.output)["pen"]["color"] == "red"


class TestDemo:
    def test_draws_scene(self, papers):
        opened, _ = papers
        result = CliRunner().invoke(cli.main, ["demo", "--title", "Demo", "--text", "HI"])
        assert result.exit_code == 0, result.output

        (paper,) = opened
        assert paper.title == "Demo"
        kinds = [type(p) for p in paper.primitives]
        assert kinds == [TextStamp, Oval, Line, Line, Line, Line]
        assert paper.primitives[0].text == "HI"


class TestAsk:
    @pytest.mark.parametrize(
        "kind, answer, output",
        [("int", "12", "12"), ("number", "2.5", "2.5"), ("text", "hello", "hello")],
    )
    def test_echoes_answer(self, papers, kind, answer, output):
        opened, answers = papers
        answers.append(answer)
        result = CliRunner().invoke(cli.main, ["ask", "--kind", kind, "--message", "Go"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == output
        assert opened[0].closed
