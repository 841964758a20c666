"""CLI for penandpaper."""

import json
import logging
from pathlib import Path

import click

from .config import Config


def _load_config(path: Path | None) -> Config:
    return Config.load(path) if path else Config()


def _open_paper(config: Config, title: str | None):
    from .paper import Paper
    from .tkdisplay import TkDisplay

    return Paper(title=title, display=TkDisplay(), config=config)


@click.group()
@click.option("--config", "-c", "config_path", type=Path, help="JSON config file")
@click.option("--verbose", "-v", is_flag=True)
@click.pass_context
def main(ctx, config_path: Path | None, verbose: bool):
    """penandpaper - turtle graphics on paper windows."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    ctx.obj = _load_config(config_path)


@main.command()
@click.option("--title", "-t", help="Window title")
@click.option("--text", default="HELLO WORLD", help="Text to write")
@click.pass_obj
def demo(config: Config, title: str | None, text: str):
    """Draw a sample scene and wait for the window to close."""
    from .pen import Pen

    paper = _open_paper(config, title)
    pen = Pen(paper)
    pen.move_to(200.0, 200.0)
    pen.turn_to(400.0, 400.0)
    pen.down()
    pen.write(text)
    pen.draw_circle(40)
    pen.draw_rect(120, 60)
    paper.mainloop()


@main.command()
@click.option(
    "--kind", "-k", type=click.Choice(["int", "number", "text"]), default="text"
)
@click.option("--message", "-m", help="Message shown in the prompt")
@click.pass_obj
def ask(config: Config, kind: str, message: str | None):
    """Show a prompt and print the answer."""
    paper = _open_paper(config, None)
    request = {
        "int": paper.request_integer,
        "number": paper.request_number,
        "text": paper.request_text,
    }[kind]
    value = request(message)
    paper.close()
    click.echo(value)


@main.command("config")
@click.pass_obj
def show_config(config: Config):
    """Print the effective configuration."""
    click.echo(json.dumps(config.model_dump(), indent=4))


if __name__ == "__main__":
    main()
