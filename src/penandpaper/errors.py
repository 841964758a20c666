"""Exceptions raised by penandpaper."""


class PenAndPaperError(Exception):
    pass


class PaperClosedError(PenAndPaperError, RuntimeError):
    """Drawing or prompting on a paper whose window is gone."""

    def __init__(self, title: str):
        super().__init__(f"Operation on closed paper: {title!r}")
        self.title = title


class PromptError(PenAndPaperError, ValueError):
    pass
