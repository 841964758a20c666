"""Display surfaces a Paper draws onto."""

from collections.abc import Callable
from typing import TYPE_CHECKING

from PIL import Image

from .dialogue import DialogueBox
from .errors import PromptError
from .keys import Key

if TYPE_CHECKING:
    from .paper import Paper


class Display:
    """Window backend for a single Paper."""

    def open(self, paper: "Paper"):
        """Create and show a window sized to the paper.

        The display must call `paper.close()` when the user closes the
        window and `paper.handle_key(key)` for every key press.
        """
        raise NotImplementedError("open not implemented.")

    def show(self, frame: Image.Image):
        """Present a freshly rendered frame."""
        raise NotImplementedError("show not implemented.")

    def close(self):
        raise NotImplementedError("close not implemented.")

    def focus(self):
        raise NotImplementedError("focus not implemented.")

    def pointer_position(self) -> tuple[int, int]:
        """Pointer position relative to the paper's content origin."""
        raise NotImplementedError("pointer_position not implemented.")

    def prompt(self, box: DialogueBox):
        """Show `box` modally; return once it has been submitted."""
        raise NotImplementedError("prompt not implemented.")

    def mainloop(self):
        """Block until the window is closed."""
        raise NotImplementedError("mainloop not implemented.")


PromptAnswer = str | Callable[[DialogueBox], None]


class HeadlessDisplay(Display):
    """In-memory display for tests and scripted runs.

    Prompts are answered from `answers`: a string is entered into the field
    (through the validator) and submitted; a callable receives the box and
    may edit, type, step or submit it. Boxes left open are submitted.
    """

    def __init__(
        self,
        pointer: Callable[[], tuple[int, int]] | None = None,
        answers: list[PromptAnswer] | None = None,
    ):
        self.pointer = pointer or (lambda: (0, 0))
        self.answers = list(answers or [])
        self.paper = None
        self.frame: Image.Image | None = None
        self.frames_shown = 0
        self.prompts: list[DialogueBox] = []
        self.is_open = False

    def open(self, paper: "Paper"):
        self.paper = paper
        self.is_open = True

    def show(self, frame: Image.Image):
        self.frame = frame
        self.frames_shown += 1

    def close(self):
        self.is_open = False

    def focus(self):
        pass

    def pointer_position(self) -> tuple[int, int]:
        return self.pointer()

    def prompt(self, box: DialogueBox):
        if not self.answers:
            raise PromptError(f"No scripted answer for prompt {box.title!r}")

        self.prompts.append(box)
        answer = self.answers.pop(0)
        if callable(answer):
            answer(box)
        else:
            box.edit(answer)
        if not box.closed:
            box.submit()

    def mainloop(self):
        pass

    def press(self, key: Key | str):
        """Simulate a key press in the window."""
        self.paper.handle_key(key)

    def close_window(self):
        """Simulate the user closing the window."""
        self.paper.close()
