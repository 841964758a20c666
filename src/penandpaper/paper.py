"""Paper: a window that pens draw on."""

import logging
from collections.abc import Callable

from PIL import Image

from .colors import RGB, parse_color
from .config import Config
from .dialogue import DialogueBox, PromptKind
from .display import Display
from .errors import PaperClosedError, PromptError
from .keys import Key
from .primitives import Primitive
from .render import Renderer

logger = logging.getLogger(__name__)


class TitleSequence:
    """Numbers default window titles: "Paper #1", "Paper #2", ..."""

    def __init__(self, start: int = 1):
        self.start = start
        self._next = start

    def next(self) -> int:
        number = self._next
        self._next += 1
        return number

    def reset(self):
        self._next = self.start


default_titles = TitleSequence()


def reset_titles():
    """Restart the process-wide title numbering."""
    default_titles.reset()


class Paper:
    """A window showing everything pens have drawn on it.

    Drawing is recorded as a list of primitives which is replayed in order
    on every repaint. Several pens may share one paper.

    Parameters
    ----------
    width, height : int, optional
        Content size in pixels. Default to the configured 854 x 480.
    title : str, optional
        Window title, also used by prompts. Defaults to "Paper #N".
    display : Display, optional
        Window backend. Defaults to a tkinter window.
    config : Config, optional
        Paper, pen and font settings.
    titles : TitleSequence, optional
        Source of default titles. Defaults to the process-wide sequence.
    """

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        title: str | None = None,
        *,
        display: Display | None = None,
        config: Config | None = None,
        titles: TitleSequence | None = None,
    ):
        self.config = config or Config()
        self.width = width or self.config.paper.width
        self.height = height or self.config.paper.height
        if title is None:
            number = (titles or default_titles).next()
            title = f"{self.config.paper.title_prefix}{number}"
        self.title = title

        self._background = parse_color(self.config.paper.background)
        self._primitives: list[Primitive] = []
        self._key_bindings: list[tuple[Key, Callable[[], None]]] = []
        self._renderer = Renderer()
        self._closed = False

        if display is None:
            from .tkdisplay import TkDisplay

            display = TkDisplay()
        self.display = display
        self.display.open(self)
        logger.debug("Opened %s (%dx%d)", self.title, self.width, self.height)
        self.repaint()

    # -- lifecycle ---------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def ensure_open(self):
        if self._closed:
            raise PaperClosedError(self.title)

    def close(self):
        """Close the window. Closing twice is a no-op."""
        if self._closed:
            return
        self._closed = True
        self.display.close()
        logger.debug("Closed %s", self.title)

    def focus(self):
        """Try to bring the window to the foreground."""
        self.ensure_open()
        self.display.focus()

    def mainloop(self):
        """Keep the window up until the user closes it."""
        if not self._closed:
            self.display.mainloop()

    # -- drawing -----------------------------------------------------------

    @property
    def background(self) -> RGB:
        return self._background

    def set_background(self, color) -> RGB:
        self.ensure_open()
        self._background = parse_color(color)
        self.repaint()
        return self._background

    @property
    def primitives(self) -> tuple[Primitive, ...]:
        return tuple(self._primitives)

    def add_primitive(self, primitive: Primitive):
        """Record a primitive. Called by pens; shown on the next repaint."""
        self.ensure_open()
        self._primitives.append(primitive)

    def clear(self):
        """Erase everything drawn so far. Pens keep their position."""
        self.ensure_open()
        self._primitives.clear()
        logger.debug("Cleared %s", self.title)
        self.repaint()

    def render(self) -> Image.Image:
        """Background plus every primitive, in the order they were drawn."""
        return self._renderer.render(
            self._primitives, (self.width, self.height), self._background
        )

    def repaint(self):
        self.ensure_open()
        self.display.show(self.render())

    # -- input -------------------------------------------------------------

    def add_key_binding(self, key: Key | str, action: Callable[[], None]):
        """Run `action` whenever `key` is pressed in the window.

        Bindings for the same key all fire, in the order they were added.
        """
        self._key_bindings.append((Key(key), action))

    def handle_key(self, key: Key | str):
        key = Key(key)
        for bound, action in list(self._key_bindings):
            if bound is key:
                action()

    @property
    def mouse_x(self) -> int:
        """Pointer x relative to the upper left corner of the content."""
        return self.display.pointer_position()[0]

    @property
    def mouse_y(self) -> int:
        """Pointer y relative to the upper left corner of the content."""
        return self.display.pointer_position()[1]

    def request_integer(self, message: str | None = None, title: str | None = None) -> int:
        """Ask for an integer and block until the prompt is closed."""
        return self._request(PromptKind.INT, message or f"{self.title} needs an integer to continue", title)

    def request_number(self, message: str | None = None, title: str | None = None) -> float:
        """Ask for a number and block until the prompt is closed."""
        return self._request(PromptKind.DOUBLE, message or f"{self.title} needs a number to continue", title)

    def request_text(self, message: str | None = None, title: str | None = None) -> str:
        """Ask for a text and block until the prompt is closed."""
        return self._request(PromptKind.STRING, message or f"{self.title} needs a text to continue", title)

    def _request(self, kind: PromptKind, message: str, title: str | None):
        self.ensure_open()
        box = DialogueBox(kind, message, title or self.title)
        self.display.prompt(box)
        if not box.closed:
            if self._closed:
                raise PaperClosedError(self.title)
            raise PromptError(f"Prompt {box.title!r} was dismissed without an answer")
        return box.value

    def __repr__(self):
        state = "closed" if self._closed else "open"
        return f"<Paper {self.title!r} {self.width}x{self.height} {state}>"
