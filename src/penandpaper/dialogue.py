"""Modal input prompts for strings, integers and numbers."""

import logging
import re
from enum import Enum

from .errors import PromptError

logger = logging.getLogger(__name__)


class PromptKind(str, Enum):
    STRING = "string"
    INT = "int"
    DOUBLE = "double"


INT_PATTERN = re.compile(r"[+-]?[0-9]+")
DOUBLE_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

# Placeholders a numeric field may hold while the user is still typing
PLACEHOLDERS = ("", ".")

SEEDS = {PromptKind.STRING: "", PromptKind.INT: "0", PromptKind.DOUBLE: "0.0"}
STEPS = {PromptKind.INT: 1, PromptKind.DOUBLE: 0.5}


class DialogueBox:
    """Input model behind a prompt window.

    The display forwards every change of the input field to `edit`, which
    reverts anything that is not a valid (or still-empty) literal of the
    requested kind. `submit` closes the box and produces the typed value.

    The previous text is kept for a single-step `revert`.
    """

    def __init__(self, kind: PromptKind, message: str, title: str):
        self.kind = kind
        self.message = message
        self.title = title
        self._current = SEEDS[kind]
        self._previous = self._current
        self.closed = False
        self.value = None

    @property
    def text(self) -> str:
        return self._current

    @property
    def numeric(self) -> bool:
        return self.kind is not PromptKind.STRING

    def accepts(self, text: str) -> bool:
        """Whether `text` may stand in the input field."""
        if self.kind is PromptKind.INT:
            return text in PLACEHOLDERS or INT_PATTERN.fullmatch(text) is not None
        if self.kind is PromptKind.DOUBLE:
            return text in PLACEHOLDERS or DOUBLE_PATTERN.fullmatch(text) is not None
        return True

    def edit(self, text: str) -> str:
        """Replace the field content; invalid input reverts to the last text."""
        self._check_open()
        if text == self._current:
            return self._current

        # the current text is always valid, so rejecting a change is the revert
        if self.accepts(text):
            self._previous, self._current = self._current, text
        return self._current

    def revert(self) -> str:
        """Undo the last accepted change (single step)."""
        self._check_open()
        self._current = self._previous
        return self._current

    def type(self, chars: str) -> str:
        """Type `chars` one keystroke at a time."""
        for char in chars:
            self.edit(self._current + char)
        return self._current

    def increment(self) -> str:
        return self._step(1)

    def decrement(self) -> str:
        return self._step(-1)

    def _step(self, sign: int) -> str:
        if not self.numeric:
            raise PromptError("Text prompts have no +/- controls")

        step = STEPS[self.kind] * sign
        if self._current in PLACEHOLDERS:
            return self.edit(str(step))
        if self.kind is PromptKind.INT:
            return self.edit(str(int(self._current) + step))
        return self.edit(str(float(self._current) + step))

    def submit(self):
        """Close the box and return the entered value."""
        self._check_open()
        if self.numeric and self._current in PLACEHOLDERS:
            self._current = "0"

        try:
            if self.kind is PromptKind.INT:
                value = int(self._current)
            elif self.kind is PromptKind.DOUBLE:
                value = float(self._current)
            else:
                value = self._current
        except ValueError as e:
            raise PromptError(f"Cannot read {self._current!r} as {self.kind.value}") from e

        self.closed = True
        self.value = value
        logger.debug("Prompt %r submitted %r", self.title, value)
        return value

    def _check_open(self):
        if self.closed:
            raise PromptError(f"Prompt {self.title!r} is already closed")
