"""tkinter window backend."""

import logging
import tkinter as tk
from typing import TYPE_CHECKING

from PIL import Image, ImageTk

from .dialogue import DialogueBox
from .display import Display
from .keys import Key

if TYPE_CHECKING:
    from .paper import Paper

logger = logging.getLogger(__name__)

_tk_root: tk.Tk | None = None


def _root() -> tk.Tk:
    # one hidden Tk per process; every paper is a Toplevel of it
    global _tk_root
    if _tk_root is None:
        _tk_root = tk.Tk()
        _tk_root.withdraw()
    return _tk_root


class TkDisplay(Display):
    """tkinter window showing the paper's frames on a canvas."""

    def __init__(self):
        self.window: tk.Toplevel | None = None
        self.canvas: tk.Canvas | None = None
        self._photo = None

    def open(self, paper: "Paper"):
        self.window = tk.Toplevel(_root())
        self.window.title(paper.title)
        self.window.protocol("WM_DELETE_WINDOW", paper.close)

        self.canvas = tk.Canvas(
            self.window, width=paper.width, height=paper.height, highlightthickness=0
        )
        self.canvas.pack(fill=tk.BOTH, expand=True)

        def on_key(e):
            key = Key.from_keysym(e.keysym)
            if key is not None:
                paper.handle_key(key)
            return "break"

        self.canvas.bind("<KeyPress>", on_key)
        self.canvas.focus_set()
        self.window.update()

    def show(self, frame: Image.Image):
        # keep a reference or Tk drops the image
        self._photo = ImageTk.PhotoImage(frame)
        self.canvas.delete("all")
        self.canvas.create_image(0, 0, anchor=tk.NW, image=self._photo)
        self.window.update_idletasks()

    def close(self):
        if self.window is not None:
            self.window.destroy()
            self.window = None

    def focus(self):
        self.window.lift()
        self.canvas.focus_force()

    def pointer_position(self) -> tuple[int, int]:
        return (
            self.canvas.winfo_pointerx() - self.canvas.winfo_rootx(),
            self.canvas.winfo_pointery() - self.canvas.winfo_rooty(),
        )

    def prompt(self, box: DialogueBox):
        window = self.open_prompt(box)
        # wait_window keeps the event loop running while the caller blocks
        self.window.wait_window(window.dialog)

    def open_prompt(self, box: DialogueBox) -> "PromptWindow":
        """Build the modal dialog for `box` and grab input for it."""
        dialog = tk.Toplevel(self.window)
        dialog.title(box.title)
        dialog.resizable(False, False)
        dialog.transient(self.window)

        tk.Label(dialog, text=box.message, width=45).pack(side=tk.TOP, fill=tk.X, pady=6)

        text = tk.StringVar(dialog, value=box.text)

        def on_change(*_):
            # writing the reverted text back re-enters here as a no-op edit
            if box.edit(text.get()) != text.get():
                text.set(box.text)

        def step(action):
            text.set(action())

        def send(*_):
            box.submit()
            dialog.destroy()

        text.trace_add("write", on_change)

        row = tk.Frame(dialog)
        row.pack(side=tk.TOP, fill=tk.X, padx=6)
        if box.numeric:
            tk.Button(row, text="-", width=2, command=lambda: step(box.decrement)).pack(side=tk.LEFT)
        entry = tk.Entry(row, textvariable=text, width=36)
        entry.pack(side=tk.LEFT, fill=tk.X, expand=True)
        if box.numeric:
            tk.Button(row, text="+", width=2, command=lambda: step(box.increment)).pack(side=tk.LEFT)

        tk.Button(dialog, text="Send", command=send).pack(side=tk.BOTTOM, fill=tk.X, padx=6, pady=6)
        entry.bind("<Return>", send)
        dialog.protocol("WM_DELETE_WINDOW", send)

        entry.focus_set()
        # grabbing an unmapped window fails
        dialog.wait_visibility()
        dialog.grab_set()
        logger.debug("Prompt %r opened (%s)", box.title, box.kind.value)
        return PromptWindow(dialog, text, send)

    def mainloop(self):
        if self.window is not None:
            self.window.wait_window()


class PromptWindow:
    """Handles to an open prompt dialog."""

    def __init__(self, dialog: tk.Toplevel, text: tk.StringVar, send):
        self.dialog = dialog
        self.text = text
        self.send = send

    def close(self):
        """Close the dialog the way the window manager does."""
        self.dialog.tk.call(self.dialog.protocol("WM_DELETE_WINDOW"))
