"""Textual preview: edit raw text on the left, see it paragraph-spaced on the right."""

from pathlib import Path
from typing import Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Header, Static, TextArea

from .constants import ParaSpaceConstants
from .units import DEFAULT_SPACING, TextUnit
from .view import TerminalParagraphView


def location_to_offset(text: str, location: tuple[int, int]) -> int:
    """Convert a TextArea (row, column) location into an offset in text."""
    row, column = location
    lines = text.split("\n")
    return sum(len(line) + 1 for line in lines[:row]) + column


def preview_text(view: TerminalParagraphView, caret: Optional[tuple[int, int]]) -> Text:
    out = Text()
    for y, line in enumerate(view.lines):
        if y:
            out.append("\n")
        if caret is not None and caret[0] == y:
            x = caret[1]
            out.append(line.text[:x])
            out.append(line.text[x:x + 1] or " ", style="reverse")
            out.append(line.text[x + 1:])
        else:
            out.append(line.text)
    return out


class ParaSpaceApp(App):
    """Side-by-side raw text editor and paragraph-spaced preview."""

    CSS = """
    TextArea {
        width: 1fr;
        border: none;
    }
    #preview {
        width: 1fr;
        padding: 0 1;
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+s", "save", "Save"),
    ]

    def __init__(self, filename: Optional[str] = None, spacing: TextUnit = DEFAULT_SPACING):
        super().__init__()
        self.filename = filename
        self.paragraph_spacing = spacing
        self.paragraph_view = TerminalParagraphView(
            num_columns=ParaSpaceConstants.DOCUMENT_WIDTH, spacing=spacing
        )
        self.caret_offset = 0

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            yield TextArea(id="source")
            yield Static(id="preview")
        yield Footer()

    def on_mount(self) -> None:
        source = self.query_one("#source", TextArea)
        if self.filename and Path(self.filename).exists():
            try:
                content = Path(self.filename).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                self.notify(f"Error loading file: {e}", severity="error")
            else:
                source.load_text(content.replace("\r\n", "\n"))
                self.sub_title = f"Editing: {self.filename}"
        source.focus()
        self.refresh_preview()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self.refresh_preview()

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        source = self.query_one("#source", TextArea)
        self.caret_offset = location_to_offset(source.text, event.selection.end)
        self.refresh_preview()

    def refresh_preview(self) -> None:
        text = self.query_one("#source", TextArea).text
        preview = self.query_one("#preview", Static)
        width = preview.size.width - 2
        if width >= ParaSpaceConstants.MIN_LINE_LENGTH:
            self.paragraph_view = TerminalParagraphView(
                num_columns=width, spacing=self.paragraph_spacing
            )
        self.paragraph_view.render(text)
        caret_offset = min(self.caret_offset, len(text))
        caret = self.paragraph_view.caret_position(caret_offset)
        mapping = self.paragraph_view.transformed.offset_mapping
        display_offset = mapping.original_to_transformed(caret_offset)
        self.title = f"original {caret_offset} / display {display_offset}"
        preview.update(preview_text(self.paragraph_view, caret))

    def action_save(self) -> None:
        if not self.filename:
            self.notify("No filename set", severity="warning")
            return
        try:
            Path(self.filename).write_text(
                self.query_one("#source", TextArea).text, encoding="utf-8"
            )
        except OSError as e:
            self.notify(f"Error saving: {e}", severity="error")
        else:
            self.notify(f"Saved to {self.filename}")


def main():
    """Run the Textual app."""
    import sys
    filename = sys.argv[1] if len(sys.argv) > 1 else None
    ParaSpaceApp(filename=filename).run()


if __name__ == "__main__":
    main()
