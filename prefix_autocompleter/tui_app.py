# tui_app.py - Prefix Autocompleter TUI Application
# -------------------------------------------------------
# Text based terminal UI around a BinarySearchAutocompleter.
# Features:
#  - Live top-k completions as you type
#  - Color-coded suggestion list (weight relative to the best match)
#  - TAB accepts the top suggestion, 1-9 accept that row, Ctrl+R clears the input
#  - Real-time latency readout
# -------------------------------------------------------

from __future__ import annotations
import time
from typing import List, Optional, Tuple

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from prefix_autocompleter.core.protocols import Autocompletor
from prefix_autocompleter.utils.logger_utils import LOG

Prediction = Tuple[str, float]


def format_predictions(predictions: List[Prediction]) -> str:
    """
    Render (word, weight) pairs as Rich markup, one per line.
    Colour is the weight relative to the first (largest) one:
      > 0.7 green, > 0.4 cyan, else yellow
    """
    if not predictions:
        return "[dim]No suggestions[/dim]"
    top = predictions[0][1] or 1.0
    lines = []
    for i, (word, weight) in enumerate(predictions, 1):
        rel = weight / top
        color = "green" if rel > 0.7 else "cyan" if rel > 0.4 else "yellow"
        lines.append(f"[b]{i}[/b] • [{color}]{word}[/{color}]  [dim]{weight:g}[/dim]")
    return "\n".join(lines)


def pick_suggestion(predictions: List[Prediction], index: int) -> Optional[str]:
    """Word shown on row index (1-based), None if there is no such row."""
    if index < 1 or index > len(predictions):
        return None
    return predictions[index - 1][0]


class SuggestionPanel(Static):
    """Right-side panel listing the current top-k completions."""

    def update_predictions(self, predictions: List[Prediction]):
        self.update(format_predictions(predictions))


class TypingLatency(Static):
    """Bottom-left readout showing how long the last query took."""

    def set_latency(self, seconds: float):
        self.update(f"[dim]Latency:[/dim] {seconds * 1000:.3f}ms")


# Main Application -----------------------------------------------------------------
class TUIAutocompleter(App):
    """
    Input box on the left, completions on the right.
    Every keystroke re-runs top_matches on the whole input as the prefix.
    """

    CSS = """
    #left { width: 2fr; }
    #right { width: 1fr; border: round $accent; padding: 0 1; }
    #bottom { height: 1; }
    #status { width: 1fr; content-align: right middle; }
    """

    BINDINGS = [
        Binding("tab", "accept_top", "Accept top", priority=True),
        Binding("ctrl+r", "clear_input", "Clear"),
    ] + [
        Binding(str(n), f"accept({n})", f"Accept #{n}", show=False, priority=True)
        for n in range(1, 10)
    ]

    suggestions = reactive(list)  # most recent (word, weight) results
    latency = reactive(0.0)

    def __init__(self, ac: Autocompletor, k: int = 5):
        super().__init__()
        self.ac = ac
        self.k = k

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Container(id="left"):
                yield Input(placeholder="Start typing…", id="text_input")
            with Container(id="right"):
                yield SuggestionPanel(id="predictions")
        with Horizontal(id="bottom"):
            yield TypingLatency(id="latency")
            yield Static(f"{len(self.ac)} terms", id="status")
        yield Footer()

    def predict(self, prefix: str) -> List[Prediction]:
        """top_terms as (word, weight) pairs."""
        return [(t.word, t.weight) for t in self.ac.top_terms(prefix, self.k)]

    async def on_input_changed(self, event: Input.Changed) -> None:
        if not event.value:
            self.suggestions = []
            return
        start = time.perf_counter()
        preds = self.predict(event.value)
        self.latency = time.perf_counter() - start
        self.suggestions = preds

    # Reactive state (watcher functions) ---------------------------------------
    def watch_suggestions(self, suggestions):
        self.query_one(SuggestionPanel).update_predictions(suggestions)

    def watch_latency(self, latency):
        self.query_one(TypingLatency).set_latency(latency)

    # Actions ----------------------------------------------------------------------
    def action_accept(self, index: int):
        """Replace the input with suggestion number index (1-based)."""
        word = pick_suggestion(self.suggestions, index)
        if word is None:
            return
        LOG.debug(f"[TUI] accepted #{index}: {word}")
        input_widget = self.query_one(Input)
        input_widget.value = word
        input_widget.cursor_position = len(word)

    def action_accept_top(self):
        """TAB = replace the input with the top suggestion."""
        self.action_accept(1)

    def action_clear_input(self):
        self.query_one(Input).value = ""

    def on_mount(self):
        self.title = "Prefix Autocompleter"
        self.query_one(SuggestionPanel).update_predictions([])
