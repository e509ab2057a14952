"""
cli.py - command line interface for the prefix autocompleter
Features:
- Type a prefix, get the top-k highest weight completions in a table
- Slash commands for single best match, exact weight lookup and config
- Per-query latency tracking and a small built-in benchmark
- Uses Rich for tables and formatting
"""

import argparse
import shlex
import sys
import time
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich import box

from prefix_autocompleter.core.bench_profiling import DEFAULT_PREFIXES, profile, summarize
from prefix_autocompleter.core.errors import AutocompleteError
from prefix_autocompleter.core.protocols import Autocompletor
from prefix_autocompleter.core.term import Term
from prefix_autocompleter.utils.config_manager import DEFAULT_CONFIG_PATH, Config
from prefix_autocompleter.utils.logger_utils import LOG
from prefix_autocompleter.utils.metrics_tracker import Metrics
from prefix_autocompleter.utils.term_loader import build_from_file

HELP = """\
[bold]<prefix>[/bold]            top-k words starting with prefix
/top <prefix> [k]   same, with an explicit k (quote prefixes with spaces: /top "new y" 3)
/match <prefix>     single best completion
/weight <word>      weight of an exact word (0.0 if absent)
/k <n>              change the default k
/config [key val]   show or change settings
/stats              query latency averages
/bench [runs]       time top_matches over a few sample prefixes
/help /quit"""


class CLI:
    """Interactive loop around an Autocompletor: prompts, dispatches, renders."""

    def __init__(
        self,
        ac: Autocompletor,
        cfg: Optional[Config] = None,
        metrics: Optional[Metrics] = None,
        console: Optional[Console] = None,
    ):
        self.ac = ac
        self.cfg = cfg or Config()
        self.metrics = metrics or Metrics()
        self.console = console or Console()
        self.k = int(self.cfg["top_k"])
        self.running = True

    def run(self):
        """Prompt until /quit, EOF or Ctrl-C."""
        self.console.rule("[bold magenta]Prefix Autocompleter[/bold magenta]")
        self.console.print(f"[cyan]{len(self.ac)} terms loaded. Type a prefix, /help for commands.[/cyan]\n")

        while self.running:
            try:
                line = Prompt.ask("[green]prefix[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            self.handle(line)

    def handle(self, line: str) -> None:
        """Process one line of input. Errors from a command are reported, not raised."""
        if not line or not line.strip():
            return
        try:
            if line.startswith("/"):
                self._handle_command(line)
            else:
                self._query(line, self.k)
        except (AutocompleteError, ValueError, KeyError) as e:
            LOG.error(f"[CLI] {line!r}: {e}")
            self.console.print(f"[red]Error:[/red] {e}")

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, line: str):
        p = shlex.split(line)
        if not p:
            return
        c = p[0].lower()

        if c in ("/q", "/quit", "/exit"):
            self._exit()
            return

        if c == "/help":
            self.console.print(Panel(HELP, title="Commands", border_style="cyan"))
            return

        if c == "/top" and len(p) > 1:
            k = int(p[2]) if len(p) > 2 else self.k
            self._query(p[1], k)
            return

        if c == "/match" and len(p) > 1:
            self._match(p[1])
            return

        if c == "/weight" and len(p) > 1:
            self._weight(p[1])
            return

        if c == "/k" and len(p) > 1:
            self._set_k(p[1])
            return

        if c == "/config":
            if len(p) == 1:
                self._show_config()
            elif len(p) == 3:
                self._set_config(p[1], p[2])
            else:
                self.console.print("usage: /config [key val]")
            return

        if c == "/stats":
            self._show_stats()
            return

        if c == "/bench":
            runs = int(p[1]) if len(p) > 1 else int(self.cfg["bench_runs"])
            self._bench(runs)
            return

        self.console.print(f"[red]Unknown command:[/red] {line}")

    # QUERIES -------------------------------------------------------------------
    def _query(self, prefix: str, k: int):
        t0 = time.perf_counter()
        terms = self.ac.top_terms(prefix, k)
        dt = time.perf_counter() - t0
        self.metrics.record("top_matches_time", dt)

        if not terms:
            self.console.print(f"[dim](no matches for {prefix!r})[/dim]")
            return
        self._display_matches(prefix, k, terms)
        self.console.print(f"[dim]{dt * 1000:.3f} ms[/dim]")

    def _match(self, prefix: str):
        t0 = time.perf_counter()
        best = self.ac.top_term(prefix)
        self.metrics.record("top_match_time", time.perf_counter() - t0)
        if best is None:
            self.console.print(f"[dim](no matches for {prefix!r})[/dim]")
            return
        self.console.print(f"[green]Best:[/green] {best.word}  [dim]({best.weight:g})[/dim]")

    def _weight(self, word: str):
        t0 = time.perf_counter()
        w = self.ac.weight_of(word)
        self.metrics.record("weight_of_time", time.perf_counter() - t0)
        self.console.print(f"{word}: [magenta]{w:g}[/magenta]")

    # DISPLAY -------------------------------------------------------------------------------
    def _display_matches(self, prefix: str, k: int, terms: List[Term]):
        table = Table(title=f"Top {k} for {prefix!r}", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        show_weights = bool(self.cfg["show_weights"])
        if show_weights:
            table.add_column("Weight", justify="right", style="magenta")

        for i, t in enumerate(terms, 1):
            row = [str(i), t.word]
            if show_weights:
                row.append(f"{t.weight:g}")
            table.add_row(*row)
        self.console.print(table)

    # SETTINGS ------------------------------------------------------------------------
    def _set_k(self, raw: str):
        k = int(raw)
        if k < 0:
            raise ValueError(f"k must be >= 0, got {k}")
        self.k = self.cfg.set("top_k", k)
        self.console.print(f"k = {self.k}")

    def _show_config(self):
        table = Table(title="Config", box=box.MINIMAL)
        table.add_column("Option", style="cyan")
        table.add_column("Value")
        for key, val in self.cfg.items():
            table.add_row(key, str(val))
        self.console.print(table)

    def _set_config(self, key: str, raw: str):
        if key == "top_k":
            self._set_k(raw)
            return
        val = self.cfg.set(key, raw)
        if key in ("log_level", "log_path", "log_color"):
            _configure_logging(self.cfg)
        self.console.print(f"{key} = {val}")

    # STATS/BENCH ---------------------------------------------------------------------
    def _show_stats(self):
        table = Table(title="Query latency", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Calls", justify="right")
        table.add_column("Avg ms", justify="right")
        for key, (n, avg) in self.metrics.summary().items():
            table.add_row(key, str(n), f"{avg * 1000:.4f}")
        table.add_row("terms", str(len(self.ac)), "")
        self.console.print(table)

    def _bench(self, runs: int):
        times = profile(
            self.ac, DEFAULT_PREFIXES, runs=runs,
            warmup=int(self.cfg["bench_warmup"]), k=self.k,
        )
        s = summarize(times)
        self.console.print(
            f"bench: {s['count']} calls, mean {s['mean_ms']:.4f} ms, "
            f"median {s['median_ms']:.4f} ms, p99 {s['p99_ms']:.4f} ms"
        )

    # EXIT ------------------------------------------------------------------------
    def _exit(self):
        self.console.rule("[red]Exiting[/red]")
        self.running = False


def _configure_logging(cfg: Config) -> None:
    LOG.configure(path=cfg["log_path"], level=cfg["log_level"], use_color=cfg["log_color"])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prefix-autocomplete",
        description="Interactive prefix autocomplete over a weighted term file.",
    )
    parser.add_argument("terms", nargs="?", help="term file; defaults to config terms_path")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="JSON config path")
    parser.add_argument("-k", "--top", type=int, help="results per query (not saved)")
    parser.add_argument("--tui", action="store_true", help="launch the live-typing TUI")
    return parser


def main(argv=None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    cfg = Config(args.config)
    try:
        _configure_logging(cfg)
    except ValueError as e:
        LOG.warning(f"[CLI] bad logging config in {args.config}: {e}")
        console.print(f"[yellow]Ignoring logging config:[/yellow] {e}")

    path = args.terms or cfg["terms_path"]
    try:
        ac = build_from_file(path)
    except (OSError, AutocompleteError) as e:
        LOG.error(f"[CLI] could not load {path}: {e}")
        console.print(f"[red]Could not load terms:[/red] {e}")
        return 1

    k = args.top if args.top is not None else int(cfg["top_k"])
    if k < 0:
        console.print(f"[red]k must be >= 0, got {k}[/red]")
        return 2

    if args.tui:
        from prefix_autocompleter.tui_app import TUIAutocompleter
        TUIAutocompleter(ac, k=k).run()
        return 0

    cli = CLI(ac, cfg=cfg, console=console)
    cli.k = k
    cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
