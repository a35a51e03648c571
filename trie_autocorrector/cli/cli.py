"""
cli.py - command line spelling corrector
Features:
- Interactive loop: type a word, get "did you mean" suggestions and the response time
- `benchmark` runs a timed batch of queries against the loaded dictionary
- /stats shows query statistics for the session
- One-shot modes: --word W (print suggestions) and --benchmark N
- Uses Rich for tables and formatting
"""

import argparse
import time
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich import box
from rich.markup import escape

from trie_autocorrector.core.bench_profiling import BenchmarkResult, run_benchmark
from trie_autocorrector.core.corrector import AutoCorrector
from trie_autocorrector.utils.config_manager import Config
from trie_autocorrector.utils.logger_utils import configure_logging

# initialise console for rich output
console = Console()

EXIT_COMMANDS = ("exit", "/quit")
BENCHMARK_COMMAND = "benchmark"


class CLI:
    """Interactive loop around an AutoCorrector."""
    def __init__(self, corrector: AutoCorrector, cfg: Optional[Config] = None, out: Optional[Console] = None):
        self.ac = corrector
        self.cfg = cfg or Config()
        self.console = out or console
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - Prompts the user for a word.
        - Handles exit, benchmark and slash commands.
        - Anything else is corrected.
        """
        self.console.rule("[bold magenta]Trie-Based Autocorrector[/bold magenta]")
        self.console.print(
            f"[cyan]{self.ac.word_count} words loaded.[/cyan] "
            "Type 'exit' to quit, 'benchmark' to run tests, /help for more.\n"
        )

        while self.running:
            try:
                line = Prompt.ask("[green]Enter word[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            self.handle(line)

    # COMMAND HANDLING -----------------------------------------------------------
    def handle(self, line: str) -> bool:
        """Dispatch one input line. Returns False once the loop should stop."""
        line = line.strip()
        if not line:
            return self.running

        if line in EXIT_COMMANDS:
            self._exit()
            return False

        if line == BENCHMARK_COMMAND:
            self.show_benchmark(run_benchmark(self.ac, self.cfg["benchmark_queries"]))
            return True

        if line == "/stats":
            self._show_stats()
            return True

        if line == "/help":
            self._help()
            return True

        if line.startswith("/"):
            self.console.print(f"[red]Unknown command:[/red] {escape(line)}")
            return True

        self._process_input(line)
        return True

    # CORE INPUT PROCESSING ---------------------------------------------------------------
    def _process_input(self, word: str):
        t0 = time.perf_counter()
        suggestions, exact = self.ac.check(word)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        if not suggestions:
            self.console.print("[dim]No suggestions found.[/dim]")
        elif exact:
            self.console.print("[green]✓ Correct spelling![/green]")
        else:
            self.console.print("[yellow]Did you mean:[/yellow] " + ", ".join(suggestions))
        self.console.print(f"[dim]Response time: {elapsed_ms:.3f} ms[/dim]")

    # DISPLAY -------------------------------------------------------------------------------
    def show_benchmark(self, res: BenchmarkResult):
        table = Table(title="Benchmark Results", box=box.SIMPLE, show_edge=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right", style="magenta")
        table.add_row("Total Queries", str(res.count))
        table.add_row("Total Time", f"{res.total_ms:.2f} ms")
        table.add_row("Average Time per Query", f"{res.avg_ms:.4f} ms")
        table.add_row("Queries per Second", f"{res.qps:.0f}")
        table.add_row("Median", f"{res.median_ms:.4f} ms")
        table.add_row("p99", f"{res.p99_ms:.4f} ms")
        self.console.print(table)

    def show_suggestions(self, words: List[str]):
        """One-shot mode: a row per queried word."""
        table = Table(title="Suggestions", box=box.SIMPLE, show_edge=False)
        table.add_column("Word", style="bold")
        table.add_column("Suggestions", style="yellow")
        for w in words:
            out = self.ac.correct(w)
            table.add_row(escape(w), ", ".join(out) if out else "(none)")
        self.console.print(table)

    def _show_stats(self):
        s = self.ac.stats.summary()
        table = Table(title="Query Statistics", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="white")
        table.add_row("Dictionary words", str(self.ac.word_count))
        table.add_row("Total queries", str(s["total_queries"]))
        table.add_row("With suggestions", str(s["answered"]))
        table.add_row("Exact hits", str(s["exact_hits"]))
        table.add_row("Success rate", f"{s['success_rate']:.2f}%")
        table.add_row("Avg latency", f"{s['avg_latency_ms']:.4f} ms")
        self.console.print(table)

    def _help(self):
        self.console.print(Panel(
            "exit, /quit   leave\n"
            "benchmark     time a batch of queries\n"
            "/stats        query statistics\n"
            "/help         this message\n"
            "anything else is checked and corrected",
            title="Commands",
            border_style="cyan",
        ))

    def _exit(self):
        self.console.rule("[red]Exiting[/red]")
        self.running = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trie-autocorrect",
        description="Trie-based autocorrector with edit distance",
    )
    parser.add_argument("dictionary", nargs="?", default=None,
                        help="whitespace-delimited word list (default: config 'dictionary')")
    parser.add_argument("--config", default=None, help="JSON config file")
    parser.add_argument("--max-dist", type=int, default=None, help="edit distance ceiling")
    parser.add_argument("--prune", action="store_true", default=None,
                        help="prune subtrees during fuzzy search")
    parser.add_argument("--benchmark", type=int, default=None, metavar="N",
                        help="run N timed queries and exit")
    parser.add_argument("--word", "-w", action="append", default=None,
                        help="print suggestions for a word and exit (repeatable)")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--log-file", default=None)
    return parser


def main(argv: Optional[List[str]] = None, out: Optional[Console] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    out = out or console

    cfg = Config(args.config)
    try:
        cfg.update(max_dist=args.max_dist, prune=args.prune, log_level=args.log_level)
    except ValueError as e:
        parser.error(str(e))
    configure_logging(cfg["log_level"], args.log_file)

    ac = AutoCorrector.from_config(cfg, args.dictionary)
    if not ac.loaded:
        out.print("[red]Warning:[/red] Dictionary not loaded properly.")

    cli = CLI(ac, cfg, out)
    if args.benchmark is not None:
        if args.benchmark <= 0:
            out.print("[red]--benchmark needs a positive number of queries[/red]")
            return 2
        cli.show_benchmark(run_benchmark(ac, args.benchmark))
        return 0
    if args.word:
        cli.show_suggestions(args.word)
        return 0

    cli.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
