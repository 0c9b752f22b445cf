"""
cli.py - interactive next-word suggestion prompt
Features:
- Builds the bigram model from the message corpus once at start-up
- Asks for one word at a time and prints the suggested next words
- Quits on the quit token (/q by default), EOF or Ctrl-C
- Uses Rich for console output
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from rich.console import Console
from rich.markup import escape

from word_suggestion.context.normalizer import normalize_word
from word_suggestion.core.bigram_model import BigramModel
from word_suggestion.core.errors import CorpusUnreadable
from word_suggestion.utils.config_manager import Config
from word_suggestion.utils.logger_utils import setup_logging

logger = logging.getLogger(__name__)

FIRST_PROMPT = "Please begin your sentence by typing the first word (type {quit} to quit):"
NEXT_PROMPT = "Continue the sentence by typing the next word (type {quit} to quit):"
SEPARATOR = "|"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def format_suggestions(words: List[str]) -> str:
    """['a', 'b'] -> '| a | b |'"""
    if not words:
        return SEPARATOR
    inner = f" {SEPARATOR} ".join(words)
    return f"{SEPARATOR} {inner} {SEPARATOR}"


class CLI:
    """Prompt loop: read a word, show the model's suggestions, repeat until quit."""
    def __init__(self, model: BigramModel, console: Optional[Console] = None,
                 stream: Optional[TextIO] = None, quit_token: str = "/q"):
        self.model = model
        self.console = console or Console()
        # None reads from stdin via input()
        self.stream = stream
        self.quit_token = quit_token.lower()
        self.running = True
        self.first = True

    def run(self):
        while self.running:
            raw = self._read()
            if raw is None:
                break

            word = normalize_word(raw)
            if self.quit_token in word:
                self.running = False
                break
            if not word:
                continue
            self.first = False

            # a whole phrase may be typed, the last word drives the suggestion
            query = word.split()[-1]
            results = self.model.suggest(query)
            logger.debug("suggest(%r) -> %s", query, results)
            self._display_suggestions(results)

    # INPUT ------------------------------------------------------------------
    def _read(self) -> Optional[str]:
        """Returns the typed line, or None on EOF / Ctrl-C."""
        template = FIRST_PROMPT if self.first else NEXT_PROMPT
        self.console.print(f"[cyan]{escape(template.format(quit=self.quit_token))}[/cyan]")
        try:
            line = self.console.input("", stream=self.stream)
        except (EOFError, KeyboardInterrupt):
            return None
        # stream.readline() gives "" only at EOF, blank lines keep their "\n"
        if self.stream is not None and line == "":
            return None
        return line

    # DISPLAY ----------------------------------------------------------------
    def _display_suggestions(self, results: List[str]):
        self.console.print("[bold]Suggestions for next word:[/bold]")
        self.console.print(f"[magenta]{escape(format_suggestions(results))}[/magenta]")
        self.console.print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Suggest the next word from a corpus of text messages.")
    parser.add_argument("--corpus", type=str, default=None, help="corpus file, one message per line")
    parser.add_argument("--config", type=str, default="config.json", help="JSON config file")
    parser.add_argument("--log-level", type=str.upper, default=None, choices=LOG_LEVELS,
                        help="logging level (default from config)")
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None,
         stream: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    console = console or Console()
    try:
        setup_logging(args.log_level or cfg.get("log_level"))
    except (TypeError, ValueError) as e:
        console.print(f"[red]Invalid log level:[/red] {escape(str(e))}")
        return 2

    corpus_path = args.corpus or cfg.get("corpus_path")

    try:
        model = BigramModel.from_path(corpus_path, config=cfg.bigram_config())
    except CorpusUnreadable as e:
        if isinstance(e.__cause__, FileNotFoundError):
            console.print(f'[red]Error: "{escape(e.path)}" not found. Aborting process.[/red]')
        else:
            console.print(f'[red]Error: "{escape(e.path)}" could not be read ({escape(e.reason)}). Aborting process.[/red]')
        return 1
    except ValueError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        return 2

    CLI(model, console=console, stream=stream, quit_token=cfg.get("quit_token")).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
