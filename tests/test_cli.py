# tests/test_cli.py - prompt loop driven through an input stream
import io

import pytest
from rich.console import Console

from word_suggestion.cli.cli import CLI, main, format_suggestions
from word_suggestion.core.bigram_model import BigramModel, BigramConfig


def make_console():
    return Console(file=io.StringIO(), width=500, color_system=None)


@pytest.fixture
def model():
    return BigramModel.from_text(
        ["i love dogs", "i love cats", "i love dogs"],
        config=BigramConfig(connectors=("of",)),
    )


def run(model, text):
    console = make_console()
    cli = CLI(model, console=console, stream=io.StringIO(text))
    cli.run()
    return cli, console.file.getvalue()


def test_format_suggestions():
    assert format_suggestions(["a", "b", "c"]) == "| a | b | c |"
    assert format_suggestions([]) == "|"


def test_suggestions_printed(model):
    _, out = run(model, "Love\n/q\n")
    assert "Please begin your sentence" in out
    assert "Suggestions for next word:" in out
    assert "| dogs | of | of |" in out


def test_follow_up_prompt(model):
    _, out = run(model, "i\nlove\n/q\n")
    assert out.count("Please begin your sentence") == 1
    assert "Continue the sentence by typing the next word" in out
    assert "| love | of | of |" in out


def test_quit_token_stops_loop(model):
    cli, out = run(model, "/q\nlove\n")
    assert not cli.running
    assert "Suggestions for next word:" not in out


def test_eof_stops_loop(model):
    cli, out = run(model, "love\n")
    assert out.count("Suggestions for next word:") == 1


def test_blank_input_is_skipped(model):
    _, out = run(model, "\n   \nlove\n/q\n")
    assert out.count("Suggestions for next word:") == 1
    assert out.count("Please begin your sentence") == 3


def test_phrase_uses_last_word(model):
    _, out = run(model, "I LOVE\n/q\n")
    assert "| dogs | of | of |" in out


def test_main_runs_session(tmp_path):
    corpus = tmp_path / "messages.txt"
    corpus.write_text("i love dogs\ni love dogs\n", encoding="utf-8")
    console = make_console()
    code = main(
        ["--corpus", str(corpus), "--config", str(tmp_path / "none.json")],
        console=console,
        stream=io.StringIO("love\n/q\n"),
    )
    assert code == 0
    assert "| dogs |" in console.file.getvalue()


def test_main_missing_corpus(tmp_path):
    console = make_console()
    missing = tmp_path / "missing.txt"
    code = main(["--corpus", str(missing), "--config", str(tmp_path / "none.json")],
                console=console, stream=io.StringIO(""))
    assert code == 1
    out = console.file.getvalue()
    assert str(missing) in out
    assert "not found. Aborting process." in out


def test_input_containing_quit_token_quits(model):
    cli, out = run(model, "hello/q\nlove\n")
    assert not cli.running
    assert "Suggestions for next word:" not in out


def test_unknown_log_level_rejected_by_parser(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--log-level", "verbose", "--config", str(tmp_path / "none.json")],
             console=make_console(), stream=io.StringIO(""))
    assert exc.value.code == 2


def test_bad_log_level_in_config(tmp_path):
    cfg = tmp_path / "config.json"
    cfg.write_text('{"log_level": "verbose"}', encoding="utf8")
    console = make_console()
    code = main(["--config", str(cfg)], console=console, stream=io.StringIO(""))
    assert code == 2
    assert "Invalid log level" in console.file.getvalue()


def test_log_level_is_case_insensitive(tmp_path):
    corpus = tmp_path / "messages.txt"
    corpus.write_text("i love dogs\n", encoding="utf-8")
    code = main(["--corpus", str(corpus), "--config", str(tmp_path / "none.json"),
                 "--log-level", "warning"],
                console=make_console(), stream=io.StringIO("/q\n"))
    assert code == 0


def test_main_undecodable_corpus_names_the_cause(tmp_path):
    corpus = tmp_path / "bad.txt"
    corpus.write_bytes(b"\xff\xfe\xfa broken")
    console = make_console()
    code = main(["--corpus", str(corpus), "--config", str(tmp_path / "none.json")],
                console=console, stream=io.StringIO(""))
    assert code == 1
    out = console.file.getvalue()
    assert "could not be read" in out
    assert "codec can't decode" in out
    assert "not found" not in out
