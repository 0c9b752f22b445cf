# tests/test_logger_utils.py
import io

import pytest

from word_suggestion.core.bigram_model import BigramModel
from word_suggestion.utils.logger_utils import Log, setup_logging


@pytest.fixture
def log_stream():
    buf = io.StringIO()
    setup_logging("INFO", stream=buf)
    yield buf
    setup_logging("WARNING")


def test_time_block_logs_duration(log_stream):
    with Log.time_block("unit") as t:
        pass
    assert t.elapsed >= 0.0
    assert "unit done" in log_stream.getvalue()


def test_model_build_is_logged(log_stream):
    BigramModel.from_text(["i love dogs"])
    out = log_stream.getvalue()
    assert "build_bigrams done" in out
    assert "1 lines, 2 distinct bigrams" in out


def test_level_filters_records():
    buf = io.StringIO()
    setup_logging("WARNING", stream=buf)
    Log.metric("hidden", 1)
    assert buf.getvalue() == ""
