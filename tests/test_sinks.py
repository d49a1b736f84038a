"""Tests for output sinks."""

import io
import sys

from agenttrace.observability.sinks import CallbackSink, ConsoleSink, FileSink


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_writes_to_given_stream(self):
        stream = io.StringIO()
        ConsoleSink(stream).write("hello")

        assert stream.getvalue() == "hello\n"

    def test_no_double_newline(self):
        stream = io.StringIO()
        ConsoleSink(stream).write("block\n")

        assert stream.getvalue() == "block\n"

    def test_auto_newline_disabled(self):
        stream = io.StringIO()
        ConsoleSink(stream, auto_newline=False).write("partial")

        assert stream.getvalue() == "partial"

    def test_default_stream_follows_stdout(self, monkeypatch):
        replacement = io.StringIO()
        sink = ConsoleSink()
        monkeypatch.setattr(sys, "stdout", replacement)

        sink.write("x")
        assert replacement.getvalue() == "x\n"


class TestFileSink:
    """Tests for FileSink."""

    def test_appends_blocks(self, tmp_path):
        path = tmp_path / "logs" / "trace.log"

        with FileSink(path) as sink:
            sink.write("one")
            sink.write("two\n")

        assert path.read_text() == "one\ntwo\n"

    def test_no_file_until_first_write(self, tmp_path):
        path = tmp_path / "trace.log"
        sink = FileSink(path)
        sink.flush()
        sink.close()

        assert not path.exists()

    def test_append_mode_keeps_existing_content(self, tmp_path):
        path = tmp_path / "trace.log"
        path.write_text("earlier\n")

        with FileSink(path) as sink:
            sink.write("later")

        assert path.read_text() == "earlier\nlater\n"

    def test_write_mode_truncates_once(self, tmp_path):
        path = tmp_path / "trace.log"
        path.write_text("stale\n")

        sink = FileSink(path, mode="w")
        sink.write("a")
        sink.close()
        sink.write("b")
        sink.close()

        assert path.read_text() == "a\nb\n"


class TestCallbackSink:
    """Tests for CallbackSink."""

    def test_passes_output_through(self):
        received = []
        CallbackSink(received.append).write("block")

        assert received == ["block"]

    def test_on_close_called(self):
        closed = []
        sink = CallbackSink(lambda _: None, on_close=lambda: closed.append(True))
        sink.close()

        assert closed == [True]
