"""Tests for pi_reflow.padding"""
import pytest

from pi_reflow.errors import WriterClosedError
from pi_reflow.padding import PaddingWriter, pad, pad_bytes


class TestPad:
    def test_single_line(self):
        assert pad("Hello", 8) == "Hello   "

    def test_multiple_lines(self):
        assert pad("foo\nbar", 5) == "foo  \nbar  "

    def test_zero_width(self):
        assert pad("test", 0) == "test"

    def test_long_lines_untouched(self):
        assert pad("toolong", 5) == "toolong"

    def test_trailing_newline(self):
        assert pad("foo\nbar\n", 5) == "foo  \nbar  \n"

    def test_empty_string(self):
        assert pad("", 5) == ""

    def test_ansi_not_counted(self):
        assert pad("\x1b[31mfoo\x1b[0m", 6) == "\x1b[31mfoo\x1b[0m   "

    def test_open_style_reset_at_line_end(self):
        assert pad("\x1b[31mfoo\nbar", 4) == "\x1b[31mfoo \x1b[0m\nbar "

    def test_wide_characters(self):
        assert pad("中文", 6) == "中文  "

    def test_bytes_variant(self):
        assert pad_bytes(b"ab", 4) == b"ab  "


class TestPaddingWriter:
    def test_writer(self):
        w = PaddingWriter(8)
        w.write("test")
        w.close()
        assert w.getvalue() == "test    "

    def test_multiple_writes(self):
        w = PaddingWriter(10)
        w.write("foo")
        w.write("bar")
        w.close()
        assert w.getvalue() == "foobar    "

    def test_writes_with_newlines(self):
        w = PaddingWriter(5)
        w.write("foo\n")
        w.write("bar")
        w.close()
        assert w.getvalue() == "foo  \nbar  "

    def test_custom_pad_func(self):
        w = PaddingWriter(6, lambda writer: writer.write("."))
        w.write("hi")
        w.close()
        assert w.getvalue() == "hi...."

    def test_last_line_padded_only_on_close(self):
        w = PaddingWriter(4)
        w.write("ab")
        assert w.getvalue() == "ab"
        w.close()
        assert w.getvalue() == "ab  "

    def test_forward_to_sink(self, collected):
        w = PaddingWriter(3, forward=collected)
        w.write("a\nb")
        w.close()
        assert collected.text == "a  \nb  "

    def test_write_after_close_raises(self):
        w = PaddingWriter(5)
        w.close()
        with pytest.raises(WriterClosedError, match="PaddingWriter is closed"):
            w.write("test")
