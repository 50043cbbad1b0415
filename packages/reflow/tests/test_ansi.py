"""Tests for pi_reflow.ansi"""
import pytest

from pi_reflow.ansi import (
    MARKER,
    RESET,
    AnsiScanner,
    AnsiWriter,
    CharKind,
    is_terminator,
    printable_width,
    rune_width,
    strip_ansi,
)


class TestConstants:
    def test_marker_is_esc(self):
        assert MARKER == "\x1b"
        assert ord(MARKER) == 0x1B

    def test_reset(self):
        assert RESET == "\x1b[0m"


class TestIsTerminator:
    def test_uppercase(self):
        for ch in "@AHJKZ":
            assert is_terminator(ch)

    def test_lowercase(self):
        for ch in "amz":
            assert is_terminator(ch)

    def test_non_terminators(self):
        for ch in "09;[ ":
            assert not is_terminator(ch)

    def test_range_edges(self):
        assert not is_terminator("?")  # 0x3F
        assert not is_terminator("[")  # 0x5B
        assert not is_terminator("`")  # 0x60
        assert not is_terminator("{")  # 0x7B


class TestRuneWidth:
    def test_ascii(self):
        assert rune_width("a") == 1

    def test_cjk(self):
        assert rune_width("中") == 2

    def test_emoji(self):
        assert rune_width("😀") == 2

    def test_combining_mark(self):
        assert rune_width("\u0301") == 0

    def test_control_chars_are_zero(self):
        assert rune_width("\n") == 0
        assert rune_width("\t") == 0


class TestAnsiScanner:
    def test_classifies_sequence(self):
        scanner = AnsiScanner()
        kinds = [scanner.feed(ch) for ch in "\x1b[31mx"]
        assert kinds == [
            CharKind.MARKER,
            CharKind.SEQUENCE,
            CharKind.SEQUENCE,
            CharKind.SEQUENCE,
            CharKind.TERMINATOR,
            CharKind.PRINTABLE,
        ]
        assert not scanner.in_sequence

    def test_unterminated_sequence_swallows_rest(self):
        scanner = AnsiScanner()
        kinds = [scanner.feed(ch) for ch in "\x1b[12;34"]
        assert CharKind.PRINTABLE not in kinds
        assert scanner.in_sequence

    def test_state_survives_across_feeds(self):
        scanner = AnsiScanner()
        scanner.feed("\x1b")
        scanner.feed("[")
        assert scanner.in_sequence
        assert scanner.feed("m") is CharKind.TERMINATOR
        assert scanner.feed("m") is CharKind.PRINTABLE


class TestPrintableWidth:
    def test_empty(self):
        assert printable_width("") == 0

    def test_ascii(self):
        assert printable_width("hello") == 5
        assert printable_width("a") == 1

    def test_ignores_sequences(self):
        assert printable_width("\x1b[31mHello\x1b[0m") == 5
        assert printable_width("\x1b[31mRed\x1b[0m \x1b[32mGreen\x1b[0m") == 9

    def test_truecolor_sequence(self):
        assert printable_width("\x1b[38;2;249;38;114mfoo\x1b[0m") == 3

    def test_wide_characters(self):
        assert printable_width("中文") == 4
        assert printable_width("日本語") == 6
        assert printable_width("Hello世界") == 9
        assert printable_width("\x1b[31m中文\x1b[0m") == 4

    def test_emoji(self):
        assert printable_width("😀a") == 3

    def test_matches_stripped_width(self):
        for s in ["plain", "\x1b[1m\x1b[31mbold red\x1b[0m", "\x1b[2J中\x1b[H", "\x1b[31", ""]:
            assert printable_width(s) == printable_width(strip_ansi(s))


class TestStripAnsi:
    def test_removes_sequences(self):
        assert strip_ansi("\x1b[31mred\x1b[0m") == "red"
        assert strip_ansi("\x1b[1m\x1b[31mbold red\x1b[0m") == "bold red"

    def test_plain_text_unchanged(self):
        assert strip_ansi("hello") == "hello"

    def test_unterminated_sequence_hides_remainder(self):
        assert strip_ansi("ab\x1b[31;4") == "ab"


class TestAnsiWriterBuffer:
    def test_tracks_last_sequence_and_resets(self):
        w = AnsiWriter()
        w.write("\x1b[31mred")
        assert w.getvalue() == "\x1b[31mred"
        assert w.last_sequence == "\x1b[31m"

        w.reset_ansi()
        assert w.getvalue() == "\x1b[31mred\x1b[0m"

    def test_no_reset_without_open_style(self):
        w = AnsiWriter()
        w.write("\x1b[31mred\x1b[0m")
        w.reset_ansi()
        assert w.getvalue() == "\x1b[31mred\x1b[0m"
        assert w.last_sequence == ""

    def test_remembers_last_style(self):
        w = AnsiWriter()
        w.write("\x1b[31mred\x1b[32mgreen")
        assert w.last_sequence == "\x1b[32m"

    def test_cursor_sequences_are_not_style(self):
        w = AnsiWriter()
        w.write("\x1b[31mred\x1b[2A")
        assert w.last_sequence == "\x1b[31m"

        w2 = AnsiWriter()
        w2.write("\x1b[2Aup")
        assert w2.last_sequence == ""
        assert not w2.style_pending
        w2.reset_ansi()
        assert w2.getvalue() == "\x1b[2Aup"

    def test_reset_clears_pending(self):
        w = AnsiWriter()
        w.write("\x1b[31mred")
        w.reset_ansi()
        w.reset_ansi()
        assert w.getvalue() == "\x1b[31mred\x1b[0m"

    def test_restore_reopens_style(self):
        w = AnsiWriter()
        w.write("\x1b[31mred")
        w.reset_ansi()
        w.restore_ansi()
        assert w.style_pending
        w.reset_ansi()
        assert w.getvalue() == "\x1b[31mred\x1b[0m\x1b[31m\x1b[0m"

    def test_restore_without_style_writes_nothing(self):
        w = AnsiWriter()
        w.write("plain")
        w.restore_ansi()
        assert w.getvalue() == "plain"

    def test_sequence_split_across_writes(self):
        w = AnsiWriter()
        w.write("\x1b[3")
        w.write("4mblue")
        assert w.last_sequence == "\x1b[34m"
        assert str(w) == "\x1b[34mblue"

    def test_unterminated_sequence_still_emitted(self):
        w = AnsiWriter()
        w.write("ok\x1b[31")
        assert w.getvalue() == "ok\x1b[31"


class TestAnsiWriterForward:
    def test_passes_plain_text(self, collected):
        w = AnsiWriter(collected)
        w.write("hello")
        assert collected.text == "hello"

    def test_reset_and_restore(self, collected):
        w = AnsiWriter(collected)
        w.write("\x1b[31mred")
        w.reset_ansi()
        w.restore_ansi()
        assert collected.text == "\x1b[31mred\x1b[0m\x1b[31m"
        assert w.last_sequence == "\x1b[31m"

    def test_reset_code_clears_last_sequence(self, collected):
        w = AnsiWriter(collected)
        w.write("\x1b[31mred\x1b[0m")
        assert w.last_sequence == ""
        w.reset_ansi()
        assert collected.text == "\x1b[31mred\x1b[0m"

    def test_forwarding_writer_has_no_buffer(self, collected):
        w = AnsiWriter(collected)
        w.write("x")
        assert w.getvalue() == ""


@pytest.mark.parametrize("seq", ["\x1b[1m", "\x1b[38;5;214m", "\x1b[48;2;1;2;3m"])
def test_any_sgr_sequence_becomes_last_style(seq):
    w = AnsiWriter()
    w.write(seq + "x")
    assert w.last_sequence == seq
