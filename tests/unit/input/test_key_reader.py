"""Raw byte decoding tests driven through an OS pipe."""

from __future__ import annotations

import os
import unittest

from iconpick.input import _PENDING_BYTES, read_key


class KeyReaderTests(unittest.TestCase):
    def setUp(self) -> None:
        _PENDING_BYTES.clear()
        self.read_fd, self.write_fd = os.pipe()

    def tearDown(self) -> None:
        _PENDING_BYTES.clear()
        os.close(self.read_fd)
        os.close(self.write_fd)

    def feed(self, data: bytes) -> None:
        os.write(self.write_fd, data)

    def test_timeout_without_input_returns_empty_token(self) -> None:
        self.assertEqual(read_key(self.read_fd, timeout_ms=0), "")

    def test_plain_characters_pass_through(self) -> None:
        self.feed(b"q:")

        self.assertEqual(read_key(self.read_fd, timeout_ms=10), "q")
        self.assertEqual(read_key(self.read_fd, timeout_ms=10), ":")

    def test_multibyte_characters_decode_as_one_token(self) -> None:
        self.feed("é☃x".encode("utf-8"))

        tokens = [read_key(self.read_fd, timeout_ms=10) for _ in range(3)]

        self.assertEqual(tokens, ["é", "☃", "x"])

    def test_truncated_multibyte_character_keeps_following_key(self) -> None:
        self.feed(b"\xc3a")

        self.assertEqual(read_key(self.read_fd, timeout_ms=10), "\ufffd")
        self.assertEqual(read_key(self.read_fd, timeout_ms=10), "a")

    def test_control_bytes_map_to_named_keys(self) -> None:
        self.feed(b"\r\n\x7f\x08\x03")

        tokens = [read_key(self.read_fd, timeout_ms=10) for _ in range(5)]

        self.assertEqual(tokens, ["ENTER_CR", "ENTER_LF", "BACKSPACE", "BACKSPACE", "CTRL_C"])

    def test_arrow_sequences_decode_to_directions(self) -> None:
        self.feed(b"\x1b[A\x1b[B\x1b[C\x1b[D\x1bOA")

        tokens = [read_key(self.read_fd, timeout_ms=10) for _ in range(5)]

        self.assertEqual(tokens, ["UP", "DOWN", "RIGHT", "LEFT", "UP"])

    def test_lone_escape_times_out_to_esc(self) -> None:
        self.feed(b"\x1b")

        self.assertEqual(read_key(self.read_fd, timeout_ms=10), "ESC")

    def test_escape_followed_by_text_keeps_the_text(self) -> None:
        self.feed(b"\x1bx")

        self.assertEqual(read_key(self.read_fd, timeout_ms=10), "ESC")
        self.assertEqual(read_key(self.read_fd, timeout_ms=10), "x")

    def test_unsupported_csi_sequence_is_drained(self) -> None:
        self.feed(b"\x1b[3~k")

        self.assertEqual(read_key(self.read_fd, timeout_ms=10), "UNKNOWN")
        self.assertEqual(read_key(self.read_fd, timeout_ms=10), "k")


if __name__ == "__main__":
    unittest.main()
