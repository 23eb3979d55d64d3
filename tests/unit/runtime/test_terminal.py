"""Tests for terminal mode control sequences.

Verifies raw-mode lifecycle safety: the saved tty state comes back on every
exit path, since a leaked raw mode leaves the user's shell unusable.
"""

from __future__ import annotations

import termios
import unittest
from unittest import mock

from iconpick.terminal import ENTER_TUI_SEQUENCE, EXIT_TUI_SEQUENCE, TerminalController, terminal_size


class TerminalBehaviorTests(unittest.TestCase):
    def test_enable_and_disable_tui_mode_use_alternate_screen_sequences(self) -> None:
        saved_state = [1, 2, 3]

        with mock.patch("iconpick.terminal.termios.tcgetattr", return_value=saved_state), mock.patch(
            "iconpick.terminal.tty.setraw"
        ) as setraw_mock, mock.patch("iconpick.terminal.os.write") as write_mock, mock.patch(
            "iconpick.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_tui_mode()
            controller.disable_tui_mode()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        self.assertEqual(write_mock.call_args_list[0].args, (1, ENTER_TUI_SEQUENCE))
        self.assertEqual(write_mock.call_args_list[1].args, (1, EXIT_TUI_SEQUENCE))
        self.assertIn(b"\x1b[?25l", ENTER_TUI_SEQUENCE)
        self.assertIn(b"\x1b[?25h", EXIT_TUI_SEQUENCE)
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        with mock.patch("iconpick.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch.object(controller, "enable_tui_mode") as enable_mock, mock.patch.object(
            controller, "disable_tui_mode"
        ) as disable_mock:
            with self.assertRaises(RuntimeError):
                with controller.raw_mode():
                    raise RuntimeError("boom")

        enable_mock.assert_called_once()
        disable_mock.assert_called_once()

    def test_tty_state_is_restored_even_if_exit_write_fails(self) -> None:
        with mock.patch("iconpick.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch("iconpick.terminal.os.write", side_effect=OSError("closed")), mock.patch(
            "iconpick.terminal.termios.tcsetattr"
        ) as setattr_mock:
            with self.assertRaises(OSError):
                controller.disable_tui_mode()

        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, [0])

    def test_terminal_size_returns_columns_then_rows(self) -> None:
        with mock.patch("iconpick.terminal.shutil.get_terminal_size", return_value=mock.Mock(columns=90, lines=40)):
            self.assertEqual(terminal_size(), (90, 40))


if __name__ == "__main__":
    unittest.main()
