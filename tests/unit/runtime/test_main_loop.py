from __future__ import annotations

import unittest
from types import SimpleNamespace
from unittest import mock

from iconpick.errors import RetrievalError
from iconpick.grid import compute_grid
from iconpick.icons.source import filter_by_prefix
from iconpick.query import compile_query, filter_candidates
from iconpick.runtime import RuntimeLoopTiming, run_main_loop
from iconpick.runtime.app import run_browser
from iconpick.runtime.messages import MessageQueue
from iconpick.runtime.session import SessionController
from iconpick.runtime.state import SessionState
from iconpick.ui_theme import DEFAULT_THEME

CORPUS = ["mdi:home", "mdi:cat", "fa:home"]


class _MemorySource:
    def retrieve(self, query: str | None, prefix: str | None) -> list[str]:
        return filter_candidates(compile_query(query), filter_by_prefix(CORPUS, prefix))


class _FailingSource:
    def retrieve(self, query: str | None, prefix: str | None) -> list[str]:
        raise RetrievalError("No icon cache found")


class _RecordingRenderer:
    def __init__(self) -> None:
        self.frames = 0

    def draw(self, state: SessionState) -> None:
        self.frames += 1


class _FakeTerminal:
    instances: list["_FakeTerminal"] = []

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.events: list[str] = []
        _FakeTerminal.instances.append(self)

    def raw_mode(self):
        terminal = self

        class _Scope:
            def __enter__(self) -> None:
                terminal.events.append("enter")

            def __exit__(self, *exc_info) -> bool:
                terminal.events.append("exit")
                return False

        return _Scope()


def _make_controller() -> SessionController:
    state = SessionState(geometry=compute_grid(84, 30), messages=MessageQueue(clock=lambda: 0.0))
    controller = SessionController(state, _MemorySource())
    controller.load_initial(None, None)
    return controller


def _key_reader(keys: list[str]):
    pending = list(keys)
    reads: list[int | None] = []

    def read(fd: int, timeout_ms: int | None = None) -> str:
        reads.append(timeout_ms)
        if not pending:
            return "q"
        return pending.pop(0)

    return read, reads


class MainLoopTests(unittest.TestCase):
    def test_loop_returns_committed_selection(self) -> None:
        controller = _make_controller()
        renderer = _RecordingRenderer()
        read, reads = _key_reader(["RIGHT", "", "ENTER_CR"])
        sleep = mock.Mock()

        selection = run_main_loop(
            controller,
            renderer,
            0,
            RuntimeLoopTiming(),
            get_terminal_size=lambda: (84, 30),
            read=read,
            sleep=sleep,
        )

        self.assertEqual(selection, "mdi:cat")
        self.assertEqual(reads, [500, 500, 500])
        self.assertEqual(renderer.frames, 3)
        sleep.assert_called_with(0.033)

    def test_quit_returns_none(self) -> None:
        controller = _make_controller()
        read, _reads = _key_reader(["q"])

        selection = run_main_loop(
            controller,
            _RecordingRenderer(),
            0,
            RuntimeLoopTiming(),
            get_terminal_size=lambda: (84, 30),
            read=read,
            sleep=lambda _seconds: None,
        )

        self.assertIsNone(selection)

    def test_resize_consumes_the_frame_without_reading_input(self) -> None:
        controller = _make_controller()
        sizes = iter([(12, 14), (12, 14)])
        read, reads = _key_reader(["ESC"])

        with mock.patch.object(controller, "handle_resize", wraps=controller.handle_resize) as resize_mock:
            run_main_loop(
                controller,
                _RecordingRenderer(),
                0,
                RuntimeLoopTiming(),
                get_terminal_size=lambda: next(sizes),
                read=read,
                sleep=lambda _seconds: None,
            )

        resize_mock.assert_called_once_with(12, 14)
        self.assertEqual(len(reads), 1)
        self.assertEqual(controller.state.results, ["mdi:home", "mdi:cat"])


class RunBrowserTests(unittest.TestCase):
    def setUp(self) -> None:
        _FakeTerminal.instances.clear()
        patches = [
            mock.patch("iconpick.runtime.app.TerminalController", _FakeTerminal),
            mock.patch("iconpick.runtime.app.terminal_size", return_value=(84, 30)),
            mock.patch("sys.stdin", SimpleNamespace(fileno=lambda: 0)),
            mock.patch("sys.stdout", SimpleNamespace(fileno=lambda: 1)),
        ]
        for patcher in patches:
            patcher.start()
            self.addCleanup(patcher.stop)

    def test_terminal_is_restored_when_initial_retrieval_fails(self) -> None:
        with self.assertRaises(RetrievalError):
            run_browser(_FailingSource(), "home", None, DEFAULT_THEME)

        self.assertEqual(_FakeTerminal.instances[0].events, ["enter", "exit"])

    def test_selection_is_returned_after_terminal_restore(self) -> None:
        with mock.patch("iconpick.runtime.app.run_main_loop", return_value="fa:home") as loop_mock:
            selection = run_browser(_MemorySource(), "home", None, DEFAULT_THEME, verbose=True)

        self.assertEqual(selection, "fa:home")
        self.assertEqual(_FakeTerminal.instances[0].events, ["enter", "exit"])
        controller = loop_mock.call_args.args[0]
        self.assertEqual(controller.state.results, ["mdi:home", "fa:home"])
        self.assertEqual(controller.state.search.buffer, "home")
        self.assertTrue(controller.state.verbose)


if __name__ == "__main__":
    unittest.main()
