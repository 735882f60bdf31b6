import threading
from types import SimpleNamespace
from unittest.mock import MagicMock

import main
from console.browser_menu import BrowserMenu
from console.prompts import ConsoleOutcome
from fakes import ScriptedInput


def _fake_server():
    return SimpleNamespace(should_exit=False)


def test_schedule_shutdown_stops_server_after_grace():
    server = _fake_server()

    timer = main.schedule_shutdown(server, 0.01)
    timer.join(timeout=2)

    assert timer.daemon is True
    assert server.should_exit is True


def test_supervise_shutdown_waits_for_server_thread():
    server = _fake_server()

    def serve():
        while not server.should_exit:
            threading.Event().wait(0.005)

    thread = threading.Thread(target=serve)
    thread.start()

    main.supervise(ConsoleOutcome.SHUTDOWN, server, thread, grace_secs=0.01)

    assert server.should_exit is True
    assert not thread.is_alive()


def test_supervise_keep_running_does_not_stop_server(capsys):
    server = _fake_server()
    thread = MagicMock()

    main.supervise(ConsoleOutcome.EXIT_KEEP_RUNNING, server, thread, grace_secs=0.01)

    thread.join.assert_called_once_with()
    assert server.should_exit is False
    assert "API still running" in capsys.readouterr().out


def test_auto_open_disabled_by_default(registry, monkeypatch, capsys):
    monkeypatch.delenv("BROWSER_AUTO_OPEN", raising=False)
    browser_menu = MagicMock()

    main.auto_open_browser(registry, browser_menu)

    browser_menu.open.assert_not_called()
    assert "Auto-open disabled" in capsys.readouterr().out


def test_auto_open_uses_named_strategy(registry, monkeypatch):
    monkeypatch.setenv("BROWSER_AUTO_OPEN", "true")
    monkeypatch.setenv("BROWSER_INTERACTIVE", "false")
    monkeypatch.setenv("BROWSER_STRATEGY", "apiDocs")
    browser_menu = MagicMock()

    main.auto_open_browser(registry, browser_menu)

    browser_menu.open.assert_called_once_with(registry.resolve_by_name("apiDocs"))


def test_auto_open_unknown_strategy_lists_available(registry, monkeypatch, capsys):
    monkeypatch.setenv("BROWSER_AUTO_OPEN", "yes")
    monkeypatch.setenv("BROWSER_INTERACTIVE", "no")
    monkeypatch.setenv("BROWSER_STRATEGY", "h2Console")
    browser_menu = MagicMock()

    main.auto_open_browser(registry, browser_menu)

    browser_menu.open.assert_not_called()
    assert "Available: apiEndpoint, apiDocs, homePage" in capsys.readouterr().out


def test_auto_open_interactive_uses_menu_choice(registry, monkeypatch):
    monkeypatch.setenv("BROWSER_AUTO_OPEN", "1")
    monkeypatch.setenv("BROWSER_INTERACTIVE", "on")
    browser_menu = MagicMock()
    browser_menu.choose.return_value = None

    main.auto_open_browser(registry, browser_menu)

    browser_menu.choose.assert_called_once_with()
    browser_menu.open.assert_not_called()


def test_auto_open_interactive_with_closed_stdin_skips(registry, monkeypatch):
    monkeypatch.setenv("BROWSER_AUTO_OPEN", "true")
    monkeypatch.setenv("BROWSER_INTERACTIVE", "true")
    opened = []
    browser_menu = BrowserMenu(
        registry,
        8000,
        opener=lambda url: opened.append(url) or True,
        input_func=ScriptedInput([]),
    )

    main.auto_open_browser(registry, browser_menu)

    assert opened == []
