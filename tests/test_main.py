import os
from unittest import mock

os.environ["SDL_VIDEODRIVER"] = "dummy"

import pygame  # noqa: E402
import pytest  # noqa: E402

from sparkengine.logger import Logger, LogLevel  # noqa: E402
from sparkengine.main import main  # noqa: E402
from sparkengine.services import ServiceLocator, ServiceNotFoundError  # noqa: E402
from sparkengine.window import Window  # noqa: E402


@pytest.fixture
def log_messages():
    messages = []
    listener_id = Logger.message_received.add_listener(
        lambda level, message: messages.append((level, message))
    )
    yield messages
    Logger.message_received.remove_listener(listener_id)


def test_main_returns_zero_after_quit(tmp_path, log_messages):
    quit_events = [pygame.event.Event(pygame.QUIT)]
    with mock.patch("pygame.event.get", return_value=quit_events):
        result = main([str(tmp_path / "engine")])
    assert result == 0
    assert log_messages == []
    with pytest.raises(ServiceNotFoundError):
        ServiceLocator.get(Window)


def test_main_reports_failure(tmp_path, capsys, log_messages):
    with mock.patch("pygame.display.init", side_effect=pygame.error("boom")):
        result = main([str(tmp_path / "engine")])
    assert result == -1
    assert len(log_messages) == 1
    level, message = log_messages[0]
    assert level is LogLevel.ERROR
    assert message.startswith("EXCEPTION: ")
    output = capsys.readouterr().out
    assert "[Error] " in output
    assert "EXCEPTION: " in output


def test_main_with_empty_argv(log_messages):
    quit_events = [pygame.event.Event(pygame.QUIT)]
    with mock.patch("pygame.event.get", return_value=quit_events):
        assert main([]) == 0
    assert log_messages == []