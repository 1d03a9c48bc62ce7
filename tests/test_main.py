import socket
import threading

import pytest

from skeleton.main import main, wait_timeout


def test_wait_timeout_returns_false_when_event_is_set():
    event = threading.Event()
    event.set()
    assert wait_timeout(event, 1.0) is False


def test_wait_timeout_returns_true_on_timeout():
    assert wait_timeout(threading.Event(), 0.01) is True


def test_wait_timeout_sees_event_set_from_another_thread():
    event = threading.Event()
    timer = threading.Timer(0.01, event.set)
    timer.start()
    try:
        assert wait_timeout(event, 5.0) is False
    finally:
        timer.cancel()


def test_version_flag_prints_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "dev" in capsys.readouterr().out


@pytest.fixture
def service_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_PATH", "")
    monkeypatch.setenv("LOG_LEVEL", "error")
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("DB_SQLITE_PATH", str(tmp_path / "db.sqlite"))
    return monkeypatch


def test_main_fails_on_invalid_port(service_env):
    service_env.setenv("PORT", "not-a-port")
    assert main([]) == 1


def test_main_fails_when_port_is_taken(service_env):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as blocker:
        blocker.bind(("0.0.0.0", 0))
        blocker.listen(1)
        service_env.setenv("PORT", str(blocker.getsockname()[1]))
        assert main([]) == 1