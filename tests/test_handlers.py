import logging

import pytest

from skeleton.application import Application, new_web_app
from skeleton.config import load_config
from skeleton.handlers import Handler


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


@pytest.fixture
def handler_and_log():
    config = load_config(environ={"LOG_PATH": ""})
    logger = logging.Logger("handlers-test")
    capture = _ListHandler()
    logger.addHandler(capture)
    logger.setLevel(logging.DEBUG)
    app = Application(config=config, log=logger, db=None, app=new_web_app(config, logger))
    return Handler(app), capture


def test_example_returns_success_body(handler_and_log):
    handler, _ = handler_and_log
    body, status = handler.example()
    assert status == 200
    assert body["type"] == "success"
    assert body["message"] == "Handler or controller response example"


def test_example_data_fields(handler_and_log):
    handler, _ = handler_and_log
    body, _ = handler.example()
    data = body["data"]
    assert data["id"] == 1
    assert data["name"] == "Contoh"
    assert data["price"] == 2500
    assert data["created_at"] == data["updated_at"]
    assert "error_data" not in body


def test_example_logs_the_response(handler_and_log):
    handler, capture = handler_and_log
    handler.example()
    assert len(capture.messages) == 1
    assert capture.messages[0].startswith("Example log : ")
    assert "Contoh" in capture.messages[0]


def test_handler_keeps_application(handler_and_log):
    handler, _ = handler_and_log
    assert handler.app.config.get_string("APP_NAME") == "skeleton"