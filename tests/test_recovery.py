import logging

from skeleton.recovery import print_stack_trace, recover, stack_trace


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def _raise(message):
    raise ValueError(message)


def test_stack_trace_of_raised_exception():
    try:
        _raise("boom")
    except ValueError as exc:
        text = stack_trace(exc)
    assert text.startswith("panic: boom\n")
    assert text.endswith("\n")
    assert "_raise" in text
    assert "ValueError: boom" in text


def test_stack_trace_of_plain_value():
    text = stack_trace("oops")
    assert text.startswith("panic: oops\n")
    assert "test_stack_trace_of_plain_value" in text


def test_print_stack_trace_logs_and_prints(capsys):
    logger = logging.Logger("rec")
    handler = _ListHandler()
    logger.addHandler(handler)
    print_stack_trace(KeyError("k"), logger)
    out = capsys.readouterr().out
    assert out.startswith("panic: 'k'\n")
    assert handler.messages[0].startswith("panic: 'k'\n")


def test_recover_swallows_exception(capsys):
    reached = []
    with recover():
        reached.append(1)
        _raise("inside")
    assert reached == [1]
    assert "panic: inside" in capsys.readouterr().out


def test_recover_without_error_prints_nothing(capsys):
    with recover():
        value = 1 + 1
    assert value == 2
    assert capsys.readouterr().out == ""