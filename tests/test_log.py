import pytest

from ecfmp.log import LogDecorator, Logger, NullLogger, decorate_message


class RecordingLogger(Logger):
    def __init__(self):
        self.records = []

    def debug(self, message):
        self.records.append(("debug", message))

    def info(self, message):
        self.records.append(("info", message))

    def warning(self, message):
        self.records.append(("warning", message))

    def error(self, message):
        self.records.append(("error", message))


def test_decorate_message():
    assert decorate_message("hello") == "ECFMP: hello"


@pytest.mark.parametrize("level", ["debug", "info", "warning", "error"])
def test_decorator_prefixes_each_level(level):
    inner = RecordingLogger()
    decorator = LogDecorator(inner)
    getattr(decorator, level)("message")
    assert inner.records == [(level, "ECFMP: message")]


def test_decorator_requires_logger():
    with pytest.raises(ValueError):
        LogDecorator(None)


def test_null_logger_returns_nothing():
    logger = NullLogger()
    results = [logger.debug("a"), logger.info("b"), logger.warning("c"), logger.error("d")]
    assert results == [None, None, None, None]


def test_decorator_over_null_logger_swallows():
    assert LogDecorator(NullLogger()).info("x") is None


def test_logger_is_abstract():
    with pytest.raises(TypeError):
        Logger()