import logging

from gedcom_codec.logging import get_logger, list_active_loggers, log_info, log_warning


def test_module_loggers_nest_under_base():
    logger = get_logger("exporter")
    assert logger.name == "gedcom_codec.exporter"
    assert logger.propagate is True
    assert "gedcom_codec.exporter" in list_active_loggers()


def test_dotted_module_names_are_kept():
    assert get_logger("gedcom_codec.parser_core").name == "gedcom_codec.parser_core"


def test_base_logger_owns_handlers():
    base = get_logger()
    assert base.name == "gedcom_codec"
    assert base.propagate is False
    assert any(isinstance(h, logging.StreamHandler) for h in base.handlers)


def test_helpers_log_through_base(caplog):
    base = logging.getLogger("gedcom_codec")
    base.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.INFO, logger="gedcom_codec"):
            log_info("hello %s", "world")
            log_warning("careful")
    finally:
        base.removeHandler(caplog.handler)

    messages = [r.getMessage() for r in caplog.records]
    assert "hello world" in messages
    assert "careful" in messages
