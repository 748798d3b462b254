import logging

import pytest

from roster.core.logger import RedactingFormatter, configure_logging

pytestmark = pytest.mark.unit


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("roster.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_extra_fields_are_appended_and_secrets_masked():
    fmt = RedactingFormatter("%(levelname)s %(message)s")

    line = fmt.format(_record(employee_id=4, password="hunter2", secretWord="open-sesame"))

    assert line.startswith("INFO hello world")
    assert "employee_id=4" in line
    assert "hunter2" not in line
    assert "open-sesame" not in line
    assert "password=***" in line


def test_configure_logging_is_idempotent():
    logger = configure_logging("debug")
    configure_logging("debug")

    ours = [h for h in logger.handlers if getattr(h, "_roster_handler", False)]
    assert len(ours) == 1
    assert logger.level == logging.DEBUG
