import json
import logging

import pytest

from common.logging import JsonFormatter, configure_logging
from qr_payment import MissingRequiredField, PaymentParser, PrefixMismatch
from tests.samples import RAW_MINIMAL


@pytest.fixture
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


def test_json_formatter_includes_extras():
    record = logging.LogRecord("qr_payment.parser", logging.INFO, __file__, 1, "parsed %s", ("Имя",), None)
    record.requisite = "Name"
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "parsed Имя"
    assert payload["requisite"] == "Name"
    assert payload["level"] == "INFO"
    assert "service" not in payload


@pytest.mark.usefixtures("_restore_root_logger")
def test_configure_logging_json_with_service(capsys):
    configure_logging("json", service_name="payments", level="DEBUG")

    with pytest.raises(PrefixMismatch):
        PaymentParser().from_str("BAD")

    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines() if line]
    rejected = [p for p in lines if p["logger"] == "qr_payment.parser"]
    assert rejected
    assert rejected[-1]["service"] == "payments"
    assert rejected[-1]["error"] == "PrefixMismatch"


@pytest.mark.usefixtures("_restore_root_logger")
def test_configure_logging_text_from_env(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "text")
    handler = configure_logging()
    assert not isinstance(handler.formatter, JsonFormatter)
    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger().handlers == [handler]


@pytest.mark.usefixtures("_restore_root_logger")
def test_rejection_names_offending_requisite(capsys):
    configure_logging("json", level="DEBUG")

    with pytest.raises(MissingRequiredField):
        PaymentParser().from_str(RAW_MINIMAL.replace("|BIC=044525225", ""))

    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines() if line]
    rejected = [p for p in lines if p["logger"] == "qr_payment.parser"]
    assert rejected[-1]["error"] == "MissingRequiredField"
    assert rejected[-1]["requisite"] == "BIC"
