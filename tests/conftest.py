import pytest

from qr_payment import RequiredRequisite

# ---------------------------------------------------------------------------
# Keep env-driven switches at their defaults unless a test opts in
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("QR_PAYMENT_REJECT_SEPARATOR", "QR_PAYMENT_METRICS", "LOG_FORMAT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def required() -> RequiredRequisite:
    return RequiredRequisite(
        name="ООО «Три кита»",
        personal_acc="40702810138250123017",
        bank_name='ОАО "БАНК"',
        bic="044525225",
        correspondent_acc="30101810400000000225",
    )
