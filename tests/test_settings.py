from checkout.core.settings import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("CHECKOUT_PRICING_TABLES_PATH", raising=False)
    monkeypatch.delenv("CHECKOUT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CHECKOUT_LOG_JSON", raising=False)

    s = Settings(_env_file=None)

    assert s.PRICING_TABLES_PATH is None
    assert s.LOG_LEVEL == "INFO"
    assert s.LOG_JSON is False


def test_env_prefix(monkeypatch, tmp_path):
    monkeypatch.setenv("CHECKOUT_PRICING_TABLES_PATH", str(tmp_path / "t.yaml"))
    monkeypatch.setenv("CHECKOUT_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CHECKOUT_LOG_JSON", "true")

    s = Settings(_env_file=None)

    assert s.PRICING_TABLES_PATH == str(tmp_path / "t.yaml")
    assert s.LOG_LEVEL == "DEBUG"
    assert s.LOG_JSON is True
