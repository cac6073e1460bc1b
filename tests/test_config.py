from payment_api.config import PAYSTACK_BASE_URL, Settings
from payment_api.main import create_app


def test_settings_defaults(monkeypatch):
    for name in ("PORT", "HOST", "PAYSTACK_API_KEY", "PAYSTACK_BASE_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.paystack_api_key == ""
    assert settings.paystack_base_url == PAYSTACK_BASE_URL
    assert settings.log_level == "INFO"

def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("PAYSTACK_API_KEY", "sk_live_key")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.port == 8080
    assert settings.paystack_api_key == "sk_live_key"
    assert settings.log_level == "DEBUG"

def test_create_app_builds_gateway_from_settings(monkeypatch):
    monkeypatch.setenv("PAYSTACK_API_KEY", "sk_live_key")
    monkeypatch.setenv("PAYSTACK_BASE_URL", "https://paystack.example.test")

    app = create_app(settings=Settings())

    try:
        assert app.state.gateway.base_url == "https://paystack.example.test"
        assert len(app.state.store) == 0
    finally:
        app.state.gateway.close()
