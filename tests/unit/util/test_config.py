"""Unit tests for computed settings."""

from playtrack.config import Settings


def test_development_urls():
    settings = Settings(environment="development", host="localhost", port=8000)

    assert settings.api.base_url == "http://localhost:8000"
    assert settings.api.frontend_url == "http://localhost:3000"
    assert settings.steam.realm == "http://localhost:8000"
    assert (
        settings.steam.return_url == "http://localhost:8000/auth/steam/authenticate"
    )


def test_production_urls():
    settings = Settings(
        environment="production",
        host="api.playtrack.example",
        frontend_host="playtrack.example",
    )

    assert settings.api.base_url == "https://api.playtrack.example"
    assert settings.api.frontend_url == "https://playtrack.example"
    assert (
        settings.steam.return_url
        == "https://api.playtrack.example/auth/steam/authenticate"
    )


def test_session_lifetime_follows_token_expiry():
    settings = Settings()

    assert settings.session_max_age == 30 * 24 * 60 * 60
