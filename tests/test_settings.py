from blog_client.core.settings import Settings
from blog_client.services.client import Service, ServiceConfig, load_service_config


def test_defaults_point_at_local_ports(monkeypatch) -> None:
    for name in ("BLOG_USER_SERVICE_URL", "BLOG_POST_SERVICE_URL", "BLOG_COMMENT_SERVICE_URL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.user_service_url == "http://localhost:8001"
    assert settings.post_service_url == "http://localhost:8002"
    assert settings.comment_service_url == "http://localhost:8003"
    assert settings.http_timeout_seconds is None


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("BLOG_POST_SERVICE_URL", "http://posts.internal:9000")
    monkeypatch.setenv("BLOG_HTTP_TIMEOUT_SECONDS", "2.5")

    settings = Settings(_env_file=None)

    assert settings.post_service_url == "http://posts.internal:9000"
    assert settings.http_timeout_seconds == 2.5


def test_service_config_from_settings(mocker) -> None:
    mocker.patch(
        "blog_client.services.client.settings",
        Settings(
            _env_file=None,
            BLOG_USER_SERVICE_URL="http://u",
            BLOG_POST_SERVICE_URL="http://p",
            BLOG_COMMENT_SERVICE_URL="http://c",
        ),
    )

    config = load_service_config()

    assert isinstance(config, ServiceConfig)
    assert config.base_url(Service.USER) == "http://u"
    assert config.base_url(Service.POST) == "http://p"
    assert config.base_url(Service.COMMENT) == "http://c"


def test_configure_logging_quiets_httpx() -> None:
    import logging

    from blog_client.core.logging import configure_logging

    configure_logging("INFO")
    assert logging.getLogger("httpx").level == logging.WARNING

    configure_logging("DEBUG")
    assert logging.getLogger("httpx").level == logging.DEBUG
