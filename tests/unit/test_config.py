"""Tests for TemplateProviderConfig."""

import pytest

from s3templates.core import TemplateProviderConfig

ENV_VARS = [
    "AWS_ACCESS_KEY_ID",
    "AWS_ACCESS_KEY_SECRET",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_TEMPLATE_BUCKET",
    "S3T_SEARCH_PATH",
    "S3T_REFRESH_INTERVAL",
    "S3T_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = TemplateProviderConfig.from_env()

    assert config.bucket_name is None
    assert config.search_path == ()
    assert config.refresh_interval == 0.0
    assert config.log_level == "INFO"
    assert config.access_key is None


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIA")
    monkeypatch.setenv("AWS_ACCESS_KEY_SECRET", "shh")
    monkeypatch.setenv("AWS_TEMPLATE_BUCKET", "tmpl")
    monkeypatch.setenv("S3T_SEARCH_PATH", "site::shared")
    monkeypatch.setenv("S3T_REFRESH_INTERVAL", "2.5")
    monkeypatch.setenv("S3T_LOG_LEVEL", "DEBUG")

    config = TemplateProviderConfig.from_env()

    assert config.access_key == "AKIA"
    assert config.secret_key == "shh"
    assert config.bucket_name == "tmpl"
    assert config.search_path == ("site", "shared")
    assert config.refresh_interval == 2.5
    assert config.log_level == "DEBUG"


def test_standard_secret_variable_is_fallback(monkeypatch):
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "standard")

    assert TemplateProviderConfig.from_env().secret_key == "standard"


def test_explicit_values_win(monkeypatch):
    monkeypatch.setenv("AWS_TEMPLATE_BUCKET", "from-env")
    monkeypatch.setenv("S3T_SEARCH_PATH", "env")

    config = TemplateProviderConfig.from_env(
        bucket_name="explicit", search_path=["a", "b"], secret_key="s"
    )

    assert config.bucket_name == "explicit"
    assert config.search_path == ("a", "b")
    assert config.secret_key == "s"


def test_credentials_hidden_from_repr():
    config = TemplateProviderConfig(access_key="AKIA", secret_key="topsecret")

    assert "topsecret" not in repr(config)
    assert "AKIA" not in repr(config)
