"""Fixtures for tests against a mocked S3 service."""

import boto3
import pytest
from helpers import BUCKET
from moto import mock_aws


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Mocked AWS Credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("AWS_ACCESS_KEY_SECRET", raising=False)
    monkeypatch.delenv("AWS_TEMPLATE_BUCKET", raising=False)
    monkeypatch.delenv("S3T_SEARCH_PATH", raising=False)
    monkeypatch.delenv("S3T_REFRESH_INTERVAL", raising=False)


@pytest.fixture
def s3():
    """S3 client with a bucket of templates."""
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket=BUCKET)
        for key, body in {
            "index.html": b"{% extends 'base.html' %}{% block body %}home{% endblock %}",
            "layouts/base.html": b"<main>{% block body %}{% endblock %}</main>",
            "partials/nav.html": b"<nav></nav>",
        }.items():
            client.put_object(Bucket=BUCKET, Key=key, Body=body)
        yield client
