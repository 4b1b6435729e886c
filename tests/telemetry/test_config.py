"""Tests for environment-driven telemetry configuration."""

from __future__ import annotations

import pytest
from battleships.telemetry.config import TelemetryConfig

ENV_VARS = [
    "BATTLESHIPS_ENABLE_TRACING",
    "BATTLESHIPS_ENABLE_METRICS",
    "BATTLESHIPS_ENABLE_LOGGING",
    "OTEL_TRACES_ENABLED",
    "OTEL_METRICS_ENABLED",
    "OTEL_LOGS_ENABLED",
    "OTEL_EXPORTER_OTLP_ENDPOINT",
    "OTEL_EXPORTER_OTLP_TRACES_ENDPOINT",
    "OTEL_EXPORTER_OTLP_METRICS_ENDPOINT",
    "OTEL_EXPORTER_OTLP_LOGS_ENDPOINT",
    "OTEL_SERVICE_NAME",
    "OTEL_SERVICE_NAMESPACE",
    "OTEL_RESOURCE_ATTRIBUTES",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment() -> None:
    config = TelemetryConfig.from_env()
    assert config == TelemetryConfig()
    assert config.service_name == "battleships"
    assert not (config.enable_tracing or config.enable_metrics or config.enable_logging)


def test_boolean_flags_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BATTLESHIPS_ENABLE_TRACING", "yes")
    monkeypatch.setenv("OTEL_METRICS_ENABLED", "TRUE")
    monkeypatch.setenv("BATTLESHIPS_ENABLE_LOGGING", "0")
    monkeypatch.setenv("OTEL_LOGS_ENABLED", "1")

    config = TelemetryConfig.from_env()
    assert config.enable_tracing is True
    assert config.enable_metrics is True
    # The BATTLESHIPS_* variable wins over its OTEL_* fallback.
    assert config.enable_logging is False


def test_base_endpoint_expands_per_signal_and_enables_exporters(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://collector:4317/")
    monkeypatch.setenv("OTEL_EXPORTER_OTLP_LOGS_ENDPOINT", "http://logs:4317")

    config = TelemetryConfig.from_env()
    assert config.otlp_traces_endpoint == "http://collector:4317/v1/traces"
    assert config.otlp_metrics_endpoint == "http://collector:4317/v1/metrics"
    assert config.otlp_logs_endpoint == "http://logs:4317"
    assert config.enable_tracing and config.enable_metrics and config.enable_logging


def test_service_identity_and_resource_attributes(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OTEL_SERVICE_NAME", "fleet")
    monkeypatch.setenv("OTEL_SERVICE_NAMESPACE", "arcade")
    monkeypatch.setenv("OTEL_RESOURCE_ATTRIBUTES", "deployment.environment=dev, region = eu ,junk")

    config = TelemetryConfig.from_env()
    assert config.service_name == "fleet"
    assert config.service_namespace == "arcade"
    assert config.resource_attributes == {"deployment.environment": "dev", "region": "eu"}


def test_overrides_take_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OTEL_SERVICE_NAME", "fleet")
    monkeypatch.setenv("BATTLESHIPS_ENABLE_METRICS", "true")

    config = TelemetryConfig.from_env(service_name="override", enable_metrics=False)
    assert config.service_name == "override"
    assert config.enable_metrics is False
