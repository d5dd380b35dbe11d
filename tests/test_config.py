from flowlang.config import DEFAULT_HTTP_TIMEOUT, DEFAULT_MAX_CALL_STACK, load_config
from flowlang.service import FlowService


def test_defaults():
    config = load_config({})
    assert config.language == "en-US"
    assert config.http_timeout == DEFAULT_HTTP_TIMEOUT
    assert config.max_call_stack_size == DEFAULT_MAX_CALL_STACK == 99
    assert config.http_cache_enabled is False
    assert config.log_level == "WARNING"
    assert config.cors_origins == ["*"]


def test_environment_overrides():
    config = load_config(
        {
            "FLOW_LANGUAGE": "pt-BR",
            "FLOW_HTTP_TIMEOUT": "2.5",
            "FLOW_MAX_CALL_STACK": "10",
            "FLOW_HTTP_CACHE": "yes",
            "FLOW_HTTP_CACHE_TTL": "30",
            "FLOW_LOG_LEVEL": "debug",
            "FLOW_CORS_ORIGINS": "https://a.example.com, https://b.example.com",
        }
    )
    assert config.language == "pt-BR"
    assert config.http_timeout == 2.5
    assert config.max_call_stack_size == 10
    assert config.http_cache_enabled is True
    assert config.http_cache_ttl == 30.0
    assert config.log_level == "DEBUG"
    assert config.cors_origins == ["https://a.example.com", "https://b.example.com"]


def test_invalid_values_fall_back_to_defaults():
    config = load_config({"FLOW_HTTP_TIMEOUT": "soon", "FLOW_MAX_CALL_STACK": "-1"})
    assert config.http_timeout == DEFAULT_HTTP_TIMEOUT
    assert config.max_call_stack_size == DEFAULT_MAX_CALL_STACK


def test_service_reads_the_environment(monkeypatch):
    monkeypatch.setenv("FLOW_LANGUAGE", "pt-BR")
    monkeypatch.setenv("FLOW_HTTP_CACHE", "1")
    service = FlowService.create()
    assert service.language == "pt-BR"
    assert service.response_cache is not None
