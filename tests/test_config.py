import pytest

from ecoviz.config import DEFAULT_CORS_ORIGINS, DEFAULT_MODEL, Settings, load_settings

ENV_VARS = ("MODEL", "OPENAI_TEMPERATURE", "OPENAI_MAX_TOKENS", "CORS_ORIGINS", "LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env, tmp_path):
    settings = load_settings(str(tmp_path / "missing.env"))
    assert settings.model == DEFAULT_MODEL
    assert settings.temperature == 0.7
    assert settings.max_tokens == 1500
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.log_level == "INFO"
    assert settings.is_test
    assert settings.use_external_generator is False


def test_reads_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "MODEL=gpt-4o\n"
        "OPENAI_MAX_TOKENS=900\n"
        "CORS_ORIGINS=http://localhost:3000, https://example.org\n"
    )
    settings = load_settings(str(env_file))
    assert settings.model == "gpt-4o"
    assert settings.max_tokens == 900
    assert settings.cors_origins == ("http://localhost:3000", "https://example.org")


def test_process_env_wins_over_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("MODEL=from-file\n")
    clean_env.setenv("MODEL", "from-env")
    assert load_settings(str(env_file)).model == "from-env"


def test_malformed_numbers_use_defaults(clean_env, tmp_path):
    clean_env.setenv("OPENAI_TEMPERATURE", "warm")
    clean_env.setenv("OPENAI_MAX_TOKENS", "lots")
    settings = load_settings(str(tmp_path / "missing.env"))
    assert settings.temperature == 0.7
    assert settings.max_tokens == 1500


@pytest.mark.parametrize("key, environment, expected", [
    ("sk-test", "production", True),
    ("sk-test", "test", False),
    (None, "production", False),
])
def test_external_generator_gate(key, environment, expected):
    assert Settings(openai_api_key=key, environment=environment).use_external_generator is expected
