"""Tests for configuration models and the YAML configuration loader.

Feature: jira-search
"""

import textwrap
from pathlib import Path

import pytest
import structlog
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from jira_search.models.config import AppConfig, JiraConfig, SearchConfig
from jira_search.utils.config_loader import CONFIG_DIR, ConfigLoader, ConfigurationError

log = structlog.stdlib.get_logger()

VALID_YAML = """
jira:
  base_url: https://jira.example.com/jira/
  username: ${JIRA_USERNAME}
  token: ${JIRA_TOKEN}
search:
  default_assignee: jdoe
  max_results: 25
logging:
  log_level: INFO
"""


def write_config(tmp_path: Path, content: str, name: str = "config.yaml") -> str:
    path = tmp_path / name
    path.write_text(textwrap.dedent(content))
    return str(path)


@given(st.integers(min_value=1, max_value=1000))
def test_property_max_results_bounds(max_results: int):
    config = SearchConfig(max_results=max_results)
    assert 1 <= config.max_results <= 1000


@given(st.integers().filter(lambda x: x < 1 or x > 1000))
def test_property_max_results_out_of_bounds_rejected(max_results: int):
    with pytest.raises(ValidationError):
        SearchConfig(max_results=max_results)


def test_search_config_defaults():
    config = SearchConfig()

    assert config.max_results == 50
    assert config.fields == ["summary", "status", "assignee", "priority", "created", "updated"]
    assert config.connect_timeout == 10.0
    assert config.read_timeout == 30.0


def test_jira_config_rejects_non_http_url():
    with pytest.raises(ValidationError, match="base_url"):
        JiraConfig(base_url="jira.example.com", username="u", token="t")


def test_load_config_substitutes_credentials(tmp_path, monkeypatch):
    monkeypatch.setenv("JIRA_USERNAME", "jdoe")
    monkeypatch.setenv("JIRA_TOKEN", "secret-token")

    config = ConfigLoader().load_config(write_config(tmp_path, VALID_YAML))

    assert isinstance(config, AppConfig)
    assert config.jira.base_url == "https://jira.example.com/jira"
    assert config.jira.username == "jdoe"
    assert config.jira.token == "secret-token"
    assert config.search.default_assignee == "jdoe"
    assert config.search.max_results == 25
    assert config.logging.log_level == "INFO"


@pytest.mark.parametrize("missing", ["JIRA_USERNAME", "JIRA_TOKEN"])
def test_missing_credential_env_var_is_configuration_error(tmp_path, monkeypatch, missing):
    monkeypatch.setenv("JIRA_USERNAME", "jdoe")
    monkeypatch.setenv("JIRA_TOKEN", "secret-token")
    monkeypatch.delenv(missing)

    with pytest.raises(ConfigurationError, match=f"{missing} environment variable is not set"):
        ConfigLoader().load_config(write_config(tmp_path, VALID_YAML))


def test_missing_file_is_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        ConfigLoader().load_config(str(tmp_path / "absent.yaml"))


def test_empty_file_is_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError, match="empty"):
        ConfigLoader().load_config(write_config(tmp_path, ""))


def test_invalid_yaml_is_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError, match="Failed to parse YAML"):
        ConfigLoader().load_config(write_config(tmp_path, "jira: [unclosed"))


def test_validation_failure_is_configuration_error(tmp_path):
    content = """
    jira:
      base_url: not-a-url
    """
    with pytest.raises(ConfigurationError, match="validation failed"):
        ConfigLoader().load_config(write_config(tmp_path, content))


def test_environment_selects_config_file(tmp_path, monkeypatch):
    monkeypatch.setenv("JIRA_USERNAME", "jdoe")
    monkeypatch.setenv("JIRA_TOKEN", "secret-token")
    write_config(tmp_path, VALID_YAML, name="default.yaml")
    write_config(
        tmp_path,
        VALID_YAML.replace("max_results: 25", "max_results: 5"),
        name="staging.yaml",
    )
    loader = ConfigLoader(config_dir=tmp_path)

    monkeypatch.setenv("JIRA_SEARCH_ENV", "staging")
    assert loader.load_config().search.max_results == 5

    monkeypatch.setenv("JIRA_SEARCH_ENV", "unknown")
    assert loader.load_config().search.max_results == 25


def test_missing_config_dir_is_configuration_error(tmp_path, monkeypatch):
    monkeypatch.delenv("JIRA_SEARCH_ENV", raising=False)
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        ConfigLoader(config_dir=tmp_path / "nowhere").load_config()


def test_packaged_default_config_loads(monkeypatch):
    monkeypatch.setenv("JIRA_USERNAME", "jdoe")
    monkeypatch.setenv("JIRA_TOKEN", "secret-token")
    monkeypatch.delenv("JIRA_SEARCH_ENV", raising=False)

    config = ConfigLoader().load_config()

    assert (CONFIG_DIR / "default.yaml").exists()
    assert config.jira.base_url.startswith("https://")
    assert config.search.max_results == 50
    assert config.search.connect_timeout == 10
    assert config.search.read_timeout == 30
