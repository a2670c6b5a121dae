"""Tests for configuration loading and YAML overrides."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest  # type: ignore

from tailorflow.config import DEFAULT_CONFIG, ConfigError, load_config
from tailorflow.resume.parse_resume import extract_resume_structure


@pytest.fixture(autouse=True)
def no_env_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TAILORFLOW_TIMEOUT", raising=False)


def _write(tmp_path: Path, body: str) -> str:
    path = tmp_path / "tailorflow.yaml"
    path.write_text(body, encoding="utf-8")
    return str(path)


def test_defaults_without_file() -> None:
    assert load_config() is DEFAULT_CONFIG
    assert DEFAULT_CONFIG.scraper.timeout == 10.0
    assert DEFAULT_CONFIG.job.max_requirements == 10


def test_default_config_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.scraper.timeout = 1.0  # type: ignore[misc]


def test_yaml_overrides(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "scraper:\n"
        "  timeout: 20\n"
        "  user_agents:\n"
        "    generic: test-agent/1.0\n"
        "resume:\n"
        "  tool_keywords: [Notion]\n",
    )
    config = load_config(path)
    assert config.scraper.timeout == 20
    assert config.scraper.user_agents["generic"] == "test-agent/1.0"
    assert config.scraper.user_agents["linkedin"] == DEFAULT_CONFIG.scraper.user_agents["linkedin"]
    assert config.resume.tool_keywords == ("notion",)
    # defaults are untouched
    assert DEFAULT_CONFIG.resume.tool_keywords[0] == "excel"

    resume = extract_resume_structure("SKILLS\nNotion, Excel", config)
    assert resume.skills.tools == ["Notion"]
    assert resume.skills.soft == ["Excel"]


@pytest.mark.parametrize(
    "body",
    [
        "database:\n  host: localhost\n",
        "scraper:\n  retries: 3\n",
        "- just\n- a list\n",
        "resume:\n  tool_keywords: notion\n",
        "scraper: 5\n",
        "scraper:\n  timeout: fast\n",
        "scraper:\n  timeout: true\n",
        "job:\n  max_skills: many\n",
        "job:\n  max_skills: 2.5\n",
        "scraper:\n  user_agents: [a, b]\n",
    ],
)
def test_invalid_files(tmp_path: Path, body: str) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, body))


def test_empty_file_is_defaults(tmp_path: Path) -> None:
    assert load_config(_write(tmp_path, "")) == DEFAULT_CONFIG


def test_env_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TAILORFLOW_TIMEOUT", "3.5")
    assert load_config().scraper.timeout == 3.5


def test_env_timeout_must_be_numeric(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TAILORFLOW_TIMEOUT", "soon")
    with pytest.raises(ConfigError):
        load_config()


def test_user_agents_are_read_only(tmp_path: Path) -> None:
    with pytest.raises(TypeError):
        DEFAULT_CONFIG.scraper.user_agents["generic"] = "other-agent"  # type: ignore[index]
    config = load_config(_write(tmp_path, "scraper:\n  user_agents:\n    indeed: test-agent/2.0\n"))
    assert config.scraper.user_agents["indeed"] == "test-agent/2.0"
    with pytest.raises(TypeError):
        config.scraper.user_agents["indeed"] = "other-agent"  # type: ignore[index]
    assert DEFAULT_CONFIG.scraper.user_agents["indeed"].startswith("Mozilla/5.0")


def test_scalar_overrides_are_coerced(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path, "scraper:\n  timeout: 20\njob:\n  max_skills: 5\n"))
    assert isinstance(config.scraper.timeout, float)
    assert config.scraper.timeout == 20.0
    assert config.job.max_skills == 5
