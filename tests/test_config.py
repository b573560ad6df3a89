from pathlib import Path

import pytest

from ruletok.config import load_config

REPO_ROOT = Path(__file__).resolve().parents[1]
ENV_VARS = (
    "RULETOK_ENV",
    "RULETOK_LOG_LEVEL",
    "RULETOK_API_HOST",
    "RULETOK_API_PORT",
    "RULETOK_WORKERS",
    "RULETOK_TCP_HOST",
    "RULETOK_TCP_PORT",
    "RULETOK_EVAL_WINDOW",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_load_dev_profile() -> None:
    config = load_config("dev", config_dir=REPO_ROOT / "configs")

    assert config.env == "dev"
    assert config.log_level == "DEBUG"
    assert config.api_host == "127.0.0.1"
    assert config.api_port == 8000
    assert config.workers == 1
    assert config.tcp_port == 5005
    assert config.eval_window == 8


def test_env_override(monkeypatch) -> None:
    monkeypatch.setenv("RULETOK_ENV", "prod")
    monkeypatch.setenv("RULETOK_API_PORT", "9000")
    monkeypatch.setenv("RULETOK_EVAL_WINDOW", "3")

    config = load_config(config_dir=REPO_ROOT / "configs")

    assert config.env == "prod"
    assert config.api_port == 9000
    assert config.workers == 4
    assert config.eval_window == 3


def test_missing_profile_uses_defaults(tmp_path: Path) -> None:
    config = load_config("staging", config_dir=tmp_path)

    assert config.log_level == "INFO"
    assert config.tcp_host == "127.0.0.1"
    assert config.tcp_port == 5005


def test_invalid_integer_override(monkeypatch) -> None:
    monkeypatch.setenv("RULETOK_TCP_PORT", "not-a-port")

    with pytest.raises(ValueError, match="RULETOK_TCP_PORT"):
        load_config("dev", config_dir=REPO_ROOT / "configs")


def test_invalid_profile_value(tmp_path: Path) -> None:
    (tmp_path / "bad.toml").write_text('api_port = "eighty"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="api_port"):
        load_config("bad", config_dir=tmp_path)


def test_eval_window_must_be_positive(monkeypatch) -> None:
    monkeypatch.setenv("RULETOK_EVAL_WINDOW", "0")

    with pytest.raises(ValueError, match="eval_window"):
        load_config("dev", config_dir=REPO_ROOT / "configs")


def test_tcp_port_out_of_range(tmp_path: Path) -> None:
    (tmp_path / "edge.toml").write_text("tcp_port = 70000\n", encoding="utf-8")

    with pytest.raises(ValueError, match="tcp_port"):
        load_config("edge", config_dir=tmp_path)


def test_profile_ignores_unknown_keys(tmp_path: Path) -> None:
    (tmp_path / "lab.toml").write_text('owner = "nlp"\neval_window = 4\n', encoding="utf-8")

    config = load_config("lab", config_dir=tmp_path)

    assert config.eval_window == 4
    assert config.api_port == 8000
