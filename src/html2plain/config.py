from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
import os

import yaml

from html2plain.parse.html import DEFAULT_PARSER

DEFAULT_USER_AGENT = "html2plain/0.1"


@dataclass
class ParserConfig:
    features: str


@dataclass
class FetchConfig:
    timeout_s: int
    user_agent: str


@dataclass
class IOConfig:
    encoding: str


@dataclass
class AppConfig:
    parser: ParserConfig
    fetch: FetchConfig
    io: IOConfig


def default_config() -> AppConfig:
    config = _from_dict({})
    _apply_env_overrides(config)
    return config


def load_config(path: Path) -> AppConfig:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    data = yaml.safe_load(path.read_text())
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping.")
    config = _from_dict(data)
    _apply_env_overrides(config)
    return config


def _from_dict(data: dict[str, Any]) -> AppConfig:
    parser_data = _get_map(data, "parser")
    fetch_data = _get_map(data, "fetch")
    io_data = _get_map(data, "io")

    timeout_raw = fetch_data.get("timeout_s", 30)
    try:
        timeout_s = int(timeout_raw)
    except (TypeError, ValueError):
        raise ValueError(f"fetch.timeout_s must be an integer, got {timeout_raw!r}.")

    return AppConfig(
        parser=ParserConfig(features=str(parser_data.get("features", DEFAULT_PARSER))),
        fetch=FetchConfig(
            timeout_s=timeout_s,
            user_agent=str(fetch_data.get("user_agent", DEFAULT_USER_AGENT)),
        ),
        io=IOConfig(encoding=str(io_data.get("encoding", "utf-8"))),
    )


def _apply_env_overrides(config: AppConfig) -> None:
    parser = os.getenv("HTML2PLAIN_PARSER")
    timeout_s = os.getenv("HTML2PLAIN_TIMEOUT_S")
    user_agent = os.getenv("HTML2PLAIN_USER_AGENT")

    if parser:
        config.parser.features = parser
    if timeout_s:
        try:
            config.fetch.timeout_s = int(timeout_s)
        except ValueError:
            raise ValueError("HTML2PLAIN_TIMEOUT_S must be an integer.")
    if user_agent:
        config.fetch.user_agent = user_agent


def _get_map(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key, {})
    if isinstance(value, dict):
        return value
    return {}
