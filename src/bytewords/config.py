from __future__ import annotations

import pathlib
import tomllib

from typing import Literal, Mapping, NamedTuple

from .types import STYLES, PayloadFormat, Style


CONFIG_DIRECTORY = pathlib.Path("~/.bytewords").expanduser()
CONFIG_PATH = CONFIG_DIRECTORY / "config.toml"

DEFAULT_STYLE: Style = "standard"
DEFAULT_PAYLOAD_FORMAT: PayloadFormat = "hex"

Command = Literal["encode", "decode"]
PAYLOAD_FORMATS: tuple[PayloadFormat, ...] = PayloadFormat.__args__


class PerCommandConfig(NamedTuple):
    style: Style | None
    payload_format: PayloadFormat | None


class Config(NamedTuple):
    style: Style
    payload_format: PayloadFormat
    per_command_config: Mapping[Command, PerCommandConfig]

    def get_style(self, command: Command) -> Style:
        if (t := self.per_command_config.get(command)) and t.style:
            return t.style
        return self.style

    def get_format(self, command: Command) -> PayloadFormat:
        if (t := self.per_command_config.get(command)) and t.payload_format:
            return t.payload_format
        return self.payload_format


def load(path: pathlib.Path = CONFIG_PATH) -> Config:
    """Load the configuration from the given configuration file."""
    with open(path, "rb") as f:
        style = DEFAULT_STYLE
        payload_format = DEFAULT_PAYLOAD_FORMAT
        per_command_config: dict[Command, PerCommandConfig] = {}

        for key, value in tomllib.load(f).items():
            if key not in ("default", "encode", "decode"):
                raise ValueError(f"Invalid configuration key {key!r}.")
            if not isinstance(value, dict):
                raise ValueError(f"Error in configuration file near [{key}].")

            c_style: Style | None = None
            c_format: PayloadFormat | None = None
            for subkey, subvalue in value.items():
                if subkey == "style":
                    if not isinstance(subvalue, str) or subvalue not in STYLES:
                        raise ValueError(f"Invalid style {subvalue!r}.")
                    c_style = subvalue
                elif subkey == "format":
                    if not isinstance(subvalue, str) or subvalue not in PAYLOAD_FORMATS:
                        raise ValueError(f"Invalid payload format {subvalue!r}.")
                    c_format = subvalue
                else:
                    raise ValueError(f"Invalid configuration key {subkey!r}.")

            if key == "default":
                style = c_style or style
                payload_format = c_format or payload_format
            else:
                per_command_config[key] = PerCommandConfig(c_style, c_format)

        return Config(style, payload_format, per_command_config)


def load_or_default(path: pathlib.Path = CONFIG_PATH) -> Config:
    """Like `load`, but falls back to the default configuration if the file does not exist."""
    try:
        return load(path)
    except FileNotFoundError:
        return DEFAULT_CONFIG


DEFAULT_CONFIG = Config(DEFAULT_STYLE, DEFAULT_PAYLOAD_FORMAT, {})
