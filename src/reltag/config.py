import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from reltag.constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME
from reltag.errors import InvalidConfig

DEFAULT_TAG_MESSAGE = "{tag_name}"
DEFAULT_SIGNING_PROGRAM = "gpg"


@dataclass(frozen=True)
class GitConfig:
    """`[git]` table: how the repository is located."""

    root_search: bool


@dataclass(frozen=True)
class SigningConfig:
    """`[signing]` table: whether new tags are signed and with which key."""

    enabled: bool
    key: str | None
    program: str


@dataclass(frozen=True)
class TagConfig:
    """`[tag]` table: annotated tag defaults."""

    message: str

    def format_message(self, tag_name: str) -> str:
        """Substitute {tag_name} in the message template.

        An empty result falls back to the tag name.
        """
        message = self.message.replace("{tag_name}", tag_name)
        return message if message.strip() else tag_name


@dataclass(frozen=True)
class ReleaseConfig:
    """In-memory representation of `.reltag/config.toml`.

    Example config.toml:
      [git]
      # Search parent directories for the repository root
      root_search = true

      [signing]
      enabled = true
      key = "ABCD1234"
      program = "gpg"

      [tag]
      message = "Release {tag_name}"
    """

    git: GitConfig
    signing: SigningConfig
    tag: TagConfig

    @classmethod
    def defaults(cls) -> "ReleaseConfig":
        return cls(
            git=GitConfig(root_search=False),
            signing=SigningConfig(enabled=False, key=None, program=DEFAULT_SIGNING_PROGRAM),
            tag=TagConfig(message=DEFAULT_TAG_MESSAGE),
        )


def config_path(basedir: Path) -> Path:
    return basedir / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _table(cfg_path: Path, data: dict[str, Any], name: str) -> dict[str, Any]:
    table = data.get(name, {})
    if not isinstance(table, dict):
        raise InvalidConfig(cfg_path, f"[{name}] must be a table")
    return table


def _value(
    cfg_path: Path, table: dict[str, Any], table_name: str, key: str, expected: type, default: Any
) -> Any:
    value = table.get(key, default)
    if value is not None and not isinstance(value, expected):
        raise InvalidConfig(
            cfg_path,
            f"{table_name}.{key} must be a {expected.__name__}, got {type(value).__name__}",
        )
    return value


def load_release_config(basedir: Path) -> ReleaseConfig:
    """Load .reltag/config.toml below basedir if present; otherwise return defaults.

    Values are not coerced: `enabled = "false"` is rejected rather than read as true.

    Args:
        basedir: Directory the release runs from

    Returns:
        ReleaseConfig with parsed values, defaults filling anything unset

    Raises:
        InvalidConfig: If the file is not valid TOML or a value has the wrong type
    """
    cfg_path = config_path(basedir)
    if not cfg_path.exists():
        return ReleaseConfig.defaults()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise InvalidConfig(cfg_path, str(e)) from e

    git = _table(cfg_path, data, "git")
    signing = _table(cfg_path, data, "signing")
    tag = _table(cfg_path, data, "tag")

    return ReleaseConfig(
        git=GitConfig(root_search=_value(cfg_path, git, "git", "root_search", bool, False)),
        signing=SigningConfig(
            enabled=_value(cfg_path, signing, "signing", "enabled", bool, False),
            key=_value(cfg_path, signing, "signing", "key", str, None),
            program=_value(
                cfg_path, signing, "signing", "program", str, DEFAULT_SIGNING_PROGRAM
            ),
        ),
        tag=TagConfig(message=_value(cfg_path, tag, "tag", "message", str, DEFAULT_TAG_MESSAGE)),
    )
