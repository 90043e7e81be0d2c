"""Git naming constants shared across reltag."""

REFS_TAGS = "refs/tags/"
REFS_HEADS = "refs/heads/"

ORIGIN_REMOTE = "origin"

# Length of CommitInfo.short_id; always a plain truncation of the full id
SHORT_ID_LENGTH = 7

CONFIG_DIR_NAME = ".reltag"
CONFIG_FILE_NAME = "config.toml"
