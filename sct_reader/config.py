"""
Configuration for the sector file readers.

Module level defaults can be overridden through environment variables;
``ReaderConfig`` bundles the options a single reader uses.
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Text encoding of sector files. EuroScope files are usually Windows-1252 /
# latin-1, never strict UTF-8.
DEFAULT_ENCODING = os.getenv("SCT_READER_ENCODING", "latin-1")

# Optional override of the EuroScope data folder used to resolve profile paths
EUROSCOPE_DIR = os.getenv("EUROSCOPE_DIR")

# Group names used when a file does not name one
DEFAULT_REGION_NAME = "noname"
DEFAULT_LABEL_GROUP = "SCT2"
DEFAULT_FREETEXT_GROUP = "Default"

# Record limits
SECTOR_INFO_LINES = 9
MAX_VISIBILITY_CENTRES = 4


def get_config_dir() -> Path:
    """
    Return the per-user configuration directory for the current platform.

    ``APPDATA`` on Windows, ``~/Library/Application Support`` on macOS and
    ``XDG_CONFIG_HOME`` (default ``~/.config``) elsewhere.
    """
    appdata = os.getenv("APPDATA")
    if appdata:
        return Path(appdata)
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def get_documents_dir() -> Path:
    """Return the user's documents directory, ``XDG_DOCUMENTS_DIR`` when set."""
    xdg = os.getenv("XDG_DOCUMENTS_DIR")
    if xdg:
        return Path(xdg).expanduser()
    return Path.home() / "Documents"


@dataclass
class ReaderConfig:
    """Options shared by the sector and ESE readers."""

    encoding: str = DEFAULT_ENCODING
    default_region_name: str = DEFAULT_REGION_NAME
    default_label_group: str = DEFAULT_LABEL_GROUP
    default_freetext_group: str = DEFAULT_FREETEXT_GROUP
    euroscope_dir: Optional[str] = EUROSCOPE_DIR

    @classmethod
    def from_env(cls) -> 'ReaderConfig':
        """Build a configuration reading the environment at call time."""
        return cls(
            encoding=os.getenv("SCT_READER_ENCODING", DEFAULT_ENCODING),
            euroscope_dir=os.getenv("EUROSCOPE_DIR", EUROSCOPE_DIR),
        )
