"""Configuration model for the rjsconfig reader.

Provides ``XmlReaderConfig`` with all tunable parameters and sensible
defaults.  Supports loading overrides from YAML or JSON files via the
``from_file()`` classmethod.
"""

from __future__ import annotations

import json
import pathlib

import yaml
from pydantic import BaseModel, Field

#: Number of ancestor levels the path tracker records.
DEFAULT_TRACKED_DEPTH = 10


class XmlReaderConfig(BaseModel):
    """All tunable parameters with sensible defaults.

    Override individual values via constructor kwargs or load a complete
    config from a file with ``XmlReaderConfig.from_file(path)``.
    """

    # --- Identity ---
    parser_version: str = "rjsconfig:1.0.0"

    # --- Path tracking ---
    max_tracked_depth: int = Field(default=DEFAULT_TRACKED_DEPTH, ge=1)

    # --- Security ---
    max_file_size_mb: int = Field(default=10, ge=0)
    reject_entity_declarations: bool = True

    # --- Input ---
    encoding: str = "utf-8-sig"
    read_chunk_size: int = Field(default=64 * 1024, ge=1)

    @classmethod
    def from_file(cls, path: str) -> XmlReaderConfig:
        """Load configuration from a YAML or JSON file.

        File format is detected by extension: ``.yaml`` / ``.yml`` for YAML,
        ``.json`` for JSON.  Any keys present in the file override the
        corresponding defaults; keys not present retain their defaults.

        Args:
            path: Filesystem path to the configuration file.

        Returns:
            A fully-populated ``XmlReaderConfig`` instance.

        Raises:
            FileNotFoundError: If *path* does not exist.
            ValueError: If the file extension is not recognized, the file
                does not parse, or its top level is not a mapping.
        """
        file_path = pathlib.Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        suffix = file_path.suffix.lower()

        if suffix in (".yaml", ".yml"):
            with open(file_path) as fh:
                try:
                    data = yaml.safe_load(fh)
                except yaml.YAMLError as exc:
                    raise ValueError(f"Invalid YAML in config file {path}: {exc}") from exc
        elif suffix == ".json":
            with open(file_path) as fh:
                data = json.load(fh)
        else:
            raise ValueError(
                f"Unsupported config file extension '{suffix}'. "
                "Use .yaml, .yml, or .json."
            )

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Config file {path} must contain a mapping, "
                f"got {type(data).__name__}"
            )

        return cls(**data)
