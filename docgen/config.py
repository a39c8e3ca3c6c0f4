"""
docgen configuration

Defaults for a run, optionally overridden by a YAML file:

```yaml
extensions:
  - .go
exclude_dirs:
  - testdata
output: docs/output.json
output_format: json
indent: 2
generator: docgen
format: "1"
function_keyword: func
type_keyword: type
strict: true
```

When no file is given, docgen.yaml in the scanned root is used if present.
"""

import logging
import yaml
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, List, Optional

from docgen.core.patterns import Grammar
from docgen.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "docgen.yaml"
OUTPUT_FORMATS = ("json", "yaml")


@dataclass
class DocgenConfig:
    """Settings for one docgen run."""

    extensions: List[str] = field(default_factory=lambda: [".go"])
    exclude_dirs: List[str] = field(default_factory=list)
    output: str = "output.json"
    output_format: str = "json"
    indent: int = 2
    generator: str = "docgen"
    format: str = "1"
    function_keyword: str = "func"
    type_keyword: str = "type"
    strict: bool = True

    @classmethod
    def from_dict(cls, data: Dict) -> "DocgenConfig":
        """
        Create a config from a dictionary.

        Unknown keys are ignored with a warning.

        Raises:
            ConfigError: if a value has the wrong type or is out of range
        """
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                logger.warning(f"Ignoring unknown config key: {key}")

        config = cls()
        for key in ("extensions", "exclude_dirs"):
            if key in data:
                value = data[key]
                if isinstance(value, str):
                    value = [value]
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    raise ConfigError(f"{key} must be a list of strings")
                setattr(config, key, list(value))

        for key in ("output", "output_format", "generator", "function_keyword", "type_keyword"):
            if key in data:
                if not isinstance(data[key], str) or not data[key]:
                    raise ConfigError(f"{key} must be a non-empty string")
                setattr(config, key, data[key])

        if "format" in data:
            # "1" and 1 are both accepted
            config.format = str(data["format"])

        if "indent" in data:
            if isinstance(data["indent"], bool) or not isinstance(data["indent"], int) or data["indent"] < 0:
                raise ConfigError("indent must be a non-negative integer")
            config.indent = data["indent"]

        if "strict" in data:
            if not isinstance(data["strict"], bool):
                raise ConfigError("strict must be true or false")
            config.strict = data["strict"]

        config.validate()
        return config

    def validate(self):
        """Check cross-field constraints."""
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got {self.output_format!r}"
            )
        if not self.extensions:
            raise ConfigError("extensions must not be empty")

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def grammar(self) -> Grammar:
        """Build the comment-tag grammar for this configuration."""
        return Grammar.build(self.function_keyword, self.type_keyword)


def load_config(path: Path) -> DocgenConfig:
    """
    Load configuration from a YAML file.

    Raises:
        ConfigError: if the file is missing, unreadable or invalid
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    logger.info(f"Loading config: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    return DocgenConfig.from_dict(data)


def resolve_config(root_path: Path, config_path: Optional[Path] = None) -> DocgenConfig:
    """
    Pick the configuration for a run.

    An explicit config_path must exist. Without one, docgen.yaml in
    root_path is used if present, otherwise defaults apply.
    """
    if config_path is not None:
        return load_config(config_path)

    candidate = Path(root_path) / DEFAULT_CONFIG_FILE
    if candidate.is_file():
        return load_config(candidate)

    return DocgenConfig()
