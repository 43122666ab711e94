"""Project configuration stored in ``.apiextractorconfig.json``."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from api_extractor.exceptions import ConfigError

CONFIG_FILE_NAME = ".apiextractorconfig.json"
DOCS_ENDPOINT = "/v2/api-docs"


class ExtractorConfig(BaseModel):
    """Where to fetch the API docs from and where to write the result."""

    model_config = ConfigDict(populate_by_name=True)

    server_address: str = Field("", alias="serverAddress")
    output_dir: str = Field("apiExtractor", alias="outputDir")
    file_name: str = Field("apiResult", alias="fileName")

    @property
    def docs_url(self) -> str:
        return f"{self.server_address}{DOCS_ENDPOINT}"

    def output_path(self, cwd: Path) -> Path:
        return cwd / self.output_dir / f"{self.file_name}.json"


def config_path(cwd: Path) -> Path:
    return cwd / CONFIG_FILE_NAME


def load_config(cwd: Path) -> ExtractorConfig:
    """Load the project config from ``cwd``.

    Raises:
        ConfigError: If the file does not exist or is not a valid config.
    """
    path = config_path(cwd)
    if not path.exists():
        raise ConfigError(
            f"api-extractor couldn't find a configuration file ({path}). "
            "To set up a configuration file for this project, please run:\n\n"
            "    api-extractor init"
        )
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return ExtractorConfig.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as e:
        raise ConfigError(f"Invalid configuration file {path}: {e}") from e


def save_config(config: ExtractorConfig, cwd: Path) -> Path:
    """Write the config to ``cwd`` with sorted keys and return its path."""
    path = config_path(cwd)
    content = json.dumps(config.model_dump(by_alias=True), indent=2, sort_keys=True)
    path.write_text(content + "\n", encoding="utf-8")
    return path


def add_ignore(cwd: Path) -> None:
    """Make sure the config file is listed in the project's .gitignore."""
    ignore_file = cwd / ".gitignore"
    if not ignore_file.exists():
        ignore_file.write_text(CONFIG_FILE_NAME + "\n", encoding="utf-8")
        return

    content = ignore_file.read_text(encoding="utf-8")
    if CONFIG_FILE_NAME in content:
        return
    ignore_file.write_text(content.rstrip("\n") + f"\n\n{CONFIG_FILE_NAME}\n", encoding="utf-8")
