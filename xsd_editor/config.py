# xsd_editor/config.py
"""
Editor settings and logging setup.

Settings come from an optional JSON file and are then overridden by
XSD_EDITOR_* environment variables.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple, Type, Union

from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from xsd_editor.errors import XsdEditorError
from xsd_editor.messages import DiagramOptions, UpdateDiagramOptionsMessage

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
ENV_PREFIX = "XSD_EDITOR_"


class ConfigError(XsdEditorError):
    pass


class EditorSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    show_documentation: bool = False
    always_show_occurrence: bool = False
    show_type: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # Environment wins over the JSON file.
        return init_settings, env_settings, JsonConfigSettingsSource(settings_cls)

    def diagram_options(self) -> DiagramOptions:
        return DiagramOptions(
            show_documentation=self.show_documentation,
            always_show_occurrence=self.always_show_occurrence,
            show_type=self.show_type,
        )

    def diagram_options_message(self) -> UpdateDiagramOptionsMessage:
        return UpdateDiagramOptionsMessage(data=self.diagram_options())


def load_settings(path: Optional[Union[str, Path]] = None) -> EditorSettings:
    settings_cls = EditorSettings

    if path is not None:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigError(f"Settings file not found: {config_path}")

        class FileSettings(EditorSettings):
            model_config = SettingsConfigDict(json_file=config_path, json_file_encoding="utf-8")

        settings_cls = FileSettings

    try:
        return settings_cls()
    # Undecodable JSON surfaces as ValueError, a non-object document as TypeError.
    except (ValueError, TypeError) as e:
        raise ConfigError(f"Invalid settings: {e}") from e


def setup_logging(settings: Optional[EditorSettings] = None) -> None:
    settings = settings or EditorSettings()
    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    formatter = logging.Formatter(LOG_FORMAT)
    has_console = any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in root.handlers
    )
    if not has_console:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
