from .base import Source, SourceContainer
from .env_source import EnvSource
from .json_source import JsonSource
from .toml_source import TomlSource
from .yaml_source import YamlSource

__all__ = [
    "EnvSource",
    "JsonSource",
    "Source",
    "SourceContainer",
    "TomlSource",
    "YamlSource",
]
