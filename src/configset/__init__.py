from .config_set import ConfigSet
from .decode import (
    DEFAULT_TAG,
    Decodable,
    FieldPolicy,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    RawMessage,
    TextUnmarshaler,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    parse_tag,
)
from .errors import (
    ConfigSetError,
    CustomDecodeError,
    DecodeError,
    DurationParseError,
    IndexOutOfBoundsError,
    InvalidTargetError,
    IPParseError,
    KeyNotFoundError,
    LoadError,
    MergeConflictError,
    NilSourceError,
    NilValueError,
    NoFieldsSetError,
    NotAListError,
    NotAMappingError,
    NotAMappingSourceError,
    NotASliceSourceError,
    PathError,
    PrimitiveParseError,
    RawMessageError,
    RequiredFieldError,
    SourceLoadError,
    SourceReadError,
    TagDeclarationError,
    TextUnmarshalError,
    TimestampParseError,
    UnsupportedKindError,
    UnsupportedValueError,
    URLParseError,
)
from .loaders import EnvSource, JsonSource, Source, SourceContainer, TomlSource, YamlSource
from .observability import JsonlLogSink, LogMessage, LogSink, MemoryLogSink, StdoutLogSink
from .options import ConfigSetOptions, DecodeOptions, LoadOptions

__all__ = [
    "DEFAULT_TAG",
    "ConfigSet",
    "ConfigSetError",
    "ConfigSetOptions",
    "CustomDecodeError",
    "Decodable",
    "DecodeError",
    "DecodeOptions",
    "DurationParseError",
    "EnvSource",
    "FieldPolicy",
    "Float32",
    "Float64",
    "IPParseError",
    "IndexOutOfBoundsError",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "InvalidTargetError",
    "JsonSource",
    "JsonlLogSink",
    "KeyNotFoundError",
    "LoadError",
    "LoadOptions",
    "LogMessage",
    "LogSink",
    "MemoryLogSink",
    "MergeConflictError",
    "NilSourceError",
    "NilValueError",
    "NoFieldsSetError",
    "NotAListError",
    "NotAMappingError",
    "NotAMappingSourceError",
    "NotASliceSourceError",
    "PathError",
    "PrimitiveParseError",
    "RawMessage",
    "RawMessageError",
    "RequiredFieldError",
    "Source",
    "SourceContainer",
    "SourceLoadError",
    "SourceReadError",
    "StdoutLogSink",
    "TagDeclarationError",
    "TextUnmarshalError",
    "TextUnmarshaler",
    "TimestampParseError",
    "TomlSource",
    "URLParseError",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "UnsupportedKindError",
    "UnsupportedValueError",
    "YamlSource",
    "parse_tag",
]
