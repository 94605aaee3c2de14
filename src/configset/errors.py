from __future__ import annotations


class ConfigSetError(ValueError):
    # Base error for every failure raised by configset (fail fast).
    pass


# Path resolution.


class PathError(ConfigSetError):
    # Raised when a path cannot be resolved against a generic value.
    def __init__(self, message: str, *, segment: str) -> None:
        super().__init__(message)
        self.segment = segment


class KeyNotFoundError(PathError):
    pass


class IndexOutOfBoundsError(PathError):
    pass


class NotAMappingError(PathError):
    # Key segment applied to a value that is not a mapping.
    pass


class NotAListError(PathError):
    # Index segment applied to a value that is not a list.
    pass


# Load / merge.


class LoadError(ConfigSetError):
    pass


class MergeConflictError(LoadError):
    # Map merged into a list root (or the other way round).
    pass


class UnsupportedValueError(LoadError):
    # Only mappings and lists may be loaded at the root.
    pass


class NilValueError(LoadError):
    pass


class SourceLoadError(LoadError):
    # A source container reported errors; nothing was merged.
    def __init__(self, errors: list[Exception]) -> None:
        details = "; ".join(str(error) for error in errors)
        super().__init__(f"cannot load config: {details}")
        self.errors = list(errors)


class SourceReadError(LoadError):
    # Recorded by source containers for unreadable or unparseable input.
    pass


# Decode / conversion.


class DecodeError(ConfigSetError):
    # Carries the dotted trail of target fields once the engine has located it.
    field_path: str = ""

    def at(self, field_path: str) -> DecodeError:
        if field_path and not self.field_path:
            self.field_path = field_path
        return self

    def __str__(self) -> str:
        message = super().__str__()
        if self.field_path:
            return f"{self.field_path}: {message}"
        return message


class NilSourceError(DecodeError):
    # Common decoders refuse a null source value.
    pass


class DurationParseError(DecodeError):
    pass


class IPParseError(DecodeError):
    pass


class URLParseError(DecodeError):
    pass


class TimestampParseError(DecodeError):
    pass


class RawMessageError(DecodeError):
    pass


class PrimitiveParseError(DecodeError):
    pass


class TextUnmarshalError(DecodeError):
    pass


class UnsupportedKindError(DecodeError):
    pass


class CustomDecodeError(DecodeError):
    # User decode hooks own the whole field; their failures are always fatal.
    pass


class NotASliceSourceError(DecodeError):
    pass


class NotAMappingSourceError(DecodeError):
    pass


class TagDeclarationError(DecodeError):
    # required and default=... declared on the same field.
    pass


class RequiredFieldError(DecodeError):
    pass


# Decode policy.


class InvalidTargetError(ConfigSetError):
    pass


class NoFieldsSetError(ConfigSetError):
    # Decode finished without populating a single target field.
    pass

