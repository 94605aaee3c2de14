from .value_store import NO_PREFIX, ValueStore, merged_root

__all__ = ["NO_PREFIX", "ValueStore", "merged_root"]
