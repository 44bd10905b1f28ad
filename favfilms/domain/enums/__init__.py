from favfilms.domain.enums.entry_type import EntryType
__all__ = [
    "EntryType",
]
