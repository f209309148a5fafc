"""Exceptions raised while loading reference data.

Query-path functions never raise; these errors only surface while a
reference registry is being built from its data files.
"""


class ReferenceDataError(Exception):
    """Raised when airport or airline reference data is missing or inconsistent."""


class DuplicateKeyError(ReferenceDataError):
    """Raised when a catalog or translation table contains the same key twice.

    Attributes:
        table: Name of the table holding the duplicate (e.g. "airline IATA").
        key: The duplicated key.
        existing: Value already registered under the key.
        duplicate: Value that attempted to reuse the key.
    """

    def __init__(self, table: str, key: str, existing: str, duplicate: str) -> None:
        self.table = table
        self.key = key
        self.existing = existing
        self.duplicate = duplicate
        super().__init__(
            f"Duplicate {table} key {key!r}: already mapped to {existing}, "
            f"refusing {duplicate}"
        )
