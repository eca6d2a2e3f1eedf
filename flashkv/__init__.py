"""Key-value store that appends fixed-size records to an emulated flash region."""

__version__ = "0.1.0"
__all__ = ["record", "flash", "db", "demo"]