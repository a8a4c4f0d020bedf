"""Resource checksum manifests, obscured SQLite save records, action XML readers and motion helpers."""

__version__ = "0.1.0"

__all__ = ["actions", "cipher", "manifest", "md5sum", "md5tables", "motion", "records"]