from .file_cache import CachedFile, FileCache

__all__ = ["CachedFile", "FileCache"]
