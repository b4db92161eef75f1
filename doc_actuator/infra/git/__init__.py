from .sources import (
    FileMetadataSource,
    GitMetadataChain,
    LiveToolMetadataSource,
    MetadataSource,
    MetadataUnavailable,
    build_default_chain,
)

__all__ = [
    "MetadataSource",
    "MetadataUnavailable",
    "FileMetadataSource",
    "LiveToolMetadataSource",
    "GitMetadataChain",
    "build_default_chain",
]
