"""Data models."""

from opf_reader.models.package import (
    Guide,
    GuideItem,
    Manifest,
    ManifestItem,
    Metadata,
    MetadataItem,
    Navigation,
    Package,
    Spine,
    SpineItem,
)

__all__ = [
    # Sections
    "Metadata",
    "Manifest",
    "Spine",
    "Guide",
    "Navigation",
    # Items
    "MetadataItem",
    "ManifestItem",
    "SpineItem",
    "GuideItem",
    # Document
    "Package",
]
