"""Package document (OPF) parsing using lxml."""

import logging
from pathlib import Path

from lxml import etree

from opf_reader.core.namespaces import (
    Namespace,
    OpfDocument,
    children_in,
    extract_attributes,
    load_document,
    resolve,
)
from opf_reader.core.resources import (
    ContentAccessor,
    DirectoryResourceProvider,
    ResourceProvider,
)
from opf_reader.exceptions import DanglingReferenceError
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

log = logging.getLogger(__name__)


class OpfParser:
    """Bind a package document to a Package model."""

    DEFAULT_TOC_ID = "ncx"

    def __init__(
        self,
        data: "str | bytes | etree._Element | etree._ElementTree",
        resources: ResourceProvider | None = None,
    ):
        self.document: OpfDocument = load_document(data)
        self.resources = resources

    @classmethod
    def from_file(cls, opf_path: Path, resources: ResourceProvider | None = None) -> "OpfParser":
        """Read an .opf file, serving content from its directory by default."""
        if resources is None:
            resources = DirectoryResourceProvider(opf_path.parent)
        return cls(opf_path.read_bytes(), resources)

    def parse(self) -> Package:
        """Parse the document and return the fully wired package."""
        root = resolve(self.document.root, Namespace.OPF)
        version = root.get("version")

        metadata = self._bind_metadata(root.find("metadata"))
        manifest = self._bind_manifest(root.find("manifest"))
        spine, navigation = self._bind_spine(root.find("spine"), manifest)

        guide_element = root.find("guide")
        guide = self._bind_guide(guide_element) if guide_element is not None else None

        log.debug(
            "Parsed package v%s: %d metadata, %d manifest, %d spine, %s guide items",
            version or "?",
            len(metadata),
            len(manifest),
            len(spine),
            len(guide) if guide is not None else "no",
        )

        return Package(
            version=version,
            metadata=metadata,
            manifest=manifest,
            spine=spine,
            guide=guide,
            navigation=navigation,
        )

    def _bind_metadata(self, element: etree._Element | None) -> Metadata:
        """Collect Dublin Core elements. Other children such as <meta> are skipped."""
        metadata = Metadata()
        if element is None:
            return metadata

        for child in children_in(element, Namespace.DC):
            metadata.add(
                MetadataItem(
                    name=etree.QName(child).localname,
                    value=(child.text or "").strip(),
                    attributes=extract_attributes(child, self.document),
                )
            )

        return metadata

    def _bind_manifest(self, element: etree._Element | None) -> Manifest:
        manifest = Manifest()
        if element is None:
            return manifest

        for child in resolve(element, Namespace.OPF).find_all("item"):
            item = ManifestItem(
                id=child.get("id", ""),
                href=child.get("href", ""),
                media_type=child.get("media-type", ""),
                fallback=child.get("fallback", ""),
            )
            item.set_properties(child.get("properties", ""))
            self._add_content_getter(item)

            manifest.add(item)

        return manifest

    def _bind_spine(
        self, element: etree._Element | None, manifest: Manifest
    ) -> tuple[Spine, Navigation]:
        """Build the reading order and locate the navigation source.

        Every itemref must name a manifest id. The table of contents id
        comes from the spine's toc attribute, falling back to "ncx"; when
        the manifest has no such item, navigation is left unset.
        """
        if element is None:
            return Spine(), self._resolve_navigation("", manifest)

        view = resolve(element, Namespace.OPF)
        spine = Spine(toc=view.get("toc"))

        for position, child in enumerate(view.find_all("itemref"), start=1):
            idref = child.get("idref", "")
            if not manifest.has(idref):
                raise DanglingReferenceError(idref)
            manifest_item = manifest.get(idref)

            item = SpineItem(
                id=idref,
                href=manifest_item.href,
                media_type=manifest_item.media_type,
                order=position,
                # Anything other than an explicit "no" reads as linear
                linear=child.get("linear", "yes") != "no",
            )
            self._add_content_getter(item)

            spine.add(item)

        return spine, self._resolve_navigation(spine.toc, manifest)

    def _resolve_navigation(self, toc: str, manifest: Manifest) -> Navigation:
        ncx_id = toc or self.DEFAULT_TOC_ID
        if manifest.has(ncx_id):
            return Navigation(src_id=ncx_id)

        log.warning("Navigation source %r not found in manifest", ncx_id)
        return Navigation()

    def _bind_guide(self, element: etree._Element) -> Guide:
        guide = Guide()

        for child in resolve(element, Namespace.OPF).find_all("reference"):
            item = GuideItem(
                title=child.get("title", ""),
                type=child.get("type", ""),
                href=child.get("href", ""),
            )
            self._add_content_getter(item)

            guide.add(item)

        return guide

    def _add_content_getter(self, item: ManifestItem | SpineItem | GuideItem) -> None:
        if self.resources is not None:
            item.set_content(ContentAccessor(self.resources, item.href))


def parse_opf(
    data: "str | bytes | etree._Element | etree._ElementTree",
    resources: ResourceProvider | None = None,
) -> Package:
    """Parse a package document in one call."""
    return OpfParser(data, resources).parse()
