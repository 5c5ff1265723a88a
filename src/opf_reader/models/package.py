"""Data models for the EPUB package document."""

from collections.abc import Iterator

from pydantic import BaseModel, Field, PrivateAttr

from opf_reader.core.resources import ContentAccessor
from opf_reader.exceptions import (
    ContentUnavailableError,
    DuplicateKeyError,
    ItemNotFoundError,
)


class ContentMixin(BaseModel):
    """Adds lazily loaded content to an item that has an href."""

    _content: ContentAccessor | None = PrivateAttr(default=None)

    def set_content(self, accessor: ContentAccessor) -> None:
        self._content = accessor

    def get_content(self) -> bytes:
        """Return the raw bytes behind href, loading them on first use."""
        if self._content is None:
            raise ContentUnavailableError(self.href, "no resource provider configured")
        return self._content.get()


class MetadataItem(BaseModel):
    """Single Dublin Core element from the metadata section."""

    name: str
    value: str = ""
    attributes: dict[str, str] = Field(default_factory=dict)


class Metadata(BaseModel):
    """Metadata items in document order. Names may repeat."""

    items: list[MetadataItem] = Field(default_factory=list)

    def add(self, item: MetadataItem) -> None:
        self.items.append(item)

    def get(self, name: str) -> list[MetadataItem]:
        """Return every item with the given element name."""
        return [item for item in self.items if item.name == name]

    def first(self, name: str) -> MetadataItem | None:
        for item in self.items:
            if item.name == name:
                return item
        return None

    def has(self, name: str) -> bool:
        return self.first(name) is not None

    def __iter__(self) -> Iterator[MetadataItem]:  # type: ignore[override]
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


class ManifestItem(ContentMixin):
    """Resource declared in the manifest."""

    id: str
    href: str = ""
    media_type: str = ""
    fallback: str = ""
    properties: list[str] = Field(default_factory=list)

    def set_properties(self, value: str) -> None:
        """Set properties from the space separated attribute value."""
        self.properties = value.split()


class Manifest(BaseModel):
    """Manifest items keyed by id."""

    items: dict[str, ManifestItem] = Field(default_factory=dict)

    def add(self, item: ManifestItem) -> None:
        if item.id in self.items:
            raise DuplicateKeyError(item.id)
        self.items[item.id] = item

    def get(self, item_id: str) -> ManifestItem:
        try:
            return self.items[item_id]
        except KeyError:
            raise ItemNotFoundError(item_id) from None

    def has(self, item_id: str) -> bool:
        return item_id in self.items

    def get_items_of_type(self, media_type: str) -> list[ManifestItem]:
        return [item for item in self.items.values() if item.media_type == media_type]

    def __contains__(self, item_id: object) -> bool:
        return item_id in self.items

    def __iter__(self) -> Iterator[ManifestItem]:  # type: ignore[override]
        return iter(self.items.values())

    def __len__(self) -> int:
        return len(self.items)


class SpineItem(ContentMixin):
    """Entry in the reading order.

    href and media_type are copied from the manifest item named by id.
    """

    id: str
    href: str = ""
    media_type: str = ""
    order: int
    linear: bool = True


class Spine(BaseModel):
    """Reading order. Item order values run 1..N."""

    toc: str = ""
    items: list[SpineItem] = Field(default_factory=list)

    def add(self, item: SpineItem) -> None:
        self.items.append(item)

    def linear_items(self) -> list[SpineItem]:
        return [item for item in self.items if item.linear]

    def __getitem__(self, index: int) -> SpineItem:
        return self.items[index]

    def __iter__(self) -> Iterator[SpineItem]:  # type: ignore[override]
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


class GuideItem(ContentMixin):
    """Reference from the legacy guide section."""

    title: str = ""
    type: str = ""
    href: str = ""


class Guide(BaseModel):
    """Guide references in document order."""

    items: list[GuideItem] = Field(default_factory=list)

    def add(self, item: GuideItem) -> None:
        self.items.append(item)

    def get_by_type(self, type: str) -> GuideItem | None:
        for item in self.items:
            if item.type == type:
                return item
        return None

    def __iter__(self) -> Iterator[GuideItem]:  # type: ignore[override]
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


class Navigation(BaseModel):
    """Manifest id of the table of contents source, when one was found."""

    src_id: str | None = None


class Package(BaseModel):
    """Complete parsed package document."""

    version: str = ""
    metadata: Metadata = Field(default_factory=Metadata)
    manifest: Manifest = Field(default_factory=Manifest)
    spine: Spine = Field(default_factory=Spine)
    guide: Guide | None = None
    navigation: Navigation = Field(default_factory=Navigation)

    @property
    def navigation_item(self) -> ManifestItem | None:
        """Manifest item providing the table of contents."""
        if self.navigation.src_id is None:
            return None
        return self.manifest.get(self.navigation.src_id)
