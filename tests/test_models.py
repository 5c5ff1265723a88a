import pytest

from opf_reader.exceptions import DuplicateKeyError, ItemNotFoundError
from opf_reader.models import (
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


class TestManifestModel:
    """Test cases for the Manifest collection."""

    def test_get_missing_raises_not_found(self):
        with pytest.raises(ItemNotFoundError) as exc_info:
            Manifest().get("nope")
        assert exc_info.value.item_id == "nope"
        assert str(exc_info.value) == "Manifest item not found: 'nope'"

    def test_not_found_is_key_error(self):
        with pytest.raises(KeyError):
            Manifest().get("nope")

    def test_add_and_has(self):
        manifest = Manifest()
        manifest.add(ManifestItem(id="a", href="a.xhtml"))
        assert manifest.has("a")
        assert not manifest.has("b")
        assert len(manifest) == 1

    def test_duplicate(self):
        manifest = Manifest()
        manifest.add(ManifestItem(id="a"))
        with pytest.raises(DuplicateKeyError):
            manifest.add(ManifestItem(id="a", href="other.xhtml"))
        assert manifest.get("a").href == ""


class TestManifestItemProperties:
    """Test cases for ManifestItem.set_properties."""

    @pytest.mark.parametrize(
        "attribute, expected",
        [
            ("", []),
            ("cover-image", ["cover-image"]),
            ("rendition:page-spread-center", ["rendition:page-spread-center"]),
            (
                "cover-image rendition:page-spread-center",
                ["cover-image", "rendition:page-spread-center"],
            ),
            ("  nav   svg ", ["nav", "svg"]),
        ],
    )
    def test_set_properties(self, attribute, expected):
        item = ManifestItem(id="x")
        item.set_properties(attribute)
        assert item.properties == expected


class TestCollections:
    """Test cases for the ordered collections."""

    def test_metadata_lookup(self):
        metadata = Metadata()
        metadata.add(MetadataItem(name="creator", value="A"))
        metadata.add(MetadataItem(name="creator", value="B"))
        assert [m.value for m in metadata.get("creator")] == ["A", "B"]
        assert metadata.first("creator").value == "A"
        assert metadata.get("title") == []
        assert len(metadata) == 2

    def test_spine_indexing(self):
        spine = Spine()
        spine.add(SpineItem(id="a", order=1))
        spine.add(SpineItem(id="b", order=2, linear=False))
        assert spine[1].id == "b"
        assert [s.id for s in spine.linear_items()] == ["a"]

    def test_guide_lookup(self):
        guide = Guide()
        guide.add(GuideItem(type="cover", href="cover.xhtml"))
        assert guide.get_by_type("cover").href == "cover.xhtml"
        assert len(guide) == 1


class TestPackageModel:
    """Test cases for Package."""

    def test_defaults(self):
        package = Package()
        assert package.version == ""
        assert package.guide is None
        assert package.navigation_item is None

    def test_navigation_item_resolved_through_manifest(self):
        package = Package(navigation=Navigation(src_id="ncx"))
        package.manifest.add(ManifestItem(id="ncx", href="toc.ncx"))
        assert package.navigation_item.href == "toc.ncx"
