"""Shared fixtures for package document tests."""

from pathlib import Path

import pytest

from opf_reader.exceptions import ResourceNotFoundError


DEFAULT_NS_OPF = """<?xml version="1.0" encoding="UTF-8"?>
<package xmlns="http://www.idpf.org/2007/opf" version="2.0" unique-identifier="BookId">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/"
            xmlns:opf="http://www.idpf.org/2007/opf">
    <dc:title>  Book  </dc:title>
    <dc:creator opf:file-as="Doe, Jane" opf:role="aut">Jane Doe</dc:creator>
    <dc:creator opf:role="aut">John Roe</dc:creator>
    <dc:language>en</dc:language>
    <dc:identifier id="BookId">urn:uuid:1234</dc:identifier>
    <meta name="cover" content="cover-image"/>
  </metadata>
  <manifest>
    <item id="ncx" href="toc.ncx" media-type="application/x-dtbncx+xml"/>
    <item id="cover-image" href="images/cover.jpg" media-type="image/jpeg" properties="cover-image"/>
    <item id="c1" href="c1.xhtml" media-type="application/xhtml+xml"/>
    <item id="c2" href="c2.xhtml" media-type="application/xhtml+xml" fallback="c1"/>
    <item id="notes" href="notes.xhtml" media-type="application/xhtml+xml"/>
  </manifest>
  <spine toc="ncx">
    <itemref idref="c1"/>
    <itemref idref="c2" linear="yes"/>
    <itemref idref="notes" linear="no"/>
  </spine>
  <guide>
    <reference type="cover" title="Cover" href="images/cover.jpg"/>
    <reference type="toc" title="Contents" href="c1.xhtml#toc"/>
  </guide>
</package>
"""

PREFIXED_OPF = """<?xml version="1.0" encoding="UTF-8"?>
<opf:package xmlns:opf="http://www.idpf.org/2007/opf"
             xmlns:dc="http://purl.org/dc/elements/1.1/" version="3.0">
  <opf:metadata>
    <dc:title>Prefixed</dc:title>
  </opf:metadata>
  <opf:manifest>
    <opf:item id="nav" href="nav.xhtml" media-type="application/xhtml+xml" properties="nav scripted"/>
    <opf:item id="p1" href="text/p1.xhtml" media-type="application/xhtml+xml"/>
  </opf:manifest>
  <opf:spine>
    <opf:itemref idref="p1"/>
    <opf:itemref idref="nav" linear="maybe"/>
  </opf:spine>
</opf:package>
"""

NO_NS_OPF = """<package version="2.0">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/">
    <dc:title>Plain</dc:title>
  </metadata>
  <manifest>
    <item id="toc" href="toc.ncx" media-type="application/x-dtbncx+xml"/>
    <item id="a" href="a.html" media-type="text/html"/>
  </manifest>
  <spine toc="toc">
    <itemref idref="a"/>
  </spine>
</package>
"""


def build_opf(manifest: str = "", spine: str = "", spine_attrs: str = "", extra: str = "") -> str:
    """Build a minimal default-namespace package document."""
    return (
        '<package xmlns="http://www.idpf.org/2007/opf" '
        'xmlns:dc="http://purl.org/dc/elements/1.1/" version="2.0">'
        "<metadata><dc:title>Book</dc:title></metadata>"
        f"<manifest>{manifest}</manifest>"
        f"<spine{spine_attrs}>{spine}</spine>"
        f"{extra}"
        "</package>"
    )


class CountingProvider:
    """Resource provider that records every lookup."""

    def __init__(self, resources: dict[str, bytes] | None = None):
        self.resources = resources or {}
        self.calls: list[str] = []

    def get(self, path: str) -> bytes:
        self.calls.append(path)
        if path not in self.resources:
            raise ResourceNotFoundError(path)
        return self.resources[path]


@pytest.fixture
def default_ns_opf():
    return DEFAULT_NS_OPF


@pytest.fixture
def prefixed_opf():
    return PREFIXED_OPF


@pytest.fixture
def no_ns_opf():
    return NO_NS_OPF


@pytest.fixture
def provider():
    return CountingProvider(
        {
            "c1.xhtml": b"<html><body>One</body></html>",
            "c2.xhtml": b"<html><body>Two</body></html>",
            "images/cover.jpg": b"\xff\xd8\xff",
        }
    )


@pytest.fixture
def book_dir(tmp_path: Path) -> Path:
    """Unpacked publication directory with an .opf file."""
    (tmp_path / "content.opf").write_text(DEFAULT_NS_OPF, encoding="utf-8")
    (tmp_path / "c1.xhtml").write_bytes(b"<html><body>One</body></html>")
    (tmp_path / "images").mkdir()
    (tmp_path / "images" / "cover.jpg").write_bytes(b"\xff\xd8\xff")
    return tmp_path
