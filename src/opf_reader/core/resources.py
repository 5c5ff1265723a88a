"""Resource providers and lazily loaded item content."""

import logging
from pathlib import Path, PurePosixPath
from typing import Mapping, Protocol
from urllib.parse import unquote

from opf_reader.exceptions import ContentUnavailableError, ResourceNotFoundError

log = logging.getLogger(__name__)


class ResourceProvider(Protocol):
    """Anything that can return raw bytes for a path inside a publication."""

    def get(self, path: str) -> bytes:
        """Return the bytes at path, raising ResourceNotFoundError if missing."""
        ...


class DirectoryResourceProvider:
    """Serve resources from an unpacked publication directory."""

    def __init__(self, base_dir: Path):
        self.base_dir = base_dir.resolve()

    def get(self, path: str) -> bytes:
        target = (self.base_dir / PurePosixPath(unquote(path.split("#")[0]))).resolve()
        # Refuse hrefs that climb out of the publication
        if not target.is_relative_to(self.base_dir) or not target.is_file():
            raise ResourceNotFoundError(path)
        return target.read_bytes()


class MappingResourceProvider:
    """Serve resources from an in-memory mapping of path to bytes."""

    def __init__(self, resources: Mapping[str, bytes]):
        self.resources = dict(resources)

    def get(self, path: str) -> bytes:
        try:
            return self.resources[path]
        except KeyError:
            raise ResourceNotFoundError(path) from None


class ContentAccessor:
    """Memoized access to the content behind an href.

    The accessor is either unresolved, holding a provider and href, or
    resolved, holding the bytes returned by the first successful call.
    """

    def __init__(self, provider: ResourceProvider | None, href: str):
        self.provider = provider
        self.href = href
        self._content: bytes | None = None

    @property
    def is_resolved(self) -> bool:
        return self._content is not None

    def get(self) -> bytes:
        if self._content is not None:
            return self._content

        if self.provider is None:
            raise ContentUnavailableError(self.href, "no resource provider configured")

        try:
            content = self.provider.get(self.href)
        except ResourceNotFoundError as e:
            raise ContentUnavailableError(self.href, str(e)) from e

        log.debug("Loaded %d bytes for %s", len(content), self.href)
        self._content = content
        return content
