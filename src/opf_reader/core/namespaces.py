"""XML loading and namespace resolution for package documents."""

import logging
from dataclasses import dataclass
from enum import Enum

from lxml import etree

from opf_reader.exceptions import InvalidInputError, MalformedXmlError

log = logging.getLogger(__name__)


class Namespace(str, Enum):
    """Well-known namespace URIs used by package documents."""

    OPF = "http://www.idpf.org/2007/opf"
    DC = "http://purl.org/dc/elements/1.1/"
    XML = "http://www.w3.org/XML/1998/namespace"


# The xml prefix is bound implicitly and never shows up in nsmap
_IMPLICIT_PREFIXES = {Namespace.XML.value: "xml"}


@dataclass(frozen=True)
class OpfDocument:
    """Parsed XML tree plus every prefix binding declared in it."""

    root: etree._Element
    namespaces: dict[str, str]  # prefix -> uri, "" for the default namespace

    def prefix_for(self, uri: str) -> str | None:
        """Return the first prefix bound to a namespace URI."""
        for prefix, bound in self.namespaces.items():
            if bound == uri:
                return prefix
        return _IMPLICIT_PREFIXES.get(uri)


@dataclass(frozen=True)
class NamespacedView:
    """Children of an element as seen from a single namespace."""

    element: etree._Element
    namespace: str | None

    def _tag(self, local_name: str) -> str:
        if self.namespace:
            return f"{{{self.namespace}}}{local_name}"
        return local_name

    def find(self, local_name: str) -> etree._Element | None:
        """Return the first child with the given local name, if any."""
        return self.element.find(self._tag(local_name))

    def find_all(self, local_name: str) -> list[etree._Element]:
        """Return all children with the given local name, in document order."""
        return self.element.findall(self._tag(local_name))

    def get(self, attribute: str, default: str = "") -> str:
        """Read an unqualified attribute of the underlying element."""
        return self.element.get(attribute, default)


def _collect_namespaces(root: etree._Element) -> dict[str, str]:
    namespaces: dict[str, str] = {}
    for element in root.iter(etree.Element):
        for prefix, uri in element.nsmap.items():
            namespaces.setdefault(prefix or "", uri)
    return namespaces


def load_document(data: "str | bytes | etree._Element | etree._ElementTree") -> OpfDocument:
    """Load XML text or an already-parsed tree.

    Raises:
        InvalidInputError: data is not XML text or an lxml tree.
        MalformedXmlError: the XML parser rejected the text.
    """
    if isinstance(data, etree._ElementTree):
        root = data.getroot()
        if root is None:
            raise InvalidInputError(data)
    elif isinstance(data, etree._Element):
        root = data
    elif isinstance(data, (str, bytes)):
        if isinstance(data, str):
            # Text is already decoded; its encoding declaration must not apply
            data = data.encode("utf-8")
            parser = etree.XMLParser(encoding="utf-8", resolve_entities=False, no_network=True)
        else:
            parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            root = etree.fromstring(data, parser)
        except etree.XMLSyntaxError as e:
            raise MalformedXmlError(f"Package document is not well-formed XML: {e}") from e
    else:
        raise InvalidInputError(data)

    namespaces = _collect_namespaces(root)
    log.debug("Loaded <%s> with namespaces %s", etree.QName(root).localname, namespaces)
    return OpfDocument(root=root, namespaces=namespaces)


def resolve(element: etree._Element, namespace: Namespace) -> NamespacedView:
    """View an element's children through a well-known namespace.

    If the namespace is bound at the element (prefixed or as the default
    namespace), the view selects children in that namespace. Otherwise the
    element is taken to already be in the right namespace and its own
    namespace is used, which covers documents that never declare OPF.
    """
    if namespace.value in element.nsmap.values():
        return NamespacedView(element, namespace.value)
    return NamespacedView(element, etree.QName(element).namespace)


def children_in(element: etree._Element, namespace: Namespace) -> list[etree._Element]:
    """Return the element children that belong to a namespace."""
    return [
        child
        for child in element.iterchildren(etree.Element)
        if etree.QName(child).namespace == namespace.value
    ]


def extract_attributes(element: etree._Element, document: OpfDocument) -> dict[str, str]:
    """Flatten an element's attributes into a single mapping.

    For instance::

        <dc:creator xmlns:opf="http://www.idpf.org/2007/opf"
                    opf:file-as="Some Guy" id="name"/>

    becomes ``{"id": "name", "opf:file-as": "Some Guy"}``. Namespaced
    attributes are keyed ``prefix:local`` once for every prefix the
    document binds to their namespace, or by the prefix in scope at the
    element when the document table maps that prefix elsewhere.
    Unprefixed attributes keep their bare name.
    """
    attributes: dict[str, str] = {}
    qualified: list[tuple[etree.QName, str]] = []

    for key, value in element.attrib.items():
        name = etree.QName(key)
        if name.namespace is None:
            attributes[name.localname] = value
        else:
            qualified.append((name, value))

    prefixes = [(prefix, uri) for prefix, uri in document.namespaces.items() if prefix]
    prefixes += [(prefix, uri) for uri, prefix in _IMPLICIT_PREFIXES.items()]
    for name, value in qualified:
        keys = [f"{prefix}:{name.localname}" for prefix, uri in prefixes if uri == name.namespace]
        if not keys:
            # Prefix rebound lower in the document; use the one in scope here
            keys = [
                f"{prefix}:{name.localname}" if prefix else name.text
                for prefix, uri in element.nsmap.items()
                if uri == name.namespace
            ] or [name.text]
        for key in keys:
            attributes[key] = value

    return attributes
