"""OPF Reader - Parse EPUB package documents into typed models."""

from opf_reader.core.opf_parser import OpfParser, parse_opf

__version__ = "0.1.0"

__all__ = ["OpfParser", "parse_opf", "__version__"]
