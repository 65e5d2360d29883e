"""Entry-point for the docx reader pipeline."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import BinaryIO, Optional, Sequence, Union
from xml.etree import ElementTree as ET

from docx_reader.model.document_model import ParseResult
from docx_reader.options import DEFAULT_DISPLAY_SCALE, ParseOptions
from docx_reader.parser.docx_loader import DocxPackage
from docx_reader.parser.document_parser import DocumentParser
from docx_reader.parser.media_extractor import MediaResolver
from docx_reader.parser.numbering_parser import NumberingParser
from docx_reader.parser.rels_parser import Relationships
from docx_reader.renderer.text_renderer import TextRenderer
from docx_reader.utils.debug import DebugDumper
from docx_reader.utils.logger import get_logger, resolve_level

LOGGER = get_logger(__name__)

DocxSource = Union[str, Path, BinaryIO]


def load_package(source: DocxSource) -> DocxPackage:
    if isinstance(source, (str, Path)):
        return DocxPackage.load(source)
    return DocxPackage.from_stream(source)


def parse_docx(source: DocxSource, options: Optional[ParseOptions] = None) -> ParseResult:
    """Read a DOCX package and build the element model.

    Container damage yields a partial (possibly empty) result. Malformed XML in
    one of the captured parts raises :class:`xml.etree.ElementTree.ParseError`.
    """
    options = options or ParseOptions()
    package = load_package(source)
    relationships = Relationships.from_xml(package.document_rels_xml)
    list_definitions = NumberingParser(package.numbering_xml).parse()
    media = MediaResolver(package.media, relationships, options)
    elements = DocumentParser(media, options).parse(package.document_xml)
    return ParseResult(elements=elements, list_definitions=list_definitions)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docx-reader", description="Parse a DOCX file into a flat element model and print it as text"
    )
    parser.add_argument("docx_file", help="Path to the input .docx file")
    parser.add_argument(
        "--scale", type=float, default=DEFAULT_DISPLAY_SCALE, help="Display scale applied to font sizes"
    )
    parser.add_argument("--width", type=int, default=80, help="Character width used to lay out tables")
    parser.add_argument("--emphasis", action="store_true", help="Mark bold, italic and underlined text")
    parser.add_argument("--output", help="Write the text rendering to this file instead of stdout")
    parser.add_argument("--json", dest="json_dir", help="Directory to dump the parsed model as JSON")
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the DOCX → element model → text pipeline."""
    args = build_arg_parser().parse_args(argv)
    if args.log_level:
        logging.getLogger().setLevel(resolve_level(args.log_level))

    docx_path = Path(args.docx_file).resolve()
    if not docx_path.exists():
        raise FileNotFoundError(f"DOCX file not found: {docx_path}")

    try:
        result = parse_docx(docx_path, ParseOptions(display_scale=args.scale))
    except (ET.ParseError, OSError) as exc:
        LOGGER.error("Could not read %s: %s", docx_path.name, exc)
        return 1

    LOGGER.info("Parsed %d elements from %s", len(result.elements), docx_path.name)
    if args.json_dir:
        LOGGER.info("Dumped model to %s", DebugDumper(Path(args.json_dir)).dump(result))

    output_path = Path(args.output) if args.output else None
    text = TextRenderer(output_path, width=args.width, emphasis=args.emphasis).render(result)
    if output_path is None:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
