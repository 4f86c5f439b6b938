"""XML codec built on ElementTree.

The mapping between XML and normalized data follows the xml2js
conventions: attributes live in a ``$`` mapping, character data under
``_``, and repeated child elements are lists. Both keys are configurable
through the ``xml_encoder`` / ``xml_decoder`` context option bags.
"""

import re
import xml.etree.ElementTree as ET
from typing import Any

from ..config import (
    XML_DECODER_KEY,
    XML_ENCODER_KEY,
    XmlDecoderOptions,
    XmlEncoderOptions,
    load_options,
)
from ..core.exceptions import DecodingError, EncodingError
from .base import TokenFormatMixin

# Letter or underscore first, then letters, digits, "_", ".", "-" and ":"
_XML_NAME = re.compile(r"[^\W\d][\w.:-]*")


def _to_text(value: Any) -> str:
    """Render a scalar the way XML text and attributes expect it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _xml_name(name: Any, format: str) -> str:
    """Return name as an element or attribute name, rejecting invalid ones."""
    text = str(name)
    if not _XML_NAME.fullmatch(text):
        raise EncodingError(format, f"{text!r} is not a valid XML name")
    return text


def _append_text(element: ET.Element, text: str) -> None:
    """Append character data after the last child (or as leading text)."""
    if len(element):
        last = element[-1]
        last.tail = (last.tail or "") + text
    else:
        element.text = (element.text or "") + text


class XmlEncode(TokenFormatMixin):
    """Encodes normalized data into an XML document."""

    format_token = "xml"

    def encode(
        self, data: Any, format: str = "xml", context: dict[str, Any] | None = None
    ) -> str:
        """Encode data to XML.

        A mapping with exactly one key uses that key as the root element
        unless a custom ``root_name`` is configured; anything else is
        wrapped in a ``root_name`` element.

        Args:
            data: Normalized data
            format: Format name
            context: Options; ``context["xml_encoder"]`` overrides the defaults

        Returns:
            The XML document
        """
        options = load_options(XmlEncoderOptions, context, XML_ENCODER_KEY)

        root_name = options.root_name
        if (
            isinstance(data, dict)
            and len(data) == 1
            and root_name == XmlEncoderOptions.root_name
        ):
            root_name, data = next(iter(data.items()))

        root = ET.Element(_xml_name(root_name, format))
        self._render(root, data, options, format)

        if options.pretty:
            ET.indent(root, space=options.indent)
        body = ET.tostring(root, encoding="unicode")

        if options.headless:
            return body
        separator = "\n" if options.pretty else ""
        return self._declaration(options) + separator + body

    def supports_encoding(self, format: str) -> bool:
        """Check if the format contains "xml"."""
        return self._matches(format)

    def needs_normalization(self, format: str = "xml") -> bool:
        """XML encoding always works on normalized data."""
        return True

    def _declaration(self, options: XmlEncoderOptions) -> str:
        parts = [f'version="{options.xml_version}"']
        if options.encoding:
            parts.append(f'encoding="{options.encoding}"')
        if options.standalone is not None:
            parts.append(f'standalone="{"yes" if options.standalone else "no"}"')
        return f"<?xml {' '.join(parts)}?>"

    def _render(
        self, element: ET.Element, data: Any, options: XmlEncoderOptions, format: str
    ) -> None:
        """Render data into element, creating child elements as needed."""
        if data is None:
            return

        if isinstance(data, list | tuple):
            # A list directly under an element holds mappings of children
            for item in data:
                if not isinstance(item, dict):
                    raise EncodingError(
                        format,
                        f"list items directly under <{element.tag}> must be "
                        f"mappings, got {type(item).__name__}",
                    )
                self._render(element, item, options, format)
            return

        if not isinstance(data, dict):
            _append_text(element, _to_text(data))
            return

        for key, child in data.items():
            if key == options.attr_key:
                if not isinstance(child, dict):
                    raise EncodingError(
                        format,
                        f"attributes of <{element.tag}> must be a mapping, "
                        f"got {type(child).__name__}",
                    )
                for name, value in child.items():
                    element.set(_xml_name(name, format), _to_text(value))
            elif key == options.char_key:
                _append_text(element, _to_text(child))
            elif isinstance(child, list | tuple):
                name = _xml_name(key, format)
                for entry in child:
                    self._render(ET.SubElement(element, name), entry, options, format)
            else:
                name = _xml_name(key, format)
                self._render(ET.SubElement(element, name), child, options, format)


class XmlDecode(TokenFormatMixin):
    """Decodes an XML document into normalized data."""

    format_token = "xml"

    def decode(
        self,
        data: str | bytes,
        format: str = "xml",
        context: dict[str, Any] | None = None,
    ) -> Any:
        """Parse XML into dicts, lists and strings.

        Args:
            data: The XML document
            format: Format name
            context: Options; ``context["xml_decoder"]`` overrides the defaults

        Returns:
            ``{root_tag: value}`` (or just the value without explicit_root)

        Raises:
            DecodingError: If the document is not well-formed
        """
        options = load_options(XmlDecoderOptions, context, XML_DECODER_KEY)
        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            raise DecodingError(format, str(e)) from e

        value = self._element_to_ir(root, options)
        if options.explicit_root:
            return {root.tag: value}
        return value

    def supports_decoding(self, format: str) -> bool:
        """Check if the format contains "xml"."""
        return self._matches(format)

    def _element_to_ir(self, element: ET.Element, options: XmlDecoderOptions) -> Any:
        node: dict[str, Any] = {}
        if element.attrib:
            node[options.attr_key] = dict(element.attrib)

        text_parts = [element.text or ""]
        for child in element:
            value = self._element_to_ir(child, options)
            if options.explicit_array:
                node.setdefault(child.tag, []).append(value)
            elif child.tag in node:
                existing = node[child.tag]
                if not isinstance(existing, list):
                    node[child.tag] = existing = [existing]
                existing.append(value)
            else:
                node[child.tag] = value
            text_parts.append(child.tail or "")

        text = "".join(text_parts)
        if options.trim:
            text = text.strip()
        # Whitespace-only text is layout, not content
        if text.strip():
            node[options.char_key] = text

        if not node:
            # A leaf holding only whitespace keeps it unless empty_tag is set
            return options.empty_tag or text
        if list(node) == [options.char_key]:
            return node[options.char_key]
        return node
