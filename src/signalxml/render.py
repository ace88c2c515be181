import re

from lxml import etree

from signalxml.models.xml import MMS, SMSes, XMLModel

# List fields rendered inside a wrapper element rather than inline.
_WRAPPED = {MMS: "parts"}


# Code points outside the XML 1.0 Char production.
_ILLEGAL_XML_CHARS = re.compile(
    "[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def _attr(value: object) -> str:
    if isinstance(value, int):
        # Enums and bools render as their plain number.
        return str(int(value))
    return _ILLEGAL_XML_CHARS.sub("\ufffd", str(value))


def to_element(model: XMLModel) -> etree._Element:
    el = etree.Element(model.xml_tag)
    wrapper = _WRAPPED.get(type(model))
    for name, value in model:
        if value is None:
            continue
        if isinstance(value, list):
            parent = etree.SubElement(el, name) if name == wrapper else el
            for child in value:
                parent.append(to_element(child))
            continue
        el.set(name, _attr(value))
    return el


def to_xml(smses: SMSes, pretty_print: bool = True) -> bytes:
    return etree.tostring(
        to_element(smses),
        xml_declaration=True,
        encoding="UTF-8",
        standalone=True,
        pretty_print=pretty_print,
    )
