from collections.abc import Iterable

from ..utilities.html import Html
from .html_attr import HtmlAttr
from ...descriptors.descriptor_item import DescriptorItem, Slot


def serialize_descriptor(item: DescriptorItem) -> Html:
    """ Depth first: the opening tag with its attributes, then the child's markup, then the closing tag.
    Tag names are trusted and emitted verbatim. """
    attrs = str(HtmlAttr(item.props))
    opening = f"<{item.tag} {attrs}>" if attrs else f"<{item.tag}>"
    inner = serialize_descriptor(item.child) if item.child is not None else Html()
    return Html(opening) + inner + Html(f"</{item.tag}>")

def serialize_descriptors(items: Iterable[DescriptorItem], slot: Slot | str | None = None) -> Html:
    """ Serializes items in order. If slot is given, items belonging to other slots are skipped. """
    output = Html()
    for item in items:
        if slot is not None and item.slot != slot:
            continue
        output += serialize_descriptor(item)
    return output
