from ..components.element_ import Viewable, draw
from ..utilities.html import Html
from .html_attr import HtmlAttr


class MountPoint(Viewable):
	""" A container the service writes markup into. It owns named sub-regions, addressed by slot, that are drawn after its own inner html.

	Regions are discarded whenever the inner html is replaced, mirroring how setting innerHTML on a DOM node drops its previous children. """

	def __init__(self, tag: str = "div", attr: HtmlAttr | None = None):
		self.tag = tag
		self.attr = attr or HtmlAttr()
		self.inner_html = Html()
		self._regions: dict[str, MountPoint] = {}

	def set_inner_html(self, html: str) -> None:
		self.inner_html = Html(html)
		self._regions = {}

	def add_region(self, slot: str, tag: str = "div") -> 'MountPoint':
		if slot in self._regions:
			raise ValueError(f"Region '{slot}' already exists.")
		region = MountPoint(tag, HtmlAttr(slot=slot))
		self._regions[slot] = region
		return region

	def find_slot(self, slot: str) -> 'MountPoint | None':
		""" Returns None if no region is registered under slot. """
		return self._regions.get(slot)

	def region(self, slot: str, tag: str = "div") -> 'MountPoint':
		""" Returns the region for slot, adding an empty one if needed. """
		return self.find_slot(slot) or self.add_region(slot, tag)

	def slots(self) -> list[str]:
		return list(self._regions)

	def draw(self) -> Html:
		attrs = str(self.attr)
		opening = f"<{self.tag} {attrs}>" if attrs else f"<{self.tag}>"
		output = Html(opening) + self.inner_html
		for region in self._regions.values():
			output += draw(region)
		return output + Html(f"</{self.tag}>")
