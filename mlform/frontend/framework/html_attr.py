import json
from collections.abc import Mapping
from html import escape
from typing import Any

from ...utilities.undefined import UNDEFINED


class HtmlAttr:
	""" NOTE: None (or UNDEFINED) in this context indicates an unset attribute.
	Attribute names are used verbatim, so strategies may pass names such as 'defaultValue' or 'optionList' straight through. """

	def __init__(self, attrs: Mapping[str, Any] | None = None, **kwargs: Any):
		self._attrs: dict[str, Any] = dict(attrs or {})
		self._attrs.update(kwargs)

	def __str__(self):
		output = []
		for attr_name, attr_value in self.as_dict().items():
			# For booleans, true renders as a presence-only attribute (i.e. for attrs like 'required')
			if attr_value is True:
				output.append(f'{attr_name}=""')
			else:
				output.append(f'{attr_name}="{escape(stringify(attr_value), quote=True)}"')
		return " ".join(output)

	def __bool__(self):
		return bool(self.as_dict())

	def as_dict(self) -> dict[str, Any]:
		""" Returns only the attributes that are set. """
		return {
			attr_name: attr_value
			for attr_name, attr_value in self._attrs.items()
			if attr_value is not None and attr_value is not UNDEFINED
		}

	def __add__(self, other: 'HtmlAttr') -> 'HtmlAttr':
		return self.update(other, allow_override=False)

	def update(self, other: 'HtmlAttr', *, allow_override: bool = False) -> 'HtmlAttr':
		""" Updates self with the attributes of other and then returns self.
		Set override = True if you'd like other to be able to override attributes that are already set in self. """
		mine = self.as_dict()
		for other_attr_name, other_attr_value in other.as_dict().items():
			if other_attr_name in mine and not allow_override:
				raise ValueError(f"Attribute '{other_attr_name}' is specified in both HtmlAttr instances.")
			self._attrs[other_attr_name] = other_attr_value
		return self

def stringify(value: Any) -> str:
	""" Converts a set attribute value into its string form. Containers are encoded as compact JSON so that components can parse them back. """
	if isinstance(value, bool):
		return "true" if value else "false"
	if isinstance(value, (list, tuple, dict)):
		return json.dumps(value, separators=(",", ":"), default=str)
	return str(value)
