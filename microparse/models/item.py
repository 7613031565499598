from dataclasses import dataclass, field
from typing import Dict, List, Any, Union

# Key used for elements that carry neither itemprop nor itemtype.
UNNAMED_FIELD = ""

# Reserved key holding the resolved href of a nested item.
URL_FIELD = "url"


@dataclass(frozen=True)
class Scalar:
    value: str


@dataclass
class Nested:
    item: "Item"


@dataclass
class Array:
    values: List[Union[Scalar, Nested]] = field(default_factory=list)


PropertyValue = Union[Scalar, Nested, Array]


@dataclass
class Item:
    """
    One microdata item: field name -> property value.

    A field contributed to once holds the bare value; from the second
    contribution on it holds an Array with every value in call order.
    """

    properties: Dict[str, PropertyValue] = field(default_factory=dict)

    def accumulate(self, key: str, value: Union[Scalar, Nested]) -> None:
        current = self.properties.get(key)

        if current is None:
            self.properties[key] = value
        elif isinstance(current, Array):
            current.values.append(value)
        else:
            self.properties[key] = Array([current, value])

    def to_dict(self) -> Dict[str, Any]:
        return {key: _plain(value) for key, value in self.properties.items()}

    def __len__(self) -> int:
        return len(self.properties)

    def __contains__(self, key: object) -> bool:
        return key in self.properties

    def __getitem__(self, key: str) -> PropertyValue:
        return self.properties[key]


def _plain(value: PropertyValue) -> Any:
    if isinstance(value, Scalar):
        return value.value
    if isinstance(value, Nested):
        return value.item.to_dict()
    return [_plain(v) for v in value.values]
