"""Watched-field bindings for the slug control."""

from typing import Dict, Iterator, List, Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class FieldHandle(Protocol):
    """Anything with a stable HTML id, usually another form control."""

    def get_html_id(self) -> str:
        ...


class FieldBindingRegistry:
    """Ordered collection of watched fields keyed by HTML id.

    Re-adding an id keeps its original position but stores the new handle.
    Handles are not owned, only referenced for serialization.
    """

    def __init__(self):
        self._fields: Dict[str, FieldHandle] = {}

    def add(self, field: FieldHandle) -> None:
        # dict assignment keeps the first-seen slot for an existing key
        self._fields[field.get_html_id()] = field

    def to_selector_list(self) -> List[str]:
        return ["#" + html_id for html_id in self._fields]

    def get(self, html_id: str) -> Optional[FieldHandle]:
        return self._fields.get(html_id)

    def ids(self) -> List[str]:
        return list(self._fields)

    def __contains__(self, item: Union[str, FieldHandle]) -> bool:
        if isinstance(item, str):
            return item in self._fields
        return item.get_html_id() in self._fields

    def __iter__(self) -> Iterator[FieldHandle]:
        return iter(list(self._fields.values()))

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FieldBindingRegistry({self.ids()!r})"
