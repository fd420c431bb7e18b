"""Minimal form component tree used by the slug control.

``TextInput`` is the generic text-input capability the slug control wraps.
``Container`` and ``Form`` hold named components and expose registered
control factories as ``add_*`` extension methods.
"""

import functools
import logging
from typing import Any, Dict, Iterator, List, Optional

from markupsafe import Markup, escape

from .exceptions import FormSlugError
from .registry import ControlRegistry, default_registry

logger = logging.getLogger(__name__)


def _render_attributes(attrs: Dict[str, Any]) -> Markup:
    parts = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(Markup(" {}").format(key))
        else:
            parts.append(Markup(' {}="{}"').format(key, value))
    return Markup("").join(parts)


class TextInput:
    """Single-line text input."""

    def __init__(self, label: Optional[str] = None, max_length: Optional[int] = None):
        self.caption = label
        self.max_length = max_length
        self.name: Optional[str] = None
        self.parent: Optional["Container"] = None
        self.attrs: Dict[str, Any] = {}
        self._value: str = ""
        self._html_id: Optional[str] = None

    def set_parent(self, parent: "Container", name: str) -> None:
        self.parent = parent
        self.name = name

    def get_name(self) -> Optional[str]:
        return self.name

    def get_form(self) -> Optional["Form"]:
        return self.parent.get_form() if self.parent is not None else None

    def get_value(self) -> str:
        return self._value

    def set_value(self, value: Any) -> "TextInput":
        self._value = "" if value is None else str(value)
        return self

    def get_html_id(self) -> str:
        if self._html_id is not None:
            return self._html_id
        path = self.parent.lookup_path() + [self.name] if self.parent is not None else [self.name or ""]
        return "frm-" + "-".join(part for part in path if part)

    def set_html_id(self, html_id: str) -> "TextInput":
        self._html_id = html_id
        return self

    def get_control(self) -> Markup:
        attrs = {
            "type": "text",
            "name": self.name,
            "id": self.get_html_id(),
            "value": self._value,
            "maxlength": self.max_length,
        }
        attrs.update(self.attrs)
        return Markup("<input{}>").format(_render_attributes(attrs))

    def get_label(self) -> Markup:
        if self.caption is None:
            return Markup("")
        return Markup('<label for="{}">{}</label>').format(self.get_html_id(), self.caption)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class Container:
    """Ordered collection of named components."""

    def __init__(self, name: Optional[str] = None, registry: Optional[ControlRegistry] = None):
        self.name = name
        self.parent: Optional["Container"] = None
        self._registry = registry
        self._components: Dict[str, Any] = {}

    @property
    def registry(self) -> ControlRegistry:
        if self._registry is not None:
            return self._registry
        if self.parent is not None:
            return self.parent.registry
        return default_registry

    def set_parent(self, parent: "Container", name: str) -> None:
        self.parent = parent
        self.name = name

    def get_form(self) -> Optional["Form"]:
        return self.parent.get_form() if self.parent is not None else None

    def lookup_path(self) -> List[str]:
        """Names from the root container down to this one."""
        if self.parent is None:
            return [self.name] if self.name else []
        return self.parent.lookup_path() + [self.name]

    def add_component(self, component: Any, name: str) -> Any:
        if name in self._components:
            raise FormSlugError(f'Component with name "{name}" already exists.')

        self._components[name] = component
        if hasattr(component, "set_parent"):
            component.set_parent(self, name)

        logger.debug(f"Added component {name} ({type(component).__name__})")
        return component

    def add_text(self, name: str, label: Optional[str] = None, max_length: Optional[int] = None) -> TextInput:
        return self.add_component(TextInput(label, max_length), name)

    def add_container(self, name: str) -> "Container":
        return self.add_component(Container(), name)

    def get_component(self, name: str) -> Any:
        return self._components[name]

    def components(self) -> List[Any]:
        return list(self._components.values())

    def __getitem__(self, name: str) -> Any:
        return self._components[name]

    def __contains__(self, name: str) -> bool:
        return name in self._components

    def __iter__(self) -> Iterator[Any]:
        return iter(self.components())

    def __len__(self) -> int:
        return len(self._components)

    def __getattr__(self, name: str):
        # Extension methods installed through the control registry
        if name.startswith("_"):
            raise AttributeError(name)
        factory = self.registry.get(name)
        if factory is None:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return functools.partial(factory, self)


class Form(Container):
    """Root container."""

    def get_form(self) -> "Form":
        return self
