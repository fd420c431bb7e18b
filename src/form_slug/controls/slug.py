"""Slug form control

Text input whose value is generated in the browser from other form fields.
The watched fields and behaviour flags are passed to the client script as
a JSON settings payload embedded in the rendered template.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from markupsafe import Markup

from ..config import DEFAULT_TOGGLE_BOX, SlugSettings
from ..exceptions import AlreadyRegisteredError
from ..fields import FieldBindingRegistry, FieldHandle
from ..forms import Container, Form, TextInput
from ..payload import SettingsPayload
from ..registry import ControlRegistry, RegistrationGuard, default_guard, default_registry
from ..templating import BoundTemplate, TemplateFactory, TemplateResolver, locate_template_file

logger = logging.getLogger(__name__)


@dataclass
class SlugConfig:
    """Per-control behaviour flags and template override."""
    toggle_box_selector: str = DEFAULT_TOGGLE_BOX
    onetime_auto_update: bool = True
    force_edit_update: bool = False
    template_file_override: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: SlugSettings) -> "SlugConfig":
        return cls(
            toggle_box_selector=settings.toggle_box_selector,
            onetime_auto_update=settings.onetime_auto_update,
            force_edit_update=settings.force_edit_update,
        )


class SlugControl:
    """Slug input bound to a set of watched fields.

    Wraps a ``TextInput`` and adds the watched-field registry, the client
    settings and template rendering.
    """

    def __init__(
        self,
        template_factory: TemplateFactory,
        label: Optional[str] = None,
        max_length: Optional[int] = None,
        settings: Optional[SlugSettings] = None,
    ):
        self.settings = settings or SlugSettings()
        self.input = TextInput(label, max_length)
        self.fields = FieldBindingRegistry()
        self.config = SlugConfig.from_settings(self.settings)
        self._resolver = TemplateResolver(template_factory, self.settings.default_template_path)

    # Text input capability

    @property
    def name(self) -> Optional[str]:
        return self.input.name

    @property
    def caption(self) -> Optional[str]:
        return self.input.caption

    def set_parent(self, parent: Container, name: str) -> None:
        self.input.set_parent(parent, name)

    def get_form(self) -> Optional[Form]:
        return self.input.get_form()

    def get_value(self) -> str:
        return self.input.get_value()

    def set_value(self, value: Any) -> "SlugControl":
        self.input.set_value(value)
        return self

    def get_html_id(self) -> str:
        return self.input.get_html_id()

    # Watched fields and flags

    def add_field(self, field: FieldHandle) -> "SlugControl":
        """Add a field the slug is generated from."""
        self.fields.add(field)
        return self

    def set_toggle_box_selector(self, selector: str) -> "SlugControl":
        self.config.toggle_box_selector = selector
        return self

    def enable_one_time_update(self) -> "SlugControl":
        self.config.onetime_auto_update = True
        return self

    def disable_one_time_update(self) -> "SlugControl":
        self.config.onetime_auto_update = False
        return self

    def enable_force_edit_update(self) -> "SlugControl":
        self.config.force_edit_update = True
        return self

    def disable_force_edit_update(self) -> "SlugControl":
        self.config.force_edit_update = False
        return self

    def build_settings_payload(self, registry: Optional[FieldBindingRegistry] = None) -> SettingsPayload:
        registry = registry if registry is not None else self.fields
        return SettingsPayload(
            toggle=self.config.toggle_box_selector,
            onetime=self.config.onetime_auto_update,
            forceEdit=self.config.force_edit_update,
            fields=registry.to_selector_list(),
        )

    # Templates

    def set_template_file(self, template_file: Union[str, Path]) -> None:
        """Change the control template.

        Accepts an existing path or the name of a template shipped with the
        control.

        Raises:
            TemplateFileNotFoundError: If the file exists in neither place
        """
        resolved = locate_template_file(template_file, self.settings.template_dir)

        if self._resolver.is_bound and resolved != self._resolver.bound_file:
            logger.warning(
                f"Template already bound to {self._resolver.bound_file}, "
                f"{resolved} will not be used by this control"
            )

        self.config.template_file_override = resolved

    def get_template_file(self) -> str:
        return self._resolver.resolve_template_file(self.config.template_file_override)

    def get_template(self) -> BoundTemplate:
        return self._resolver.get_template(self.config.template_file_override)

    def get_control(self) -> Markup:
        """Render the control HTML."""
        return self._resolver.render_control(
            self.input.get_control(),
            self.get_value(),
            self.caption,
            self.build_settings_payload(),
            template_file=self.config.template_file_override,
            form=self.get_form(),
        )

    def get_label(self) -> Markup:
        return self.input.get_label()

    def __html__(self) -> str:
        return str(self.get_control())

    def __repr__(self) -> str:
        return f"SlugControl(name={self.name!r}, fields={self.fields.ids()!r})"

    # Registration

    @classmethod
    def register(
        cls,
        template_factory: TemplateFactory,
        method: Optional[str] = None,
        guard: Optional[RegistrationGuard] = None,
        registry: Optional[ControlRegistry] = None,
        settings: Optional[SlugSettings] = None,
    ) -> None:
        """Install the ``add_slug`` extension method on form containers.

        Raises:
            AlreadyRegisteredError: If the guard was already used or
                ``method`` is taken in the registry
        """
        guard = guard if guard is not None else default_guard
        registry = registry if registry is not None else default_registry
        method = method or (settings.method_name if settings is not None else SlugSettings().method_name)

        guard.acquire(method)
        try:
            registry.add(method, make_slug_factory(cls, template_factory, settings))
        except AlreadyRegisteredError:
            # Nothing was installed, so the guard must not stay taken
            guard.reset()
            raise


def make_slug_factory(control_class, template_factory: TemplateFactory, settings: Optional[SlugSettings] = None):
    """Build the container extension method creating slug controls."""

    def add_slug(
        container: Container,
        name: str,
        label: Optional[str] = None,
        max_length: Optional[int] = None,
    ) -> SlugControl:
        component = control_class(template_factory, label, max_length, settings=settings)
        container.add_component(component, name)
        return component

    return add_slug
