"""Template resolution and rendering for form controls.

A control owns one ``TemplateResolver``. The resolver starts unbound; the
first render creates a template through the injected ``TemplateFactory``
and binds it to a file. Once bound the file never changes for that
control instance.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from .config import TEMPLATE_DIR, DEFAULT_TEMPLATE
from .exceptions import TemplateFileNotFoundError
from .payload import SettingsPayload

logger = logging.getLogger(__name__)


def locate_template_file(template_file: Union[str, Path], template_dir: Union[str, Path] = TEMPLATE_DIR) -> str:
    """Find a template either as a direct path or inside ``template_dir``.

    Args:
        template_file: Path to a template, or a file name shipped in ``template_dir``
        template_dir: Directory with packaged templates

    Returns:
        The path as given when it exists, otherwise the path inside ``template_dir``

    Raises:
        TemplateFileNotFoundError: If neither location holds the file
    """
    if Path(template_file).is_file():
        return str(template_file)

    packaged = Path(template_dir) / template_file
    if packaged.is_file():
        return str(packaged)

    logger.error(f"Template file not found: {template_file} (searched {template_dir})")
    raise TemplateFileNotFoundError(f'Template file "{template_file}" was not found.')


class BoundTemplate:
    """Template instance created by a factory and later bound to a file."""

    def __init__(self, factory: "TemplateFactory"):
        self._factory = factory
        self.file: Optional[str] = None

    def set_file(self, template_file: Union[str, Path]) -> None:
        self.file = str(template_file)

    def render(self, **params: Any) -> str:
        if self.file is None:
            raise ValueError("Template file is not set")

        path = Path(self.file).resolve()
        environment = self._factory.get_environment(path.parent)
        return environment.get_template(path.name).render(**params)

    def __repr__(self) -> str:
        return f"BoundTemplate(file={self.file!r})"


class TemplateFactory:
    """Creates Jinja2-backed templates.

    One environment is cached per template directory.
    """

    def __init__(self, **environment_options: Any):
        self._options = environment_options
        self._environments: Dict[Path, Environment] = {}

    def get_environment(self, directory: Path) -> Environment:
        directory = Path(directory)
        if directory not in self._environments:
            options = {"autoescape": select_autoescape(default=True, default_for_string=True)}
            options.update(self._options)
            self._environments[directory] = Environment(
                loader=FileSystemLoader(str(directory)),
                **options
            )
        return self._environments[directory]

    def create_template(self) -> BoundTemplate:
        return BoundTemplate(self)


class TemplateResolver:
    """Picks the template file for a control and renders it."""

    def __init__(self, template_factory: TemplateFactory, default_template: Optional[Union[str, Path]] = None):
        self._factory = template_factory
        self._default_template = str(default_template or Path(TEMPLATE_DIR) / DEFAULT_TEMPLATE)
        self._template: Optional[BoundTemplate] = None

    @property
    def default_template(self) -> str:
        return self._default_template

    @property
    def is_bound(self) -> bool:
        return self._template is not None

    @property
    def bound_file(self) -> Optional[str]:
        return self._template.file if self._template is not None else None

    def resolve_template_file(self, override: Optional[str] = None) -> str:
        # Overrides were validated when they were set
        return override if override is not None else self._default_template

    def get_template(self, override: Optional[str] = None) -> BoundTemplate:
        """Return the control's template, binding it on first use."""
        if self._template is None:
            template = self._factory.create_template()
            template.set_file(self.resolve_template_file(override))
            self._template = template
            logger.debug(f"Bound slug template to {template.file}")

        elif self._template.file is None:
            self._template.set_file(self.resolve_template_file(override))

        return self._template

    def render_control(
        self,
        input_markup: str,
        current_value: Any,
        caption: Optional[str],
        settings: SettingsPayload,
        template_file: Optional[str] = None,
        form: Any = None,
    ) -> Markup:
        """Render the control markup.

        Args:
            input_markup: Rendered ``<input>`` element, inserted unescaped
            current_value: Current value of the control
            caption: Control caption (label text)
            settings: Client-side settings payload
            template_file: Template to bind when the resolver is still unbound
            form: Parent form, exposed to the template as ``_form``

        Returns:
            Rendered HTML
        """
        template = self.get_template(template_file)
        html = template.render(
            input=Markup(input_markup),
            value=current_value,
            caption=caption,
            _form=form,
            settings=settings.to_dict(),
        )
        return Markup(html)
