"""Slug form control

Text input generating its value from other form fields on the client side.
"""

from .config import SlugSettings, load_settings
from .controls import SlugConfig, SlugControl
from .exceptions import AlreadyRegisteredError, FormSlugError, TemplateFileNotFoundError
from .fields import FieldBindingRegistry, FieldHandle
from .forms import Container, Form, TextInput
from .payload import SettingsPayload
from .registry import ControlRegistry, RegistrationGuard, default_guard, default_registry
from .templating import TemplateFactory, TemplateResolver, locate_template_file

__version__ = "1.0.0"

__all__ = [
    'SlugControl', 'SlugConfig', 'SettingsPayload',
    'FieldBindingRegistry', 'FieldHandle',
    'TemplateFactory', 'TemplateResolver', 'locate_template_file',
    'RegistrationGuard', 'ControlRegistry', 'default_guard', 'default_registry',
    'Container', 'Form', 'TextInput',
    'SlugSettings', 'load_settings',
    'FormSlugError', 'TemplateFileNotFoundError', 'AlreadyRegisteredError',
]
