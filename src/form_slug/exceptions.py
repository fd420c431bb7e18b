"""Exceptions raised by the slug form control."""


class FormSlugError(Exception):
    """Base exception for form_slug errors."""
    pass


class TemplateFileNotFoundError(FormSlugError, FileNotFoundError):
    """Template override could not be resolved to an existing file."""
    pass


class AlreadyRegisteredError(FormSlugError):
    """Control factory registered more than once."""
    pass
