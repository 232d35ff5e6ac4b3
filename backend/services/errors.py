class StoreError(Exception):
    """A query against the vehicle store failed."""


class TemplateError(Exception):
    """A page template could not be read."""


class TemplateNotFound(TemplateError):
    pass


class NotFoundError(Exception):
    """The requested key matched no records."""
