from __future__ import annotations


class ConfirmServiceError(Exception):
    """Base class for failures raised while serving a request or starting up."""


class StoreError(ConfirmServiceError):
    pass


class TemplateLoadError(ConfirmServiceError):
    pass
