"""Base controller classes."""

from hcpsizer.controllers.base.base_controller import BaseController

__all__ = ["BaseController"]
