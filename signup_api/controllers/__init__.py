"""
Presentation layer.

Controllers are framework-free: they receive an HttpRequest, call a use case and
return an HttpResponse. FastAPI routers adapt real requests onto them.
"""

from .protocols import EmailValidator, HttpRequest, HttpResponse, Validator
from .signup_controller import REQUIRED_FIELDS, SignUpController

__all__ = [
    "EmailValidator",
    "HttpRequest",
    "HttpResponse",
    "REQUIRED_FIELDS",
    "SignUpController",
    "Validator",
]
