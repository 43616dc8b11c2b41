"""Request building and response handling."""
from .request_builder import RequestBuilder
from .response_handler import APIResponse, ResponseHandler

__all__ = [
    'RequestBuilder',
    'APIResponse',
    'ResponseHandler',
]
