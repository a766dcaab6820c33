"""
API Dependency Injection Module

Provides the request-scoped lookups shared by the route handlers.
"""

from fastapi import Request

from kvgateway.db.backends import Backends

JSON_MEDIA_TYPE = "application/json"


def get_backends(request: Request) -> Backends:
    """
    Get the backend registry owned by the application

    Returns:
        Backends: Registry attached to `app.state` by `create_app`
    """
    return request.app.state.backends


def is_json_request(request: Request) -> bool:
    """Whether the request declares a JSON body (media type parameters are ignored)"""
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower() == JSON_MEDIA_TYPE
