"""
HTTP Error Messages

Fixed messages returned by the request handlers.
"""

ERR_KEY_EMPTY = "key can not be empty"
ERR_INVALID_INPUT = "invalid json input"
ERR_INVALID_CONTENT_TYPE = "invalid content-type"
ERR_METHOD_NOT_ALLOWED = "method not allowed"
ERR_FETCH = "mongodb: fetch error"
ERR_MARSHAL = "json: marshal"
