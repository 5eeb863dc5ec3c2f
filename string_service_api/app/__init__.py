"""
Application package initializer.

The service is split into four layers, each depending only on the
one below it:

* ``services`` – the string operations themselves;
* ``schemas`` – request and response bodies;
* ``api.endpoints`` – adapters turning each service method into a
  uniform ``(context, request) -> (response, error)`` callable;
* ``api.transport`` – the decode → invoke → encode pipeline binding an
  endpoint to an HTTP route.

``core`` holds configuration and logging shared by all layers.
"""

from .main import app  # noqa: F401
