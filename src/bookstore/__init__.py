"""In-memory book catalogue service.

The package is laid out the same way as the rest of the API template:
entities own their repository, core holds the business services and
result models, api exposes them over HTTP and runtime carries the
configuration.
"""

__version__ = "0.1.0"
