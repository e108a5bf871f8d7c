"""
Package marker for the NeuraLink AI marketing-site backend.
It groups the API layer and shared helpers under a stable import path.
Most functionality lives in the `api` and `common` subpackages; this file intentionally stays lightweight.
"""
