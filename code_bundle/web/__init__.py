"""Web API for the resolver."""

from code_bundle.web.app import create_app

__all__ = ["create_app"]
