"""REST API for classroom layout generation."""

from classrooms.web.app import app, create_app

__all__ = ["app", "create_app"]
