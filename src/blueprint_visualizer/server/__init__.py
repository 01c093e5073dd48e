"""FastAPI server adapter for blueprint-visualizer.

Design intent:
- Keep translation logic in `blueprint_visualizer.diagram.*`
- Keep server-specific concerns (routing, CORS, status codes) here
"""

from __future__ import annotations

__all__ = ["create_app"]

from blueprint_visualizer.server.app import create_app
