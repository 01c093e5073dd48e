"""Blueprint Visualizer.

Turns blueprint workflow documents into Mermaid sequence diagrams that show
what executing each action would look like:
- blueprint YAML loading and validation
- phase -> diagram event mapping, one registry entry per blueprint function
- a CLI and a small REST API
"""

__version__ = "0.1.0"

from blueprint_visualizer.config import VisualizerSettings

__all__ = ["__version__", "VisualizerSettings"]
