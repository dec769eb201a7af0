"""thuis-seo CLI entry point for module execution.

This allows running the engine as a module:
    python -m thuis_seo --help
    python -m thuis_seo keywords "Professioneel 3D-printen in Gent" --table
"""

from .cli import app

if __name__ == "__main__":
    app()
