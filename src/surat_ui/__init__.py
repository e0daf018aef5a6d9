"""
Letter numbering UI: a Reflex application for company correspondence.

Users log in, browse and filter numbered letters, create letters whose
reference numbers are assigned by the REST API, edit or delete them, and
view summary reports.

Subpackages:
- components: Reusable Reflex UI components
- models: Data models, pagination and API envelopes
- services: Data access layer (demo and REST implementations)
- data: Demo fixtures
- lib: Logging, caching, HTTP client and path helpers
- utils: Reference number and date formatting

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
