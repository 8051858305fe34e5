"""
Todo API backend package.

Layers, outermost first: routers -> use_cases -> repositories -> stores.
The FastAPI app lives in ``todo_api.main`` (``app`` / ``create_app``).
"""

__version__ = "1.0.0"
