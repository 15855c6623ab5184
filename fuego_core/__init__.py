# =============================================================================
# fuego_core/__init__.py
# Fuego Prime - reservation workflow and manager dashboard
# =============================================================================

__version__ = "1.0.0"
