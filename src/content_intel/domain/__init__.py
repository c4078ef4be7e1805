"""
Domain layer: entities shared by every engine.
"""

from __future__ import annotations
