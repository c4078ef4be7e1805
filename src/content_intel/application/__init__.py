"""
Application layer: search pipeline and content intelligence engines.
"""

from __future__ import annotations
