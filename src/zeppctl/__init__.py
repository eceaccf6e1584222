"""zeppctl — install and drive a Zeppelin notebook sandbox for Solr."""

from __future__ import annotations

__version__ = "0.1.0"
