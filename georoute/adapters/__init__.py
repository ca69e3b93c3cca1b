"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Graph storage (``.graph`` files)
- Place-name sources (cities CSV, Nominatim)
- Rendering engines (Folium)
- Caching systems (in-memory, null)
"""
