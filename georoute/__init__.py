"""Top-level package for georoute.

georoute finds shortest routes over an undirected graph whose vertices
are latitude/longitude points and whose edge weights are great-circle
distances in miles. The graph engine lives in :mod:`georoute.graph`;
the remaining subpackages wire it to files, place-name lookup, map
rendering and the command line.
"""

__version__ = "0.1.0"
