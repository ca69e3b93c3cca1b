"""Gazetteer adapters - Implementations of GazetteerPort.

Available implementations:
- CSVGazetteer: Place names read from a cities CSV file
"""

from .csv_gazetteer import CSVGazetteer

__all__ = ["CSVGazetteer"]
