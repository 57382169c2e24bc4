# karyoviz/errors.py

class KaryotypeError(Exception):
    """Base class for karyotype rendering errors."""

class InvalidDatasetError(KaryotypeError, ValueError):
    """The dataset handed to the view cannot be drawn."""

class UnknownModeError(KaryotypeError, ValueError):
    """A visualization mode other than 'all', 'nrph' or 'giesma' was requested."""
