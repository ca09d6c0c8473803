"""Exceptions raised while building surface patches."""


class SurfPatchError(Exception):
    """Base class for all errors raised by surfpatch."""


class ConfigurationError(SurfPatchError, ValueError):
    """
    The run cannot start with the given configuration.

    Raised when the seed residue or atom is not present in the structure,
    when the seed residue has no representative atom for the orientation
    filter, or when a parameter value is unusable.
    """


class DegenerateGeometryError(SurfPatchError, ValueError):
    """An angle was requested between vectors where one has zero length."""


class StructureReadError(SurfPatchError):
    """The structure file could not be read or contained no atoms."""
