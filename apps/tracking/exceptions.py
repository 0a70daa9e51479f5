class TrackingError(Exception):
    """Base class for failures in the click/conversion pipeline."""


class LinkNotFound(TrackingError):
    """
    No link matches, or its offer is inactive. The two cases are deliberately
    indistinguishable to callers.
    """


class StorageError(TrackingError):
    """Writing a click or conversion record failed."""
