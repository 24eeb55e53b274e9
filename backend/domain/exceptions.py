class RecommenderError(Exception):
    """Base class for errors raised by the recommendation core."""


class ConfigurationMissingError(RecommenderError):
    """The movie catalog credential is not configured."""


class CatalogError(RecommenderError):
    """A catalog request failed or returned a payload we could not read."""


class CacheError(RecommenderError):
    """The backing key-value store could not be read or written."""


class StorageFullError(CacheError):
    """The backing key-value store refused a write because it is full."""
