"""Object Lab -- record transforms, aggregation, course registries and gradebooks."""

from objlab.config import VERSION

__version__ = VERSION
