"""HideField - GraphQL field visibility compiler for schema models.

Turns ``@graphql.show(...)`` / ``@graphql.hide(...)`` field attributes into
``/// @HideField(...)`` comments for GraphQL DTO generation.
"""

from hidefield.core.constants import HIDEFIELD_VERSION as __version__

__all__ = ["__version__"]
