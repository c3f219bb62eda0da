"""PostgreSQL Infrastructure."""

from geodiscovery.infrastructure.persistence_postgres.location_reader_sqla import (
    SqlaLocationReader,
)
from geodiscovery.infrastructure.persistence_postgres.location_writer_sqla import (
    SqlaLocationWriter,
)
from geodiscovery.infrastructure.persistence_postgres.models import (
    Base,
    ProductModel,
    UserModel,
)

__all__ = ["Base", "ProductModel", "SqlaLocationReader", "SqlaLocationWriter", "UserModel"]
