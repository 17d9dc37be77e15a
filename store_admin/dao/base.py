"""
Base Data Access Object (DAO) class.

WHY: The DAO pattern separates database operations from business logic,
making the services testable and keeping SQL out of them.

Error contract:
- get_by_id returns None when nothing matches (including ids outside the INTEGER range)
- update / delete raise the DAO's typed not_found_error when the row is absent
- create / update raise ResourceAlreadyExistsError on a unique-constraint violation
- every other database error propagates unchanged
"""

from typing import Generic, TypeVar, Type, Optional, List, Any, Dict, Sequence
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.exceptions import ResourceNotFoundError, ResourceAlreadyExistsError
from store_admin.core.validation import fits_int_column
from store_admin.models.base import Base

# Type variable for model class
ModelType = TypeVar("ModelType", bound=Base)

UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """
    Tell a unique-constraint violation apart from other integrity errors.

    PostgreSQL drivers expose the SQLSTATE code; SQLite only has the message.
    """
    orig = exc.orig
    for attr in ("sqlstate", "pgcode"):
        if getattr(orig, attr, None) == UNIQUE_VIOLATION_SQLSTATE:
            return True
    message = str(orig).lower()
    return "unique constraint" in message or "duplicate key" in message


class BaseDAO(Generic[ModelType]):
    """
    Base Data Access Object providing CRUD operations for all models.

    Type Parameters:
        ModelType: The SQLAlchemy model class this DAO manages
    """

    not_found_error: Type[ResourceNotFoundError] = ResourceNotFoundError

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize DAO with model class and database session.

        Args:
            model: The SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    async def _flush(self) -> None:
        """
        Flush pending changes, translating unique violations.

        Raises:
            ResourceAlreadyExistsError: If a unique constraint is violated
            IntegrityError: For any other integrity failure
        """
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            if is_unique_violation(exc):
                raise ResourceAlreadyExistsError(
                    message=f"{self.model.__name__} violates a unique constraint",
                    resource_type=self.model.__name__,
                ) from exc
            raise

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with database-generated fields populated

        Raises:
            ResourceAlreadyExistsError: If unique constraints are violated
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self._flush()
        await self.session.refresh(instance)
        return instance

    async def get_by_id(self, id: int) -> Optional[ModelType]:
        """
        Retrieve a single record by primary key.

        Args:
            id: Primary key value

        Returns:
            The model instance if found, None otherwise
        """
        if not fits_int_column(id):
            return None
        result = await self.session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_or_raise(self, id: int) -> ModelType:
        """
        Retrieve a record by primary key or raise the DAO's not-found error.

        Raises:
            ResourceNotFoundError: Typed per DAO (StoreNotFoundError, ...)
        """
        instance = await self.get_by_id(id)
        if instance is None:
            raise self.not_found_error(resource_id=id)
        return instance

    def _filtered(self, query, filters: Dict[str, Any]):
        """Apply field == value filters, skipping names the model lacks."""
        for field, value in filters.items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)
        return query

    async def get_all(
        self,
        order_by: Optional[Sequence[Any]] = None,
        **filters: Any,
    ) -> List[ModelType]:
        """
        Retrieve multiple records with optional ordering and filtering.

        Args:
            order_by: Column expressions to order by; defaults to primary key
            **filters: Field name to value filters (e.g., store_id=1)

        Returns:
            List of model instances matching the filters
        """
        query = self._filtered(select(self.model), filters)
        query = query.order_by(*(order_by or [self.model.id]))

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def update(self, id: int, **kwargs: Any) -> ModelType:
        """
        Update an existing record.

        Values are assigned on the loaded instance rather than through a bulk
        UPDATE statement, so model validators run on every field.

        Args:
            id: Primary key of the record to update
            **kwargs: Fields to update

        Returns:
            Updated model instance

        Raises:
            ResourceNotFoundError: If no record has this id
            ResourceAlreadyExistsError: If a unique constraint is violated
        """
        instance = await self.get_or_raise(id)
        for field, value in kwargs.items():
            setattr(instance, field, value)
        await self._flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, id: int) -> ModelType:
        """
        Delete a record by primary key.

        Returns:
            The deleted instance (attributes still readable)

        Raises:
            ResourceNotFoundError: If no record has this id
        """
        instance = await self.get_or_raise(id)
        await self.session.delete(instance)
        await self.session.flush()
        return instance

    async def count(self, **filters: Any) -> int:
        """Count records matching filters."""
        query = self._filtered(select(func.count()).select_from(self.model), filters)
        result = await self.session.execute(query)
        return result.scalar_one()

    async def exists(self, **filters: Any) -> bool:
        """
        Check if any records matching filters exist.

        Returns:
            True if at least one matching record exists
        """
        query = self._filtered(select(self.model.id), filters)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none() is not None
