"""Postgres-backed dealer repository adapter."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.ports.dealer_repository import DealerRepository
from app.domain.entities.dealer import Dealer
from app.domain.specifications.specification import Specification
from app.domain.value_objects.page import Page
from app.domain.value_objects.page_request import PageRequest, SortOrder
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

from .models import DealerModel
from .sqlalchemy_specification import apply_specification


class PostgresDealerRepository(DealerRepository):
    """Postgres implementation of dealer repository."""

    def _model_to_entity(self, model: DealerModel) -> Dealer:
        """
        Convert DealerModel to Dealer entity.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Dealer entity
        """
        return Dealer(id=model.id, name=model.name)

    def _order_by(self, sort: tuple[SortOrder, ...]) -> list:
        """
        Build ORDER BY columns, always ending with id as tie-breaker.

        Args:
            sort: Requested sort orders

        Returns:
            List of order-by clauses
        """
        clauses = []
        for order in sort:
            column = getattr(DealerModel, order.property)
            # Nulls sort as the largest value on every dialect
            if order.descending:
                clauses.append(column.desc().nulls_first())
            else:
                clauses.append(column.asc().nulls_last())
        if not any(order.property == "id" for order in sort):
            clauses.append(DealerModel.id.asc())
        return clauses

    def _select(self, specification: Specification):
        return apply_specification(select(DealerModel), specification, DealerModel)

    async def save(self, dealer: Dealer) -> Dealer:
        """
        Save a dealer (insert without id, upsert by id otherwise).

        Args:
            dealer: Dealer to save

        Returns:
            Stored dealer with its id
        """
        db: Session = get_db_session()
        try:
            model = db.merge(DealerModel(id=dealer.id, name=dealer.name))
            db.commit()
            return self._model_to_entity(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while saving dealer {dealer.id}: {str(e)}")
            raise
        finally:
            db.close()

    async def find_by_id(self, dealer_id: int) -> Optional[Dealer]:
        db: Session = get_db_session()
        try:
            model = db.get(DealerModel, dealer_id)
            if model is None:
                return None
            return self._model_to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting dealer {dealer_id}: {str(e)}")
            raise
        finally:
            db.close()

    async def exists_by_id(self, dealer_id: int) -> bool:
        db: Session = get_db_session()
        try:
            statement = select(DealerModel.id).where(DealerModel.id == dealer_id)
            return db.scalar(statement) is not None
        except SQLAlchemyError as e:
            logger.error(f"Database error while checking dealer {dealer_id}: {str(e)}")
            raise
        finally:
            db.close()

    async def delete_by_id(self, dealer_id: int) -> None:
        db: Session = get_db_session()
        try:
            model = db.get(DealerModel, dealer_id)
            if model is not None:
                db.delete(model)
                db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting dealer {dealer_id}: {str(e)}")
            raise
        finally:
            db.close()

    async def find_all(
        self, specification: Specification, sort: tuple[SortOrder, ...] = ()
    ) -> list[Dealer]:
        db: Session = get_db_session()
        try:
            statement = self._select(specification).order_by(*self._order_by(sort))
            models = db.scalars(statement).all()
            return [self._model_to_entity(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing dealers: {str(e)}")
            raise
        finally:
            db.close()

    async def find_page(self, specification: Specification, page_request: PageRequest) -> Page[Dealer]:
        """
        Get one page of dealers; the total uses the same specification.

        Args:
            specification: Query specification
            page_request: Page index, size and sort

        Returns:
            Page of dealers
        """
        db: Session = get_db_session()
        try:
            total = self._count(db, specification)
            statement = (
                self._select(specification)
                .order_by(*self._order_by(page_request.sort))
                .offset(page_request.offset)
                .limit(page_request.size)
            )
            models = db.scalars(statement).all()
            return Page(
                content=[self._model_to_entity(model) for model in models],
                number=page_request.page,
                size=page_request.size,
                total_elements=total,
            )
        except SQLAlchemyError as e:
            logger.error(f"Database error while paging dealers: {str(e)}")
            raise
        finally:
            db.close()

    async def count(self, specification: Specification) -> int:
        db: Session = get_db_session()
        try:
            return self._count(db, specification)
        except SQLAlchemyError as e:
            logger.error(f"Database error while counting dealers: {str(e)}")
            raise
        finally:
            db.close()

    def _count(self, db: Session, specification: Specification) -> int:
        subquery = self._select(specification).subquery()
        return db.scalar(select(func.count()).select_from(subquery)) or 0
