"""SQLAlchemy implementation of RatingRepository."""
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.orm import Session

from barber_ratings.domain.entities.rating import (
    Rating as RatingEntity,
    RatingChanges,
    RatingData,
    RatingKey,
    ServiceDetails,
)
from barber_ratings.domain.exceptions import RatingStoreError
from barber_ratings.domain.repositories.rating_repository import RatingRepository
from barber_ratings.domain.value_objects.rating_query import RatingFilter, SortSpec
from barber_ratings.domain.value_objects.rating_statistics import RatingAggregate
from barber_ratings.infrastructure.persistence import models
from barber_ratings.infrastructure.persistence.errors import translate_store_errors

# Columns a repeated submission overwrites; created_at is kept
_UPSERT_COLUMNS = (
    "score",
    "review_text",
    "service_name",
    "service_date",
    "service_price",
    "updated_at",
)


def _to_entity(row: models.Rating) -> RatingEntity:
    """Map ORM model to domain entity."""
    details = ServiceDetails(
        service_name=row.service_name,
        service_date=row.service_date,
        service_price=float(row.service_price) if row.service_price is not None else None,
    )
    return RatingEntity(
        id=row.id,
        rater_id=row.rater_id,
        subject_id=row.subject_id,
        score=row.score,
        review_text=row.review_text,
        service_details=None if details.is_empty() else details,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _detail_columns(details: Optional[ServiceDetails]) -> dict:
    details = details or ServiceDetails()
    return {
        "service_name": details.service_name,
        "service_date": details.service_date,
        "service_price": details.service_price,
    }


class SQLAlchemyRatingRepository(RatingRepository):
    """Rating repository using SQLAlchemy.

    Submissions use the dialect's native upsert so that concurrent writers
    for one key never produce two rows.
    """

    def __init__(self, session: Session):
        self.session = session

    def _query(self, rating_filter: RatingFilter):
        query = self.session.query(models.Rating)
        if rating_filter.subject_id is not None:
            query = query.filter(models.Rating.subject_id == rating_filter.subject_id)
        if rating_filter.rater_id is not None:
            query = query.filter(models.Rating.rater_id == rating_filter.rater_id)
        if rating_filter.min_score is not None:
            query = query.filter(models.Rating.score >= rating_filter.min_score)
        if rating_filter.max_score is not None:
            query = query.filter(models.Rating.score <= rating_filter.max_score)
        return query

    def _get_row(self, key: RatingKey) -> Optional[models.Rating]:
        return (
            self.session.query(models.Rating)
            .filter(
                models.Rating.rater_id == key.rater_id,
                models.Rating.subject_id == key.subject_id,
            )
            .first()
        )

    def _upsert_statement(self, values: dict):
        dialect = self.session.get_bind().dialect.name
        if dialect == "mysql":
            stmt = mysql.insert(models.Rating).values(**values)
            return stmt.on_duplicate_key_update(
                {column: stmt.inserted[column] for column in _UPSERT_COLUMNS}
            )
        if dialect in ("postgresql", "sqlite"):
            insert = postgresql.insert if dialect == "postgresql" else sqlite.insert
            stmt = insert(models.Rating).values(**values)
            return stmt.on_conflict_do_update(
                index_elements=["rater_id", "subject_id"],
                set_={column: stmt.excluded[column] for column in _UPSERT_COLUMNS},
            )
        raise RatingStoreError(f"Upsert is not supported on the {dialect} dialect")

    async def upsert_by_key(self, key: RatingKey, data: RatingData) -> RatingEntity:
        now = datetime.now(timezone.utc)
        values = {
            "rater_id": key.rater_id,
            "subject_id": key.subject_id,
            "score": data.score,
            "review_text": data.review_text,
            "created_at": now,
            "updated_at": now,
            **_detail_columns(data.service_details),
        }
        with translate_store_errors(self.session, "upsert rating"):
            self.session.execute(self._upsert_statement(values))
            self.session.commit()
            row = self._get_row(key)
            # The upsert bypasses the identity map; reload any cached instance
            self.session.refresh(row)
        return _to_entity(row)

    async def get_by_key(self, key: RatingKey) -> Optional[RatingEntity]:
        with translate_store_errors(self.session, "get rating"):
            row = self._get_row(key)
        return _to_entity(row) if row else None

    async def find(
        self,
        rating_filter: RatingFilter,
        sort: SortSpec,
        skip: int = 0,
        limit: int = 10,
    ) -> List[RatingEntity]:
        column = getattr(models.Rating, sort.field)
        ordering = (
            (column.desc(), models.Rating.id.desc())
            if sort.descending
            else (column.asc(), models.Rating.id.asc())
        )
        with translate_store_errors(self.session, "list ratings"):
            rows = (
                self._query(rating_filter)
                .order_by(*ordering)
                .offset(skip)
                .limit(limit)
                .all()
            )
        return [_to_entity(r) for r in rows]

    async def count(self, rating_filter: RatingFilter) -> int:
        with translate_store_errors(self.session, "count ratings"):
            return self._query(rating_filter).count()

    async def aggregate(self, rating_filter: RatingFilter) -> RatingAggregate:
        with translate_store_errors(self.session, "aggregate ratings"):
            average, count = (
                self._query(rating_filter)
                .with_entities(func.avg(models.Rating.score), func.count(models.Rating.id))
                .one()
            )
            buckets = (
                self._query(rating_filter)
                .with_entities(models.Rating.score, func.count(models.Rating.id))
                .group_by(models.Rating.score)
                .all()
            )
        scores = [score for score, n in buckets for _ in range(n)]
        return RatingAggregate(
            average=float(average) if average is not None else None,
            count=count,
            scores=scores,
        )

    async def update_by_key(self, key: RatingKey, changes: RatingChanges) -> Optional[RatingEntity]:
        with translate_store_errors(self.session, "update rating"):
            row = self._get_row(key)
            if row is None:
                return None
            if "score" in changes.fields:
                row.score = changes.score
            if "review_text" in changes.fields:
                row.review_text = changes.review_text
            if "service_details" in changes.fields:
                for column, value in _detail_columns(changes.service_details).items():
                    setattr(row, column, value)
            row.updated_at = datetime.now(timezone.utc)
            self.session.commit()
            self.session.refresh(row)
        return _to_entity(row)

    async def delete_by_key(self, key: RatingKey) -> Optional[RatingEntity]:
        with translate_store_errors(self.session, "delete rating"):
            row = self._get_row(key)
            if row is None:
                return None
            deleted = _to_entity(row)
            self.session.delete(row)
            self.session.commit()
        return deleted
