"""SQLAlchemy models for barbers, users and their ratings."""
from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from barber_ratings.constants import MAX_SCORE, MIN_SCORE
from barber_ratings.infrastructure.persistence.db import Base

# SQLite only autoincrements INTEGER PRIMARY KEY columns
IdType = BigInteger().with_variant(Integer, "sqlite")


class Barber(Base):
    __tablename__ = "barbers"

    id = Column(String(128), primary_key=True)
    name = Column(String(255))
    created_at = Column(DateTime(timezone=True))

    ratings = relationship("Rating", back_populates="barber")


class User(Base):
    __tablename__ = "users"

    id = Column(String(128), primary_key=True)
    phone_number = Column(String(32))
    name = Column(String(255))
    created_at = Column(DateTime(timezone=True))

    ratings = relationship("Rating", back_populates="rater")


class Rating(Base):
    __tablename__ = "ratings"
    __table_args__ = (
        UniqueConstraint("rater_id", "subject_id", name="uq_ratings_rater_subject"),
        CheckConstraint(
            f"score >= {MIN_SCORE} AND score <= {MAX_SCORE}", name="ck_ratings_score_range"
        ),
        Index("ix_ratings_subject_created", "subject_id", "created_at"),
        Index("ix_ratings_score", "score"),
    )

    id = Column(IdType, primary_key=True, autoincrement=True)
    rater_id = Column(String(128), ForeignKey("users.id"), nullable=False)
    subject_id = Column(String(128), ForeignKey("barbers.id"), nullable=False)
    score = Column(Integer, nullable=False)
    # Unbounded; review length is checked by validation
    review_text = Column(Text)
    service_name = Column(Text)
    service_date = Column(Date)
    service_price = Column(Float)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    rater = relationship("User", back_populates="ratings")
    barber = relationship("Barber", back_populates="ratings")
