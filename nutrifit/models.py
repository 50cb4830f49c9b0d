"""SQLAlchemy models for the three card tables."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from typing import Optional


class Base(DeclarativeBase):
    pass


class _CardColumns:
    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(200))
    day: Mapped[str] = mapped_column(String(10))
    time: Mapped[str] = mapped_column(String(10))


class NutriCard(_CardColumns, Base):
    __tablename__ = "nutri-card"
    carbs: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    protein: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    fat: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    base: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    main: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    side: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    extras: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class FitCard(_CardColumns, Base):
    __tablename__ = "fit-card"
    exercise_type: Mapped[str] = mapped_column("exerciseType", String(50))
    duration: Mapped[int] = mapped_column(Integer)
    intensity: Mapped[str] = mapped_column(String(20))
    muscle_groups: Mapped[Optional[str]] = mapped_column("muscleGroups", Text, nullable=True)
    equipment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class RecoveryCard(_CardColumns, Base):
    __tablename__ = "recovery-card"
    exercise_type: Mapped[str] = mapped_column("exerciseType", String(50))
    duration: Mapped[int] = mapped_column(Integer)
    intensity: Mapped[str] = mapped_column(String(20))
    body_part: Mapped[Optional[str]] = mapped_column("bodyPart", String(200), nullable=True)
    precautions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    equipment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    instructions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
