"""SQLAlchemy declarative base for school_identity models.

Uses the same metadata as the school Base to allow cross-module foreign keys.
"""

from school.infrastructure.persistence.sqlalchemy.models.base import Base

# Profiles reference users.id, so both must live in one metadata
IdentityBase = Base
