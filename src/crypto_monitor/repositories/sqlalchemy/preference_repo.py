"""SQLAlchemy implementation of PreferenceRepository."""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from crypto_monitor.repositories.sqlalchemy.orm_models import PreferenceORM


class SqlAlchemyPreferenceRepository:
    """SQLAlchemy-backed namespaced key-value storage."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, namespace: str, key: str) -> Optional[str]:
        """Get the stored value, or None if the key was never written."""
        orm_pref = self._find(namespace, key)
        return orm_pref.value if orm_pref else None

    def put_many(self, namespace: str, values: dict[str, str]) -> None:
        """Write several keys in one commit, overwriting existing values."""
        now = datetime.utcnow()
        for key, value in values.items():
            orm_pref = self._find(namespace, key)
            if orm_pref:
                orm_pref.value = value
                orm_pref.updated_at = now
            else:
                self._db.add(
                    PreferenceORM(namespace=namespace, key=key, value=value, updated_at=now)
                )
        self._db.commit()

    def _find(self, namespace: str, key: str) -> Optional[PreferenceORM]:
        return (
            self._db.query(PreferenceORM)
            .filter(
                PreferenceORM.namespace == namespace,
                PreferenceORM.key == key,
            )
            .first()
        )
