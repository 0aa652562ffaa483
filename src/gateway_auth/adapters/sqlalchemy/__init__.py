"""SQLAlchemy adapter – session factory, nonce table mixin and nonce store."""
from gateway_auth.adapters.sqlalchemy.models import NonceRecordMixin
from gateway_auth.adapters.sqlalchemy.nonce_store import SqlAlchemyNonceStore
from gateway_auth.adapters.sqlalchemy.session import SqlAlchemySessionFactory

__all__ = ["NonceRecordMixin", "SqlAlchemyNonceStore", "SqlAlchemySessionFactory"]
