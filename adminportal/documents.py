"""
documents.py
------------
Document store used for administrator records. The login surface only needs
two calls: list a whole collection in store order, and patch one record by id.
`SqlDocumentStore` backs collections with Flask-SQLAlchemy models;
`MemoryDocumentStore` keeps plain dicts for tests and local tooling.
"""

import copy

from sqlalchemy.exc import SQLAlchemyError

from adminportal.config import ADMIN_COLLECTION
from adminportal.errors import StoreError
from adminportal.extensions import db
from adminportal.models import AdminLogin

# Collection name -> model
COLLECTIONS = {
    ADMIN_COLLECTION: AdminLogin,
}


class SqlDocumentStore:

    def __init__(self, session=None, collections=None):
        self._session = session
        self.collections = collections or COLLECTIONS

    @property
    def session(self):
        return self._session or db.session

    def _model(self, collection):
        model = self.collections.get(collection)
        if model is None:
            raise StoreError(f"Unknown collection '{collection}'")
        return model

    def list_all(self, collection):
        model = self._model(collection)
        try:
            rows = self.session.query(model).order_by(model.id).all()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to list '{collection}': {e}") from e
        return [row.to_document() for row in rows]

    def update_by_id(self, collection, doc_id, fields):
        model = self._model(collection)
        try:
            row = self.session.get(model, doc_id)
            if row is None:
                raise StoreError(f"No document '{doc_id}' in '{collection}'")
            for key, value in fields.items():
                if key == 'id' or not hasattr(row, key):
                    raise StoreError(f"Field '{key}' cannot be updated")
                setattr(row, key, value)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError(f"Failed to update '{doc_id}': {e}") from e

    def add(self, collection, fields):
        """Insert a document and return its generated id (used by the CLI)."""
        model = self._model(collection)
        row = model(**fields)
        try:
            self.session.add(row)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError(f"Failed to add to '{collection}': {e}") from e
        return row.id


class MemoryDocumentStore:
    """Dict-backed store; keeps insertion order. `fail_on` makes calls raise."""

    def __init__(self, collections=None):
        self.collections = {name: [dict(d) for d in docs]
                            for name, docs in (collections or {}).items()}
        self.fail_on = set()
        self.updates = []

    def list_all(self, collection):
        if 'list_all' in self.fail_on:
            raise StoreError(f"Failed to list '{collection}'")
        return copy.deepcopy(self.collections.get(collection, []))

    def update_by_id(self, collection, doc_id, fields):
        self.updates.append((collection, doc_id, dict(fields)))
        if 'update_by_id' in self.fail_on:
            raise StoreError(f"Failed to update '{doc_id}'")
        for doc in self.collections.get(collection, []):
            if doc['id'] == doc_id:
                doc.update(fields)
                return
        raise StoreError(f"No document '{doc_id}' in '{collection}'")

    def add(self, collection, fields):
        docs = self.collections.setdefault(collection, [])
        doc = dict(fields)
        doc.setdefault('id', str(len(docs) + 1))
        docs.append(doc)
        return doc['id']
