"""Document store and filesystem collaborators."""

from .document_store import DocumentStore, MongoDocumentStore
from .artifact_writer import ArtifactWriter

__all__ = ["DocumentStore", "MongoDocumentStore", "ArtifactWriter"]
