from pathoreport.models.stored_document import StoredDocument

__all__ = [
    "StoredDocument",
]
