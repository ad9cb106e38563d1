"""Service layer: running assistant packages against documents.

INVARIANT: Service methods return ServiceResult; a failing rule becomes a
warning on the result, never an exception.
"""
