"""Service layer: graph operations behind the ServiceResult contract."""
