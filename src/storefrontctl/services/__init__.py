"""Service layer: one class per CLI command family, all returning ServiceResult."""
