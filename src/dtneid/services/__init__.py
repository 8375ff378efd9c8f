"""Service layer — endpoint operations returning ServiceResult."""
