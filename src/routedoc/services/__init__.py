"""Service layer — orchestrates domain operations and returns ServiceResult."""
