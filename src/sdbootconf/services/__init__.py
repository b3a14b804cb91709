"""Service layer — operations over a loader directory returning ServiceResult."""
