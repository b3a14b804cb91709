"""Infrastructure layer — loader directory layout and the aggregate store."""
