"""Domain layer — tokens, entries, loader settings, and errors.

Pure parsing and rendering plus single-file load/write. Depends only on
the standard library; directory-level work lives in infrastructure.
"""
