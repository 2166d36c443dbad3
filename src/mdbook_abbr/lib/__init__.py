"""Core library: substitution engine, book traversal, preprocessor, errors."""
