"""
Escape Room Test Suite

Test structure:
- unit/: Test components in isolation
- integration/: Play whole scenarios through EscapeApp
- mocks/: Test rooms and handler items
"""
