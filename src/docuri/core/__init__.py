"""
docuri Core Module.

Building blocks shared by every consumer of document URIs:
    - Uri: immutable URI value with normalization and path mapping
    - errors: the docuri exception hierarchy
    - platform: Windows/POSIX convention selection
"""
