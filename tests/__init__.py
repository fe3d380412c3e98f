"""Test suite for logfields.

Test Structure:
- unit/: Unit tests for individual components
  - json/: Streaming JSON writer
  - arguments/: Structured argument types
  - decoders/: Field-mapping decoders
  - status/: Status reporters
  - providers/: Arguments provider
  - logging/: JSON log formatter
  - config/: Config models and loaders
  - utils/: JSON and logging setup helpers
  - cli/: Command-line interface
- conftest.py: Shared fixtures and test configuration
"""
