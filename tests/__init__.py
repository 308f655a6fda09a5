"""
Unit Tests for Packed Chess

This package contains unit tests for the piece codec, the board value, the
text transcoder and the numpy/python-chess bridges.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_transcoder.py

    # Run with coverage
    pytest tests/ --cov=packed_chess --cov-report=html

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
