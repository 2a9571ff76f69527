"""
Unit Tests for minimax_chess

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_search.py

    # Run with coverage
    pytest tests/ --cov=minimax_chess --cov-report=html

    # Run specific test
    pytest tests/test_search.py::TestFindBestMove::test_captures_hanging_queen

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
