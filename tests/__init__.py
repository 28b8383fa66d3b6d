"""
Test suite for the Under-Seat Bag Fit Checker.

Run all tests: pytest
Run unit tests only: pytest tests/unit/
Run specific file: pytest tests/unit/test_fit_evaluator.py -v
"""
