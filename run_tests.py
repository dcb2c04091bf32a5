#!/usr/bin/env python3
"""
Main test runner for the loxexpr test suite.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_test() -> bool:
    """Run a fixture expression through the whole pipeline."""
    from loxexpr.session import evaluate_string

    result = evaluate_string("(1 + 2) * (4 - 3)")
    if not result.ok or result.display() != "3":
        print(f"❌ Pipeline smoke test failed: {result}")
        return False

    print("✅ Pipeline smoke test passed")
    return True


def run_all_tests() -> bool:
    """Run all loxexpr tests."""

    print("🚀 loxexpr Test Suite")
    print("=" * 60)

    try:
        import loxexpr  # noqa: F401
        print("✅ All modules imported successfully")
    except ImportError as e:
        print(f"❌ Failed to import loxexpr: {e}")
        return False

    if not run_smoke_test():
        return False
    print()

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print("=" * 60)
    print(f"Tests run: {result.testsRun}")
    print(f"Failures: {len(result.failures)}")
    print(f"Errors: {len(result.errors)}")

    return result.wasSuccessful()


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)
