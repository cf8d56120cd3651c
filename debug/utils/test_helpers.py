"""
Shared test utilities and helpers for debug scripts.
"""
import json
import sys
from typing import Any


def print_header(title: str) -> None:
    """Print a formatted test section header."""
    print("\n" + "=" * 80)
    print(f"🧪 {title}")
    print("=" * 80)


def print_test(test_name: str) -> None:
    """Print a formatted test name."""
    print(f"\n🔍 {test_name}")
    print("-" * 60)


def print_success(message: str) -> None:
    """Print a success message."""
    print(f"   ✅ {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    print(f"   ❌ {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    print(f"   ℹ️  {message}")


def print_json(data: Any, title: str = "JSON Data") -> None:
    """Pretty print JSON data."""
    print(f"   📄 {title}:")
    json_str = json.dumps(data, indent=4, default=str)
    for line in json_str.split('\n'):
        print(f"      {line}")


def safe_call(func, *args, **kwargs) -> tuple[bool, Any]:
    """Safely call a function and return (success, result)."""
    try:
        result = func(*args, **kwargs)
        return True, result
    except Exception as e:
        return False, str(e)


def exit_with_summary(passed: int, failed: int) -> None:
    """Exit with a test summary."""
    total = passed + failed
    print(f"\n{'='*80}")
    print(f"📊 TEST SUMMARY")
    print(f"{'='*80}")
    print(f"   Total Tests: {total}")
    print(f"   ✅ Passed: {passed}")
    print(f"   ❌ Failed: {failed}")

    if failed == 0:
        print("   🎉 ALL TESTS PASSED!")
        sys.exit(0)
    else:
        print(f"   ⚠️  {failed} test(s) failed")
        sys.exit(1)
