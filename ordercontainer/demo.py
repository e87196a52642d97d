"""Walk-through of the container's operations and traversal orders."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Iterable, List, Optional, Sequence, TextIO

from ordercontainer.container import Container


def _joined(items: Iterable[Any]) -> str:
    return "".join(f"{item} " for item in items)


def _section(out: TextIO, title: str) -> None:
    print(f"\n\n========== {title} ==========", file=out)


def _show_traversal(out: TextIO, heading: str, items: Iterable[Any], note: str = "") -> None:
    print(heading, file=out)
    if note:
        print(note, file=out)
    print(f"   {_joined(items)}", file=out)


def _try_remove(out: TextIO, container: Container, element: Any) -> None:
    try:
        container.remove(element)
    except ValueError as error:
        print(f"    Caught expected error: {error}", file=out)


def run_demo(out: Optional[TextIO] = None) -> None:
    """Write the demonstration to ``out`` (standard output by default)."""
    out = out if out is not None else sys.stdout

    print("=== Container Demo ===", file=out)

    print("\n========== BASIC OPERATIONS ==========", file=out)
    numbers = Container()
    print("1. Initial state:", file=out)
    print(f"   Size: {len(numbers)}", file=out)
    print(f"   Is empty: {'Yes' if numbers.is_empty() else 'No'}", file=out)

    print("\n2. Adding elements: 10, 5, 20, 5, 15", file=out)
    for value in (10, 5, 20, 5, 15):
        numbers.add(value)
    print(f"   Size after adding: {len(numbers)}", file=out)
    print("   Container contents: ", end="", file=out)
    numbers.print(file=out)

    print("\n3. Removing element 5 (should remove all occurrences):", file=out)
    numbers.remove(5)
    print(f"   Size after removing 5: {len(numbers)}", file=out)
    print("   Container contents: ", end="", file=out)
    numbers.print(file=out)

    _section(out, "TEMPLATE FLEXIBILITY")
    print("\n4. Testing with strings:", file=out)
    words = Container(["Hello", "World", "Demo"])
    print(f"   String container size: {len(words)}", file=out)
    print("   String container contents: ", end="", file=out)
    words.print(file=out)

    print("\n5. Testing with characters:", file=out)
    letters = Container("ZAMBY")
    print(f"   Char container size: {len(letters)}", file=out)
    print("   Char container contents: ", end="", file=out)
    letters.print(file=out)

    _section(out, "STREAM OUTPUT OPERATOR")
    print("\n6. Testing string conversion:", file=out)
    print(f"   Int container:    {numbers}", file=out)
    print(f"   String container: {words}", file=out)
    print(f"   Char container:   {letters}", file=out)

    _section(out, "ITERATOR TYPES")
    print("\n7. Current container state:", file=out)
    print("   Elements: [10, 20, 15] (after removing 5s)", file=out)
    print("   Container contents: ", end="", file=out)
    numbers.print(file=out)

    traversals: List[tuple] = [
        ("\n8. AscendingOrder (smallest to largest):", numbers.ascending_order(), ""),
        ("\n9. DescendingOrder (largest to smallest):", numbers.descending_order(), ""),
        ("\n10. SideCrossOrder (alternating min/max):", numbers.side_cross_order(), ""),
        ("\n11. ReverseOrder (reverse insertion order):", numbers.reverse_order(), ""),
        ("\n12. Order (original insertion order):", numbers.order(), ""),
        (
            "\n13. MiddleOutOrder (middle, then alternating left-right):",
            numbers.middle_out_order(),
            "    Current elements: [10, 20, 15]",
        ),
    ]
    for heading, items, note in traversals:
        _show_traversal(out, heading, items, note)

    _section(out, "CHAR ITERATOR EXAMPLES")
    print("\n14. Character container iterator examples:", file=out)
    print("    Original chars: [Z, A, M, B, Y]", file=out)
    print(f"\n    Char AscendingOrder:  {_joined(letters.ascending_order())}", file=out)
    print(f"    Char DescendingOrder: {_joined(letters.descending_order())}", file=out)
    print(f"    Char SideCrossOrder:  {_joined(letters.side_cross_order())}", file=out)

    _section(out, "ERROR HANDLING")
    print("\n15. Testing error handling:", file=out)
    print("    Attempting to remove non-existent int (555):", file=out)
    _try_remove(out, numbers, 555)
    print("\n    Attempting to remove non-existent char ('X'):", file=out)
    _try_remove(out, letters, "X")

    print("\n=== Demo Complete ===", file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration on standard output."""
    parser = argparse.ArgumentParser(
        prog="ordercontainer-demo",
        description="Show the container's operations and traversal orders.",
    )
    parser.parse_args(argv)
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())