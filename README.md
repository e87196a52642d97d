# ordercontainer

A small collection of comparable items that you can walk through in several
different orders.

## Installation

```
pip install ordercontainer
```

## Usage

```python
from ordercontainer.container import Container

box = Container([7, 15, 6, 1, 2])
box.add(9)
box.remove(6)          # removes every occurrence; ValueError if absent

len(box)               # 5
box.is_empty()         # False
15 in box              # True
box.elements()         # (7, 15, 1, 2, 9)
str(box)               # "7 15 1 2 9 "
box.print()            # writes "7 15 1 2 9 " and a newline to standard output

list(box.ascending_order())    # [1, 2, 7, 9, 15]
list(box.descending_order())   # [15, 9, 7, 2, 1]
list(box.side_cross_order())   # smallest, largest, 2nd smallest, 2nd largest, ...
list(box.reverse_order())      # [9, 2, 1, 15, 7]
list(box.order())              # [7, 15, 1, 2, 9]
list(box.middle_out_order())   # middle element, then alternating left and right
```

`Container()` with no argument starts empty. Duplicates are kept, and
`remove` takes out every occurrence of the element at once, raising
`ValueError("Element not found in container")` when there is none.
`print` accepts an optional `file` to write to instead of standard output.

Each traversal takes a snapshot of the container when it is created, so later
changes to the container do not affect it. A traversal supports `len()`,
iteration, indexing and slicing; indexing past the end raises `IndexError`.

For the middle-out order, an even number of elements starts from the left-hand
middle; once one side runs out, the rest of the other side follows in order.

The traversal classes (`AscendingOrder`, `DescendingOrder`, `SideCrossOrder`,
`ReverseOrder`, `Order`, `MiddleOutOrder`, all built on `Traversal`) live in
`ordercontainer.orders` and can be built straight from a container or any
other iterable:

```python
from ordercontainer.orders import MiddleOutOrder

list(MiddleOutOrder(box))
list(MiddleOutOrder([10, 20, 30, 40]))   # [20, 10, 30, 40]
```

## Demo

A short demonstration of all operations with integers, strings and single
characters, written to standard output:

```
ordercontainer-demo
```

From Python, `ordercontainer.demo.run_demo(out)` writes the same text to any
text stream.

## Running the tests

```
pip install "ordercontainer[test]"
pytest
```