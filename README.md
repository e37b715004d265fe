# dsakit

A collection of classic data-structure and algorithm exercises, written as
plain, importable Python functions and classes. Every piece is small and
uses only the standard library. Python 3.10 or later is required.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

### `dsakit.arrays`

- `left_rotate(values, d)`: a new list with the sequence rotated left by `d`
  places (`d` is taken modulo the length). Raises `ValueError` for an empty
  sequence.
- `gcd(a, b)`: greatest common divisor by Euclid's algorithm.
- `to_binary(n)`: the binary digits of a positive integer as a string; an
  empty string for `n <= 0`.
- `three_largest(values)`: the three largest values in one pass, largest
  first, as a tuple. Slots no value filled are `None`.
- `merge_sort(values)`: a sorted copy made by merge sort.
- `kth_smallest(values, k)`: the k-th element (counting from 1) in sorted
  order. Raises `IndexError` when `k` is out of range.

```python
from dsakit.arrays import left_rotate, gcd, to_binary

left_rotate([1, 2, 3, 4, 5], 4)   # [5, 1, 2, 3, 4]
gcd(12, 18)                        # 6
to_binary(10)                      # "1010"
```

### `dsakit.geometry`

- `shoelace_area(xs, ys)`: signed area of a simple polygon given its vertex
  coordinates. The result is negative for counter-clockwise order and
  positive for clockwise order. Raises `ValueError` if the two sequences
  differ in length.
- `circle_line_intersection(r, a, b, c)`: where the line `ax + by + c = 0`
  meets a circle of radius `r` centred on the origin, as a tuple of one point
  (tangent) or two points. Raises `NoIntersectionError` (a `ValueError`) if
  they do not meet, and `ValueError` if `a` and `b` are both zero.

### `dsakit.matrix`

Matrices are sequences of rows.

- `add(a, b)`, `subtract(a, b)`: element-wise, for matrices of the same shape.
- `multiply(a, b)`: the matrix product.
- `total(a)`: sum of every element.

`MatrixShapeError` (a `ValueError`) is raised when the shapes do not fit or
the rows of a matrix differ in length.

### `dsakit.puzzles`

Small contest-style problems:

- `nearest_train_distances(stations, queries)`: for each 1-based station in
  `queries`, the time until a train reaches it, or `-1` if none can.
  Stations hold `0` (empty), `1` (train moving right) or `2` (train moving
  left); station 1 and stations with a train take no time.
- `walking_cost(distance, step, base, increment)`: total cost over
  `distance` days, where each block of `step` days costs `increment` more
  per day than the one before, starting at `base`.
- `max_revenue(budgets)`: the best revenue from a single price, each buyer
  paying if the price is within their budget. Raises `ValueError` when no
  budgets are given.
- `cars_at_max_speed(speeds)`: how many cars on a one-lane road travel at
  their own top speed.
- `swap(x, y)`: swaps two integers using arithmetic alone.

### `dsakit.stacks`

- `ArrayStack(size)`: a fixed-capacity stack. `push` onto a full stack
  raises `StackOverflowError`; `pop` or `top` on an empty one raises
  `StackUnderflowError`. `peek(index)` returns the element at 1-based
  `index` counted from the top, raising `IndexError` when out of range.
  Also offers `is_full()`, `is_empty()`, `len()` and iteration from top to
  bottom.
- `LinkedStack()`: an unbounded stack built from linked nodes, with `push`,
  `pop`, `peek`, `top`, `is_empty`, `len()` and iteration from top to bottom.
- `stock_span(prices)`: for each day, the number of consecutive days up to
  and including it whose price was at most that day's price.

```python
from dsakit.stacks import ArrayStack, stock_span

stack = ArrayStack(3)
stack.push(1)
stack.push(2)
stack.pop()                                   # 2

stock_span([100, 80, 60, 70, 60, 75, 85])     # [1, 1, 1, 2, 1, 4, 6]
```

### `dsakit.expressions`

- `infix_to_postfix(expression)`: converts an infix expression of
  single-character operands (letters or digits) with `+ - * /` and
  parentheses to postfix, tokens separated by single spaces.
- `evaluate_digit_postfix(expression)`: evaluates postfix made of single
  digits, with `+ - * /` and `^` (bitwise exclusive or); other characters
  are ignored.
- `evaluate_postfix(expression)`: evaluates postfix with multi-digit and
  negative integers separated by spaces or commas.

Division truncates towards zero. Malformed expressions, missing operands and
division by zero raise `ExpressionError` (a `ValueError`).

```python
from dsakit.expressions import infix_to_postfix, evaluate_postfix

infix_to_postfix("a+b*c")      # "a b c * +"
evaluate_postfix("10 2 8 * +") # 26
```

## What it does not do

`dsakit` is a library only: it has no command-line program and does not
read input from the terminal. Call its functions and classes from your own
code.