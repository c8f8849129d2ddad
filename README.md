# rustlings

Worked solutions to a series of small programming exercise topics, written
as plain Python functions and classes. The package also has a few helpers
that print coloured status lines to the terminal.

## Requirements

- Python 3.11 or later
- `rich`, installed with the package

## Installing

```
pip install .
```

## The lessons

The `rustlings.lessons` package has one module per topic:

- `basics`: `calculate_apple_price`, `times_two`, `greet`, `bigger`,
  `fizz_if_foo`, `ring_calls`, `is_even`, `sale_price`, `square`
- `strings`: `current_favorite_color`, `is_a_color_word`
- `primitives`: `greeting`, `classify_character`, `describe_array`,
  `nice_slice`, `describe_cat`, `second`, `make_sausage`, `favorite_snacks`,
  `seconds_since_epoch`
- `structs`: `ColorClassicStruct`, `ColorTupleStruct`, `UnitStruct`,
  `Order`, `create_order_template`, and `Package`, which refuses a weight of
  zero or less with `ValueError`
- `enums`: the messages `Move`, `Echo`, `ChangeColor` and `Quit`, and a
  `State` whose `process` method applies one message
- `ownership`: `fill_vec`, `new_filled_vec`, `add_through_references`, and
  `append_bar` for a string or a list of strings
- `generics`: `shopping_list`, `Wrapper`, and `ReportCard` with `render`
- `containers`: `fruit_basket`, `Fruit`, `fill_fruit_basket`,
  `array_and_vec`, `vec_loop`
- `options`: `describe_number`, `fill_numbers`, `describe_word`,
  `drain_optionals`, `describe_point`
- `errors`: `generate_nametag_text`, `total_cost`, `remaining_tokens`,
  `PositiveNonzeroInteger` and `CreationError`, `parse_pos_nonzero` and
  `ParsePosNonzeroError`, `Climate.parse` and `ParseClimateError`
- `iterators`: the `Cons` list with `create_empty_list` and
  `create_non_empty_list`, `favorite_fruits`, `capitalize_first`,
  `capitalize_words_vector`, `capitalize_words_string`, `divide` with
  `DivisionError`, `NotDivisibleError` and `DivideByZero`,
  `list_of_results`, `result_with_list`, `factorial`, and the `Progress`
  counters `count_for`, `count_iterator`, `count_collection_for`,
  `count_collection_iterator`
- `concurrency`: `JobStatus`, `run_jobs`, `offset_sums`

Failures are raised as exceptions:

```python
from rustlings.lessons.errors import Climate, ParseClimateError
from rustlings.lessons.iterators import divide, NotDivisibleError

Climate.parse("Munich,2015,23.1")   # Climate(city='Munich', year=2015, temp=23.1)

try:
    Climate.parse("Boston,1991")
except ParseClimateError as error:
    print(error)                    # incorrect number of fields

try:
    divide(81, 6)
except NotDivisibleError as error:
    print(error.dividend, error.divisor)   # 81 6
```

## Status lines

`rustlings.ui` has `warn(message)`, which prints a red line, and
`success(message)`, which prints a green one. Each starts with an emoji
marker, or with a plain `!` or `✓` when the `NO_EMOJI` environment variable
is set; `no_emoji()` reports whether it is.

## What this package does not do

There is no command-line program. The package does not load an exercise
list, compile or run exercises, check or watch them for progress, list
them, or show hints; there is no lessons module for type conversions.

## Running the tests

```
pip install .[test]
pytest
```