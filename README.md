# kalkulator

A small calculator with a memory slot, plus a converter that shows a
number in every base from 2 to 10 at once.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Using it from the command line

The `kalkulator` command drives a calculator session with typed
commands. Commands can be given as arguments:

    kalkulator 12 + 30 =

Without arguments it reads one command per line from standard input
until `quit` or `exit` (or the end of input). To see the option summary:

    kalkulator --help

The commands are:

| Command            | Effect                                                        |
|--------------------|---------------------------------------------------------------|
| digits and `.`     | type into the entry (a second point is ignored)               |
| `+ - * / %`        | start an operation, or finish the pending one and chain       |
| `=`                | finish the pending operation; the result goes to memory       |
| `neg` or `+/-`     | flip the sign of the entry                                    |
| `back` or `<`      | remove the last character of the entry                        |
| `c`                | clear the entry, the pending operator and the first operand   |
| `ms`               | move the entry into memory (only when nothing is pending)     |
| `mr`               | copy the memory into the entry                                |
| `mc`               | clear the memory                                              |
| `m>conv`           | show the memory, without its sign, in bases 2 to 10           |
| `base N TEXT`      | set the base-N field of the converter and update the others   |
| `help`             | list the commands                                             |

After each key command a status line is printed in the form
`[M memory] first-operand operator | entry`. The `m>conv` and `base`
commands print the converter fields instead, as `2:... 3:... ... 10:...`.
A command that fails prints a line starting with `error:`; for example,
dividing by zero or taking a remainder by zero is refused and the
current entry is cleared.

Results stored in memory are written with six significant digits.

## Using it as a library

`kalkulator.core` has the arithmetic and the base conversions:

```python
from kalkulator.core import Calculator, to_decimal, from_decimal, format_number

calc = Calculator()
calc.a, calc.b = 7, 3
calc.apply("%")
print(format_number(calc.mem))    # 1

print(to_decimal(2, "1010"))      # 10
print(from_decimal(8, "64"))      # 100
```

`Calculator` holds the operands `a` and `b` and the result `mem`; its
`add`, `subtract`, `multiply`, `divide` and `remainder` methods store
and return the result, and `apply(symbol)` runs one of them by its
symbol. The remainder truncates the quotient toward zero.

`to_decimal(base, number)` and `from_decimal(base, number)` accept bases
2 to 10. When a number has a fractional part, the digits before the
point and the digits after it are converted separately, each as a whole
number. `from_decimal` writes a part equal to zero as nothing, so
`from_decimal(2, "0")` is the empty string.

`kalkulator.converter.BaseConverter` keeps one field for each base from
2 to 10. Editing one field with `edit(base, text)` fills in all the
others and returns the fields as a dict. Input is checked with
`validate(base, text)`, which raises `InvalidNumberError` when the text
has digits the base does not allow, or more than 18 digits (base 10) or
19 digits (other bases) on either side of the point.

`kalkulator.session.CalculatorSession` behaves like the keypad: it holds
the entry (`display`), the pending operator (`operation`), the first
operand (`first_number`) and the memory (`memory`). Its `press_digit`,
`press_point`, `press_operator`, `equals`, `toggle_sign`, `backspace`,
`clear_display`, `store_memory`, `recall_memory`, `clear_memory` and
`memory_to_converter` methods work like the matching keys. When a
division or remainder by zero is attempted, it raises
`DivisionByZeroError`.

`kalkulator.app.run_commands(session, commands)` applies a sequence of
commands to a session and returns one output line per command.

## What it does not do

There is no graphical window: the calculator is used through the text
commands above or from Python. Negative numbers and bases above 10 are
not handled by the converter.