# calcgarden

A garden of small calculators. Each is a separate interactive program for the
terminal, with its own prompts, operators and way of handling mistakes. The
arithmetic behind each one is also available as plain Python functions.

Requires Python 3.10 or later. There are no runtime dependencies.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The calculators

Every calculator reads its answers from standard input and writes to standard
output, so it can be used at the keyboard or fed from a pipe.

| Command | What it does |
| --- | --- |
| `calcgarden-donnie` | Greets you, then loops over `e` (an expression such as `2 + 2`), `l` (base-10 logarithm) and `q` (quit). Errors such as division by zero are reported and the loop goes on. |
| `calcgarden-chykb` | You choose an operation by number (0 sum, 1 multiply, 2 divide, 3 subtract), then enter two numbers. |
| `calcgarden-codescience` | Takes two numbers and one operator: `+ - * / ^`, `r` (square root), `s` (sine) or `c` (cosine), the last three applied to the first number. Division by zero gives 0. |
| `calcgarden-destinedcodes` | Evaluates one expression such as `23 * 5`. It rejects division by zero and unknown operators. |
| `calcgarden-edwin` | A looping calculator with `+ - * / ^`, `root`, and `sin`, `cos`, `tan` in degrees. Type `off` or press Ctrl+D to leave. |
| `calcgarden-evance` | A numbered menu: addition, subtraction, multiplication, division, modulo, nth root, exponentiation, log₁₀, factorial and Fibonacci. It runs until input ends; an invalid choice or an error stops it. |
| `calcgarden-hullaah` | Asks for two numbers, then one of `+ - * / ^` (the power takes a whole, non-negative exponent). It asks again after invalid input. |
| `calcgarden-maryanemwende` | Asks for an operator first, then two numbers. |
| `calcgarden-namujibril` | Integer arithmetic with `+ - * /`, division truncating toward zero. It refuses to divide by zero. |
| `calcgarden-samuelogboye` | Basic operations and exponentiation. An advanced menu adds square root, natural log and trigonometry in degrees. It repeats for as long as you answer `yes`. |
| `calcgarden-shazaaly` | Takes two numbers and one of `+ - * / ^`. |
| `calcgarden-techdanny` | Clears the screen, then loops over `value1`, an operator and `value2` until input ends. |
| `calcgarden-ukasquared` | Integer arithmetic that accepts only digit strings as operands. |
| `calcgarden-youngman` | Basic integer calculations (`+ - * / %`) and special ones: square root, cosine, sine, exponentiation and natural logarithm. Option 3, or three invalid selections, leaves and clears the screen. |
| `calcgarden-dohoudaniel` | Asks for your name and two integers, then an operator from `+ - * /`, and reports the result with deliberate pauses. |

The `techdanny` and `youngman` calculators clear the screen by running the
`clear` command; where it is not available they carry on without clearing.

## Using the functions directly

Each calculator's module exposes its operations. A few examples:

```python
from calcgarden import donnie, edwin_ops, evance_ops, hullaah

donnie.add(2, 3)                   # 5
donnie.logarithm(100)              # 2.0
donnie.divide(1, 0)                # raises donnie.DivisionByZeroError

edwin_ops.execute_operation(30, 0, "sin")   # sine of 30 degrees
edwin_ops.is_trig("tan")                    # True

evance_ops.factorial(5)            # 120
evance_ops.fib(10)                 # 55
evance_ops.logten(0)               # raises evance_ops.CalcError

hullaah.lookup_operation("^")(2, 10)        # 1024.0
```

Other helpers for parsing and evaluating input include
`donnie.evaluate_expression`, `destinedcodes.parse_expression` and
`destinedcodes.evaluate`, `codescience.calculate`, `chykb.apply`,
`maryanemwende.calculate`, `techdanny.calculate`, `shazaaly.operation_for`,
`hullaah.parse_number`, `edwin_cli.parse_number` and `edwin_cli.format_result`,
`evance_cli.valid_input`, `evance_cli.two_operand_calc`,
`evance_cli.single_operand_calc` and `evance_cli.special_calc`,
`samuelogboye.basic_op` and `samuelogboye.advanced_op`, `ukasquared.opr` and
`ukasquared.is_number`, `youngman.basic_calculation`, and
`dohoudaniel_ops.perform_calculation` and `dohoudaniel_ops.is_valid_operator`.

## What it does not do

The calculators take no command-line options. Every command's `main` function
accepts an optional argument list but ignores it; calling `main()` from Python
starts the same interactive session on standard input. There is no history,
no saved state between runs, and no graphical interface.