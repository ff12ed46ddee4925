# rpncalc

An interactive reverse polish notation (RPN) calculator, together with a
small library of string and path helpers.

## Install

    pip install .

## The calculator

Start it with:

    rpncalc

Type one entry per line at the `>>> ` prompt. A number is pushed onto the
stack and echoed back; an operator takes its values from the stack, prints
the result and pushes it back:

    >>> 1
    1
    >>> 2
    2
    >>> +
    3

The value on top of the stack is the left operand of a binary operator, so
entering `1`, `2`, `-` gives `2 - 1 = 1`.

Entries it understands:

- arithmetic: `+`, `-`, `*`, `/`, `**` (power), `chs` (change sign), `sqrt`
- logarithms and exponent: `log` (base 10), `ln`, `ld` (base 2), `exp`
- trigonometry, in radians: `sin`, `cos`, `tan`, `asin`, `acos`, `atan`
- angle conversion: `deg` (radians to degrees), `rad` (degrees to radians)
- stack: `swap` (exchange the two top values), `rot` (move the bottom value
  to the top), `print` (show the whole stack, top first), `clst` (clear it)
- other: `help`, `quit`

A number is read from the start of the entry as a C conversion would read
it: decimal, hexadecimal (`0x1p4`), `inf` and `nan` are accepted, and
anything after the number is ignored. Results follow IEEE arithmetic, so
`1 / 0` gives `inf` and `sqrt` of a negative number gives `nan`. Numbers
are shown in `%g` form.

An unrecognised entry, or an operator with too few values on the stack,
prints `Error: received invalid input` and the prompt continues. The
calculator stops at `quit` or at end of input.

### The minimal calculator

    rpncalc-proto

is an earlier, smaller version. It pushes numbers without echoing them,
supports only `+`, `-`, `*` and `/` (printing each result), silently
ignores every other command, and stops at the first error after printing
it.

## Library

- `rpncalc.commands`: `parse_token(text)` turns one entry into a float or a
  `Command` member, raising `ParseError` otherwise. `InputError` signals a
  failed input stream.
- `rpncalc.calc`: `Calc(output=None)` holds the stack. `Calc.eval(value)`
  applies a number or command and returns the list of values to show;
  `Calc.stack()` returns the stack top first. `quit` raises
  `QuitRequested`; `help` writes the help text to `output` (standard
  output by default).
- `rpncalc.repl`: `raw_input`, `read_value` and `run(stdin, stdout)`, the
  loop behind the `rpncalc` command. `run` returns the exit status.
- `rpncalc.protocalc`: `ProtoCalc` and `run(stdin, stdout)`, behind
  `rpncalc-proto`.
- `rpncalc.stack`: `Stack`, a last-in, first-out stack of floats with
  `push`, `pop`, `top` and `is_empty`; `pop` and `top` raise `IndexError`
  when it is empty. Iteration runs from the top down. `swap(first, second)`
  exchanges the contents of two stacks.
- `rpncalc.strings`: `split`, `rsplit`, `strip`, `lstrip`, `rstrip`,
  `partition`, `rpartition`, `join`, `startswith`, `endswith`, `find`,
  `index`, `rfind`, `rindex`, `count`, `replace`, `splitlines`, `slice` and
  `mul`. An empty separator or character set means ASCII whitespace;
  `index` and `rindex` return -1 instead of raising, and `count` raises
  `ValueError` for an empty substring.
- `rpncalc.textcase`: ASCII-only classification (`isalnum`, `isalpha`,
  `isdigit`, `islower`, `isupper`, `isspace`, `istitle`), case conversion
  (`lower`, `upper`, `swapcase`, `capitalize`, `title`), `translate` with
  a 256-character table, and padding (`zfill`, `ljust`, `rjust`, `center`,
  `expandtabs`).
- `rpncalc.paths`: pure string path handling with `_nt` and `_posix`
  variants of `splitdrive`, `isabs`, `abspath`, `join`, `split`,
  `basename`, `dirname`, `normpath` and `splitext`. The unsuffixed forms
  use the rules of the running platform. `abspath` takes the working
  directory as an argument; nothing touches the file system.

## What it does not do

The commands take no command-line options, and the prompt has no line
editing or history. Values live only for the session; nothing is saved.

## Tests

    pip install .[test]
    pytest