# miniprintf

A small `printf`-style formatter. It understands a fixed set of conversion
specifiers, writes the result to a text stream, and returns how many
characters it wrote.

## Supported conversions

| Specifier | Argument                     | Output                                            |
|-----------|------------------------------|---------------------------------------------------|
| `%c`      | a one-character str, or int  | one character; an int is taken as its low byte    |
| `%s`      | a string or `None`           | the string, or `(null)` for `None`                |
| `%p`      | an int, or any other object  | `0x` and lower-case hex; `0x0` for `None` or 0    |
| `%d` `%i` | an int                       | signed 32-bit decimal, `-` when negative          |
| `%u`      | an int                       | unsigned 32-bit decimal                           |
| `%x` `%X` | an int                       | unsigned 32-bit hex, lower or upper case          |
| `%%`      | nothing                      | a literal `%`                                     |

For `%p`, an int is used as the address itself; any other object is shown
by its `id()`. Integers given to `%d`, `%i`, `%u`, `%x` and `%X` are wrapped
to 32 bits, so `-1` prints as `4294967295` under `%u`.

## Usage

```python
import io
from miniprintf.printf import printf

count = printf("%s has %d items (0x%X)\n", "cart", 42, 42)
# prints: cart has 42 items (0x2A)
# count == 25

buffer = io.StringIO()
printf("%u%%", -1, file=buffer)
assert buffer.getvalue() == "4294967295%"
```

Output goes to `sys.stdout` unless a different stream is passed as `file`.

## Edge cases

- A `%` followed by an unknown character writes nothing and lowers the
  returned count by one.
- A `%` at the very end of the format string is written as it is.
- Running out of arguments for a conversion raises `TypeError`.
- A `%c` given a string that is not exactly one character raises `ValueError`.

## Building blocks

```python
from miniprintf.conversions import to_base, itoa

to_base(255, "0123456789abcdef")   # 'ff'
itoa(-2147483648)                  # '-2147483648'
```

`to_base` raises `ValueError` for an alphabet with fewer than two digits or
with repeated digits, and for a negative number.

`miniprintf.handlers` has one writer for each conversion (`write_char`,
`write_str`, `write_ptr`, `write_nbr`, `write_hex`, `write_unsigned`). Each
takes an output stream as its first argument and returns the number of
characters it wrote. `miniprintf.printf.handle_specifier(out, spec, args)`
writes a single conversion, taking its argument from the iterator `args`.

## What it does not do

There are no flags, field widths, precision or length modifiers, and no
floating-point conversions. The package is a library only; it has no
command-line program.