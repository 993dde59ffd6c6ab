# drillkit

drillkit collects short answers to exercises that come up in
systems-programming practice: bit operations on fixed-width integers, digit
arithmetic, string scanning, simple list algorithms, and rendering a binary
file as a C array initialiser. It has no dependencies outside the standard
library.

## Installation

```
pip install drillkit
```

To run the test suite:

```
pip install "drillkit[test]"
pytest
```

## `drillkit.bits`

Every function checks that its input fits the stated width and raises
`ValueError` otherwise.

- `reverse_bits(number)` mirrors the 32 bits of a word.
- `swap_nibble(number)` swaps the two halves of a byte.
- `swap_nibbles_32(number)` swaps the nibbles inside every byte of a 32-bit word.
- `ones_complement(number)` inverts the 8 bits of a byte.
- `swap_two_bits(number, index1, index2)` exchanges two bit positions (0 to 31) of a 32-bit word.
- `swap_odd_even_bits(number)` exchanges each even-positioned bit with its odd neighbour.
- `set_bit_group(number, value, bit_high, bit_low)` replaces bits `bit_low` to
  `bit_high` inclusive with `value`; `value` must fit in that field.
- `test_bit(number, n)` returns bit `n` as 0 or 1, counting from 0 at the least significant bit.
- `byte_order()` returns `"little"` or `"big"` for the running machine.
- `PowerGoodStatus.from_byte(value)` decodes a power-good status register byte
  into named flags (`ldo2_stat` at bit 0 up to `reserved_bit` at bit 7);
  `int()` of the result gives the byte back.

```python
from drillkit.bits import reverse_bits, swap_nibble, swap_odd_even_bits, set_bit_group, test_bit

reverse_bits(0xAAAAAAAA)        # 0x55555555
swap_nibble(0x47)               # 0x74
swap_odd_even_bits(23)          # 43
set_bit_group(0, 4, 11, 8)      # 0x400
test_bit(0x34, 4)               # 1
```

## `drillkit.digits`

- `count_digits(number)` counts decimal digits; zero and negative numbers give 0.
- `reverse_digits(number)` reverses the decimal digits and keeps the sign.
- `is_palindrome(number)` is `False` for negative numbers, otherwise whether the
  digits read the same backwards.
- `modulus(number, divisor)` returns the remainder; a number below the divisor,
  negative ones included, comes back unchanged. The divisor must be positive.

```python
from drillkit.digits import count_digits, is_palindrome, reverse_digits

count_digits(75859)    # 5
reverse_digits(75859)  # 95857
is_palindrome(1221)    # True
```

## `drillkit.strings`

- `c_strlen(data)` measures text or bytes up to the first NUL, or the whole length if there is none.
- `copy_into(buffer, text)` copies text (up to its first NUL) and a terminating
  NUL into the start of a `bytearray` or writable `memoryview`, and returns the
  buffer. A buffer too small raises `ValueError`.
- `reverse_string(text)` returns text or bytes reversed.
- `increment_bytes(data)` adds one to every byte, wrapping `0xFF` to `0x00`.
- `has_duplicate_chars(text)` tells whether any character occurs twice.
- `longest_unique_substring_length(text)` gives the length of the longest run without a repeated character.
- `find_pattern(text, pattern)` returns the first index of `pattern`, or -1.

```python
from drillkit.strings import find_pattern, longest_unique_substring_length

find_pattern("abczefbykeut", "fby")            # 5
longest_unique_substring_length("abcabcbb")     # 3
```

## `drillkit.arrays`

- `binary_search(items, key)` returns the index of `key` in an ascending sequence, or -1.
- `exchange_sort(items)` returns the items in ascending order as a new list.
- `reverse_in_place(items)` reverses a list in place.
- `rotate_right(items)` moves the last element to the front, in place.
- `scale_all(items, factor)` multiplies every element by `factor`, in place.
- `numbered_grid(rows, columns, start=0)` builds a row-major grid of consecutive
  numbers; negative sizes raise `ValueError`.

```python
from drillkit.arrays import binary_search, numbered_grid

binary_search([2, 5, 6, 9, 10, 11, 32, 43, 76], 43)   # 7
numbered_grid(3, 4, 100)[2]                           # [108, 109, 110, 111]
```

## `drillkit.c_array`

- `format_c_array(data)` renders bytes as C source: a comment with the byte
  count, then `unsigned char Arr[] = { ... };` with values written as `0x%02x`
  and CRLF line breaks. The array name is always `Arr`.
- `convert_file(source, destination)` writes the rendering of one file to
  another and returns the number of bytes read.

The same is available as a command:

```
drillkit-c-array firmware.bin firmware_array.txt
```

It prints the byte count of the input. Without arguments it reads `mir.bin`
and writes `sunny` in the current directory. If a file cannot be read or
written it prints the error and exits with status 1.

## Limits

`drillkit.c_array` is the only command; the other modules are libraries to
import. The C rendering is fixed: the array name, spacing and line layout
cannot be chosen.