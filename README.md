# fakekit

Small building blocks for generating fake test data in a reproducible way.

## What it offers

### `fakekit.rng`

- `AlwaysTrueRng(initial=2**31, increment=2**31 + 1)`: a stepping 64-bit
  random source. Each draw returns the current value and adds `increment`
  (wrapping at 64 bits). If a value would come out with bit 31 clear, the
  generator sets that bit and steps again, so every value it returns has
  bit 31 set. Booleans drawn from it are therefore always `True`. This helps
  a test drive every "maybe" branch of a generator.
  - `next_u64()`: the next 64-bit value.
  - `next_u32()`: the low 32 bits of the next 64-bit value.
  - `fill_bytes(size)`: `size` bytes taken little-endian from successive
    values (8 bytes per draw while more than 4 remain, otherwise 4);
    raises `ValueError` for a negative size.
  - `next_bool()`: a boolean draw (always `True`).
  - `bools()` and `u64s()`: endless iterators of booleans and 64-bit values.
- `random_bool(rng)`: draws a boolean from bit 31 of a 32-bit draw. `rng` is
  either an object with a `next_u32()` method or a `random.Random`.

With the default settings the first values of `next_u64()` are
`2147483648`, `6442450945`, `10737418242`, and so on.

### `fakekit.either`

- `either(a, b)`: builds an `EitherFaker(a, b)`.
- `EitherFaker.fake_with_rng(rng)`: draws a boolean with `random_bool(rng)`,
  then produces a value from `a` if it is true and from `b` otherwise. Each of
  `a` and `b` is either an object with its own `fake_with_rng(rng)` method or a
  callable that takes the random source; anything else raises `TypeError`.
  The value comes back in a `WrappedVal`.
- `WrappedVal.into_inner()`: returns the wrapped value (also available as the
  `value` attribute).

## Example

```python
import random

from fakekit.rng import AlwaysTrueRng, random_bool
from fakekit.either import either

rng = AlwaysTrueRng()
assert all(random_bool(rng) for _ in range(100))

choice = either(lambda r: "left", lambda r: "right")
assert choice.fake_with_rng(AlwaysTrueRng()).into_inner() == "left"

# Any random.Random works as a source too.
print(choice.fake_with_rng(random.Random(7)).into_inner())
```

## What it does not do

fakekit has no catalogue of ready-made fakers (names, addresses, lorem text
and the like) and no command-line tool. It supplies the random source and the
two-way choice; the values themselves come from the fakers or callables you
pass in.

## Installing

```
pip install fakekit
```

To install with the test dependencies:

```
pip install "fakekit[test]"
```