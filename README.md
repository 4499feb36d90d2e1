# classicrypt

Classical ciphers and the arithmetic behind simple public-key schemes.
These are meant for learning and experimenting. They are not safe for
protecting real data.

## What is inside

| Module | Contents |
| --- | --- |
| `classicrypt.numtheory` | `gcd`, `mod_inverse`, `power_mod` |
| `classicrypt.diffie_hellman` | `KeyExchange`, `public_key`, `exchange` |
| `classicrypt.rsa` | `KeyPair`, `generate_keys` |
| `classicrypt.bitwise` | `bitwise_operations`, `mask_table`, `format_mask_table` |
| `classicrypt.caesar` | `encrypt`, `decrypt`, `shift_letters`, `ascii_table` |
| `classicrypt.vernam` | `encrypt`, `decrypt`, `to_hex` |
| `classicrypt.vigenere` | `encrypt`, `decrypt` |
| `classicrypt.hill` | `letter_values`, `encrypt`, `decrypt` |
| `classicrypt.railfence` | `rail_pattern`, `encrypt`, `decrypt` |
| `classicrypt.playfair` | `key_table`, `prepare`, `encrypt` |
| `classicrypt.cli` | `main`, the `classicrypt` command |

## Installation

```
pip install classicrypt
```

The package depends on the standard library alone and needs Python 3.10 or
later.

## Using it from Python

```python
from classicrypt import caesar, numtheory, railfence, rsa, diffie_hellman

numtheory.gcd(48, 18)             # 6
numtheory.mod_inverse(3, 11)      # 4
numtheory.power_mod(4, 13, 497)   # 445

caesar.encrypt("HELLO", 3)        # "KHOOR"
caesar.decrypt("KHOOR", 3)        # "HELLO"

railfence.encrypt("WEAREDISCOVEREDFLEEATONCE", 3)
# "WECRLTEERDSOEEFEAOCAIVDEN"

pair = rsa.generate_keys(61, 53)
assert pair.decrypt(pair.encrypt("A")) == ord("A")

shared = diffie_hellman.exchange(23, 5, 6, 15)
shared.successful                 # True
shared.shared_key                 # 2
```

Notes on behaviour:

- `numtheory.mod_inverse` raises `ValueError` when no inverse exists or the
  modulus is not positive.
- `rsa.generate_keys` picks the smallest public exponent above 1 that is
  coprime to the totient. `KeyPair.encrypt` takes an integer or a single
  character.
- `caesar.encrypt` and `caesar.decrypt` shift uppercase letters only;
  everything else passes through unchanged. `caesar.shift_letters` shifts
  both cases, and `caesar.ascii_table` lists each character with its code
  before and after the shift.
- `vernam.encrypt` returns bytes and requires the key to be exactly as long as
  the plaintext, raising `ValueError` otherwise. `vernam.to_hex` renders bytes
  as space-separated uppercase hex.
- `vigenere` accepts only uppercase letters A–Z in both text and key.
- `hill` works on the first three uppercase letters of its input with a fixed
  3×3 key matrix and its inverse modulo 26.
- `playfair` drops spaces, lowercases its input, merges J into I, splits
  doubled letters with `x`, pads to even length and returns uppercase
  ciphertext.
- `bitwise.bitwise_operations` returns AND, OR, XOR, NOT and one-bit shifts as
  32-bit signed values; `bitwise.format_mask_table` shows each character's
  code combined with 127.

## Command line

Installing the package provides a `classicrypt` command:

```
classicrypt --help
classicrypt bitwise 10 5
classicrypt caesar HELLO 3
classicrypt diffie-hellman 23 5 6 15
classicrypt rsa 61 53 A
classicrypt playfair monarchy instruments
classicrypt vernam hello xmckl
classicrypt vigenere ATTACKATDAWN LEMON
classicrypt railfence WEAREDISCOVEREDFLEEATONCE 3
```

Each cipher command prints the encrypted text and then the result of
decrypting it again (`playfair` prints the ciphertext only). Invalid input is
reported as `error: ...` on standard error with exit status 1.

## What it does not do

- Playfair has encryption only; there is no Playfair decryption.
- The Hill cipher uses one fixed key matrix and handles a single block of
  three letters; there is no way to supply a key or encrypt longer text.
- The command line has no subcommands for the Hill cipher, the Caesar ASCII
  table or the character mask table; use them from Python.

## Running the tests

```
pip install classicrypt[test]
pytest
```