"""Command-line front end for the cipher and number-theory demonstrations."""

from __future__ import annotations

import argparse
import sys

from classicrypt import caesar, playfair, railfence, vernam, vigenere
from classicrypt.bitwise import bitwise_operations
from classicrypt.diffie_hellman import exchange
from classicrypt.rsa import generate_keys

_MAX_CODE_POINT = 0x110000


def _run_bitwise(args: argparse.Namespace) -> int:
    print(f"a = {args.a}, b = {args.b}\n")
    for label, value in bitwise_operations(args.a, args.b).items():
        print(f"{label} = {value}")
    return 0


def _run_caesar(args: argparse.Namespace) -> int:
    encrypted = caesar.encrypt(args.text, args.key)
    print(f"Encrypted: {encrypted}")
    print(f"Decrypted: {caesar.decrypt(encrypted, args.key)}")
    return 0


def _run_diffie_hellman(args: argparse.Namespace) -> int:
    result = exchange(args.q, args.alpha, args.x_a, args.x_b)
    if not result.successful:
        print("Failed", file=sys.stderr)
        return 1
    print("Successful")
    print(f"KA: {result.k_a}")
    print(f"KB: {result.k_b}")
    return 0


def _run_rsa(args: argparse.Namespace) -> int:
    if len(args.char) != 1:
        raise ValueError("only a single character can be encrypted")
    keys = generate_keys(args.p, args.q)
    encrypted = keys.encrypt(args.char)
    decrypted = keys.decrypt(encrypted)
    shown = chr(decrypted) if decrypted < _MAX_CODE_POINT else str(decrypted)
    print(f"Encrypted: {encrypted}")
    print(f"Decrypted: {shown}")
    if decrypted == ord(args.char):
        print("Successful")
        return 0
    print("Failed")
    return 1


def _run_playfair(args: argparse.Namespace) -> int:
    print(f"Key text: {args.key}")
    print(f"Plain text: {args.text}")
    print(f"CipherText: {playfair.encrypt(args.text, args.key)}")
    return 0


def _run_vernam(args: argparse.Namespace) -> int:
    encrypted = vernam.encrypt(args.text, args.key)
    print(f"Encrypted: {vernam.to_hex(encrypted)}")
    print(f"Decrypted: {vernam.decrypt(encrypted, args.key)}")
    return 0


def _run_vigenere(args: argparse.Namespace) -> int:
    encrypted = vigenere.encrypt(args.text, args.key)
    print(f"Encrypted Text: {encrypted}")
    print(f"Decrypted Text: {vigenere.decrypt(encrypted, args.key)}")
    return 0


def _run_railfence(args: argparse.Namespace) -> int:
    encrypted = railfence.encrypt(args.text, args.depth)
    print(f"Encrypted Text: {encrypted}")
    print(f"Decrypted Text: {railfence.decrypt(encrypted, args.depth)}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classicrypt", description="Classical ciphers and number-theory demonstrations."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    cmd = commands.add_parser("bitwise", help="show bitwise operators on two integers")
    cmd.add_argument("a", type=int, nargs="?", default=10)
    cmd.add_argument("b", type=int, nargs="?", default=5)
    cmd.set_defaults(handler=_run_bitwise)

    cmd = commands.add_parser("caesar", help="Caesar shift of uppercase letters")
    cmd.add_argument("text")
    cmd.add_argument("key", type=int)
    cmd.set_defaults(handler=_run_caesar)

    cmd = commands.add_parser("diffie-hellman", help="Diffie-Hellman key exchange")
    cmd.add_argument("q", type=int)
    cmd.add_argument("alpha", type=int)
    cmd.add_argument("x_a", type=int)
    cmd.add_argument("x_b", type=int)
    cmd.set_defaults(handler=_run_diffie_hellman)

    cmd = commands.add_parser("rsa", help="encrypt one character with textbook RSA")
    cmd.add_argument("p", type=int)
    cmd.add_argument("q", type=int)
    cmd.add_argument("char")
    cmd.set_defaults(handler=_run_rsa)

    cmd = commands.add_parser("playfair", help="Playfair encryption")
    cmd.add_argument("key")
    cmd.add_argument("text")
    cmd.set_defaults(handler=_run_playfair)

    cmd = commands.add_parser("vernam", help="Vernam XOR cipher")
    cmd.add_argument("text")
    cmd.add_argument("key")
    cmd.set_defaults(handler=_run_vernam)

    cmd = commands.add_parser("vigenere", help="Vigenere cipher on uppercase letters")
    cmd.add_argument("text")
    cmd.add_argument("key")
    cmd.set_defaults(handler=_run_vigenere)

    cmd = commands.add_parser("railfence", help="rail fence transposition")
    cmd.add_argument("text")
    cmd.add_argument("depth", type=int)
    cmd.set_defaults(handler=_run_railfence)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse ``argv`` and run the chosen command; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())