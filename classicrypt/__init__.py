"""Classical ciphers, number-theory helpers, toy RSA and Diffie-Hellman, and a command line."""

__version__ = "0.1.0"