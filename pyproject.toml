[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classicrypt"
version = "0.1.0"
description = "Classical ciphers, small number-theory helpers and toy public-key schemes"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "cipher",
    "caesar",
    "vigenere",
    "playfair",
    "hill",
    "rail-fence",
    "vernam",
    "rsa",
    "diffie-hellman",
    "bitwise",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
classicrypt = "classicrypt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["classicrypt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
