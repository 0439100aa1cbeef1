"""High-entropy passphrases."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from pathlib import Path


def is_valid_password(password: str) -> bool:
    """True if no word appears twice in the passphrase."""
    words = password.split()
    return len(words) == len(set(words))


def contains_anagrams(password: str) -> bool:
    """True if any two words of the passphrase are anagrams of each other."""
    words = password.split()
    return len({"".join(sorted(word)) for word in words}) != len(words)


def count_valid_passwords(passwords: Iterable[str]) -> int:
    """Number of passphrases without repeated words."""
    return sum(1 for p in passwords if is_valid_password(p))


def count_passwords_without_anagrams(passwords: Iterable[str]) -> int:
    """Number of passphrases in which no two words are anagrams."""
    return sum(1 for p in passwords if not contains_anagrams(p))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count valid passphrases.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    passwords = args.input.read_text().splitlines()

    print(f"Valid passwords: {count_valid_passwords(passwords)}")
    print(
        "Valid passwords without anagrams: "
        f"{count_passwords_without_anagrams(passwords)}"
    )


if __name__ == "__main__":
    main()