"""Checksum algorithms over already-normalized ASCII digit strings."""

ABA_WEIGHTS = (3, 7, 1, 3, 7, 1, 3, 7)


def luhn_valid(digits: str) -> bool:
    """MOD10 (Luhn): double every second digit from the right."""
    total = 0
    for index, char in enumerate(reversed(digits)):
        n = int(char)
        if index % 2 == 1:
            n *= 2
            if n > 9:
                n -= 9
        total += n
    return total % 10 == 0


def aba_valid(digits: str) -> bool:
    """ABA routing checksum; the ninth digit is the check digit."""
    if len(digits) != 9:
        return False
    total = sum(int(char) * weight for char, weight in zip(digits[:8], ABA_WEIGHTS))
    expected = (10 - total % 10) % 10
    return int(digits[8]) == expected
