"""Integer, digit and combinatorial puzzles."""

from __future__ import annotations

import math

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_MASK32 = 0xFFFFFFFF


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves the 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    return result if INT_MIN <= result <= INT_MAX else 0


def is_palindrome(x: int) -> bool:
    """True when the decimal digits of ``x`` read the same both ways; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def my_pow(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by repeated squaring."""
    if x == 1:
        return 1.0
    if x == -1:
        return 1.0 if n % 2 == 0 else -1.0
    if n == 0:
        return 1.0
    exponent = abs(n)
    result = 1.0
    base = float(x)
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    if n < 0:
        if result == 0:
            return math.copysign(math.inf, result)
        return 1 / result
    return result


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, one board per solution."""
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[list[str]] = []
    placement: list[int] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(["." * c + "Q" + "." * (n - c - 1) for c in placement])
            return
        for col in range(n):
            if col in columns or row + col in diagonals or row - col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row + col)
            anti_diagonals.add(row - col)
            placement.append(col)
            place(row + 1)
            placement.pop()
            columns.discard(col)
            diagonals.discard(row + col)
            anti_diagonals.discard(row - col)

    place(0)
    return solutions


def my_sqrt(x: int) -> int:
    """Integer square root, rounded down."""
    if x < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(x)


def climb_stairs(n: int) -> int:
    """Number of ways to climb ``n`` steps taking one or two at a time."""
    if n < 0:
        raise ValueError("number of steps must not be negative")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def generate(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    if num_rows <= 0:
        return rows
    rows.append([1])
    for _ in range(1, num_rows):
        last = rows[-1]
        rows.append([1, *(a + b for a, b in zip(last, last[1:])), 1])
    return rows


def get_row(row_index: int) -> list[int]:
    """Row ``row_index`` (counting from 0) of Pascal's triangle."""
    if row_index < 0:
        raise ValueError("row index must not be negative")
    return [math.comb(row_index, k) for k in range(row_index + 1)]


def trailing_zeroes(n: int) -> int:
    """Number of trailing zeros in ``n!``."""
    count = 0
    num = abs(n)
    while num:
        num //= 5
        count += num
    return -count if n < 0 else count


def _digit_square_sum(n: int) -> int:
    return sum(int(d) ** 2 for d in str(abs(n)))


def is_happy(n: int) -> bool:
    """True when summing squared digits reaches 1 within eight rounds."""
    for _ in range(8):
        n = _digit_square_sum(n)
        if n == 1:
            return True
    return False


def count_primes(n: int) -> int:
    """Number of primes strictly below ``n``."""
    if n < 3:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(n - 1) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n, i)))
    return sum(sieve)


def add_digits(num: int) -> int:
    """Digital root of ``num``."""
    if num >= 9 and num % 9 == 0:
        return 9
    remainder = abs(num) % 9
    return -remainder if num < 0 else remainder


def is_ugly(num: int) -> bool:
    """True when ``num`` is positive and has no prime factor besides 2, 3 and 5."""
    if num <= 0:
        return False
    for factor in (2, 3, 5):
        while num % factor == 0:
            num //= factor
    return num == 1


def can_win_nim(n: int) -> bool:
    """True when the first player wins Nim with ``n`` stones, taking one to three."""
    return n <= 3 or n % 4 != 0


def integer_break(n: int) -> int:
    """Largest product of positive integers summing to ``n`` (at least two parts for n > 1)."""
    if n < 1:
        raise ValueError("n must be positive")
    best = [0, 1] + [-1] * (n - 1)
    for i in range(2, n + 1):
        best[i] = max(max(j * (i - j), j * best[i - j]) for j in range(1, i))
    return best[n]


def arrange_coins(n: int) -> int:
    """Number of complete staircase rows that ``n`` coins can build."""
    if n < 0:
        raise ValueError("number of coins must not be negative")
    return (math.isqrt(8 * n + 1) - 1) // 2


def hamming_distance(x: int, y: int) -> int:
    """Number of differing bits between the 32-bit forms of ``x`` and ``y``."""
    return bin((x ^ y) & _MASK32).count("1")


def find_complement(num: int) -> int:
    """Flip every bit of ``num`` up to its highest set bit."""
    if num < 0:
        raise ValueError("number must not be negative")
    return ((1 << num.bit_length()) - 1) ^ num


def fib(n: int) -> int:
    """The ``n``-th Fibonacci number, with fib(0) = 0 and fib(1) = 1."""
    if n < 0:
        raise ValueError("index must not be negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def judge_square_sum(c: int) -> bool:
    """True when ``c`` is a sum of two squares of non-negative integers."""
    if c < 0:
        return False
    for a in range(math.isqrt(c) + 1):
        rest = c - a * a
        root = math.isqrt(rest)
        if root * root == rest:
            return True
    return False


def _is_self_dividing(number: int) -> bool:
    if number <= 0:
        # No digits are examined, so nothing rules the number out.
        return True
    return all(d != "0" and number % int(d) == 0 for d in str(number))


def self_dividing_numbers(left: int, right: int) -> list[int]:
    """Numbers in ``[left, right]`` divisible by each of their digits."""
    return [number for number in range(left, right + 1) if _is_self_dividing(number)]