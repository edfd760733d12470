import pytest

from algokit.recursion import (
    count_down,
    count_up,
    factorial,
    fibonacci,
    first_occurrence,
    is_sorted,
    last_occurrence,
    move_x_to_end,
    power,
    remove_consecutive_duplicates,
    replace_pi,
    reverse_string,
    sum_to,
    tower_of_hanoi,
)


def test_sum_to_base_and_step():
    assert sum_to(0) == 0
    for n in range(1, 20):
        assert sum_to(n) - sum_to(n - 1) == n


def test_sum_to_rejects_negative():
    with pytest.raises(ValueError):
        sum_to(-1)


def test_power_base_and_step():
    for n in (-3, 0, 2, 7):
        assert power(n, 0) == 1
        for p in range(6):
            assert power(n, p + 1) == n * power(n, p)


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


def test_factorial_base_and_step():
    assert factorial(0) == 1
    assert factorial(1) == 1
    for n in range(2, 15):
        assert factorial(n) == n * factorial(n - 1)


def test_factorial_rejects_negative():
    with pytest.raises(ValueError):
        factorial(-2)


def test_fibonacci_base_and_recurrence():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    for n in range(2, 30):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_rejects_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_is_sorted():
    assert is_sorted([1, 2, 3, 4, 5, 6, 7, 8, 9]) is True
    assert is_sorted([1, 1]) is False
    assert is_sorted([2, 1]) is False


def test_count_up_and_down():
    assert count_up(5) == list(range(1, 6))
    assert count_down(5) == list(reversed(count_up(5)))
    assert count_down(1) == [1]


def test_count_rejects_zero():
    with pytest.raises(ValueError):
        count_up(0)
    with pytest.raises(ValueError):
        count_down(0)


def test_first_and_last_occurrence():
    values = [4, 2, 1, 2, 5, 2, 7]
    first = first_occurrence(values, 2)
    last = last_occurrence(values, 2)
    assert values[first] == 2 and 2 not in values[:first]
    assert values[last] == 2 and 2 not in values[last + 1 :]
    assert first < last


def test_occurrence_missing_key():
    assert first_occurrence([1, 2], 9) is None
    assert last_occurrence([1, 2], 9) is None


def test_reverse_string_round_trip():
    word = "mandeep"
    reversed_word = reverse_string(word)
    assert reverse_string(reversed_word) == word
    assert reversed_word[0] == word[-1]
    assert sorted(reversed_word) == sorted(word)


def test_replace_pi():
    result = replace_pi("pipipiiiiiii")
    assert result.count("3.14 ") == 3
    assert "pi" not in result
    assert result.endswith("i" * 6)


def test_tower_of_hanoi_moves_are_legal():
    n = 4
    moves = tower_of_hanoi(n, "A", "C", "B")
    assert len(moves) == 2**n - 1
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for src, dest in moves:
        disk = pegs[src].pop()
        assert not pegs[dest] or pegs[dest][-1] > disk
        pegs[dest].append(disk)
    assert pegs["C"] == list(range(n, 0, -1))


def test_tower_of_hanoi_zero_disks():
    assert tower_of_hanoi(0, "A", "C", "B") == []


def test_remove_consecutive_duplicates():
    assert remove_consecutive_duplicates("aaaaaabbbbbbbbeeeeeedddddd") == "abed"
    assert remove_consecutive_duplicates("aba") == "aba"


def test_move_x_to_end():
    text = "axbxxcx"
    result = move_x_to_end(text)
    assert sorted(result) == sorted(text)
    assert "x" not in result.rstrip("x")
    assert result.replace("x", "") == text.replace("x", "")