import io
import random

import pytest

from estruturas.search import (
    SORTED_VALUES,
    UNSORTED_VALUES,
    binary_search,
    binary_search_recursive,
    linear_search,
    main,
)


@pytest.mark.parametrize("target", UNSORTED_VALUES)
def test_linear_search_finds_first_occurrence(target):
    index = linear_search(UNSORTED_VALUES, target)
    assert UNSORTED_VALUES[index] == target
    assert target not in UNSORTED_VALUES[:index]


@pytest.mark.parametrize("target", [0, 11, -3])
def test_linear_search_missing(target):
    assert linear_search(UNSORTED_VALUES, target) is None


def test_linear_search_empty():
    assert linear_search([], 1) is None


@pytest.mark.parametrize("target", SORTED_VALUES)
def test_binary_search_hits(target):
    index = binary_search(SORTED_VALUES, target)
    assert SORTED_VALUES[index] == target


@pytest.mark.parametrize("target", [0, 11, 100])
def test_binary_search_misses(target):
    assert binary_search(SORTED_VALUES, target) is None


def test_binary_search_empty():
    assert binary_search([], 5) is None


def test_binary_search_random_lists():
    rng = random.Random(7)
    for _ in range(50):
        values = sorted(rng.sample(range(200), rng.randint(1, 40)))
        for target in values:
            assert values[binary_search(values, target)] == target
        missing = next(x for x in range(200) if x not in values)
        assert binary_search(values, missing) is None


@pytest.mark.parametrize("target", SORTED_VALUES)
def test_recursive_agrees_with_iterative(target):
    index = binary_search_recursive(SORTED_VALUES, target)
    assert SORTED_VALUES[index] == target


def test_recursive_missing():
    assert binary_search_recursive(SORTED_VALUES, 42) is None


def test_recursive_respects_bounds():
    values = list(SORTED_VALUES)
    assert binary_search_recursive(values, values[0], 1, len(values) - 1) is None
    index = binary_search_recursive(values, values[5], 3, 7)
    assert values[index] == values[5]


def test_recursive_rejects_bad_bounds():
    with pytest.raises(ValueError):
        binary_search_recursive(SORTED_VALUES, 3, 0, len(SORTED_VALUES))
    with pytest.raises(ValueError):
        binary_search_recursive(SORTED_VALUES, 3, -1, 4)


def test_recursive_empty():
    assert binary_search_recursive([], 1) is None


def test_main_found(capsys):
    assert main(["5"]) == 0
    out = capsys.readouterr().out
    expected = binary_search(SORTED_VALUES, 5)
    assert f"Numero encontrado na posicao {expected}" in out


def test_main_not_found(capsys):
    assert main(["42", "--method", "linear"]) == 0
    assert "Numero nao encontrado" in capsys.readouterr().out


def test_main_recursive_trace(capsys):
    assert main(["7", "--method", "recursive"]) == 0
    out = capsys.readouterr().out
    assert "Inicio = 1 |" in out
    assert "Numero encontrado na posicao" in out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Digite um numero: " in out
    assert f"posicao {binary_search(SORTED_VALUES, 3)}" in out


def test_main_invalid_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1