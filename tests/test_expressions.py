import pytest

from estruturas.expressions import (
    SymbolKind,
    is_balanced,
    main,
    opening_for,
    symbol_kind,
)


@pytest.mark.parametrize(
    "closing, opening", [(")", "("), ("]", "["), ("}", "{")]
)
def test_opening_for_pairs(closing, opening):
    assert opening_for(closing) == opening


@pytest.mark.parametrize("char", ["(", "a", "+"])
def test_opening_for_rejects_non_closing(char):
    with pytest.raises(ValueError):
        opening_for(char)


@pytest.mark.parametrize("char", "([{")
def test_symbol_kind_open(char):
    assert symbol_kind(char) is SymbolKind.OPEN
    assert symbol_kind(char) == 1


@pytest.mark.parametrize("char", ")]}")
def test_symbol_kind_close(char):
    assert symbol_kind(char) is SymbolKind.CLOSE
    assert symbol_kind(char) == -1


@pytest.mark.parametrize("char", "1x+ ")
def test_symbol_kind_other(char):
    assert symbol_kind(char) == 0


@pytest.mark.parametrize(
    "expression",
    ["", "1 + 2", "(1 + 2)", "{[(1 + 2) * 3] - 4}", "()[]{}", "((a))"],
)
def test_balanced_expressions(expression):
    assert is_balanced(expression) is True


@pytest.mark.parametrize(
    "expression",
    ["(", ")", "(]", "([)]", "{[(1 + 2) * 3 - 4}", "(()", "())"],
)
def test_unbalanced_expressions(expression):
    assert is_balanced(expression) is False


def test_main_correct(capsys):
    assert main(["{[1 + (2 * 3)]}"]) == 0
    assert capsys.readouterr().out.strip() == "A expressao esta correta"


def test_main_incorrect(capsys):
    assert main(["(1 + 2]"]) == 0
    assert capsys.readouterr().out.strip() == "A expressao esta incorreta"


def test_main_prompts(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "[(x)]")
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "A expressao esta correta"