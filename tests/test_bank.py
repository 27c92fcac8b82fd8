from estruturas.bank import BankQueue, main


def test_insert_then_serve_in_order():
    bank = BankQueue()
    result = bank.process("IIA")
    assert result.inserted == [1, 2]
    assert result.served == [1]
    assert list(bank.queue) == [2]


def test_tickets_continue_across_rounds():
    bank = BankQueue()
    bank.process("I")
    result = bank.process("ii")
    assert result.inserted == [2, 3]


def test_stop_still_applies_rest_of_line():
    bank = BankQueue()
    result = bank.process("SI")
    assert result.stop is True
    assert result.inserted == [1]


def test_serving_empty_queue_is_counted():
    bank = BankQueue()
    result = bank.process("AA")
    assert result.empty_attempts == 2
    assert result.served == []


def test_invalid_characters_are_reported():
    bank = BankQueue()
    result = bank.process("Ix?\n")
    assert result.invalid == ["x", "?"]
    assert result.stop is False


def test_main_runs_until_stop(monkeypatch, capsys):
    answers = iter(["II", "As"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Clientes inseridos = 2" in out
    assert "Clientes atendidos = 1" in out
    assert out.endswith("Fim do programa.\n")