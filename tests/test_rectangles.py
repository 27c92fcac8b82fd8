from estruturas.rectangles import Rectangle, format_rectangles, main


def test_area_of_unit_width():
    assert Rectangle(1.0, 5.0).area() == 5.0


def test_area_is_symmetric():
    assert Rectangle(2.5, 4.0).area() == Rectangle(4.0, 2.5).area()


def test_format_numbers_each_rectangle():
    text = format_rectangles([Rectangle(1.0, 2.0), Rectangle(3.0, 4.0)])
    assert "Retangulo 1:" in text
    assert "Retangulo 2:" in text
    assert text.index("Retangulo 1:") < text.index("Retangulo 2:")


def test_format_shows_two_decimals():
    text = format_rectangles([Rectangle(1.0, 5.0)])
    assert " -Base = 1.00m\n" in text
    assert " -Altura = 5.00m\n" in text
    assert " -Area = 5.00m2\n" in text


def test_format_empty_is_blank_line():
    assert format_rectangles([]) == "\n"


def test_main_prints_queue_in_order(monkeypatch, capsys):
    answers = iter(["2", "1 5", "3 1"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.index(" -Base = 1.00m") < out.index(" -Base = 3.00m")
    assert out.endswith("Fim do programa.\n")


def test_main_rejects_bad_input(monkeypatch):
    answers = iter(["1", "abc"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 1