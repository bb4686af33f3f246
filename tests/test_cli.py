import io

import pytest

from airwatch.cli import average_main, main


def run_main(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_unknown_role(monkeypatch, capsys):
    code, out = run_main(monkeypatch, capsys, "PIRATE\n")
    assert code == 0
    assert "Rôle inconnu. Veuillez relancer le programme." in out
    assert "Rôle : " not in out


def test_government_choice_then_quit(monkeypatch, capsys):
    code, out = run_main(monkeypatch, capsys, "GOUVERNEMENT\n1\n6\n")
    assert code == 0
    assert "-> Moyenne dans une zone (GOUVERNEMENT)" in out
    assert out.rstrip().endswith("-> Fin du programme.")
    assert out.count("Rôle : GOUVERNEMENT") == 2


def test_role_is_case_insensitive(monkeypatch, capsys):
    _, out = run_main(monkeypatch, capsys, "admin\n6\n7\n")
    assert "-> Maintenance (ADMIN)" in out
    assert "-> Fin du programme." in out


def test_user_menu_quit_is_five(monkeypatch, capsys):
    _, out = run_main(monkeypatch, capsys, "UTILISATEUR\n4\n5\n")
    assert "-> Consultation des points" in out
    assert out.count("Rôle : UTILISATEUR") == 2


@pytest.mark.parametrize("choice", ["9", "0", "abc"])
def test_invalid_choice(monkeypatch, capsys, choice):
    _, out = run_main(monkeypatch, capsys, f"ADMIN\n{choice}\n7\n")
    assert "Choix invalide." in out
    assert out.count("Rôle : ADMIN") == 2


def test_end_of_input_stops_loop(monkeypatch, capsys):
    code, out = run_main(monkeypatch, capsys, "ADMIN\n2\n")
    assert code == 0
    assert "-> Estimation de qualité (ADMIN)" in out
    assert "-> Fin du programme." not in out


def test_average_main_with_arguments(capsys):
    code = average_main(["45.0", "4.0", "10", "0", "100"])
    lines = capsys.readouterr().out.splitlines()
    assert code == 0
    assert lines == [
        "Gaz : NO2, valeur : 0",
        "Gaz : O3, valeur : 0",
        "Gaz : PM10, valeur : 0",
        "Gaz : SO2, valeur : 0",
    ]


def test_average_main_prompts(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("45.0\n4.0\n10\n0\n100\n"))
    code = average_main()
    out = capsys.readouterr().out
    assert code == 0
    assert "Veuillez entrer une latitude :" in out
    assert "Gaz : O3, valeur : 0" in out


def test_average_main_rejects_bad_number(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("north\n"))
    code = average_main()
    assert code == 1
    assert "Gaz" not in capsys.readouterr().out