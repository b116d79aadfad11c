import io

from asciiplot.cli import main
from asciiplot.graph import render
from asciiplot.rpn import to_rpn
from asciiplot.tokenizer import tokenize


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def _rendered(expr):
    return render(to_rpn(tokenize(expr)))


def test_exit_command(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "exit\n")
    assert code == 0
    assert "Выход." in out
    assert out.startswith("ASCII Graph Plotter")


def test_quit_command(monkeypatch, capsys):
    _, out, _ = _run(monkeypatch, capsys, "quit\n")
    assert "Выход." in out


def test_end_of_input_reports_error(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, "")
    assert code == 0
    assert "Ошибка: не удалось прочитать ввод." in err


def test_empty_line_is_skipped(monkeypatch, capsys):
    _, out, err = _run(monkeypatch, capsys, "\nexit\n")
    assert "n/a" not in out
    assert err == ""


def test_unknown_character(monkeypatch, capsys):
    _, out, err = _run(monkeypatch, capsys, "@\nexit\n")
    assert "лексический разбор не удался" in err
    assert "n/a" in out


def test_unbalanced_parentheses(monkeypatch, capsys):
    _, out, err = _run(monkeypatch, capsys, "(x\nexit\n")
    assert "несбалансированные скобки" in err
    assert "n/a" in out


def test_evaluation_failure(monkeypatch, capsys):
    _, out, err = _run(monkeypatch, capsys, "2 3\nexit\n")
    assert "вычисление не удалось" in err
    assert "n/a" in out


def test_plot_without_saving(monkeypatch, capsys):
    _, out, err = _run(monkeypatch, capsys, "sin(x)\nn\nexit\n")
    assert _rendered("sin(x)") in out
    assert "Сохранить график в файл? (y/n): " in out
    assert err == ""


def test_plot_saved_to_named_file(monkeypatch, capsys, tmp_path):
    target = tmp_path / "plot.txt"
    _, out, _ = _run(monkeypatch, capsys, f"cos(x)\ny\n{target}\nexit\n")
    assert target.read_text(encoding="utf-8") == _rendered("cos(x)")
    assert f"График сохранён в файл: {target}" in out


def test_plot_saved_to_default_file(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    _, out, _ = _run(monkeypatch, capsys, "sin(x)\nY\n\nexit\n")
    assert (tmp_path / "graph.txt").read_text(encoding="utf-8") == _rendered("sin(x)")
    assert "График сохранён в файл: graph.txt" in out


def test_save_failure_is_reported(monkeypatch, capsys, tmp_path):
    target = tmp_path / "missing" / "plot.txt"
    _, out, _ = _run(monkeypatch, capsys, f"sin(x)\ny\n{target}\nexit\n")
    assert "Ошибка при сохранении файла!" in out
    assert not target.exists()