from lighten.cli import main


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_prints_tokens_and_nodes(tmp_path, capsys):
    path = write(tmp_path, "prog.lt", "var x: int;")
    assert main([path]) == 0
    out = capsys.readouterr().out
    assert "TOKENS:" in out
    assert 'VAR("")<1>' in out
    assert 'IDENTIFIER("x")<1>' in out
    assert "NODES:" in out
    assert "NodeInstance(name: T; type: T; value: T; : T; )" in out
    assert out.index("TOKENS:") < out.index("NODES:")


def test_no_arguments():
    assert main([]) == 1


def test_wrong_extension(tmp_path):
    path = write(tmp_path, "prog.txt", "var x: int;")
    assert main([path]) == 1


def test_only_flags_counts_as_no_arguments():
    assert main(["-asm", "-obj"]) == 1


def test_flags_are_ignored(tmp_path, capsys):
    path = write(tmp_path, "prog.lt", "var x: int;")
    assert main(["-asm", path, "-obj"]) == 0
    assert "NODES:" in capsys.readouterr().out


def test_output_name_accepted(tmp_path):
    path = write(tmp_path, "prog.lt", "var x: int;")
    assert main([path, str(tmp_path / "out.exe")]) == 0


def test_compile_error_returns_one(tmp_path, capsys):
    path = write(tmp_path, "prog.lt", "var x: int;\nvar x: int;\n")
    assert main([path]) == 1
    out = capsys.readouterr().out
    assert "Redefinition Error" in out
    assert "NODES:" not in out


def test_tokenizer_error_reported(tmp_path, capsys):
    path = write(tmp_path, "prog.lt", "var s: string;\n\"open")
    assert main([path]) == 1
    assert "Closing double quote expected" in capsys.readouterr().out


def test_missing_file_reads_as_empty(tmp_path, capsys):
    assert main([str(tmp_path / "absent.lt")]) == 0
    out = capsys.readouterr().out
    assert "TOKENS:" in out
    assert "NodeInstance" not in out