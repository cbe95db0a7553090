from cubmap.cli import main

SCENE = "NO ./n\nSO ./s\nWE ./w\nEA ./e\nF 1,2,3\nC 4,5,6\n1111\n1N01\n1111\n"


def test_no_file(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Error\nNo file\n"


def test_loads_map(tmp_path, capsys):
    path = tmp_path / "scene.cub"
    path.write_text(SCENE)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Loaded map 4x3\n"


def test_reports_parse_error(tmp_path, capsys):
    path = tmp_path / "open.cub"
    path.write_text("F 1,2,3\n1111\n1N0 \n1111\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nMap not closed\n"


def test_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nothing.cub")]) == 1
    assert capsys.readouterr().out == "Error\nFile read error\n"