import yaml

from moho.lib.init import README_TEXT, scaffold


def test_scaffold_creates_config_and_readme(tmp_path):
    created = scaffold(tmp_path)

    moho_dir = tmp_path / ".moho"
    assert created == [moho_dir / "config.yaml", moho_dir / "readme.md"]
    assert (moho_dir / "readme.md").read_text() == README_TEXT

    with open(moho_dir / "config.yaml") as f:
        data = yaml.safe_load(f)
    assert data == {"version": 1}


def test_scaffold_leaves_existing_files(tmp_path):
    moho_dir = tmp_path / ".moho"
    moho_dir.mkdir()
    (moho_dir / "readme.md").write_text("mine\n")

    created = scaffold(tmp_path)

    assert created == [moho_dir / "config.yaml"]
    assert (moho_dir / "readme.md").read_text() == "mine\n"


def test_scaffold_twice_creates_nothing(tmp_path):
    scaffold(tmp_path)
    assert scaffold(tmp_path) == []
