"""Tests for the template store, including reading scripts back."""

import os
import stat

import pytest

from moho.ast.escape import shell_escape
from moho.ast.parser import parse_template
from moho.compiler import generate_script
from moho.exceptions import (
    InvalidTemplateNameError,
    TemplateNotFoundError,
    TemplateReadError,
)
from moho.lib.store import TemplateStore

needs_sh = pytest.mark.skipif(not os.path.exists("/bin/sh"), reason="needs /bin/sh")


@pytest.fixture
def store(tmp_path):
    return TemplateStore(tmp_path / ".moho")


class TestFiles:
    def test_save_creates_executable(self, store):
        path = store.save("hello", "#!/bin/sh\n")

        assert path == store.root / "hello.mh"
        assert path.read_text() == "#!/bin/sh\n"
        assert stat.S_IMODE(path.stat().st_mode) == 0o755

    def test_names_sorted_and_filtered(self, store):
        store.save("zeta", "")
        store.save("alpha", "")
        (store.root / "notes.txt").write_text("")
        (store.root / "dir.mh").mkdir()

        assert store.names() == ["alpha", "zeta"]

    def test_names_without_directory(self, store):
        assert store.names() == []

    def test_exists_and_delete(self, store):
        store.save("gone", "")
        assert store.exists("gone")

        store.delete("gone")
        assert not store.exists("gone")

    def test_delete_missing_raises(self, store):
        with pytest.raises(TemplateNotFoundError):
            store.delete("missing")

    @pytest.mark.parametrize("name", ["", "a/b", ".hidden"])
    def test_invalid_names(self, store, name):
        with pytest.raises(InvalidTemplateNameError):
            store.path_for(name)


@needs_sh
class TestReadBack:
    def _save(self, store, source, default_path=None, **meta):
        t = parse_template(source)
        for v in t.variables:
            if v.name in meta:
                default, description = meta[v.name]
                v.default = shell_escape(default) if default else None
                v.description = shell_escape(description) if description else None
        store.save("tpl", generate_script("tpl", t, default_path))

    def test_read_template(self, store):
        source = "hello {{ hi }} {{ hey | upper }} hii"
        self._save(store, source)
        assert store.read_template("tpl") == source

    def test_read_template_with_quotes_and_dollars(self, store):
        source = 'say "{{ a }}" costs $5 `now`\nsecond line'
        self._save(store, source)
        assert store.read_template("tpl") == source

    def test_read_vars(self, store):
        self._save(
            store,
            "{{ hi }} {{ hey }}",
            "./folder/name.rs",
            hi=("meooow", "this is a description"),
            hey=(None, 'a "quoted" $desc'),
        )
        decoded = store.read_vars("tpl")

        assert decoded.default_path == "./folder/name.rs"
        assert decoded.defaults == {"hi": "meooow"}
        assert decoded.descriptions == {
            "hi": "this is a description",
            "hey": 'a "quoted" $desc',
        }

    def test_read_missing_raises(self, store):
        with pytest.raises(TemplateNotFoundError):
            store.read_template("missing")

    def test_read_broken_script_raises(self, store):
        store.save("broken", "exit 3\n")
        with pytest.raises(TemplateReadError):
            store.read_vars("broken")

    def test_does_not_need_exec_bit(self, store):
        self._save(store, "{{ a }}")
        store.path_for("tpl").chmod(0o644)
        assert store.read_template("tpl") == "{{ a }}"
