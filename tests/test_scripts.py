"""Run generated scripts with /bin/sh and check their behaviour.

stdout is a pipe under subprocess, so scripts print instead of writing files.
`run_in_terminal` attaches the script to a pseudo-terminal to reach the
file-writing branch.
"""

import os
import subprocess
import sys

import pytest

from moho.ast.escape import shell_escape
from moho.ast.parser import parse_template
from moho.compiler import generate_script

pytestmark = pytest.mark.skipif(
    not os.path.exists("/bin/sh"), reason="needs /bin/sh"
)


def build(tmp_path, source, default_path=None, **defaults):
    t = parse_template(source)
    for v in t.variables:
        if v.name in defaults:
            v.default = shell_escape(defaults[v.name])
    path = tmp_path / "tpl.mh"
    path.write_text(generate_script("tpl", t, default_path))
    return path


def run(path, *args):
    return subprocess.run(
        ["/bin/sh", str(path), *args],
        capture_output=True,
        text=True,
        stdin=subprocess.DEVNULL,
    )


def run_in_terminal(path, *args, typed=b""):
    """Run a script with stdin and stdout on a pty, returning (code, output)."""
    import pty

    pid, fd = pty.fork()
    if pid == 0:
        try:
            os.execv("/bin/sh", ["/bin/sh", str(path), *args])
        finally:
            os._exit(127)

    if typed:
        os.write(fd, typed)
    output = b""
    while True:
        try:
            chunk = os.read(fd, 1024)
        except OSError:
            # EIO once the child has exited
            break
        if not chunk:
            break
        output += chunk
    _, status = os.waitpid(pid, 0)
    os.close(fd)
    return os.waitstatus_to_exitcode(status), output.decode(errors="replace")


needs_pty = pytest.mark.skipif(
    not sys.platform.startswith(("linux", "darwin")), reason="needs a pty"
)


class TestRender:
    def test_end_to_end(self, tmp_path):
        path = build(tmp_path, "hello {{ hi }} {{ hey | upper }} hii", hi="meooow")
        result = run(path, "--hey", "there")
        assert result.returncode == 0
        assert result.stdout == "hello meooow THERE hii\n"

    def test_flag_overrides_default(self, tmp_path):
        path = build(tmp_path, "{{ hi }}", hi="meooow")
        assert run(path, "--hi", "custom").stdout == "custom\n"

    def test_special_characters_survive(self, tmp_path):
        source = 'say "{{ a }}" for $HOME and `whoami`'
        path = build(tmp_path, source)
        result = run(path, "--a", "x")
        assert result.stdout == 'say "x" for $HOME and `whoami`\n'

    def test_values_are_not_reinterpreted(self, tmp_path):
        path = build(tmp_path, "[{{ a }}]")
        assert run(path, "--a", "$(echo pwned)").stdout == "[$(echo pwned)]\n"

    def test_filter_chain(self, tmp_path):
        path = build(tmp_path, "{{ a | lower | capitalize }}")
        assert run(path, "--a", "HELLO").stdout == "Hello\n"

    def test_snake_and_kebab(self, tmp_path):
        path = build(tmp_path, "{{ a | snake }} {{ a | kebab }}")
        assert run(path, "--a", "myComponent").stdout == "my_component my-component\n"


class TestArguments:
    def test_missing_value_fails(self, tmp_path):
        path = build(tmp_path, "{{ a }} {{ b }}")
        result = run(path, "--a", "1")
        assert result.returncode == 1
        assert result.stdout == "Error: No value provided for b\n"

    def test_implicit_name_not_needed_when_piped(self, tmp_path):
        path = build(tmp_path, "{{ a }}")
        assert run(path, "--a", "1").returncode == 0

    def test_explicit_name_required_when_piped(self, tmp_path):
        path = build(tmp_path, "{{ name }}")
        result = run(path)
        assert result.returncode == 1
        assert "No value provided for name" in result.stdout

    @pytest.mark.parametrize("flag", ["-h", "--help", "--unknown"])
    def test_help(self, tmp_path, flag):
        path = build(tmp_path, "{{ a }}", "./out/name.txt")
        result = run(path, flag)
        assert result.returncode == 0
        assert result.stdout.startswith("tpl:\ngenerates file at ./out/NAME.txt\n")
        assert "--a A" in result.stdout


class TestSelfDescription:
    def test_get_template(self, tmp_path):
        source = 'a "{{ b }}" $c'
        path = build(tmp_path, source)
        assert run(path, "get-template").stdout == source + "\n"

    def test_get_vars_skips_normal_block(self, tmp_path):
        path = build(tmp_path, "{{ a }}", "x/name.md", a="1")
        result = run(path, "get-vars")
        assert result.returncode == 0
        assert "Error" not in result.stdout
        assert 'default_path="x/name.md"' in result.stdout
        assert '[defaults]\na="1"\n' in result.stdout


@needs_pty
class TestTerminalOutput:
    def test_writes_named_file(self, tmp_path):
        target = tmp_path / "o" / "name.txt"
        path = build(tmp_path, "hi {{ a }}", str(target))

        code, output = run_in_terminal(path, "--a", "x", "--name", "f")

        written = tmp_path / "o" / "f.txt"
        assert code == 0, output
        assert written.read_text() == "hi x\n"
        assert f"created file at {tmp_path}/o/f.txt" in output
        assert "hi x" not in output

    def test_refuses_to_overwrite(self, tmp_path):
        (tmp_path / "f.txt").write_text("keep me\n")
        path = build(tmp_path, "hi {{ a }}", str(tmp_path / "name.txt"))

        code, output = run_in_terminal(path, "--a", "x", "--name", "f", typed=b"n\n")

        assert code != 0
        assert (tmp_path / "f.txt").read_text() == "keep me\n"
        assert "created file" not in output

    def test_implicit_name_required(self, tmp_path):
        path = build(tmp_path, "hi {{ a }}", str(tmp_path / "name.txt"))

        code, output = run_in_terminal(path, "--a", "x")

        assert code == 1
        assert "Error: No value provided for name" in output
        assert list(tmp_path.iterdir()) == [path]
