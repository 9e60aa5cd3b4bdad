import subprocess

import pytest


class FakeSevenZip:
    """Stands in for subprocess.run, writing a small archive on success"""

    def __init__(self, returncode=0):
        self.returncode = returncode
        self.calls = []

    def __call__(self, cmd, check=False, **kwargs):
        self.calls.append(list(cmd))
        if self.returncode == 0:
            archive = cmd[cmd.index("--") + 1]
            with open(archive, "wb") as f:
                f.write(b"7z\xbc\xaf\x27\x1c" + b"\0" * 26)
        return subprocess.CompletedProcess(cmd, self.returncode)

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def fake_7z(monkeypatch):
    fake = FakeSevenZip()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture
def seven_zip_exe(tmp_path):
    exe = tmp_path / "bin" / "7z"
    exe.parent.mkdir()
    exe.write_text("#!/bin/sh\n")
    return str(exe)


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "prefs.json"
    monkeypatch.setenv("SEVENZIP_COMPRESSOR_CONFIG", str(path))
    return path


@pytest.fixture
def sample_files(tmp_path):
    docs = tmp_path / "docs"
    docs.mkdir()
    a = docs / "a.txt"
    b = docs / "b.txt"
    a.write_text("alpha " * 100)
    b.write_text("beta " * 100)
    return [str(a), str(b)]
