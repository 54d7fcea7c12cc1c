"""Shared fixtures: an importer that records every callback in order."""

import pytest

from objstream.formats.importer import CallbackResult, Importer


class RecordingImporter(Importer):
    def __init__(self, stop_on=None):
        self.events = []
        self.comments = []
        self.errors = []
        self.verts = []
        self.texcoords = []
        self.faces = []
        self.stop_on = stop_on

    def _record(self, name):
        self.events.append(name)
        return CallbackResult.STOP if name == self.stop_on else CallbackResult.CONTINUE

    def comment(self, text):
        self.comments.append(text)
        return self._record("comment")

    def error(self, error):
        self.errors.append((error.type, error.line.number, error.line.text))
        return self._record("error")

    def v(self, x, y, z, w):
        self.verts.append((x, y, z, w))
        return self._record("v")

    def vt(self, u, v, w):
        self.texcoords.append((u, v, w))
        return self._record("vt")

    def f(self, elements):
        self.faces.append(list(elements))
        return self._record("f")


@pytest.fixture
def importer():
    return RecordingImporter()


@pytest.fixture
def cube_obj(tmp_path):
    path = tmp_path / "cube_0001.obj"
    path.write_text(
        "# unit cube\n"
        "v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\n"
        "v 0 0 1\nv 1 0 1\nv 1 1 1\nv 0 1 1\n"
        "vt 0 0\nvt 1 0\nvt 1 1\n"
        "f 1 2 3 4\nf 5 6 7 8\nf 1 2 6 5\n"
        "f 2 3 7 6\nf 3 4 8 7\nf 4 1 5 8\n",
        encoding="utf-8",
    )
    return path
