from objstream.formats.elements import ElementIterator
from objstream.formats.importer import CallbackResult, Importer
from objstream.formats.parser import read


def test_default_callbacks_continue():
    importer = Importer()
    assert importer.comment(" hi") is CallbackResult.CONTINUE
    assert importer.error(None) is CallbackResult.CONTINUE
    assert importer.v(0.0, 0.0, 0.0, None) is CallbackResult.CONTINUE
    assert importer.vt(0.0, 0.0, None) is CallbackResult.CONTINUE
    assert importer.f(ElementIterator(["1"])) is CallbackResult.CONTINUE


def test_base_importer_reads_whole_file():
    summary = read("# c\nv 0 0 0\nbad\nvt 0 0\nf 1\n", Importer())
    assert summary.lines == 5
    assert not summary.stopped


def test_partial_override():
    class VertexCounter(Importer):
        def __init__(self):
            self.count = 0

        def v(self, x, y, z, w):
            self.count += 1
            return CallbackResult.CONTINUE

    counter = VertexCounter()
    read("v 0 0 0\nf 1 2 3\nv 1 1 1\nfoo\n", counter)
    assert counter.count == 2


def test_callback_returning_none_continues():
    class Forgetful(Importer):
        def __init__(self):
            self.seen = 0

        def v(self, x, y, z, w):
            self.seen += 1

    importer = Forgetful()
    summary = read("v 0 0 0\nv 1 1 1\n", importer)
    assert importer.seen == 2
    assert not summary.stopped
