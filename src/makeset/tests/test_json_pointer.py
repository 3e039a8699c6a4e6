# Copyright 2021 Open Collector, Inc,
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import pytest


@pytest.fixture
def target():
    from ..json_pointer import JSONPointer

    return JSONPointer


def test_root(target):
    assert str(target()) == "/"


@pytest.mark.parametrize(
    ("expected", "components"),
    [
        ("/package", ["package"]),
        ("/testValues/3", ["testValues", 3]),
        ("/a~1b/c~0d", ["a/b", "c~d"]),
    ],
)
def test_str(target, expected, components):
    p = target()
    for c in components:
        p = p / c
    assert str(p) == expected


def test_rejects_non_string_components(target):
    with pytest.raises(TypeError):
        target() / 1.5
    with pytest.raises(TypeError):
        target() / True


def test_equality(target):
    assert target() / "imports" / 0 == target(("imports", "0"))
    assert hash(target() / "imports") == hash(target(["imports"]))
    assert target() / "imports" != target() / "testImports"
    assert repr(target() / "zero") == "JSONPointer('/zero')"
