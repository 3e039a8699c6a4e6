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

import sys
import types
import typing

import pytest

STRING_CONFIG: typing.Mapping[str, typing.Any] = {
    "description": "A set of strings.",
    "package": "stringset",
    "type": "str",
    "zero": '""',
    "transforms": True,
    "testValues": [f'"{c}"' for c in "abcdefghij"],
}

INT_CONFIG: typing.Mapping[str, typing.Any] = {
    "package": "intset",
    "type": "int",
    "zero": 0,
    "testValues": list(range(10)),
}

POINT_CONFIG: typing.Mapping[str, typing.Any] = {
    "package": "pointset",
    "type": "Point",
    "zero": "Point(0, 0)",
    "decl": 'typing.NamedTuple("Point", [("x", int), ("y", int)])',
    "less": """
        if x.x == y.x:
            return x.y < y.y
        return x.x < y.x
    """,
    "toString": 'return f"({x.x}, {x.y})"',
    "transforms": True,
    "testValues": [
        "Point(0, 0)",
        "Point(0, 1)",
        "Point(0, 5)",
        "Point(1, 0)",
        "Point(1, 2)",
        "Point(2, 2)",
        "Point(3, -1)",
        "Point(3, 4)",
        "Point(7, 0)",
        "Point(9, 9)",
    ],
}


@pytest.fixture
def string_config() -> typing.Dict[str, typing.Any]:
    return dict(STRING_CONFIG)


@pytest.fixture
def int_config() -> typing.Dict[str, typing.Any]:
    return dict(INT_CONFIG)


@pytest.fixture
def point_config() -> typing.Dict[str, typing.Any]:
    return dict(POINT_CONFIG)


@pytest.fixture
def load_module(monkeypatch):
    def _(name: str, src: str) -> types.ModuleType:
        module = types.ModuleType(name)
        module.__file__ = f"{name}.py"
        monkeypatch.setitem(sys.modules, name, module)
        exec(compile(src, module.__file__, "exec"), module.__dict__)
        return module

    return _
