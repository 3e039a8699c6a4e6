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

import typing


def quote_json_pointer(v: str) -> str:
    return v.replace("~", "~0").replace("/", "~1")


class JSONPointer:
    path: typing.Tuple[str, ...]

    def __truediv__(self, c: typing.Any) -> "JSONPointer":
        if isinstance(c, bool) or not isinstance(c, (str, int)):
            raise TypeError(f"right operand must be a string or an index, got {c!r}")
        return self.__class__(self.path + (str(c),))

    def __str__(self) -> str:
        return (
            "".join(f"/{quote_json_pointer(c)}" for c in self.path)
            if self.path
            else "/"
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"

    def __eq__(self, that: typing.Any) -> bool:
        return isinstance(that, self.__class__) and that.path == self.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __init__(self, path: typing.Iterable[str] = ()) -> None:
        self.path = tuple(path)
