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

import dataclasses
import typing

from .utils import StrEnum


class ArtifactKind(StrEnum):
    IMPLEMENTATION = "implementation"
    TEST = "test"


@dataclasses.dataclass(frozen=True)
class ElementSpec:
    package: str
    type_: str
    zero: str
    decl: typing.Optional[str] = None
    less: typing.Optional[str] = None
    to_string: typing.Optional[str] = None
    imports: typing.Tuple[str, ...] = ()
    test_imports: typing.Tuple[str, ...] = ()
    transforms: bool = False
    test_values: typing.Tuple[str, ...] = ()
    description: typing.Optional[str] = None

    @property
    def module_name(self) -> str:
        return self.package

    @property
    def test_module_name(self) -> str:
        return f"test_{self.package}"


@dataclasses.dataclass(frozen=True)
class Artifact:
    kind: ArtifactKind
    module_name: str
    text: str

    @property
    def filename(self) -> str:
        return f"{self.module_name}.py"
