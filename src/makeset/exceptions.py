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

from .json_pointer import JSONPointer

if typing.TYPE_CHECKING:
    from .models import ArtifactKind


class MakesetError(Exception):
    pass


class ConfigurationError(MakesetError):
    def __init__(self, message: str, *, ctx: JSONPointer) -> None:
        super().__init__(message, ctx)

    @property
    def message(self) -> str:
        return typing.cast(str, self.args[0])

    @property
    def ctx(self) -> JSONPointer:
        return typing.cast(JSONPointer, self.args[1])

    def __str__(self):
        return f"{self.ctx}: {self.message}"


class SpecializationError(MakesetError):
    pass


class RenderingError(MakesetError):
    def __init__(self, message: str, *, artifact: "ArtifactKind") -> None:
        super().__init__(message, artifact)

    @property
    def message(self) -> str:
        return typing.cast(str, self.args[0])

    @property
    def artifact(self) -> "ArtifactKind":
        return typing.cast("ArtifactKind", self.args[1])

    def __str__(self):
        return f"{self.artifact} artifact: {self.message}"
