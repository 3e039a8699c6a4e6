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

import logging
import typing

import black
from black.parsing import InvalidInput

from .exceptions import RenderingError
from .models import Artifact, ArtifactKind, ElementSpec

logger = logging.getLogger(__name__)

# configuration fields whose text ends up verbatim in each artifact
ARTIFACT_FIELDS: typing.Mapping[ArtifactKind, typing.Sequence[typing.Tuple[str, str]]] = {
    ArtifactKind.IMPLEMENTATION: (
        ("type_", "type"),
        ("zero", "zero"),
        ("decl", "decl"),
        ("less", "less"),
        ("to_string", "toString"),
        ("imports", "imports"),
    ),
    ArtifactKind.TEST: (
        ("type_", "type"),
        ("zero", "zero"),
        ("test_values", "testValues"),
        ("test_imports", "testImports"),
    ),
}


def build_mode(line_length: int = black.DEFAULT_LINE_LENGTH) -> black.Mode:
    return black.Mode(
        line_length=line_length,
        string_normalization=True,
    )


def suspect_fields(spec: ElementSpec, kind: ArtifactKind) -> typing.Sequence[str]:
    return [
        prop_name for attr, prop_name in ARTIFACT_FIELDS[kind] if getattr(spec, attr)
    ]


def format_source(
    spec: ElementSpec,
    artifact: Artifact,
    mode: typing.Optional[black.Mode] = None,
) -> str:
    if mode is None:
        mode = build_mode()
    try:
        src = black.format_str(artifact.text, mode=mode)
        compile(src, artifact.filename, "exec")
    except (InvalidInput, SyntaxError) as e:
        fields = ", ".join(suspect_fields(spec, artifact.kind))
        raise RenderingError(
            f"{artifact.filename} is not valid Python ({e}); check the {fields}"
            " configuration fields",
            artifact=artifact.kind,
        ) from e
    logger.debug("formatted %s (%d bytes)", artifact.filename, len(src))
    return src
