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

from ..config import load_config
from ..exceptions import RenderingError
from ..models import Artifact, ArtifactKind
from ..specializer import specialize_artifacts


@pytest.fixture
def target():
    from ..formatter import format_source

    return format_source


def test_formats_generated_sources(target, point_config):
    spec = load_config(point_config)
    for artifact in specialize_artifacts(spec):
        src = target(spec, artifact)
        # formatting is stable
        assert target(spec, Artifact(artifact.kind, artifact.module_name, src)) == src


def test_line_length(target, string_config):
    from ..formatter import build_mode

    spec = load_config(string_config)
    artifact = Artifact(ArtifactKind.IMPLEMENTATION, "m", "x = [" + "1, " * 40 + "]\n")
    assert max(len(line) for line in target(spec, artifact).splitlines()) <= 88
    narrow = target(spec, artifact, build_mode(line_length=40))
    assert max(len(line) for line in narrow.splitlines()) <= 40


def test_invalid_implementation(target, string_config):
    string_config["type"] = "not a type"
    spec = load_config(string_config)
    artifact = specialize_artifacts(spec)[0]
    with pytest.raises(RenderingError) as excinfo:
        target(spec, artifact)
    assert excinfo.value.artifact is ArtifactKind.IMPLEMENTATION
    assert "stringset.py" in str(excinfo.value)
    assert "check the type, zero configuration fields" in str(excinfo.value)


def test_invalid_test_values(target, string_config):
    string_config["testValues"] = ["'a"] + string_config["testValues"][1:]
    spec = load_config(string_config)
    impl, test = specialize_artifacts(spec)
    assert target(spec, impl)
    with pytest.raises(RenderingError) as excinfo:
        target(spec, test)
    assert excinfo.value.artifact is ArtifactKind.TEST
    assert str(excinfo.value).startswith("test artifact: test_stringset.py")
    assert "testValues" in str(excinfo.value)
