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

import functools
import logging
import typing

import jinja2

from ..config import (  # noqa: F401
    resolve_imports,
    resolve_test_imports,
    validate_element_spec,
)
from ..exceptions import SpecializationError
from ..models import Artifact, ArtifactKind, ElementSpec

logger = logging.getLogger(__name__)

IMPLEMENTATION_TEMPLATE = "set.py.jinja2"
TEST_TEMPLATE = "test_set.py.jinja2"


def render_as_docstring_text(v: str) -> str:
    return v.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')


@functools.lru_cache(maxsize=None)
def build_environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.PackageLoader(__name__, "templates"),
        undefined=jinja2.StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.filters.update(
        {
            "docstring": render_as_docstring_text,
        }
    )
    return env


def render_template(
    template_name: str, spec: ElementSpec, **context: typing.Any
) -> str:
    try:
        t = build_environment().get_template(template_name)
        return t.render(spec=spec, **context)
    except jinja2.TemplateError as e:
        raise SpecializationError(
            f"failed to render {template_name} for package {spec.package}: {e}"
        ) from e


def specialize(spec: ElementSpec) -> typing.Tuple[str, typing.Optional[str]]:
    validate_element_spec(spec)

    imports = resolve_imports(spec)
    logger.debug("imports for %s: %s", spec.package, ", ".join(imports))
    impl_text = render_template(IMPLEMENTATION_TEMPLATE, spec, imports=imports)

    test_text: typing.Optional[str] = None
    if spec.test_values:
        test_text = render_template(
            TEST_TEMPLATE, spec, test_imports=resolve_test_imports(spec)
        )
    else:
        logger.debug("no test values for %s, skipping the test suite", spec.package)

    return impl_text, test_text


def specialize_artifacts(spec: ElementSpec) -> typing.Sequence[Artifact]:
    impl_text, test_text = specialize(spec)
    artifacts = [
        Artifact(
            kind=ArtifactKind.IMPLEMENTATION,
            module_name=spec.module_name,
            text=impl_text,
        )
    ]
    if test_text is not None:
        artifacts.append(
            Artifact(
                kind=ArtifactKind.TEST,
                module_name=spec.test_module_name,
                text=test_text,
            )
        )
    return artifacts
