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
import pathlib
import typing

import black

from .formatter import build_mode, format_source
from .models import ElementSpec
from .specializer import specialize_artifacts

logger = logging.getLogger(__name__)


def emit(
    spec: ElementSpec,
    outdir: pathlib.Path,
    mode: typing.Optional[black.Mode] = None,
) -> typing.Sequence[pathlib.Path]:
    if mode is None:
        mode = build_mode()

    # every artifact is rendered and formatted before anything touches the disk
    sources = [
        (outdir / artifact.filename, format_source(spec, artifact, mode))
        for artifact in specialize_artifacts(spec)
    ]

    outdir.mkdir(parents=True, exist_ok=True)
    written: typing.List[pathlib.Path] = []
    try:
        for path, src in sources:
            # tracked before writing so that a truncated file is removed too
            written.append(path)
            path.write_text(src, encoding="utf-8")
            logger.info("wrote %s", path)
    except OSError:
        for path in written:
            logger.warning("removing %s after a failed run", path)
            path.unlink(missing_ok=True)
        raise
    return written
