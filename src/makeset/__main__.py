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
import click
import click_pathlib  # type: ignore

from .config import load_config
from .emitter import emit
from .exceptions import (
    ConfigurationError,
    MakesetError,
    RenderingError,
    SpecializationError,
)
from .formatter import build_mode
from .models import ElementSpec

PHASES: typing.Mapping[typing.Type[Exception], str] = {
    ConfigurationError: "configuration error",
    SpecializationError: "specialization error",
    RenderingError: "rendering error",
}


def describe_failure(e: MakesetError) -> str:
    for class_, phase in PHASES.items():
        if isinstance(e, class_):
            return f"{phase}: {e}"
    return str(e)


def read_element_spec(config_path: typing.Optional[pathlib.Path]) -> ElementSpec:
    try:
        if config_path is None or str(config_path) == "-":
            return load_config(click.get_text_stream("stdin"))
        with config_path.open("r", encoding="utf-8") as f:
            return load_config(f)
    except OSError as e:
        raise click.ClickException(f"configuration error: {e}") from e


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click_pathlib.Path(exists=True, dir_okay=False, allow_dash=True),
    default=None,
    help="Path of the configuration file; reads standard input when omitted.",
)
@click.option(
    "--output",
    "output_dir",
    type=click_pathlib.Path(file_okay=False),
    required=True,
    help="Output directory path.",
)
@click.option(
    "--line-length",
    type=int,
    default=black.DEFAULT_LINE_LENGTH,
    show_default=True,
)
@click.option("-v", "--verbose", is_flag=True, default=False)
def main(
    config_path: typing.Optional[pathlib.Path],
    output_dir: pathlib.Path,
    line_length: int,
    verbose: bool,
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        spec = read_element_spec(config_path)
        emit(spec, output_dir, mode=build_mode(line_length))
    except MakesetError as e:
        raise click.ClickException(describe_failure(e)) from e
    except OSError as e:
        raise click.ClickException(f"output error: {e}") from e


if __name__ == "__main__":
    main()
