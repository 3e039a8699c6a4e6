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

import ast
import collections.abc
import keyword
import logging
import typing

import yaml

from .exceptions import ConfigurationError
from .json_pointer import JSONPointer
from .models import ElementSpec
from .utils import UNSPECIFIED, Unspecified, normalize_body, sorted_unique

logger = logging.getLogger(__name__)

TEST_VALUE_COUNT = 10

REQUIRED_FIELDS = (
    ("package", "package"),
    ("type_", "type"),
    ("zero", "zero"),
)

# namespaces the static portions of the templates always refer to
BASE_IMPORTS = ("collections.abc", "functools", "typing")
BASE_TEST_IMPORTS = ("pytest",)

# needed by the generic stringifier used when no toString body is configured
DISPLAY_IMPORT = "pprint"

# module-level names bound by the generated set module
GENERATED_NAMES = frozenset(
    (
        "Keyer",
        "Set",
        "contains",
        "from_keys",
        "from_values",
        "index",
        "new",
        "new_sized",
        "_compare",
        "_is_collection",
        "_is_element",
        "_is_less",
        "_keys_of",
        "_sort_key",
        "_to_string",
        "_wrap",
    )
)

# module-level helpers bound by the generated test module
GENERATED_TEST_NAMES = frozenset(
    ("ListKeyer", "TEST_VALUES", "ZERO", "key_pos", "keys_of", "set_of")
)


def resolve_imports(spec: ElementSpec) -> typing.Tuple[str, ...]:
    return sorted_unique(
        BASE_IMPORTS,
        spec.imports,
        () if spec.to_string else (DISPLAY_IMPORT,),
    )


def resolve_test_imports(spec: ElementSpec) -> typing.Tuple[str, ...]:
    return sorted_unique(BASE_TEST_IMPORTS, spec.test_imports)


def bound_import_names(spec: ElementSpec) -> typing.FrozenSet[str]:
    """Returns the top-level names bound by the import statements of the
    generated modules, e.g. ``collections`` for ``import collections.abc``.
    """
    return frozenset(
        name.split(".")[0]
        for name in resolve_imports(spec) + resolve_test_imports(spec)
    )


def validate_as_string(ctx: JSONPointer, v: typing.Any) -> str:
    if not isinstance(v, str):
        raise ConfigurationError(f"value must be a string, got {v!r}", ctx=ctx)
    return v


def validate_as_boolean(ctx: JSONPointer, v: typing.Any) -> bool:
    if not isinstance(v, bool):
        raise ConfigurationError(f"value must be a boolean, got {v!r}", ctx=ctx)
    return v


def validate_as_array(ctx: JSONPointer, v: typing.Any) -> typing.Sequence[typing.Any]:
    if isinstance(v, (str, bytes)) or not isinstance(v, collections.abc.Sequence):
        raise ConfigurationError(f"value must be an array, got {v!r}", ctx=ctx)
    return v


def validate_as_object(
    ctx: JSONPointer, v: typing.Any
) -> typing.Mapping[str, typing.Any]:
    if not isinstance(v, collections.abc.Mapping):
        raise ConfigurationError(f"value must be an object, got {v!r}", ctx=ctx)
    return v


def validate_as_literal(ctx: JSONPointer, v: typing.Any) -> str:
    # strings are taken as source text, other scalars are spelled with repr
    if isinstance(v, str):
        if not v.strip():
            raise ConfigurationError("literal must not be blank", ctx=ctx)
        return v.strip()
    if isinstance(v, (bool, int, float)):
        return repr(v)
    raise ConfigurationError(
        f"value must be a string, a number or a boolean, got {v!r}", ctx=ctx
    )


@typing.overload
def get_as_str(
    ctx: JSONPointer,
    m: typing.Mapping[str, typing.Any],
    prop_name: str,
    default: typing.Union[str, Unspecified] = UNSPECIFIED,
) -> str:
    ...  # pragma: nocover


@typing.overload
def get_as_str(
    ctx: JSONPointer,
    m: typing.Mapping[str, typing.Any],
    prop_name: str,
    default: None,
) -> typing.Optional[str]:
    ...  # pragma: nocover


def get_as_str(
    ctx: JSONPointer,
    m: typing.Mapping[str, typing.Any],
    prop_name: str,
    default: typing.Union[str, None, Unspecified] = UNSPECIFIED,
) -> typing.Optional[str]:
    sub_ctx = ctx / prop_name
    v = m.get(prop_name, UNSPECIFIED)
    if v is UNSPECIFIED:
        if default is UNSPECIFIED:
            raise ConfigurationError("no such property", ctx=sub_ctx)
        v = default
    return validate_as_string(sub_ctx, v) if v is not None else None


def get_as_bool(
    ctx: JSONPointer,
    m: typing.Mapping[str, typing.Any],
    prop_name: str,
    default: bool = False,
) -> bool:
    sub_ctx = ctx / prop_name
    v = m.get(prop_name)
    if v is None:
        return default
    return validate_as_boolean(sub_ctx, v)


def get_as_array(
    ctx: JSONPointer,
    m: typing.Mapping[str, typing.Any],
    prop_name: str,
    validator: typing.Callable[[JSONPointer, typing.Any], str],
) -> typing.Sequence[str]:
    sub_ctx = ctx / prop_name
    v = m.get(prop_name)
    if v is None:
        return []
    return [
        validator(sub_ctx / i, e) for i, e in enumerate(validate_as_array(sub_ctx, v))
    ]


def contains_return(nodes: typing.Iterable[ast.AST]) -> bool:
    for node in nodes:
        if isinstance(node, ast.Return):
            return True
        # a return inside a nested scope does not return from the body
        if isinstance(
            node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef, ast.Lambda)
        ):
            continue
        if contains_return(ast.iter_child_nodes(node)):
            return True
    return False


def validate_as_function_body(ctx: JSONPointer, body: str) -> str:
    try:
        tree = ast.parse(body)
    except SyntaxError as e:
        raise ConfigurationError(f"not valid Python: {e.msg}", ctx=ctx) from e
    if not contains_return(tree.body):
        raise ConfigurationError(
            "body must be an expression or contain a return statement", ctx=ctx
        )
    return body


def get_as_body(
    ctx: JSONPointer,
    m: typing.Mapping[str, typing.Any],
    prop_name: str,
) -> typing.Optional[str]:
    """Returns the function body stored under prop_name. A body consisting of
    a single expression is turned into a return of that expression.
    """
    v = get_as_str(ctx, m, prop_name, default=None)
    if v is None or not v.strip():
        return None
    sub_ctx = ctx / prop_name
    body = normalize_body(v)
    try:
        tree = ast.parse(body)
    except SyntaxError as e:
        raise ConfigurationError(f"not valid Python: {e.msg}", ctx=sub_ctx) from e
    if len(tree.body) == 1 and isinstance(tree.body[0], ast.Expr):
        body = f"return {body}"
    return validate_as_function_body(sub_ctx, body)


def get_as_literal(
    ctx: JSONPointer,
    m: typing.Mapping[str, typing.Any],
    prop_name: str,
) -> str:
    v = m.get(prop_name)
    if v is None:
        return ""
    return validate_as_literal(ctx / prop_name, v)


def optional_text(v: typing.Optional[str]) -> typing.Optional[str]:
    if v is None or not v.strip():
        return None
    return v.strip()


def validate_element_spec(
    spec: ElementSpec, ctx: typing.Optional[JSONPointer] = None
) -> ElementSpec:
    if ctx is None:
        ctx = JSONPointer()
    for attr, prop_name in REQUIRED_FIELDS:
        if not getattr(spec, attr):
            raise ConfigurationError(f"missing {prop_name}", ctx=ctx / prop_name)
    if not spec.package.isidentifier() or keyword.iskeyword(spec.package):
        raise ConfigurationError(
            f"package must be a Python identifier, got {spec.package!r}",
            ctx=ctx / "package",
        )
    if spec.decl is not None and not spec.type_.isidentifier():
        raise ConfigurationError(
            f"type must be a plain name when decl is given, got {spec.type_!r}",
            ctx=ctx / "type",
        )
    import_names = bound_import_names(spec)
    type_root = spec.type_.split(".")[0]
    test_names = GENERATED_TEST_NAMES if spec.test_values else frozenset()
    if type_root in GENERATED_NAMES or (
        spec.decl is not None
        and (spec.type_ in test_names or spec.type_ in import_names)
    ):
        raise ConfigurationError(
            f"type {spec.type_!r} collides with a name the generated code defines",
            ctx=ctx / "type",
        )
    if spec.package in import_names:
        raise ConfigurationError(
            f"package {spec.package!r} collides with an imported module",
            ctx=ctx / "package",
        )
    if spec.less is not None:
        validate_as_function_body(ctx / "less", spec.less)
    if spec.to_string is not None:
        validate_as_function_body(ctx / "toString", spec.to_string)
    if spec.test_values and len(spec.test_values) != TEST_VALUE_COUNT:
        raise ConfigurationError(
            f"exactly {TEST_VALUE_COUNT} test values are required,"
            f" got {len(spec.test_values)}",
            ctx=ctx / "testValues",
        )
    for i, name in enumerate(spec.imports):
        validate_module_name(ctx / "imports" / i, name)
    for i, name in enumerate(spec.test_imports):
        validate_module_name(ctx / "testImports" / i, name)
    return spec


def validate_module_name(ctx: JSONPointer, v: typing.Any) -> str:
    name = validate_as_string(ctx, v).strip()
    if not name or not all(c.isidentifier() for c in name.split(".")):
        raise ConfigurationError(f"not a module name: {v!r}", ctx=ctx)
    return name


def build_element_spec_from_repr(
    ctx: JSONPointer, spec_repr: typing.Any
) -> ElementSpec:
    config_repr = validate_as_object(ctx, spec_repr)
    description = get_as_str(ctx, config_repr, "description", default=None)
    if description is None:
        description = get_as_str(ctx, config_repr, "desc", default=None)
    spec = ElementSpec(
        package=get_as_str(ctx, config_repr, "package", default="").strip(),
        type_=get_as_str(ctx, config_repr, "type", default="").strip(),
        zero=get_as_literal(ctx, config_repr, "zero"),
        decl=optional_text(get_as_str(ctx, config_repr, "decl", default=None)),
        less=get_as_body(ctx, config_repr, "less"),
        to_string=get_as_body(ctx, config_repr, "toString"),
        imports=sorted_unique(
            get_as_array(ctx, config_repr, "imports", validate_module_name)
        ),
        test_imports=sorted_unique(
            get_as_array(ctx, config_repr, "testImports", validate_module_name)
        ),
        transforms=get_as_bool(ctx, config_repr, "transforms"),
        test_values=tuple(
            get_as_array(ctx, config_repr, "testValues", validate_as_literal)
        ),
        description=optional_text(description),
    )
    return validate_element_spec(spec, ctx)


def load_config(
    source: typing.Union[typing.TextIO, typing.Mapping[str, typing.Any], str]
) -> ElementSpec:
    spec_repr: typing.Any
    if isinstance(source, collections.abc.Mapping):
        spec_repr = source
    else:
        try:
            spec_repr = yaml.load(source, Loader=yaml.SafeLoader)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"unable to parse configuration: {e}", ctx=JSONPointer()
            ) from e
    spec = build_element_spec_from_repr(JSONPointer(), spec_repr)
    logger.debug(
        "loaded configuration for package %s (type %s)", spec.package, spec.type_
    )
    return spec
