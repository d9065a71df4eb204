"""
Constant C++ prelude placed at the top of every generated file.

The prelude is the whole target-language contract of the translator: the
headers a translated program may rely on, the macro aliases that give the
surface keywords their meaning (``any``, ``pub``, ``null``, ``match`` ...)
and a tiny runtime shim.  It is rendered from one Jinja2 template and the
constant tables below, so it is identical for every translation.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from jinja2 import Environment, StrictUndefined


PRELUDE_INCLUDES: Tuple[str, ...] = (
    "fstream",
    "string",
    "functional",
    "memory",
    "cmath",
    "ctime",
    "stdexcept",
    "cstdio",
)

KEYWORD_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("any", "auto"),
    ("pub", "public"),
    ("priv", "private"),
    ("prot", "protected"),
    ("println", "print"),
    ("wfile", "ofstream"),
    ("rfile", "ifstream"),
    ("null", "nullptr"),
    ("mut", "const"),
    ("match(val)", "switch(val)"),
    ("case(val)", "case val:"),
)

RUNTIME_SHIM: Tuple[str, ...] = (
    "void print(auto x) {cout << x << '\\n';}",
    "int $(const char* x) {return system(x);}",
)

# <iostream> is included ahead of the alias block; the remaining headers follow it.
PRELUDE_TEMPLATE = """\
#include <iostream>
{% for name, value in aliases -%}
#define {{ name }} {{ value }}
{% endfor -%}
{% for header in includes -%}
#include <{{ header }}>
{% endfor %}
using namespace std;

{% for line in shim -%}
{{ line }}
{% endfor %}
"""

_environment = Environment(
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    autoescape=False,
)


@lru_cache(maxsize=1)
def render_prelude() -> str:
    """
    Render the prelude text.

    Returns:
        The prelude as a single string ending in a blank line, ready to be
        followed by the translated body.
    """
    template = _environment.from_string(PRELUDE_TEMPLATE)
    return template.render(
        includes=PRELUDE_INCLUDES,
        aliases=KEYWORD_ALIASES,
        shim=RUNTIME_SHIM,
    )


__all__ = [
    "KEYWORD_ALIASES",
    "PRELUDE_INCLUDES",
    "PRELUDE_TEMPLATE",
    "RUNTIME_SHIM",
    "render_prelude",
]
