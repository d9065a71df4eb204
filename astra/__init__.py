"""
Astra programming language package.

Astra is a small, line-oriented surface language that is translated into
C++ and handed to the system compiler.  Every line of an ``.astra`` file is
rewritten on its own, which keeps the translation mechanical and easy to
predict.

The code is organised into several modules:

* ``lang`` – keywords, sentinels and the other fixed tokens of the surface
  language.
* ``transpiler`` – the single pass translation engine.  It walks the input
  line by line and tracks nesting depth, raw C++ regions and the symbols it
  has seen.
* ``prelude`` – the constant block of C++ placed at the top of every
  generated file.
* ``cli.toolchain`` – helpers that locate the C++ compiler, build the generated
  file and run the resulting program.
* ``cli`` – the ``astra`` command line interface tying everything together.
"""

import re
from pathlib import Path
from importlib import metadata as _metadata


def _local_version() -> str | None:
  root = Path(__file__).resolve().parents[1]
  pyproject = root / "pyproject.toml"
  if not pyproject.exists():
    return None
  try:
    text = pyproject.read_text(encoding="utf-8")
  except OSError:  # pragma: no cover - IO errors should not break imports
    return None
  match = re.search(r"^version\s*=\s*\"([^\"]+)\"", text, flags=re.MULTILINE)
  if match:
    return match.group(1)
  return None


try:  # pragma: no cover - metadata fallback for editable installs
  __version__ = _metadata.version("astra-lang")
except _metadata.PackageNotFoundError:  # pragma: no cover - source tree
  __version__ = _local_version() or "1.0.0"

__all__ = ["__version__"]
