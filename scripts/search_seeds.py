"""
search_seeds.py
~~~~~~~~~~~~~~~
Finds seeds in Brogue CE seed catalogs that hold every requested object:

* each category option (`-a`, `-w`, `-S`, ...) takes terms such as a count,
  a max depth, an enchantment, a kind or runic name, `vault` or `good`/`bad`;
* general options bound the depth and seed ranges and the number of seeds
  reported;
* catalogs are read from the configured folder (or `-F`), UTF-16LE by
  default with a fallback to UTF-8.

Same behaviour as the `brogue-scanner` console script.
"""

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from brogue_scanner.cli import main


if __name__ == "__main__":
    sys.exit(main())
