"""Print the current A&E waiting times.

Installed copies expose the ``aed-wait`` console script. From the repository
root, ``python -m scripts.aed_wait`` also works (``scripts`` is a namespace
package, so it only resolves with the root on ``sys.path``).
"""

from __future__ import annotations

from aedwait.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
