"""Quickstart: the everyday path operations."""

from __future__ import annotations

import lexpath

if __name__ == "__main__":
    print(lexpath.normalize("/srv/app/../data/./reports/"))
    print(lexpath.join("reports", "2024", "..", "q4.csv"))
    print(lexpath.resolve("reports", "q4.csv"))
    print(lexpath.relative("/srv/app/static", "/srv/data/reports"))

    path = "/srv/data/archive.tar.gz"
    print(f"dirname={lexpath.dirname(path)!r} basename={lexpath.basename(path)!r} ext={lexpath.extname(path)!r}")

    parsed = lexpath.parse(path)
    print(parsed)
    print(lexpath.format(parsed))

    print("Done!")
