"""Configuration: pinning the working directory with PathConfig and PathContext.

Demonstrates config-as-code, from_dict() (e.g. loaded from TOML or JSON),
and a custom working-directory supplier.
"""

from __future__ import annotations

from lexpath import PathConfig, PathContext

if __name__ == "__main__":
    # --- Option 1: Config-as-code ---
    ctx = PathContext(PathConfig(cwd="/srv/app"))
    print(ctx)
    print("resolve:", ctx.resolve("static", "../templates/base.html"))
    print("relative:", ctx.relative("static", "/srv/data"))

    # --- Option 2: from_dict() ---
    raw = {"cwd": "/home/deploy"}
    ctx = PathContext(PathConfig.from_dict(raw))
    print("\nfrom_dict() resolve:", ctx.resolve("releases/current"))

    # --- Option 3: explicit supplier ---
    ctx = PathContext(cwd=lambda: "/tmp/build")
    print("\nsupplier resolve:", ctx.resolve("out"))

    # --- Default: the process working directory ---
    print("\nprocess resolve:", PathContext().resolve("."))

    # --- Invalid config fails fast ---
    try:
        PathContext(PathConfig(cwd="relative/dir"))
    except ValueError as exc:
        print(f"\nValueError: {exc}")

    print("\nDone!")
