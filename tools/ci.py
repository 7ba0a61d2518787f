#!/usr/bin/env python3
# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the oasmodel CI checks locally: format, lint, type check, tests, docs, and build."""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=oasmodel", "--cov-report=term-missing"]),
    ("Docs", ["uv", "run", "sphinx-build", "-q", "-W", "docs/sphinx", "build/docs"]),
    ("Build", ["uv", "build"]),
]


def main(argv: list[str]) -> int:
    """Run the CI steps named in *argv* (all of them when empty) and report results."""
    selected = [step for step in STEPS if not argv or step[0].lower() in {arg.lower() for arg in argv}]
    if not selected:
        print(chalk.red(f"No CI step matches {argv}; known steps: {[name for name, _ in STEPS]}"))
        return 2

    results: list[tuple[str, bool, float]] = []
    for name, cmd in selected:
        _banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_REPO_ROOT)
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _banner("Summary")
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_REPO_ROOT = pathlib.Path(__file__).parent.parent


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(f"  {title}"))
    print(sep)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
