# apps/cli/run.py
"""
CLI entry point for running codebreaker solver experiments.

This script:
  1) Builds the case list (every possible secret, or a seeded sample).
  2) Instantiates the requested solver.
  3) Plays a batch of games with a live progress indicator and writes:
       - CSV:  per-case results + guess/feedback history columns
       - JSON: manifest with config, summary, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from codebreaker.engine import all_codes, format_code
from codebreaker.harness import MAX_TURNS, run_case, summarize
from codebreaker.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from codebreaker.solvers import OPENING_GUESS, create_solver, get_solver_ids


def build_parser() -> argparse.ArgumentParser:
    # Build help text showing currently registered solver IDs
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="codebreaker - run solver experiments")
    ap.add_argument("--solver", default="random_consistent",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-turns", type=int, default=MAX_TURNS, help="guess budget per game")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv=None) -> int:
    """
    Parse CLI args, run the batch with progress, and write outputs.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Instantiate solver by id
    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2

    # 2) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    cases = all_codes()
    if args.sample and args.sample < len(cases):
        rng.shuffle(cases)
        cases = cases[: args.sample]
    total = len(cases)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    # 4) Run batch with live progress
    for idx, secret in enumerate(iterator, 1):
        # Same per-case seed as run_batch (seed + index)
        per_seed = args.seed + idx
        r = run_case(solver, secret, max_turns=args.max_turns, seed=per_seed)
        r["solver_id"] = solver.id  # stamp id for downstream tools
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    summary = summarize(results)
    print(
        f"solver={solver.id} | games={summary['games']} | "
        f"success={summary['success_rate']:.1%} | mean={summary['mean_guesses']:.3f} | "
        f"max={summary['max_guesses']}"
    )
    failed = [r["secret"] for r in results if not r["success"]]
    if failed:
        print(f"Unsolved within {args.max_turns}: {', '.join(failed[:10])}")

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "summary": summary,
        "num_cases": len(results),
        "solver_id": solver.id,
        "opening_guess": format_code(OPENING_GUESS),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
