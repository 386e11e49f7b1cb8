#!/usr/bin/env python3
"""
Generate token files for every harmony mode of one seed color.
Consolidates them into out/harmony/ folder.
"""

import argparse
import subprocess
from pathlib import Path

from color_token_generator.palette.generator import HARMONY_HUE_SHIFTS


def main():
    parser = argparse.ArgumentParser(
        description="Generate tokens for every harmony mode of a seed color"
    )
    parser.add_argument("seed", nargs="?", default="#3366FF", help="Seed color")
    parser.add_argument(
        "--saturation",
        type=float,
        default=14,
        help="Neutral tint amount in percent for all modes",
    )
    parser.add_argument(
        "--compliance",
        default="AA",
        help="WCAG level for all modes",
    )
    args = parser.parse_args()

    root = Path(__file__).parent
    out_dir = root / "out" / "harmony"
    out_dir.mkdir(parents=True, exist_ok=True)

    print(f"Generating tokens for primary color: {args.seed}")
    print(f"Using saturation: {args.saturation}%\n")

    failed = []
    for mode in sorted(HARMONY_HUE_SHIFTS):
        print(f"{'=' * 60}")
        print(f"Generating: {mode}")
        print(f"{'=' * 60}")

        cmd = [
            "color-token-generator",
            args.seed,
            "--harmony",
            mode,
            "--saturation",
            str(args.saturation),
            "--compliance",
            args.compliance,
            "-o",
            str(out_dir),
            "--name",
            f"tokens-{mode}",
        ]
        result = subprocess.run(cmd, cwd=root)

        if result.returncode != 0:
            print(f"Error generating {mode}")
            failed.append(mode)
            continue
        print()

    print(f"{'=' * 60}")
    print("Done! All harmony tokens in:")
    print(f"  {out_dir}")
    if failed:
        print(f"Failed: {', '.join(failed)}")
    print(f"{'=' * 60}")


if __name__ == "__main__":
    main()
