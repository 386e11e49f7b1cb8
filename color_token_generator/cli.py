import argparse
import logging
import os

from .color import normalize_hex
from .contrast import ComplianceMode, contrast_matrix, matrix_pass_counts
from .export import export_css, export_json, generate_readability_report
from .generator import DEFAULT_SATURATION, generate_tokens
from .palette import load_overrides, load_role_paths
from .palette.generator import HARMONY_HUE_SHIFTS


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate accessible semantic color tokens from a seed color or an image"
    )
    parser.add_argument(
        "seed",
        nargs="?",
        default=None,
        help="Seed (brand) color as hex, e.g. '#3366FF'",
    )
    parser.add_argument(
        "--from-image",
        metavar="IMAGE",
        help="Pick the seed color from an image instead",
    )
    parser.add_argument(
        "--saturation",
        type=float,
        default=DEFAULT_SATURATION,
        help=f"Neutral tint amount in percent, 0-30 (default: {DEFAULT_SATURATION})",
    )
    parser.add_argument(
        "--compliance",
        default="AA",
        type=str.upper,
        choices=[mode.value for mode in ComplianceMode],
        help="WCAG level the semantic roles must meet (default: AA)",
    )
    parser.add_argument(
        "--harmony",
        default="primary",
        choices=sorted(HARMONY_HUE_SHIFTS),
        help="Hue shift applied to the neutral scale (default: primary)",
    )
    parser.add_argument(
        "--prefix",
        default="",
        help="Root key for the token tree (default: color)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "css"],
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--override",
        action="append",
        default=[],
        metavar="KEY=REF",
        help="Override a role, e.g. surface.neutral.surfaceBase={seed.black}. Repeatable.",
    )
    parser.add_argument(
        "--overrides-file",
        metavar="JSON",
        help="JSON object of role key -> reference overrides",
    )
    parser.add_argument(
        "--roles-file",
        metavar="JSON",
        help="JSON object renaming role keys",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=".",
        help="Output directory (default: current directory)",
    )
    parser.add_argument(
        "--name",
        default="tokens",
        help="Base name of the output file (default: tokens)",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Also write a readability report",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log resolver fallbacks",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Validate arguments
    if args.from_image and args.seed:
        parser.error("Cannot use both seed and --from-image")
    if not args.from_image and not args.seed:
        parser.error("Either seed or --from-image is required")
    if args.seed and normalize_hex(args.seed) is None:
        parser.error(f"Invalid seed color: {args.seed!r}")

    overrides = {}
    role_paths = None
    try:
        if args.overrides_file:
            overrides.update(load_overrides(args.overrides_file))
        if args.roles_file:
            role_paths = load_role_paths(args.roles_file)
    except (OSError, ValueError) as e:
        parser.error(str(e))
    for item in args.override:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            parser.error(f"--override expects KEY=REF, got {item!r}")
        overrides[key.strip()] = value.strip()

    if args.from_image:
        seed = _seed_from_image(parser, args.from_image)
    else:
        seed = normalize_hex(args.seed)

    _run(args, seed, overrides, role_paths)


def _seed_from_image(parser, image_path):
    # Imported lazily, clustering pulls in scikit-learn
    from .palette.extract import extract_seed_from_image, find_average_color

    print(f"Analyzing: {image_path}")
    try:
        seed = extract_seed_from_image(image_path)
        average = find_average_color(image_path)
    except OSError as e:
        parser.error(f"Cannot read image {image_path}: {e}")
    print(f"Average color: {average.hex}")
    print(f"Seed color: {seed}")
    return seed


def _run(args, seed, overrides, role_paths):
    """Generate tokens for one seed and write the requested outputs."""
    generation = generate_tokens(
        seed,
        saturation=args.saturation,
        compliance=args.compliance,
        overrides=overrides,
        prefix=args.prefix,
        harmony=args.harmony,
        role_paths=role_paths,
    )

    os.makedirs(args.output, exist_ok=True)

    print_scales(generation)

    tokens_path = os.path.join(args.output, f"{args.name}.{args.format}")
    if args.format == "css":
        export_css(generation.tree, tokens_path)
    else:
        export_json(
            generation.tree,
            tokens_path,
            metadata={
                "seed": generation.primary_hex,
                "neutral": generation.neutral_hex,
                "saturation": args.saturation,
                "compliance": generation.compliance.value,
                "harmony": args.harmony,
            },
        )

    exported = [tokens_path]
    if args.report:
        report, issues = generate_readability_report(generation)
        print("\n" + report)
        report_path = os.path.join(args.output, f"{args.name}-readability.txt")
        with open(report_path, "w") as f:
            f.write(report)
        exported.append(report_path)

    print("\n" + "=" * 60)
    print("Exported:")
    for path in exported:
        print(f"  - {path}")
    print(f"\nTokens: {len(generation.tree.nodes)} ({generation.compliance.value})")
    print("=" * 60)


def print_scales(generation):
    """Print both scales and the neutral contrast matrix summary"""
    print("\n" + "=" * 60)
    print(f"SCALES FOR {generation.primary_hex} (neutral seed {generation.neutral_hex})")
    print("=" * 60)

    for name, scale in (
        ("NEUTRAL", generation.neutral_scale),
        ("PRIMARY", generation.primary_scale),
    ):
        print(f"\n{name}:")
        for step in scale:
            marker = "  <- seed" if step.is_seed else ""
            print(f"  {step.label:>4} {step.color.hex}{marker}")

    hexes, matrix = contrast_matrix(step.color.hex for step in generation.neutral_scale)
    strong, weak = matrix_pass_counts(matrix, generation.compliance)
    print(
        f"\nNeutral contrast matrix: {len(hexes)}x{len(hexes)}, "
        f"{strong} strong / {weak} weak pairs"
    )


if __name__ == "__main__":
    main()
