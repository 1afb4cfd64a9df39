"""
Gray Palette
Reduce an RGB image to at most 256 gray levels with a block DCT or
histogram-rank quantizer.
"""

import argparse
import logging
import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)

logger = logging.getLogger("gray_palette")


def parse_cli_args(argv=None) -> argparse.Namespace:
    from models.filter_params import DCT_BACKENDS, STRATEGIES
    from utils.test_images import DEMO_IMAGES

    parser = argparse.ArgumentParser(
        prog="gray-palette",
        description="Quantize an image to a gray palette of at most 256 levels.",
    )
    parser.add_argument("input", nargs="?", help="Input image path")
    parser.add_argument("-o", "--output", default="filtered.png",
                        help="Output image path (default: filtered.png)")
    parser.add_argument("--synthetic", choices=DEMO_IMAGES,
                        help="Use a generated image instead of an input file")
    parser.add_argument("--strategy", choices=STRATEGIES, default="histogram",
                        help="Filter to apply (default: histogram)")
    parser.add_argument("--backend", choices=DCT_BACKENDS, default="matrix",
                        help="DCT backend for the block strategy (default: matrix)")
    parser.add_argument("--keep", type=int, default=4,
                        help="Side of the retained low-frequency quadrant (default: 4)")
    parser.add_argument("--workers", type=int, default=1,
                        help="Worker threads for data-parallel passes (default: 1)")
    parser.add_argument("--benchmark", action="store_true",
                        help="Time every strategy instead of writing an output image")
    parser.add_argument("--repeat", type=int, default=3,
                        help="Benchmark runs per strategy (default: 3)")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)
    if args.input is None and args.synthetic is None:
        parser.error("an input image or --synthetic is required")
    return args


def _format_metric(value) -> str:
    if value is None:
        return "n/a"
    return f"{value:.4f}"


def run_cli(argv=None) -> int:
    """Run one filter (or the benchmark) and report results."""
    from engines.pipeline import benchmark, run_filter
    from models.filter_params import FilterParams
    from utils.image_io import load_image, save_image
    from utils.test_images import generate_demo_image

    args = parse_cli_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)-28s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S',
    )

    try:
        params = FilterParams(
            strategy=args.strategy,
            dct_backend=args.backend,
            keep=args.keep,
            workers=args.workers,
        )
        if args.synthetic:
            logger.info("Generating %s test image", args.synthetic)
            image = generate_demo_image(args.synthetic)
        else:
            logger.info("Loading: %s", args.input)
            image = load_image(args.input)
        logger.info("Image: %dx%d", image.width, image.height)

        if args.benchmark:
            for row in benchmark(image, params, repeat=args.repeat):
                print(f"{row['strategy']:<10} best {row['best_ms']:9.2f} ms   "
                      f"mean {row['mean_ms']:9.2f} ms")
            return 0

        result = run_filter(image, params)
        save_image(result.filtered_image, args.output)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    print("\n=== Results ===")
    print(f"Strategy:      {result.strategy}")
    print(f"Distinct keys: {result.distinct_keys}")
    print(f"Gray levels:   {result.output_levels}")
    print(f"PSNR (Y):      {result.psnr_y:.2f} dB")
    print(f"SSIM (Y):      {_format_metric(result.ssim_y)}")
    print(f"Time:          {result.filter_time_ms:.2f} ms")
    print(f"\nSaved: {args.output}")
    return 0


def main():
    sys.exit(run_cli())


if __name__ == '__main__':
    main()
