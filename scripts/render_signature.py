#!/usr/bin/env python3
"""
Render Signature Pad JSON or a typed name into image files.
"""

import argparse
import sys
from pathlib import Path

from tqdm import tqdm

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from signature_to_image.utils.config import Config, RenderConfig
from signature_to_image.utils.logging import setup_logging
from signature_to_image.rendering.renderer import SignatureRenderer
from signature_to_image.rendering.output import save_image


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Render signatures to images")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--json",
        type=str,
        help="Path to a Signature Pad JSON file"
    )
    source.add_argument(
        "--name",
        type=str,
        help="Name to render with the configured signature font"
    )
    source.add_argument(
        "--input_dir",
        type=str,
        help="Directory of Signature Pad JSON files to render in batch"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="configs/default.yml",
        help="Path to configuration file"
    )
    parser.add_argument(
        "--output",
        type=str,
        default="signature.png",
        help="Output image path for --json/--name"
    )
    parser.add_argument(
        "--output_dir",
        type=str,
        help="Override output directory for --input_dir"
    )
    parser.add_argument(
        "--width",
        type=int,
        help="Target width to scale stroke signatures into (--json/--input_dir only)"
    )
    parser.add_argument(
        "--height",
        type=int,
        help="Target height to scale stroke signatures into (--json/--input_dir only)"
    )
    parser.add_argument(
        "--font_path",
        type=str,
        help="Font file to use instead of the installed font"
    )
    parser.add_argument(
        "--no_log_file",
        action="store_true",
        help="Only log to the console"
    )
    args = parser.parse_args(argv)
    if args.name is not None and (args.width is not None or args.height is not None):
        parser.error("--width/--height only apply to stroke input (--json or --input_dir)")
    return args


def target_size_from_args(args, render_config):
    if args.width is None and args.height is None:
        return None
    return (
        args.width if args.width is not None else render_config.canvas_width,
        args.height if args.height is not None else render_config.canvas_height,
    )


def render_directory(renderer, input_dir, output_dir, target_size=None):
    """Render every *.json file in input_dir to a PNG in output_dir."""
    json_files = sorted(Path(input_dir).glob("*.json"))
    if not json_files:
        raise FileNotFoundError(f"No JSON files found in {input_dir}")

    written = []
    for json_path in tqdm(json_files, desc="Rendering signatures"):
        image = renderer.render_from_segments(json_path.read_text(encoding="utf-8"), target_size)
        written.append(save_image(image, Path(output_dir) / f"{json_path.stem}.png"))
    return written


def main(argv=None):
    args = parse_args(argv)

    # Load configuration
    config = Config(args.config)
    render_config = RenderConfig.from_config(config)

    # Setup logging
    logger = setup_logging(
        log_dir=config.get('output.logs_dir', 'logs'),
        log_level=config.get('logging.level', 'INFO'),
        log_to_file=not args.no_log_file
    )

    renderer = SignatureRenderer(render_config)
    target_size = target_size_from_args(args, render_config)
    logger.info(f"Canvas: {render_config.canvas_width}x{render_config.canvas_height}, target: {target_size or 'canvas'}")

    try:
        if args.input_dir:
            output_dir = args.output_dir or config.get('output.images_dir', 'outputs')
            written = render_directory(renderer, args.input_dir, output_dir, target_size)
            logger.info(f"Rendered {len(written)} signatures into {output_dir}")
        elif args.json:
            image = renderer.render_from_segments(Path(args.json).read_text(encoding="utf-8"), target_size)
            logger.info(f"Saved signature to {save_image(image, args.output)}")
        else:
            image = renderer.render_from_text(args.name, font_path=args.font_path)
            logger.info(f"Saved signature to {save_image(image, args.output)}")
    except Exception as e:
        logger.error(f"Rendering failed: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
